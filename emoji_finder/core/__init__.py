"""
emoji_finder.core

The search core behind Emoji Finder.
Contains:
 - the catalog loader (load, load_path, GlyphRecord)
 - the keyword index (build, KeywordIndex)
 - pluggable ranking functions (PopularityRanking, get_ranking, ...)
 - the search engine (search)
 - the grid projector (project, grid_rows)
"""

from .errors import ConfigurationError, FinderError, ParseError
from .catalog import GlyphRecord, load, load_path
from .keyword_index import KeywordIndex, build
from .ranking import (
    PopularityRanking,
    codepoint_ranking,
    get_ranking,
    reverse_lexical_ranking,
)
from .search import search
from .grid import grid_rows, project, validate_columns

__all__ = [
    "ConfigurationError",
    "FinderError",
    "ParseError",
    "GlyphRecord",
    "load",
    "load_path",
    "KeywordIndex",
    "build",
    "PopularityRanking",
    "codepoint_ranking",
    "get_ranking",
    "reverse_lexical_ranking",
    "search",
    "grid_rows",
    "project",
    "validate_columns",
]
