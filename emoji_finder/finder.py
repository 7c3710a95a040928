# finder.py
"""
EmojiFinder - application facade and process context.

Purpose:
 - Own the Catalog and the KeywordIndex (built once, read-only afterwards)
 - Own the ranking used for every query
 - Simple public API for the TUI/CLI/tests:
     search(query), project(result, columns), lookup(query, columns), record_for(symbol)
 - Memoize query results (the index never changes, so a query always has the same answer)
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Tuple, Union
import logging

from emoji_finder.core.catalog import Catalog, GlyphRecord, load, load_path
from emoji_finder.core.grid import GridAssignment, project
from emoji_finder.core.keyword_index import KeywordIndex, build
from emoji_finder.core.protocols import RankingFunction
from emoji_finder.core.ranking import get_ranking
from emoji_finder.core.search import SearchResult, search
from emoji_finder.utils.cache_utils import simple_lru
from emoji_finder.utils.logger_utils import time_block

logger = logging.getLogger(__name__)

BUNDLED_DATASET = Path(__file__).parent / "data" / "emojis.json"


class EmojiFinder:
    """Process context for the search core.
    Public API:
      - search(query: str) -> list[str]
      - project(result, columns: int) -> {(row, col): symbol}
      - lookup(query: str, columns: int) -> (result, grid)
      - record_for(symbol: str) -> GlyphRecord | None
    """

    def __init__(self, catalog: Catalog, ranking: Optional[RankingFunction] = None, cache_size: int = 256):
        self._catalog = catalog
        self._ranking = ranking if ranking is not None else get_ranking()
        with time_block("index build"):
            self._index = build(catalog)
        self._by_symbol: Dict[str, GlyphRecord] = {}
        for rec in catalog.values():
            self._by_symbol.setdefault(rec.symbol, rec)
        self._cached_search = simple_lru(cache_size)(self._search)
        logger.info("index ready: %d records, %d tokens", len(catalog), len(self._index))

    # constructors ---------------------------------------------------------
    @classmethod
    def from_bytes(cls, raw: Union[bytes, str], **kw) -> "EmojiFinder":
        return cls(load(raw), **kw)

    @classmethod
    def from_path(cls, path: Union[str, Path], **kw) -> "EmojiFinder":
        return cls(load_path(path), **kw)

    @classmethod
    def bundled(cls, **kw) -> "EmojiFinder":
        """Finder over the dataset shipped with the package."""
        return cls.from_path(BUNDLED_DATASET, **kw)

    # read-only state ------------------------------------------------------
    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def index(self) -> KeywordIndex:
        return self._index

    @property
    def ranking(self) -> RankingFunction:
        # fixed for the finder's lifetime, cached results depend on it
        return self._ranking

    def __len__(self) -> int:
        return len(self._catalog)

    # queries --------------------------------------------------------------
    def _search(self, query: str) -> Tuple[str, ...]:
        return tuple(search(self._index, query, self._ranking))

    def search(self, query: str) -> SearchResult:
        # fresh list every call so callers can't mutate the cached tuple
        return list(self._cached_search(query))

    def project(self, result: SearchResult, columns: int) -> GridAssignment:
        return project(result, columns)

    def lookup(self, query: str, columns: int) -> Tuple[SearchResult, GridAssignment]:
        result = self.search(query)
        return result, project(result, columns)

    def record_for(self, symbol: str) -> Optional[GlyphRecord]:
        return self._by_symbol.get(symbol)
