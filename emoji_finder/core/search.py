# emoji_finder/core/search.py
"""
Search engine - resolves a free-text query into a ranked, deduplicated symbol list.

Steps:
 1. token filter: keep every index token that contains the query (case-sensitive,
    no normalization; "" matches everything)
 2. flatten: symbols of the matching tokens, index order then per-token order
    (a glyph shows up once per token it matched)
 3. rank: stable sort with the ranking comparator
 4. dedupe: first occurrence of each symbol wins, so a glyph sits at its best rank

Ranking ties keep flatten order, i.e. dataset order of the first token that matched.
Never raises for any query string; an empty list is a valid answer.
"""

from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import List, Optional

from .keyword_index import KeywordIndex
from .protocols import RankingFunction
from .ranking import get_ranking

logger = logging.getLogger(__name__)

SearchResult = List[str]

# stateless comparator used when the caller does not inject one
DEFAULT_RANKING: RankingFunction = get_ranking()


def matching_symbols(index: KeywordIndex, query: str) -> List[str]:
    """Steps 1+2: flattened symbols of every token containing `query` (duplicates kept)."""
    return [
        rec.symbol
        for token, records in index.items()
        if query in token
        for rec in records
    ]


def dedupe(symbols: List[str]) -> SearchResult:
    seen = set()
    out: SearchResult = []
    for sym in symbols:
        if sym in seen:
            continue
        seen.add(sym)
        out.append(sym)
    return out


def search(index: KeywordIndex, query: str, ranking: Optional[RankingFunction] = None) -> SearchResult:
    if ranking is None:
        ranking = DEFAULT_RANKING
    working = matching_symbols(index, query)
    # list.sort is stable, ties keep flatten order
    working.sort(key=cmp_to_key(ranking))
    result = dedupe(working)
    logger.debug("query %r: %d matches, %d distinct", query, len(working), len(result))
    return result
