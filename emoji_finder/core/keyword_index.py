# emoji_finder/core/keyword_index.py
# Keyword index: token (glyph name or keyword) -> records described by that token.
# Built once from a Catalog, read-only afterwards.

from __future__ import annotations

from collections.abc import Mapping
from typing import Dict, Iterator, List, Tuple

from .catalog import Catalog, GlyphRecord

Token = str


class KeywordIndex(Mapping):
    """
    Immutable token -> tuple[GlyphRecord] mapping.
    Token order is first-seen order during build; records under a token keep catalog order.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Dict[Token, Tuple[GlyphRecord, ...]]) -> None:
        self._entries = dict(entries)

    def __getitem__(self, token: Token) -> Tuple[GlyphRecord, ...]:
        return self._entries[token]

    def __iter__(self) -> Iterator[Token]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"KeywordIndex(tokens={len(self._entries)})"

    # convenience ---------------------------------------------------
    def tokens(self) -> List[Token]:
        return list(self._entries)

    def symbols(self) -> List[str]:
        """Distinct symbols, in order of first appearance in the index."""
        seen = {}
        for records in self._entries.values():
            for rec in records:
                seen.setdefault(rec.symbol, None)
        return list(seen)


def build(catalog: Catalog) -> KeywordIndex:
    """Single pass over the catalog: index each record under its name and every keyword."""
    buckets: Dict[Token, List[GlyphRecord]] = {}
    for record in catalog.values():
        for token in (record.name, *record.keywords):
            bucket = buckets.setdefault(token, [])
            # a keyword repeating the name (or itself) must not index the record twice
            if bucket and bucket[-1] is record:
                continue
            bucket.append(record)
    return KeywordIndex({tok: tuple(recs) for tok, recs in buckets.items()})
