# emoji_finder/core/protocols.py
"""
Protocol interfaces for the pluggable pieces of the search core.

The search engine and the finder facade depend on these Protocols rather than on
concrete implementations, so alternate orderings can be injected in tests or at runtime.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RankingFunction(Protocol):
    """
    Comparator over glyph symbols.

    Returns a negative number when `a` ranks before `b`, zero when they rank equal
    and a positive number when `a` ranks after `b`. Implementations must be a strict
    weak ordering and give the same answer for the same pair for the process lifetime.
    """

    def __call__(self, a: str, b: str) -> int:
        ...
