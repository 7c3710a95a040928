# emoji_finder/core/ranking.py
"""
Ranking functions - comparators that decide the display order of search results.

All rankers follow the RankingFunction protocol: rank(a, b) -> int (<0, 0, >0).
Available:
 - PopularityRanking: curated most-used table, unlisted symbols rank last (and tie)
 - codepoint_ranking: ascending code point sequence
 - reverse_lexical_ranking: descending string order
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Sequence

from .errors import ConfigurationError
from .protocols import RankingFunction

# Most used emoji, best first.
POPULARITY_TABLE: Sequence[str] = (
    "😂", "❤️", "🤣", "👍", "😭", "🙏", "😘", "🥰", "😍", "😊",
    "🎉", "😁", "💕", "🥺", "😅", "🔥", "☺️", "🤦", "♥️", "🤷",
    "🙄", "😆", "🤗", "😉", "🎂", "🤔", "👏", "🙂", "😳", "🥳",
    "😎", "👌", "💜", "😔", "💪", "✨", "💖", "👀", "😋", "😏",
    "😢", "👉", "💗", "😩", "💯", "🌹", "💞", "🎈", "💙", "😃",
    "😡", "💐", "😜", "🙈", "🤞", "😄", "🤤", "🙌", "🤪", "❣️",
    "😀", "💋", "💀", "👇", "💔", "😌", "💓", "🤩", "🙃", "😬",
    "😱", "😴", "🤭", "😐", "🌞", "😒", "😇", "🌸", "😈", "🎶",
    "✌️", "🎊", "🥵", "😞", "💚", "☀️", "🖤", "💰", "😚", "👑",
    "🎁", "💥", "🙋", "☹️", "😑", "🥴", "👈", "💩", "✅", "👋",
)


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


class PopularityRanking:
    """
    Rank symbols by their position in a popularity table (earlier is better).
    Symbols missing from the table rank equal to each other and after every listed one.
    """

    name = "popularity"

    def __init__(self, table: Iterable[str] = POPULARITY_TABLE) -> None:
        self._pos: Dict[str, int] = {}
        for i, sym in enumerate(table):
            self._pos.setdefault(sym, i)
        self._unranked = len(self._pos)

    def position(self, symbol: str) -> int:
        return self._pos.get(symbol, self._unranked)

    def __call__(self, a: str, b: str) -> int:
        return _cmp(self.position(a), self.position(b))

    def __repr__(self) -> str:
        return f"PopularityRanking(size={len(self._pos)})"


def codepoint_ranking(a: str, b: str) -> int:
    return _cmp([ord(c) for c in a], [ord(c) for c in b])


def reverse_lexical_ranking(a: str, b: str) -> int:
    # descending string order, the order the first version of the tool displayed
    return _cmp(b, a)


RANKINGS: Dict[str, Callable[[], RankingFunction]] = {
    "popularity": PopularityRanking,
    "codepoint": lambda: codepoint_ranking,
    "reverse": lambda: reverse_lexical_ranking,
}

DEFAULT_RANKING = "popularity"


def get_ranking(name: str = DEFAULT_RANKING) -> RankingFunction:
    """Resolve a ranking by config name. Unknown names raise ConfigurationError."""
    try:
        factory = RANKINGS[name]
    except KeyError:
        known = ", ".join(sorted(RANKINGS))
        raise ConfigurationError(f"unknown ranking {name!r} (choose from: {known})") from None
    return factory()
