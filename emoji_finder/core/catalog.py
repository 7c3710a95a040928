# emoji_finder/core/catalog.py
"""
Catalog loader - turns the raw glyph dataset into name -> GlyphRecord.

Dataset format (JSON object, document order is kept):
    {
      "grinning_face": {"keywords": ["happy", "smile"], "symbol": "🙂"},
      ...
    }

Rules:
 - every record needs a non-empty string `symbol` (`char`, the emojilib field name,
   is accepted when `symbol` is missing)
 - `keywords` is optional but must be a list of strings when present
 - any other field is ignored
 - a name may appear only once
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, List, Mapping, Tuple, Union

from typing_extensions import TypedDict

from .errors import ParseError

logger = logging.getLogger(__name__)


class RawRecord(TypedDict, total=False):
    """Shape of a single record in the JSON dataset."""
    keywords: List[str]
    symbol: str
    char: str


@dataclass(frozen=True)
class GlyphRecord:
    name: str
    keywords: Tuple[str, ...]
    symbol: str


Catalog = Mapping[str, GlyphRecord]


def _reject_duplicates(pairs: List[Tuple[str, Any]]) -> dict:
    out: dict = {}
    for key, value in pairs:
        if key in out:
            raise ParseError(f"duplicate key {key!r} in dataset")
        out[key] = value
    return out


def _parse_record(name: str, raw: Any) -> GlyphRecord:
    if not isinstance(raw, dict):
        raise ParseError(f"record {name!r} must be an object, got {type(raw).__name__}")

    symbol = raw.get("symbol", raw.get("char"))
    if not isinstance(symbol, str) or not symbol:
        raise ParseError(f"record {name!r} has no symbol")

    keywords = raw.get("keywords", [])
    if not isinstance(keywords, list) or not all(isinstance(k, str) for k in keywords):
        raise ParseError(f"record {name!r}: keywords must be a list of strings")

    return GlyphRecord(name=name, keywords=tuple(keywords), symbol=symbol)


def load(raw: Union[bytes, str]) -> Catalog:
    """
    Parse a dataset buffer into a read-only Catalog.
    Raises ParseError on malformed JSON, a non-object top level, duplicate names
    or a record without a symbol.
    """
    try:
        data = json.loads(raw, object_pairs_hook=_reject_duplicates)
    except ParseError:
        raise
    except (ValueError, RecursionError) as e:  # JSONDecodeError, UnicodeDecodeError, or nesting too deep
        raise ParseError(f"dataset is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ParseError("dataset must be a JSON object mapping names to records")

    catalog = {name: _parse_record(name, rec) for name, rec in data.items()}
    logger.info("loaded %d glyph records", len(catalog))
    return MappingProxyType(catalog)


def load_path(path: Union[str, Path]) -> Catalog:
    """Read a dataset file and parse it. An unreadable file is a ParseError too."""
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise ParseError(f"cannot read dataset {path}: {e}") from e
    logger.debug("read dataset from %s (%d bytes)", path, len(raw))
    return load(raw)
