# tests/conftest.py
# shared fixtures: a tiny two-glyph catalog and a slightly larger one with shared keywords

import json

import pytest

from emoji_finder.core.catalog import load
from emoji_finder.core.keyword_index import build

SMILE = "🙂"
SOB = "😭"

SCENARIO = {
    "grinning_face": {"keywords": ["happy", "smile"], "symbol": SMILE},
    "loudly_crying_face": {"keywords": ["sad", "cry"], "symbol": SOB},
}

ANIMALS = {
    "cat": {"keywords": ["animal", "pet", "meow"], "symbol": "🐱"},
    "dog": {"keywords": ["animal", "pet", "woof"], "symbol": "🐶"},
    "unicorn": {"keywords": ["animal", "magic"], "symbol": "🦄"},
    "sparkles": {"keywords": ["magic", "shine"], "symbol": "✨"},
    # same glyph as `cat` under another name
    "kitten": {"keywords": ["pet", "cute"], "symbol": "🐱"},
}


def as_bytes(data) -> bytes:
    return json.dumps(data, ensure_ascii=False).encode("utf-8")


@pytest.fixture
def scenario_bytes():
    return as_bytes(SCENARIO)


@pytest.fixture
def scenario_catalog(scenario_bytes):
    return load(scenario_bytes)


@pytest.fixture
def scenario_index(scenario_catalog):
    return build(scenario_catalog)


@pytest.fixture
def animal_catalog():
    return load(as_bytes(ANIMALS))


@pytest.fixture
def animal_index(animal_catalog):
    return build(animal_catalog)


def tie_ranking(a, b):
    """Every symbol ranks equal, so result order is pure flatten order."""
    return 0
