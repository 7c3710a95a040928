# tests/test_search.py
# search(): token filter -> flatten -> stable rank -> dedupe
import pytest

from emoji_finder.core.catalog import load
from emoji_finder.core.keyword_index import build
from emoji_finder.core.ranking import PopularityRanking, codepoint_ranking
from emoji_finder.core.search import dedupe, matching_symbols, search

from conftest import SMILE, SOB, as_bytes, tie_ranking

QUERIES = ["", "a", "pet", "magic", "an", "o", "zzz", "PET", "cat", "🐱"]


# scenario -------------------------------------------------------------------
def test_exact_keyword(scenario_index):
    assert search(scenario_index, "happy") == [SMILE]


def test_substring_over_two_tokens(scenario_index):
    out = search(scenario_index, "a")
    assert sorted(out) == sorted([SMILE, SOB])
    assert len(out) == 2


def test_substring_follows_ranking(scenario_index):
    sob_first = PopularityRanking([SOB, SMILE])
    smile_first = PopularityRanking([SMILE, SOB])
    assert search(scenario_index, "a", sob_first) == [SOB, SMILE]
    assert search(scenario_index, "a", smile_first) == [SMILE, SOB]


def test_no_match_is_empty(scenario_index):
    assert search(scenario_index, "rocket") == []


def test_case_sensitive(scenario_index):
    assert search(scenario_index, "HAPPY") == []


# properties ---------------------------------------------------------------------
def test_index_completeness(animal_catalog, animal_index):
    for rec in animal_catalog.values():
        for token in (rec.name, *rec.keywords):
            assert rec.symbol in search(animal_index, token)


@pytest.mark.parametrize("query", QUERIES)
def test_substring_containment(animal_catalog, animal_index, query):
    reachable = {
        rec.symbol
        for rec in animal_catalog.values()
        if any(query in tok for tok in (rec.name, *rec.keywords))
    }
    assert set(search(animal_index, query)) == reachable


@pytest.mark.parametrize("query", QUERIES)
def test_no_duplicates(animal_index, query):
    out = search(animal_index, query)
    assert len(out) == len(set(out))


def test_empty_query_returns_every_symbol_once(animal_catalog, animal_index):
    out = search(animal_index, "")
    assert sorted(out) == sorted({r.symbol for r in animal_catalog.values()})
    assert len(out) == 4


def test_ties_keep_first_flatten_order(animal_index):
    # all equal -> order of first appearance while flattening
    assert search(animal_index, "", tie_ranking) == ["🐱", "🐶", "🦄", "✨"]
    # "magic" token: unicorn then sparkles; "animal" isn't matched
    assert search(animal_index, "magic", tie_ranking) == ["🦄", "✨"]


def test_partial_ties_are_stable(animal_index):
    # only the dog is ranked, everything else ties behind it in flatten order
    rank = PopularityRanking(["🐶"])
    assert search(animal_index, "", rank) == ["🐶", "🐱", "🦄", "✨"]


def test_glyph_takes_best_rank_across_tokens():
    cat = load(as_bytes({
        "b_first": {"keywords": ["x"], "symbol": "b"},
        "a_second": {"keywords": ["x"], "symbol": "a"},
    }))
    assert search(build(cat), "x", codepoint_ranking) == ["a", "b"]


def test_flatten_keeps_duplicates(animal_index):
    flat = matching_symbols(animal_index, "pet")
    # cat, dog, kitten(=cat) under "pet"
    assert flat == ["🐱", "🐶", "🐱"]
    assert dedupe(flat) == ["🐱", "🐶"]


def test_search_is_pure(animal_index):
    first = search(animal_index, "a")
    first.append("junk")
    assert search(animal_index, "a") != first
    assert search(animal_index, "a") == search(animal_index, "a")


@pytest.mark.parametrize("query", ["\x00", "   ", "🐱🐶", "a" * 500, "[*]", "\\"])
def test_any_string_is_accepted(animal_index, query):
    assert isinstance(search(animal_index, query), list)
