# tests/test_catalog.py
import pytest

from emoji_finder.core.catalog import GlyphRecord, load, load_path
from emoji_finder.core.errors import ParseError
from emoji_finder.finder import BUNDLED_DATASET

from conftest import SCENARIO, SMILE, as_bytes


def test_load_scenario(scenario_catalog):
    assert list(scenario_catalog) == ["grinning_face", "loudly_crying_face"]
    rec = scenario_catalog["grinning_face"]
    assert rec == GlyphRecord(name="grinning_face", keywords=("happy", "smile"), symbol=SMILE)


def test_names_match_keys(scenario_catalog):
    for name, rec in scenario_catalog.items():
        assert rec.name == name


def test_records_are_immutable(scenario_catalog):
    rec = scenario_catalog["grinning_face"]
    with pytest.raises(AttributeError):
        rec.symbol = "x"
    with pytest.raises(TypeError):
        scenario_catalog["new"] = rec


def test_accepts_str_input():
    cat = load('{"fire": {"keywords": ["hot"], "symbol": "🔥"}}')
    assert cat["fire"].symbol == "🔥"


def test_extra_fields_ignored_and_char_alias():
    cat = load(as_bytes({
        "fire": {"keywords": ["hot"], "char": "🔥", "category": "nature", "fitzpatrick_scale": False},
    }))
    assert cat["fire"].symbol == "🔥"
    assert cat["fire"].keywords == ("hot",)


def test_missing_keywords_defaults_to_empty():
    cat = load(as_bytes({"fire": {"symbol": "🔥"}}))
    assert cat["fire"].keywords == ()


@pytest.mark.parametrize("raw", [
    b"not json",
    b"{\"unterminated\": ",
    b"[1, 2, 3]",
    b"\xff\xfe\x00garbage",
])
def test_malformed_input_raises(raw):
    with pytest.raises(ParseError):
        load(raw)


@pytest.mark.parametrize("record", [
    {"keywords": ["hot"]},
    {"keywords": ["hot"], "symbol": ""},
    {"keywords": ["hot"], "symbol": 42},
    {"keywords": "hot", "symbol": "🔥"},
    {"keywords": ["hot", 3], "symbol": "🔥"},
    "🔥",
])
def test_bad_record_raises(record):
    with pytest.raises(ParseError) as exc:
        load(as_bytes({"fire": record}))
    assert "fire" in str(exc.value)


def test_duplicate_name_rejected():
    raw = b'{"a": {"symbol": "x"}, "a": {"symbol": "y"}}'
    with pytest.raises(ParseError, match="duplicate"):
        load(raw)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        load(b"nope")


def test_load_path(tmp_path):
    p = tmp_path / "emojis.json"
    p.write_bytes(as_bytes(SCENARIO))
    assert len(load_path(p)) == 2


def test_load_path_missing_file(tmp_path):
    with pytest.raises(ParseError):
        load_path(tmp_path / "missing.json")


def test_bundled_dataset_loads():
    cat = load_path(BUNDLED_DATASET)
    assert len(cat) > 50
    assert cat["fire"].symbol == "🔥"


def test_deeply_nested_input_raises_parse_error():
    raw = b"[" * 200000 + b"]" * 200000
    with pytest.raises(ParseError, match="not valid JSON"):
        load(raw)
