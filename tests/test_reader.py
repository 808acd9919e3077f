"""Tests for the Reader layer: parse_value, parse_object, parse_array."""

import pytest

from besteffort_json.errors import NestingTooDeepError
from besteffort_json.reader import parse_array, parse_object, parse_value
from besteffort_json.values import Null, VArray, VBool, VNumber, VObject, VString


def _py(value):
    return value.to_python()


# ---------------------------------------------------------------------------
# parse_array
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "text, expected",
    [
        ("[ 1 , 2 , 3 ]", [1, 2, 3]),
        ("[ 1 , 2234 , 3 ]", [1, 2234, 3]),
        ("[1,2,3]", [1, 2, 3]),
        ("[1,2,3,]", [1, 2, 3]),
        ('[1,"2"]', [1, "2"]),
        ('[1, 2.1  , "123', [1, 2.1, "123"]),
        ('["abc", "123]', ["abc", "123]"]),
        ("[   true, false ]", [True, False]),
        ("[   true, false, t", [True, False, True]),
        ("[   null, false, n ", [None, False, None]),
        ('["abc", ["123', ["abc", ["123"]]),
        ("[]", []),
        ("[", []),
        ("[[1],[2]]", [[1], [2]]),
        ("[,,1,,]", [1]),
    ],
)
def test_parse_array(text, expected):
    value, _ = parse_array(text, 0)
    assert isinstance(value, VArray)
    assert _py(value) == expected


def test_parse_array_of_truncated_objects():
    text = '[ { "name": "jim" }, { "name": "cathy" }, { "name": "george'
    value, _ = parse_array(text, 0)
    assert _py(value) == [{"name": "jim"}, {"name": "cathy"}, {"name": "george"}]


def test_parse_array_end_is_past_bracket():
    _, end = parse_array("[1, 2] tail", 0)
    assert end == 6


def test_parse_array_preserves_order():
    value, _ = parse_array('["b", "a", "c"]', 0)
    assert value.items == [VString("b"), VString("a"), VString("c")]


def test_parse_array_does_not_append_absent_values():
    value, _ = parse_array("[1, }", 0)
    assert _py(value) == [1]


# ---------------------------------------------------------------------------
# parse_object
# ---------------------------------------------------------------------------

def test_parse_object_complete():
    value, end = parse_object('{"a": 1, "b": "x"}', 0)
    assert value == VObject({"a": VNumber(1), "b": VString("x")})
    assert end == 18


def test_parse_object_partial_key_dropped():
    value, _ = parse_object('{ "fac ', 0)
    assert value == VObject({})


def test_parse_object_key_without_colon_dropped():
    value, _ = parse_object('{ "fact" ', 0)
    assert value == VObject({})


def test_parse_object_colon_without_value_is_null():
    value, _ = parse_object('{ "fact":', 0)
    assert value == VObject({"fact": Null})


def test_parse_object_colon_then_space_is_null():
    value, _ = parse_object('{ "fact": ', 0)
    assert value == VObject({"fact": Null})


def test_parse_object_colon_then_close_drops_key():
    value, end = parse_object('{"fact":}', 0)
    assert value == VObject({})
    assert end == 9


def test_parse_object_close_after_colon_keeps_earlier_keys():
    value, _ = parse_object('{"a": 1, "b":}', 0)
    assert _py(value) == {"a": 1}


def test_parse_object_open_quote_is_empty_string():
    value, _ = parse_object('{ "fact": "', 0)
    assert value == VObject({"fact": VString("")})


def test_parse_object_last_write_wins():
    value, _ = parse_object('{"a": 1, "a": 2}', 0)
    assert value == VObject({"a": VNumber(2)})


def test_parse_object_escaped_quote_in_key():
    value, _ = parse_object('{"say \\"hi\\"": true}', 0)
    assert value.entries == {'say "hi"': VBool(True)}


def test_parse_object_escaped_backslash_closes_key():
    value, _ = parse_object('{"a\\\\": 1}', 0)
    assert value.entries == {"a\\": VNumber(1)}


def test_parse_object_brace_inside_key():
    value, _ = parse_object('{"a}b": 1}', 0)
    assert _py(value) == {"a}b": 1}


def test_parse_object_nested_truncation():
    value, _ = parse_object('{ "fact": { "one": "two', 0)
    assert _py(value) == {"fact": {"one": "two"}}


def test_parse_object_scalar_before_close_keeps_siblings_apart():
    value, _ = parse_object('{"a": {"b": 1}, "c": 2}', 0)
    assert _py(value) == {"a": {"b": 1}, "c": 2}


def test_parse_object_stray_characters_ignored():
    value, _ = parse_object('{ junk "a" junk : 1 }', 0)
    assert _py(value) == {"a": 1}


# ---------------------------------------------------------------------------
# parse_value
# ---------------------------------------------------------------------------

def test_parse_value_dispatch():
    assert parse_value("{}")[0] == VObject({})
    assert parse_value("[]")[0] == VArray([])
    assert parse_value('"s"')[0] == VString("s")
    assert parse_value("12")[0] == VNumber(12)
    assert parse_value("null")[0] is Null


def test_parse_value_skips_separators():
    value, _ = parse_value(" ,]} 5")
    assert value == VNumber(5)


def test_parse_value_absent_when_exhausted():
    value, end = parse_value("  ,", 0)
    assert value is None
    assert end == 3


def test_parse_value_empty_text():
    assert parse_value("") == (None, 0)


# ---------------------------------------------------------------------------
# Nesting limit
# ---------------------------------------------------------------------------

def test_nesting_within_limit():
    value, _ = parse_value("[[[1]]]", 0, 0, 3)
    assert _py(value) == [[[1]]]


def test_nesting_over_limit_raises():
    with pytest.raises(NestingTooDeepError) as info:
        parse_value("[[[[1]]]]", 0, 0, 3)
    assert info.value.depth == 4
    assert info.value.offset == 3


def test_nesting_unbounded_when_limit_is_none():
    value, _ = parse_value("[" * 50 + "]" * 50, 0, 0, None)
    assert isinstance(value, VArray)


def test_parse_object_key_escapes_decoded():
    value, _ = parse_object('{"tab\\tkey": 1, "nl\\nkey": 2, "u\\u0041": 3}', 0)
    assert set(value.entries) == {"tab\tkey", "nl\nkey", "u\\u0041"}
