from __future__ import annotations

import json

from ssescope.json_probe import MISSING, format_value_for_display, probe_json_object


def test_probe_json_object_accepts_objects() -> None:
    assert probe_json_object('{"name": "John", "age": 30}') == {"name": "John", "age": 30}
    assert probe_json_object('{"user": {"name": "John"}}') == {"user": {"name": "John"}}
    assert probe_json_object("{}") == {}


def test_probe_json_object_roundtrips_serialized_objects() -> None:
    obj = {"a": [1, 2, {"b": None}], "c": "d", "e": 1.5, "f": False}
    assert probe_json_object(json.dumps(obj)) == obj


def test_probe_json_object_rejects_non_objects() -> None:
    for text in ("[1, 2, 3]", '"string"', "42", "true", "null"):
        assert probe_json_object(text) is None


def test_probe_json_object_invalid_json() -> None:
    assert probe_json_object("not json") is None
    assert probe_json_object("") is None
    assert probe_json_object('{"a": ') is None


def test_format_value_for_display() -> None:
    assert format_value_for_display(None) == "null"
    assert format_value_for_display(MISSING) == "-"
    assert format_value_for_display(MISSING, placeholder="n/a") == "n/a"
    assert format_value_for_display(True) == "true"
    assert format_value_for_display(False) == "false"
    assert format_value_for_display(42) == "42"
    assert format_value_for_display(3.14) == "3.14"
    assert format_value_for_display(0) == "0"
    assert format_value_for_display(30.0) == "30"
    assert format_value_for_display("hello") == "hello"
    assert format_value_for_display("") == ""
    assert format_value_for_display({"name": "John"}) == '{"name":"John"}'
    assert format_value_for_display([1, 2, 3]) == "[1,2,3]"


def test_probe_json_object_rejects_non_standard_constants() -> None:
    assert probe_json_object('{"a": NaN}') is None
    assert probe_json_object('{"a": Infinity}') is None
    assert probe_json_object('{"a": [-Infinity]}') is None


def test_probe_json_object_too_deep_or_too_long_is_no_value() -> None:
    assert probe_json_object('{"a": ' + "[" * 100000) is None
    assert probe_json_object('{"a": ' + "[" * 100000 + "]" * 100000 + "}") is None
    assert probe_json_object('{"n": ' + "1" * 5000 + "}") is None
