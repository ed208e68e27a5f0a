"""
Pytest configuration and shared fixtures for jtree tests.

Provides immutable test data fixtures covering the lenient grammar, its
failure modes and the json.org reference documents.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

import pytest

import jtree


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for JSON test case data.

    Holds test input and expected behavior for consistent test execution.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None
    expected_msg: str = ""


class Color(Enum):
    RED = 1
    GREEN = 2


def to_python(value: Any) -> Any:
    """Converts a parsed value into plain Python data for comparison."""
    if isinstance(value, jtree.JSONArray):
        return value.to_list()
    if isinstance(value, jtree.JSONObject):
        return value.to_map()
    if isinstance(value, jtree.JSONNull):
        return None
    return value


@pytest.fixture
def lenient_pass_cases() -> list[JsonTestCase]:
    """
    Provides inputs that only a lenient parser accepts.

    Each case lists the plain Python data the parsed tree converts to.
    """
    return [
        JsonTestCase("trailing comma", "[1,2,]", False, [1, 2]),
        JsonTestCase("comma elision", "[1,,2]", False, [1, None, 2]),
        JsonTestCase("leading elision", "[,1]", False, [None, 1]),
        JsonTestCase("elision before close", "[1,2,,]", False, [1, 2, None]),
        JsonTestCase("single quotes", "['a', \"b\"]", False, ["a", "b"]),
        JsonTestCase(
            "bare words",
            "[abc, TRUE, Null, 12abc, two words]",
            False,
            ["abc", True, None, "12abc", "two words"],
        ),
        JsonTestCase("bare keys", "{a: 1, 'b': x}", False, {"a": 1, "b": "x"}),
        JsonTestCase("semicolons", "{a:1;b:2}", False, {"a": 1, "b": 2}),
        JsonTestCase("object trailing comma", '{"a":1,}', False, {"a": 1}),
        JsonTestCase("control characters", "\x01[\x02 1 ]", False, [1]),
        JsonTestCase(
            "nested",
            '[[1,[2,]],{"a":[3,,]}]',
            False,
            [[1, [2]], {"a": [3, None]}],
        ),
        JsonTestCase(
            "non-string keys",
            "{1: x, true: y}",
            False,
            {"1": "x", "true": "y"},
        ),
    ]


@pytest.fixture
def lenient_fail_cases() -> list[JsonTestCase]:
    """
    Provides inputs that must fail even under the lenient grammar.
    """
    failures = [
        ('[1 "x"]', "Expected a ',' or ']'"),
        ("[1}", "Expected a ',' or ']'"),
        ('{"a" 1}', "Expected a ':' after a key"),
        ('{"a":1 "b":2}', "Expected a ',' or '}'"),
        ('{"a":1', "Expected a ',' or '}'"),
        ("{", "A JSONObject text must end with '}'"),
        ('{"a":1,', "A JSONObject text must end with '}'"),
        ("{]", "Missing value"),
        ('["abc', "Unterminated string"),
        ('["a\nb"]', "Unterminated string"),
        ('["\\x"]', "Illegal escape."),
        ('["\\u12G4"]', "Illegal escape."),
        ('{"a":1,"a":2}', 'Duplicate key "a"'),
        ("[", "Missing value"),
        ("[1,", "Missing value"),
        ("", "Missing value"),
        ("[1] 2", "Extra data"),
        ("[1,]]", "Extra data"),
    ]
    return [
        JsonTestCase(
            description=f"fail{idx + 1}",
            input_data=doc,
            should_fail=True,
            expected_msg=msg,
        )
        for idx, (doc, msg) in enumerate(failures)
    ]


@pytest.fixture
def json_pass_cases() -> list[JsonTestCase]:
    """
    Provides strict JSON documents from the json.org test suite.

    Strict JSON is a subset of the lenient grammar, so all of these parse.
    """
    return [
        JsonTestCase(
            description="pass1.json - complex nested structure",
            input_data="""[
    "JSON Test Pattern pass1",
    {"object with 1 member":["array with 1 element"]},
    {},
    [],
    -42,
    true,
    false,
    null,
    {
        "integer": 1234567890,
        "real": -9876.543210,
        "e": 0.123456789e-12,
        "E": 1.234567890E+34,
        "":  23456789012E66,
        "zero": 0,
        "one": 1,
        "space": " ",
        "quote": "\\"",
        "backslash": "\\\\",
        "controls": "\\b\\f\\n\\r\\t",
        "slash": "/ & \\/",
        "alpha": "abcdefghijklmnopqrstuvwyz",
        "ALPHA": "ABCDEFGHIJKLMNOPQRSTUVWYZ",
        "digit": "0123456789",
        "0123456789": "digit",
        "special": "`1~!@#$%^&*()_+-={':[,]}|;.</>?",
        "hex": "\\u0123\\u4567\\u89AB\\uCDEF\\uabcd\\uef4A",
        "true": true,
        "false": false,
        "null": null,
        "array":[  ],
        "object":{  },
        "address": "50 St. James Street",
        "url": "https://www.JSON.org/",
        "comment": "// /* <!-- --",
        "# -- --> */": " ",
        " s p a c e d " :[1,2 , 3

,

4 , 5        ,          6           ,7        ],"compact":[1,2,3,4,5,6,7],
        "jsontext": "{\\"object with 1 member\\":[\\"array with 1 element\\"]}"
    }
]""",
        ),
        JsonTestCase(
            description="pass2.json - deep nesting",
            input_data='[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
        ),
        JsonTestCase(
            description="pass3.json - simple object",
            input_data='{"JSON Test Pattern pass3": {"The outermost value": "must be an object or array.", "In this test": "It is an object."}}',
        ),
    ]


@pytest.fixture
def basic_json_values() -> list[JsonTestCase]:
    """
    Provides basic JSON value test cases for fundamental parsing.

    Covers all JSON primitive types and basic container structures.
    """
    return [
        JsonTestCase("null value", "null", False, jtree.NULL),
        JsonTestCase("true boolean", "true", False, True),
        JsonTestCase("false boolean", "false", False, False),
        JsonTestCase("integer", "42", False, 42),
        JsonTestCase("negative integer", "-17", False, -17),
        JsonTestCase("float", "3.14", False, 3.14),
        JsonTestCase("empty string", '""', False, ""),
        JsonTestCase("simple string", '"hello"', False, "hello"),
        JsonTestCase("empty array", "[]", False, jtree.JSONArray()),
        JsonTestCase("empty object", "{}", False, jtree.JSONObject()),
        JsonTestCase(
            "simple array", "[1, 2, 3]", False, jtree.JSONArray([1, 2, 3])
        ),
        JsonTestCase(
            "simple object",
            '{"key": "value"}',
            False,
            jtree.JSONObject({"key": "value"}),
        ),
    ]


@pytest.fixture
def mixed_array() -> jtree.JSONArray:
    """
    An array holding one value of each shape the accessors coerce from.
    """
    return jtree.JSONArray(
        "[true, 'TRUE', 'false', 42, '42', abc, 3.7, '3.7', null, RED,"
        " [1], {a: 1}, 12345678901, '-12', '12345678901']"
    )
