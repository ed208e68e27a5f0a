"""
Round-trip tests for pass2.json from the json.org test suite.

Validates parsing of deeply nested array structure to ensure
parser can handle significant nesting levels.
"""

import pytest

import jtree

# from https://json.org/JSON_checker/test/pass2.json
JSON = r"""
[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]
"""


def test_parse() -> None:
    """
    Validates JSON parsing and round-trip encoding for deeply nested arrays.

    Tests parser's ability to handle significant nesting depth (19 levels)
    and proper reconstruction through serialization.
    """
    res = jtree.loads(JSON)

    out = jtree.dumps(res)
    assert res == jtree.loads(out)
    assert out == JSON.strip()


def test_depth_limit() -> None:
    """
    Validates that max_depth rejects the document one level short of it.
    """
    jtree.loads(JSON, jtree.ParseConfig(max_depth=19))

    with pytest.raises(jtree.JSONSyntaxError) as exc_info:
        jtree.loads(JSON, jtree.ParseConfig(max_depth=18))
    assert exc_info.value.msg == "Maximum nesting depth exceeded"
