"""
JSONArray behaviour tests.

Validates construction, mutation, lookup and equality of arrays.
"""

from decimal import Decimal

import pytest

import jtree
from jtree import NULL
from jtree import JSONArray
from jtree import JSONObject


def test_construct_from_iterables() -> None:
    """
    Validates Python iterables are wrapped element by element.
    """
    array = JSONArray((n for n in range(3)))
    assert array.to_list() == [0, 1, 2]

    array = JSONArray([None, {"a": [1]}, (2, 3), object])
    assert array.get(0) is NULL
    assert isinstance(array.get(1), JSONObject)
    assert isinstance(array.get(1).get("a"), JSONArray)
    assert isinstance(array.get(2), JSONArray)
    assert array.get(3) == str(object)


def test_construct_from_text() -> None:
    """
    Validates text is parsed.
    """
    assert JSONArray("[1, 'a', [true]]").to_list() == [1, "a", [True]]


@pytest.mark.parametrize("source", [{"a": 1}, 5, b"[1]"])
def test_construct_rejects_non_sequences(source: object) -> None:
    """
    Validates mappings, scalars and bytes cannot become arrays.
    """
    with pytest.raises(TypeError):
        JSONArray(source)  # type: ignore[arg-type]


def test_put_appends_and_converts() -> None:
    """
    Validates put converts Python containers and chains.
    """
    array = JSONArray().put(1).put({"a": 1}).put([2, 3]).put(Decimal("1.5"))
    assert array.length() == 4
    assert isinstance(array.get(1), JSONObject)
    assert isinstance(array.get(2), JSONArray)
    assert array.get(3) == Decimal("1.5")


def test_put_rejects_invalid_values() -> None:
    """
    Validates non-finite numbers and unsupported types are refused.
    """
    array = JSONArray()
    with pytest.raises(jtree.InvalidValueError) as exc_info:
        array.put(float("nan"))
    assert exc_info.value.msg == "JSON does not allow non-finite numbers."

    with pytest.raises(jtree.InvalidValueError) as exc_info:
        array.put(object())
    assert exc_info.value.msg == "Unsupported value type object."
    assert array.length() == 0


def test_put_at_pads_with_null() -> None:
    """
    Validates storing past the end fills the gap with null.
    """
    array = JSONArray().put_at(5, "x")
    assert array.length() == 6
    assert all(array.is_null(i) for i in range(5))
    assert array.get(0) is NULL
    assert array.get(5) == "x"

    array.put_at(2, "y")
    assert array.length() == 6
    assert array.get(2) == "y"

    array[0] = 7
    assert array[0] == 7


def test_put_at_negative_index() -> None:
    """
    Validates negative indexes are refused, after value validation.
    """
    array = JSONArray([1])
    with pytest.raises(jtree.JSONIndexError) as exc_info:
        array.put_at(-1, 2)
    assert exc_info.value.msg == "JSONArray[-1] not found."

    with pytest.raises(jtree.InvalidValueError):
        array.put_at(-1, float("inf"))


def test_get_missing_index() -> None:
    """
    Validates get fails outside the array while opt returns None.
    """
    array = JSONArray([1])
    for index in (1, -1, 100):
        with pytest.raises(jtree.JSONIndexError) as exc_info:
            array.get(index)
        assert exc_info.value.msg == f"JSONArray[{index}] not found."
        assert array.opt(index) is None
        assert array.is_null(index)


def test_absent_slot() -> None:
    """
    Validates a None slot reads as missing and writes as null.
    """
    array = JSONArray().put(None).put(1)
    assert array.length() == 2
    assert array.opt(0) is None
    assert array.is_null(0)
    with pytest.raises(jtree.JSONIndexError):
        array.get(0)
    assert array.to_string() == "[null,1]"
    assert array.to_list() == [None, 1]


def test_remove() -> None:
    """
    Validates remove shifts later elements down.
    """
    array = JSONArray(["a", "b", "c"])
    assert array.remove(1) == "b"
    assert array.to_list() == ["a", "c"]
    assert array.remove(10) is None
    assert array.remove(-1) is None
    assert array.length() == 2


def test_equality_and_hash() -> None:
    """
    Validates structural equality.
    """
    first = JSONArray("[1, [2], {a: null}]")
    second = JSONArray([1, [2], {"a": NULL}])
    assert first == second
    assert hash(first) == hash(second)
    assert first != JSONArray([1, [2]])
    assert JSONArray([1]) != [1]


def test_booleans_never_equal_numbers() -> None:
    """
    Validates true and false stay distinct from 1 and 0.
    """
    assert JSONArray("[true]") != JSONArray("[1]")
    assert JSONArray("[false]") != JSONArray("[0]")
    assert JSONArray("[[true]]") != JSONArray("[[1]]")
    assert JSONArray("[{a: false}]") != JSONArray("[{a: 0}]")
    assert JSONArray("[1]") == JSONArray("[1.0]")
    assert hash(JSONArray("[true, 2]")) == hash(JSONArray([True, 2]))


def test_sequence_protocol() -> None:
    """
    Validates len, iteration and indexing.
    """
    array = JSONArray([1, 2, 3])
    assert len(array) == 3
    assert list(array) == [1, 2, 3]
    assert array[1] == 2
    assert repr(array) == "JSONArray([1, 2, 3])"


def test_to_list_is_deep_copy() -> None:
    """
    Validates to_list gives independent plain Python data.
    """
    array = JSONArray([1, [NULL], {"a": [True]}])
    plain = array.to_list()
    assert plain == [1, [None], {"a": [True]}]

    plain[1].append(5)
    assert array.get_json_array(1).length() == 1


def test_nan_stored_by_constructor_fails_on_write() -> None:
    """
    Validates the constructor keeps non-finite numbers, which then fail
    to write.
    """
    array = JSONArray([1.0, float("nan")])
    assert array.length() == 2
    with pytest.raises(jtree.InvalidValueError):
        array.to_string()
