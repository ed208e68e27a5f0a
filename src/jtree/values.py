"""
Scalar side of the value model.

Holds the JSON-null value, the rules that classify bare text as a boolean,
null, number or string, and the canonical text forms used by the serializer
and by the string accessors.
"""

import math
import re
from decimal import Decimal
from decimal import InvalidOperation
from enum import Enum
from typing import Any

from .errors import InvalidValueError

# Number shapes accepted from bare text; ASCII digits only
_INTEGER_RE = re.compile(r"-?[0-9]+")
_DECIMAL_RE = re.compile(
    r"-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)
_SIGNED_DIGITS_RE = re.compile(r"[+-]?[0-9]+")

# Fits under the default sys.get_int_max_str_digits() of 4300
_DIGIT_CHUNK = 4000


class JSONNull:
    """
    The JSON null value, distinct from a missing entry.

    Every instance is equal to every other instance and to None, so it can
    be compared structurally; NULL is the shared instance used by the
    library.
    """

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return other is None or isinstance(other, JSONNull)

    def __hash__(self) -> int:
        return hash(None)

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NULL"

    def __str__(self) -> str:
        return "null"


NULL = JSONNull()


def is_null(value: Any) -> bool:
    """True for the absence marker and for JSON null."""
    return value is None or isinstance(value, JSONNull)


def is_number(value: Any) -> bool:
    """True for int, float and Decimal values; bool is not a number."""
    return isinstance(value, int | float | Decimal) and not isinstance(
        value, bool
    )


def is_scalar(value: Any) -> bool:
    """True for values that can be stored without conversion."""
    return (
        value is None
        or isinstance(value, JSONNull | bool | str | Enum)
        or is_number(value)
    )


def test_validity(value: Any) -> None:
    """Rejects numbers that JSON cannot represent."""
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidValueError("JSON does not allow non-finite numbers.")
    if isinstance(value, Decimal) and not value.is_finite():
        raise InvalidValueError("JSON does not allow non-finite numbers.")


def string_to_value(text: str) -> Any:
    """
    Converts bare text into the most specific value it represents.

    Reserved words are matched case-insensitively. Integral text becomes an
    int only when it reads back identically (no leading zeros, no plus sign);
    text with a fraction or exponent becomes a float, or a Decimal when the
    magnitude does not fit a float. Anything else is returned unchanged.
    """
    if not text:
        return text

    lowered = text.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if lowered == "null":
        return NULL

    first = text[0]
    if not ("0" <= first <= "9" or first == "-"):
        return text

    if "." in text or "e" in lowered or text == "-0":
        if _DECIMAL_RE.fullmatch(text):
            number = float(text)
            if math.isfinite(number):
                return number
            try:
                return Decimal(text)
            except InvalidOperation:
                return text
    elif _INTEGER_RE.fullmatch(text):
        integer = int_from_text(text)
        if int_to_text(integer) == text:
            return integer

    return text


def int_from_text(text: str) -> int:
    """
    Parses a run of ASCII digits with an optional sign.

    Works past the interpreter's int/str digit limit by converting the
    digits in chunks.
    """
    try:
        return int(text)
    except ValueError:
        if not _SIGNED_DIGITS_RE.fullmatch(text):
            raise
    sign = -1 if text.startswith("-") else 1
    digits = text.lstrip("+-")
    head, tail = digits[:-_DIGIT_CHUNK], digits[-_DIGIT_CHUNK:]
    return sign * (int_from_text(head) * 10**_DIGIT_CHUNK + int(tail))


def int_to_text(number: int) -> str:
    """str() for integers of any size."""
    try:
        return str(number)
    except ValueError:
        # Beyond the interpreter's int/str digit limit
        high, low = divmod(abs(number), 10**_DIGIT_CHUNK)
        text = int_to_text(high) + str(low).zfill(_DIGIT_CHUNK)
        return "-" + text if number < 0 else text


def number_to_string(number: int | float | Decimal) -> str:
    """
    Produces the canonical text of a number.

    Trailing fractional zeros are dropped, so 1.50 becomes "1.5" and 2.0
    becomes "2".
    """
    test_validity(number)
    if isinstance(number, int):
        return int_to_text(number)
    text = repr(number) if isinstance(number, float) else str(number)
    if "." in text and "e" not in text and "E" not in text:
        text = text.rstrip("0")
        if text.endswith("."):
            text = text[:-1]
    return text


def value_to_text(value: Any) -> str:
    """
    Produces the plain text form of a value.

    Strings are returned as is, enum members by name, and everything else in
    its JSON form. Used for object keys and the string accessors.
    """
    if is_null(value):
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, str):
        return value
    if isinstance(value, Enum):
        return value.name
    if is_number(value):
        try:
            return number_to_string(value)
        except InvalidValueError:
            return str(value)
    return str(value)


__all__ = [
    "NULL",
    "JSONNull",
    "is_null",
    "is_number",
    "is_scalar",
    "int_from_text",
    "int_to_text",
    "number_to_string",
    "string_to_value",
    "test_validity",
    "value_to_text",
]
