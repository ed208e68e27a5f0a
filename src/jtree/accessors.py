"""
Typed accessors shared by JSONArray and JSONObject.

Each target type has a coercion function that either returns the converted
value or raises ValueError. get_* looks the value up with get(), which fails
for missing entries, and turns a coercion failure into JSONTypeError.
opt_* runs the same path and returns the caller's default on any JSONError.
"""

import re
from abc import ABC
from abc import abstractmethod
from collections.abc import Callable
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING
from typing import Any

from . import containers
from .errors import JSONError
from .errors import JSONTypeError
from .values import int_from_text
from .values import is_null
from .values import is_number
from .values import value_to_text

if TYPE_CHECKING:
    from .containers import JSONArray
    from .containers import JSONObject

_SIGNED_DIGITS = re.compile(r"[+-]?[0-9]+")
_DECIMAL_TEXT = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)
_FLOAT_TEXT = re.compile(
    r"\s*[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|nan|inf|infinity)\s*",
    re.IGNORECASE,
)

INT_BITS = 32
LONG_BITS = 64


def to_boolean(value: Any) -> bool:
    """Accepts booleans and the strings "true" / "false" in any case."""
    if value is True:
        return True
    if value is False:
        return False
    if isinstance(value, str):
        lowered = value.lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    raise ValueError(f"not a boolean: {value!r}")


def _wrap_signed(number: int, bits: int) -> int:
    """Truncates to a two's complement integer of the given width."""
    modulus = 1 << bits
    number &= modulus - 1
    return number - modulus if number >= modulus >> 1 else number


def _to_integer(value: Any, bits: int) -> int:
    if is_number(value):
        try:
            return _wrap_signed(int(value), bits)
        except (OverflowError, ValueError) as e:
            raise ValueError(f"not an integer: {value!r}") from e

    if isinstance(value, str) and _SIGNED_DIGITS.fullmatch(value):
        number = int(value)
        limit = 1 << (bits - 1)
        if -limit <= number < limit:
            return number
    raise ValueError(f"not an integer: {value!r}")


def to_int(value: Any) -> int:
    """Numbers truncate to 32 bits; strings must fit in 32 bits."""
    return _to_integer(value, INT_BITS)


def to_long(value: Any) -> int:
    """Numbers truncate to 64 bits; strings must fit in 64 bits."""
    return _to_integer(value, LONG_BITS)


def to_double(value: Any) -> float:
    if is_number(value):
        try:
            return float(value)
        except OverflowError as e:
            raise ValueError(f"not a double: {value!r}") from e
    if isinstance(value, str) and _FLOAT_TEXT.fullmatch(value):
        return float(value)
    raise ValueError(f"not a double: {value!r}")


def to_big_integer(value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return int(value)
    text = value_to_text(value)
    if _SIGNED_DIGITS.fullmatch(text):
        return int_from_text(text)
    raise ValueError(f"not an integer: {value!r}")


def to_big_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal) and value.is_finite():
        return value
    text = value_to_text(value)
    if _DECIMAL_TEXT.fullmatch(text):
        return Decimal(text)
    raise ValueError(f"not a decimal: {value!r}")


def to_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    raise ValueError(f"not a string: {value!r}")


def to_enum[E: Enum](enum_cls: type[E], value: Any) -> E:
    """Returns members unchanged, otherwise looks the text up by name."""
    if isinstance(value, enum_cls):
        return value
    if is_null(value):
        raise ValueError("null is not an enum member")
    try:
        return enum_cls[value_to_text(value)]
    except KeyError as e:
        raise ValueError(f"no member named {value!r}") from e


class TypedAccessors[K](ABC):
    """
    Mixin providing get_* and opt_* on top of get(), opt() and _label().

    K is the lookup key: an index for arrays, a name for objects.
    """

    @abstractmethod
    def get(self, key: K) -> Any: ...

    @abstractmethod
    def opt(self, key: K) -> Any: ...

    @abstractmethod
    def _label(self, key: K) -> str: ...

    def _coerce[T](
        self, key: K, convert: Callable[[Any], T], problem: str
    ) -> T:
        value = self.get(key)
        try:
            return convert(value)
        except ValueError as e:
            raise JSONTypeError(f"{self._label(key)} {problem}.") from e

    def get_boolean(self, key: K) -> bool:
        return self._coerce(key, to_boolean, "is not a boolean")

    def get_int(self, key: K) -> int:
        return self._coerce(key, to_int, "is not a number")

    def get_long(self, key: K) -> int:
        return self._coerce(key, to_long, "is not a number")

    def get_double(self, key: K) -> float:
        return self._coerce(key, to_double, "is not a number")

    def get_big_integer(self, key: K) -> int:
        return self._coerce(
            key, to_big_integer, "could not convert to big integer"
        )

    def get_big_decimal(self, key: K) -> Decimal:
        return self._coerce(
            key, to_big_decimal, "could not convert to big decimal"
        )

    def get_string(self, key: K) -> str:
        return self._coerce(key, to_string, "is not a string")

    def get_enum[E: Enum](self, enum_cls: type[E], key: K) -> E:
        return self._coerce(
            key,
            lambda value: to_enum(enum_cls, value),
            f"is not an enum of type {enum_cls.__name__}",
        )

    def get_json_array(self, key: K) -> "JSONArray":
        value = self.get(key)
        if isinstance(value, containers.JSONArray):
            return value
        raise JSONTypeError(f"{self._label(key)} is not a JSONArray.")

    def get_json_object(self, key: K) -> "JSONObject":
        value = self.get(key)
        if isinstance(value, containers.JSONObject):
            return value
        raise JSONTypeError(f"{self._label(key)} is not a JSONObject.")

    def opt_boolean(self, key: K, default: bool = False) -> bool:
        try:
            return self.get_boolean(key)
        except JSONError:
            return default

    def opt_int(self, key: K, default: int = 0) -> int:
        try:
            return self.get_int(key)
        except JSONError:
            return default

    def opt_long(self, key: K, default: int = 0) -> int:
        try:
            return self.get_long(key)
        except JSONError:
            return default

    def opt_double(self, key: K, default: float = float("nan")) -> float:
        try:
            return self.get_double(key)
        except JSONError:
            return default

    def opt_big_integer(self, key: K, default: int | None = None) -> int | None:
        try:
            return self.get_big_integer(key)
        except JSONError:
            return default

    def opt_big_decimal(
        self, key: K, default: Decimal | None = None
    ) -> Decimal | None:
        try:
            return self.get_big_decimal(key)
        except JSONError:
            return default

    def opt_enum[E: Enum](
        self, enum_cls: type[E], key: K, default: E | None = None
    ) -> E | None:
        try:
            return self.get_enum(enum_cls, key)
        except JSONError:
            return default

    def opt_json_array(
        self, key: K, default: "JSONArray | None" = None
    ) -> "JSONArray | None":
        value = self.opt(key)
        if isinstance(value, containers.JSONArray):
            return value
        return default

    def opt_json_object(
        self, key: K, default: "JSONObject | None" = None
    ) -> "JSONObject | None":
        value = self.opt(key)
        if isinstance(value, containers.JSONObject):
            return value
        return default

    def opt_string(self, key: K, default: str | None = None) -> str | None:
        """
        Returns the text form of any non-null value.

        Unlike get_string this never fails: numbers, booleans and containers
        are converted, and null or a missing entry yields the default.
        """
        value = self.opt(key)
        if is_null(value):
            return default
        return value_to_text(value)


__all__ = [
    "TypedAccessors",
    "to_big_decimal",
    "to_big_integer",
    "to_boolean",
    "to_double",
    "to_enum",
    "to_int",
    "to_long",
    "to_string",
]
