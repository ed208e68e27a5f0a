"""
JSONArray and JSONObject, the container types of the value model.

A JSONArray is an ordered sequence of values; a JSONObject is an
insertion-ordered mapping from string keys to values. Both can be parsed
from text, built up with put calls, read back through the typed accessors
and written out as JSON text.

Values are owned by a single container and the tree is assumed to be
acyclic. Nothing here is synchronised; guard shared trees externally when
one thread may write while others read.
"""

import io
import logging
from abc import abstractmethod
from collections.abc import ItemsView
from collections.abc import Iterable
from collections.abc import Iterator
from collections.abc import KeysView
from collections.abc import Mapping
from collections.abc import ValuesView
from typing import IO
from typing import Any

from . import serializer
from .accessors import TypedAccessors
from .errors import InvalidValueError
from .errors import JSONIndexError
from .errors import JSONTypeError
from .errors import JSONWriteError
from .parser import read_array
from .parser import read_document
from .parser import read_object
from .tokenizer import JSONTokener
from .values import NULL
from .values import is_null
from .values import is_number
from .values import is_scalar
from .values import test_validity
from .values import value_to_text

logger = logging.getLogger(__name__)

_NOT_ITERABLE_AS_ARRAY = (str, bytes, bytearray)


def wrap(value: Any) -> Any:
    """
    Converts an arbitrary Python value into something a container can hold.

    None becomes NULL, mappings become JSONObjects and other iterables
    JSONArrays, recursively. Values that are already storable are returned
    unchanged and anything else is stored as its str() form.
    """
    if value is None:
        return NULL
    if isinstance(value, JSONArray | JSONObject) or is_scalar(value):
        return value
    if isinstance(value, Mapping):
        return JSONObject(value)
    if isinstance(value, Iterable) and not isinstance(
        value, _NOT_ITERABLE_AS_ARRAY
    ):
        return JSONArray(value)
    return str(value)


def _prepare(value: Any) -> Any:
    """Validates a value for put, converting Python containers."""
    if isinstance(value, JSONArray | JSONObject):
        return value
    if is_scalar(value):
        test_validity(value)
        return value
    if isinstance(value, Mapping):
        return JSONObject(value)
    if isinstance(value, Iterable) and not isinstance(
        value, _NOT_ITERABLE_AS_ARRAY
    ):
        return JSONArray(value)
    raise InvalidValueError(
        f"Unsupported value type {type(value).__name__}."
    )


def _to_python(value: Any) -> Any:
    if is_null(value):
        return None
    if isinstance(value, JSONArray):
        return value.to_list()
    if isinstance(value, JSONObject):
        return value.to_map()
    return value


def _variant_key(value: Any) -> tuple[bool, Any]:
    # True == 1 in Python; a boolean never equals a number here
    return isinstance(value, bool), value


class _Container[K](TypedAccessors[K]):
    """Text conversion shared by both container types."""

    @abstractmethod
    def write(
        self, writer: IO[str], indent_factor: int = 0, indent: int = 0
    ) -> IO[str]: ...

    def to_string(self, indent_factor: int = 0) -> str:
        """
        Returns the JSON text, indented when indent_factor is positive.

        Raises InvalidValueError if the tree holds a non-finite number.
        """
        with io.StringIO() as buffer:
            self.write(buffer, indent_factor, 0)
            return buffer.getvalue()

    def __str__(self) -> str:
        # Best-effort form for logging and debugging; never raises
        try:
            return self.to_string()
        except Exception as e:
            logger.debug(
                "%s could not be written: %s", type(self).__name__, e
            )
            return ""


class JSONArray(_Container[int]):
    """
    Ordered sequence of JSON values.

    Build one empty, from JSON text, from a JSONTokener positioned at '[',
    or from any iterable of Python values.
    """

    def __init__(
        self, source: "str | JSONTokener | Iterable[Any] | None" = None
    ) -> None:
        self._elements: list[Any]
        if source is None:
            self._elements = []
        elif isinstance(source, str):
            self._elements = read_document(read_array, JSONTokener(source))
        elif isinstance(source, JSONTokener):
            self._elements = read_array(source)
        elif isinstance(source, Mapping):
            raise TypeError("a JSONArray cannot be built from a mapping")
        elif isinstance(source, Iterable) and not isinstance(
            source, _NOT_ITERABLE_AS_ARRAY
        ):
            self._elements = [wrap(element) for element in source]
        else:
            raise TypeError(
                f"a JSONArray cannot be built from {type(source).__name__}"
            )

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._elements)

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def __setitem__(self, index: int, value: Any) -> None:
        self.put_at(index, value)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if isinstance(other, JSONArray):
            return self._comparable() == other._comparable()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._comparable()))

    def _comparable(self) -> list[tuple[bool, Any]]:
        return [_variant_key(element) for element in self._elements]

    def __repr__(self) -> str:
        return f"JSONArray({self._elements!r})"

    def _label(self, key: int) -> str:
        return f"JSONArray[{key}]"

    def length(self) -> int:
        return len(self._elements)

    def opt(self, index: int) -> Any:
        """Returns the element at index, or None when out of range."""
        if 0 <= index < len(self._elements):
            return self._elements[index]
        return None

    def get(self, index: int) -> Any:
        """
        Returns the element at index.

        Raises JSONIndexError when the index is out of range or the slot
        holds None.
        """
        value = self.opt(index)
        if value is None:
            raise JSONIndexError(f"JSONArray[{index}] not found.")
        return value

    def is_null(self, index: int) -> bool:
        return is_null(self.opt(index))

    def put(self, value: Any) -> "JSONArray":
        """Appends a value. Mappings and iterables are converted."""
        self._elements.append(_prepare(value))
        return self

    def put_at(self, index: int, value: Any) -> "JSONArray":
        """
        Stores a value at index.

        An index past the end pads the array with NULL first; a negative
        index raises JSONIndexError.
        """
        value = _prepare(value)
        if index < 0:
            raise JSONIndexError(f"JSONArray[{index}] not found.")
        if index < len(self._elements):
            self._elements[index] = value
        else:
            self._elements.extend([NULL] * (index - len(self._elements)))
            self._elements.append(value)
        return self

    def remove(self, index: int) -> Any:
        """Removes and returns the element at index, or None."""
        if 0 <= index < len(self._elements):
            return self._elements.pop(index)
        return None

    def to_list(self) -> list[Any]:
        """Deep copy as Python lists and dicts, with None for null."""
        return [_to_python(element) for element in self._elements]

    def write(
        self, writer: IO[str], indent_factor: int = 0, indent: int = 0
    ) -> IO[str]:
        """
        Writes the array to a text stream.

        indent is the current depth in spaces; indent_factor the number of
        spaces added per level.
        """
        try:
            serializer.write_array(
                writer, self._elements, indent_factor, indent
            )
        except OSError as e:
            raise JSONWriteError(f"Unable to write JSONArray: {e}") from e
        return writer


class JSONObject(_Container[str]):
    """
    Insertion-ordered mapping from string keys to JSON values.

    A key is either present with a value (possibly NULL) or absent; None
    is never stored, and put(key, None) removes the key.
    """

    def __init__(
        self,
        source: "str | JSONTokener | Mapping[Any, Any] | None" = None,
        names: Iterable[str] | None = None,
    ) -> None:
        self._members: dict[str, Any] = {}
        if source is None:
            if names is not None:
                raise TypeError("names requires a JSONObject to copy from")
        elif names is not None:
            if not isinstance(source, JSONObject):
                raise TypeError("names requires a JSONObject to copy from")
            for name in names:
                self.put_once(name, source.opt(name))
        elif isinstance(source, str):
            self._members = read_document(read_object, JSONTokener(source))
        elif isinstance(source, JSONTokener):
            self._members = read_object(source)
        elif isinstance(source, JSONObject):
            self._members = dict(source._members)
        elif isinstance(source, Mapping):
            for key, value in source.items():
                if value is not None:
                    self._members[value_to_text(key)] = wrap(value)
        else:
            raise TypeError(
                f"a JSONObject cannot be built from {type(source).__name__}"
            )

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[str]:
        return iter(self._members)

    def __contains__(self, key: object) -> bool:
        return key in self._members

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.put(key, value)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if isinstance(other, JSONObject):
            return self._comparable() == other._comparable()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._comparable().items()))

    def _comparable(self) -> dict[str, tuple[bool, Any]]:
        return {
            key: _variant_key(value) for key, value in self._members.items()
        }

    def __repr__(self) -> str:
        return f"JSONObject({self._members!r})"

    def _label(self, key: str) -> str:
        return f"JSONObject[{serializer.quote(str(key))}]"

    @staticmethod
    def _check_key(key: Any) -> str:
        if key is None:
            raise JSONIndexError("Null key.")
        if not isinstance(key, str):
            raise JSONTypeError(
                f"JSONObject keys must be strings, not {type(key).__name__}"
            )
        return key

    def length(self) -> int:
        return len(self._members)

    def keys(self) -> KeysView[str]:
        return self._members.keys()

    def key_set(self) -> set[str]:
        return set(self._members)

    def values(self) -> ValuesView[Any]:
        return self._members.values()

    def items(self) -> ItemsView[str, Any]:
        return self._members.items()

    def has(self, key: str) -> bool:
        return key in self._members

    def names(self) -> "JSONArray | None":
        """The keys as a JSONArray, or None when the object is empty."""
        if not self._members:
            return None
        return JSONArray(list(self._members))

    def opt(self, key: str) -> Any:
        """Returns the value for key, or None when absent."""
        if key is None:
            return None
        return self._members.get(key)

    def get(self, key: str) -> Any:
        """Returns the value for key; raises JSONIndexError when absent."""
        self._check_key(key)
        value = self.opt(key)
        if value is None:
            raise JSONIndexError(f"{self._label(key)} not found.")
        return value

    def is_null(self, key: str) -> bool:
        return is_null(self.opt(key))

    def put(self, key: str, value: Any) -> "JSONObject":
        """
        Stores a value under key, or removes the key when value is None.

        Mappings and iterables are converted; non-finite numbers and
        unsupported types raise InvalidValueError.
        """
        self._check_key(key)
        if value is None:
            self.remove(key)
        else:
            self._members[key] = _prepare(value)
        return self

    def put_once(self, key: str | None, value: Any) -> "JSONObject":
        """Like put, but refuses to replace an existing key."""
        if key is not None and value is not None:
            if self.opt(key) is not None:
                raise InvalidValueError(f'Duplicate key "{key}"')
            self.put(key, value)
        return self

    def put_opt(self, key: str | None, value: Any) -> "JSONObject":
        """Like put, but does nothing when key or value is None."""
        if key is not None and value is not None:
            self.put(key, value)
        return self

    def remove(self, key: str) -> Any:
        """Removes key and returns its value, or None when absent."""
        return self._members.pop(key, None)

    def accumulate(self, key: str, value: Any) -> "JSONObject":
        """
        Adds a value under key, collecting repeated values into an array.

        The first value is stored as is (a JSONArray is wrapped in another
        array so it stays one element); later values turn the entry into a
        JSONArray and are appended to it.
        """
        test_validity(value)
        current = self.opt(key)
        if current is None:
            if isinstance(value, JSONArray):
                value = JSONArray().put(value)
            self.put(key, value)
        elif isinstance(current, JSONArray):
            current.put(value)
        else:
            self.put(key, JSONArray().put(current).put(value))
        return self

    def append(self, key: str, value: Any) -> "JSONObject":
        """Appends a value to the JSONArray stored under key."""
        test_validity(value)
        current = self.opt(key)
        if current is None:
            self.put(key, JSONArray().put(value))
        elif isinstance(current, JSONArray):
            current.put(value)
        else:
            raise JSONTypeError(f"{self._label(key)} is not a JSONArray.")
        return self

    def increment(self, key: str) -> "JSONObject":
        """Adds one to a number under key, storing 1 when absent."""
        current = self.opt(key)
        if current is None:
            self.put(key, 1)
        elif is_number(current):
            self.put(key, current + 1)
        else:
            raise JSONTypeError(
                f"Unable to increment [{serializer.quote(key)}]."
            )
        return self

    def opt_string(self, key: str, default: str | None = "") -> str | None:
        return super().opt_string(key, default)

    def to_json_array(self, names: JSONArray | None) -> JSONArray | None:
        """The values for the given names, in order, or None."""
        if names is None or not len(names):
            return None
        values = JSONArray()
        for i in range(len(names)):
            values.put(self.opt(names.get_string(i)))
        return values

    def to_map(self) -> dict[str, Any]:
        """Deep copy as Python dicts and lists, with None for null."""
        return {key: _to_python(value) for key, value in self._members.items()}

    def write(
        self, writer: IO[str], indent_factor: int = 0, indent: int = 0
    ) -> IO[str]:
        """Writes the object to a text stream; see JSONArray.write."""
        try:
            serializer.write_object(
                writer, self._members, indent_factor, indent
            )
        except OSError as e:
            raise JSONWriteError(f"Unable to write JSONObject: {e}") from e
        return writer


def get_names(obj: JSONObject) -> list[str] | None:
    """The keys of obj as a list, or None when it is empty."""
    if not len(obj):
        return None
    return list(obj.keys())


__all__ = ["JSONArray", "JSONObject", "get_names", "wrap"]
