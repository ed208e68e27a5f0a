"""
Writes value trees as JSON text, compact or indented.

Output is strict JSON with no trailing newline. Object members are written
in insertion order. With a positive indent factor each member goes on its
own line, except that a container with exactly one member is written on a
single line.

The writer recurses without cycle detection; a tree that contains itself
recurses until the interpreter's recursion limit is hit.
"""

import io
from collections.abc import Iterable
from collections.abc import Mapping
from collections.abc import Sequence
from enum import Enum
from typing import IO
from typing import Any

from . import containers
from ._profile import ProfileContext
from .values import is_null
from .values import is_number
from .values import number_to_string

_SHORT_ESCAPES = {
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}


def _needs_unicode_escape(char: str) -> bool:
    return (
        char < " "
        or "\u0080" <= char < "\u00a0"
        or "\u2000" <= char < "\u2100"
    )


def quote(text: str) -> str:
    """
    Produces a double-quoted JSON string literal.

    '/' is escaped only after '<' so the text can be embedded in HTML.
    """
    with ProfileContext("quote", len(text)):
        if not text:
            return '""'

        result = ['"']
        previous = ""
        for char in text:
            if char in ('"', "\\"):
                result.append("\\" + char)
            elif char == "/":
                result.append("\\/" if previous == "<" else "/")
            elif char in _SHORT_ESCAPES:
                result.append(_SHORT_ESCAPES[char])
            elif _needs_unicode_escape(char):
                result.append(f"\\u{ord(char):04x}")
            else:
                result.append(char)
            previous = char
        result.append('"')
        return "".join(result)


def write_indent(writer: IO[str], count: int) -> None:
    if count > 0:
        writer.write(" " * count)


def write_value(
    writer: IO[str], value: Any, indent_factor: int, indent: int
) -> None:
    """
    Writes any storable value.

    Non-finite numbers raise InvalidValueError. Mappings and other
    iterables are written as objects and arrays; anything unrecognised is
    written as its quoted str().
    """
    if is_null(value):
        writer.write("null")
    elif value is True:
        writer.write("true")
    elif value is False:
        writer.write("false")
    elif isinstance(value, Enum):
        writer.write(quote(value.name))
    elif is_number(value):
        writer.write(number_to_string(value))
    elif isinstance(value, str):
        writer.write(quote(value))
    elif isinstance(value, containers.JSONArray | containers.JSONObject):
        value.write(writer, indent_factor, indent)
    elif isinstance(value, Mapping):
        containers.JSONObject(value).write(writer, indent_factor, indent)
    elif isinstance(value, Iterable) and not isinstance(value, bytes):
        containers.JSONArray(value).write(writer, indent_factor, indent)
    else:
        writer.write(quote(str(value)))


def write_array(
    writer: IO[str], elements: Sequence[Any], indent_factor: int, indent: int
) -> None:
    """Writes elements between brackets."""
    with ProfileContext("write_array", len(elements)):
        writer.write("[")
        if len(elements) == 1:
            write_value(writer, elements[0], indent_factor, indent)
        elif elements:
            new_indent = indent + indent_factor
            for i, element in enumerate(elements):
                if i:
                    writer.write(",")
                if indent_factor > 0:
                    writer.write("\n")
                write_indent(writer, new_indent)
                write_value(writer, element, indent_factor, new_indent)
            if indent_factor > 0:
                writer.write("\n")
            write_indent(writer, indent)
        writer.write("]")


def _write_member(
    writer: IO[str], key: str, value: Any, indent_factor: int, indent: int
) -> None:
    writer.write(quote(key))
    writer.write(":")
    if indent_factor > 0:
        writer.write(" ")
    write_value(writer, value, indent_factor, indent)


def write_object(
    writer: IO[str],
    members: "containers.JSONObject | Mapping[str, Any]",
    indent_factor: int,
    indent: int,
) -> None:
    """Writes key/value pairs between braces, in insertion order."""
    items = list(members.items())
    with ProfileContext("write_object", len(items)):
        writer.write("{")
        if len(items) == 1:
            key, value = items[0]
            _write_member(writer, key, value, indent_factor, indent)
        elif items:
            new_indent = indent + indent_factor
            for i, (key, value) in enumerate(items):
                if i:
                    writer.write(",")
                if indent_factor > 0:
                    writer.write("\n")
                write_indent(writer, new_indent)
                _write_member(writer, key, value, indent_factor, new_indent)
            if indent_factor > 0:
                writer.write("\n")
            write_indent(writer, indent)
        writer.write("}")


def value_to_string(value: Any, indent_factor: int = 0) -> str:
    """Returns the JSON text of a single value."""
    with io.StringIO() as buffer:
        write_value(buffer, value, indent_factor, 0)
        return buffer.getvalue()


__all__ = [
    "quote",
    "value_to_string",
    "write_array",
    "write_indent",
    "write_object",
    "write_value",
]
