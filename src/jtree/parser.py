"""
Recursive-descent state machines for arrays and objects.

Both readers consume exactly one container from the tokenizer, leaving it
positioned just past the closing delimiter, and return the members as plain
Python containers for JSONArray / JSONObject to adopt.

Lenient rules shared by both:
- a separator directly followed by the closing delimiter ends the container
- in arrays, a separator with no value before it stands for a null element
"""

from collections.abc import Callable
from typing import TYPE_CHECKING
from typing import Any

from ._profile import ProfileContext
from .values import NULL
from .values import value_to_text

if TYPE_CHECKING:
    from .tokenizer import JSONTokener


def read_array(x: "JSONTokener") -> list[Any]:
    """Reads '[' value, value ... ']' with comma elision."""
    with ProfileContext("read_array"):
        if x.next_clean() != "[":
            raise x.syntax_error("A JSONArray text must start with '['")

        with x.nesting():
            elements: list[Any] = []
            if x.next_clean() == "]":
                return elements
            x.back()

            while True:
                if x.next_clean() == ",":
                    x.back()
                    elements.append(NULL)
                else:
                    x.back()
                    elements.append(x.next_value())

                separator = x.next_clean()
                if separator == ",":
                    if x.next_clean() == "]":
                        return elements
                    x.back()
                elif separator == "]":
                    return elements
                else:
                    raise x.syntax_error("Expected a ',' or ']'")


def read_object(x: "JSONTokener") -> dict[str, Any]:
    """
    Reads '{' key: value, ... '}'.

    Keys may be quoted strings or bare words; any value is accepted as a key
    and converted to its text form. Pairs may be separated by ',' or ';'.
    Repeated keys are rejected.
    """
    with ProfileContext("read_object"):
        if x.next_clean() != "{":
            raise x.syntax_error("A JSONObject text must begin with '{'")

        with x.nesting():
            members: dict[str, Any] = {}
            while True:
                char = x.next_clean()
                if not char:
                    raise x.syntax_error("A JSONObject text must end with '}'")
                if char == "}":
                    return members
                x.back()
                key = value_to_text(x.next_value())

                if x.next_clean() != ":":
                    raise x.syntax_error("Expected a ':' after a key")
                value = x.next_value()
                if key in members:
                    raise x.syntax_error(f'Duplicate key "{key}"')
                members[key] = value

                separator = x.next_clean()
                if separator in (",", ";"):
                    if x.next_clean() == "}":
                        return members
                    x.back()
                elif separator == "}":
                    return members
                else:
                    raise x.syntax_error("Expected a ',' or '}'")


def read_document[T](read: Callable[["JSONTokener"], T], x: "JSONTokener") -> T:
    """
    Runs a top-level read.

    Input nested deeper than the interpreter stack allows is reported as a
    syntax error rather than a RecursionError.
    """
    try:
        return read(x)
    except RecursionError:
        raise x.syntax_error("Maximum nesting depth exceeded") from None
