"""
JSON value trees with a lenient parser and a canonical writer.

Text is read by a single-pass tokenizer into JSONArray / JSONObject trees of
booleans, numbers, strings and NULL. The trees offer typed accessors that
coerce between representations, and write back to strict JSON, either
compact or indented.

The parser accepts a superset of JSON: trailing commas, elided array
elements, single-quoted strings and unquoted bare words.
"""

from typing import IO
from typing import Any

from ._profile import HotPathStats
from ._profile import clear_hot_path_stats
from ._profile import get_hot_path_stats
from .config import ParseConfig
from .containers import JSONArray
from .containers import JSONObject
from .containers import get_names
from .containers import wrap
from .errors import ErrorKind
from .errors import InvalidValueError
from .errors import JSONError
from .errors import JSONIndexError
from .errors import JSONSyntaxError
from .errors import JSONTypeError
from .errors import JSONWriteError
from .parser import read_document
from .serializer import quote
from .serializer import value_to_string
from .serializer import write_value
from .tokenizer import JSONTokener
from .values import NULL
from .values import JSONNull
from .values import number_to_string
from .values import string_to_value
from .values import test_validity

__version__ = "0.1.0"


def loads(s: str, config: ParseConfig | None = None) -> Any:
    """
    Parses one value from text.

    Anything other than whitespace after the value is rejected as extra
    data.
    """
    if not isinstance(s, str):
        raise TypeError(f"the JSON object must be str, not {type(s).__name__}")

    # Check for UTF-8 BOM and reject it
    if s.startswith("\ufeff"):
        raise JSONSyntaxError(
            "JSON input should not contain BOM (Byte Order Mark)", s, 0
        )

    tokener = JSONTokener(s, config)
    value = read_document(JSONTokener.next_value, tokener)
    if tokener.next_clean():
        raise JSONSyntaxError("Extra data", s, tokener.pos - 1)
    return value


def dumps(value: Any, indent_factor: int = 0) -> str:
    """Returns the JSON text of a value, indented when indent_factor > 0."""
    return value_to_string(value, indent_factor)


def load(fp: IO[str], config: ParseConfig | None = None) -> Any:
    """
    Parses one value from a file-like object.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return loads(fp.read(), config)


def dump(value: Any, fp: IO[str], indent_factor: int = 0) -> None:
    """
    Writes the JSON text of a value to a file-like object.
    """
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    try:
        write_value(fp, value, indent_factor, 0)
    except OSError as e:
        raise JSONWriteError(f"Unable to write value: {e}") from e


__all__ = [
    "NULL",
    "ErrorKind",
    "HotPathStats",
    "InvalidValueError",
    "JSONArray",
    "JSONError",
    "JSONIndexError",
    "JSONNull",
    "JSONObject",
    "JSONSyntaxError",
    "JSONTokener",
    "JSONTypeError",
    "JSONWriteError",
    "ParseConfig",
    "clear_hot_path_stats",
    "dump",
    "dumps",
    "get_hot_path_stats",
    "get_names",
    "load",
    "loads",
    "number_to_string",
    "quote",
    "string_to_value",
    "test_validity",
    "value_to_string",
    "wrap",
]
