"""
Error family raised by jtree.

Every failure surfaced by the library is a JSONError carrying a kind tag, so
callers can catch the whole family at once or a single kind through its
subclass. Parse failures also carry positional diagnostics.
"""

from enum import Enum

type Position = int


class ErrorKind(Enum):
    """Tags the category of a JSONError."""

    SYNTAX = "syntax"
    INDEX = "index"
    TYPE = "type"
    INVALID_VALUE = "invalid_value"
    IO = "io"


class JSONError(ValueError):
    """Base class for every error raised by jtree."""

    kind: ErrorKind = ErrorKind.INVALID_VALUE

    def __init__(self, msg: str) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        self.msg = msg
        super().__init__(msg)


class JSONSyntaxError(JSONError):
    """
    Handles malformed input with precise position information.

    Carries the absolute character offset plus line and column numbers
    computed from the source text to help locate the problem.
    """

    kind = ErrorKind.SYNTAX

    def __init__(self, msg: str, doc: str = "", pos: Position = 0) -> None:
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")
        super().__init__(msg)

        self.doc = doc
        self.pos = pos

        # Compute line and column numbers from position
        self.lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1

        self.args = (
            f"{msg} at line {self.lineno}, column {self.colno} (char {pos})",
        )

    def __reduce__(
        self,
    ) -> tuple[type["JSONSyntaxError"], tuple[str, str, Position]]:
        return self.__class__, (self.msg, self.doc, self.pos)


class JSONIndexError(JSONError, IndexError):
    """A required value is missing or the index is out of range."""

    kind = ErrorKind.INDEX


class JSONTypeError(JSONError, TypeError):
    """A typed accessor could not coerce the stored value."""

    kind = ErrorKind.TYPE


class InvalidValueError(JSONError):
    """A value that cannot be represented in JSON was rejected."""

    kind = ErrorKind.INVALID_VALUE


class JSONWriteError(JSONError):
    """The output sink failed while a value was being written."""

    kind = ErrorKind.IO


__all__ = [
    "ErrorKind",
    "InvalidValueError",
    "JSONError",
    "JSONIndexError",
    "JSONSyntaxError",
    "JSONTypeError",
    "JSONWriteError",
    "Position",
]
