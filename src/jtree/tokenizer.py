"""
Single-pass tokenizer for the lenient JSON grammar.

The tokenizer is an index-based cursor over the source text with one
character of pushback. It produces raw characters, strings and complete
values on demand; arrays and objects are handed to the parser, which calls
back into the tokenizer for their members.

Accepted beyond strict JSON: single-quoted strings and unquoted bare words,
which are classified as booleans, null, numbers or plain strings.
"""

import logging
import string
from collections.abc import Iterator
from contextlib import contextmanager
from typing import IO
from typing import Any

from . import containers
from ._profile import ProfileContext
from .config import DEFAULT_PARSE_CONFIG
from .config import ParseConfig
from .errors import JSONSyntaxError
from .errors import Position
from .values import string_to_value

logger = logging.getLogger(__name__)

_ESCAPES = {
    "b": "\b",
    "t": "\t",
    "n": "\n",
    "f": "\f",
    "r": "\r",
    '"': '"',
    "'": "'",
    "\\": "\\",
    "/": "/",
}

# Characters that end an unquoted value
_UNQUOTED_STOP = frozenset(',:]}/\\"[{;=#')

_HEX_DIGITS = frozenset(string.hexdigits)


class JSONTokener:
    """
    Cursor over JSON text with one character of pushback.

    next() returns "" once the input is exhausted. back() undoes the most
    recent read; it cannot be applied twice in a row.
    """

    def __init__(
        self, source: str | IO[str], config: ParseConfig | None = None
    ) -> None:
        if isinstance(source, str):
            text = source
        elif hasattr(source, "read"):
            text = source.read()
        else:
            raise TypeError(
                "the JSON source must be str or a text stream, "
                f"not {type(source).__name__}"
            )
        if not isinstance(text, str):
            raise TypeError(
                f"the JSON source must be str, not {type(text).__name__}"
            )

        self.text = text
        self.length = len(text)
        self.pos: Position = 0
        self.config = config if config is not None else DEFAULT_PARSE_CONFIG
        self.depth = 0
        self.eof = False
        self._last_step = 0
        self._stepped_back = False
        self._has_read = False

    def __str__(self) -> str:
        err = self.syntax_error("")
        return f" at {self.pos} [character {err.colno} line {err.lineno}]"

    def __repr__(self) -> str:
        return f"JSONTokener(pos={self.pos}, length={self.length})"

    def back(self) -> None:
        """Steps back one character so the next read returns it again."""
        if self._stepped_back or not self._has_read:
            raise self.syntax_error("Stepping back two steps is not supported")
        self.pos -= self._last_step
        self._stepped_back = True
        self.eof = False

    def end(self) -> bool:
        """True once a read has hit the end of input."""
        return self.eof and not self._stepped_back

    def more(self) -> bool:
        """True if at least one character is left to read."""
        self.next()
        if self.end():
            return False
        self.back()
        return True

    def next(self) -> str:
        """Returns the next character, or "" at end of input."""
        self._stepped_back = False
        self._has_read = True
        if self.pos >= self.length:
            self.eof = True
            self._last_step = 0
            return ""
        char = self.text[self.pos]
        self.pos += 1
        self._last_step = 1
        return char

    def next_n(self, n: int) -> str:
        """Returns the next n characters."""
        if n == 0:
            return ""
        if self.pos + n > self.length:
            self.pos = self.length
            self.eof = True
            raise self.syntax_error("Substring bounds error")
        chunk = self.text[self.pos : self.pos + n]
        self.pos += n
        self._last_step = 1
        self._stepped_back = False
        self._has_read = True
        return chunk

    def expect(self, char: str) -> str:
        """Consumes the next character, which must be char."""
        found = self.next()
        if found != char:
            raise self.syntax_error(
                f"Expected '{char}' and instead saw '{found}'"
            )
        return found

    def next_clean(self) -> str:
        """Skips whitespace and control characters, returns the next one."""
        with ProfileContext("next_clean"):
            while True:
                char = self.next()
                if not char or char > " ":
                    return char

    def next_string(self, quote: str) -> str:
        """
        Reads a string up to the closing quote.

        The opening quote has already been consumed. A raw newline, carriage
        return or end of input inside the string is an error.
        """
        with ProfileContext("next_string"):
            chunks: list[str] = []
            while True:
                char = self.next()
                if char in ("", "\n", "\r"):
                    raise self.syntax_error("Unterminated string")
                if char == "\\":
                    char = self.next()
                    if char in _ESCAPES:
                        chunks.append(_ESCAPES[char])
                    elif char == "u":
                        chunks.append(self._next_unicode_escape())
                    else:
                        raise self.syntax_error("Illegal escape.")
                elif char == quote:
                    return "".join(chunks)
                else:
                    chunks.append(char)

    def _read_hex4(self) -> int:
        digits = self.next_n(4)
        if not all(c in _HEX_DIGITS for c in digits):
            raise self.syntax_error("Illegal escape.")
        return int(digits, 16)

    def _next_unicode_escape(self) -> str:
        """Decodes \\uXXXX, joining a following low surrogate escape."""
        code = self._read_hex4()
        if not (0xD800 <= code <= 0xDBFF):
            return chr(code)
        if not self.text.startswith("\\u", self.pos):
            return chr(code)

        low_digits = self.text[self.pos + 2 : self.pos + 6]
        if len(low_digits) != 4 or not _HEX_DIGITS.issuperset(low_digits):
            return chr(code)
        low = int(low_digits, 16)
        if not (0xDC00 <= low <= 0xDFFF):
            return chr(code)

        self.next_n(6)
        return chr(0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00))

    def next_to(self, delimiters: str) -> str:
        """
        Reads up to one of the delimiters or the end of the line.

        The delimiter itself is left unread; the result is stripped.
        """
        chars: list[str] = []
        while True:
            char = self.next()
            if not char or char in delimiters or char in "\n\r":
                if char:
                    self.back()
                return "".join(chars).strip()
            chars.append(char)

    def skip_to(self, to: str) -> str:
        """
        Skips ahead to the next occurrence of a character.

        If it is not found the position is left unchanged and "" is returned.
        """
        start = self.pos
        while True:
            char = self.next()
            if not char:
                self.pos = start
                self.eof = False
                return ""
            if char == to:
                self.back()
                return char

    def next_value(self) -> Any:
        """
        Reads the next complete value.

        Quoted text becomes a str, '{' and '[' open a JSONObject or
        JSONArray, and any other run of text is classified by
        string_to_value.
        """
        char = self.next_clean()
        if char in ('"', "'"):
            return self.next_string(char)
        if char == "{":
            self.back()
            return containers.JSONObject(self)
        if char == "[":
            self.back()
            return containers.JSONArray(self)

        with ProfileContext("next_unquoted"):
            chars: list[str] = []
            while char >= " " and char not in _UNQUOTED_STOP:
                chars.append(char)
                char = self.next()
            self.back()

            text = "".join(chars).strip(" ")
            if not text:
                raise self.syntax_error("Missing value")
            return string_to_value(text)

    @contextmanager
    def nesting(self) -> Iterator[None]:
        """Tracks container depth, enforcing ParseConfig.max_depth."""
        max_depth = self.config.max_depth
        if max_depth is not None and self.depth >= max_depth:
            logger.debug(
                "nesting depth %d exceeded at offset %d", max_depth, self.pos
            )
            raise self.syntax_error("Maximum nesting depth exceeded")
        self.depth += 1
        try:
            yield
        finally:
            self.depth -= 1

    def syntax_error(self, message: str) -> JSONSyntaxError:
        """Builds a JSONSyntaxError positioned at the cursor."""
        return JSONSyntaxError(message, self.text, self.pos)


__all__ = ["JSONTokener"]
