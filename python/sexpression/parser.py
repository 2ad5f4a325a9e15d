"""Single-pass S-expression parser.

Syntax accepted:

* ``(`` and ``)`` delimit lists; space, tab and newline separate tokens.
* ``"`` toggles quoting.  Quoted text keeps spaces, parentheses and newlines
  and is never read as a number.  There are no escape sequences.
* ``;;`` starts a comment running to the end of the line; ``(;`` and ``;)``
  delimit block comments, which nest.
* ``\\r`` is dropped everywhere.
* A bare token matching ``-?[0-9]+`` becomes an :class:`~sexpression.value.Integer`,
  one matching ``-?[0-9.]+`` or a lone ``-`` a :class:`~sexpression.value.Float`;
  anything else stays an :class:`~sexpression.value.Atom`.

Lists are tracked on an explicit stack, so nesting is bounded only by
``max_depth``.

End of input closes whatever is still open: an unterminated list, quote or
block comment is not an error.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Final, Protocol, Union

from .errors import NestingError, NumericFormatError, ParseError, StructuralError
from .value import Atom, List, Value, classify

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH: Final[int] = 512

_CHUNK_SIZE: Final[int] = 8192
_BLANKS: Final[str] = " \t\n"


class TextSource(Protocol):
    """Anything with a text ``read(size)`` method, such as an open file."""

    def read(self, size: int = ..., /) -> str: ...


Source = Union[str, bytes, bytearray, TextSource]


@dataclass
class Cursor:
    """Position of the parser in its input.

    ``offset`` counts every character consumed.  ``column`` counts characters
    since the last newline, which resets it to 0 and advances ``line``.
    """

    offset: int = 0
    line: int = 1
    column: int = 0

    def advance(self, ch: str) -> None:
        self.offset += 1
        if ch == "\n":
            self.line += 1
            self.column = 0
        else:
            self.column += 1


class _CharStream:
    """Buffered character reader with one character of lookahead."""

    def __init__(self, stream: TextSource) -> None:
        self._stream = stream
        self._buffer = ""
        self._pos = 0

    def _fill(self) -> bool:
        if self._pos < len(self._buffer):
            return True
        chunk = self._stream.read(_CHUNK_SIZE)
        if not isinstance(chunk, str):
            raise TypeError(f"expected a text stream, read() returned {type(chunk).__name__}")
        self._buffer = chunk
        self._pos = 0
        return bool(chunk)

    def peek(self) -> str:
        """Return the next character without consuming it, or ``""`` at the end."""
        if not self._fill():
            return ""
        return self._buffer[self._pos]

    def read(self) -> str:
        """Consume and return the next character, or ``""`` at the end."""
        if not self._fill():
            return ""
        ch = self._buffer[self._pos]
        self._pos += 1
        return ch


class _Frame:
    """Parse state of one list level: finished children and the pending token."""

    def __init__(self) -> None:
        self.items: list[Value] = []
        self.token: list[str] | None = None
        self.token_quoted = False
        self.in_quotes = False

    def extend_token(self, ch: str) -> None:
        if self.token is None:
            self.token = []
        self.token.append(ch)

    def open_quote(self) -> None:
        self.in_quotes = True
        self.token_quoted = True
        if self.token is None:
            self.token = []


class Parser:
    """Parser over one input stream.

    The stream is borrowed: it is read to the end (or to the first error)
    but never closed.
    """

    def __init__(self, stream: TextSource, *, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        self._chars = _CharStream(stream)
        self.cursor = Cursor()
        self.max_depth = max_depth

    def parse(self) -> Value:
        """Parse the whole input.

        Returns:
            The single bare token when that is all the input holds, otherwise
            a :class:`~sexpression.value.List` of the top-level forms.

        Raises:
            StructuralError:    On ``(`` inside a token or an unmatched ``)``.
            NumericFormatError: On a malformed numeric token.
            NestingError:       When lists nest deeper than ``max_depth``.

        """
        return self._parse_forms()

    def _read(self) -> str:
        ch = self._chars.read()
        if ch:
            self.cursor.advance(ch)
        return ch

    def _error(self, kind: type[ParseError], message: str, *, at_end: bool = False) -> ParseError:
        offset = self.cursor.offset if at_end else self.cursor.offset - 1
        return kind(message, offset, self.cursor.line, self.cursor.column)

    def _box(self, text: str, quoted: bool, at_end: bool) -> Value:
        if quoted:
            return Atom(text)
        try:
            return classify(text)
        except ValueError as e:
            raise self._error(NumericFormatError, f"could not parse number '{text}'", at_end=at_end) from e

    def _flush(self, frame: _Frame, *, box: bool = True, at_end: bool = False) -> None:
        if frame.token is None:
            return
        text = "".join(frame.token)
        quoted = frame.token_quoted
        frame.token = None
        frame.token_quoted = False
        frame.items.append(self._box(text, quoted, at_end) if box else Atom(text))

    def _parse_forms(self) -> Value:
        # One frame per open list; stack[0] collects the top-level forms.
        stack = [_Frame()]
        in_line_comment = False
        block_depth = 0
        while True:
            ch = self._read()
            if not ch:
                break
            frame = stack[-1]

            if in_line_comment:
                if ch == "\n":
                    in_line_comment = False
                continue
            if block_depth:
                if ch == "(" and self._chars.peek() == ";":
                    self._read()
                    block_depth += 1
                elif ch == ";" and self._chars.peek() == ")":
                    self._read()
                    block_depth -= 1
                continue
            if ch == "\r":
                continue
            if frame.in_quotes:
                if ch == '"':
                    frame.in_quotes = False
                else:
                    frame.extend_token(ch)
                continue

            if ch == "(" and self._chars.peek() == ";":
                self._read()
                self._flush(frame, box=False)
                block_depth = 1
            elif ch == ";" and self._chars.peek() == ";":
                self._read()
                self._flush(frame, box=False)
                in_line_comment = True
            elif ch == "(":
                if frame.token is not None:
                    raise self._error(
                        StructuralError,
                        f'unexpected ( inside token starting with "{"".join(frame.token)}"',
                    )
                if len(stack) > self.max_depth:
                    raise self._error(NestingError, f"too deeply nested (limit {self.max_depth})")
                stack.append(_Frame())
            elif ch == ")":
                if len(stack) == 1:
                    raise self._error(StructuralError, "unexpected )")
                self._flush(frame)
                stack.pop()
                stack[-1].items.append(List(frame.items))
            elif ch in _BLANKS:
                self._flush(frame)
            elif ch == '"':
                frame.open_quote()
            else:
                frame.extend_token(ch)

        while len(stack) > 1:
            frame = stack.pop()
            self._flush(frame, at_end=True)
            stack[-1].items.append(List(frame.items))

        top = stack[0]
        bare = not top.items and top.token is not None
        self._flush(top, at_end=True)
        if bare:
            return top.items[0]
        return List(top.items)


def parse(source: Source, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Value:
    """Parse S-expressions from ``source``.

    Args:
        source:    A ``str``, UTF-8 ``bytes``/``bytearray``, or a text stream.
                   Streams are read to the end and left open.
        max_depth: Deepest list nesting accepted.

    Returns:
        A :class:`~sexpression.value.List` of every top-level form (empty for
        empty input), or the bare token itself when the input is one token.

    Raises:
        ParseError: If the input is malformed.
        TypeError:  If ``source`` is none of the accepted types.

    """
    if isinstance(source, (bytes, bytearray)):
        source = bytes(source).decode("utf-8")
    if isinstance(source, str):
        stream: TextSource = io.StringIO(source)
    elif callable(getattr(source, "read", None)):
        stream = source
    else:
        raise TypeError(f"expected str, bytes or a text stream, not {type(source).__name__}")

    logger.debug(f"parsing from {type(source).__name__} (max_depth={max_depth})")
    parser = Parser(stream, max_depth=max_depth)
    result = parser.parse()
    logger.debug(f"parsed {parser.cursor.offset} characters over {parser.cursor.line} lines")
    return result
