"""Serialize value trees back to S-expression text."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Final

from .value import DIGIT_CHUNK, Atom, Float, Integer, List, Value

_CLOSE: Final = object()
_SPACE: Final = object()


def _format_int(number: int) -> str:
    magnitude = abs(number)
    base = 10 ** DIGIT_CHUNK
    if magnitude < base:
        return str(number)
    chunks = []
    while magnitude >= base:
        magnitude, chunk = divmod(magnitude, base)
        chunks.append(str(chunk).zfill(DIGIT_CHUNK))
    chunks.append(str(magnitude))
    sign = "-" if number < 0 else ""
    return sign + "".join(reversed(chunks))


def _format_float(number: float) -> str:
    text = repr(number)
    if not math.isfinite(number):
        return text
    # Exponent notation would re-parse as a string atom.
    if "e" in text:
        text = format(Decimal(text), "f")
    if "." not in text:
        text += ".0"
    return text


def _render_atom(value: object) -> str:
    if isinstance(value, Atom):
        if " " in value.value:
            return f'"{value.value}"'
        return value.value
    if isinstance(value, Integer):
        return _format_int(value.value)
    if isinstance(value, Float):
        return _format_float(value.value)
    raise TypeError(f"unexpected type in S-expression: {type(value).__name__}")


def render(value: Value) -> str:
    """Return the canonical text of ``value``.

    Atoms containing a space are wrapped in double quotes; no other character
    forces quoting and nothing is escaped, so an atom holding a literal ``"``
    does not survive a round trip.  Lists are walked with an explicit stack,
    so nesting depth is not bounded by the interpreter's recursion limit.

    Raises:
        TypeError: If ``value`` (or any node below it) is not a value node.

    """
    out: list[str] = []
    pending: list[object] = [value]
    while pending:
        node = pending.pop()
        if node is _CLOSE:
            out.append(")")
        elif node is _SPACE:
            out.append(" ")
        elif isinstance(node, List):
            out.append("(")
            pending.append(_CLOSE)
            last = len(node.items) - 1
            for i, child in enumerate(reversed(node.items)):
                pending.append(child)
                if i < last:
                    pending.append(_SPACE)
        else:
            out.append(_render_atom(node))
    return "".join(out)
