"""Value model for parsed S-expressions.

A parsed document is a tree of four frozen node types: :class:`Atom`,
:class:`Integer`, :class:`Float` and :class:`List`.  Nodes compare
structurally and never change after construction; ``repr()`` of any node is
its canonical S-expression text.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar, Final, Union

_INTEGER_RE: Final[re.Pattern[str]] = re.compile(r"-?[0-9]+")
_FLOAT_RE: Final[re.Pattern[str]] = re.compile(r"-|-?[0-9.]+")

# Digits per chunk when converting long integers; below the smallest
# setting sys.set_int_max_str_digits accepts.
DIGIT_CHUNK: Final[int] = 600


class Node:
    """Behaviour shared by every node type."""

    is_atom: ClassVar[bool] = True

    def __repr__(self) -> str:
        from .printer import render

        return render(self)  # type: ignore[arg-type]


@dataclass(frozen=True, repr=False)
class Atom(Node):
    """A string token, quoted or bare."""

    value: str


@dataclass(frozen=True, repr=False)
class Integer(Node):
    """A bare token made only of decimal digits with an optional ``-``."""

    value: int


@dataclass(frozen=True, repr=False)
class Float(Node):
    """A bare token made of decimal digits and dots with an optional ``-``."""

    value: float


@dataclass(frozen=True, repr=False)
class List(Node):
    """Ordered, immutable sequence of child nodes.

    ``items`` may be given as any iterable; it is stored as a tuple.
    """

    items: tuple[Value, ...] = ()

    is_atom: ClassVar[bool] = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __getitem__(self, key: int | str) -> Value:
        """Return a child by position, or the first child list headed by ``key``.

        Raises:
            IndexError: If an integer ``key`` is out of range.
            KeyError:   If no child list starts with the atom ``key``.
            TypeError:  If ``key`` is neither ``int`` nor ``str``.

        """
        if isinstance(key, int):
            return self.items[key]
        if isinstance(key, str):
            for child in self.items:
                if isinstance(child, List) and child.items and child.items[0] == Atom(key):
                    return child
            raise KeyError(key)
        raise TypeError(f"list indices must be int or str, not {type(key).__name__}")

    @property
    def head(self) -> Value:
        """First child node.

        Raises:
            IndexError: If the list is empty.

        """
        if not self.items:
            raise IndexError("head of empty list")
        return self.items[0]

    @property
    def tail(self) -> Iterator[Value]:
        """Iterator over all children after the first (i.e. ``items[1:]``)."""
        return iter(self.items[1:])


Value = Union[Atom, Integer, Float, List]


def _parse_int(text: str) -> int:
    digits = text.lstrip("-")
    if len(digits) <= DIGIT_CHUNK:
        return int(text)
    number = 0
    for start in range(0, len(digits), DIGIT_CHUNK):
        chunk = digits[start:start + DIGIT_CHUNK]
        number = number * 10 ** len(chunk) + int(chunk)
    return -number if text.startswith("-") else number


def classify(text: str) -> Atom | Integer | Float:
    """Turn the text of a bare token into the node it denotes.

    Raises:
        ValueError: If ``text`` is made of digits, dots and a leading ``-``
                    but is not a valid float (``-``, ``.``, ``1.2.3``).

    """
    if _INTEGER_RE.fullmatch(text):
        return Integer(_parse_int(text))
    if _FLOAT_RE.fullmatch(text):
        return Float(float(text))
    return Atom(text)
