"""Parse and print Lisp-style S-expressions."""

from .errors import NestingError, NumericFormatError, ParseError, StructuralError
from .parser import DEFAULT_MAX_DEPTH, Cursor, Parser, parse
from .printer import render
from .value import Atom, Float, Integer, List, Value, classify

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "Atom",
    "Cursor",
    "Float",
    "Integer",
    "List",
    "NestingError",
    "NumericFormatError",
    "ParseError",
    "Parser",
    "StructuralError",
    "Value",
    "classify",
    "parse",
    "render",
]
