"""bf-syntax public API."""

from .ast import Expression, Loop, Operator, Program
from .lexer import tokenize
from .parser import ParseError, Source, attempt, parse, parse_program
from .render import render, to_data
from .symbol import Symbol

__all__ = [
    "parse",
    "parse_program",
    "ParseError",
    "Source",
    "attempt",
    "tokenize",
    "render",
    "to_data",
    "Symbol",
    "Expression",
    "Loop",
    "Operator",
    "Program",
]
