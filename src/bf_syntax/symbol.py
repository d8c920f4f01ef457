"""Token alphabet for Brainfuck programs."""

from __future__ import annotations

from enum import Enum


class Symbol(Enum):
    MOVE_RIGHT = ">"
    MOVE_LEFT = "<"
    PLUS_ONE = "+"
    MINUS_ONE = "-"
    OUTPUT = "."
    INPUT = ","
    LEFT_BRACKET = "["
    RIGHT_BRACKET = "]"
    EOF = ""

    @property
    def is_plain(self) -> bool:
        """True for operator symbols, false for brackets and end of input."""
        return self not in _STRUCTURAL

    def __repr__(self) -> str:
        return f"Symbol.{self.name}"


_STRUCTURAL = frozenset({Symbol.LEFT_BRACKET, Symbol.RIGHT_BRACKET, Symbol.EOF})
