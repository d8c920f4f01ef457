"""AST nodes for Brainfuck programs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .symbol import Symbol


@dataclass(frozen=True)
class Operator:
    symbol: Symbol

    def __post_init__(self) -> None:
        if not self.symbol.is_plain:
            raise ValueError(f"{self.symbol!r} is not an operator symbol")


@dataclass(frozen=True)
class Loop:
    body: tuple["Expression", ...]

    def __post_init__(self) -> None:
        if not self.body:
            raise ValueError("Loop body must contain at least one expression")


@dataclass(frozen=True)
class Program:
    statements: tuple["Expression", ...]


Expression = Union[Operator, Loop]
