"""Backtracking recursive-descent parser for Brainfuck symbol sequences.

Grammar::

    program    := expression* EOF
    expression := loop | operator
    loop       := "[" expression+ "]"
    operator   := any plain symbol

Every rule runs through :func:`attempt`, which restores the cursor when the
rule fails, so alternatives always start from the same position.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Sequence, TypeVar

from .ast import Expression, Loop, Operator, Program
from .lexer import tokenize
from .symbol import Symbol

logger = logging.getLogger(__name__)

T = TypeVar("T")
Snapshot = int


class ParseError(SyntaxError):
    def __init__(
        self,
        message: str,
        start: int,
        end: int,
        expected: tuple[str, ...] = (),
        found: str | None = None,
        alternatives: tuple["ParseError", ...] = (),
    ) -> None:
        super().__init__(message)
        self.message = message
        self.start = start
        self.end = end
        self.expected = expected
        self.found = found
        self.alternatives = alternatives

    def __str__(self) -> str:
        expected_text = ""
        if self.expected:
            expected_text = f"; expected {', '.join(self.expected)}"
        found_text = ""
        if self.found is not None:
            found_text = f"; found {self.found}"
        text = f"{self.message} at span [{self.start}, {self.end}){expected_text}{found_text}"
        for alternative in self.alternatives:
            nested = str(alternative).replace("\n", "\n  ")
            text += f"\n  - {nested}"
        return text


@dataclass
class Source:
    code: Sequence[Symbol]
    cursor: int = 0

    def next_symbol(self) -> Symbol:
        # Past the end every read yields EOF; the cursor still advances.
        if self.cursor < len(self.code):
            symbol = self.code[self.cursor]
        else:
            symbol = Symbol.EOF
        self.cursor += 1
        return symbol

    def snapshot(self) -> Snapshot:
        return self.cursor

    def restore(self, snapshot: Snapshot) -> None:
        self.cursor = snapshot

    def error(self, symbol: Symbol, *, message: str, expected: tuple[str, ...] = ()) -> ParseError:
        """Build an error for ``symbol``, the symbol most recently read."""
        start = self.cursor - 1
        return ParseError(message, start, start + 1, expected=expected, found=symbol.name)


Rule = Callable[[Source], T]


def attempt(source: Source, rule: Rule[T]) -> T:
    """Run ``rule`` against ``source``, undoing its reads if it fails.

    The rule's ``ParseError`` is re-raised unchanged once the cursor is back
    at the position it had before the call.
    """
    save = source.snapshot()
    try:
        return rule(source)
    except ParseError:
        logger.debug(
            "backtracking %s from %d to %d",
            getattr(rule, "__name__", rule),
            source.cursor,
            save,
        )
        source.restore(save)
        raise


def _parse_operator(source: Source) -> Operator:
    symbol = source.next_symbol()
    if not symbol.is_plain:
        raise source.error(symbol, message="Expected an operator", expected=("operator",))
    return Operator(symbol)


def _parse_loop(source: Source) -> Loop:
    symbol = source.next_symbol()
    if symbol is not Symbol.LEFT_BRACKET:
        raise source.error(symbol, message="Expected left bracket", expected=(Symbol.LEFT_BRACKET.name,))

    body = attempt(source, _parse_expression_list)

    symbol = source.next_symbol()
    if symbol is not Symbol.RIGHT_BRACKET:
        raise source.error(symbol, message="Expected right bracket", expected=(Symbol.RIGHT_BRACKET.name,))
    return Loop(body=tuple(body))


def _parse_expression_list(source: Source) -> list[Expression]:
    # Greedy: accepted expressions are never given back, even if the caller
    # fails afterwards. The caller's attempt() undoes the whole list instead.
    expressions: list[Expression] = []
    while True:
        try:
            expressions.append(attempt(source, _parse_expression))
        except ParseError as exc:
            if expressions:
                return expressions
            raise ParseError(
                "Expected at least one expression",
                exc.start,
                exc.end,
                expected=("expression",),
                found=exc.found,
            ) from exc


def _parse_expression(source: Source) -> Expression:
    try:
        return attempt(source, _parse_loop)
    except ParseError as exc:
        loop_error = exc

    try:
        return attempt(source, _parse_operator)
    except ParseError as exc:
        operator_error = exc

    raise ParseError(
        "Expected an expression",
        operator_error.start,
        operator_error.end,
        expected=("loop", "operator"),
        found=operator_error.found,
        alternatives=(loop_error, operator_error),
    )


def parse_program(symbols: Sequence[Symbol]) -> Program:
    """Parse a whole symbol sequence into a :class:`Program`.

    Expressions are collected until one fails to parse. That failure ends the
    program cleanly when the next symbol is EOF; otherwise it is raised.
    Loops nested deeper than the interpreter's recursion limit allows are
    reported as a ``ParseError`` at the symbol where parsing gave up.
    """
    source = Source(code=symbols)
    statements: list[Expression] = []
    while True:
        try:
            statements.append(attempt(source, _parse_expression))
        except RecursionError as exc:
            position = source.cursor
            logger.debug("nesting too deep at symbol %d", position)
            raise ParseError("Nesting too deep", position, position + 1) from exc
        except ParseError as exc:
            if source.next_symbol() is Symbol.EOF:
                logger.debug("parsed %d statements from %d symbols", len(statements), len(symbols))
                return Program(statements=tuple(statements))
            logger.debug("unparsable input at symbol %d: %s", exc.start, exc.message)
            raise


def parse(source: str, *, strict: bool = False) -> Program:
    """Tokenize ``source`` and run :func:`parse_program` on the symbols."""
    return parse_program(tokenize(source, strict=strict))
