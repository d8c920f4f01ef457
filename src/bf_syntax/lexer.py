"""Tokenization of Brainfuck source text."""

from __future__ import annotations

from .symbol import Symbol

_COMMANDS = {symbol.value: symbol for symbol in Symbol if symbol is not Symbol.EOF}


def tokenize(source: str, *, strict: bool = False) -> list[Symbol]:
    """Map each command character of ``source`` to its symbol.

    Every other character is a comment and is skipped, unless ``strict`` is
    set, in which case it raises ``SyntaxError``. No ``Symbol.EOF`` is
    appended; the parser synthesizes it past the end of the sequence.
    """
    symbols: list[Symbol] = []
    for i, ch in enumerate(source):
        symbol = _COMMANDS.get(ch)
        if symbol is not None:
            symbols.append(symbol)
            continue
        if strict and not ch.isspace():
            raise SyntaxError(f"Unexpected character {ch!r} at index {i}")
    return symbols
