"""Parse a Brainfuck source file and print its expression tree."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from bf_syntax import ParseError, parse, render, to_data
from bf_syntax.ast import Expression, Loop, Operator, Program


def _tree_lines(expr: Expression, depth: int = 0) -> list[str]:
    indent = "  " * depth
    if isinstance(expr, Operator):
        return [f"{indent}{expr.symbol.name}"]
    assert isinstance(expr, Loop)
    lines = [f"{indent}LOOP"]
    for item in expr.body:
        lines.extend(_tree_lines(item, depth + 1))
    return lines


def _format(program: Program, fmt: str) -> str:
    if fmt == "json":
        return json.dumps(to_data(program), indent=2)
    if fmt == "source":
        return render(program)
    lines: list[str] = []
    for stmt in program.statements:
        lines.extend(_tree_lines(stmt))
    return "\n".join(lines)


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("source", help="path to a Brainfuck source file, or - for stdin")
    parser.add_argument(
        "--format",
        choices=("tree", "json", "source"),
        default="tree",
        help="output format for the parsed program",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="reject characters that are neither commands nor whitespace",
    )
    parser.add_argument(
        "--json-out",
        default=None,
        help="also write the JSON tree to this path",
    )
    parser.add_argument("--verbose", action="store_true", help="log parser backtracking")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        program = parse(_read_source(args.source), strict=args.strict)
    except ParseError as err:
        print(f"parse error: {err}", file=sys.stderr)
        return 1
    except SyntaxError as err:
        print(f"syntax error: {err}", file=sys.stderr)
        return 1

    print(_format(program, args.format))

    if args.json_out:
        out = Path(args.json_out)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(json.dumps(to_data(program), indent=2), encoding="utf-8")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
