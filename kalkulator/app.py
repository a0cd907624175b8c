"""Text front end: drive a calculator session with typed commands."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable

from kalkulator.session import OPERATORS, CalculatorSession

_NUMBER = re.compile(r"[0-9.]+")

HELP = (
    "commands: digits and '.', + - * / %, =, neg, back, c, "
    "ms, mr, mc, m>conv, base N TEXT, quit"
)


def _status(session: CalculatorSession) -> str:
    return (
        f"[M {session.memory}] {session.first_number} {session.operation} "
        f"| {session.display}"
    )


def _fields_line(fields: dict[int, str]) -> str:
    return " ".join(f"{base}:{value}" for base, value in sorted(fields.items()))


def _execute(session: CalculatorSession, command: str) -> str:
    lowered = command.lower()
    if _NUMBER.fullmatch(command):
        for char in command:
            if char == ".":
                session.press_point()
            else:
                session.press_digit(char)
    elif command in OPERATORS:
        session.press_operator(command)
    elif command == "=":
        session.equals()
    elif lowered in ("neg", "+/-"):
        session.toggle_sign()
    elif lowered in ("back", "<"):
        session.backspace()
    elif lowered == "c":
        session.clear_display()
    elif lowered == "ms":
        session.store_memory()
    elif lowered == "mr":
        session.recall_memory()
    elif lowered == "mc":
        session.clear_memory()
    elif lowered == "m>conv":
        return _fields_line(session.memory_to_converter())
    elif lowered.split(maxsplit=1)[0] == "base":
        parts = command.split()
        if len(parts) not in (2, 3):
            raise ValueError("usage: base N TEXT")
        try:
            base = int(parts[1])
        except ValueError:
            raise ValueError(f"not a base: {parts[1]!r}") from None
        text = parts[2] if len(parts) == 3 else ""
        return _fields_line(session.converter.edit(base, text))
    elif lowered == "help":
        return HELP
    else:
        raise ValueError(f"unknown command: {command!r}")
    return _status(session)


def run_commands(session: CalculatorSession, commands: Iterable[str]) -> list[str]:
    """Apply each command to the session; return one output line per command."""
    lines = []
    for raw in commands:
        command = raw.strip()
        if not command:
            continue
        try:
            lines.append(_execute(session, command))
        except (ArithmeticError, ValueError) as error:
            lines.append(f"error: {error}")
    return lines


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="kalkulator",
        description="Calculator with memory and conversion between bases 2 to 10.",
        epilog=HELP,
    )
    parser.add_argument(
        "commands",
        nargs="*",
        help="commands to run; without any, commands are read one per line from stdin",
    )
    args = parser.parse_args(argv)
    session = CalculatorSession()
    if args.commands:
        for line in run_commands(session, args.commands):
            print(line)
        return 0
    for raw in sys.stdin:
        command = raw.strip()
        if command.lower() in ("quit", "exit"):
            break
        for line in run_commands(session, [command]):
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())