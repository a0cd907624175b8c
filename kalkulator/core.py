"""Arithmetic on two registers and conversions between positional numeral systems."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")

MIN_BASE = 2
MAX_BASE = 10


def _check_base(base: int) -> None:
    if not MIN_BASE <= base <= MAX_BASE:
        raise ValueError(f"base must be between {MIN_BASE} and {MAX_BASE}, got {base}")


def _parse_long(text: str) -> int:
    """Read a signed 64-bit integer; anything unreadable or out of range reads as 0."""
    stripped = text.strip()
    if not _INTEGER.fullmatch(stripped):
        return 0
    value = int(stripped)
    return value if _INT64_MIN <= value <= _INT64_MAX else 0


def _digits_to_decimal(value: int, base: int) -> int:
    """Treat the decimal digits of ``value`` as digits in ``base``."""
    result = 0
    weight = 1
    while value > 0:
        value, digit = divmod(value, 10)
        result += weight * digit
        weight *= base
    return result


def _decimal_to_digits(value: int, base: int) -> str:
    """Write ``value`` in ``base``; zero and negative values give an empty string."""
    digits = []
    while value > 0:
        value, digit = divmod(value, base)
        digits.append(str(digit))
    return "".join(reversed(digits))


def to_decimal(base: int, number: str) -> str:
    """Convert a number written in ``base`` to base 10.

    The parts before and after the point are converted independently,
    each read as a whole number.
    """
    _check_base(base)
    if "." in number:
        whole, _, fraction = number.partition(".")
        return (
            f"{_digits_to_decimal(_parse_long(whole), base)}"
            f".{_digits_to_decimal(_parse_long(fraction), base)}"
        )
    return str(_digits_to_decimal(_parse_long(number), base))


def from_decimal(base: int, number: str) -> str:
    """Convert a base-10 number to ``base``.

    The parts before and after the point are converted independently;
    a part equal to zero is written as nothing.
    """
    _check_base(base)
    if "." in number:
        whole, _, fraction = number.partition(".")
        return (
            f"{_decimal_to_digits(_parse_long(whole), base)}"
            f".{_decimal_to_digits(_parse_long(fraction), base)}"
        )
    return _decimal_to_digits(_parse_long(number), base)


def format_number(value: float) -> str:
    """Format a float with six significant digits, dropping trailing zeros."""
    return format(value, ".6g")


@dataclass
class Calculator:
    """Two operand registers and a result register."""

    a: float = 0.0
    b: float = 0.0
    mem: float = 0.0

    def add(self) -> float:
        self.mem = self.a + self.b
        return self.mem

    def subtract(self) -> float:
        self.mem = self.a - self.b
        return self.mem

    def divide(self) -> float:
        self.mem = self.a / self.b
        return self.mem

    def multiply(self) -> float:
        self.mem = self.a * self.b
        return self.mem

    def remainder(self) -> float:
        """Remainder of ``a / b`` with the quotient truncated toward zero."""
        self.mem = self.a - math.trunc(self.a / self.b) * self.b
        return self.mem

    def apply(self, operation: str) -> float:
        """Run the operation named by its symbol; an unknown symbol leaves ``mem`` as it is."""
        operations = {
            "+": self.add,
            "-": self.subtract,
            "/": self.divide,
            "*": self.multiply,
            "%": self.remainder,
        }
        action = operations.get(operation)
        if action is not None:
            action()
        return self.mem