"""The calculator's keypad, display, memory and base converter as one session."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from kalkulator.converter import BaseConverter
from kalkulator.core import Calculator, format_number

OPERATORS = ("+", "-", "/", "*", "%")
_DIVIDING = ("/", "%")
_FLOAT = re.compile(
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?(?:inf|nan)",
    re.IGNORECASE,
)


class DivisionByZeroError(ZeroDivisionError):
    """Raised when a division or remainder by zero is requested."""

    def __init__(self) -> None:
        super().__init__("Nie mozna dizelic przez 0!!!")


def _to_double(text: str) -> float:
    """Read a float the way the display does; unreadable text reads as 0."""
    stripped = text.strip()
    if not _FLOAT.fullmatch(stripped):
        return 0.0
    return float(stripped)


@dataclass
class CalculatorSession:
    """State behind the calculator window: entry display, pending operation and memory."""

    display: str = ""
    operation: str = ""
    first_number: str = ""
    memory: str = ""
    calculator: Calculator = field(default_factory=Calculator)
    converter: BaseConverter = field(default_factory=BaseConverter)

    def press_digit(self, digit: int | str) -> str:
        """Append a decimal digit to the display."""
        text = str(digit)
        if len(text) != 1 or text not in "0123456789":
            raise ValueError(f"not a decimal digit: {digit!r}")
        self.display += text
        return self.display

    def press_point(self) -> str:
        """Append a decimal point unless the display already has one."""
        if "." not in self.display:
            self.display += "."
        return self.display

    def backspace(self) -> str:
        """Remove the last character of the display."""
        self.display = self.display[:-1]
        return self.display

    def clear_display(self) -> None:
        """Clear the entry, the pending operation and the first operand."""
        self.display = ""
        self.operation = ""
        self.first_number = ""

    def recall_memory(self) -> str:
        """Copy the memory into the display, if the memory holds anything."""
        if self.memory:
            self.display = self.memory
        return self.display

    def clear_memory(self) -> None:
        self.memory = ""

    def store_memory(self) -> str:
        """Move the display into memory when no operation is pending."""
        if self.display and not self.operation and not self.first_number:
            self.memory = self.display
            self.display = ""
        return self.memory

    def memory_to_converter(self) -> dict[int, str]:
        """Show the memory, without its sign, in every base of the converter."""
        text = self.memory
        if text:
            if text.startswith("-"):
                text = text[1:]
            return self.converter._propagate(10, text)
        return dict(self.converter.fields)

    def _compute(self, operation: str) -> None:
        self.calculator.b = _to_double(self.display)
        if self.calculator.b == 0 and operation in _DIVIDING:
            self.display = ""
            raise DivisionByZeroError()
        result = self.calculator.apply(operation)
        self.memory = format_number(result)
        self.calculator.a = result

    def press_operator(self, symbol: str) -> None:
        """Start an operation, or finish the pending one and chain the next."""
        if symbol not in OPERATORS:
            raise ValueError(f"unknown operator: {symbol!r}")
        if not self.operation:
            if self.display:
                self.calculator.a = _to_double(self.display)
                self.first_number = format_number(self.calculator.a)
                self.operation = symbol
                self.display = ""
            return
        if not self.display:
            self.operation = symbol
            return
        self._compute(self.operation)
        self.first_number = format_number(self.calculator.a)
        self.operation = symbol
        self.display = ""

    def equals(self) -> str:
        """Finish the pending operation; the result goes to memory."""
        if self.display:
            self._compute(self.operation)
            self.first_number = ""
            self.operation = ""
            self.display = ""
        return self.memory

    def toggle_sign(self) -> str:
        """Flip the sign of the entry; on an empty display start a negative number."""
        if self.display:
            if self.display.startswith("-"):
                self.display = self.display[1:]
            else:
                self.display = "-" + self.display
        else:
            self.display = "-"
        return self.display