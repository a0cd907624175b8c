"""Input checking and cross-updating of numbers shown in bases 2 to 10."""

from __future__ import annotations

import re

from kalkulator.core import MAX_BASE, MIN_BASE, from_decimal, to_decimal


class InvalidNumberError(ValueError):
    """Raised when a text is not a number the field for its base accepts."""


def _pattern(base: int) -> re.Pattern[str]:
    if base == 10:
        return re.compile(r"[0-9]{0,18}(\.[0-9]{0,18})?")
    top = base - 1
    return re.compile(rf"[0-{top}]{{0,19}}(\.[0-{top}]{{0,19}})?")


_PATTERNS = {base: _pattern(base) for base in range(MIN_BASE, MAX_BASE + 1)}


def validate(base: int, text: str) -> str:
    """Return ``text`` if it is acceptable input for ``base``, else raise InvalidNumberError."""
    try:
        pattern = _PATTERNS[base]
    except KeyError:
        raise ValueError(
            f"base must be between {MIN_BASE} and {MAX_BASE}, got {base}"
        ) from None
    if not pattern.fullmatch(text):
        raise InvalidNumberError(f"{text!r} is not a valid base-{base} number")
    return text


class BaseConverter:
    """The same number shown in every base from 2 to 10."""

    def __init__(self) -> None:
        self.fields: dict[int, str] = {
            base: "" for base in range(MIN_BASE, MAX_BASE + 1)
        }

    def __getitem__(self, base: int) -> str:
        return self.fields[base]

    def edit(self, base: int, text: str) -> dict[int, str]:
        """Set the field for ``base`` to ``text`` and update all other fields."""
        validate(base, text)
        return self._propagate(base, text)

    def _propagate(self, base: int, text: str) -> dict[int, str]:
        decimal = text if base == 10 else to_decimal(base, text)
        for target in self.fields:
            if target == base:
                self.fields[target] = text
            elif target == 10:
                self.fields[target] = decimal
            else:
                self.fields[target] = from_decimal(target, decimal)
        return dict(self.fields)