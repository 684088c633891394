"""
Money: integer minor units with arithmetic, comparison and formatting.

- `Money(units)` / `Money.from_units(units)` take units directly (cents at precision 2).
- `Money.from_amount(value)` / `Money.parse(value)` take a full amount ("19.99", 19.99, Money).

Instances are immutable in practice: every operation returns a new Money.
`set` and `set_units` are the one mutable escape hatch and replace the units in place.

Settings are read at call time and not stored per instance, so changing the
global precision changes how existing units are formatted.
"""

from __future__ import annotations

import math
from typing import Any, Mapping, Optional

from .core.constants import MAX_SAFE_UNITS
from .core.exc import InvalidConstruction, InvariantViolation
from .core.fmt import format_display, format_units
from .core.ops import (
    add_units,
    subtract_units,
    negate_units,
    multiply_units,
    divide_units,
    percent_units,
    equal,
    less_than,
    less_than_or_equal,
    greater_than,
    greater_than_or_equal,
)
from .core.settings import Settings, get_settings, set_settings, reset_settings
from .core.units import UnitsHolder, is_number, to_units


def _is_safe_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        if not value.is_integer():
            return False
    elif not isinstance(value, int):
        return False
    return abs(value) <= MAX_SAFE_UNITS


class Money(UnitsHolder):
    """Fixed-precision amount held as signed integer units."""

    __slots__ = ("_units",)

    # Mutable through set()/set_units(); equal values must not share a hash.
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, units: int):
        if not _is_safe_integer(units):
            raise InvalidConstruction(units)
        self._units = int(units)

    # ------------- constructors -------------

    @classmethod
    def from_units(cls, units: int) -> "Money":
        """New instance from a unit count (cents at precision 2)."""
        return cls(units)

    @classmethod
    def cents_of(cls, units: int) -> "Money":
        """Alias for `from_units`."""
        return cls(units)

    @classmethod
    def from_amount(cls, value: Any, settings: Optional[Settings] = None) -> "Money":
        """New instance from Money, a number or text, e.g. Money.from_amount("19.99")."""
        return cls(to_units(value, settings))

    @classmethod
    def parse(cls, value: Any, settings: Optional[Settings] = None) -> "Money":
        """Alias for `from_amount`."""
        return cls.from_amount(value, settings)

    @classmethod
    def zero(cls) -> "Money":
        return cls(0)

    # ------------- units -------------

    @property
    def units(self) -> int:
        return self._units

    @property
    def cents(self) -> int:
        """Alias for `units`."""
        return self.units

    def set_units(self, units: Any) -> None:
        """Replace the units in place, truncating a finite number toward zero."""
        if not is_number(units):
            raise InvalidConstruction(units)
        if not abs(units) < MAX_SAFE_UNITS + 1:
            raise InvalidConstruction(units)
        truncated = math.trunc(units)
        if not _is_safe_integer(truncated):
            raise InvalidConstruction(units)
        self._units = truncated

    def set(self, value: Any) -> None:
        """Replace the units in place with the normalised `value`."""
        self.set_units(to_units(value))

    def clone(self) -> "Money":
        return type(self)(self._units)

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return self._units == 0

    def is_negative(self) -> bool:
        return self._units < 0

    def is_positive(self) -> bool:
        return self._units > 0

    def assert_finite(self) -> "Money":
        """Raise InvariantViolation unless units is a safe integer.

        The constructor and mutators already guarantee this; kept as a debug check.
        """
        if not isinstance(self._units, int) or not _is_safe_integer(self._units):
            raise InvariantViolation(f"Invalid value: {self._units!r}")
        return self

    def __bool__(self) -> bool:
        return self._units != 0

    # ------------- comparisons -------------

    def equals(self, value: Any) -> bool:
        return equal(self, value)

    def less_than(self, value: Any) -> bool:
        return less_than(self, value)

    def less_than_or_equal_to(self, value: Any) -> bool:
        return less_than_or_equal(self, value)

    def greater_than(self, value: Any) -> bool:
        return greater_than(self, value)

    def greater_than_or_equal_to(self, value: Any) -> bool:
        return greater_than_or_equal(self, value)

    def __eq__(self, other: object) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return equal(self, other)

    def __lt__(self, other: Any) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return less_than(self, other)

    def __le__(self, other: Any) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return less_than_or_equal(self, other)

    def __gt__(self, other: Any) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return greater_than(self, other)

    def __ge__(self, other: Any) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return greater_than_or_equal(self, other)

    # ------------- arithmetic -------------

    def add(self, value: Any) -> "Money":
        return add(self, value)

    def plus(self, value: Any) -> "Money":
        """Alias for `add`."""
        return add(self, value)

    def subtract(self, value: Any) -> "Money":
        return subtract(self, value)

    def minus(self, value: Any) -> "Money":
        """Alias for `subtract`."""
        return subtract(self, value)

    def multiply(self, factor: Any) -> "Money":
        return multiply(self, factor)

    def times(self, factor: Any) -> "Money":
        """Alias for `multiply`."""
        return multiply(self, factor)

    def divide(self, divisor: Any) -> "Money":
        return divide(self, divisor)

    def divided_by(self, divisor: Any) -> "Money":
        """Alias for `divide`."""
        return divide(self, divisor)

    def percent(self, pct: Any) -> "Money":
        return percent(self, pct)

    def negated(self) -> "Money":
        return negate(self)

    def __add__(self, other: Any) -> "Money":
        if not _is_operand(other):
            return NotImplemented
        return add(self, other)

    def __radd__(self, other: Any) -> "Money":
        if not _is_operand(other):
            return NotImplemented
        return add(other, self)

    def __sub__(self, other: Any) -> "Money":
        if not _is_operand(other):
            return NotImplemented
        return subtract(self, other)

    def __rsub__(self, other: Any) -> "Money":
        if not _is_operand(other):
            return NotImplemented
        return subtract(other, self)

    def __mul__(self, factor: Any) -> "Money":
        if not _is_operand(factor) or isinstance(factor, Money):
            return NotImplemented
        return multiply(self, factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: Any) -> "Money":
        if not _is_operand(divisor) or isinstance(divisor, Money):
            return NotImplemented
        return divide(self, divisor)

    def __neg__(self) -> "Money":
        return negate(self)

    def __pos__(self) -> "Money":
        return self.clone()

    def __abs__(self) -> "Money":
        return negate(self) if self._units < 0 else self.clone()

    # ------------- formatting -------------

    def to_string(self) -> str:
        """Canonical string (-)xx.xx at the current precision."""
        return format_units(self._units)

    def to_fixed(self) -> str:
        """Alias for `to_string`."""
        return self.to_string()

    def format(self, settings: Optional[Settings] = None) -> str:
        """Display string with the configured separator and decimal marker."""
        return format_display(self._units, settings)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(units={self._units})"

    # ------------- settings -------------

    @staticmethod
    def settings() -> Settings:
        """Process-wide settings in effect."""
        return get_settings()

    @staticmethod
    def configure(overrides: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Settings:
        """Replace the process-wide settings with the defaults merged with `overrides`."""
        return set_settings(overrides, **kwargs)

    @staticmethod
    def reset_settings() -> Settings:
        return reset_settings()


def _is_operand(value: Any) -> bool:
    """Operands accepted by Money operators: Money, real numbers and text."""
    return isinstance(value, (Money, str)) or is_number(value)


# ----------------------------
# Free-function API (Money results)
# ----------------------------

def add(lhs: Any, rhs: Any, settings: Optional[Settings] = None) -> Money:
    return Money(add_units(lhs, rhs, settings))


def subtract(lhs: Any, rhs: Any, settings: Optional[Settings] = None) -> Money:
    return Money(subtract_units(lhs, rhs, settings))


def multiply(lhs: Any, factor: Any, settings: Optional[Settings] = None) -> Money:
    return Money(multiply_units(lhs, factor, settings))


def divide(lhs: Any, divisor: Any, settings: Optional[Settings] = None) -> Money:
    return Money(divide_units(lhs, divisor, settings))


def percent(lhs: Any, pct: Any, settings: Optional[Settings] = None) -> Money:
    return Money(percent_units(lhs, pct, settings))


def negate(value: Any, settings: Optional[Settings] = None) -> Money:
    return Money(negate_units(value, settings))


__all__ = [
    "Money",
    "add",
    "subtract",
    "multiply",
    "divide",
    "percent",
    "negate",
]
