"""
Arithmetic and comparison over normalised operands (integer domain).

Every operator snapshots the settings once and normalises both sides under that
snapshot, so Money, numbers and text mix freely on either side. Results are
integer units or booleans; `fixed_money.money` wraps units back into Money.

- add/subtract: exact integer arithmetic.
- multiply/divide/percent: the right side is a plain float factor, not an amount;
  the float result is rounded half away from zero.
"""

from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction
from typing import Any, Optional

from .exc import DivisionByZero
from .settings import Settings, resolve
from .units import UnitsHolder, parse_float, round_half_away, to_units

# Debug printing control (operator layer)
DEBUG_OPS = False

def _dbg(msg: str) -> None:
    if DEBUG_OPS:
        print(msg)


def parse_factor(value: Any, settings: Optional[Settings] = None) -> float:
    """Read a multiplier/divisor/percentage as a plain float.

    Numbers are used as-is, Money contributes its decimal value, text is parsed
    as a float prefix. Anything else is NaN.
    """
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float, Decimal, Fraction)):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, UnitsHolder):
        return value.units / resolve(settings).scale
    if isinstance(value, str):
        return parse_float(value)
    return math.nan


# ----------------------------
# Amount [+/-] Amount
# ----------------------------

def add_units(lhs: Any, rhs: Any, settings: Optional[Settings] = None) -> int:
    s = resolve(settings)
    return to_units(lhs, s) + to_units(rhs, s)


def subtract_units(lhs: Any, rhs: Any, settings: Optional[Settings] = None) -> int:
    s = resolve(settings)
    return to_units(lhs, s) - to_units(rhs, s)


def negate_units(value: Any, settings: Optional[Settings] = None) -> int:
    return -to_units(value, settings)


# ----------------------------
# Amount [*,/,%] factor
# ----------------------------

def multiply_units(lhs: Any, rhs: Any, settings: Optional[Settings] = None) -> int:
    s = resolve(settings)
    units = to_units(lhs, s)
    factor = parse_factor(rhs, s)
    _dbg(f"multiply: units={units}, factor={factor}")
    return round_half_away(units * factor)


def divide_units(lhs: Any, rhs: Any, settings: Optional[Settings] = None) -> int:
    """Divide by a float factor. A zero factor raises DivisionByZero."""
    s = resolve(settings)
    units = to_units(lhs, s)
    divisor = parse_factor(rhs, s)
    _dbg(f"divide: units={units}, divisor={divisor}")
    if divisor == 0:
        raise DivisionByZero(f"cannot divide {units} units by zero")
    return round_half_away(units / divisor)


def percent_units(lhs: Any, rhs: Any, settings: Optional[Settings] = None) -> int:
    """`rhs` percent of `lhs`, e.g. percent_units("200", 15) -> 3000 at precision 2."""
    s = resolve(settings)
    units = to_units(lhs, s)
    pct = parse_factor(rhs, s)
    _dbg(f"percent: units={units}, pct={pct}")
    return round_half_away(units * (pct / 100))


# ----------------------------
# Comparisons (integer domain)
# ----------------------------

def compare(lhs: Any, rhs: Any, settings: Optional[Settings] = None) -> int:
    """Return -1, 0 or 1 as lhs is less than, equal to or greater than rhs."""
    s = resolve(settings)
    a, b = to_units(lhs, s), to_units(rhs, s)
    return (a > b) - (a < b)


def equal(lhs: Any, rhs: Any, settings: Optional[Settings] = None) -> bool:
    return compare(lhs, rhs, settings) == 0


def less_than(lhs: Any, rhs: Any, settings: Optional[Settings] = None) -> bool:
    return compare(lhs, rhs, settings) < 0


def less_than_or_equal(lhs: Any, rhs: Any, settings: Optional[Settings] = None) -> bool:
    return compare(lhs, rhs, settings) <= 0


def greater_than(lhs: Any, rhs: Any, settings: Optional[Settings] = None) -> bool:
    return compare(lhs, rhs, settings) > 0


def greater_than_or_equal(lhs: Any, rhs: Any, settings: Optional[Settings] = None) -> bool:
    return compare(lhs, rhs, settings) >= 0


__all__ = [
    "parse_factor",
    "add_units",
    "subtract_units",
    "negate_units",
    "multiply_units",
    "divide_units",
    "percent_units",
    "compare",
    "equal",
    "less_than",
    "less_than_or_equal",
    "greater_than",
    "greater_than_or_equal",
]
