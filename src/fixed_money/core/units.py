"""
Normalisation: any accepted amount -> signed integer units.

- Money-like values pass their units through unchanged (no rescaling).
- Finite real numbers are scaled by 10**precision with two-stage rounding.
- Text is cleaned (accounting parentheses, foreign characters, decimal marker)
  and parsed as a float prefix; unparseable text is zero.
- Anything else is zero, or InvalidInput when settings.error_on_invalid is set.

Two-stage rounding: scale by one extra digit, truncate toward zero, then round
half away from zero on that single extra digit. Digits beyond it are ignored,
e.g. 12.315 at precision 2 -> 12315 -> 1231.5 -> 1232.
"""

from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod
from decimal import Decimal
from fractions import Fraction
from typing import Any, Optional

from .constants import MAX_SAFE_UNITS, pow10
from .exc import InvalidConstruction, InvalidInput
from .settings import Settings, resolve

# Debug printing control
DEBUG_UNITS = False

def _dbg(msg: str) -> None:
    if DEBUG_UNITS:
        print(msg)


class UnitsHolder(ABC):
    """Base for values that already carry normalised integer units (Money)."""
    __slots__ = ()

    @property
    @abstractmethod
    def units(self) -> int:
        ...


# ----------------------------
# Numeric text parsing
# ----------------------------

# Longest numeric prefix accepted by a float parser: sign, digits, point, exponent.
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)

# Accounting negatives: "(1.99)" -> "-1.99" (first parenthesised span only)
_PARENS = re.compile(r"\((.*)\)")


def parse_float(text: str) -> float:
    """Parse the longest numeric prefix of `text` after leading whitespace.

    Returns NaN when no prefix parses, e.g. "12.5abc" -> 12.5, "abc" -> nan,
    "1.2.3" -> 1.2, "-" -> nan.
    """
    m = _FLOAT_PREFIX.match(text.lstrip())
    if m is None:
        return math.nan
    token = m.group(0)
    if token.endswith("Infinity"):
        return -math.inf if token.startswith("-") else math.inf
    return float(token)


def clean_text(text: str, decimal: str) -> str:
    """Apply the text rewrites in order: parentheses, strip, decimal marker."""
    s = _PARENS.sub(r"-\1", text, count=1)
    s = re.sub(r"[^-0-9" + re.escape(decimal) + r"]", "", s)
    if decimal != ".":
        s = s.replace(decimal, ".")
    return s


def is_number(value: Any) -> bool:
    """True for finite real numbers; bool is not a number here."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, Fraction)):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, Decimal):
        return value.is_finite()
    return False


# ----------------------------
# Integer rounding helpers (centralised)
# ----------------------------

def round_half_away(x: float) -> int:
    """Round a finite float to the nearest int, halves away from zero."""
    if not math.isfinite(x):
        raise InvalidConstruction(x)
    a = abs(x)
    n = math.floor(a)
    # a - n is exact for binary floats
    if a - n >= 0.5:
        n += 1
    return -n if x < 0 else n


def _round_tenths(t: int) -> int:
    """Round t/10 half away from zero, exactly in the integer domain."""
    q, r = divmod(abs(t), 10)
    if r >= 5:
        q += 1
    return -q if t < 0 else q


def units_with_precision(value: Any, precision: int) -> int:
    """Scale a finite number to units, rounding on the first discarded digit only.

    Floats use binary-float multiplication for the first stage; int, Decimal and
    Fraction inputs are scaled exactly.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal, Fraction)):
        raise InvalidConstruction(value)
    if isinstance(value, Decimal) and not value.is_finite():
        raise InvalidConstruction(value)
    # whole amounts past the bound can never become safe units
    if not abs(value) < MAX_SAFE_UNITS + 1:
        raise InvalidConstruction(value)
    m = pow10(precision + 1)
    if isinstance(value, float):
        scaled = value * m
        if not math.isfinite(scaled):
            raise InvalidConstruction(value)
        t = math.trunc(scaled)
    elif isinstance(value, int):
        t = value * m
    else:
        t = math.trunc(Fraction(value) * m)
    units = _round_tenths(t)
    if DEBUG_UNITS:
        _dbg(f"units_with_precision: value={value!r}, p={precision}, t={t}, units={units}")
    return units


# ----------------------------
# Normalisation entry point
# ----------------------------

def to_units(value: Any, settings: Optional[Settings] = None) -> int:
    """Normalise Money, a number, or text to integer units under `settings`.

    The settings are read once; pass them explicitly to pin a configuration.
    """
    if isinstance(value, UnitsHolder):
        return value.units

    s = resolve(settings)

    if is_number(value):
        v = value
    elif isinstance(value, str):
        cleaned = clean_text(value, s.decimal)
        v = parse_float(cleaned) if cleaned else 0.0
        if math.isnan(v):
            # malformed text is zero, also in strict mode
            _dbg(f"to_units: unparseable text {value!r} -> 0")
            v = 0
    else:
        if s.error_on_invalid:
            raise InvalidInput(value)
        _dbg(f"to_units: unsupported {type(value).__name__} -> 0")
        v = 0

    return units_with_precision(v, s.precision)


__all__ = [
    "UnitsHolder",
    "parse_float",
    "clean_text",
    "is_number",
    "round_half_away",
    "units_with_precision",
    "to_units",
]
