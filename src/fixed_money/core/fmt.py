"""
Formatting helpers: integer units -> decimal strings.

Direct fixed-point conversion (divmod by the scale factor, zero-padded
fraction, sign prepended). No floats are involved.
"""

from typing import Optional, Tuple

from .exc import InvalidConstruction
from .settings import Settings, resolve


def _split(units: int, precision: int) -> Tuple[str, str, str]:
    """Return (sign, integer digits, zero-padded fraction digits)."""
    if isinstance(units, bool) or not isinstance(units, int):
        raise InvalidConstruction(units)
    sign = "-" if units < 0 else ""
    whole, frac = divmod(abs(units), 10 ** precision)
    frac_digits = str(frac).zfill(precision) if precision > 0 else ""
    return sign, str(whole), frac_digits


def format_units(units: int, settings: Optional[Settings] = None) -> str:
    """Canonical form: '-' only when negative, exactly `precision` fraction digits,
    '.' as decimal point and no grouping.

      1232  -> '12.32'
      -5    -> '-0.05'
      700   -> '7.00'
    """
    s = resolve(settings)
    sign, whole, frac = _split(units, s.precision)
    if not frac:
        return f"{sign}{whole}"
    return f"{sign}{whole}.{frac}"


def group_digits(digits: str, separator: str) -> str:
    """Insert `separator` between groups of three digits, from the right."""
    if not separator or len(digits) <= 3:
        return digits
    head = len(digits) % 3 or 3
    groups = [digits[:head]] + [digits[i:i + 3] for i in range(head, len(digits), 3)]
    return separator.join(groups)


def format_display(units: int, settings: Optional[Settings] = None) -> str:
    """Display form using the configured separator and decimal marker.

    With decimal=',' and separator='.': 123456789 -> '1.234.567,89'.
    """
    s = resolve(settings)
    sign, whole, frac = _split(units, s.precision)
    whole = group_digits(whole, s.separator)
    if not frac:
        return f"{sign}{whole}"
    return f"{sign}{whole}{s.decimal}{frac}"


__all__ = [
    "format_units",
    "format_display",
    "group_digits",
]
