"""
fixed_money Core Constants (integer domain)
===========================================

Integer bounds and the default settings baseline. Formatting lives in `fmt.py`.
"""

# NOTE: MAX_SAFE_UNITS bounds the units held by Money, not intermediate products.

# ---------------------------------------------------------------------------
# Safe-integer range
# ---------------------------------------------------------------------------

#: Largest integer exactly representable as a binary64 float (2**53 - 1).
MAX_SAFE_UNITS: int = (2 ** 53) - 1
MIN_SAFE_UNITS: int = -MAX_SAFE_UNITS


# ---------------------------------------------------------------------------
# Powers of ten (scale factors)
# ---------------------------------------------------------------------------

POWERS_OF_10 = tuple(10 ** p for p in range(10))


def pow10(p: int) -> int:
    """Return 10**p for p >= 0, using the table for the common precisions."""
    if p < 0:
        raise ValueError("pow10 expects non-negative exponent")
    if p < len(POWERS_OF_10):
        return POWERS_OF_10[p]
    return 10 ** p


# ---------------------------------------------------------------------------
# Default settings baseline
# ---------------------------------------------------------------------------

DEFAULT_SEPARATOR: str = ","
DEFAULT_DECIMAL: str = "."
DEFAULT_ERROR_ON_INVALID: bool = False
DEFAULT_PRECISION: int = 2


__all__ = [
    "MAX_SAFE_UNITS",
    "MIN_SAFE_UNITS",
    "POWERS_OF_10",
    "pow10",
    "DEFAULT_SEPARATOR",
    "DEFAULT_DECIMAL",
    "DEFAULT_ERROR_ON_INVALID",
    "DEFAULT_PRECISION",
]
