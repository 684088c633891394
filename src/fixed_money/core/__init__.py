"""
fixed_money Core
================

Integer-domain primitives: settings, normalisation, operators and formatting.
All arithmetic runs on integer units; floats only appear while reading input
numbers and multiplication/division factors.
"""

# NOTE:
#   Core functions take an optional `settings` argument. When omitted they read
#   the process-wide Settings once per call.

from .constants import (
    MAX_SAFE_UNITS,
    MIN_SAFE_UNITS,
    pow10,
)

from .settings import (
    Settings,
    DEFAULT_SETTINGS,
    get_settings,
    set_settings,
    reset_settings,
)

# Normalisation
from .units import (
    UnitsHolder,
    parse_float,
    round_half_away,
    units_with_precision,
    to_units,
)

# Operators (integer results)
from .ops import (
    parse_factor,
    add_units,
    subtract_units,
    negate_units,
    multiply_units,
    divide_units,
    percent_units,
    compare,
    equal,
    less_than,
    less_than_or_equal,
    greater_than,
    greater_than_or_equal,
)

# Formatting
from .fmt import (
    format_units,
    format_display,
)

# Core exceptions
from .exc import (
    MoneyError,
    InvalidConstruction,
    InvalidInput,
    InvalidSettings,
    DivisionByZero,
    InvariantViolation,
)

__all__ = [
    # constants
    "MAX_SAFE_UNITS",
    "MIN_SAFE_UNITS",
    "pow10",
    # settings
    "Settings",
    "DEFAULT_SETTINGS",
    "get_settings",
    "set_settings",
    "reset_settings",
    # units
    "UnitsHolder",
    "parse_float",
    "round_half_away",
    "units_with_precision",
    "to_units",
    # ops
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
    # fmt
    "format_units",
    "format_display",
    # exceptions
    "MoneyError",
    "InvalidConstruction",
    "InvalidInput",
    "InvalidSettings",
    "DivisionByZero",
    "InvariantViolation",
]
