"""
Top-level API for fixed_money.

  - Money: fixed-precision amount held as integer minor units
  - Settings and the process-wide settings accessors
  - Free-function operators returning Money

Integer-domain helpers (normalisation, unit operators, formatting) live in
`fixed_money.core`.
"""

from __future__ import annotations

from .money import (
    Money,
    add,
    subtract,
    multiply,
    divide,
    percent,
    negate,
)

from .core import (
    Settings,
    DEFAULT_SETTINGS,
    get_settings,
    set_settings,
    reset_settings,
    to_units,
    units_with_precision,
    equal,
    less_than,
    less_than_or_equal,
    greater_than,
    greater_than_or_equal,
    format_units,
    format_display,
    MoneyError,
    InvalidConstruction,
    InvalidInput,
    InvalidSettings,
    DivisionByZero,
    InvariantViolation,
)

__version__ = "0.1.0"

__all__ = [
    # value type
    "Money",
    # operators
    "add",
    "subtract",
    "multiply",
    "divide",
    "percent",
    "negate",
    "equal",
    "less_than",
    "less_than_or_equal",
    "greater_than",
    "greater_than_or_equal",
    # settings
    "Settings",
    "DEFAULT_SETTINGS",
    "get_settings",
    "set_settings",
    "reset_settings",
    # normalisation / formatting
    "to_units",
    "units_with_precision",
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
