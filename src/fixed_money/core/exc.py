"""
Core exception types for fixed_money.core.

These are dependency-free and may be imported by all core modules.
"""

__all__ = [
    "MoneyError",
    "InvalidConstruction",
    "InvalidInput",
    "InvalidSettings",
    "DivisionByZero",
    "InvariantViolation",
]


class MoneyError(Exception):
    """Base class for every error raised by fixed_money."""
    pass


def _describe(value) -> str:
    """repr() of `value`, or a short stand-in when it is too large to render."""
    try:
        return repr(value)
    except ValueError:
        # int -> str conversion limit
        return f"<{type(value).__name__} too large to display>"


class InvalidConstruction(MoneyError, TypeError):
    """Raised when Money is built from a non-integer or out-of-range unit count.

    Attributes
    ----------
    value : Any
        The rejected value, for context.
    """

    def __init__(self, value):
        super().__init__(f"Integer expected but {_describe(value)} found")
        self.value = value


class InvalidInput(MoneyError, ValueError):
    """Raised by normalisation in strict mode for unsupported input types."""

    def __init__(self, value):
        super().__init__("Invalid Input")
        self.value = value


class InvalidSettings(MoneyError, ValueError):
    """Raised when a settings override is unknown or out of range."""
    pass


class DivisionByZero(MoneyError, ZeroDivisionError):
    """Raised when an amount is divided by a zero factor."""
    pass


class InvariantViolation(MoneyError):
    """Raised when a Money instance holds units outside the safe-integer domain."""
    pass
