"""
Settings store for parsing and formatting.

`Settings` is a frozen value. Core functions accept one explicitly; when they
are not given one they read the process-wide instance exactly once per call.
Updates replace the whole object: overrides are merged over the defaults, never
over the current settings.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional

from .constants import (
    DEFAULT_SEPARATOR,
    DEFAULT_DECIMAL,
    DEFAULT_ERROR_ON_INVALID,
    DEFAULT_PRECISION,
)
from .exc import InvalidSettings


# camelCase keys accepted by set_settings()
_KEY_ALIASES = {
    "errorOnInvalid": "error_on_invalid",
}


@dataclass(frozen=True)
class Settings:
    """Parsing/formatting configuration.

    separator: thousands separator, used by display formatting only.
    decimal: single-character decimal marker recognised in text input.
    error_on_invalid: raise InvalidInput for unsupported input types instead of using zero.
    precision: number of fractional digits per unit (2 -> cents).
    """
    separator: str = DEFAULT_SEPARATOR
    decimal: str = DEFAULT_DECIMAL
    error_on_invalid: bool = DEFAULT_ERROR_ON_INVALID
    precision: int = DEFAULT_PRECISION

    def __post_init__(self):
        if not isinstance(self.separator, str):
            raise InvalidSettings(f"separator must be str, got {type(self.separator).__name__}")
        if not isinstance(self.decimal, str) or len(self.decimal) != 1:
            raise InvalidSettings(f"decimal must be a single character, got {self.decimal!r}")
        if self.decimal.isdigit() or self.decimal == "-":
            raise InvalidSettings(f"decimal cannot be a digit or '-': {self.decimal!r}")
        if not isinstance(self.error_on_invalid, bool):
            raise InvalidSettings("error_on_invalid must be bool")
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise InvalidSettings(f"precision must be int, got {type(self.precision).__name__}")
        if self.precision < 0:
            raise InvalidSettings(f"precision must be >= 0, got {self.precision}")

    @property
    def scale(self) -> int:
        """Units per whole currency amount (10**precision)."""
        return 10 ** self.precision

    def merged(self, overrides: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> "Settings":
        """Return a copy of these settings with `overrides` applied (one merge level)."""
        changes = dict(overrides or {})
        changes.update(kwargs)
        known = {f.name for f in fields(self)}
        normalised = {}
        for key, value in changes.items():
            name = _KEY_ALIASES.get(key, key)
            if name not in known:
                raise InvalidSettings(f"unknown setting: {key!r}")
            normalised[name] = value
        return replace(self, **normalised)


DEFAULT_SETTINGS = Settings()

_current: Settings = DEFAULT_SETTINGS


def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return _current


def set_settings(overrides: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Settings:
    """Replace the process-wide settings with the defaults merged with `overrides`.

    Accepts a mapping, keyword arguments, or a complete Settings instance.
    """
    global _current
    if isinstance(overrides, Settings):
        if kwargs:
            raise InvalidSettings("cannot combine a Settings instance with keyword overrides")
        _current = overrides
    else:
        _current = DEFAULT_SETTINGS.merged(overrides, **kwargs)
    return _current


def reset_settings() -> Settings:
    """Restore the default baseline."""
    global _current
    _current = DEFAULT_SETTINGS
    return _current


def resolve(settings: Optional[Settings] = None) -> Settings:
    """Snapshot: the explicit settings if given, else the process-wide instance."""
    return _current if settings is None else settings


__all__ = [
    "Settings",
    "DEFAULT_SETTINGS",
    "get_settings",
    "set_settings",
    "reset_settings",
    "resolve",
]
