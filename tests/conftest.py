from __future__ import annotations

import pytest

from fixed_money import Money, Settings, reset_settings


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture(autouse=True)
def default_settings():
    """Every test starts and ends on the default settings baseline."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture()
def strict_settings() -> Settings:
    return Settings(error_on_invalid=True)


@pytest.fixture()
def euro_settings() -> Settings:
    return Settings(separator=".", decimal=",")


@pytest.fixture()
def price() -> Money:
    return Money.from_units(1999)
