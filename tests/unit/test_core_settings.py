import dataclasses
import pytest

from fixed_money.core.settings import (
    Settings,
    DEFAULT_SETTINGS,
    get_settings,
    set_settings,
    reset_settings,
)
from fixed_money.core.exc import InvalidSettings


def test_defaults_baseline():
    s = get_settings()
    print("[settings-defaults] ->", s)
    assert s is DEFAULT_SETTINGS
    assert (s.separator, s.decimal, s.error_on_invalid, s.precision) == (",", ".", False, 2)
    assert s.scale == 100


def test_set_settings_merges_over_defaults_not_current():
    print("[settings-merge] second update starts again from the defaults")
    set_settings(precision=3)
    assert get_settings().precision == 3
    set_settings(decimal=",")
    assert get_settings().decimal == ","
    assert get_settings().precision == 2


def test_set_settings_accepts_mapping_and_camel_case_alias():
    s = set_settings({"errorOnInvalid": True, "precision": 4})
    assert s.error_on_invalid is True
    assert s.precision == 4
    assert get_settings() is s


def test_set_settings_accepts_instance():
    custom = Settings(precision=0)
    assert set_settings(custom) is custom
    assert get_settings() is custom
    with pytest.raises(InvalidSettings):
        set_settings(custom, precision=1)


def test_reset_settings_restores_defaults():
    set_settings(precision=5, separator=" ")
    assert reset_settings() is DEFAULT_SETTINGS
    assert get_settings() == Settings()


def test_unknown_key_rejected_and_current_kept():
    set_settings(precision=3)
    with pytest.raises(InvalidSettings):
        set_settings(currency="EUR")
    assert get_settings().precision == 3


@pytest.mark.parametrize(
    "overrides",
    [
        {"decimal": ""},
        {"decimal": ".."},
        {"decimal": "5"},
        {"decimal": "-"},
        {"precision": -1},
        {"precision": 1.5},
        {"precision": True},
        {"separator": None},
        {"error_on_invalid": "yes"},
    ],
)
def test_invalid_values_rejected(overrides):
    print(f"[settings-invalid] {overrides} -> InvalidSettings")
    with pytest.raises(InvalidSettings):
        Settings(**overrides)


def test_settings_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_SETTINGS.precision = 3  # type: ignore[misc]


def test_merged_returns_new_value():
    s = DEFAULT_SETTINGS.merged(precision=3)
    assert s.precision == 3
    assert DEFAULT_SETTINGS.precision == 2
    assert s.merged({"precision": 1}).precision == 1
