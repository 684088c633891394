import pytest

from fixed_money.core.settings import Settings
from fixed_money.core.fmt import format_units, format_display, group_digits
from fixed_money.core.exc import InvalidConstruction


# -----------------------------
# format_units (canonical)
# -----------------------------

@pytest.mark.parametrize(
    "units,expected",
    [
        (1232, "12.32"),
        (-1232, "-12.32"),
        (-5, "-0.05"),
        (5, "0.05"),
        (0, "0.00"),
        (700, "7.00"),
        (-100, "-1.00"),
        (10, "0.10"),
        (123456789, "1234567.89"),
    ],
)
def test_format_units_default_precision(units, expected):
    print(f"[format_units] {units} -> {expected!r}")
    assert format_units(units) == expected


@pytest.mark.parametrize(
    "units,precision,expected",
    [
        (1232, 0, "1232"),
        (-1232, 0, "-1232"),
        (1232, 3, "1.232"),
        (5, 4, "0.0005"),
        (-5, 4, "-0.0005"),
    ],
)
def test_format_units_other_precisions(units, precision, expected):
    assert format_units(units, Settings(precision=precision)) == expected


def test_format_units_ignores_display_markers(euro_settings):
    print("[format_units] canonical output always uses '.' and no grouping")
    assert format_units(123456789, euro_settings) == "1234567.89"


@pytest.mark.parametrize("bad", [1.5, True, "12", None])
def test_format_units_rejects_non_integers(bad):
    with pytest.raises(InvalidConstruction):
        format_units(bad)  # type: ignore[arg-type]


# -----------------------------
# format_display
# -----------------------------

@pytest.mark.parametrize(
    "digits,expected",
    [
        ("1", "1"),
        ("123", "123"),
        ("1234", "1,234"),
        ("123456", "123,456"),
        ("1234567", "1,234,567"),
    ],
)
def test_group_digits(digits, expected):
    assert group_digits(digits, ",") == expected


def test_format_display_default_and_euro(euro_settings):
    print("[format_display] grouping and decimal marker from settings")
    assert format_display(123456789) == "1,234,567.89"
    assert format_display(-100000) == "-1,000.00"
    assert format_display(123456789, euro_settings) == "1.234.567,89"


def test_format_display_without_separator_or_fraction():
    assert format_display(123456789, Settings(separator="")) == "1234567.89"
    assert format_display(1234567, Settings(separator=" ", precision=0)) == "1 234 567"
