import pytest

from heatindex.utils.numeric import is_numeric


@pytest.mark.parametrize(
    "value",
    ["12a", "abc", "", " ", "12abc", "1.2.3", "--1", "nan", "inf", "1_000", "0x1A", "e5", "."],
)
def test_non_numeric_strings_rejected(value: str) -> None:
    assert is_numeric(value) is False


@pytest.mark.parametrize(
    "value",
    ["90", "-40", "+3", "26.5", ".5", "5.", "1e3", "-2.5E-4", " 42 ", "0"],
)
def test_numeric_strings_accepted(value: str) -> None:
    assert is_numeric(value) is True


@pytest.mark.parametrize("x", [0.0, -243.0, 32.222222222222, 1e-7, 123456.789, -0.5])
def test_formatted_floats_are_numeric(x: float) -> None:
    assert is_numeric(str(x))
    assert is_numeric(repr(x))
    assert is_numeric(f"{x:.3f}")


@pytest.mark.parametrize("value", ["1e400", "-1e400", "9" * 400])
def test_overflowing_literals_rejected(value: str) -> None:
    assert is_numeric(value) is False
