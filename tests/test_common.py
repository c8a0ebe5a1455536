import pytest

from fluidnet.common import (
    CAPACITY_THRESHOLDS,
    EPSILON,
    FLUID,
    POWER,
    WATER,
    ResourceKind,
    are_equal,
    clamp,
    is_zero,
    read_float,
)


class TestConstants:
    def test_thresholds_are_quarters(self):
        assert CAPACITY_THRESHOLDS == (0.0, 0.25, 0.5, 0.75, 1.0)

    def test_thresholds_ascending(self):
        assert list(CAPACITY_THRESHOLDS) == sorted(CAPACITY_THRESHOLDS)

    def test_epsilon_is_small_positive(self):
        assert 0 < EPSILON < 1e-3


class TestResourceKind:
    def test_is_a_string(self):
        assert isinstance(POWER, str)
        assert isinstance(POWER, ResourceKind)

    def test_compares_as_string(self):
        assert POWER == "power"
        assert WATER == "water"
        assert FLUID == "fluid"

    def test_kinds_differ(self):
        assert POWER != WATER


class TestFloatComparison:
    def test_equal_values(self):
        assert are_equal(1.0, 1.0)

    def test_within_tolerance(self):
        assert are_equal(1.0, 1.0 + EPSILON / 2)

    def test_outside_tolerance(self):
        assert not are_equal(1.0, 1.0 + EPSILON * 10)

    def test_custom_tolerance(self):
        assert are_equal(1.0, 1.4, tol=0.5)

    def test_is_zero(self):
        assert is_zero(0.0)
        assert is_zero(-EPSILON / 2)
        assert not is_zero(0.1)


class TestClamp:
    def test_inside_range(self):
        assert clamp(3, 0, 4) == 3

    def test_below_range(self):
        assert clamp(-1, 0, 4) == 0

    def test_above_range(self):
        assert clamp(5, 0, 4) == 4

    def test_floats(self):
        assert clamp(1.5, 0.0, 1.0) == 1.0


class TestReadFloat:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (None, 0.0),
            ("", 0.0),
            ("   ", 0.0),
            ("abc", 0.0),
            ("3.5", 3.5),
            (" 12 ", 12.0),
            ("-2", -2.0),
            (7, 7.0),
            (2.25, 2.25),
            ("inf", 0.0),
            (float("nan"), 0.0),
        ],
    )
    def test_parses_or_falls_back_to_zero(self, raw, expected):
        assert read_float(raw) == expected

    def test_returns_float(self):
        assert isinstance(read_float(3), float)
