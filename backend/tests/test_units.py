"""Tests for unit conversion utilities."""

import pytest

from tilearea.utils.units import (
    UNIT_TO_MM,
    UNITS,
    Unit,
    area_mm2_to_cm2,
    area_mm2_to_m2,
    factor_to_mm,
    parse_unit,
    to_mm,
)


class TestUnitTable:
    def test_factors(self):
        assert factor_to_mm(Unit.MM) == 1
        assert factor_to_mm(Unit.CM) == 10
        assert factor_to_mm(Unit.M) == 1000

    def test_table_covers_every_unit(self):
        assert set(UNIT_TO_MM) == set(Unit)
        assert [u for u, _ in UNITS] == [Unit.MM, Unit.CM, Unit.M]

    def test_to_mm(self):
        assert to_mm(2.5, Unit.M) == 2500

    def test_parse_unit(self):
        assert parse_unit("cm") is Unit.CM
        with pytest.raises(ValueError, match="Unknown unit"):
            parse_unit("ft")


class TestAreaScaling:
    def test_mm2_to_cm2(self):
        assert area_mm2_to_cm2(1_000_000) == 10_000

    def test_mm2_to_m2(self):
        assert area_mm2_to_m2(1_000_000) == 1
