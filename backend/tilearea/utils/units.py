"""Unit conversion utilities. Internal representation is always millimeters."""

from __future__ import annotations

from enum import Enum


class Unit(str, Enum):
    MM = "mm"
    CM = "cm"
    M = "m"


UNIT_TO_MM: dict[Unit, float] = {
    Unit.MM: 1.0,
    Unit.CM: 10.0,
    Unit.M: 1000.0,
}

if set(UNIT_TO_MM) != set(Unit):
    raise RuntimeError("UNIT_TO_MM must cover every Unit")

# Display order for unit pickers
UNITS: list[tuple[Unit, str]] = [
    (Unit.MM, "mm"),
    (Unit.CM, "cm"),
    (Unit.M, "m"),
]

VALID_UNITS = {u.value for u in Unit}

MM2_PER_CM2 = 100
MM2_PER_M2 = 1_000_000


def factor_to_mm(unit: Unit) -> float:
    """Millimeters per one ``unit``."""
    return UNIT_TO_MM[unit]


def to_mm(value: float, unit: Unit) -> float:
    """Convert a value from the given unit to millimeters."""
    return value * factor_to_mm(unit)


def parse_unit(raw: str) -> Unit:
    """Look up a unit by its identifier ("mm", "cm", "m")."""
    try:
        return Unit(raw)
    except ValueError:
        raise ValueError(f"Unknown unit '{raw}'. Valid: {sorted(VALID_UNITS)}") from None


def area_mm2_to_cm2(area_mm2: float) -> float:
    return area_mm2 / MM2_PER_CM2


def area_mm2_to_m2(area_mm2: float) -> float:
    return area_mm2 / MM2_PER_M2
