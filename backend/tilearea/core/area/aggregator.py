"""Total area aggregation across dimension entries in mixed units.

Every entry is normalized to millimeters, summed in mm², then the
contingency buffer is applied once. cm² and m² are pure scalings of the
mm² total so the three figures always describe the same quantity.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Iterable

from tilearea.utils.units import Unit, factor_to_mm, area_mm2_to_cm2, area_mm2_to_m2

# Unsigned decimal with optional exponent: "12", "12.5", ".5", "5.", "1e3"
_MAGNITUDE_RE = re.compile(r"^\s*(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$")

# Larger magnitudes count as malformed; keeps any realistic sum of squared
# meter-scaled sides finite.
MAX_MAGNITUDE = 1e100


@dataclass(frozen=True)
class DimensionEntry:
    """One rectangular area as typed by the user."""

    id: str
    length: str = ""
    height: str = ""
    unit: Unit = Unit.CM


@dataclass(frozen=True)
class AreaResult:
    mm2: float
    cm2: float
    m2: float

    def to_dict(self) -> dict[str, float]:
        return {"mm2": self.mm2, "cm2": self.cm2, "m2": self.m2}


def parse_magnitude(text: str) -> float:
    """Parse a non-negative decimal, falling back to 0.0.

    Half-typed, empty, signed or otherwise malformed text contributes
    nothing instead of failing, since the form is edited keystroke by
    keystroke.
    """
    if not _MAGNITUDE_RE.match(text):
        return 0.0
    value = float(text)
    if not math.isfinite(value) or value > MAX_MAGNITUDE:
        return 0.0
    return value


def entry_area_mm2(entry: DimensionEntry) -> float:
    factor = factor_to_mm(entry.unit)
    length_mm = parse_magnitude(entry.length) * factor
    height_mm = parse_magnitude(entry.height) * factor
    return length_mm * height_mm


def raw_area_mm2(entries: Iterable[DimensionEntry]) -> float:
    """Sum of entry areas in mm², without contingency."""
    total = 0.0
    for entry in entries:
        total += entry_area_mm2(entry)
    return total


def aggregate(entries: Iterable[DimensionEntry], contingency_percent: float) -> AreaResult:
    """Total required area, contingency included, in mm², cm² and m²."""
    total_mm2 = raw_area_mm2(entries) * (1 + contingency_percent / 100)
    return AreaResult(
        mm2=total_mm2,
        cm2=area_mm2_to_cm2(total_mm2),
        m2=area_mm2_to_m2(total_mm2),
    )
