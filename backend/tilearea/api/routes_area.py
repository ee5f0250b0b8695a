"""Area endpoints — stateless total-area calculation and unit metadata."""

from fastapi import APIRouter

from tilearea.config import settings
from tilearea.models.schemas import AreaResponse, CalculateRequest, UnitInfo, UnitsResponse
from tilearea.core.area.aggregator import DimensionEntry, aggregate
from tilearea.core.area.formatter import format_result
from tilearea.utils.units import UNITS, factor_to_mm

router = APIRouter(tags=["area"])


@router.get("/units", response_model=UnitsResponse)
async def list_units():
    """Units accepted for dimension entries, with their millimeter factors."""
    return UnitsResponse(
        units=[UnitInfo(value=u, label=label, mm_per_unit=factor_to_mm(u)) for u, label in UNITS],
        default_unit=settings.default_unit,
        default_contingency_percent=settings.default_contingency_percent,
        max_contingency_percent=settings.max_contingency_percent,
    )


@router.post("/area/calculate", response_model=AreaResponse)
async def calculate_area(req: CalculateRequest):
    """Total area of the given entries with the contingency buffer applied."""
    entries = tuple(
        DimensionEntry(id=str(i), length=e.length, height=e.height, unit=e.unit)
        for i, e in enumerate(req.entries)
    )
    result = aggregate(entries, req.contingency_percent)
    return AreaResponse.from_result(
        result, format_result(result, settings.display_fraction_digits)
    )
