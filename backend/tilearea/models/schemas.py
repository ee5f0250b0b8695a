"""Pydantic schemas for API request/response validation."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from tilearea.config import settings
from tilearea.core.area.aggregator import AreaResult, DimensionEntry
from tilearea.utils.units import Unit


class DimensionInput(BaseModel):
    # Raw text: malformed magnitudes count as zero rather than failing validation
    length: str = ""
    height: str = ""
    unit: Unit = Unit.CM


class CalculateRequest(BaseModel):
    entries: list[DimensionInput] = []
    contingency_percent: int = Field(default_factory=lambda: settings.default_contingency_percent, ge=0)

    @field_validator("contingency_percent")
    @classmethod
    def within_configured_maximum(cls, v: int) -> int:
        if v > settings.max_contingency_percent:
            raise ValueError(f"Contingency must not exceed {settings.max_contingency_percent}")
        return v


class FormattedArea(BaseModel):
    mm2: str
    cm2: str
    m2: str


class AreaResponse(BaseModel):
    mm2: float
    cm2: float
    m2: float
    formatted: FormattedArea

    @classmethod
    def from_result(cls, result: AreaResult, formatted: dict[str, str]) -> "AreaResponse":
        return cls(**result.to_dict(), formatted=FormattedArea(**formatted))


class UnitInfo(BaseModel):
    value: Unit
    label: str
    mm_per_unit: float


class UnitsResponse(BaseModel):
    units: list[UnitInfo]
    default_unit: Unit
    default_contingency_percent: int
    max_contingency_percent: int


class EntryResponse(BaseModel):
    id: str
    length: str
    height: str
    unit: Unit

    @classmethod
    def from_entry(cls, entry: DimensionEntry) -> "EntryResponse":
        return cls(id=entry.id, length=entry.length, height=entry.height, unit=entry.unit)


class AddEntryRequest(BaseModel):
    length: str = ""
    height: str = ""
    unit: Optional[Unit] = None


class UpdateEntryRequest(BaseModel):
    field: Literal["length", "height", "unit"]
    value: str


class ContingencyRequest(BaseModel):
    contingency_percent: int


class WorksheetResponse(BaseModel):
    entries: list[EntryResponse]
    contingency_percent: int
    result: AreaResponse
