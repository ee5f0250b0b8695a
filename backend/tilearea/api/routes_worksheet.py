"""Worksheet API endpoints — desktop single-session."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from tilearea.config import settings
from tilearea.core.area.formatter import format_result
from tilearea.core.session.worksheet import (
    Worksheet,
    UnknownEntryError,
    WorksheetFullError,
)
from tilearea.models.schemas import (
    AddEntryRequest,
    AreaResponse,
    ContingencyRequest,
    EntryResponse,
    UpdateEntryRequest,
    WorksheetResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["worksheet"])

# Desktop-only: one Worksheet per process (single user editing the form).
_ws = Worksheet.from_settings(settings)


def _state(ws: Worksheet) -> WorksheetResponse:
    result = ws.result()
    return WorksheetResponse(
        entries=[EntryResponse.from_entry(e) for e in ws.entries],
        contingency_percent=ws.contingency_percent,
        result=AreaResponse.from_result(
            result, format_result(result, settings.display_fraction_digits)
        ),
    )


# ── Endpoints ─────────────────────────────────────────────────────────────────

@router.get("/worksheet", response_model=WorksheetResponse)
async def worksheet_state():
    """Return all entries, the contingency and the current total."""
    return _state(_ws)


@router.post("/worksheet/entries", response_model=WorksheetResponse, status_code=201)
async def add_entry(req: AddEntryRequest):
    """Append a dimension entry (blank, default unit unless given)."""
    try:
        _ws.add_entry(length=req.length, height=req.height, unit=req.unit)
    except WorksheetFullError as exc:
        logger.warning("Rejected new entry: %s", exc)
        raise HTTPException(409, detail=str(exc))
    return _state(_ws)


@router.patch("/worksheet/entries/{entry_id}", response_model=WorksheetResponse)
async def update_entry(entry_id: str, req: UpdateEntryRequest):
    """Replace the length, height or unit of one entry."""
    try:
        _ws.update_entry(entry_id, req.field, req.value)
    except UnknownEntryError as exc:
        raise HTTPException(404, detail=str(exc))
    except ValueError as exc:
        logger.info("Rejected edit of %s: %s", entry_id, exc)
        raise HTTPException(422, detail=str(exc))
    return _state(_ws)


@router.delete("/worksheet/entries/{entry_id}", response_model=WorksheetResponse)
async def remove_entry(entry_id: str):
    try:
        _ws.remove_entry(entry_id)
    except UnknownEntryError as exc:
        raise HTTPException(404, detail=str(exc))
    return _state(_ws)


@router.put("/worksheet/contingency", response_model=WorksheetResponse)
async def set_contingency(req: ContingencyRequest):
    """Set the contingency percentage (0 to the configured maximum)."""
    try:
        _ws.set_contingency(req.contingency_percent)
    except ValueError as exc:
        logger.info("Rejected contingency: %s", exc)
        raise HTTPException(422, detail=str(exc))
    return _state(_ws)


@router.post("/worksheet/reset", response_model=WorksheetResponse)
async def reset_worksheet():
    """Restore the initial sample entry and default contingency."""
    _ws.reset()
    return _state(_ws)
