"""Worksheet: the editable list of dimension entries plus the contingency buffer.

A worksheet is owned by whoever drives the form (the API layer keeps one
per process). The calculation core only ever sees an immutable snapshot:

    ws = Worksheet()
    entry = ws.add_entry()
    ws.update_entry(entry.id, "length", "120")
    ws.update_entry(entry.id, "height", "60")
    ws.set_contingency(10)
    ws.result().m2
"""

from __future__ import annotations

import logging
import math
import uuid
from dataclasses import replace
from typing import Optional, Union

from tilearea.core.area.aggregator import AreaResult, DimensionEntry, aggregate
from tilearea.utils.units import Unit, parse_unit

logger = logging.getLogger(__name__)


# ── Constants ────────────────────────────────────────────────────────────────

EDITABLE_FIELDS = ("length", "height", "unit")

# Starting row shown when the form first opens
_INITIAL_ENTRY = {"length": "2400", "height": "1200", "unit": Unit.MM}


# ── Exceptions ────────────────────────────────────────────────────────────────

class UnknownEntryError(KeyError):
    """Raised when an entry id does not address any entry in the worksheet."""

    def __init__(self, entry_id: str) -> None:
        super().__init__(entry_id)
        self.entry_id = entry_id

    def __str__(self) -> str:
        return f"No dimension entry with id '{self.entry_id}'"


class WorksheetFullError(RuntimeError):
    """Raised when add_entry() would exceed the configured entry limit."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"Worksheet already holds the maximum of {limit} entries")


# ── Helpers ───────────────────────────────────────────────────────────────────

def _new_id() -> str:
    return str(uuid.uuid4())


# ── Worksheet ─────────────────────────────────────────────────────────────────

class Worksheet:
    """Ordered dimension entries and a contingency percentage.

    Every edit replaces a whole field; the total is recomputed from
    scratch on request and memoized on the current snapshot.
    """

    def __init__(
        self,
        default_unit: Unit = Unit.CM,
        default_contingency_percent: int = 15,
        max_contingency_percent: int = 50,
        max_entries: int = 200,
    ) -> None:
        self.default_unit = default_unit
        self.default_contingency_percent = default_contingency_percent
        self.max_contingency_percent = max_contingency_percent
        self.max_entries = max_entries

        self._entries: list[DimensionEntry] = []
        self._contingency_percent = 0
        self._cache_key: Optional[tuple] = None
        self._cache_value: Optional[AreaResult] = None
        self.reset()

    @classmethod
    def from_settings(cls, settings) -> "Worksheet":
        return cls(
            default_unit=settings.default_unit,
            default_contingency_percent=settings.default_contingency_percent,
            max_contingency_percent=settings.max_contingency_percent,
            max_entries=settings.max_entries,
        )

    # ── State ────────────────────────────────────────────────────────────────

    @property
    def entries(self) -> tuple[DimensionEntry, ...]:
        return tuple(self._entries)

    @property
    def contingency_percent(self) -> int:
        return self._contingency_percent

    def get_entry(self, entry_id: str) -> DimensionEntry:
        return self._entries[self._index_of(entry_id)]

    def reset(self) -> None:
        """Restore the initial form: one sample entry and the default contingency."""
        self._entries = [DimensionEntry(id=_new_id(), **_INITIAL_ENTRY)]
        self._contingency_percent = self.default_contingency_percent
        logger.debug("Worksheet reset")

    # ── Editing ──────────────────────────────────────────────────────────────

    def add_entry(
        self,
        length: str = "",
        height: str = "",
        unit: Optional[Unit] = None,
    ) -> DimensionEntry:
        """Append a new entry; blank magnitudes and the default unit unless given."""
        if len(self._entries) >= self.max_entries:
            raise WorksheetFullError(self.max_entries)
        entry = DimensionEntry(
            id=_new_id(),
            length=length,
            height=height,
            unit=unit if unit is not None else self.default_unit,
        )
        self._entries.append(entry)
        logger.debug("Added entry %s", entry.id)
        return entry

    def update_entry(self, entry_id: str, field: str, value: Union[str, Unit]) -> DimensionEntry:
        """Replace one field of an entry.

        Raises:
            UnknownEntryError: If ``entry_id`` is not in the worksheet.
            ValueError: If ``field`` is not editable or ``value`` is not a known unit.
        """
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"Field '{field}' is not editable. Valid: {list(EDITABLE_FIELDS)}")
        index = self._index_of(entry_id)

        if field == "unit":
            value = value if isinstance(value, Unit) else parse_unit(value)
        elif not isinstance(value, str):
            raise ValueError(f"Field '{field}' expects text, got {type(value).__name__}")

        updated = replace(self._entries[index], **{field: value})
        self._entries[index] = updated
        logger.debug("Entry %s: %s=%r", entry_id, field, value)
        return updated

    def remove_entry(self, entry_id: str) -> None:
        index = self._index_of(entry_id)
        del self._entries[index]
        logger.debug("Removed entry %s", entry_id)

    def set_contingency(self, percent: int) -> None:
        """Set the contingency buffer; must be a whole percentage within bounds."""
        if isinstance(percent, bool) or not math.isfinite(percent) or int(percent) != percent:
            raise ValueError(f"Contingency must be a whole percentage, got {percent!r}")
        if not 0 <= percent <= self.max_contingency_percent:
            raise ValueError(
                f"Contingency must be between 0 and {self.max_contingency_percent}, got {percent}"
            )
        self._contingency_percent = int(percent)
        logger.debug("Contingency set to %d%%", self._contingency_percent)

    # ── Calculation ──────────────────────────────────────────────────────────

    def result(self) -> AreaResult:
        """Total area for the current snapshot."""
        key = (self.entries, self._contingency_percent)
        if key != self._cache_key:
            self._cache_value = aggregate(key[0], key[1])
            self._cache_key = key
        return self._cache_value

    # ── Internal ─────────────────────────────────────────────────────────────

    def _index_of(self, entry_id: str) -> int:
        for i, entry in enumerate(self._entries):
            if entry.id == entry_id:
                return i
        raise UnknownEntryError(entry_id)
