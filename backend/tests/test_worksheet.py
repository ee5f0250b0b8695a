"""Tests for the worksheet (entry list + contingency) state."""

import pytest

from tilearea.core.session.worksheet import (
    Worksheet,
    UnknownEntryError,
    WorksheetFullError,
)
from tilearea.utils.units import Unit


@pytest.fixture
def ws():
    return Worksheet()


@pytest.fixture
def blank_ws():
    """Worksheet with the sample row removed."""
    sheet = Worksheet()
    sheet.remove_entry(sheet.entries[0].id)
    return sheet


class TestInitialState:
    def test_sample_entry(self, ws):
        assert len(ws.entries) == 1
        first = ws.entries[0]
        assert (first.length, first.height, first.unit) == ("2400", "1200", Unit.MM)
        assert ws.contingency_percent == 15

    def test_sample_result(self, ws):
        # 2400mm x 1200mm = 2,880,000 mm², +15%
        assert ws.result().mm2 == pytest.approx(3_312_000)
        assert ws.result().m2 == pytest.approx(3.312)

    def test_custom_defaults(self):
        sheet = Worksheet(default_unit=Unit.M, default_contingency_percent=0)
        assert sheet.contingency_percent == 0
        assert sheet.add_entry().unit == Unit.M


class TestEditing:
    def test_add_entry_defaults(self, ws):
        e = ws.add_entry()
        assert e.length == "" and e.height == ""
        assert e.unit == Unit.CM
        assert ws.entries[-1] == e

    def test_ids_are_unique(self, ws):
        ids = {ws.add_entry().id for _ in range(20)}
        assert len(ids) == 20

    def test_update_replaces_field(self, blank_ws):
        e = blank_ws.add_entry()
        blank_ws.update_entry(e.id, "length", "100")
        blank_ws.update_entry(e.id, "height", "100")
        updated = blank_ws.update_entry(e.id, "unit", "m")
        assert updated.id == e.id
        assert updated.unit == Unit.M
        assert blank_ws.get_entry(e.id).length == "100"
        assert blank_ws.result().m2 == pytest.approx(10_000 * 1.15)

    def test_update_preserves_order(self, blank_ws):
        a = blank_ws.add_entry()
        b = blank_ws.add_entry()
        blank_ws.update_entry(a.id, "length", "5")
        assert [e.id for e in blank_ws.entries] == [a.id, b.id]

    def test_update_unknown_id(self, ws):
        with pytest.raises(UnknownEntryError):
            ws.update_entry("nope", "length", "1")

    def test_update_unknown_field(self, ws):
        with pytest.raises(ValueError):
            ws.update_entry(ws.entries[0].id, "id", "x")

    def test_update_unknown_unit(self, ws):
        with pytest.raises(ValueError):
            ws.update_entry(ws.entries[0].id, "unit", "ft")

    def test_remove_entry(self, ws):
        e = ws.add_entry()
        ws.remove_entry(e.id)
        assert e.id not in [x.id for x in ws.entries]
        with pytest.raises(UnknownEntryError):
            ws.remove_entry(e.id)

    def test_entry_limit(self):
        sheet = Worksheet(max_entries=2)
        sheet.add_entry()
        with pytest.raises(WorksheetFullError):
            sheet.add_entry()

    def test_snapshot_is_read_only(self, ws):
        snapshot = ws.entries
        ws.add_entry()
        assert len(snapshot) == 1


class TestContingency:
    @pytest.mark.parametrize("p", [0, 25, 50])
    def test_within_bounds(self, ws, p):
        ws.set_contingency(p)
        assert ws.contingency_percent == p

    @pytest.mark.parametrize("p", [-1, 51, 100, 12.5, float("inf"), float("nan")])
    def test_out_of_bounds(self, ws, p):
        with pytest.raises(ValueError):
            ws.set_contingency(p)
        assert ws.contingency_percent == 15

    def test_zero_contingency_gives_raw_sum(self, ws):
        ws.set_contingency(0)
        assert ws.result().mm2 == pytest.approx(2_880_000)


class TestResult:
    def test_recomputed_after_edit(self, ws):
        before = ws.result()
        ws.update_entry(ws.entries[0].id, "unit", Unit.CM)
        after = ws.result()
        assert after.mm2 == pytest.approx(before.mm2 * 100)

    def test_repeated_calls_identical(self, ws):
        assert ws.result() == ws.result()

    def test_malformed_text_counts_as_zero(self, blank_ws):
        e = blank_ws.add_entry(length="12.", height="abc")
        assert blank_ws.result().mm2 == 0
        blank_ws.update_entry(e.id, "height", "3")
        assert blank_ws.result().cm2 == pytest.approx(36 * 1.15)

    def test_reset(self, ws):
        ws.add_entry(length="1", height="1")
        ws.set_contingency(0)
        ws.reset()
        assert len(ws.entries) == 1
        assert ws.contingency_percent == 15
