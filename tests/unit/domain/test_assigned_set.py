"""Tests for AssignedSet parsing and assignment-history normalization."""

from datetime import datetime, timezone

import pytest

from civicdesk.domain.entities.assignment import AssignmentRecord, parse_history
from civicdesk.domain.value_objects.assigned_set import AssignedSet
from civicdesk.domain.value_objects.enums import AssignmentReason

# ─── AssignedSet.parse ───────────────────────────────────────────────


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, []),
        ([], []),
        ([3, 1, 2], [3, 1, 2]),
        ("12,15, 17", [12, 15, 17]),
        ("[4, 5]", [4, 5]),
        ("", []),
        (7, [7]),
        ("7", [7]),
        ([1, "2", 2.0, " 3 "], [1, 2, 3]),
    ],
)
def test_parse_representations(raw, expected):
    assert AssignedSet.parse(raw).to_list() == expected


def test_parse_skips_malformed_entries():
    assert AssignedSet.parse("1,abc,,-4,0,2.5,9").to_list() == [1, 9]
    assert AssignedSet.parse([True, None, {"id": 1}, 6]).to_list() == [6]


def test_parse_drops_duplicates_keeping_first_position():
    assert AssignedSet.parse([5, 3, 5, 3, 8]).to_list() == [5, 3, 8]


def test_parse_broken_json_falls_back_to_delimited():
    assert AssignedSet.parse("[1, 2,").to_list() == [1, 2]


def test_parse_skips_non_ascii_and_oversized_digits():
    assert AssignedSet.parse("12,\u00b2,15").to_list() == [12, 15]
    assert AssignedSet.parse(["12", "\u0663", "9" * 5000]).to_list() == [12]


def test_add_remove_and_membership():
    s = AssignedSet.parse([1, 2])
    assert s.add(2) is s
    grown = s.add(3)
    assert grown.to_list() == [1, 2, 3]
    assert 3 in grown and 3 not in s
    assert len(grown.remove(1)) == 2
    assert grown.remove(99) == grown


# ─── parse_history ──────────────────────────────────────────────────


def test_history_current_format():
    at = datetime(2026, 1, 5, 12, 0, tzinfo=timezone.utc)
    record = AssignmentRecord(4, at, AssignmentReason.AUTO_ASSIGNED)
    assert parse_history([record.to_dict()]) == [record]


def test_history_legacy_json_string():
    raw = '[{"Cid": 9, "assignedAt": "2026-01-05T12:00:00Z", "status": "Auto-Assigned"}]'
    [record] = parse_history(raw)
    assert record.complaint_id == 9
    assert record.reason == AssignmentReason.AUTO_ASSIGNED
    assert record.assigned_at.tzinfo is not None


def test_history_drops_unreadable_entries():
    raw = [
        {"complaint_id": "x", "assigned_at": "2026-01-05T12:00:00"},
        {"complaint_id": 2},
        "garbage",
        {"complaint_id": 3, "assigned_at": "2026-01-05T12:00:00", "reason": "Assigned"},
    ]
    assert [r.complaint_id for r in parse_history(raw)] == [3]


@pytest.mark.parametrize("raw", [None, "", "not json", 42])
def test_history_empty_inputs(raw):
    assert parse_history(raw) == []
