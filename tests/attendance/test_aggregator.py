from __future__ import annotations

from datetime import date

import pytest

from src.roster_system.roster_system.attendance.aggregator import aggregate
from src.roster_system.roster_system.attendance.model import AttendanceRecord
from src.roster_system.roster_system.core.enums import AttendanceStatus

P, A, E = AttendanceStatus.PRESENT, AttendanceStatus.ABSENT, AttendanceStatus.EXCUSED


def _records(*pairs):
    return [
        AttendanceRecord(attendance_id=i, player_id=pid, team_id=1, event_date=date(2024, 3, i + 1), status=status)
        for i, (pid, status) in enumerate(pairs)
    ]


def test_counts_and_rate():
    stats = aggregate(_records((1, P), (2, P), (3, A), (4, E)))

    assert stats.total_records == 4
    assert (stats.present_count, stats.absent_count, stats.excused_count) == (2, 1, 1)
    assert stats.attendance_rate == pytest.approx(50.0)


def test_empty_input_gives_zero_stats():
    stats = aggregate([])

    assert stats.total_records == 0
    assert stats.attendance_rate == 0.0
    assert stats.player_stats == {}


def test_per_player_breakdown_in_first_seen_order():
    stats = aggregate(_records((7, A), (3, P), (7, P), (7, E), (3, P)))

    assert list(stats.player_stats) == [7, 3]
    seven = stats.player_stats[7]
    assert (seven.present, seven.absent, seven.excused, seven.total) == (1, 1, 1, 3)
    assert seven.rate == pytest.approx(100 / 3)
    assert stats.player_stats[3].rate == pytest.approx(100.0)
    assert stats.present_count + stats.absent_count + stats.excused_count == stats.total_records


def test_plain_string_statuses_are_accepted():
    stats = aggregate(_records((1, "Present"), (1, "Absent")))

    assert stats.present_count == 1
    assert stats.absent_count == 1
