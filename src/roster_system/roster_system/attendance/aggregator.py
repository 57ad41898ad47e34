from __future__ import annotations

from typing import Iterable, Protocol

from ..core.enums import AttendanceStatus
from .model import AttendanceStats, PlayerAttendanceStats


class _HasStatus(Protocol):
    player_id: int
    status: AttendanceStatus


def _rate(present: int, total: int) -> float:
    return (present / total) * 100 if total > 0 else 0.0


def aggregate(records: Iterable[_HasStatus]) -> AttendanceStats:
    """Overall and per-player attendance counts and rates.

    Empty input gives zero-valued stats. Per-player entries appear in order of
    first occurrence.
    """

    totals = {s: 0 for s in AttendanceStatus}
    per_player: dict[int, dict[AttendanceStatus, int]] = {}

    for r in records:
        status = AttendanceStatus(r.status)
        totals[status] += 1
        counts = per_player.setdefault(r.player_id, {s: 0 for s in AttendanceStatus})
        counts[status] += 1

    total = sum(totals.values())
    player_stats = {}
    for pid, counts in per_player.items():
        player_total = sum(counts.values())
        player_stats[pid] = PlayerAttendanceStats(
            present=counts[AttendanceStatus.PRESENT],
            absent=counts[AttendanceStatus.ABSENT],
            excused=counts[AttendanceStatus.EXCUSED],
            total=player_total,
            rate=_rate(counts[AttendanceStatus.PRESENT], player_total),
        )

    return AttendanceStats(
        total_records=total,
        present_count=totals[AttendanceStatus.PRESENT],
        absent_count=totals[AttendanceStatus.ABSENT],
        excused_count=totals[AttendanceStatus.EXCUSED],
        attendance_rate=_rate(totals[AttendanceStatus.PRESENT], total),
        player_stats=player_stats,
    )
