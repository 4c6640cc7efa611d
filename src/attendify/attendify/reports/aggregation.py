from __future__ import annotations

from typing import Iterable

from ..core.enums import AttendanceStatus, TenantType
from ..attendance.model import AttendanceRecord
from .model import AttendanceStats


def _percent(part: int, whole: int) -> int:
    # Round half up, matching how the dashboard has always displayed rates.
    return (part * 200 + whole) // (2 * whole)


def aggregate(records: Iterable[AttendanceRecord]) -> AttendanceStats:
    counts = {s: 0 for s in AttendanceStatus}
    total = 0
    for r in records:
        counts[r.status] += 1
        total += 1

    present = counts[AttendanceStatus.PRESENT]
    return AttendanceStats(
        present_count=present,
        absent_count=counts[AttendanceStatus.ABSENT],
        late_count=counts[AttendanceStatus.LATE],
        excused_count=counts[AttendanceStatus.EXCUSED],
        total=total,
        rate=_percent(present, total or 1),
    )


def build_summary_request(stats: AttendanceStats, tenant_type: TenantType, period: str) -> dict:
    """Aggregated, non-identifying payload sent to the narrative summarizer."""

    return {
        "totalRecords": stats.total,
        "presentCount": stats.present_count,
        "absentCount": stats.absent_count,
        "lateCount": stats.late_count,
        "tenantType": tenant_type.value,
        "period": period,
    }
