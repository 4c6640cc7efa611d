from __future__ import annotations

import csv
import io
from typing import Iterable

from ..core.constants import EXPORT_HEADER
from .model import AttendanceRecord


def export_records_csv(records: Iterable[AttendanceRecord]) -> str:
    """Tabular dump of records: header row first, one row per record."""

    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(EXPORT_HEADER)
    for r in records:
        writer.writerow(
            [
                r.person_name,
                r.work_date.strftime("%Y-%m-%d"),
                r.status.value,
                r.check_in_time.strftime("%H:%M:%S") if r.check_in_time else "",
                r.method.value,
            ]
        )
    return buf.getvalue()
