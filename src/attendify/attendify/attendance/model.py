from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus, CheckInMethod


@dataclass(frozen=True)
class GeoPoint:
    lat: float
    lng: float


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance fact for (person, session, date).

    `person_name` is captured at write time and never re-derived.
    """

    record_id: str
    person_id: str
    person_name: str
    session_id: Optional[str]
    work_date: date
    status: AttendanceStatus
    method: CheckInMethod
    check_in_time: Optional[datetime] = None
    location: Optional[GeoPoint] = None

    @property
    def key(self) -> tuple[str, Optional[str], date]:
        return self.person_id, self.session_id, self.work_date
