from __future__ import annotations

from typing import Optional, Sequence

from ...core.enums import AttendanceStatus, CheckInKind, CheckInMethod, Feature
from ..model import AttendanceRecord, GeoPoint
from .base import CheckInContext, CheckInDecision, CheckInStrategy


class GPSCheckInStrategy(CheckInStrategy):
    """Simulated GPS check-in: first uncovered roster member, no geofence math."""

    kind = CheckInKind.GPS
    required_feature = Feature.GPS

    def __init__(self, location: Optional[GeoPoint] = None):
        self.location = location

    def decide(self, ctx: CheckInContext) -> Sequence[CheckInDecision]:
        uncovered = ctx.eligibility.uncovered_roster_for(ctx.session, ctx.work_date)
        if not uncovered:
            return []
        return [CheckInDecision(person_id=uncovered[0].person_id, status=AttendanceStatus.PRESENT, method=CheckInMethod.GPS)]

    def describe(self, records: Sequence[AttendanceRecord]) -> str:
        return f"Location verified within geofence. ({records[0].person_name})"

    def nothing_message(self) -> str:
        return "No eligible user found to simulate check-in."
