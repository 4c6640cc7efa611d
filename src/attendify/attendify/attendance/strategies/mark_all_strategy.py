from __future__ import annotations

from typing import Sequence

from ...core.enums import AttendanceStatus, CheckInKind, CheckInMethod
from ..model import AttendanceRecord
from .base import CheckInContext, CheckInDecision, CheckInStrategy


class MarkAllPresentStrategy(CheckInStrategy):
    """Every uncovered roster member becomes PRESENT, in roster order."""

    kind = CheckInKind.MARK_ALL

    def decide(self, ctx: CheckInContext) -> Sequence[CheckInDecision]:
        return [
            CheckInDecision(person_id=p.person_id, status=AttendanceStatus.PRESENT, method=CheckInMethod.MANUAL)
            for p in ctx.eligibility.uncovered_roster_for(ctx.session, ctx.work_date)
        ]

    def describe(self, records: Sequence[AttendanceRecord]) -> str:
        return f"Marked {len(records)} present"

    def nothing_message(self) -> str:
        return "Everyone is already marked."
