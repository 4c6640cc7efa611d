from __future__ import annotations

import random
from typing import Callable, Optional, Sequence

from ...core.enums import AttendanceStatus, CheckInKind, CheckInMethod, Feature
from ...directory.model import Person
from ..model import AttendanceRecord
from .base import CheckInContext, CheckInDecision, CheckInStrategy

Chooser = Callable[[Sequence[Person]], Person]


class QRScanStrategy(CheckInStrategy):
    """Simulated QR scan: one pick from the uncovered roster."""

    kind = CheckInKind.QR
    required_feature = Feature.QR

    def __init__(self, chooser: Optional[Chooser] = None):
        self._choose = chooser or random.choice

    def decide(self, ctx: CheckInContext) -> Sequence[CheckInDecision]:
        uncovered = ctx.eligibility.uncovered_roster_for(ctx.session, ctx.work_date)
        if not uncovered:
            return []
        person = self._choose(uncovered)
        return [CheckInDecision(person_id=person.person_id, status=AttendanceStatus.PRESENT, method=CheckInMethod.QR)]

    def describe(self, records: Sequence[AttendanceRecord]) -> str:
        return f"Scanned: {records[0].person_name}"

    def nothing_message(self) -> str:
        return "All students accounted for!"
