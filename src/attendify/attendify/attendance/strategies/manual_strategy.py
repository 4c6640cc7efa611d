from __future__ import annotations

from typing import Sequence

from ...core.enums import AttendanceStatus, CheckInKind, CheckInMethod
from ...core.exceptions import UnknownPerson, ValidationError
from ..model import AttendanceRecord
from .base import CheckInContext, CheckInDecision, CheckInStrategy


class ManualStrategy(CheckInStrategy):
    """Operator names a person and a status; replaces any earlier mark."""

    kind = CheckInKind.MANUAL
    replace_existing = True

    def __init__(self, person_id: str, status: AttendanceStatus):
        self.person_id = person_id
        self.status = status

    def decide(self, ctx: CheckInContext) -> Sequence[CheckInDecision]:
        person = ctx.directory.get_person(self.person_id)
        # Persons of other tenants are invisible from this session.
        if not person or person.tenant_id != ctx.session.tenant_id:
            raise UnknownPerson(self.person_id)
        if person not in ctx.eligibility.roster_for(ctx.session):
            raise ValidationError(f"{person.name} is not on the roster of {ctx.session.title}")
        return [CheckInDecision(person_id=person.person_id, status=self.status, method=CheckInMethod.MANUAL)]

    def describe(self, records: Sequence[AttendanceRecord]) -> str:
        r = records[0]
        return f"Marked {r.person_name} as {r.status.value}"
