from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import Role
from ..directory.model import Person, Session
from ..directory.repository import DirectoryRepository
from .ledger import AttendanceLedger

SUBJECT_ROLE = Role.STUDENT


class EligibilityResolver:
    """Computes who is expected to check in for a session."""

    def __init__(self, directory: DirectoryRepository, ledger: AttendanceLedger):
        self._directory = directory
        self._ledger = ledger

    def roster_for(self, session: Session) -> Sequence[Person]:
        return [
            p
            for p in self._directory.persons_of(session.tenant_id)
            if p.role == SUBJECT_ROLE and p.group == session.target_group
        ]

    def uncovered_roster_for(self, session: Session, work_date: date) -> Sequence[Person]:
        """Roster members without a record for (session, date), in roster order."""

        covered = {
            r.person_id
            for r in self._ledger.list_by_tenant(session.tenant_id, (work_date, work_date), session_id=session.session_id)
        }
        return [p for p in self.roster_for(session) if p.person_id not in covered]
