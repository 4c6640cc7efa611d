from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import AttendanceStatus, CheckInKind
from ..core.exceptions import NotFoundError
from ..directory.model import Person, Session, Tenant
from ..directory.repository import DirectoryRepository
from .eligibility import EligibilityResolver
from .factory import CheckInStrategyFactory
from .ledger import AttendanceLedger, DateRange
from .model import AttendanceRecord, GeoPoint
from .strategies.base import CheckInContext, CheckInResult


@dataclass(frozen=True)
class RosterView:
    session: Session
    work_date: date
    roster: Sequence[Person]
    uncovered: Sequence[Person]


class AttendanceService:
    """Use cases: check-in commands and record queries for one tenant's sessions."""

    def __init__(
        self,
        directory: DirectoryRepository,
        ledger: AttendanceLedger,
        eligibility: EligibilityResolver,
        *,
        strategy_factory: CheckInStrategyFactory | None = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._directory = directory
        self._ledger = ledger
        self._eligibility = eligibility
        self._factory = strategy_factory or CheckInStrategyFactory()
        self._clock = clock

    def check_in(
        self,
        kind: CheckInKind,
        session_id: str,
        *,
        person_id: Optional[str] = None,
        status: Optional[AttendanceStatus] = None,
        location: Optional[GeoPoint] = None,
        now: datetime | None = None,
    ) -> CheckInResult:
        now = now or self._clock()
        session, tenant = self._resolve_session(session_id)

        strategy = self._factory.for_command(kind, person_id=person_id, status=status, location=location)
        ctx = CheckInContext(
            tenant=tenant,
            session=session,
            work_date=now.date(),
            now=now,
            directory=self._directory,
            ledger=self._ledger,
            eligibility=self._eligibility,
        )
        return strategy.execute(ctx)

    def mark(self, session_id: str, person_id: str, status: AttendanceStatus, *, now: datetime | None = None) -> CheckInResult:
        return self.check_in(CheckInKind.MANUAL, session_id, person_id=person_id, status=status, now=now)

    def mark_all_present(self, session_id: str, *, now: datetime | None = None) -> CheckInResult:
        return self.check_in(CheckInKind.MARK_ALL, session_id, now=now)

    def simulate_qr_scan(self, session_id: str, *, now: datetime | None = None) -> CheckInResult:
        return self.check_in(CheckInKind.QR, session_id, now=now)

    def simulate_gps_checkin(
        self, session_id: str, *, location: Optional[GeoPoint] = None, now: datetime | None = None
    ) -> CheckInResult:
        return self.check_in(CheckInKind.GPS, session_id, location=location, now=now)

    def today(self) -> date:
        return self._clock().date()

    def roster(self, session_id: str, work_date: date | None = None) -> RosterView:
        session, _ = self._resolve_session(session_id)
        work_date = work_date or self.today()
        return RosterView(
            session=session,
            work_date=work_date,
            roster=self._eligibility.roster_for(session),
            uncovered=self._eligibility.uncovered_roster_for(session, work_date),
        )

    def records_for_tenant(
        self,
        tenant_id: str,
        date_range: Optional[DateRange] = None,
        *,
        session_id: Optional[str] = None,
        newest_first: bool = False,
    ) -> Sequence[AttendanceRecord]:
        self.get_tenant(tenant_id)
        return self._ledger.list_by_tenant(tenant_id, date_range, session_id=session_id, newest_first=newest_first)

    def get_tenant(self, tenant_id: str) -> Tenant:
        tenant = self._directory.get_tenant(tenant_id)
        if not tenant:
            raise NotFoundError(f"Unknown tenant: {tenant_id}")
        return tenant

    def _resolve_session(self, session_id: str) -> tuple[Session, Tenant]:
        session = self._directory.get_session(session_id)
        if not session:
            raise NotFoundError(f"Unknown session: {session_id}")
        return session, self.get_tenant(session.tenant_id)
