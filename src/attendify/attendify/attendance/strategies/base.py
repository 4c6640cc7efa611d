from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Optional, Sequence

from ...common.logging import get_logger
from ...core.enums import AttendanceStatus, CheckInKind, CheckInMethod, Feature
from ...core.exceptions import FeatureDisabled
from ...directory.model import Session, Tenant
from ...directory.repository import DirectoryRepository
from ..eligibility import EligibilityResolver
from ..ledger import AttendanceLedger
from ..model import AttendanceRecord, GeoPoint

logger = get_logger(__name__)


class CheckInOutcome(str, Enum):
    RECORDED = "RECORDED"
    NOTHING_ELIGIBLE = "NOTHING_ELIGIBLE"


@dataclass(frozen=True)
class CheckInDecision:
    person_id: str
    status: AttendanceStatus
    method: CheckInMethod


@dataclass(frozen=True)
class CheckInResult:
    outcome: CheckInOutcome
    records: tuple[AttendanceRecord, ...] = ()
    message: str = ""

    @property
    def recorded(self) -> bool:
        return self.outcome == CheckInOutcome.RECORDED


@dataclass(frozen=True)
class CheckInContext:
    tenant: Tenant
    session: Session
    work_date: date
    now: datetime
    directory: DirectoryRepository
    ledger: AttendanceLedger
    eligibility: EligibilityResolver


class CheckInStrategy(ABC):
    """Strategy Pattern: select target persons, then write through the ledger.

    Subclasses only decide who gets which status; gating and writing are shared.
    """

    kind: CheckInKind
    required_feature: Optional[Feature] = None
    # Simulated and bulk check-ins never overwrite a mark made in the meantime.
    replace_existing: bool = False
    location: Optional[GeoPoint] = None

    def execute(self, ctx: CheckInContext) -> CheckInResult:
        self._ensure_enabled(ctx.tenant)

        decisions = self.decide(ctx)
        records = []
        for d in decisions:
            rec = ctx.ledger.upsert(
                d.person_id,
                ctx.session.session_id,
                ctx.work_date,
                d.status,
                d.method,
                ctx.now,
                location=self.location,
                if_absent=not self.replace_existing,
            )
            if rec:
                records.append(rec)

        if not records:
            logger.info("%s check-in for session %s: nothing eligible", self.kind.value, ctx.session.session_id)
            return CheckInResult(outcome=CheckInOutcome.NOTHING_ELIGIBLE, message=self.nothing_message())

        logger.info("%s check-in for session %s recorded %d record(s)", self.kind.value, ctx.session.session_id, len(records))
        return CheckInResult(outcome=CheckInOutcome.RECORDED, records=tuple(records), message=self.describe(records))

    def _ensure_enabled(self, tenant: Tenant) -> None:
        if self.required_feature and not tenant.features.enabled(self.required_feature):
            raise FeatureDisabled(tenant.tenant_id, self.required_feature.value)

    @abstractmethod
    def decide(self, ctx: CheckInContext) -> Sequence[CheckInDecision]:
        raise NotImplementedError

    def describe(self, records: Sequence[AttendanceRecord]) -> str:
        return f"Recorded {len(records)} check-in(s)"

    def nothing_message(self) -> str:
        return "No eligible person left to check in."
