from __future__ import annotations

import threading
from datetime import date, datetime
from typing import Callable, Optional

from ..attendance.ledger import AttendanceLedger, DateRange
from ..common.datetime_utils import now_local
from ..common.logging import get_logger
from ..core.enums import Feature, ReportState
from ..core.exceptions import FeatureDisabled, NotFoundError
from ..directory.model import Tenant
from ..directory.repository import DirectoryRepository
from .aggregation import aggregate
from .engine import ReportEngine
from .model import AttendanceStats, ReportPeriod, ReportSnapshot

logger = get_logger(__name__)


class ReportService:
    """Use cases: dashboard statistics and the per-tenant report panel."""

    def __init__(
        self,
        directory: DirectoryRepository,
        ledger: AttendanceLedger,
        engine: ReportEngine,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._directory = directory
        self._ledger = ledger
        self._engine = engine
        self._snapshots: dict[str, ReportSnapshot] = {}
        self._requests: dict[str, int] = {}
        self._lock = threading.Lock()
        self._clock = clock

    def stats(self, tenant_id: str, date_range: Optional[DateRange] = None) -> AttendanceStats:
        self._get_tenant(tenant_id)
        return aggregate(self._ledger.list_by_tenant(tenant_id, date_range))

    def current(self, tenant_id: str) -> ReportSnapshot:
        self._get_tenant(tenant_id)
        with self._lock:
            return self._snapshots.get(tenant_id, ReportSnapshot())

    def generate(self, tenant_id: str, period: ReportPeriod, *, today: date | None = None) -> ReportSnapshot:
        tenant = self._get_tenant(tenant_id)
        if not tenant.features.enabled(Feature.AI_REPORTS):
            raise FeatureDisabled(tenant_id, Feature.AI_REPORTS.value)

        today = today or self._clock().date()
        records = self._ledger.list_by_tenant(tenant_id, period.date_range(today))
        stats = aggregate(records)

        with self._lock:
            token = self._requests.get(tenant_id, 0) + 1
            self._requests[tenant_id] = token
            self._snapshots[tenant_id] = ReportSnapshot(state=ReportState.PENDING, period=period, stats=stats)

        outcome = self._engine.summarize(records, tenant.tenant_type, period.value)
        logger.info("Report for tenant %s (%s): %s", tenant_id, period.value, outcome.state.value)

        snapshot = ReportSnapshot(state=outcome.state, report=outcome.report, period=period, stats=stats)
        with self._lock:
            # Only the latest request for the tenant is kept.
            if self._requests[tenant_id] == token:
                self._snapshots[tenant_id] = snapshot
            else:
                logger.debug("Dropping superseded report for tenant %s", tenant_id)
        return snapshot

    def _get_tenant(self, tenant_id: str) -> Tenant:
        tenant = self._directory.get_tenant(tenant_id)
        if not tenant:
            raise NotFoundError(f"Unknown tenant: {tenant_id}")
        return tenant
