from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Callable, Optional

from .attendance.eligibility import EligibilityResolver
from .attendance.factory import CheckInStrategyFactory
from .attendance.ledger import AttendanceLedger
from .attendance.service import AttendanceService
from .common.datetime_utils import now_local
from .core.constants import DEFAULT_SUMMARIZER_MODEL
from .core.enums import AttendanceStatus, CheckInMethod
from .directory.repository import DirectoryRepository
from .directory.seed import build_demo_directory
from .reports.engine import ReportEngine
from .reports.service import ReportService
from .reports.summarizer.base import NarrativeSummarizer
from .reports.summarizer.litellm_summarizer import LiteLLMSummarizer


@dataclass(frozen=True)
class Container:
    directory: DirectoryRepository
    ledger: AttendanceLedger
    eligibility: EligibilityResolver

    attendance_service: AttendanceService
    report_engine: ReportEngine
    report_service: ReportService


def build_summarizer(settings: dict) -> Optional[NarrativeSummarizer]:
    api_key = settings.get("api_key")
    if not api_key:
        return None
    return LiteLLMSummarizer(
        model=str(settings.get("model") or DEFAULT_SUMMARIZER_MODEL),
        api_key=str(api_key),
        timeout=settings.get("timeout"),
    )


def seed_demo_attendance(ledger: AttendanceLedger, day: date) -> None:
    """The two check-ins the demo opens with."""

    ledger.upsert("u3", "s1", day, AttendanceStatus.PRESENT, CheckInMethod.MANUAL, datetime.combine(day, time(8, 5)))
    ledger.upsert("u4", "s1", day, AttendanceStatus.LATE, CheckInMethod.QR, datetime.combine(day, time(8, 45)))


def build_container(
    *,
    summarizer_config: dict,
    clock: Callable[[], datetime] = now_local,
    seed_demo_data: bool = True,
    directory: Optional[DirectoryRepository] = None,
    summarizer: Optional[NarrativeSummarizer] = None,
    strategy_factory: Optional[CheckInStrategyFactory] = None,
) -> Container:
    today = clock().date()
    demo = directory is None
    directory = directory or build_demo_directory(today)
    ledger = AttendanceLedger(directory)
    if demo and seed_demo_data:
        seed_demo_attendance(ledger, today)

    eligibility = EligibilityResolver(directory, ledger)
    attendance_service = AttendanceService(
        directory,
        ledger,
        eligibility,
        strategy_factory=strategy_factory or CheckInStrategyFactory(),
        clock=clock,
    )

    report_engine = ReportEngine(
        summarizer or build_summarizer(summarizer_config),
        timeout=summarizer_config.get("timeout"),
    )
    report_service = ReportService(directory, ledger, report_engine, clock=clock)

    return Container(
        directory=directory,
        ledger=ledger,
        eligibility=eligibility,
        attendance_service=attendance_service,
        report_engine=report_engine,
        report_service=report_service,
    )
