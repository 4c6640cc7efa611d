from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeout
from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord
from ..common.logging import get_logger
from ..core.enums import ReportState, TenantType
from ..core.exceptions import SummarizerError
from .aggregation import aggregate, build_summary_request
from .model import ERROR_REPORT, OFFLINE_REPORT, ReportOutcome
from .summarizer.base import NarrativeSummarizer, parse_report

logger = get_logger(__name__)


class ReportEngine:
    """Turns records into a Report via the external summarizer.

    Every failure is absorbed: the outcome is FAILED with a fixed fallback
    report, never an exception. The provider call runs on a worker thread so
    `timeout` bounds how long a caller waits.
    """

    def __init__(self, summarizer: Optional[NarrativeSummarizer] = None, *, timeout: Optional[float] = None):
        self._summarizer = summarizer
        self._timeout = timeout
        self._executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="summarizer")

    @property
    def configured(self) -> bool:
        return self._summarizer is not None

    def summarize(self, records: Iterable[AttendanceRecord], tenant_type: TenantType, period: str) -> ReportOutcome:
        if self._summarizer is None:
            logger.info("No summarizer configured; using offline report")
            return ReportOutcome(state=ReportState.FAILED, report=OFFLINE_REPORT)

        request = build_summary_request(aggregate(records), tenant_type, period)
        future = self._executor.submit(self._summarizer.summarize, request)
        try:
            raw = future.result(timeout=self._timeout)
            report = parse_report(raw)
        except FuturesTimeout:
            future.cancel()
            logger.warning("Summarizer timed out after %ss", self._timeout)
            return ReportOutcome(state=ReportState.FAILED, report=ERROR_REPORT)
        except SummarizerError as e:
            logger.warning("Summarizer failed: %s", e)
            return ReportOutcome(state=ReportState.FAILED, report=ERROR_REPORT)
        except Exception:
            # Provider bugs must not reach the caller either.
            logger.exception("Unexpected summarizer error")
            return ReportOutcome(state=ReportState.FAILED, report=ERROR_REPORT)

        return ReportOutcome(state=ReportState.SUCCEEDED, report=report)

    def shutdown(self) -> None:
        self._executor.shutdown(wait=False)
