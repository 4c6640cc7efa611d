from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Optional

from ..common.datetime_utils import month_bounds, week_bounds
from ..core.enums import ReportState


@dataclass(frozen=True)
class AttendanceStats:
    present_count: int
    absent_count: int
    late_count: int
    excused_count: int
    total: int
    rate: int  # percent of PRESENT over all records


@dataclass(frozen=True)
class Report:
    """Narrative attendance report; derived fresh on every request."""

    summary: str
    risks: tuple[str, ...] = ()
    actions: tuple[str, ...] = ()
    confidence_score: float = 0.0

    def to_dict(self) -> dict:
        return {
            "summary": self.summary,
            "risks": list(self.risks),
            "actions": list(self.actions),
            "confidenceScore": self.confidence_score,
        }


# Used when no summarizer is configured.
OFFLINE_REPORT = Report(
    summary=(
        "API Key missing. This is a mock summary indicating that attendance has been relatively "
        "stable this week, with a slight dip on Thursday."
    ),
    risks=("Consistently late arrivals in Class 10A", "Friday absenteeism checks needed"),
    actions=("Send reminder SMS to late students", "Review shift scheduling for next week"),
    confidence_score=0.0,
)

# Used when the summarizer fails or answers with garbage.
ERROR_REPORT = Report(
    summary="Failed to generate report due to AI service error.",
    risks=(),
    actions=(),
    confidence_score=0.0,
)


class ReportPeriod(str, Enum):
    THIS_WEEK = "This Week"
    LAST_WEEK = "Last Week"
    THIS_MONTH = "This Month"
    LAST_MONTH = "Last Month"

    def date_range(self, today: date) -> tuple[date, date]:
        """Inclusive calendar range the label refers to, seen from `today`."""

        if self is ReportPeriod.THIS_WEEK:
            return week_bounds(today)
        if self is ReportPeriod.LAST_WEEK:
            return week_bounds(today - timedelta(days=7))
        if self is ReportPeriod.THIS_MONTH:
            return month_bounds(today)
        return month_bounds(today.replace(day=1) - timedelta(days=1))


@dataclass(frozen=True)
class ReportOutcome:
    state: ReportState
    report: Report


@dataclass(frozen=True)
class ReportSnapshot:
    """What the presentation layer sees for a tenant's report panel."""

    state: ReportState = ReportState.NOT_REQUESTED
    report: Optional[Report] = None
    period: Optional[ReportPeriod] = None
    stats: Optional[AttendanceStats] = None
