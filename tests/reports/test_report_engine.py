from __future__ import annotations

import threading
from datetime import date

import pytest

from src.attendify.attendify.attendance.model import AttendanceRecord
from src.attendify.attendify.core.enums import AttendanceStatus, CheckInMethod, ReportState, TenantType
from src.attendify.attendify.core.exceptions import SummarizerUnavailable
from src.attendify.attendify.reports.engine import ReportEngine
from src.attendify.attendify.reports.model import ERROR_REPORT, OFFLINE_REPORT

GOOD = {
    "summary": "Attendance is healthy.",
    "risks": ["Late arrivals on Mondays"],
    "actions": ["Remind Class 10A", "Review Monday schedule"],
    "confidenceScore": 0.8,
}


def _record(person_id: str, status: AttendanceStatus) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=person_id,
        person_id=person_id,
        person_name=f"Name of {person_id}",
        session_id="s1",
        work_date=date(2026, 2, 2),
        status=status,
        method=CheckInMethod.MANUAL,
    )


RECORDS = [_record("u3", AttendanceStatus.PRESENT), _record("u4", AttendanceStatus.LATE)]


def test_valid_response_succeeds_and_sends_only_counts(make_summarizer):
    stub = make_summarizer(response=GOOD)
    outcome = ReportEngine(stub, timeout=2).summarize(RECORDS, TenantType.SCHOOL, "This Week")

    assert outcome.state == ReportState.SUCCEEDED
    assert outcome.report.summary == "Attendance is healthy."
    assert outcome.report.actions == ("Remind Class 10A", "Review Monday schedule")
    assert outcome.report.confidence_score == 0.8
    assert stub.requests == [
        {
            "totalRecords": 2,
            "presentCount": 1,
            "absentCount": 0,
            "lateCount": 1,
            "tenantType": "SCHOOL",
            "period": "This Week",
        }
    ]
    assert "Name of u3" not in repr(stub.requests)


@pytest.mark.parametrize(
    "response",
    [
        {"summary": "x", "risks": [], "actions": []},
        {"summary": "x", "risks": "nope", "actions": [], "confidenceScore": 0.5},
        {"summary": "x", "risks": [], "actions": [], "confidenceScore": 1.5},
        {"summary": "x", "risks": [], "actions": [], "confidenceScore": True},
        {"summary": "x", "risks": [], "actions": [], "confidenceScore": "0.7"},
        None,
        "not a mapping",
    ],
)
def test_malformed_response_falls_back(make_summarizer, response):
    outcome = ReportEngine(make_summarizer(response=response)).summarize(RECORDS, TenantType.SCHOOL, "This Week")

    assert outcome.state == ReportState.FAILED
    assert outcome.report == ERROR_REPORT


def test_unreachable_provider_fallback_is_deterministic(make_summarizer):
    engine = ReportEngine(make_summarizer(error=SummarizerUnavailable("connection refused")))

    first = engine.summarize(RECORDS, TenantType.SCHOOL, "This Week")
    second = engine.summarize([], TenantType.WORKPLACE, "Last Month")

    assert first == second
    assert first.state == ReportState.FAILED
    assert first.report.confidence_score == 0


def test_unexpected_provider_error_is_absorbed(make_summarizer):
    engine = ReportEngine(make_summarizer(error=RuntimeError("boom")))

    outcome = engine.summarize(RECORDS, TenantType.SCHOOL, "This Week")

    assert outcome.report == ERROR_REPORT


def test_timeout_is_treated_as_failure():
    release = threading.Event()

    class SlowSummarizer:
        def summarize(self, request):
            release.wait(5)
            return GOOD

    engine = ReportEngine(SlowSummarizer(), timeout=0.05)
    try:
        outcome = engine.summarize(RECORDS, TenantType.SCHOOL, "This Week")
    finally:
        release.set()
        engine.shutdown()

    assert outcome.state == ReportState.FAILED
    assert outcome.report == ERROR_REPORT


def test_no_provider_uses_offline_report():
    engine = ReportEngine(None)

    outcome = engine.summarize(RECORDS, TenantType.SCHOOL, "This Week")

    assert not engine.configured
    assert outcome.state == ReportState.FAILED
    assert outcome.report == OFFLINE_REPORT
    assert outcome.report.confidence_score == 0
