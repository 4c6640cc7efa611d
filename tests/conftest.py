from __future__ import annotations

from datetime import datetime

import pytest

from src.attendify.attendify.attendance.eligibility import EligibilityResolver
from src.attendify.attendify.attendance.factory import CheckInStrategyFactory
from src.attendify.attendify.attendance.ledger import AttendanceLedger
from src.attendify.attendify.attendance.service import AttendanceService
from src.attendify.attendify.directory.seed import build_demo_directory


class StubSummarizer:
    """Records requests and answers with a canned payload (or raises)."""

    def __init__(self, response=None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.requests = []

    def summarize(self, request):
        self.requests.append(dict(request))
        if self.error:
            raise self.error
        return self.response


class CountingIds:
    def __init__(self):
        self._n = 0

    def __call__(self) -> str:
        self._n += 1
        return f"r{self._n}"


@pytest.fixture
def fixed_now() -> datetime:
    # Monday
    return datetime(2026, 2, 2, 8, 10, 0)


@pytest.fixture
def directory(fixed_now):
    return build_demo_directory(fixed_now.date())


@pytest.fixture
def ledger(directory):
    return AttendanceLedger(directory, id_factory=CountingIds())


@pytest.fixture
def eligibility(directory, ledger):
    return EligibilityResolver(directory, ledger)


@pytest.fixture
def attendance_service(directory, ledger, eligibility):
    # Deterministic "random" pick: last uncovered person
    factory = CheckInStrategyFactory(qr_chooser=lambda people: people[-1])
    return AttendanceService(directory, ledger, eligibility, strategy_factory=factory)


@pytest.fixture
def make_summarizer():
    return StubSummarizer
