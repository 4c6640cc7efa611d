from __future__ import annotations

import threading
from datetime import date, datetime

import pytest

from src.attendify.attendify.core.enums import AttendanceStatus, CheckInMethod
from src.attendify.attendify.core.exceptions import UnknownPerson

DAY = date(2026, 2, 2)


def test_upsert_captures_person_name(ledger):
    rec = ledger.upsert("u3", "s1", DAY, AttendanceStatus.PRESENT, CheckInMethod.MANUAL, datetime(2026, 2, 2, 8, 5))

    assert rec.record_id == "r1"
    assert rec.person_name == "Mohamed Farah"
    assert ledger.find("u3", "s1", DAY) == rec


def test_same_triple_keeps_only_last_write(ledger):
    ledger.upsert("u3", "s1", DAY, AttendanceStatus.PRESENT, CheckInMethod.MANUAL)
    ledger.upsert("u3", "s1", DAY, AttendanceStatus.ABSENT, CheckInMethod.QR)
    last = ledger.upsert("u3", "s1", DAY, AttendanceStatus.LATE, CheckInMethod.GPS)

    matching = [r for r in ledger.all_records() if r.key == ("u3", "s1", DAY)]
    assert matching == [last]
    assert last.status == AttendanceStatus.LATE
    assert last.method == CheckInMethod.GPS
    assert last.record_id == "r3"


def test_replaced_record_moves_to_end(ledger):
    ledger.upsert("u3", "s1", DAY, AttendanceStatus.PRESENT, CheckInMethod.MANUAL)
    ledger.upsert("u4", "s1", DAY, AttendanceStatus.PRESENT, CheckInMethod.MANUAL)
    ledger.upsert("u3", "s1", DAY, AttendanceStatus.LATE, CheckInMethod.MANUAL)

    assert [r.person_id for r in ledger.all_records()] == ["u4", "u3"]


def test_different_sessions_are_independent(ledger):
    ledger.upsert("u3", "s1", DAY, AttendanceStatus.PRESENT, CheckInMethod.MANUAL)

    assert ledger.find("u3", "s2", DAY) is None
    ledger.upsert("u3", "s2", DAY, AttendanceStatus.ABSENT, CheckInMethod.MANUAL)
    assert ledger.find("u3", "s1", DAY).status == AttendanceStatus.PRESENT
    assert len(ledger.all_records()) == 2


def test_unknown_person_is_rejected_without_mutation(ledger):
    ledger.upsert("u3", "s1", DAY, AttendanceStatus.PRESENT, CheckInMethod.MANUAL)

    with pytest.raises(UnknownPerson):
        ledger.upsert("ghost", "s1", DAY, AttendanceStatus.PRESENT, CheckInMethod.MANUAL)

    assert len(ledger.all_records()) == 1


def test_if_absent_leaves_existing_record(ledger):
    first = ledger.upsert("u3", "s1", DAY, AttendanceStatus.LATE, CheckInMethod.MANUAL)

    assert ledger.upsert("u3", "s1", DAY, AttendanceStatus.PRESENT, CheckInMethod.QR, if_absent=True) is None
    assert ledger.find("u3", "s1", DAY) == first


def test_find_without_date_returns_most_recent(ledger):
    ledger.upsert("u3", "s1", date(2026, 2, 2), AttendanceStatus.PRESENT, CheckInMethod.MANUAL)
    ledger.upsert("u3", "s1", date(2026, 2, 3), AttendanceStatus.LATE, CheckInMethod.MANUAL)

    assert ledger.find("u3", "s1").work_date == date(2026, 2, 3)
    assert ledger.find("u3", "s1", date(2026, 2, 2)).status == AttendanceStatus.PRESENT
    assert ledger.find("u3", "s9") is None


def test_list_by_tenant_never_leaks_other_tenants(ledger):
    ledger.upsert("u3", "s1", DAY, AttendanceStatus.PRESENT, CheckInMethod.MANUAL)
    ledger.upsert("u6", "s3", DAY, AttendanceStatus.LATE, CheckInMethod.GPS)
    ledger.upsert("u4", "s1", DAY, AttendanceStatus.ABSENT, CheckInMethod.MANUAL)

    school = ledger.list_by_tenant("t1")
    work = ledger.list_by_tenant("t2")

    assert [r.person_id for r in school] == ["u3", "u4"]
    assert [r.person_id for r in work] == ["u6"]
    assert ledger.list_by_tenant("unknown") == []


def test_list_by_tenant_filters_and_reverses(ledger):
    ledger.upsert("u3", "s1", date(2026, 2, 1), AttendanceStatus.PRESENT, CheckInMethod.MANUAL)
    ledger.upsert("u3", "s1", date(2026, 2, 2), AttendanceStatus.PRESENT, CheckInMethod.MANUAL)
    ledger.upsert("u3", "s2", date(2026, 2, 2), AttendanceStatus.LATE, CheckInMethod.MANUAL)

    in_range = ledger.list_by_tenant("t1", (date(2026, 2, 2), date(2026, 2, 2)))
    assert len(in_range) == 2

    only_s2 = ledger.list_by_tenant("t1", session_id="s2")
    assert [r.status for r in only_s2] == [AttendanceStatus.LATE]

    newest = ledger.list_by_tenant("t1", newest_first=True)
    assert [r.session_id for r in newest] == ["s2", "s1", "s1"]


def test_concurrent_upserts_leave_single_record(ledger):
    barrier = threading.Barrier(8)

    def worker(i: int):
        barrier.wait()
        status = AttendanceStatus.PRESENT if i % 2 else AttendanceStatus.LATE
        ledger.upsert("u3", "s1", DAY, status, CheckInMethod.MANUAL)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len([r for r in ledger.all_records() if r.key == ("u3", "s1", DAY)]) == 1
