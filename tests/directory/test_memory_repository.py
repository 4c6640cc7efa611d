from datetime import date

from src.attendify.attendify.core.enums import TenantType
from src.attendify.attendify.directory.seed import build_demo_directory


def test_lookups_are_scoped_by_tenant():
    directory = build_demo_directory(date(2026, 2, 2))

    assert [t.tenant_type for t in directory.tenants()] == [TenantType.SCHOOL, TenantType.WORKPLACE]
    assert {p.tenant_id for p in directory.persons_of("t2")} == {"t2"}
    assert [s.session_id for s in directory.sessions_of("t1")] == ["s1", "s2"]


def test_unknown_identifiers_yield_empty_results():
    directory = build_demo_directory(date(2026, 2, 2))

    assert directory.persons_of("nope") == ()
    assert directory.sessions_of("nope") == ()
    assert directory.get_person("nope") is None
    assert directory.get_session("nope") is None
    assert directory.get_tenant("nope") is None


def test_sessions_are_anchored_on_given_day():
    day = date(2026, 3, 10)
    directory = build_demo_directory(day)

    s1 = directory.get_session("s1")
    assert s1.start_time.date() == day
    assert s1.start_time.hour == 8
