"""Demo directory: two tenants with their people and today's sessions."""

from __future__ import annotations

from datetime import date, datetime, time

from ..core.enums import Role, SessionKind, TenantType
from .memory_repository import InMemoryDirectoryRepository
from .model import Person, Session, Tenant, TenantFeatures

DEMO_TENANTS = (
    Tenant(
        tenant_id="t1",
        name="Greenwood High School",
        slug="school",
        tenant_type=TenantType.SCHOOL,
        features=TenantFeatures(qr=True, face_recognition=False, ai_reports=True, gps=False),
    ),
    Tenant(
        tenant_id="t2",
        name="TechCorp Innovations",
        slug="work",
        tenant_type=TenantType.WORKPLACE,
        features=TenantFeatures(qr=True, face_recognition=True, ai_reports=True, gps=True),
    ),
)

DEMO_PERSONS = (
    Person("u1", "Ahmed Ali", "ahmed@school.com", Role.TENANT_ADMIN, "t1"),
    Person("u2", "Sarah Johnson", "sarah@school.com", Role.TEACHER, "t1", "Class 10A"),
    Person("u3", "Mohamed Farah", "mohamed@student.com", Role.STUDENT, "t1", "Class 10A"),
    Person("u4", "Asha Abdi", "asha@student.com", Role.STUDENT, "t1", "Class 10A"),
    Person("u7", "Bilal Osman", "bilal@student.com", Role.STUDENT, "t1", "Class 10A"),
    Person("u5", "John Doe", "john@techcorp.com", Role.TENANT_ADMIN, "t2"),
    Person("u6", "Emily Blunt", "emily@techcorp.com", Role.STUDENT, "t2", "Engineering"),
    Person("u8", "Michael Chen", "michael@techcorp.com", Role.STUDENT, "t2", "Engineering"),
)


def demo_sessions(day: date) -> tuple[Session, ...]:
    def at(hour: int, minute: int = 0) -> datetime:
        return datetime.combine(day, time(hour, minute))

    return (
        Session("s1", "Mathematics 101", "t1", at(8), at(9, 30), "Class 10A", SessionKind.CLASS, "Sarah Johnson"),
        Session("s2", "History & Culture", "t1", at(10), at(11, 30), "Class 10A", SessionKind.CLASS, "Ahmed Ali"),
        Session("s3", "Morning Shift", "t2", at(9), at(17), "Engineering", SessionKind.SHIFT),
        Session("s4", "Sprint Planning", "t2", at(11), at(12), "Engineering", SessionKind.MEETING),
    )


def build_demo_directory(day: date) -> InMemoryDirectoryRepository:
    return InMemoryDirectoryRepository(DEMO_TENANTS, DEMO_PERSONS, demo_sessions(day))
