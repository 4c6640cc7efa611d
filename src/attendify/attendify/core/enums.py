from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role of a person inside a tenant."""

    SUPER_ADMIN = "SUPER_ADMIN"
    TENANT_ADMIN = "TENANT_ADMIN"
    TEACHER = "TEACHER"  # or manager
    STUDENT = "STUDENT"  # or employee


class TenantType(str, Enum):
    SCHOOL = "SCHOOL"
    WORKPLACE = "WORKPLACE"
    UNIVERSITY = "UNIVERSITY"


class SessionKind(str, Enum):
    CLASS = "CLASS"
    SHIFT = "SHIFT"
    MEETING = "MEETING"


class AttendanceStatus(str, Enum):
    """Attendance status stored on a record."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    LATE = "LATE"
    EXCUSED = "EXCUSED"


class CheckInMethod(str, Enum):
    """Channel through which a check-in was captured."""

    MANUAL = "MANUAL"
    QR = "QR"
    FACE = "FACE"
    GPS = "GPS"


class Feature(str, Enum):
    """Tenant capability flags."""

    QR = "qr"
    FACE_RECOGNITION = "face_recognition"
    AI_REPORTS = "ai_reports"
    GPS = "gps"


class ReportState(str, Enum):
    NOT_REQUESTED = "NOT_REQUESTED"
    PENDING = "PENDING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"


class CheckInKind(str, Enum):
    """Check-in command variants accepted at the presentation boundary."""

    MANUAL = "MANUAL"
    MARK_ALL = "MARK_ALL"
    QR = "QR"
    GPS = "GPS"
