from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..core.enums import Feature, Role, SessionKind, TenantType


@dataclass(frozen=True)
class TenantFeatures:
    qr: bool = False
    face_recognition: bool = False
    ai_reports: bool = False
    gps: bool = False

    def enabled(self, feature: Feature) -> bool:
        return bool(getattr(self, feature.value))


@dataclass(frozen=True)
class Tenant:
    """Domain entity: an organization sharing the platform instance."""

    tenant_id: str
    name: str
    slug: str
    tenant_type: TenantType
    features: TenantFeatures = field(default_factory=TenantFeatures)


@dataclass(frozen=True)
class Person:
    """Domain entity: member of exactly one tenant.

    `group` is the class (schools) or department (workplaces) label matched
    against `Session.target_group`.
    """

    person_id: str
    name: str
    email: str
    role: Role
    tenant_id: str
    group: Optional[str] = None


@dataclass(frozen=True)
class Session:
    """Domain entity: scheduled class, shift or meeting."""

    session_id: str
    title: str
    tenant_id: str
    start_time: datetime
    end_time: datetime
    target_group: str
    kind: SessionKind
    instructor_name: Optional[str] = None
