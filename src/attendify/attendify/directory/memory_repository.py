from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .model import Person, Session, Tenant
from .repository import DirectoryRepository


class InMemoryDirectoryRepository(DirectoryRepository):
    """Directory backed by immutable tuples; lookups are linear scans."""

    def __init__(self, tenants: Iterable[Tenant], persons: Iterable[Person], sessions: Iterable[Session]):
        self._tenants = tuple(tenants)
        self._persons = tuple(persons)
        self._sessions = tuple(sessions)

    def tenants(self) -> Sequence[Tenant]:
        return self._tenants

    def persons_of(self, tenant_id: str) -> Sequence[Person]:
        return tuple(p for p in self._persons if p.tenant_id == tenant_id)

    def sessions_of(self, tenant_id: str) -> Sequence[Session]:
        return tuple(s for s in self._sessions if s.tenant_id == tenant_id)

    def get_tenant(self, tenant_id: str) -> Optional[Tenant]:
        return next((t for t in self._tenants if t.tenant_id == tenant_id), None)

    def get_person(self, person_id: str) -> Optional[Person]:
        return next((p for p in self._persons if p.person_id == person_id), None)

    def get_session(self, session_id: str) -> Optional[Session]:
        return next((s for s in self._sessions if s.session_id == session_id), None)
