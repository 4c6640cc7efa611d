from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Person, Session, Tenant


class DirectoryRepository(Protocol):
    """Read-only reference data: tenants, persons and sessions.

    Unknown identifiers yield empty sequences or None, never errors.
    """

    def tenants(self) -> Sequence[Tenant]:
        raise NotImplementedError

    def persons_of(self, tenant_id: str) -> Sequence[Person]:
        raise NotImplementedError

    def sessions_of(self, tenant_id: str) -> Sequence[Session]:
        raise NotImplementedError

    def get_tenant(self, tenant_id: str) -> Optional[Tenant]:
        raise NotImplementedError

    def get_person(self, person_id: str) -> Optional[Person]:
        raise NotImplementedError

    def get_session(self, session_id: str) -> Optional[Session]:
        raise NotImplementedError
