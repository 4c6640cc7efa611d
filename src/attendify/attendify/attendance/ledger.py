from __future__ import annotations

import threading
import uuid
from datetime import date, datetime
from typing import Callable, Iterable, Optional, Sequence

from ..common.logging import get_logger
from ..core.enums import AttendanceStatus, CheckInMethod
from ..core.exceptions import UnknownPerson
from ..directory.repository import DirectoryRepository
from .model import AttendanceRecord, GeoPoint

logger = get_logger(__name__)

DateRange = tuple[date, date]


def _new_record_id() -> str:
    return uuid.uuid4().hex


class AttendanceLedger:
    """Current-state store of attendance records.

    At most one record exists per (person, session, date). `upsert` is the only
    mutation entry point; its lookup and replace run under one lock per ledger
    so that two writes for the same triple can never both survive.
    """

    def __init__(
        self,
        directory: DirectoryRepository,
        *,
        records: Iterable[AttendanceRecord] = (),
        id_factory: Callable[[], str] = _new_record_id,
    ):
        self._directory = directory
        self._records: list[AttendanceRecord] = list(records)
        self._id_factory = id_factory
        self._lock = threading.Lock()

    def upsert(
        self,
        person_id: str,
        session_id: Optional[str],
        work_date: date,
        status: AttendanceStatus,
        method: CheckInMethod,
        check_in_time: Optional[datetime] = None,
        *,
        location: Optional[GeoPoint] = None,
        if_absent: bool = False,
    ) -> Optional[AttendanceRecord]:
        """Insert or replace the record for (person, session, date).

        A replaced record is dropped and the new one (with a fresh id) goes to
        the end of insertion order. With `if_absent=True` an existing record is
        left untouched and None is returned.
        """

        person = self._directory.get_person(person_id)
        if not person:
            raise UnknownPerson(person_id)

        with self._lock:
            index = self._index_of(person_id, session_id, work_date)
            if index is not None:
                if if_absent:
                    return None
                replaced = self._records.pop(index)
                logger.debug("Replacing record %s for %s/%s/%s", replaced.record_id, person_id, session_id, work_date)

            record = AttendanceRecord(
                record_id=self._id_factory(),
                person_id=person.person_id,
                person_name=person.name,
                session_id=session_id,
                work_date=work_date,
                status=status,
                method=method,
                check_in_time=check_in_time,
                location=location,
            )
            self._records.append(record)
            return record

    def find(self, person_id: str, session_id: Optional[str], work_date: Optional[date] = None) -> Optional[AttendanceRecord]:
        with self._lock:
            snapshot = list(self._records)
        for r in reversed(snapshot):
            if r.person_id != person_id or r.session_id != session_id:
                continue
            if work_date is None or r.work_date == work_date:
                return r
        return None

    def list_by_tenant(
        self,
        tenant_id: str,
        date_range: Optional[DateRange] = None,
        *,
        session_id: Optional[str] = None,
        newest_first: bool = False,
    ) -> Sequence[AttendanceRecord]:
        members = {p.person_id for p in self._directory.persons_of(tenant_id)}
        with self._lock:
            snapshot = list(self._records)

        items = [r for r in snapshot if r.person_id in members]
        if date_range:
            start, end = date_range
            items = [r for r in items if start <= r.work_date <= end]
        if session_id is not None:
            items = [r for r in items if r.session_id == session_id]
        if newest_first:
            items.reverse()
        return items

    def all_records(self) -> Sequence[AttendanceRecord]:
        with self._lock:
            return list(self._records)

    def _index_of(self, person_id: str, session_id: Optional[str], work_date: date) -> Optional[int]:
        for i, r in enumerate(self._records):
            if r.key == (person_id, session_id, work_date):
                return i
        return None
