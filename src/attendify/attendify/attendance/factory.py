from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceStatus, CheckInKind
from ..core.exceptions import ValidationError
from .model import GeoPoint
from .strategies.base import CheckInStrategy
from .strategies.gps_strategy import GPSCheckInStrategy
from .strategies.manual_strategy import ManualStrategy
from .strategies.mark_all_strategy import MarkAllPresentStrategy
from .strategies.qr_strategy import Chooser, QRScanStrategy


@dataclass
class CheckInStrategyFactory:
    """Factory Pattern: build the strategy for a check-in command."""

    qr_chooser: Optional[Chooser] = None

    def for_command(
        self,
        kind: CheckInKind,
        *,
        person_id: Optional[str] = None,
        status: Optional[AttendanceStatus] = None,
        location: Optional[GeoPoint] = None,
    ) -> CheckInStrategy:
        if kind == CheckInKind.MANUAL:
            if not person_id or status is None:
                raise ValidationError("Manual marks need a person and a status")
            return ManualStrategy(person_id, status)
        if kind == CheckInKind.MARK_ALL:
            return MarkAllPresentStrategy()
        if kind == CheckInKind.QR:
            return QRScanStrategy(self.qr_chooser)
        if kind == CheckInKind.GPS:
            return GPSCheckInStrategy(location)
        raise ValidationError(f"Unsupported check-in kind: {kind}")
