from __future__ import annotations

from enum import Enum
from typing import TypeVar

from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)


def require_non_empty(value: str | None, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def parse_enum(enum_cls: type[E], value: str | None, field_name: str) -> E:
    raw = require_non_empty(value, field_name)
    try:
        return enum_cls(raw.strip().upper())
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}") from None
