from __future__ import annotations

from typing import Any, Mapping

from ..core.exceptions import ValidationError


def require_non_empty(value: str | None, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_fields(payload: Mapping[str, Any], *names: str) -> dict[str, str]:
    """Return the named fields stripped, or fail on the first missing one."""
    missing = [n for n in names if payload.get(n) is None or not str(payload.get(n)).strip()]
    if missing:
        raise ValidationError(f"{', '.join(missing)} required")
    return {n: str(payload[n]).strip() for n in names}


def optional_str(value: Any) -> str | None:
    if value is None:
        return None
    value = str(value).strip()
    return value or None
