from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_owner(owner_id: Optional[str]) -> str:
    if owner_id is None or not str(owner_id).strip():
        raise ValidationError("Owner is required")
    return str(owner_id).strip()
