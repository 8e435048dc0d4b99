"""Presence checks for request payloads."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from signup_api.domain.errors import DomainError, MissingParamError


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


class RequiredFieldsValidator:
    """Reports the first field, in declaration order, that is absent or empty."""

    def __init__(self, fields: Sequence[str]) -> None:
        self.fields = tuple(fields)

    def validate(self, payload: Optional[Mapping[str, Any]]) -> Optional[DomainError]:
        data = payload or {}
        for field in self.fields:
            if _is_blank(data.get(field)):
                return MissingParamError(field)
        return None
