"""Transport-neutral request/response shapes and the collaborators controllers consume."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Protocol, Union

from signup_api.domain.errors import DomainError
from signup_api.domain.models import Account


@dataclass
class HttpRequest:
    body: Mapping[str, Any] = field(default_factory=dict)


@dataclass
class HttpResponse:
    status_code: int
    body: Union[Account, DomainError]

    def body_dict(self) -> dict[str, Any]:
        return self.body.to_dict()


class Validator(Protocol):
    def validate(self, payload: Optional[Mapping[str, Any]]) -> Optional[DomainError]:
        ...


class EmailValidator(Protocol):
    def is_valid(self, email: str) -> bool:
        ...
