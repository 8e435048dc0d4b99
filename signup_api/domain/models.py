"""Account entities shared by every layer."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TypedDict


class SignUpRequest(TypedDict):
    name: str
    email: str
    password: str
    passwordConfirmation: str


@dataclass(frozen=True)
class AccountCreationData:
    name: str
    email: str
    password: str


@dataclass(frozen=True)
class Account:
    """A persisted account. ``password`` always holds the hashed secret."""

    id: str
    name: str
    email: str
    password: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)
