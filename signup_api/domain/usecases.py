"""Use-case contracts consumed by the presentation layer."""
from __future__ import annotations

from typing import Protocol

from signup_api.domain.models import Account, AccountCreationData


class CreateAccount(Protocol):
    async def execute(self, data: AccountCreationData) -> Account:
        ...
