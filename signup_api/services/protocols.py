"""Capabilities the account use cases depend on."""
from __future__ import annotations

from typing import Protocol

from signup_api.domain.models import Account, AccountCreationData


class Encrypter(Protocol):
    async def encrypt(self, plaintext: str) -> str:
        """Return a one-way hash of ``plaintext``."""
        ...


class AccountRepository(Protocol):
    async def create_account(self, data: AccountCreationData) -> Account:
        """Persist ``data`` (password already hashed) and return it with its new id."""
        ...
