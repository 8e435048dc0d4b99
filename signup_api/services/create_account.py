"""Account creation use case."""

from __future__ import annotations

from dataclasses import dataclass, replace

from signup_api.domain.models import Account, AccountCreationData
from signup_api.services.protocols import AccountRepository, Encrypter


@dataclass
class DbCreateAccount:
    """Hashes the password and stores the account through the repository.

    Errors from the encrypter or the repository are not caught here; the
    controller decides how they surface.
    """

    encrypter: Encrypter
    repository: AccountRepository

    async def execute(self, data: AccountCreationData) -> Account:
        hashed_password = await self.encrypter.encrypt(data.password)
        stored = await self.repository.create_account(replace(data, password=hashed_password))
        return Account(id=stored.id, name=data.name, email=data.email, password=hashed_password)
