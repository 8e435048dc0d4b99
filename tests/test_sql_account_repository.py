"""
Smoke tests for the SQL account repository against a temporary SQLite database.
"""
from __future__ import annotations

import pytest

from signup_api.db import models
from signup_api.db.session import get_session
from signup_api.domain.models import AccountCreationData
from signup_api.repositories.account_repository import SQLAccountRepository

ACCOUNT_DATA = AccountCreationData(name="any name", email="any_email@mail.com", password="any_password")


@pytest.mark.asyncio
async def test_create_account_returns_account_with_id(db_env):
    repo = SQLAccountRepository()

    account = await repo.create_account(ACCOUNT_DATA)

    assert account.id
    assert account.name == "any name"
    assert account.email == "any_email@mail.com"
    assert account.password == "any_password"


@pytest.mark.asyncio
async def test_created_account_is_persisted(db_env):
    repo = SQLAccountRepository()

    account = await repo.create_account(ACCOUNT_DATA)

    with get_session() as session:
        record = session.get(models.AccountRecord, account.id)
        assert record is not None
        assert record.password_hash == "any_password"
        assert record.created_at is not None
    assert await repo.get_by_id(account.id) == account


@pytest.mark.asyncio
async def test_duplicate_calls_create_distinct_accounts(db_env):
    repo = SQLAccountRepository()

    first = await repo.create_account(ACCOUNT_DATA)
    second = await repo.create_account(ACCOUNT_DATA)

    assert first.id != second.id


@pytest.mark.asyncio
async def test_get_by_id_unknown_returns_none(db_env):
    repo = SQLAccountRepository()
    assert await repo.get_by_id("missing") is None
    assert await repo.get_by_id("") is None
