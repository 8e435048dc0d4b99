"""SQLAlchemy-backed account persistence."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from signup_api.db.models import AccountRecord
from signup_api.db.session import get_session
from signup_api.domain.models import Account, AccountCreationData

logger = logging.getLogger(__name__)


def _to_account(record: AccountRecord) -> Account:
    return Account(id=record.id, name=record.name, email=record.email, password=record.password_hash)


class SQLAccountRepository:
    """Writes accounts through a short-lived session per call, off the event loop."""

    # -------------------------- sync helpers --------------------------
    def _insert(self, data: AccountCreationData) -> Account:
        record = AccountRecord(name=data.name, email=data.email, password_hash=data.password)
        with get_session() as session:
            session.add(record)
            session.commit()
            session.refresh(record)
            account = _to_account(record)
        logger.debug("Created account %s", account.id)
        return account

    def _get(self, account_id: str) -> Optional[Account]:
        with get_session() as session:
            record = session.get(AccountRecord, account_id)
            return _to_account(record) if record else None

    # -------------------------- public API --------------------------
    async def create_account(self, data: AccountCreationData) -> Account:
        return await run_in_threadpool(self._insert, data)

    async def get_by_id(self, account_id: str) -> Optional[Account]:
        if not account_id:
            return None
        return await run_in_threadpool(self._get, account_id)
