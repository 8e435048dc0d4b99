"""SQLAlchemy models for persisted accounts."""
from __future__ import annotations

import uuid

from sqlalchemy import Column, DateTime, String, Text, func

from .session import Base


def _new_id() -> str:
    return uuid.uuid4().hex


class AccountRecord(Base):
    __tablename__ = "accounts"

    id = Column(String(32), primary_key=True, default=_new_id)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    password_hash = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
