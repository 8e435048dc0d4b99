"""Password hashing backed by argon2."""

from __future__ import annotations

from argon2 import PasswordHasher
from fastapi.concurrency import run_in_threadpool

_ph = PasswordHasher()
_PREFIX = "argon2$"


def hash_password(password: str) -> str:
    """Create an Argon2 hash with a prefix for detection."""
    hashed = _ph.hash(password)
    return f"{_PREFIX}{hashed}"


class Argon2Encrypter:
    """Encrypter that hashes secrets in a worker thread so the event loop stays free."""

    async def encrypt(self, plaintext: str) -> str:
        return await run_in_threadpool(hash_password, plaintext)
