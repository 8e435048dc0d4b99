"""
High-level use cases for the signup API.

Each service orchestrates repositories/adapters to implement one business rule.
Controllers call these services instead of touching storage directly.
"""

from .create_account import DbCreateAccount
from .protocols import AccountRepository, Encrypter

__all__ = ["AccountRepository", "DbCreateAccount", "Encrypter"]
