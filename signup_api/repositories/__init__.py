"""
Persistence adapters.

These modules encapsulate how accounts are stored and retrieved. Services depend
on the AccountRepository protocol rather than on SQLAlchemy.
"""

from .account_repository import SQLAccountRepository

__all__ = ["SQLAccountRepository"]
