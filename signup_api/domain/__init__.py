"""Domain entities, errors and use-case contracts (no framework imports)."""

from .errors import DomainError, InvalidParamError, MissingParamError, ServerError
from .models import Account, AccountCreationData, SignUpRequest
from .usecases import CreateAccount

__all__ = [
    "Account",
    "AccountCreationData",
    "CreateAccount",
    "DomainError",
    "InvalidParamError",
    "MissingParamError",
    "ServerError",
    "SignUpRequest",
]
