"""
Classified failures returned by the presentation layer.

They are exceptions so callers may raise them, but the signup controller only
returns them as response bodies.
"""

from __future__ import annotations

from typing import Any, Optional


class DomainError(Exception):
    """Base class for signup failures."""

    message = "Domain error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        self.message = message or self.message

    @property
    def name(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.name, "message": self.message}

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash((self.name, self.message))


class MissingParamError(DomainError):
    def __init__(self, param: str):
        super().__init__(f"Missing param: {param}")
        self.param = param

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "param": self.param}


class InvalidParamError(DomainError):
    def __init__(self, param: str):
        super().__init__(f"Invalid param: {param}")
        self.param = param

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "param": self.param}


class ServerError(DomainError):
    """Unexpected failure in a collaborator; ``cause`` keeps the original exception."""

    message = "Internal server error"

    def __init__(self, cause: Optional[BaseException] = None):
        super().__init__()
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause
