from __future__ import annotations

from typing import Optional

from signup_api.controllers.protocols import HttpResponse
from signup_api.domain.errors import DomainError, ServerError
from signup_api.domain.models import Account


def ok(account: Account) -> HttpResponse:
    return HttpResponse(status_code=200, body=account)


def bad_request(error: DomainError) -> HttpResponse:
    return HttpResponse(status_code=400, body=error)


def server_error(cause: Optional[BaseException] = None) -> HttpResponse:
    return HttpResponse(status_code=500, body=ServerError(cause))
