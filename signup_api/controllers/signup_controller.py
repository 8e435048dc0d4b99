"""
Sign-up controller.

Turns an HttpRequest into a CreateAccount call and maps every outcome to an
HttpResponse. Nothing raised by a collaborator crosses ``handle``.
"""

from __future__ import annotations

import logging

from signup_api.controllers.http_helpers import bad_request, ok, server_error
from signup_api.controllers.protocols import EmailValidator, HttpRequest, HttpResponse, Validator
from signup_api.domain.errors import InvalidParamError
from signup_api.domain.models import AccountCreationData, SignUpRequest
from signup_api.domain.usecases import CreateAccount

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "email", "password", "passwordConfirmation")


class SignUpController:
    def __init__(self, validator: Validator, email_validator: EmailValidator, create_account: CreateAccount) -> None:
        self.validator = validator
        self.email_validator = email_validator
        self.create_account = create_account

    async def handle(self, request: HttpRequest) -> HttpResponse:
        body: SignUpRequest = request.body or {}

        error = self.validator.validate(body)
        if error is not None:
            return bad_request(error)

        for field in REQUIRED_FIELDS:
            if not isinstance(body.get(field), str):
                return bad_request(InvalidParamError(field))

        if body["password"] != body["passwordConfirmation"]:
            return bad_request(InvalidParamError("passwordConfirmation"))

        try:
            email_ok = self.email_validator.is_valid(body["email"])
        except Exception as exc:
            logger.exception("Email validation failed")
            return server_error(exc)
        if not email_ok:
            return bad_request(InvalidParamError("email"))

        data = AccountCreationData(name=body["name"], email=body["email"], password=body["password"])
        try:
            account = await self.create_account.execute(data)
        except Exception as exc:
            logger.exception("Account creation failed")
            return server_error(exc)
        return ok(account)
