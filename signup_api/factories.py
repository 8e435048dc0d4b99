"""Wires concrete adapters into controllers."""

from __future__ import annotations

from signup_api.controllers.signup_controller import REQUIRED_FIELDS, SignUpController
from signup_api.core.security import Argon2Encrypter
from signup_api.repositories.account_repository import SQLAccountRepository
from signup_api.services.create_account import DbCreateAccount
from signup_api.validation.email_validator_adapter import EmailValidatorAdapter
from signup_api.validation.required_fields import RequiredFieldsValidator


def make_create_account() -> DbCreateAccount:
    return DbCreateAccount(encrypter=Argon2Encrypter(), repository=SQLAccountRepository())


def make_signup_controller() -> SignUpController:
    return SignUpController(
        validator=RequiredFieldsValidator(REQUIRED_FIELDS),
        email_validator=EmailValidatorAdapter(),
        create_account=make_create_account(),
    )
