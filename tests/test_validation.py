from __future__ import annotations

import pytest

import signup_api.validation.email_validator_adapter as adapter_module
from signup_api.domain.errors import MissingParamError
from signup_api.validation.email_validator_adapter import EmailValidatorAdapter
from signup_api.validation.required_fields import RequiredFieldsValidator

FIELDS = ("name", "email", "password")


def test_required_fields_pass_when_all_present():
    validator = RequiredFieldsValidator(FIELDS)
    assert validator.validate({"name": "n", "email": "e", "password": "p"}) is None


@pytest.mark.parametrize("blank", [None, "", "   "])
def test_blank_values_count_as_missing(blank):
    validator = RequiredFieldsValidator(FIELDS)
    error = validator.validate({"name": "n", "email": blank, "password": "p"})
    assert error == MissingParamError("email")


def test_first_missing_field_in_declared_order_wins():
    validator = RequiredFieldsValidator(FIELDS)
    assert validator.validate({"email": "e"}) == MissingParamError("name")
    assert validator.validate({"name": "n"}) == MissingParamError("email")


def test_none_payload_reports_first_field():
    assert RequiredFieldsValidator(FIELDS).validate(None) == MissingParamError("name")


def test_required_fields_is_pure():
    validator = RequiredFieldsValidator(FIELDS)
    payload = {"name": "n"}
    assert validator.validate(payload) == validator.validate(payload)
    assert payload == {"name": "n"}


@pytest.mark.parametrize("email", ["any_email@mail.com", "a@b.com", "first.last+tag@mail.net"])
def test_email_adapter_accepts_valid_addresses(email):
    assert EmailValidatorAdapter().is_valid(email) is True


@pytest.mark.parametrize("email", ["invalid_email", "a@", "@mail.com", "a b@mail.com", 42])
def test_email_adapter_rejects_invalid_addresses(email):
    assert EmailValidatorAdapter().is_valid(email) is False


def test_email_adapter_skips_deliverability_checks(monkeypatch):
    seen = {}

    def fake_validate(email, **kwargs):
        seen["email"] = email
        seen.update(kwargs)

    monkeypatch.setattr(adapter_module, "validate_email", fake_validate)

    assert EmailValidatorAdapter().is_valid("any_email@mail.com") is True
    assert seen == {"email": "any_email@mail.com", "check_deliverability": False}


def test_email_adapter_lets_unexpected_errors_through(monkeypatch):
    def broken(email, **kwargs):
        raise RuntimeError("resolver crashed")

    monkeypatch.setattr(adapter_module, "validate_email", broken)

    with pytest.raises(RuntimeError):
        EmailValidatorAdapter().is_valid("any_email@mail.com")
