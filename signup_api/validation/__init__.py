"""Input validators plugged into the controllers."""

from .email_validator_adapter import EmailValidatorAdapter
from .required_fields import RequiredFieldsValidator

__all__ = ["EmailValidatorAdapter", "RequiredFieldsValidator"]
