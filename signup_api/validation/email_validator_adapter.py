"""EmailValidator implementation backed by the ``email-validator`` package."""

from __future__ import annotations

from email_validator import EmailNotValidError, validate_email


class EmailValidatorAdapter:
    """Syntax-only check; deliverability (DNS) lookups are disabled."""

    def is_valid(self, email: str) -> bool:
        if not isinstance(email, str):
            return False
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            return False
        return True
