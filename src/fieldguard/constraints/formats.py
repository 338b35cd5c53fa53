"""
FieldGuard Format Constraints

Encoded payloads and syntactic formats: URL-safe base64 keys of a fixed
decoded length, and email addresses.
"""

import base64
import binascii
import re
from typing import Optional

from email_validator import EmailNotValidError, validate_email
from MailChecker import MailChecker

from .base import BaseConstraint, ConstraintType

URLSAFE_B64_PATTERN = re.compile(r"[A-Za-z0-9_-]*={0,2}")


def decode_urlsafe_b64(value: str) -> Optional[bytes]:
    """Decode URL-safe base64 with optional padding; None if undecodable."""
    if not URLSAFE_B64_PATTERN.fullmatch(value):
        return None

    stripped = value.rstrip("=")
    padded = stripped + "=" * (-len(stripped) % 4)
    try:
        return base64.b64decode(padded, altchars=b"-_", validate=True)
    except (binascii.Error, ValueError):
        return None


class B64BytesConstraint(BaseConstraint):
    """
    URL-safe base64 payload whose decoded form has an exact byte length.

    A required but empty value is reported as ``invalid``. The length is
    only checked for values that decode.
    """
    name = "b64_bytes"
    constraint_type = ConstraintType.ENCODING
    description = "URL-safe base64 string decoding to a fixed number of bytes"

    def evaluate(self, validator) -> Optional[str]:
        if validator.is_required and not validator.string_value:
            return self.message(validator, "invalid")

        if validator.len is not None:
            decoded = decode_urlsafe_b64(validator.string_value)
            if decoded is not None and len(decoded) != validator.len:
                return self.message(validator, "len", len=validator.len)

        return None


class EmailConstraint(BaseConstraint):
    """Syntactically valid email address on a non-disposable domain."""
    name = "email"
    constraint_type = ConstraintType.FORMAT
    description = "Email address format, rejecting disposable domains"

    def evaluate(self, validator) -> Optional[str]:
        if not validator.string_value:
            return self.message(validator, "empty")

        try:
            validate_email(validator.string_value, check_deliverability=False)
        except EmailNotValidError:
            return self.message(validator, "invalid")

        # MailChecker also rejects throwaway domains and their subdomains
        if validator.config.reject_disposable_emails and not MailChecker.is_valid(validator.string_value):
            return self.message(validator, "invalid")

        return None
