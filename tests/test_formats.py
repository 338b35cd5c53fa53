"""
Tests for format constraints

Covers URL-safe base64 payloads and email addresses.
"""

import base64

import pytest

import fieldguard
from fieldguard import FieldGuardConfig, MessageCatalog, nulls
from fieldguard.constraints.formats import decode_urlsafe_b64


def encoded(size, padded=True):
    """Helper to build the URL-safe encoding of ``size`` raw bytes."""
    text = base64.urlsafe_b64encode(bytes(range(256))[:size]).decode("ascii")
    return text if padded else text.rstrip("=")


class TestB64BytesConstraint:
    """Tests for validate_b64_bytes."""

    def key_validator(self, value):
        return fieldguard.new("key").set_len(16).set_string_value(nulls.new(value))

    @pytest.mark.parametrize("padded", [True, False])
    def test_exact_length_passes(self, padded):
        """Test that a payload of the configured length passes, padded or not."""
        assert self.key_validator(encoded(16, padded)).validate_b64_bytes() is None

    @pytest.mark.parametrize("padded", [True, False])
    def test_wrong_length(self, padded):
        """Test that a payload of another length reports len."""
        assert self.key_validator(encoded(15, padded)).validate_b64_bytes() == "key-len"

    def test_required_empty_is_invalid(self):
        """Test that a required empty payload reports invalid, not empty."""
        validator = self.key_validator("").set_as_required(True)

        assert validator.validate_b64_bytes() == "key-invalid"

    def test_undecodable_value_skips_length(self):
        """Test that values which do not decode are not length checked."""
        assert self.key_validator("not base64!").validate_b64_bytes() is None
        assert self.key_validator("ab+/cd==").validate_b64_bytes() is None

    def test_no_length_configured(self):
        """Test that without a length only the required check applies."""
        validator = fieldguard.new("key").set_string_value(encoded(3))

        assert validator.validate_b64_bytes() is None

    def test_length_argument(self):
        """Test that the expected length reaches the catalog."""
        catalog = MessageCatalog({"key-len": "Key must be {len} bytes"})
        validator = self.key_validator(encoded(8)).with_localizer(catalog)

        assert validator.validate_b64_bytes() == "Key must be 16 bytes"

    def test_decode_helper(self):
        """Test URL-safe decoding edge cases."""
        assert decode_urlsafe_b64(encoded(4)) == bytes(range(4))
        assert decode_urlsafe_b64("") == b""
        assert decode_urlsafe_b64("a") is None
        assert decode_urlsafe_b64("ß") is None


class TestEmailConstraint:
    """Tests for validate_email."""

    def email_validator(self, value, config=None):
        return fieldguard.new("email", config=config).set_string_value(nulls.new(value))

    def test_empty(self):
        """Test that a missing address is empty regardless of is_required."""
        assert fieldguard.new("email").validate_email() == "email-empty"

    @pytest.mark.parametrize("value", ["ada@lovelace.org", "first.last+tag@mail.co.uk"])
    def test_valid_addresses(self, value):
        """Test well formed addresses."""
        assert self.email_validator(value).validate_email() is None

    @pytest.mark.parametrize("value", ["not-an-email", "two@@signs.com", "missing@tld", "@nouser.org"])
    def test_invalid_addresses(self, value):
        """Test malformed addresses."""
        assert self.email_validator(value).validate_email() == "email-invalid"

    def test_disposable_domain(self):
        """Test that throwaway domains are rejected by default."""
        assert self.email_validator("someone@mailinator.com").validate_email() == "email-invalid"

    def test_disposable_domain_allowed_by_config(self):
        """Test that the disposable check can be turned off."""
        config = FieldGuardConfig(reject_disposable_emails=False)

        assert self.email_validator("someone@mailinator.com", config).validate_email() is None

    @pytest.mark.parametrize(
        "value",
        ["x@sub.mailinator.com", "x@mailnesia.com", "x@yopmail.fr", "x@guerrillamail.net"],
    )
    def test_disposable_domain_variants(self, value):
        """Test that subdomains and less common throwaway providers are rejected."""
        assert self.email_validator(value).validate_email() == "email-invalid"

    def test_disposable_variants_allowed_by_config(self):
        """Test that turning the check off also admits throwaway subdomains."""
        config = FieldGuardConfig(reject_disposable_emails=False)

        assert self.email_validator("x@sub.mailinator.com", config).validate_email() is None
