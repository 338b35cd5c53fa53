"""
FieldGuard Text Constraints

Length, name and password rules for string fields. Lengths are measured
in UTF-8 bytes.
"""

from typing import Dict, Optional

from .base import BaseConstraint, ConstraintType

# Characters allowed in a name besides letters of any script
NAME_PUNCTUATION = frozenset(" -'・·")


def byte_length(value: str) -> int:
    return len(value.encode("utf-8"))


class StringConstraint(BaseConstraint):
    """
    Non-empty string within optional length bounds.

    Emptiness is always an error here, whether or not the field is
    required; length bounds apply whenever they are configured.
    """
    name = "string"
    constraint_type = ConstraintType.TEXT
    description = "Non-empty string with optional minimum and maximum length"

    def evaluate(self, validator) -> Optional[str]:
        if not validator.string_value:
            return self.message(validator, "empty")

        return self.check_bounds(
            validator,
            byte_length(validator.string_value),
            validator.min,
            validator.max,
        )


class NameConstraint(StringConstraint):
    """
    Personal names: the string rules, then letters of any script plus
    space, hyphen, apostrophe and middle dots.
    """
    name = "name"
    description = "Personal name made of letters, spaces, hyphens, apostrophes and middle dots"

    def evaluate(self, validator) -> Optional[str]:
        error = super().evaluate(validator)
        if error is not None:
            return error

        if not all(char.isalpha() or char in NAME_PUNCTUATION for char in validator.string_value):
            return self.message(validator, "invalid")

        return None


class PasswordSimpleConstraint(StringConstraint):
    """Passwords held only to the string rules."""
    name = "password_simple"
    constraint_type = ConstraintType.CREDENTIAL
    description = "Password with optional minimum and maximum length"


class PasswordStrictConstraint(BaseConstraint):
    """
    Password strength rules.

    Every rule is checked independently and all failures are reported
    together, keyed by reason:

    - minimum / maximum: length outside the configured bounds
    - lowercase / uppercase: no ASCII letter of that case
    - number: every character is an ASCII letter
    - symbol: every character is an ASCII letter or digit
    """
    name = "password_strict"
    constraint_type = ConstraintType.CREDENTIAL
    description = "Password of bounded length mixing cases, digits and symbols"

    def evaluate(self, validator) -> Optional[Dict[str, str]]:
        value = validator.string_value
        config = validator.config
        length = byte_length(value)
        errors: Dict[str, str] = {}

        if length < config.password_min_length:
            errors["minimum"] = self.message(validator, "minimum", min=config.password_min_length)

        if length > config.password_max_length:
            errors["maximum"] = self.message(validator, "maximum", max=config.password_max_length)

        if not any(char.isascii() and char.islower() for char in value):
            errors["lowercase"] = self.message(validator, "lowercase")

        if not any(char.isascii() and char.isupper() for char in value):
            errors["uppercase"] = self.message(validator, "uppercase")

        if all(char.isascii() and char.isalpha() for char in value):
            errors["number"] = self.message(validator, "number")

        if all(char.isascii() and char.isalnum() for char in value):
            errors["symbol"] = self.message(validator, "symbol")

        return errors or None
