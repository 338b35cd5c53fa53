"""
FieldGuard Option Constraints

Membership of a string in the configured option list, and the per-entry
rules for lists of image sizes.
"""

from typing import List, Optional, Sequence

from .base import BaseConstraint, ConstraintType


def format_options(options: Sequence[str]) -> str:
    """Render options as ``❛a❜, ❛b❜ and ❛c❜``."""
    wrapped = [f"❛{option}❜" for option in options]
    if len(wrapped) > 1:
        return f"{', '.join(wrapped[:-1])} and {wrapped[-1]}"
    return "".join(wrapped)


class ListStringConstraint(BaseConstraint):
    """
    Required value must be one of the configured options.

    Comparison ignores case unless the validator is case sensitive. The
    stored option list is never modified.
    """
    name = "list_string"
    constraint_type = ConstraintType.ENUMERATION
    description = "String that must appear in the option list"

    def is_member(self, validator) -> bool:
        options = validator.option_list
        if validator.is_case_sensitive:
            return validator.string_value in options
        return validator.string_value.lower() in [option.lower() for option in options]

    def evaluate(self, validator) -> Optional[str]:
        if validator.is_required and not validator.string_value:
            return self.message(validator, "empty")

        if validator.option_list is not None and validator.is_required and not self.is_member(validator):
            return self.invalid(validator)

        return None

    def invalid(self, validator) -> str:
        return self.message(validator, "invalid")


class ListOptionsConstraint(ListStringConstraint):
    """Same membership rule; the message lists the allowed options."""
    name = "list_options"
    description = "String that must appear in the option list, reporting the options"

    def invalid(self, validator) -> str:
        options = format_options(validator.option_list or ())
        if validator.parent_string:
            return self.message(validator, "invalid", options=options, parent=validator.parent_string)
        return self.message(validator, "invalid", options=options)


class ListSizesConstraint(BaseConstraint):
    """
    Every size entry of a required list must use a known scale and
    orientation and have positive dimensions. Each offending entry adds
    one ``invalid`` message carrying the entry as JSON.
    """
    name = "list_sizes"
    constraint_type = ConstraintType.COLLECTION
    description = "Non-empty list of image sizes with known scales and orientations"

    def evaluate(self, validator) -> Optional[List[str]]:
        errors: List[str] = []
        sizes = validator.list_sizes_value

        if validator.is_required and not sizes:
            errors.append(self.message(validator, "empty"))

        if validator.is_required and sizes:
            for size in sizes:
                if not (
                    size.has_known_scale()
                    and size.has_known_orientation()
                    and size.width > 0
                    and size.height > 0
                ):
                    errors.append(self.message(validator, "invalid", entry=size.to_json()))

        return errors or None
