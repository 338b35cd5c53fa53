"""
FieldGuard Constraints

Each rule a validator can evaluate is a ``BaseConstraint`` registered by
name in the ``ConstraintRegistry``. The built-in rules cover strings,
names, passwords, numbers, base64 payloads, emails, option lists and
image size lists; custom rules register the same way.
"""

from .base import (
    BaseConstraint,
    ConstraintResult,
    ConstraintType,
    ConstraintRegistry,
)
from .text import (
    StringConstraint,
    NameConstraint,
    PasswordSimpleConstraint,
    PasswordStrictConstraint,
)
from .numeric import I32Constraint, I64Constraint, F32Constraint, F64Constraint
from .formats import B64BytesConstraint, EmailConstraint
from .options import ListStringConstraint, ListOptionsConstraint, ListSizesConstraint

__all__ = [
    # Base classes
    "BaseConstraint",
    "ConstraintResult",
    "ConstraintType",
    "ConstraintRegistry",
    # Built-in constraints
    "StringConstraint",
    "NameConstraint",
    "PasswordSimpleConstraint",
    "PasswordStrictConstraint",
    "I32Constraint",
    "I64Constraint",
    "F32Constraint",
    "F64Constraint",
    "B64BytesConstraint",
    "EmailConstraint",
    "ListStringConstraint",
    "ListOptionsConstraint",
    "ListSizesConstraint",
]
