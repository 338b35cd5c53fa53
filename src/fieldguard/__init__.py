"""
FieldGuard - Field-Level Validation Engine

Configure constraints for a named field with a fluent builder, set one
candidate value and evaluate it. Failures come back as localized messages
keyed by ``{field}-{reason}``; success is ``None``.
"""

import logging

__version__ = "0.1.0"

from . import nulls
from .config import FieldGuardConfig, default_config
from .constraints import (
    BaseConstraint,
    ConstraintResult,
    ConstraintType,
    ConstraintRegistry,
)
from .exceptions import CatalogError, FieldGuardError, UnknownConstraintError
from .i18n import Localizer, MessageCatalog
from .nulls import Null, NullState
from .report import ValidationReport
from .sizes import Size, SizeOrientation, SizeScale
from .validator import Validator, new

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "new",
    "Validator",
    "nulls",
    "Null",
    "NullState",
    # Collaborators
    "Localizer",
    "MessageCatalog",
    "Size",
    "SizeScale",
    "SizeOrientation",
    # Configuration
    "FieldGuardConfig",
    "default_config",
    # Constraints
    "BaseConstraint",
    "ConstraintResult",
    "ConstraintType",
    "ConstraintRegistry",
    "ValidationReport",
    # Errors
    "FieldGuardError",
    "CatalogError",
    "UnknownConstraintError",
]
