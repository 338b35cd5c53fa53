"""
FieldGuard Constraints Base Module

This module defines the base classes and interfaces for field constraints.
Every built-in rule (string length, numeric range, option membership, ...)
is a ``BaseConstraint`` registered by name, and custom rules plug in the
same way.

The constraint system provides:
- Abstract base class for all constraints
- Result type wrapping an evaluation outcome
- Registry for looking constraints up by name
- Shared helpers for key derivation and range checks
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)


class ConstraintType(str, Enum):
    """
    Categories of constraints.

    - TEXT: Free text length and character rules
    - CREDENTIAL: Password strength rules
    - NUMERIC: Integer and float ranges
    - ENCODING: Encoded payloads such as base64 keys
    - FORMAT: Syntactic formats such as email addresses
    - ENUMERATION: Membership in a configured option list
    - COLLECTION: Rules applied to every entry of a list
    """
    TEXT = "text"
    CREDENTIAL = "credential"
    NUMERIC = "numeric"
    ENCODING = "encoding"
    FORMAT = "format"
    ENUMERATION = "enumeration"
    COLLECTION = "collection"


@dataclass
class ConstraintResult:
    """
    Result of evaluating one constraint for one field.

    Attributes:
        field: Name of the validated field
        constraint_name: Name of the constraint that was evaluated
        passed: Whether the evaluation passed
        error: The evaluation outcome when it failed: a message, a mapping
            of reason to message, or a list of messages
        timestamp: When the evaluation was performed
    """
    field: str
    constraint_name: str
    passed: bool
    error: Any = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "field": self.field,
            "constraint_name": self.constraint_name,
            "passed": self.passed,
            "error": self.error,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def passed_result(cls, field: str, constraint_name: str) -> "ConstraintResult":
        """Create a passed result."""
        return cls(field=field, constraint_name=constraint_name, passed=True)

    @classmethod
    def failed_result(cls, field: str, constraint_name: str, error: Any) -> "ConstraintResult":
        """Create a failed result carrying the evaluation outcome."""
        return cls(field=field, constraint_name=constraint_name, passed=False, error=error)


class BaseConstraint(ABC):
    """
    Abstract base class for all field constraints.

    A constraint reads the accumulated state of a ``Validator`` and returns
    ``None`` when the candidate value is acceptable, or an error outcome
    otherwise. Constraints hold no state of their own and must not raise
    for bad candidate data.

    Subclasses implement:
    - name: Unique identifier used for registry lookup
    - constraint_type: Category of the constraint
    - description: Human-readable description
    - evaluate(): The actual check

    Example implementation:

    ```python
    class PostcodeConstraint(BaseConstraint):
        name = "postcode"
        constraint_type = ConstraintType.FORMAT
        description = "Five digit postcodes"

        def evaluate(self, validator):
            if not re.fullmatch(r"[0-9]{5}", validator.string_value):
                return self.message(validator, "invalid")
            return None
    ```
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique, snake_case identifier for this constraint."""

    @property
    @abstractmethod
    def constraint_type(self) -> ConstraintType:
        """Category of this constraint."""

    @property
    @abstractmethod
    def description(self) -> str:
        """What the constraint checks."""

    @abstractmethod
    def evaluate(self, validator) -> Any:
        """
        Evaluate the validator's candidate value.

        Args:
            validator: The configured Validator

        Returns:
            None when the value passes, otherwise the error outcome
        """

    def check(self, validator) -> ConstraintResult:
        """Evaluate and wrap the outcome in a ConstraintResult."""
        error = self.evaluate(validator)
        if error is None:
            return ConstraintResult.passed_result(validator.field, self.name)
        logger.debug("Constraint %s failed for field %s", self.name, validator.field)
        return ConstraintResult.failed_result(validator.field, self.name, error)

    @staticmethod
    def key(validator, reason: str) -> str:
        """Localization key for a failure reason, e.g. ``age-min``."""
        return f"{validator.field}-{reason}"

    def message(self, validator, reason: str, **args: Any) -> str:
        """
        Localized message for a failure reason.

        Without arguments the key is resolved as-is; with arguments every
        value is converted to text before formatting.
        """
        key = self.key(validator, reason)
        if not args:
            return validator.localizer.resolve(key)
        return validator.localizer.build(key, {name: str(value) for name, value in args.items()})

    def check_bounds(
        self,
        validator,
        value: Any,
        lower: Any,
        upper: Any,
        enforce: bool = True,
        render: Callable[[Any], str] = str,
        labels: Optional[Tuple[Any, Any]] = None,
    ) -> Optional[str]:
        """
        Shared min/max precedence for lengths and numbers.

        The combined ``min-max`` branch requires the value to be below the
        minimum and above the maximum at once, which only happens when the
        bounds are inverted; ordinary violations surface as ``min`` or
        ``max``. Nothing fires when ``enforce`` is false or the value is
        missing. ``labels`` replaces the bounds shown in messages.
        """
        if value is None or not enforce:
            return None

        shown_lower, shown_upper = labels if labels is not None else (lower, upper)

        if lower is not None and upper is not None and value < lower and value > upper:
            return self.message(validator, "min-max", min=render(shown_lower), max=render(shown_upper))

        if lower is not None and value < lower:
            return self.message(validator, "min", min=render(shown_lower))

        if upper is not None and value > upper:
            return self.message(validator, "max", max=render(shown_upper))

        return None

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {self.name}>"

    def __str__(self) -> str:
        return f"{self.name} ({self.constraint_type.value})"


class ConstraintRegistry:
    """
    Registry for managing constraint plugins.

    The registry maps constraint names to instances and is shared across
    the process. The built-in constraints are registered when the registry
    is first created; ``reset`` drops the instance so the next access
    starts from the built-ins again.
    """

    _instance: Optional["ConstraintRegistry"] = None
    _constraints: Dict[str, BaseConstraint] = {}
    _constraints_by_type: Dict[ConstraintType, List[str]] = {}

    def __new__(cls) -> "ConstraintRegistry":
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self) -> None:
        """Initialize the registry with the built-in constraints."""
        self._constraints = {}
        self._constraints_by_type = {constraint_type: [] for constraint_type in ConstraintType}
        self._register_builtin_constraints()

    def _register_builtin_constraints(self) -> None:
        from .text import (
            NameConstraint,
            PasswordSimpleConstraint,
            PasswordStrictConstraint,
            StringConstraint,
        )
        from .numeric import F32Constraint, F64Constraint, I32Constraint, I64Constraint
        from .formats import B64BytesConstraint, EmailConstraint
        from .options import ListOptionsConstraint, ListSizesConstraint, ListStringConstraint

        for constraint in (
            StringConstraint(),
            NameConstraint(),
            PasswordSimpleConstraint(),
            PasswordStrictConstraint(),
            I32Constraint(),
            I64Constraint(),
            F32Constraint(),
            F64Constraint(),
            B64BytesConstraint(),
            EmailConstraint(),
            ListStringConstraint(),
            ListOptionsConstraint(),
            ListSizesConstraint(),
        ):
            self.register(constraint)

    @classmethod
    def reset(cls) -> None:
        """Reset the registry (useful for testing)."""
        cls._instance = None

    def register(self, constraint: BaseConstraint) -> bool:
        """
        Register a constraint with the registry.

        Args:
            constraint: The constraint to register

        Returns:
            True if registration was successful, False if the name is taken
        """
        name = constraint.name

        if name in self._constraints:
            logger.debug("Constraint %s already registered", name)
            return False

        self._constraints[name] = constraint
        self._constraints_by_type.setdefault(constraint.constraint_type, []).append(name)
        logger.debug("Registered constraint %s", constraint)

        return True

    def unregister(self, name: str) -> bool:
        """
        Unregister a constraint by name.

        Returns:
            True if unregistration was successful
        """
        if name not in self._constraints:
            return False

        constraint = self._constraints.pop(name)
        names = self._constraints_by_type.get(constraint.constraint_type, [])
        if name in names:
            names.remove(name)

        logger.debug("Unregistered constraint %s", name)
        return True

    def get(self, name: str) -> Optional[BaseConstraint]:
        """Retrieve a constraint by name, or None."""
        return self._constraints.get(name)

    def get_by_type(self, constraint_type: ConstraintType) -> List[BaseConstraint]:
        """Retrieve all constraints of a given type."""
        names = self._constraints_by_type.get(constraint_type, [])
        return [self._constraints[name] for name in names if name in self._constraints]

    def get_all(self) -> List[BaseConstraint]:
        """Retrieve all registered constraints."""
        return list(self._constraints.values())

    def count(self) -> int:
        return len(self._constraints)

    def clear(self) -> None:
        """Remove all registered constraints, built-ins included."""
        self._constraints = {}
        self._constraints_by_type = {constraint_type: [] for constraint_type in ConstraintType}

    def get_registry_info(self) -> Dict[str, Any]:
        """
        Get information about the registry state.

        Returns:
            Dictionary with registry statistics
        """
        return {
            "total_constraints": self.count(),
            "by_type": {
                ct.value: len(names)
                for ct, names in self._constraints_by_type.items()
            },
        }
