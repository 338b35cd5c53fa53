"""
FieldGuard Validator

The Validator is the fluent builder at the heart of FieldGuard. It
accumulates the constraint parameters and one candidate value for a
single named field, then hands itself to a constraint for evaluation:

    error = (
        fieldguard.new("age")
        .set_min(18)
        .set_max(130)
        .set_as_required(True)
        .set_i32_value(nulls.new(17))
        .validate_i32()
    )

Validators are immutable; every setter returns an updated copy and later
calls to the same setter win. Nothing is checked until a ``validate_*``
method runs, and evaluation never mutates the validator.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, List, Optional, Tuple

from . import nulls
from .config import FieldGuardConfig, default_config
from .constraints.base import ConstraintRegistry, ConstraintResult
from .constraints.formats import B64BytesConstraint, EmailConstraint
from .constraints.numeric import F32Constraint, F64Constraint, I32Constraint, I64Constraint
from .constraints.options import ListOptionsConstraint, ListSizesConstraint, ListStringConstraint
from .constraints.text import (
    NameConstraint,
    PasswordSimpleConstraint,
    PasswordStrictConstraint,
    StringConstraint,
)
from .exceptions import UnknownConstraintError
from .i18n import Localizer
from .sizes import Size

# Built-in rules used by the validate_* methods, independent of the registry
_STRING = StringConstraint()
_NAME = NameConstraint()
_PASSWORD_SIMPLE = PasswordSimpleConstraint()
_PASSWORD_STRICT = PasswordStrictConstraint()
_I32 = I32Constraint()
_I64 = I64Constraint()
_F32 = F32Constraint()
_F64 = F64Constraint()
_B64_BYTES = B64BytesConstraint()
_EMAIL = EmailConstraint()
_LIST_STRING = ListStringConstraint()
_LIST_OPTIONS = ListOptionsConstraint()
_LIST_SIZES = ListSizesConstraint()


@dataclass(frozen=True)
class Validator:
    """
    Constraint parameters and candidate value for one field.

    Attributes:
        field: Field name, used to derive ``{field}-{reason}`` message keys
        min: Lower bound for string lengths and integers
        max: Upper bound for string lengths and integers
        fmin: Lower bound for floats
        fmax: Upper bound for floats
        len: Exact decoded length for base64 payloads
        option_list: Allowed option values, in order
        is_case_sensitive: Whether option membership compares case
        is_null: Whether an absent value is tolerated; stored for callers,
            no built-in constraint reads it
        is_required: Whether the field must carry a value; gates most checks
        i32_value, i64_value, f32_value, f64_value: Numeric candidates
        string_value: String candidate, empty when absent
        parent_string: Label of the enclosing object for option messages
        list_sizes_value: Size list candidate, empty when absent
        config: Limits and catalog settings
        localizer: Turns error keys into messages
    """
    field: str
    min: Optional[int] = None
    max: Optional[int] = None
    fmin: Optional[float] = None
    fmax: Optional[float] = None
    len: Optional[int] = None
    option_list: Optional[Tuple[str, ...]] = None
    is_case_sensitive: bool = False
    is_null: bool = False
    is_required: bool = False
    i32_value: Optional[int] = None
    i64_value: Optional[int] = None
    f32_value: Optional[float] = None
    f64_value: Optional[float] = None
    string_value: str = ""
    parent_string: str = ""
    list_sizes_value: Tuple[Size, ...] = ()
    config: FieldGuardConfig = field(default=default_config, repr=False, compare=False)
    localizer: Optional[Localizer] = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "field", str(self.field))
        if self.localizer is None:
            object.__setattr__(self, "localizer", self.config.load_catalog())

    @classmethod
    def new(cls, field: Any, config: Optional[FieldGuardConfig] = None) -> "Validator":
        """Create a validator for ``field``, which may be any value with a string form."""
        return cls(field=field, config=config or default_config)

    # Collaborators

    def with_config(self, config: FieldGuardConfig) -> "Validator":
        """Swap the configuration; the catalog is reloaded from it."""
        return replace(self, config=config, localizer=config.load_catalog())

    def with_localizer(self, localizer: Localizer) -> "Validator":
        return replace(self, localizer=localizer)

    # Configuration

    def set_as_case_sensitive(self, is_case_sensitive: bool) -> "Validator":
        return replace(self, is_case_sensitive=is_case_sensitive)

    def set_as_nullable(self, is_null: bool) -> "Validator":
        return replace(self, is_null=is_null)

    def set_as_required(self, is_required: bool) -> "Validator":
        return replace(self, is_required=is_required)

    def set_min(self, min: int) -> "Validator":
        return replace(self, min=min)

    def set_max(self, max: int) -> "Validator":
        return replace(self, max=max)

    def set_len(self, len: int) -> "Validator":
        """Exact number of bytes a base64 payload must decode to."""
        return replace(self, len=len)

    def set_fmin(self, fmin: float) -> "Validator":
        return replace(self, fmin=fmin)

    def set_fmax(self, fmax: float) -> "Validator":
        return replace(self, fmax=fmax)

    def set_option_list(self, options: Iterable[Any]) -> "Validator":
        """Replace the option list with the string form of each option."""
        return replace(self, option_list=tuple(str(option) for option in options))

    def set_option_list_lower(self, options: Iterable[Any]) -> "Validator":
        """Replace the option list with lower-cased string forms."""
        return replace(self, option_list=tuple(str(option).lower() for option in options))

    def set_option_list_string(self, options: Iterable[Any]) -> "Validator":
        """Replace the option list, preserving case."""
        return self.set_option_list(options)

    # Candidate values

    def set_i32_value(self, source: Any) -> "Validator":
        return replace(self, i32_value=nulls.take(source))

    def set_i64_value(self, source: Any) -> "Validator":
        return replace(self, i64_value=nulls.take(source))

    def set_f32_value(self, source: Any) -> "Validator":
        return replace(self, f32_value=nulls.take(source))

    def set_f64_value(self, source: Any) -> "Validator":
        return replace(self, f64_value=nulls.take(source))

    def set_string_value(self, source: Any) -> "Validator":
        """Set the string candidate; an absent or null source becomes ``""``."""
        value = nulls.take(source)
        return replace(self, string_value="" if value is None else str(value))

    def set_string_value_lower(self, source: Any) -> "Validator":
        value = nulls.take(source)
        return replace(self, string_value="" if value is None else str(value).lower())

    def set_parent_string(self, source: Any) -> "Validator":
        value = nulls.take(source)
        return replace(self, parent_string="" if value is None else str(value))

    def set_list_sizes_value(self, source: Any) -> "Validator":
        """
        Set the size list candidate.

        Entries may be ``Size`` instances or mappings, which are coerced
        through the Size model; an absent or null source becomes empty.

        Raises:
            pydantic.ValidationError: If a mapping cannot form a Size
        """
        sizes = nulls.take(source) or ()
        return replace(
            self,
            list_sizes_value=tuple(
                size if isinstance(size, Size) else Size.model_validate(size)
                for size in sizes
            ),
        )

    # Evaluation

    def validate(self, name: str) -> Any:
        """
        Evaluate the constraint registered under ``name``.

        The ``validate_*`` methods always use the built-in rules; this
        lookup goes through the registry so custom constraints are reachable.

        Returns:
            None when the value passes, otherwise the constraint's error

        Raises:
            UnknownConstraintError: If no constraint has that name
        """
        constraint = ConstraintRegistry().get(name)
        if constraint is None:
            raise UnknownConstraintError(name)
        return constraint.evaluate(self)

    def check(self, name: str) -> ConstraintResult:
        """Evaluate ``name`` and wrap the outcome in a ConstraintResult."""
        constraint = ConstraintRegistry().get(name)
        if constraint is None:
            raise UnknownConstraintError(name)
        return constraint.check(self)

    def validate_string(self) -> Optional[str]:
        return _STRING.evaluate(self)

    def validate_name(self) -> Optional[str]:
        return _NAME.evaluate(self)

    def validate_password_simple(self) -> Optional[str]:
        return _PASSWORD_SIMPLE.evaluate(self)

    def validate_password_strict(self) -> Optional[Dict[str, str]]:
        return _PASSWORD_STRICT.evaluate(self)

    def validate_i32(self) -> Optional[str]:
        return _I32.evaluate(self)

    def validate_i64(self) -> Optional[str]:
        return _I64.evaluate(self)

    def validate_f32(self) -> Optional[str]:
        return _F32.evaluate(self)

    def validate_f64(self) -> Optional[str]:
        return _F64.evaluate(self)

    def validate_b64_bytes(self) -> Optional[str]:
        return _B64_BYTES.evaluate(self)

    def validate_email(self) -> Optional[str]:
        return _EMAIL.evaluate(self)

    def validate_list_string(self) -> Optional[str]:
        return _LIST_STRING.evaluate(self)

    def validate_list_options(self) -> Optional[str]:
        return _LIST_OPTIONS.evaluate(self)

    def validate_list_sizes(self) -> Optional[List[str]]:
        return _LIST_SIZES.evaluate(self)


def new(field: Any, config: Optional[FieldGuardConfig] = None) -> Validator:
    """Create a validator for ``field``."""
    return Validator.new(field, config)
