"""
FieldGuard Numeric Constraints

Range checks for 32/64-bit integers and floats. Integers use the shared
``min``/``max`` bounds, floats use ``fmin``/``fmax``. Missing values and
range violations are only reported for required fields.
"""

import math
import struct
from abc import abstractmethod
from typing import Any, Optional

from .base import BaseConstraint, ConstraintType


def to_f32(value: Optional[float]) -> Optional[float]:
    """Round a float to single precision, saturating to infinity."""
    if value is None:
        return None
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def format_number(value: Any) -> str:
    """Render a bound for messages; integral floats drop the fraction."""
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isfinite(value) and value.is_integer():
            return str(int(value))
    return str(value)


class _RangeConstraint(BaseConstraint):
    """Required-ness first, then the shared bound precedence."""
    constraint_type = ConstraintType.NUMERIC

    @abstractmethod
    def value(self, validator) -> Any:
        """The candidate this rule reads from the validator."""

    def bounds(self, validator):
        return validator.min, validator.max

    def labels(self, validator):
        return self.bounds(validator)

    def evaluate(self, validator) -> Optional[str]:
        value = self.value(validator)

        if validator.is_required and value is None:
            return self.message(validator, "empty")

        lower, upper = self.bounds(validator)
        return self.check_bounds(
            validator,
            value,
            lower,
            upper,
            enforce=validator.is_required,
            render=format_number,
            labels=self.labels(validator),
        )


class I32Constraint(_RangeConstraint):
    name = "i32"
    description = "32-bit integer within optional bounds"

    def value(self, validator) -> Optional[int]:
        return validator.i32_value


class I64Constraint(_RangeConstraint):
    name = "i64"
    description = "64-bit integer within optional bounds"

    def value(self, validator) -> Optional[int]:
        return validator.i64_value


class F32Constraint(_RangeConstraint):
    """
    Single precision: the value and both bounds are rounded to f32 before
    comparing, messages show the bounds as configured.
    """
    name = "f32"
    description = "32-bit float within optional bounds"

    def value(self, validator) -> Optional[float]:
        return to_f32(validator.f32_value)

    def bounds(self, validator):
        return to_f32(validator.fmin), to_f32(validator.fmax)

    def labels(self, validator):
        return validator.fmin, validator.fmax


class F64Constraint(_RangeConstraint):
    name = "f64"
    description = "64-bit float within optional bounds"

    def value(self, validator) -> Optional[float]:
        return validator.f64_value

    def bounds(self, validator):
        return validator.fmin, validator.fmax
