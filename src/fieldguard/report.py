"""
FieldGuard Validation Report

Handlers usually validate several fields of one request and answer with
every error at once. ``ValidationReport`` collects the per-field results
and renders them; it does not relate fields to each other.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .constraints.base import ConstraintResult


@dataclass
class ValidationReport:
    """
    Results of validating the fields of one request.

    Attributes:
        results: Constraint results in the order they were added
    """
    results: List[ConstraintResult] = field(default_factory=list)

    def add(self, result: ConstraintResult) -> "ValidationReport":
        self.results.append(result)
        return self

    def run(self, validator, constraint_name: str) -> ConstraintResult:
        """Evaluate a constraint for ``validator`` and record the result."""
        result = validator.check(constraint_name)
        self.add(result)
        return result

    @property
    def passed(self) -> bool:
        return all(result.passed for result in self.results)

    def get_failed_results(self) -> List[ConstraintResult]:
        """Get all failed results."""
        return [r for r in self.results if not r.passed]

    def errors(self) -> Dict[str, Any]:
        """Map each failing field to its first error."""
        errors: Dict[str, Any] = {}
        for result in self.get_failed_results():
            errors.setdefault(result.field, result.error)
        return errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "passed": self.passed,
            "total_results": len(self.results),
            "failed_count": len(self.get_failed_results()),
            "errors": self.errors(),
            "results": [r.to_dict() for r in self.results],
        }
