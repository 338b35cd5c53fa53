"""
Tests for the constraint plugin layer

This test module covers:
- ConstraintResult construction and serialization
- BaseConstraint subclasses and their helpers
- The ConstraintRegistry singleton
- ValidationReport aggregation
"""

import re

import pytest

import fieldguard
from fieldguard import (
    BaseConstraint,
    ConstraintRegistry,
    ConstraintResult,
    ConstraintType,
    UnknownConstraintError,
    ValidationReport,
    nulls,
)


class PostcodeConstraint(BaseConstraint):
    """Five digit postcodes, used to exercise custom registration."""
    name = "postcode"
    constraint_type = ConstraintType.FORMAT
    description = "Five digit postcode"

    def evaluate(self, validator):
        if not re.fullmatch(r"[0-9]{5}", validator.string_value):
            return self.message(validator, "invalid")
        return None


class TestConstraintResult:
    """Tests for ConstraintResult dataclass."""

    def test_passed_result_creation(self):
        """Test creating a passed result."""
        result = ConstraintResult.passed_result("email", "email")

        assert result.passed is True
        assert result.error is None
        assert result.field == "email"

    def test_failed_result_creation(self):
        """Test creating a failed result."""
        result = ConstraintResult.failed_result("password", "password_strict", {"minimum": "too short"})

        assert result.passed is False
        assert result.error == {"minimum": "too short"}

    def test_to_dict(self):
        """Test conversion to dictionary."""
        data = ConstraintResult.failed_result("age", "i32", "age-min").to_dict()

        assert data["field"] == "age"
        assert data["constraint_name"] == "i32"
        assert data["passed"] is False
        assert data["error"] == "age-min"
        assert "timestamp" in data


class TestBaseConstraint:
    """Tests for BaseConstraint abstract class."""

    def test_abstract_methods_required(self):
        """Test that abstract members must be implemented."""
        with pytest.raises(TypeError):
            BaseConstraint()

    def test_concrete_constraint(self):
        """Test a custom constraint used directly."""
        constraint = PostcodeConstraint()
        validator = fieldguard.new("zip").set_string_value("1234")

        assert constraint.evaluate(validator) == "zip-invalid"
        assert constraint.evaluate(validator.set_string_value("12345")) is None
        assert str(constraint) == "postcode (format)"
        assert repr(constraint) == "<PostcodeConstraint: postcode>"

    def test_check(self):
        """Test wrapping an outcome into a result."""
        result = PostcodeConstraint().check(fieldguard.new("zip").set_string_value("abc"))

        assert result.passed is False
        assert result.constraint_name == "postcode"
        assert result.error == "zip-invalid"

    def test_key(self):
        """Test key derivation."""
        assert BaseConstraint.key(fieldguard.new("age"), "min-max") == "age-min-max"


class TestConstraintRegistry:
    """Tests for ConstraintRegistry singleton."""

    def setup_method(self):
        """Reset registry before each test."""
        ConstraintRegistry.reset()

    def teardown_method(self):
        ConstraintRegistry.reset()

    def test_singleton_pattern(self):
        """Test that registry follows singleton pattern."""
        assert ConstraintRegistry() is ConstraintRegistry()

    def test_builtins_registered(self):
        """Test that the built-in constraints are available."""
        registry = ConstraintRegistry()

        assert registry.count() == 13
        for name in (
            "string", "name", "password_simple", "password_strict",
            "i32", "i64", "f32", "f64", "b64_bytes", "email",
            "list_string", "list_options", "list_sizes",
        ):
            assert registry.get(name) is not None

    def test_get_by_type(self):
        """Test filtering by constraint type."""
        registry = ConstraintRegistry()

        numeric = {c.name for c in registry.get_by_type(ConstraintType.NUMERIC)}
        credential = {c.name for c in registry.get_by_type(ConstraintType.CREDENTIAL)}

        assert numeric == {"i32", "i64", "f32", "f64"}
        assert credential == {"password_simple", "password_strict"}

    def test_register_custom_constraint(self):
        """Test that custom constraints are reachable through validators."""
        registry = ConstraintRegistry()

        assert registry.register(PostcodeConstraint()) is True
        assert registry.count() == 14
        assert fieldguard.new("zip").set_string_value("9021").validate("postcode") == "zip-invalid"

    def test_register_duplicate_fails(self):
        """Test that registering a taken name fails."""
        registry = ConstraintRegistry()
        registry.register(PostcodeConstraint())

        assert registry.register(PostcodeConstraint()) is False

    def test_unregister(self):
        """Test removing a constraint."""
        registry = ConstraintRegistry()
        registry.register(PostcodeConstraint())

        assert registry.unregister("postcode") is True
        assert registry.unregister("postcode") is False
        assert registry.get_by_type(ConstraintType.FORMAT) == [registry.get("email")]

    def test_clear(self):
        """Test that clearing empties the registry but not the built-in methods."""
        registry = ConstraintRegistry()
        registry.clear()

        assert registry.count() == 0
        assert fieldguard.new("title").validate_string() == "title-empty"
        with pytest.raises(UnknownConstraintError):
            fieldguard.new("title").validate("string")

    def test_unregister_builtin_keeps_method(self):
        """Test that removing a built-in only affects lookups by name."""
        assert ConstraintRegistry().unregister("string") is True

        assert fieldguard.new("title").validate_string() == "title-empty"
        with pytest.raises(UnknownConstraintError):
            fieldguard.new("title").check("string")

    def test_override_does_not_change_method(self):
        """Test that a replacement registered under a built-in name is only used by name."""

        class PostcodeAsString(PostcodeConstraint):
            name = "string"

        registry = ConstraintRegistry()
        registry.unregister("string")
        assert registry.register(PostcodeAsString()) is True
        validator = fieldguard.new("title").set_string_value(nulls.new("12345x"))

        assert validator.validate_string() is None
        assert validator.validate("string") == "title-invalid"

    def test_reset_restores_builtins(self):
        """Test that reset brings back the built-in set."""
        ConstraintRegistry().clear()
        ConstraintRegistry.reset()

        assert ConstraintRegistry().count() == 13

    def test_registry_info(self):
        """Test registry statistics."""
        info = ConstraintRegistry().get_registry_info()

        assert info["total_constraints"] == 13
        assert info["by_type"]["numeric"] == 4
        assert info["by_type"]["enumeration"] == 2


class TestValidationReport:
    """Tests for collecting results across fields."""

    def setup_method(self):
        ConstraintRegistry.reset()

    def test_collects_errors_per_field(self):
        """Test a request with several fields."""
        report = ValidationReport()

        report.run(fieldguard.new("email").set_string_value("ada@lovelace.org"), "email")
        report.run(fieldguard.new("name").set_string_value("R2-D2"), "name")
        report.run(
            fieldguard.new("age").set_as_required(True).set_min(18).set_i32_value(nulls.new(9)),
            "i32",
        )
        report.run(fieldguard.new("password").set_string_value("abc"), "password_strict")

        assert report.passed is False
        assert len(report.get_failed_results()) == 3
        assert report.errors() == {
            "name": "name-invalid",
            "age": "age-min",
            "password": {
                "minimum": "password-minimum",
                "uppercase": "password-uppercase",
                "number": "password-number",
                "symbol": "password-symbol",
            },
        }

    def test_first_error_per_field_wins(self):
        """Test that a field keeps its first error."""
        report = ValidationReport()
        report.add(ConstraintResult.failed_result("name", "string", "name-empty"))
        report.add(ConstraintResult.failed_result("name", "name", "name-invalid"))

        assert report.errors() == {"name": "name-empty"}

    def test_empty_report_passes(self):
        """Test that a report without failures passes."""
        report = ValidationReport().add(ConstraintResult.passed_result("email", "email"))

        data = report.to_dict()

        assert report.passed is True
        assert data["passed"] is True
        assert data["total_results"] == 1
        assert data["failed_count"] == 0
        assert data["errors"] == {}
