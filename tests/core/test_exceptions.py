"""
Tests for the scalarstats exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via ScalarStatsError)
    - Diagnostic attributes on EmptyInputError and DomainError
    - Default attribute values (None for optional attributes)
"""

import pytest

from scalarstats.core.exceptions import (
    DimensionError,
    DomainError,
    EmptyInputError,
    ScalarStatsError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via ScalarStatsError."""

    def test_validation_error_is_scalarstats_error(self):
        with pytest.raises(ScalarStatsError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_empty_input_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise EmptyInputError("empty")

    def test_domain_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DomainError("p out of range")

    def test_empty_input_is_not_domain_error(self):
        assert not isinstance(EmptyInputError("empty"), DomainError)

    def test_not_a_builtin_value_error(self):
        """Library errors do not masquerade as ValueError."""
        assert not isinstance(ValidationError("x"), ValueError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestEmptyInputError:
    """Test EmptyInputError message and name attribute."""

    def test_message(self):
        err = EmptyInputError("x: cannot be empty", name="x")
        assert str(err) == "x: cannot be empty"

    def test_name_attribute(self):
        err = EmptyInputError("x: cannot be empty", name="x")
        assert err.name == "x"

    def test_name_defaults_to_none(self):
        assert EmptyInputError("empty").name is None


class TestDomainError:
    """Test DomainError diagnostic attributes."""

    def test_all_attributes(self):
        err = DomainError("bad p", value=1.5, lower=0.0, upper=1.0)
        assert err.value == 1.5
        assert err.lower == 0.0
        assert err.upper == 1.0
        assert str(err) == "bad p"

    def test_defaults_to_none(self):
        err = DomainError("bad p")
        assert err.value is None
        assert err.lower is None
        assert err.upper is None
