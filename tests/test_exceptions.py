"""Tests for the exception hierarchy."""

import pytest

from form_validation import (
    ConfigurationError,
    FormValidationError,
    InvalidFormError,
    RuleNotFoundError,
    RuleRegistrationError,
    ValidationError,
    ValidationErrors,
)


class TestFormValidationError:
    """Test the base exception."""

    def test_basic_exception(self):
        error = FormValidationError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.context == {}
        assert error.details == {}

    def test_exception_with_context(self):
        error = FormValidationError("Lookup failed", context={"rule": "r1"})
        assert error.context == {"rule": "r1"}
        assert error.details is error.context

    def test_details_takes_precedence(self):
        error = FormValidationError("Error", context={"k": "context"}, details={"k": "details"})
        assert error.context == {"k": "details"}

    @pytest.mark.parametrize(
        "exc_class",
        [ConfigurationError, RuleNotFoundError, RuleRegistrationError],
    )
    def test_subclasses_caught_as_base(self, exc_class):
        with pytest.raises(FormValidationError):
            raise exc_class("failure", context={"x": 1})


class TestInvalidFormError:
    """Test the exception carrying aggregate errors."""

    def test_carries_errors_and_context(self):
        errors = ValidationErrors([
            ValidationError("email", "INVALID").message("email is invalid"),
        ])
        error = InvalidFormError(errors, context={"form": "signup"})

        assert error.errors is errors
        assert error.context == {"keys": ["email"], "count": 1, "form": "signup"}
        assert str(error) == "Validation failed: email is invalid"
        assert isinstance(error, FormValidationError)

    def test_custom_message(self):
        error = InvalidFormError(ValidationErrors(), message="Form rejected")
        assert str(error) == "Form rejected"
        assert error.context == {"keys": [], "count": 0}
