"""Composable validation for forms and other keyed data.

This package associates typed error messages with the fields of a data
structure:

- **Errors**: ``ValidationError`` (key, type_id, lazy message) and the
  ordered ``ValidationErrors`` aggregate
- **Results**: ``ValidationResult`` and ``concat_results`` for joining
  per-field outcomes
- **Rules**: ``ValidatorFn`` / ``AsyncValidatorFn`` with identity-based equality
- **Validators**: ``Validator`` / ``AsyncValidator`` running many rules per field
- **Interfaces**: ``Validatable`` / ``AsyncValidatable`` for forms
- **Registry**: ``RuleRegistry`` for sharing named rules

Example:
    ```python
    from form_validation import (
        Validatable,
        ValidationError,
        ValidationResult,
        Validator,
        concat_results,
    )

    def not_negative(value, key):
        if value < 0:
            return ValidationResult.failure(
                ValidationError(key, "NOT_NEGATIVE").with_message(
                    lambda key: f"The value of {key} ({value}) cannot be less than 0"
                )
            )
        return ValidationResult.success()

    class Form(Validatable):
        age_validator = Validator().validation(not_negative)

        def __init__(self, age):
            self.age = age

        def validate(self):
            return concat_results([self.age_validator.validate_value(self.age, "age")])

    print(Form(-1).validate_or_empty())
    # The value of age (-1) cannot be less than 0
    ```
"""

from form_validation.config import ValidationConfig
from form_validation.errors import DEFAULT_MESSAGE, ValidationError, ValidationErrors
from form_validation.exceptions import (
    ConfigurationError,
    FormValidationError,
    InvalidFormError,
    RuleNotFoundError,
    RuleRegistrationError,
)
from form_validation.registry import RuleRegistry
from form_validation.result import ValidationResult, concat_results
from form_validation.validatable import AsyncValidatable, Validatable
from form_validation.validation import AsyncValidation, Validation
from form_validation.validator import AsyncValidator, Validator
from form_validation.validator_fn import AsyncValidatorFn, ValidatorFn, is_async_rule

__version__ = "0.3.1"

__all__ = [
    # Version
    "__version__",
    # Errors
    "DEFAULT_MESSAGE",
    "ValidationError",
    "ValidationErrors",
    # Results
    "ValidationResult",
    "concat_results",
    # Rules
    "ValidatorFn",
    "AsyncValidatorFn",
    "is_async_rule",
    # Validators
    "Validation",
    "AsyncValidation",
    "Validator",
    "AsyncValidator",
    "ValidationConfig",
    # Interfaces
    "Validatable",
    "AsyncValidatable",
    # Registry
    "RuleRegistry",
    # Exceptions
    "FormValidationError",
    "InvalidFormError",
    "ConfigurationError",
    "RuleNotFoundError",
    "RuleRegistrationError",
]
