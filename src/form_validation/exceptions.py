"""Exception hierarchy for form_validation.

Validation failures themselves are values (``ValidationErrors``), not
exceptions. The exceptions here cover misuse of the library and the
opt-in conversion of a failed result into an exception via
``ValidationResult.raise_if_invalid()``.

Every exception carries an optional context dictionary so callers can log
structured details alongside the message.

Example:
    ```python
    from form_validation.exceptions import FormValidationError, InvalidFormError

    try:
        form.validate().raise_if_invalid()
    except InvalidFormError as e:
        logger.warning("Form rejected: %s", e)
        logger.debug("Offending fields: %s", e.context["keys"])
    except FormValidationError as e:
        logger.error("Validation setup problem: %s (%s)", e, e.context)
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:
    from form_validation.errors import ValidationErrors


class FormValidationError(Exception):
    """Base exception for all form_validation errors.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context (rule names, keys, etc.)
        details: Alternative to context (takes precedence when both are given)

    Example:
        ```python
        error = FormValidationError(
            "Rule lookup failed",
            context={"rule": "not_negative"}
        )
        str(error)
        # 'Rule lookup failed'
        error.context
        # {'rule': 'not_negative'}
        ```
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        """Initialize the exception with optional context.

        Args:
            message: Error message
            context: Optional context dictionary
            details: Optional details dictionary (replaces context)
        """
        super().__init__(message)
        self.context = details or context or {}
        self.details = self.context


class InvalidFormError(FormValidationError):
    """Raised on request when a validation pass produced errors.

    The aggregate is kept on ``errors`` so handlers can still look up
    per-field messages with ``errors.get(key)``.

    Example:
        ```python
        try:
            concat_results(results).raise_if_invalid()
        except InvalidFormError as e:
            for error in e.errors:
                print(error.key, error.type_id, error)
        ```
    """

    def __init__(
        self,
        errors: ValidationErrors,
        message: str | None = None,
        context: Dict[str, Any] | None = None,
    ):
        """Initialize with the aggregate errors.

        Args:
            errors: The errors collected during validation
            message: Optional message; defaults to the rendered errors
            context: Optional extra context, merged over the generated one
        """
        generated = {"keys": errors.keys(), "count": len(errors)}
        generated.update(context or {})
        super().__init__(message or f"Validation failed: {errors}", context=generated)
        self.errors = errors


class ConfigurationError(FormValidationError):
    """Raised when a ``ValidationConfig`` is invalid.

    Example:
        ```python
        raise ConfigurationError(
            "max_concurrency must be a positive integer",
            context={"max_concurrency": 0}
        )
        ```
    """

    pass


class RuleNotFoundError(FormValidationError):
    """Raised when a named rule is not present in a ``RuleRegistry``."""

    pass


class RuleRegistrationError(FormValidationError):
    """Raised when a rule cannot be registered or used as requested.

    Common scenarios include:
    - Registering a name that is already taken
    - Building a synchronous validator from an asynchronous rule
    """

    pass
