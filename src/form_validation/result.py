"""Validation outcomes and their aggregation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Generic, Iterable, TypeVar

from .errors import ValidationError, ValidationErrors
from .exceptions import InvalidFormError

logger = logging.getLogger(__name__)

K = TypeVar("K")


@dataclass
class ValidationResult(Generic[K]):
    """Outcome of validating one value, one field or a whole form.

    A result is valid exactly when it carries no errors, so ``if result:``
    reads as "passed".
    """

    errors: ValidationErrors[K] = field(default_factory=ValidationErrors)

    @property
    def valid(self) -> bool:
        """True if no errors were collected."""
        return self.errors.is_empty()

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.valid

    def or_empty(self) -> ValidationErrors[K]:
        """Return the collected errors, empty on success."""
        return self.errors

    def raise_if_invalid(self) -> None:
        """Raise ``InvalidFormError`` if this result carries errors.

        Raises:
            InvalidFormError: With the collected errors attached
        """
        if not self.valid:
            raise InvalidFormError(self.errors)

    @classmethod
    def success(cls) -> ValidationResult[K]:
        """Create a successful result."""
        return cls(ValidationErrors())

    @classmethod
    def failure(
        cls, errors: ValidationErrors[K] | ValidationError[K]
    ) -> ValidationResult[K]:
        """Create a failed result.

        Args:
            errors: The errors, or a single error to promote to a collection

        Returns:
            ValidationResult carrying the errors
        """
        if isinstance(errors, ValidationError):
            errors = errors.to_errors()
        return cls(errors)


def concat_results(results: Iterable[ValidationResult[K]]) -> ValidationResult[K]:
    """Join validation results, concatenating any errors they contain.

    Successful results contribute nothing; failed ones contribute their
    errors in order. The result is a failure if any input was.

    Args:
        results: Results to join, typically one per form field

    Returns:
        A single result holding every error, in input order

    Example:
        ```python
        results = [
            ValidationResult.success(),
            ValidationResult.failure(ValidationError("field1", "TEST_ERROR1")),
            ValidationResult.failure(ValidationError("field1", "TEST_ERROR2")),
            ValidationResult.failure(ValidationError("field2", "TEST_ERROR1")),
        ]
        errors = concat_results(results).or_empty()
        len(errors)
        # 3
        len(errors.get("field1"))
        # 2
        ```
    """
    all_errors: ValidationErrors[K] = ValidationErrors()
    count = 0

    for result in results:
        count += 1
        if not result.valid:
            all_errors.extend(result.errors)

    logger.debug("Joined %d results into %d errors", count, len(all_errors))

    if not all_errors.is_empty():
        return ValidationResult.failure(all_errors)
    return ValidationResult.success()
