"""Interfaces for types that can validate themselves, such as forms.

Implement ``validate`` by running one validator per field and joining the
outcomes with ``concat_results``.

Example:
    ```python
    from dataclasses import dataclass
    from form_validation import Validatable, Validator, concat_results

    AGE = Validator().validation(not_negative).validation(at_most_ten)

    @dataclass
    class Form(Validatable):
        age: int

        def validate(self):
            return concat_results([AGE.validate_value(self.age, "age")])

    Form(age=-1).validate_or_empty().get("age")
    ```
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .errors import ValidationErrors
from .result import ValidationResult


class Validatable(ABC):
    """A type that can be validated synchronously."""

    @abstractmethod
    def validate(self) -> ValidationResult:
        """Validate this object.

        Returns:
            ValidationResult with every error found
        """
        pass

    def validate_or_empty(self) -> ValidationErrors:
        """Validate and return the errors, empty when valid."""
        return self.validate().or_empty()


class AsyncValidatable(ABC):
    """A type whose validation needs asynchronous checks.

    Typical examples are uniqueness checks against a remote store.
    """

    @abstractmethod
    async def validate_async(self) -> ValidationResult:
        """Validate this object.

        Returns:
            ValidationResult with every error found
        """
        pass

    async def validate_async_or_empty(self) -> ValidationErrors:
        """Validate and return the errors, empty when valid."""
        result = await self.validate_async()
        return result.or_empty()
