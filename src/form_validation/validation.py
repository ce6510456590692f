"""Protocols for anything that validates a keyed value.

``ValidatorFn`` and ``Validator`` satisfy ``Validation``;
``AsyncValidatorFn`` and ``AsyncValidator`` satisfy ``AsyncValidation``.
Third-party rule containers can implement the same method to be used
interchangeably.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .result import ValidationResult


@runtime_checkable
class Validation(Protocol):
    """Something that can validate a value for a field key."""

    def validate_value(self, value: Any, key: Any) -> ValidationResult:
        """Validate ``value`` belonging to the field ``key``."""
        ...


@runtime_checkable
class AsyncValidation(Protocol):
    """Something that can validate a value for a field key asynchronously."""

    async def validate_value(self, value: Any, key: Any) -> ValidationResult:
        """Validate ``value`` belonging to the field ``key``."""
        ...
