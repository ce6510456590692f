"""Validators: ordered collections of rules applied to one field.

A ``Validator`` runs every rule in the order it was added and collects
all of their errors; a failing rule never stops the ones after it.
``AsyncValidator`` starts all of its rules concurrently, waits for every
one of them to finish and then folds the results in registration order,
so the errors come out in the same order as the synchronous validator
would produce regardless of which rule finished first.

Example:
    ```python
    from form_validation import AsyncValidator, ValidationError, ValidationResult, Validator

    def not_negative(value, key):
        if value < 0:
            return ValidationResult.failure(ValidationError(key, "NOT_NEGATIVE"))
        return ValidationResult.success()

    def at_most_ten(value, key):
        if value > 10:
            return ValidationResult.failure(ValidationError(key, "TOO_LARGE"))
        return ValidationResult.success()

    validator = Validator().validation(not_negative).validation(at_most_ten)
    validator.validate_value(20, "field1").errors.type_ids()
    # ['TOO_LARGE']

    async_validator = AsyncValidator.from_validator(validator)
    result = await async_validator.validate_value(-1, "field1")
    ```
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Generic, List, TypeVar

from .config import ValidationConfig
from .errors import ValidationErrors
from .result import ValidationResult
from .validator_fn import AsyncValidatorFn, Rule, ValidatorFn

logger = logging.getLogger(__name__)

V = TypeVar("V")
K = TypeVar("K")


def _fold(results: List[ValidationResult[K]]) -> ValidationResult[K]:
    errors: ValidationErrors[K] = ValidationErrors()
    for result in results:
        if not result.valid:
            errors.extend(result.errors)

    if not errors.is_empty():
        return ValidationResult.failure(errors)
    return ValidationResult.success()


class Validator(Generic[V, K]):
    """Synchronous validator for a single field.

    Two validators are equal when they hold the same rules (by identity)
    in the same positions.

    Args:
        validations: Optional initial rules
    """

    def __init__(self, validations: List[ValidatorFn[V, K]] | None = None):
        self.validations: List[ValidatorFn[V, K]] = list(validations or [])

    def validation(self, rule: ValidatorFn[V, K] | Rule[V, K]) -> Validator[V, K]:
        """Add a rule (fluent API).

        Args:
            rule: A ``ValidatorFn`` or a plain callable ``(value, key) -> ValidationResult``

        Returns:
            Self for chaining

        Raises:
            TypeError: If the rule is asynchronous or not callable
        """
        self.validations.append(ValidatorFn.coerce(rule))
        return self

    def validate_value(self, value: V, key: K) -> ValidationResult[K]:
        """Run every rule against ``value`` and collect all errors.

        Args:
            value: Value to validate
            key: Key of the field the value belongs to

        Returns:
            ValidationResult with the errors of all failing rules, in rule order
        """
        logger.debug("Running %d rules for %r", len(self.validations), key)
        result = _fold([fn.validate_value(value, key) for fn in self.validations])
        if not result.valid:
            logger.debug("Field %r failed with %d errors", key, len(result.errors))
        return result

    def __len__(self) -> int:
        return len(self.validations)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Validator):
            return NotImplemented
        return len(self.validations) == len(other.validations) and all(
            mine == theirs for mine, theirs in zip(self.validations, other.validations)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Validator({self.validations!r})"


class AsyncValidator(Generic[V, K]):
    """Asynchronous validator for a single field.

    Every rule runs to completion on each call; there is no fail-fast and
    no cancellation. Timeouts, if needed, belong around the call to
    ``validate_value``.

    Args:
        validations: Optional initial rules
        config: Execution options; defaults to ``ValidationConfig()``
    """

    def __init__(
        self,
        validations: List[AsyncValidatorFn[V, K]] | None = None,
        config: ValidationConfig | None = None,
    ):
        self.validations: List[AsyncValidatorFn[V, K]] = list(validations or [])
        self.config = config or ValidationConfig()

    @classmethod
    def from_validator(
        cls, validator: Validator[V, K], config: ValidationConfig | None = None
    ) -> AsyncValidator[V, K]:
        """Convert a synchronous validator.

        Rule order and rule identities are preserved.

        Args:
            validator: Validator to convert
            config: Execution options for the new validator

        Returns:
            AsyncValidator producing the same errors as ``validator``
        """
        async_validator: AsyncValidator[V, K] = cls(config=config)
        for validator_fn in validator.validations:
            async_validator.validation(validator_fn)
        return async_validator

    def validation(
        self, rule: AsyncValidatorFn[V, K] | ValidatorFn[V, K] | Callable[..., Any]
    ) -> AsyncValidator[V, K]:
        """Add a rule (fluent API).

        Args:
            rule: An ``AsyncValidatorFn``, a ``ValidatorFn``, a coroutine
                function or a plain synchronous callable

        Returns:
            Self for chaining
        """
        self.validations.append(
            AsyncValidatorFn.coerce(rule, offload=self.config.offload_sync_rules)
        )
        return self

    async def validate_value(self, value: V, key: K) -> ValidationResult[K]:
        """Run every rule concurrently and collect all errors.

        Args:
            value: Value to validate
            key: Key of the field the value belongs to

        Returns:
            ValidationResult with the errors of all failing rules, in rule order
        """
        logger.debug(
            "Starting %d async rules for %r (max_concurrency=%s)",
            len(self.validations),
            key,
            self.config.max_concurrency,
        )

        if self.config.max_concurrency is None:
            pending = [fn.validate_value(value, key) for fn in self.validations]
        else:
            semaphore = asyncio.Semaphore(self.config.max_concurrency)

            async def bounded(fn: AsyncValidatorFn[V, K]) -> ValidationResult[K]:
                async with semaphore:
                    return await fn.validate_value(value, key)

            pending = [bounded(fn) for fn in self.validations]

        # gather returns results in submission order, not completion order
        results = await asyncio.gather(*pending, return_exceptions=True)

        for outcome in results:
            if isinstance(outcome, BaseException):
                raise outcome

        result = _fold(list(results))
        if not result.valid:
            logger.debug("Field %r failed with %d errors", key, len(result.errors))
        return result

    def __len__(self) -> int:
        return len(self.validations)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AsyncValidator):
            return NotImplemented
        return len(self.validations) == len(other.validations) and all(
            mine == theirs for mine, theirs in zip(self.validations, other.validations)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"AsyncValidator({self.validations!r})"
