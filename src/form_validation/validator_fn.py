"""Single validation rules with identity-based equality.

A rule is a function from a value and its field key to a
``ValidationResult``. Wrapping it in a ``ValidatorFn`` (or an
``AsyncValidatorFn`` for coroutine functions) gives it a unique identity
minted at construction. Two wrappers are equal only if they share that
identity, so separately wrapped but textually identical rules are
different rules.

Example:
    ```python
    from form_validation import ValidationError, ValidationResult, ValidatorFn

    def not_negative(value: int, key: str) -> ValidationResult:
        if value < 0:
            return ValidationResult.failure(
                ValidationError(key, "NOT_NEGATIVE").with_message(
                    lambda key: f"The value of {key} ({value}) cannot be less than 0"
                )
            )
        return ValidationResult.success()

    rule = ValidatorFn(not_negative)
    rule.validate_value(-1, "age").valid
    # False
    rule == ValidatorFn(not_negative)
    # False
    ```

Converting a sync rule keeps its identity:
    ```python
    async_rule = AsyncValidatorFn.from_sync(rule)
    async_rule.id == rule.id
    # True
    ```
"""

from __future__ import annotations

import asyncio
import inspect
import uuid
from typing import Any, Awaitable, Callable, Generic, TypeVar

from .errors import ValidationError
from .result import ValidationResult

V = TypeVar("V")
K = TypeVar("K")

Rule = Callable[[V, K], ValidationResult[K]]
AsyncRule = Callable[[V, K], Awaitable[ValidationResult[K]]]


def _rule_name(rule: Callable[..., Any]) -> str:
    return getattr(rule, "__qualname__", None) or type(rule).__name__


def is_async_rule(rule: Callable[..., Any]) -> bool:
    """Check if a callable is a coroutine function or has an async ``__call__``.

    Args:
        rule: Callable to check

    Returns:
        True if calling it produces an awaitable
    """
    if inspect.iscoroutinefunction(rule):
        return True
    if callable(rule) and not inspect.isfunction(rule) and not inspect.ismethod(rule):
        return inspect.iscoroutinefunction(getattr(rule, "__call__", None))
    return False


class ValidatorFn(Generic[V, K]):
    """A synchronous validation rule with a unique identity.

    Attributes:
        id: Identity token, used only for equality and hashing

    Args:
        rule: Callable ``(value, key) -> ValidationResult``

    Raises:
        TypeError: If ``rule`` is not callable
    """

    def __init__(self, rule: Rule[V, K]):
        if not callable(rule):
            raise TypeError(f"Validation rule must be callable, got {type(rule).__name__}")
        self._rule = rule
        self.id = uuid.uuid4()

    @classmethod
    def from_single_error(
        cls, rule: Callable[[V, K], ValidationError[K] | None]
    ) -> ValidatorFn[V, K]:
        """Wrap a rule that returns at most one error.

        Args:
            rule: Callable returning a ``ValidationError`` on failure, None on success

        Returns:
            ValidatorFn whose results promote the error to a collection
        """

        def promoted(value: V, key: K) -> ValidationResult[K]:
            error = rule(value, key)
            if error is None:
                return ValidationResult.success()
            return ValidationResult.failure(error)

        promoted.__qualname__ = _rule_name(rule)
        return cls(promoted)

    @classmethod
    def coerce(cls, rule: ValidatorFn[V, K] | Rule[V, K]) -> ValidatorFn[V, K]:
        """Return ``rule`` unchanged if already wrapped, else wrap it."""
        if isinstance(rule, ValidatorFn):
            return rule
        if isinstance(rule, AsyncValidatorFn) or is_async_rule(rule):
            raise TypeError("Asynchronous rules cannot be added to a synchronous validator")
        return cls(rule)

    def validate_value(self, value: V, key: K) -> ValidationResult[K]:
        """Run the rule and return its result unchanged."""
        return self._rule(value, key)

    __call__ = validate_value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidatorFn):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"ValidatorFn(rule={_rule_name(self._rule)}, id={self.id})"


class AsyncValidatorFn(Generic[V, K]):
    """An asynchronous validation rule with a unique identity.

    The rule may do real asynchronous work, such as checking a remote
    store for uniqueness of a username.

    Attributes:
        id: Identity token, used only for equality and hashing

    Args:
        rule: Callable ``(value, key)`` returning an awaitable ``ValidationResult``
        rule_id: Identity to adopt instead of minting a new one

    Raises:
        TypeError: If ``rule`` is not callable
    """

    def __init__(self, rule: AsyncRule[V, K], rule_id: uuid.UUID | None = None):
        if not callable(rule):
            raise TypeError(f"Validation rule must be callable, got {type(rule).__name__}")
        self._rule = rule
        self.id = rule_id if rule_id is not None else uuid.uuid4()

    @classmethod
    def from_sync(
        cls, validator_fn: ValidatorFn[V, K], offload: bool = False
    ) -> AsyncValidatorFn[V, K]:
        """Convert a synchronous rule, keeping its identity.

        Args:
            validator_fn: The rule to convert
            offload: Run the rule in a worker thread instead of on the event loop

        Returns:
            AsyncValidatorFn sharing ``validator_fn.id``
        """

        async def resolved(value: V, key: K) -> ValidationResult[K]:
            if offload:
                return await asyncio.to_thread(validator_fn.validate_value, value, key)
            return validator_fn.validate_value(value, key)

        resolved.__qualname__ = _rule_name(validator_fn._rule)
        return cls(resolved, rule_id=validator_fn.id)

    @classmethod
    def coerce(
        cls,
        rule: AsyncValidatorFn[V, K] | ValidatorFn[V, K] | Callable[..., Any],
        offload: bool = False,
    ) -> AsyncValidatorFn[V, K]:
        """Turn any supported rule shape into an ``AsyncValidatorFn``.

        Accepts an ``AsyncValidatorFn`` (returned unchanged), a ``ValidatorFn``
        (converted with its identity), a coroutine function, or a plain
        synchronous callable (wrapped as a ``ValidatorFn`` first).

        Args:
            rule: The rule to coerce
            offload: Passed to ``from_sync`` for synchronous rules

        Returns:
            AsyncValidatorFn
        """
        if isinstance(rule, AsyncValidatorFn):
            return rule
        if isinstance(rule, ValidatorFn):
            return cls.from_sync(rule, offload=offload)
        if is_async_rule(rule):
            return cls(rule)
        return cls.from_sync(ValidatorFn(rule), offload=offload)

    async def validate_value(self, value: V, key: K) -> ValidationResult[K]:
        """Run the rule and wait for its result."""
        return await self._rule(value, key)

    __call__ = validate_value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AsyncValidatorFn):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"AsyncValidatorFn(rule={_rule_name(self._rule)}, id={self.id})"
