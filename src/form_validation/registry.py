"""Named registry of reusable validation rules.

Rules are typically shared by many forms. A ``RuleRegistry`` stores them
under names so forms can assemble validators without importing every
rule directly. Rules keep their identity while registered, so validators
built from the same names compare equal.

Example:
    ```python
    from form_validation import RuleRegistry

    rules = RuleRegistry("numbers")
    rules.register("not_negative", not_negative)
    rules.register("at_most_ten", at_most_ten)

    age = rules.validator("not_negative", "at_most_ten")
    age == rules.validator("not_negative", "at_most_ten")
    # True
    ```
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, Union

from .config import ValidationConfig
from .exceptions import RuleNotFoundError, RuleRegistrationError
from .validator import AsyncValidator, Validator
from .validator_fn import AsyncValidatorFn, ValidatorFn, is_async_rule

logger = logging.getLogger(__name__)

AnyValidatorFn = Union[ValidatorFn[Any, Any], AsyncValidatorFn[Any, Any]]


class RuleRegistry:
    """Thread-safe registry of named rules.

    Plain callables are wrapped on registration: coroutine functions
    become ``AsyncValidatorFn``, everything else ``ValidatorFn``.

    Args:
        name: Registry name, used in error messages and logs
    """

    def __init__(self, name: str = "rules"):
        self._name = name
        self._rules: Dict[str, AnyValidatorFn] = {}
        self._lock = threading.RLock()

    @property
    def name(self) -> str:
        """Get registry name."""
        return self._name

    def register(
        self,
        name: str,
        rule: AnyValidatorFn | Callable[..., Any],
        allow_overwrite: bool = False,
    ) -> AnyValidatorFn:
        """Register a rule by name.

        Args:
            name: Unique name for the rule
            rule: A ``ValidatorFn``, ``AsyncValidatorFn`` or plain callable
            allow_overwrite: Whether to replace an existing rule

        Returns:
            The registered (possibly wrapped) rule

        Raises:
            RuleRegistrationError: If the name is taken and allow_overwrite is False
        """
        if not isinstance(rule, (ValidatorFn, AsyncValidatorFn)):
            rule = AsyncValidatorFn(rule) if is_async_rule(rule) else ValidatorFn(rule)

        with self._lock:
            if not allow_overwrite and name in self._rules:
                raise RuleRegistrationError(
                    f"Rule '{name}' already registered in {self._name}",
                    context={"rule": name, "registry": self._name},
                )
            self._rules[name] = rule

        logger.debug("Registered rule %s in %s", name, self._name)
        return rule

    def rule(self, name: str | None = None) -> Callable[[Callable[..., Any]], AnyValidatorFn]:
        """Decorator registering a function as a rule.

        Args:
            name: Rule name; defaults to the function's ``__name__``

        Returns:
            Decorator that returns the registered (wrapped) rule

        Example:
            ```python
            @rules.rule()
            def required(value, key):
                ...

            rules.validator("required")
            ```
        """

        def decorator(function: Callable[..., Any]) -> AnyValidatorFn:
            return self.register(name or function.__name__, function)

        return decorator

    def get(self, name: str) -> AnyValidatorFn:
        """Get a rule by name.

        Raises:
            RuleNotFoundError: If the rule is not registered
        """
        with self._lock:
            if name not in self._rules:
                raise RuleNotFoundError(
                    f"Rule not found: {name}",
                    context={
                        "rule": name,
                        "registry": self._name,
                        "available_rules": list(self._rules.keys()),
                    },
                )
            return self._rules[name]

    def validator(self, *names: str) -> Validator[Any, Any]:
        """Build a synchronous validator from registered rules.

        Args:
            *names: Rule names, in the order the rules should run

        Returns:
            Validator holding the named rules

        Raises:
            RuleNotFoundError: If a name is not registered
            RuleRegistrationError: If a named rule is asynchronous
        """
        validator: Validator[Any, Any] = Validator()
        for name in names:
            rule = self.get(name)
            if isinstance(rule, AsyncValidatorFn):
                raise RuleRegistrationError(
                    f"Rule '{name}' is asynchronous and cannot be used in a Validator",
                    context={"rule": name, "registry": self._name},
                )
            validator.validation(rule)
        return validator

    def async_validator(
        self, *names: str, config: ValidationConfig | None = None
    ) -> AsyncValidator[Any, Any]:
        """Build an asynchronous validator from registered rules.

        Synchronous rules are converted with their identity preserved.

        Args:
            *names: Rule names, in the order the rules should run
            config: Execution options for the validator

        Returns:
            AsyncValidator holding the named rules

        Raises:
            RuleNotFoundError: If a name is not registered
        """
        validator: AsyncValidator[Any, Any] = AsyncValidator(config=config)
        for name in names:
            validator.validation(self.get(name))
        return validator

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._rules

    def __len__(self) -> int:
        with self._lock:
            return len(self._rules)
