"""Field-scoped validation errors and their ordered aggregate.

A ``ValidationError`` names the offending field (its key), a stable
machine-readable ``type_id`` and a message function. The message is
built lazily from the key every time it is rendered, so a rule can
capture the offending value when it fails and leave formatting until
the error is actually displayed.

``ValidationErrors`` is an ordered collection of such errors. It keeps
insertion order, never deduplicates and only grows through ``extend``.

Example:
    ```python
    from form_validation import ValidationError, ValidationErrors

    value = -1
    error = ValidationError("age", "NOT_NEGATIVE").with_message(
        lambda key: f"The value of {key} ({value}) cannot be less than 0"
    )
    str(error)
    # 'The value of age (-1) cannot be less than 0'

    errors = ValidationErrors([error, ValidationError("name", "REQUIRED")])
    errors.get("age").type_ids()
    # ['NOT_NEGATIVE']
    errors.get("email") is None
    # True
    ```
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, List, TypeVar

K = TypeVar("K")

DEFAULT_MESSAGE = "Validation error"

_MISSING: Any = object()


class ValidationError(Generic[K]):
    """A single validation error attached to one field.

    Attributes:
        key: Identifies the field the error belongs to
        type_id: Stable identifier for the error category, suitable for
            programmatic matching (localization lookups, telemetry)

    Args:
        key: Field key
        type_id: Error category identifier
    """

    def __init__(self, key: K, type_id: str):
        self.key = key
        self.type_id = type_id
        self._message: Callable[[K], str] = lambda _key: DEFAULT_MESSAGE

    def message(self, text: str) -> ValidationError[K]:
        """Replace the message with a constant string (fluent API).

        Args:
            text: The message text

        Returns:
            Self for chaining
        """
        self._message = lambda _key: text
        return self

    def with_message(self, message_fn: Callable[[K], str]) -> ValidationError[K]:
        """Replace the message with a function of the key (fluent API).

        The function is called every time the message is rendered and
        should be pure.

        Args:
            message_fn: Callable receiving the key and returning the text

        Returns:
            Self for chaining
        """
        self._message = message_fn
        return self

    def get_message(self) -> str:
        """Render the message for this error's key."""
        return self._message(self.key)

    def to_errors(self) -> ValidationErrors[K]:
        """Promote this error to a one-element ``ValidationErrors``."""
        return ValidationErrors([self])

    def __str__(self) -> str:
        return self.get_message()

    def __repr__(self) -> str:
        return (
            f"ValidationError(key={self.key!r}, type_id={self.type_id!r}, "
            f"message={self.get_message()!r})"
        )


class ValidationErrors(Generic[K]):
    """Ordered collection of ``ValidationError`` objects.

    The empty collection is the identity for ``extend``, which makes it
    the seed when folding many validation outcomes together.

    Args:
        errors: List of errors to wrap as-is; an empty list when omitted
    """

    def __init__(self, errors: List[ValidationError[K]] | None = None):
        self.errors: List[ValidationError[K]] = errors if errors is not None else []

    def get(self, key: K) -> ValidationErrors[K] | None:
        """Get the errors belonging to one field.

        Keys are compared by equality. Relative order is preserved.

        Args:
            key: Field key to filter by

        Returns:
            New collection with the matching errors, or None if there are none
        """
        matching = [error for error in self.errors if error.key == key]
        if matching:
            return ValidationErrors(matching)
        return None

    def is_empty(self) -> bool:
        """Check if the collection holds no errors."""
        return not self.errors

    def len(self) -> int:
        """Number of errors in the collection."""
        return len(self.errors)

    def extend(self, other: ValidationErrors[K] | ValidationError[K]) -> None:
        """Append another collection's errors after the existing ones.

        Args:
            other: Errors to append, in their own order. A single
                ``ValidationError`` is appended as one entry.
        """
        if isinstance(other, ValidationError):
            self.errors.append(other)
        else:
            self.errors.extend(other.errors)

    def keys(self) -> List[K]:
        """Distinct field keys, in the order they first appear."""
        seen: List[K] = []
        for error in self.errors:
            if error.key not in seen:
                seen.append(error.key)
        return seen

    def type_ids(self, key: K = _MISSING) -> List[str]:
        """Error type identifiers in order, optionally for a single field.

        Args:
            key: If given, only errors for this key are considered

        Returns:
            List of type identifiers (duplicates kept)
        """
        return [
            error.type_id
            for error in self.errors
            if key is _MISSING or error.key == key
        ]

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self) -> Iterator[ValidationError[K]]:
        return iter(self.errors)

    def __bool__(self) -> bool:
        return bool(self.errors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationErrors):
            return NotImplemented
        return self.errors == other.errors

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return ", ".join(str(error) for error in self.errors)

    def __repr__(self) -> str:
        return f"ValidationErrors({self.errors!r})"
