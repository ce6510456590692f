"""Shared rule fixtures for form_validation tests."""

import asyncio

import pytest

from form_validation import ValidationError, ValidationErrors, ValidationResult


@pytest.fixture
def not_negative():
    """Rule rejecting values below zero with a message naming the value."""

    def rule(value, key):
        if value < 0:
            return ValidationResult.failure(
                ValidationError(key, "NOT_NEGATIVE").with_message(
                    lambda key: f"The value of {key} ({value}) cannot be less than 0"
                )
            )
        return ValidationResult.success()

    return rule


@pytest.fixture
def at_most_ten():
    """Rule rejecting values above ten."""

    def rule(value, key):
        if value > 10:
            return ValidationResult.failure(
                ValidationError(key, "TOO_LARGE").with_message(
                    lambda key: f"The value of {key} ({value}) cannot be greater than 10"
                )
            )
        return ValidationResult.success()

    return rule


@pytest.fixture
def fails_twice():
    """Rule that always returns two errors."""

    def rule(value, key):
        return ValidationResult.failure(
            ValidationErrors([
                ValidationError(key, "FIRST").message("first"),
                ValidationError(key, "SECOND").message("second"),
            ])
        )

    return rule


@pytest.fixture
def delayed_failure():
    """Factory for async rules that fail with a given type_id after a delay."""

    def factory(type_id, delay):
        async def rule(value, key):
            await asyncio.sleep(delay)
            return ValidationResult.failure(ValidationError(key, type_id).message(type_id))

        return rule

    return factory
