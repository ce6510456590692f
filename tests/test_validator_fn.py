"""Tests for ValidatorFn and AsyncValidatorFn."""

import asyncio
import threading

import pytest

from form_validation import (
    AsyncValidation,
    AsyncValidatorFn,
    Validation,
    ValidationError,
    ValidationResult,
    ValidatorFn,
    is_async_rule,
)


class TestValidatorFn:
    """Test synchronous rule wrappers."""

    def test_returns_rule_result_unchanged(self, not_negative):
        rule = ValidatorFn(not_negative)
        assert rule.validate_value(5, "age").valid

        result = rule.validate_value(-1, "age")
        assert result.errors.type_ids() == ["NOT_NEGATIVE"]
        assert "-1" in str(result.errors)

    def test_call_alias(self, not_negative):
        rule = ValidatorFn(not_negative)
        assert not rule(-3, "age").valid

    def test_equal_to_itself(self, not_negative):
        rule = ValidatorFn(not_negative)
        assert rule == rule
        assert hash(rule) == hash(rule)

    def test_identical_closures_are_not_equal(self):
        first = ValidatorFn(lambda value, key: ValidationResult.success())
        second = ValidatorFn(lambda value, key: ValidationResult.success())
        assert first != second

    def test_same_function_wrapped_twice_is_not_equal(self, not_negative):
        assert ValidatorFn(not_negative) != ValidatorFn(not_negative)

    def test_usable_in_sets(self, not_negative):
        rule = ValidatorFn(not_negative)
        assert len({rule, rule, ValidatorFn(not_negative)}) == 2

    def test_rejects_non_callable(self):
        with pytest.raises(TypeError):
            ValidatorFn("not a rule")

    def test_rule_exceptions_propagate(self):
        def broken(value, key):
            raise ZeroDivisionError("boom")

        with pytest.raises(ZeroDivisionError):
            ValidatorFn(broken).validate_value(1, "k")

    def test_from_single_error(self):
        def positive(value, key):
            if value <= 0:
                return ValidationError(key, "NOT_POSITIVE")
            return None

        rule = ValidatorFn.from_single_error(positive)
        assert rule.validate_value(1, "n").valid

        result = rule.validate_value(0, "n")
        assert len(result.errors) == 1
        assert result.errors.type_ids() == ["NOT_POSITIVE"]
        assert "positive" in repr(rule)

    def test_coerce(self, not_negative):
        rule = ValidatorFn(not_negative)
        assert ValidatorFn.coerce(rule) is rule
        assert isinstance(ValidatorFn.coerce(not_negative), ValidatorFn)

    def test_coerce_rejects_async(self, delayed_failure):
        with pytest.raises(TypeError):
            ValidatorFn.coerce(delayed_failure("X", 0))
        with pytest.raises(TypeError):
            ValidatorFn.coerce(AsyncValidatorFn(delayed_failure("X", 0)))

    def test_satisfies_validation_protocol(self, not_negative):
        assert isinstance(ValidatorFn(not_negative), Validation)


class TestAsyncValidatorFn:
    """Test asynchronous rule wrappers."""

    @pytest.mark.asyncio
    async def test_awaits_rule(self, delayed_failure):
        rule = AsyncValidatorFn(delayed_failure("TAKEN", 0.01))
        result = await rule.validate_value("bob", "username")
        assert result.errors.type_ids() == ["TAKEN"]
        assert result.errors.keys() == ["username"]

    def test_identity(self, delayed_failure):
        coroutine_fn = delayed_failure("X", 0)
        rule = AsyncValidatorFn(coroutine_fn)
        assert rule == rule
        assert rule != AsyncValidatorFn(coroutine_fn)

    def test_rejects_non_callable(self):
        with pytest.raises(TypeError):
            AsyncValidatorFn(42)

    @pytest.mark.asyncio
    async def test_from_sync_preserves_identity_and_result(self, not_negative):
        sync_rule = ValidatorFn(not_negative)
        async_rule = AsyncValidatorFn.from_sync(sync_rule)

        assert async_rule.id == sync_rule.id
        assert async_rule == AsyncValidatorFn.from_sync(sync_rule)

        sync_result = sync_rule.validate_value(-1, "age")
        async_result = await async_rule.validate_value(-1, "age")
        assert async_result.errors.type_ids() == sync_result.errors.type_ids()
        assert str(async_result.errors) == str(sync_result.errors)
        assert (await async_rule.validate_value(3, "age")).valid

    @pytest.mark.asyncio
    async def test_from_sync_runs_on_event_loop_thread(self):
        threads = []

        def record(value, key):
            threads.append(threading.get_ident())
            return ValidationResult.success()

        await AsyncValidatorFn.from_sync(ValidatorFn(record)).validate_value(1, "k")
        assert threads == [threading.get_ident()]

    @pytest.mark.asyncio
    async def test_from_sync_offload_runs_in_worker_thread(self):
        threads = []

        def record(value, key):
            threads.append(threading.get_ident())
            return ValidationResult.success()

        rule = AsyncValidatorFn.from_sync(ValidatorFn(record), offload=True)
        assert (await rule.validate_value(1, "k")).valid
        assert threads and threads[0] != threading.get_ident()

    def test_coerce_shapes(self, not_negative, delayed_failure):
        sync_rule = ValidatorFn(not_negative)
        async_rule = AsyncValidatorFn(delayed_failure("X", 0))

        assert AsyncValidatorFn.coerce(async_rule) is async_rule
        assert AsyncValidatorFn.coerce(sync_rule).id == sync_rule.id
        assert isinstance(AsyncValidatorFn.coerce(delayed_failure("X", 0)), AsyncValidatorFn)
        assert isinstance(AsyncValidatorFn.coerce(not_negative), AsyncValidatorFn)

    @pytest.mark.asyncio
    async def test_coerce_plain_callable_validates(self, at_most_ten):
        rule = AsyncValidatorFn.coerce(at_most_ten)
        result = await rule.validate_value(11, "n")
        assert result.errors.type_ids() == ["TOO_LARGE"]

    @pytest.mark.asyncio
    async def test_rule_exceptions_propagate(self):
        async def broken(value, key):
            await asyncio.sleep(0)
            raise RuntimeError("remote store unavailable")

        with pytest.raises(RuntimeError):
            await AsyncValidatorFn(broken).validate_value(1, "k")

    def test_satisfies_async_validation_protocol(self, delayed_failure):
        assert isinstance(AsyncValidatorFn(delayed_failure("X", 0)), AsyncValidation)


class TestIsAsyncRule:
    """Test detection of asynchronous callables."""

    def test_functions(self, not_negative, delayed_failure):
        assert not is_async_rule(not_negative)
        assert is_async_rule(delayed_failure("X", 0))

    def test_callable_objects(self):
        class SyncCheck:
            def __call__(self, value, key):
                return ValidationResult.success()

        class AsyncCheck:
            async def __call__(self, value, key):
                return ValidationResult.success()

        assert not is_async_rule(SyncCheck())
        assert is_async_rule(AsyncCheck())
