"""Tests for minass.assertions.function."""

import pytest

from minass import UsageError, assert_fn


def boom():
    raise ValueError("boom")


def quiet():
    return None


class TestPanic:
    def test_raising_function_passes(self, rec):
        assert assert_fn(rec, boom).panic() is True
        assert rec.failures == []

    def test_returning_function_fails(self, rec, prefix):
        assert assert_fn(rec, quiet).panic() is False
        assert rec.failures == [f"{prefix} did not panic"]

    def test_inverted_raising_function_fails(self, rec, prefix):
        assert assert_fn(rec, boom).not_().panics() is False
        assert rec.failures == [f"{prefix} code paniced with err: ValueError('boom')"]

    def test_inverted_returning_function_passes(self, rec):
        assert assert_fn(rec, quiet).not_().panics() is True
        assert rec.failures == []

    def test_message(self, rec, prefix):
        assert_fn(rec, quiet).panic("parse(%r) should reject empty input", "")

        assert rec.failures == [f"{prefix}\nparse('') should reject empty input\ndid not panic"]

    def test_system_exit_is_caught(self, rec):
        def leave():
            raise SystemExit(2)

        assert assert_fn(rec, leave).panic() is True

    def test_keyboard_interrupt_propagates(self, rec):
        def interrupt():
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            assert_fn(rec, interrupt).panic()

    def test_function_runs_once(self, rec):
        calls = []

        assert_fn(rec, lambda: calls.append(1)).not_().panic()

        assert calls == [1]

    def test_usage_error_before_running(self, rec):
        calls = []

        with pytest.raises(UsageError):
            assert_fn(rec, lambda: calls.append(1)).panic(None)
        assert calls == []


class TestCoroutineFunctions:
    def test_raising_coroutine(self, rec):
        async def fail():
            raise RuntimeError("async boom")

        assert assert_fn(rec, fail).panic() is True

    def test_returning_coroutine(self, rec, prefix):
        async def fine():
            return 1

        assert assert_fn(rec, fine).panic() is False
        assert rec.failures == [f"{prefix} did not panic"]
