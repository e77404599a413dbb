"""Tests for minass.assertions.promise."""

import threading
from datetime import timedelta

from minass import assert_fn


class Gate:
    """Function that blocks until released."""

    def __init__(self):
        self.released = threading.Event()
        self.finished = threading.Event()

    def __call__(self):
        self.released.wait(5)
        self.finished.set()


class TestWait:
    def test_wait_returns_true(self, rec):
        calls = []

        assert assert_fn(rec, lambda: calls.append(1)).promise().wait() is True
        assert calls == [1]
        assert rec.failures == []

    def test_wait_after_exception(self, rec, monkeypatch):
        raised = []
        reported = threading.Event()

        def hook(args):
            raised.append(args.exc_value)
            reported.set()

        monkeypatch.setattr(threading, "excepthook", hook)

        def boom():
            raise ValueError("in thread")

        assert assert_fn(rec, boom).promise().wait() is True
        assert reported.wait(5)
        assert isinstance(raised[0], ValueError)

    def test_promise_does_not_block_caller(self, rec):
        gate = Gate()

        promise = assert_fn(rec, gate).promise()

        assert not gate.finished.is_set()
        gate.released.set()
        assert promise.wait() is True
        assert gate.finished.is_set()

    def test_value_is_consumed_once(self, rec, prefix):
        promise = assert_fn(rec, lambda: None).promise()

        assert promise.wait() is True
        assert promise.timeout(0.05) is False
        assert rec.failures == [f"{prefix} function reached timeout of 50ms"]


class TestTimeout:
    def test_finishes_in_time(self, rec):
        assert assert_fn(rec, lambda: None).promise().timeout(5) is True
        assert rec.failures == []

    def test_reaches_timeout(self, rec, prefix):
        gate = Gate()

        ok = assert_fn(rec, gate).promise().timeout(0.05)
        gate.released.set()

        assert ok is False
        assert rec.failures == [f"{prefix} function reached timeout of 50ms"]

    def test_timeout_with_message(self, rec, prefix):
        gate = Gate()

        assert_fn(rec, gate).promise().timeout(timedelta(milliseconds=20), "drain %s", "queue")
        gate.released.set()

        assert rec.failures == [f"{prefix}\ndrain queue\nfunction reached timeout of 20ms"]

    def test_inverted_slow_function_passes(self, rec):
        gate = Gate()

        ok = assert_fn(rec, gate).promise().not_().timeout(0.05)
        gate.released.set()

        assert ok is True
        assert rec.failures == []

    def test_inverted_fast_function_fails(self, rec, prefix):
        ok = assert_fn(rec, lambda: None).promise().not_().timeout(5)

        assert ok is False
        assert rec.failures == [f"{prefix} function didn't meet the minimum duration of 5s"]

    def test_inversion_carries_into_promise(self, rec):
        promise = assert_fn(rec, lambda: None).not_().promise()

        assert promise.inverted is True
        promise.wait()

    def test_coroutine_function(self, rec):
        async def work():
            return 1

        assert assert_fn(rec, work).promise().timeout(5) is True
