"""Assertions about a function: whether it raises, and how long it takes::

    assert_fn(t, lambda: parse("")).panics()
    assert_fn(t, client.close).not_().panic("close() must be idempotent")
    assert_fn(t, worker.drain).promise().timeout(0.5)
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import queue
import threading
from collections.abc import Callable
from dataclasses import replace
from typing import Any

from minass.assertions._base import Assertion, AssertionContext, TestingT, new_context
from minass.assertions.promise import Promise

logger = logging.getLogger(__name__)


def assert_fn(t: TestingT, fn: Callable[[], Any]) -> FunctionAssertion:
    """Start an assertion about the zero-argument callable ``fn``.

    Coroutine functions are run to completion with :func:`asyncio.run`.
    """
    t.helper()
    return FunctionAssertion(new_context(t), fn)


def _as_sync(fn: Callable[[], Any]) -> Callable[[], Any]:
    if not inspect.iscoroutinefunction(fn):
        return fn

    def run() -> Any:
        return asyncio.run(fn())

    return run


class FunctionAssertion(Assertion):
    """Assertion chain about a zero-argument callable."""

    def __init__(self, context: AssertionContext, fn: Callable[[], Any]) -> None:
        super().__init__(context)
        self._fn = _as_sync(fn)

    def not_(self) -> FunctionAssertion:
        """Invert the assertion so that the expected result is the opposite."""
        self.invert()
        return self

    def panic(self, *msgs: Any) -> bool:
        """Call the function and check that it raises.

        Any ``Exception`` or ``SystemExit`` is caught and turned into the
        result; ``KeyboardInterrupt`` propagates. Inverted, the function must
        return without raising.
        """
        self._context.t.helper()
        msg = self._message("panic", msgs)
        try:
            self._fn()
        except (Exception, SystemExit) as e:
            logger.debug("function under %s raised %r", self.prefix, e)
            if self.inverted:
                msg.errorf("code paniced with err: %r", e)
                return False
            return True

        if not self.inverted:
            msg.errorf("did not panic")
            return False

        return True

    def panics(self, *msgs: Any) -> bool:
        return self.panic(*msgs)

    def promise(self) -> Promise:
        """Start the function in a daemon thread and return a :class:`Promise` for it.

        The promise completes even when the function raises; the exception is
        left to :func:`threading.excepthook`.
        """
        done: queue.Queue[bool] = queue.Queue(maxsize=1)
        fn = self._fn
        prefix = self.prefix

        def run() -> None:
            try:
                fn()
            finally:
                logger.debug("promise %s finished", prefix)
                done.put(True)

        thread = threading.Thread(target=run, name=f"minass-promise {prefix}", daemon=True)
        thread.start()
        logger.debug("promise %s started in %s", prefix, thread.name)
        return Promise(replace(self._context), done)
