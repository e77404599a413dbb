"""State shared by value, function and promise assertions."""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Protocol

from minass.assertions.message import Message
from minass.errors import UsageError

logger = logging.getLogger(__name__)


class TestingT(Protocol):
    """What minass needs from the host test runner.

    ``error`` records a failure against the running test without stopping it;
    ``helper`` marks the calling frame as plumbing for blame attribution.
    """

    def helper(self) -> None: ...

    def error(self, message: str) -> None: ...


def caller(skip: int) -> tuple[str, int, bool]:
    """Return ``(file, line, found)`` for the frame ``skip`` levels above the caller.

    ``skip=0`` is the function calling :func:`caller` itself.
    """
    frame = inspect.currentframe()
    try:
        if frame is not None:
            frame = frame.f_back
        for _ in range(skip):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            logger.warning("No frame found %d levels up; location unknown", skip)
            return "", 0, False
        return frame.f_code.co_filename, frame.f_lineno, True
    finally:
        del frame


# Replaced in tests for deterministic prefixes.
runtime_caller = caller


@dataclass
class AssertionContext:
    """Sink, location prefix and inversion flag of one assertion chain."""

    t: TestingT
    prefix: str
    inverted: bool = False


def new_context(t: TestingT) -> AssertionContext:
    """Build the context for an assertion started by this function's caller's caller."""
    t.helper()
    file, line, _ = runtime_caller(2)
    return AssertionContext(t=t, prefix=f"[{file}:{line}]")


class Assertion:
    """Base for assertion chains; holds the context and handles inversion."""

    def __init__(self, context: AssertionContext) -> None:
        self._context = context

    @property
    def inverted(self) -> bool:
        return self._context.inverted

    @property
    def prefix(self) -> str:
        return self._context.prefix

    def invert(self):
        """Set the inversion flag. Calling it again keeps it set."""
        self._context.inverted = True
        return self

    def not_(self):
        """Invert the assertion so that the expected result is the opposite."""
        return self.invert()

    def _message(self, check: str, msgs: tuple[Any, ...]) -> Message:
        """Build the message for the terminal check ``check`` from its trailing arguments."""
        test_message = ""
        test_args: tuple[Any, ...] = ()

        if msgs:
            if not isinstance(msgs[0], str):
                raise UsageError("first parameter after expected value must be a string")
            test_message = msgs[0]
            test_args = tuple(msgs[1:])
            if test_args:
                try:
                    test_message % test_args
                except (TypeError, ValueError) as e:
                    raise UsageError(f"message {test_message!r} does not match its arguments: {e}") from e

        return Message(
            t=self._context.t,
            prefix=self._context.prefix,
            check=check,
            test_message=test_message,
            test_args=test_args,
        )
