"""Failure message rendering.

Every failure is rendered in one of these forms::

    [file:line] assertion message

    [file:line]
    test message
    assertion message

    [file:line]
    long
        assertion
    message

    [file:line]
    test message
    long
        assertion
    message

The first form is used only when the caller supplied no message of their own
and the assertion message is a single line.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from minass.assertions._base import TestingT

logger = logging.getLogger(__name__)


def _format(fmt: str, args: tuple[Any, ...]) -> str:
    if not args:
        return fmt
    return fmt % args


def render(
    prefix: str,
    test_message: str,
    test_args: tuple[Any, ...],
    assertion_message: str,
    assertion_args: tuple[Any, ...],
    multiline: bool = False,
) -> str:
    """Render a diagnostic string from its parts."""
    if not test_message and not multiline:
        return f"{prefix} {_format(assertion_message, assertion_args)}"

    lines = [prefix]
    if test_message:
        lines.append(_format(test_message, test_args))
    lines.append(_format(assertion_message, assertion_args))
    return "\n".join(lines)


@dataclass
class Message:
    """A single failure message, bound to the sink it is reported to.

    Attributes:
    ----------
    t: TestingT
        Sink receiving the rendered message.
    prefix: str
        ``[file:line]`` of the assertion's call site.
    check: str
        Name of the terminal check reporting the message.
    test_message, test_args:
        Optional caller-supplied ``%``-style format and its arguments.
    assertion_message, assertion_args:
        Check-specific format and arguments, set when the check fails.
    multiline: bool
        Forces the expanded form for payloads spanning several lines.
    """

    t: TestingT
    prefix: str
    check: str = ""
    test_message: str = ""
    test_args: tuple[Any, ...] = ()
    assertion_message: str = ""
    assertion_args: tuple[Any, ...] = ()
    multiline: bool = False

    def errorf(self, fmt: str, *args: Any) -> None:
        """Report the message to the sink with ``fmt % args`` as its body."""
        self.assertion_message = fmt
        self.assertion_args = args
        text = str(self)
        logger.debug("assertion failed %s %s", self.prefix, self.check)
        self.t.error(text)

    def multiline_errorf(self, fmt: str, *args: Any) -> None:
        """Like :meth:`errorf`, always rendered in the expanded form."""
        self.multiline = True
        self.errorf(fmt, *args)

    def __str__(self) -> str:
        return render(
            self.prefix,
            self.test_message,
            self.test_args,
            self.assertion_message,
            self.assertion_args,
            self.multiline,
        )
