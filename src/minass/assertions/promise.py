"""Handle on a function running in a background thread."""

from __future__ import annotations

import logging
import queue
from datetime import timedelta
from typing import Any

from minass.assertions._base import Assertion, AssertionContext
from minass.assertions._render import format_duration, to_seconds

logger = logging.getLogger(__name__)


class Promise(Assertion):
    """Assertion on the completion of a function started by ``promise()``.

    The background thread writes a single value into ``done`` when the
    function returns. Only one reader can observe it: calling :meth:`wait`
    after the value was already taken (by ``wait`` or a completed
    :meth:`timeout`) blocks forever.
    """

    def __init__(self, context: AssertionContext, done: queue.Queue[bool]) -> None:
        super().__init__(context)
        self._done = done

    def not_(self) -> Promise:
        """Invert the assertion so that the expected result is the opposite."""
        self.invert()
        return self

    def wait(self) -> bool:
        """Block until the function returns. Always succeeds."""
        return self._done.get()

    def timeout(self, duration: float | timedelta, *msgs: Any) -> bool:
        """Wait at most ``duration`` (seconds or a timedelta) for the function to return.

        Not inverted, the function must finish within ``duration``; inverted,
        it must still be running when ``duration`` has elapsed. A function
        still running when the wait ends is left to finish on its own.
        """
        self._context.t.helper()
        msg = self._message("timeout", msgs)
        try:
            ret = self._done.get(timeout=max(to_seconds(duration), 0.0))
        except queue.Empty:
            logger.debug("promise %s still running after %s", self.prefix, format_duration(duration))
            if not self.inverted:
                msg.errorf("function reached timeout of %s", format_duration(duration))
                return False
            return True

        if self.inverted:
            msg.errorf("function didn't meet the minimum duration of %s", format_duration(duration))
            return False

        return ret
