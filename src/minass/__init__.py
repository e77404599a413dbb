"""minass - a MINimal ASSertion library.

Start an assertion with ``assert_that(t, value)`` or ``assert_fn(t, fn)``,
optionally invert it with ``not_()``, and finish it with one check. Checks
report failures to ``t`` and return a boolean; they never raise, so whether
to stop the test after a failed check is up to the caller::

    if not assert_that(t, resp.status).equals(200, "GET %s", url):
        return
    assert_that(t, resp.text).contains("welcome")
"""

from .assertions._base import TestingT
from .assertions import (
    FunctionAssertion,
    Promise,
    Ref,
    ValueAssertion,
    assert_fn,
    assert_that,
)
from .errors import ConfigError, UsageError
from .testing import Recorder
from .version import __version__


__all__ = [
    # Entry points
    "assert_that",
    "assert_fn",
    "Ref",
    # Chains
    "ValueAssertion",
    "FunctionAssertion",
    "Promise",
    # Host
    "TestingT",
    "Recorder",
    # Errors
    "UsageError",
    "ConfigError",
    "__version__",
]
