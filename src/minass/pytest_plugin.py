"""pytest integration.

Registered through the ``pytest11`` entry point. Request the ``t`` fixture
to get a sink for minass assertions::

    from minass import assert_that

    def test_greeting(t):
        assert_that(t, greet("Ada")).contains("Ada")
        assert_that(t, greet("")).equals("Hello!")

Failed checks do not stop the test. Once the test body returns, the test is
failed with every recorded diagnostic.
"""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

from minass.testing import Recorder

logger = logging.getLogger(__name__)


class PytestT(Recorder):
    """Sink bound to one pytest item."""

    def __init__(self, nodeid: str) -> None:
        super().__init__()
        self.nodeid = nodeid

    def error(self, message: str) -> None:
        super().error(message)
        logger.error("%s\n%s", self.nodeid, message)


SINK_KEY = pytest.StashKey[PytestT]()


@pytest.fixture
def t(request: pytest.FixtureRequest) -> PytestT:
    """Failure sink for minass assertions in the requesting test."""
    sink = PytestT(request.node.nodeid)
    request.node.stash[SINK_KEY] = sink
    return sink


@pytest.hookimpl(wrapper=True)
def pytest_runtest_call(item: pytest.Item) -> Generator[None, object, object]:
    result = yield
    sink = item.stash.get(SINK_KEY, None)
    if sink is not None and sink.failed:
        pytest.fail("\n".join(sink.failures), pytrace=False)
    return result
