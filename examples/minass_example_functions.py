"""Function and promise assertions inside pytest tests.

Run with ``pytest examples/minass_example_functions.py``.
"""

import asyncio
import time
from datetime import timedelta

from minass import assert_fn


def parse_port(text: str) -> int:
    port = int(text)
    if not 0 < port < 65536:
        raise ValueError(f"port out of range: {port}")
    return port


def test_parse_port(t):
    assert_fn(t, lambda: parse_port("8080")).not_().panic()
    assert_fn(t, lambda: parse_port("99999")).panics("port %s should be rejected", 99999)
    assert_fn(t, lambda: parse_port("http")).panics()


def test_fast_enough(t):
    assert_fn(t, lambda: time.sleep(0.01)).promise().timeout(timedelta(seconds=1))


def test_rate_limited(t):
    # Inverted: the call must still be running after 50ms.
    assert_fn(t, lambda: time.sleep(0.2)).promise().not_().timeout(0.05)


def test_coroutine(t):
    async def fetch():
        await asyncio.sleep(0.01)
        return "ok"

    assert_fn(t, fetch).promise().timeout(1)
