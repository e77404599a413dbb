"""Value assertions inside pytest tests, using the ``t`` fixture.

Run with ``pytest examples/minass_example_values.py``.
"""

import io

from minass import Ref, assert_that


def lookup(users: dict[str, str], name: str) -> Ref[str]:
    return Ref(users.get(name))


USERS = {"ada": "Ada Lovelace", "alan": "Alan Turing"}


def test_lookup_found(t):
    user = lookup(USERS, "ada")
    # Returning early keeps later checks from piling up unrelated failures.
    if not assert_that(t, user).not_().nil("no user for %s", "ada"):
        return
    assert_that(t, user.value).equals("Ada Lovelace")
    assert_that(t, user.value).contains("Love")


def test_lookup_missing(t):
    assert_that(t, lookup(USERS, "grace")).nil()


def test_directory(t):
    assert_that(t, USERS).has_key("alan")
    assert_that(t, USERS).not_().has_key("grace")
    assert_that(t, USERS).contains("Alan Turing")
    assert_that(t, "ada" in USERS).true()


def test_streams(t):
    assert_that(t, io.StringIO("status: ok\n")).contains("ok")
