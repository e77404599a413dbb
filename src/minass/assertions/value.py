"""Assertions about a value.

Start a chain with :func:`assert_that`, optionally invert it with ``not_()``
and finish it with exactly one terminal check::

    assert_that(t, response.status).equals(200)
    assert_that(t, headers).not_().has_key("x-debug", "leaked debug header in %s", url)

Every terminal check takes optional trailing arguments: a ``%``-style format
string followed by its arguments, printed above the failure on a failed
check. Every terminal check returns ``True`` if it passed.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Mapping
from typing import Any

from minass.assertions._base import Assertion, AssertionContext, TestingT, new_context
from minass.assertions._render import render_value, type_name
from minass.assertions.ref import Ref, deref, is_nilable

logger = logging.getLogger(__name__)

_TEXT_TYPES = (str, bytes, bytearray)
_BYTES_TYPES = (bytes, bytearray)


class _HasKeyError(Exception):
    """The subject cannot be probed for a key."""


def assert_that(t: TestingT, value: Any) -> ValueAssertion:
    """Start an assertion about ``value``, reporting failures to ``t``."""
    t.helper()
    return ValueAssertion(new_context(t), value)


def _is_reader(value: Any) -> bool:
    return not isinstance(value, _TEXT_TYPES) and callable(getattr(value, "read", None))


def _drain(reader: Any) -> Any:
    """Read a stream to its end; keep the stream itself if reading fails."""
    try:
        return reader.read()
    except Exception as e:
        logger.warning("Could not read %s for contains(): %s", type_name(reader), e)
        return reader


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return bytes(value).decode("utf-8", errors="replace")


def _contains(container: Any, expected: Any) -> bool:
    """Membership by equality for references, mappings and collections."""
    if isinstance(container, Ref):
        target = deref(container)
        if target is None:
            return False
        return _contains(target, expected)

    if isinstance(container, Mapping):
        return any(item == expected for item in container.values())

    if isinstance(container, str):
        return False

    if isinstance(container, Collection):
        return any(item == expected for item in container)

    return False


def _has_key(value: Any, key: Any) -> bool:
    if value is None:
        raise _HasKeyError("value is None; expected a mapping")

    if not isinstance(value, Mapping):
        raise _HasKeyError(f"value of type {type_name(value)} is not a mapping")

    key_types = {type(k) for k in value}
    if key_types and type(key) not in key_types:
        keyed_by = ", ".join(sorted(kt.__name__ for kt in key_types))
        raise _HasKeyError(f"mapping is keyed by type {keyed_by}; key provided is type {type_name(key)}")

    try:
        return key in value
    except TypeError as e:
        raise _HasKeyError(f"key of type {type_name(key)} cannot be looked up: {e}") from e


class ValueAssertion(Assertion):
    """Assertion chain about a single value."""

    def __init__(self, context: AssertionContext, value: Any) -> None:
        super().__init__(context)
        self._value = value

    @property
    def value(self) -> Any:
        return self._value

    def not_(self) -> ValueAssertion:
        """Invert the assertion so that the expected result is the opposite."""
        self.invert()
        return self

    def nil(self, *msgs: Any) -> bool:
        """Check that the value is an absent reference.

        Accepted values are ``None``, :class:`~minass.Ref` and ``weakref.ref``.
        Anything else fails whether or not the chain is inverted.
        """
        self._context.t.helper()
        msg = self._message("nil", msgs)
        if not is_nilable(self._value):
            msg.errorf("value provided is not a pointer but is %s", type_name(self._value))
            return False

        target = deref(self._value)
        is_nil = target is None

        if not self.inverted and not is_nil:
            msg.multiline_errorf("expected nil; got:\n%s", render_value(target))
            return False

        if self.inverted and is_nil:
            msg.errorf("value is nil; expected not nil")
            return False

        return True

    def true(self, *msgs: Any) -> bool:
        """Check that the value is ``True``. Non-booleans always fail."""
        self._context.t.helper()
        msg = self._message("true", msgs)
        if not isinstance(self._value, bool):
            msg.errorf("value is not boolean; is %s", type_name(self._value))
            return False

        if not self.inverted and not self._value:
            msg.errorf("value is false; expected true")
            return False

        if self.inverted and self._value:
            msg.errorf("value is true; expected false")
            return False

        return True

    def false(self, *msgs: Any) -> bool:
        """Check that the value is ``False``; same as ``not_().true()``."""
        return self.not_().true(*msgs)

    def equals(self, expected: Any, *msgs: Any) -> bool:
        """Check that the value equals ``expected``."""
        self._context.t.helper()
        msg = self._message("equals", msgs)
        eq = bool(self._value == expected)

        if not self.inverted and not eq:
            msg.multiline_errorf(
                "%s\n\n\tdoes not equal\n\n%s", render_value(self._value), render_value(expected)
            )
            return False

        if self.inverted and eq:
            msg.multiline_errorf("both values are:\n%s", render_value(expected))
            return False

        return True

    def equal(self, expected: Any, *msgs: Any) -> bool:
        return self.equals(expected, *msgs)

    def contains(self, expected: Any, *msgs: Any) -> bool:
        """Check that the value contains ``expected``.

        Strings and bytes are searched for a substring, mappings by their
        values, and other collections by membership. Readable streams are
        read to the end first and their content is searched instead.
        """
        self._context.t.helper()
        msg = self._message("contains", msgs)

        value = self._value
        if _is_reader(value):
            value = _drain(value)

        container = value
        if isinstance(expected, str) and isinstance(value, _TEXT_TYPES):
            container = _as_text(value)
            contains = expected in container
        elif isinstance(expected, _BYTES_TYPES) and isinstance(value, _BYTES_TYPES):
            contains = expected in value
        else:
            contains = _contains(value, expected)

        if not contains and not self.inverted:
            msg.multiline_errorf(
                "%s\n\n\tdoes not contain\n\n%s", render_value(container), render_value(expected)
            )
            return False

        if contains and self.inverted:
            msg.multiline_errorf(
                "%s\n\n\tdoes contain\n\n%s", render_value(container), render_value(expected)
            )
            return False

        return True

    def contain(self, expected: Any, *msgs: Any) -> bool:
        return self.contains(expected, *msgs)

    def has_key(self, key: Any, *msgs: Any) -> bool:
        """Check that the value is a mapping holding ``key``.

        A ``None`` value, a non-mapping or a key whose type is not among the
        mapping's key types is reported as a ``hasKey error`` and then
        routed through ``not_().false()``, which reports the value's type as
        a second failure. The check fails either way.
        """
        self._context.t.helper()
        msg = self._message("has_key", msgs)
        try:
            has_key = _has_key(self._value, key)
        except _HasKeyError as e:
            msg.errorf("hasKey error: %s", e)
            self.not_().false()
            return False

        if not has_key and not self.inverted:
            msg.errorf("%s\n\n\tdoes not have key\n\n%s\n", render_value(self._value), render_value(key))
            return False

        if has_key and self.inverted:
            msg.errorf("%s\n\n\tdoes have key\n\n%s", render_value(self._value), render_value(key))
            return False

        return True

    def have_key(self, key: Any, *msgs: Any) -> bool:
        return self.has_key(key, *msgs)
