"""Value, function and promise assertions."""

from .function import FunctionAssertion, assert_fn
from .message import Message, render
from .promise import Promise
from .ref import Ref
from .value import ValueAssertion, assert_that

__all__ = [
    "FunctionAssertion",
    "Message",
    "Promise",
    "Ref",
    "ValueAssertion",
    "assert_fn",
    "assert_that",
    "render",
]
