"""Assertion helpers and the failure signal they raise."""

from testrunner.assertions.base import AssertionFailure
from testrunner.assertions.checks import (
    assert_false,
    assert_true,
    expect_approx,
    expect_eq,
    expect_ne,
    expect_throw,
    fail,
)

__all__ = [
    "AssertionFailure",
    "assert_false",
    "assert_true",
    "expect_approx",
    "expect_eq",
    "expect_ne",
    "expect_throw",
    "fail",
]
