"""Check helpers used inside test bodies."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Iterator

from testrunner.assertions.base import AssertionFailure

EPSILON = 0.0001


def assert_true(value: Any, message: str | None = None) -> None:
    """Fail unless value is truthy."""
    if not value:
        raise AssertionFailure(message or f"assert_true({value!r}) failed")


def assert_false(value: Any, message: str | None = None) -> None:
    """Fail if value is truthy."""
    if value:
        raise AssertionFailure(message or f"assert_false({value!r}) failed")


def expect_eq(actual: Any, expected: Any, message: str | None = None) -> None:
    """Fail unless actual == expected."""
    if not (actual == expected):
        raise AssertionFailure(
            message or f"expect_eq expected {actual!r} to equal {expected!r}"
        )


def expect_ne(actual: Any, other: Any, message: str | None = None) -> None:
    """Fail if actual == other."""
    if actual == other:
        raise AssertionFailure(
            message or f"expect_ne expected {actual!r} to be unequal to {other!r}"
        )


def expect_approx(
    actual: float, expected: float, epsilon: float = EPSILON
) -> None:
    """Fail unless actual and expected differ by at most epsilon."""
    if abs(actual - expected) > epsilon:
        raise AssertionFailure(
            f"expect_approx {actual!r} -> {expected!r} failed (epsilon {epsilon})"
        )


def expect_throw(
    func: Callable[..., Any] | None = None,
    *args: Any,
    exception: type[BaseException] = Exception,
    **kwargs: Any,
):
    """Fail unless calling func raises exception.

    Without func, returns a context manager checking the enclosed block::

        with expect_throw(exception=KeyError):
            {}["missing"]
    """
    if func is None:
        return _expect_throw_block(exception)

    try:
        func(*args, **kwargs)
    except exception:
        return None
    raise AssertionFailure("expect_throw statement did not throw")


@contextmanager
def _expect_throw_block(exception: type[BaseException]) -> Iterator[None]:
    try:
        yield
    except exception:
        return
    raise AssertionFailure("expect_throw statement did not throw")


def fail(message: str) -> None:
    """Fail unconditionally with message."""
    raise AssertionFailure(message)
