"""Tests for the assertion helpers."""

import pytest

from testrunner.assertions import (
    AssertionFailure,
    assert_false,
    assert_true,
    expect_approx,
    expect_eq,
    expect_ne,
    expect_throw,
    fail,
)


# --- truthiness ---


def test_assert_true_pass():
    assert_true(1)


def test_assert_true_fail():
    with pytest.raises(AssertionFailure) as exc_info:
        assert_true(0)
    assert exc_info.value.message == "assert_true(0) failed"


def test_assert_false_pass():
    assert_false([])


def test_assert_false_fail_uses_custom_message():
    with pytest.raises(AssertionFailure, match="still set"):
        assert_false(True, "still set")


# --- equality ---


def test_expect_eq_pass():
    expect_eq(42, 42)


def test_expect_eq_fail():
    with pytest.raises(AssertionFailure) as exc_info:
        expect_eq("A", "B")
    assert "'A'" in exc_info.value.message
    assert "'B'" in exc_info.value.message


def test_expect_ne_pass():
    expect_ne(41, 42)


def test_expect_ne_fail():
    with pytest.raises(AssertionFailure, match="unequal"):
        expect_ne("A", "A")


# --- approximate equality ---


def test_expect_approx_within_epsilon():
    expect_approx(0.1 + 0.2, 0.3)


def test_expect_approx_outside_epsilon():
    with pytest.raises(AssertionFailure):
        expect_approx(1.0, 1.001)


def test_expect_approx_custom_epsilon():
    expect_approx(1.0, 1.05, epsilon=0.1)


# --- throwing ---


def test_expect_throw_callable_pass():
    expect_throw(int, "not a number")


def test_expect_throw_callable_fail():
    with pytest.raises(AssertionFailure, match="did not throw"):
        expect_throw(lambda: None)


def test_expect_throw_block_pass():
    with expect_throw(exception=KeyError):
        {}["missing"]


def test_expect_throw_block_fail():
    with pytest.raises(AssertionFailure, match="did not throw"):
        with expect_throw():
            pass


def test_expect_throw_other_exception_type_propagates():
    with pytest.raises(ZeroDivisionError):
        expect_throw(lambda: 1 / 0, exception=KeyError)


# --- forced fail ---


def test_fail_carries_message():
    with pytest.raises(AssertionFailure) as exc_info:
        fail("Forced fail")
    assert exc_info.value.message == "Forced fail"
    assert str(exc_info.value) == "Forced fail"
