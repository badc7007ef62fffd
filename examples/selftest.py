"""Checks the assertion helpers against themselves.

Run with ``testrunner examples/selftest.py -v`` or directly with
``python examples/selftest.py -v``.
"""

import testrunner
from testrunner import (
    assert_false,
    assert_true,
    expect_approx,
    expect_eq,
    expect_ne,
    expect_throw,
    fail,
    test,
    test_must_fail,
)


@test(name="AssertTrue")
def assert_true_passes():
    assert_true(True)


@test_must_fail(name="AssertTrueFail")
def assert_true_fails():
    assert_true(False)


@test(name="AssertFalse")
def assert_false_passes():
    assert_false(False)


@test_must_fail(name="AssertFalseFail")
def assert_false_fails():
    assert_false(True)


@test(name="ExpectEq")
def expect_eq_passes():
    expect_eq(42, 42)


@test_must_fail(name="ExpectEqFail")
def expect_eq_fails():
    expect_eq("A", "B")


@test(name="ExpectNe")
def expect_ne_passes():
    expect_ne(41, 42)


@test_must_fail(name="ExpectNeFail")
def expect_ne_fails():
    expect_ne("A", "A")


@test(name="ExpectThrow")
def expect_throw_passes():
    with expect_throw(exception=ZeroDivisionError):
        1 / 0


@test_must_fail(name="ExpectThrowFail")
def expect_throw_fails():
    expect_throw(lambda: None)


@test(name="ExpectApprox")
def expect_approx_passes():
    expect_approx(0.1 + 0.2, 0.3)


@test_must_fail(name="ExpectApproxFail")
def expect_approx_fails():
    expect_approx(1.0, 1.01)


@test_must_fail(name="ForcedFail")
def forced_fail():
    fail("Forced fail")


if __name__ == "__main__":
    raise SystemExit(testrunner.main())
