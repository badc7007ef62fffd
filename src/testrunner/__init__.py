"""Register test cases and run them with fail-fast or continue policies."""

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
from testrunner.case import CaseResult, Location, TestCase, Verdict
from testrunner.cli import main
from testrunner.config import OnError, OutputMode, RunConfig, load_config
from testrunner.registry import (
    Registry,
    default_registry,
    register_test,
    test,
    test_must_fail,
)
from testrunner.runner import RunReport, Runner, RunStatus, run

__all__ = [
    "AssertionFailure",
    "CaseResult",
    "Location",
    "OnError",
    "OutputMode",
    "Registry",
    "RunConfig",
    "RunReport",
    "RunStatus",
    "Runner",
    "TestCase",
    "Verdict",
    "assert_false",
    "assert_true",
    "default_registry",
    "expect_approx",
    "expect_eq",
    "expect_ne",
    "expect_throw",
    "fail",
    "load_config",
    "main",
    "register_test",
    "run",
    "test",
    "test_must_fail",
]
