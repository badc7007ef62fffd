"""Tests for executing a single test case."""

import io

import pytest

from testrunner.assertions import fail
from testrunner.case import CaseResult, Location, TestCase, Verdict
from testrunner.config import OutputMode
from testrunner.reporting.console import Reporter


def _failing():
    fail("boom")


def _case(body, expected_to_pass=True, name="Sample"):
    return TestCase(
        name=name,
        location=Location(file="suite.py", line=12),
        expected_to_pass=expected_to_pass,
        body=body,
    )


@pytest.fixture
def reporter():
    return Reporter(OutputMode.COMPACT, out=io.StringIO(), err=io.StringIO(), color=False)


def test_passing_body_passes(reporter):
    result = _case(lambda: None).execute(reporter, 6)
    assert result == CaseResult(Verdict.PASSED)
    assert result.passed
    assert reporter.err.getvalue() == ""


def test_assertion_failure_fails_with_location(reporter):
    result = _case(_failing).execute(reporter, 6)
    assert result.verdict is Verdict.FAILED
    assert result.message == "boom"
    assert reporter.err.getvalue() == "suite.py:12 boom\n"


def test_must_fail_body_that_fails_passes(reporter):
    result = _case(_failing, expected_to_pass=False).execute(reporter, 6)
    assert result.verdict is Verdict.PASSED
    assert reporter.err.getvalue() == ""


def test_must_fail_body_that_passes_fails(reporter):
    result = _case(lambda: None, expected_to_pass=False).execute(reporter, 6)
    assert result.verdict is Verdict.FAILED
    assert "suite.py:12" in reporter.err.getvalue()
    assert "passed but should not have" in reporter.err.getvalue()


def test_unexpected_exception_propagates(reporter):
    def body():
        raise KeyError("not an assertion")

    with pytest.raises(KeyError):
        _case(body).execute(reporter, 6)


def test_body_invoked_exactly_once(reporter, mocker):
    body = mocker.Mock(return_value=None)
    _case(body).execute(reporter, 6)
    body.assert_called_once_with()


def test_elapsed_only_measured_in_timing_mode():
    compact = Reporter(OutputMode.VERBOSE, out=io.StringIO(), err=io.StringIO())
    timing = Reporter(OutputMode.TIMING, out=io.StringIO(), err=io.StringIO())

    assert _case(lambda: None).execute(compact, 6).elapsed is None
    elapsed = _case(lambda: None).execute(timing, 6).elapsed
    assert elapsed is not None and elapsed >= 0.0


def test_test_case_is_immutable():
    case = _case(lambda: None)
    with pytest.raises(AttributeError):
        case.name = "Other"


def test_location_renders_file_and_line():
    assert str(Location(file="tests/test_math.py", line=7)) == "tests/test_math.py:7"
