from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

from testrunner.assertions.base import AssertionFailure
from testrunner.config import OutputMode

if TYPE_CHECKING:
    from testrunner.reporting.console import Reporter


class Verdict(str, Enum):
    PASSED = "passed"
    FAILED = "failed"


@dataclass(frozen=True)
class Location:
    file: str
    line: int

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"


@dataclass(frozen=True)
class CaseResult:
    """Outcome of executing one test case.

    Attributes:
        verdict: Body outcome reconciled against the expected outcome.
        elapsed: Wall-clock seconds spent in the body, only measured in
            timing mode.
        message: Diagnostic written for a failed verdict, empty otherwise.
    """

    verdict: Verdict
    elapsed: float | None = None
    message: str = ""

    @property
    def passed(self) -> bool:
        return self.verdict is Verdict.PASSED


@dataclass(frozen=True)
class TestCase:
    """A named, located unit of verification with a declared outcome."""

    __test__ = False  # not a pytest test class

    name: str
    location: Location
    expected_to_pass: bool
    body: Callable[[], object]

    def execute(self, reporter: Reporter, name_width: int) -> CaseResult:
        """Invoke the body once and classify the outcome.

        Only AssertionFailure is handled here; anything else the body raises
        propagates to the caller.
        """
        timed = reporter.mode >= OutputMode.TIMING
        reporter.case_started(self, name_width)

        raised: AssertionFailure | None = None
        start = time.perf_counter()
        try:
            self.body()
        except AssertionFailure as e:
            raised = e
        elapsed = time.perf_counter() - start if timed else None

        if self.expected_to_pass:
            if raised is None:
                result = CaseResult(Verdict.PASSED, elapsed)
            else:
                result = CaseResult(Verdict.FAILED, elapsed, raised.message)
        elif raised is None:
            result = CaseResult(
                Verdict.FAILED, elapsed, "test passed but should not have"
            )
        else:
            result = CaseResult(Verdict.PASSED, elapsed)

        reporter.case_finished(self, result, name_width)
        return result
