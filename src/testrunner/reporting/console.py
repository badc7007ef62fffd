"""Console rendering of test progress and run summaries."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import typer

from testrunner.config import OutputMode

if TYPE_CHECKING:
    from testrunner.case import CaseResult, TestCase
    from testrunner.runner import RunReport

SEPARATOR = "-" * 40


def result_label(case: TestCase, result: CaseResult) -> str:
    if result.passed:
        return "PASS" if case.expected_to_pass else "PASS (failed as expected)"
    return "FAIL" if case.expected_to_pass else "FAIL (passed but should not have)"


class Reporter:
    """Decides what to print for each run event at a given verbosity.

    Progress goes to ``out`` and failure diagnostics to ``err``. Either
    defaults to the process stream current at the time of writing. Colour is
    applied with typer styles; ``color=None`` lets typer strip it when the
    stream is not a terminal.
    """

    def __init__(
        self,
        mode: OutputMode = OutputMode.COMPACT,
        out: IO[str] | None = None,
        err: IO[str] | None = None,
        color: bool | None = None,
    ):
        self.mode = mode
        self.out = out
        self.err = err
        self.color = color

    def _echo(self, message: str = "", nl: bool = True) -> None:
        typer.echo(message, file=self.out, nl=nl, color=self.color)

    def _diagnose(self, message: str) -> None:
        typer.echo(message, file=self.err, err=True, color=self.color)

    def _styled(self, label: str, passed: bool) -> str:
        return typer.style(
            label, fg=typer.colors.GREEN if passed else typer.colors.RED
        )

    def run_started(self, candidate_count: int, name_filter: str) -> None:
        if self.mode < OutputMode.VERBOSE:
            return
        self._echo(f"Running {candidate_count} test(s) ...")
        if name_filter:
            self._echo(f"Filter: tests starting with '{name_filter}'")
        else:
            self._echo("Filter: none")
        self._echo(SEPARATOR)

    def no_match(self, name_filter: str) -> None:
        self._diagnose(f"No test matching '{name_filter}'")

    def case_started(self, case: TestCase, name_width: int) -> None:
        # Name goes out before the body runs so a crash shows which test died.
        if self.mode >= OutputMode.VERBOSE:
            self._echo(f"{case.name:<{name_width}}  ", nl=False)

    def case_finished(
        self, case: TestCase, result: CaseResult, name_width: int
    ) -> None:
        label = self._styled(result_label(case, result), result.passed)

        if self.mode >= OutputMode.VERBOSE:
            if self.mode >= OutputMode.TIMING and result.elapsed is not None:
                self._echo(f"{result.elapsed:.4f}s  {label}")
            else:
                self._echo(label)
        elif not result.passed:
            self._echo(f"{case.name} ... {label}")

        if not result.passed:
            self._diagnose(f"{case.location} {result.message}")

    def run_finished(self, report: RunReport) -> None:
        if self.mode >= OutputMode.VERBOSE:
            self._echo(SEPARATOR)

        all_passed = report.failed == 0 and report.skipped == 0
        if self.mode >= OutputMode.COMPACT or not all_passed:
            tally = (
                f"{report.passed} passed, {report.failed} failed, "
                f"{report.skipped} skipped."
            )
            self._echo(tally if all_passed else self._styled(tally, False))

        if all_passed and self.mode >= OutputMode.COMPACT:
            self._echo(self._styled(f"All {report.passed} test(s) passed.", True))

        if self.mode >= OutputMode.TIMING and report.elapsed is not None:
            self._echo(f"Total time: {report.elapsed:.4f}s")
