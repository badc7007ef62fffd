from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import IO

from testrunner.case import TestCase
from testrunner.config import OnError, OutputMode, RunConfig
from testrunner.registry import Registry, default_registry
from testrunner.reporting.console import Reporter


class RunStatus(str, Enum):
    PASSED = "passed"
    FAILED = "failed"
    NO_MATCH = "no_match"

    @property
    def exit_code(self) -> int:
        return 0 if self is RunStatus.PASSED else 1


@dataclass
class RunReport:
    """Aggregate outcome of one run.

    Attributes:
        passed: Candidates with a passed verdict.
        failed: Candidates with a failed verdict.
        skipped: Candidates never reached because fail-fast stopped the run.
            Tests excluded by the name filter are not counted anywhere.
        elapsed: Total seconds spent running tests, measured in timing mode.
        status: Overall outcome; NO_MATCH when a non-empty filter selected
            nothing.
    """

    passed: int = 0
    failed: int = 0
    skipped: int = 0
    elapsed: float | None = None
    status: RunStatus = RunStatus.PASSED

    @property
    def exit_code(self) -> int:
        return self.status.exit_code


def select(tests: tuple[TestCase, ...], name_filter: str) -> list[TestCase]:
    """Tests whose name starts with name_filter, in registration order."""
    return [t for t in tests if t.name.startswith(name_filter)]


class Runner:
    """Selects, executes and tallies registered tests."""

    def __init__(
        self,
        registry: Registry | None = None,
        out: IO[str] | None = None,
        err: IO[str] | None = None,
        color: bool | None = None,
        logger: logging.Logger | None = None,
    ):
        self.registry = registry if registry is not None else default_registry()
        self.out = out
        self.err = err
        self.color = color
        self.logger = logger or logging.getLogger("testrunner")

    def run(self, config: RunConfig | None = None) -> int:
        """Run the selected tests and return the process exit status."""
        return self.execute(config).exit_code

    def execute(self, config: RunConfig | None = None) -> RunReport:
        config = config or RunConfig()
        logger = self.logger
        reporter = Reporter(
            config.output_mode, out=self.out, err=self.err, color=self.color
        )

        with self.registry.sealed_for_run() as tests:
            candidates = select(tests, config.name_filter)
            logger.debug(
                f"Starting run: {len(candidates)}/{len(tests)} test(s) selected, "
                f"mode={config.output_mode.value}, on_error={config.on_error.value}"
            )

            if config.name_filter and not candidates:
                logger.warning(f"No test matching '{config.name_filter}'")
                reporter.no_match(config.name_filter)
                return RunReport(status=RunStatus.NO_MATCH)

            # Width spans every registered test, not only the candidates.
            name_width = max((len(t.name) for t in tests), default=0)
            reporter.run_started(len(candidates), config.name_filter)

            report = RunReport()
            start = time.perf_counter()
            for case in candidates:
                logger.debug(f"Running '{case.name}' ({case.location})")
                result = case.execute(reporter, name_width)
                logger.debug(f"'{case.name}' {result.verdict.value}")

                if result.passed:
                    report.passed += 1
                    continue

                report.failed += 1
                if config.on_error is OnError.FAIL:
                    logger.info(f"Stopping run after failure of '{case.name}'")
                    break

        report.skipped = len(candidates) - report.passed - report.failed
        if config.output_mode >= OutputMode.TIMING:
            report.elapsed = time.perf_counter() - start
        if report.failed:
            report.status = RunStatus.FAILED

        reporter.run_finished(report)
        logger.info(
            f"Run finished: {report.passed} passed, {report.failed} failed, "
            f"{report.skipped} skipped"
        )
        return report


def run(config: RunConfig | None = None, registry: Registry | None = None) -> int:
    """Run the tests of registry (the process-wide one by default)."""
    return Runner(registry=registry).run(config)
