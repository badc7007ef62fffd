"""Output rendering for test runs."""

from testrunner.reporting.console import Reporter

__all__ = ["Reporter"]
