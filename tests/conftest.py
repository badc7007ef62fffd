"""Pytest configuration and fixtures."""

import io
import logging

import pytest

import testrunner.registry
from testrunner.case import Location, TestCase
from testrunner.registry import Registry
from testrunner.runner import Runner


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Detach testrunner log handlers after each test so names can be reused."""
    yield

    for name in list(logging.Logger.manager.loggerDict.keys()):
        if not name.startswith("testrunner"):
            continue
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.propagate = True


@pytest.fixture(autouse=True)
def fresh_default_registry(monkeypatch):
    """Give every test its own process-wide registry."""
    registry = Registry()
    monkeypatch.setattr(testrunner.registry, "_default_registry", registry)
    return registry


@pytest.fixture
def registry():
    return Registry()


@pytest.fixture
def add_test(registry):
    """Register a test case on the fixture registry."""

    def _add(name, body=None, expected_to_pass=True, line=1):
        return registry.register(
            TestCase(
                name=name,
                location=Location(file="suite.py", line=line),
                expected_to_pass=expected_to_pass,
                body=body or (lambda: None),
            )
        )

    return _add


@pytest.fixture
def streams():
    return io.StringIO(), io.StringIO()


@pytest.fixture
def runner(registry, streams):
    out, err = streams
    return Runner(registry=registry, out=out, err=err, color=False)
