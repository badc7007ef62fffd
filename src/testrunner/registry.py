"""Process-wide ordered collection of test cases and the ways to fill it."""

from __future__ import annotations

import inspect
from contextlib import contextmanager
from typing import Callable, Iterator, TypeVar

from testrunner.case import Location, TestCase

F = TypeVar("F", bound=Callable[[], object])


class Registry:
    """Append-only, ordered list of test cases.

    Registration order is execution order. While sealed (during a run) the
    registry refuses new tests.
    """

    def __init__(self) -> None:
        self._tests: list[TestCase] = []
        self._sealed = False

    def register(self, case: TestCase) -> TestCase:
        if self._sealed:
            raise RuntimeError(
                f"Cannot register test '{case.name}' while a run is in progress"
            )
        self._tests.append(case)
        return case

    def all(self) -> tuple[TestCase, ...]:
        return tuple(self._tests)

    @property
    def sealed(self) -> bool:
        return self._sealed

    @contextmanager
    def sealed_for_run(self) -> Iterator[tuple[TestCase, ...]]:
        """Seal the registry for the duration of a run and yield its view."""
        if self._sealed:
            raise RuntimeError("A run is already in progress")
        self._sealed = True
        try:
            yield self.all()
        finally:
            self._sealed = False

    def __len__(self) -> int:
        return len(self._tests)

    def __iter__(self) -> Iterator[TestCase]:
        return iter(self.all())


_default_registry = Registry()


def default_registry() -> Registry:
    """Return the registry shared by the whole process."""
    return _default_registry


def _location_of(func: Callable) -> Location:
    file = inspect.getsourcefile(func) or func.__code__.co_filename
    return Location(file=file, line=func.__code__.co_firstlineno)


def register_test(
    name: str,
    body: Callable[[], object],
    expected_to_pass: bool = True,
    location: Location | None = None,
    registry: Registry | None = None,
) -> TestCase:
    """Register body as a test case.

    When location is omitted the file and line of the caller are used.
    """
    if location is None:
        caller = inspect.currentframe().f_back
        location = Location(file=caller.f_code.co_filename, line=caller.f_lineno)

    case = TestCase(
        name=name, location=location, expected_to_pass=expected_to_pass, body=body
    )
    if registry is None:
        registry = default_registry()
    return registry.register(case)


def _declare(
    func: F | None,
    name: str | None,
    registry: Registry | None,
    expected_to_pass: bool,
) -> F | Callable[[F], F]:
    def decorator(f: F) -> F:
        register_test(
            name or f.__name__,
            f,
            expected_to_pass=expected_to_pass,
            location=_location_of(f),
            registry=registry,
        )
        return f

    if func is not None:
        return decorator(func)
    return decorator


def test(func=None, *, name=None, registry=None):
    """Declare a test expected to pass.

    Usable bare (``@test``) or with arguments (``@test(name="Parse")``). The
    function is registered and returned unchanged.
    """
    return _declare(func, name, registry, expected_to_pass=True)


test.__test__ = False


def test_must_fail(func=None, *, name=None, registry=None):
    """Declare a test whose body is expected to raise AssertionFailure."""
    return _declare(func, name, registry, expected_to_pass=False)


test_must_fail.__test__ = False
