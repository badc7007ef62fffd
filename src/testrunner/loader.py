"""Import test modules so their declarations register."""

from __future__ import annotations

import importlib.util
import logging
import sys
from pathlib import Path

TEST_FILE_PATTERNS = ("test_*.py", "*_test.py")

logger = logging.getLogger(__name__)


def discover(target: Path) -> list[Path]:
    """Return the test files a target stands for, in import order."""
    if target.is_file():
        return [target]
    if target.is_dir():
        found = {
            path
            for pattern in TEST_FILE_PATTERNS
            for path in target.rglob(pattern)
            if path.is_file()
        }
        return sorted(found)
    raise FileNotFoundError(f"test target not found: {target}")


def import_file(path: Path) -> None:
    module_name = f"_testrunner_{path.stem}_{abs(hash(path.resolve()))}"
    if module_name in sys.modules:
        return

    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ValueError(f"not an importable Python file: {path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    # Let tests import helpers that sit next to them.
    test_dir = str(path.parent.resolve())
    sys.path.insert(0, test_dir)
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(module_name, None)
        raise
    finally:
        sys.path.remove(test_dir)
    logger.debug(f"Imported test module {path}")


def load_targets(targets: list[Path]) -> list[Path]:
    """Import every test file named by targets. Returns the files imported."""
    files = [path for target in targets for path in discover(target)]
    for path in files:
        import_file(path)
    return files
