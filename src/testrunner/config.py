from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator


class OutputMode(Enum):
    """Verbosity level. Each level shows everything the lower ones do."""

    QUIET = "quiet"
    COMPACT = "compact"
    VERBOSE = "verbose"
    TIMING = "timing"

    @property
    def rank(self) -> int:
        return _OUTPUT_MODE_RANKS[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, OutputMode):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, OutputMode):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, OutputMode):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, OutputMode):
            return NotImplemented
        return self.rank >= other.rank


_OUTPUT_MODE_RANKS = {
    OutputMode.QUIET: 0,
    OutputMode.COMPACT: 1,
    OutputMode.VERBOSE: 2,
    OutputMode.TIMING: 3,
}


class OnError(str, Enum):
    FAIL = "fail"
    CONTINUE = "continue"


class RunConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    output_mode: OutputMode = OutputMode.COMPACT
    on_error: OnError = OnError.FAIL
    name_filter: str = ""

    @field_validator("name_filter", mode="before")
    @classmethod
    def none_means_no_filter(cls, v: Any) -> Any:
        return "" if v is None else v


def _expand(value: Any) -> Any:
    if isinstance(value, str):
        return expandvars(value)
    return value


def load_config(path: Path) -> RunConfig:
    """Load and validate a run config from a YAML file.

    String values may reference environment variables (``${VAR}`` or
    ``${VAR:-default}``).
    """
    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")

    return RunConfig(**{key: _expand(value) for key, value in raw.items()})
