"""
Parsing configuration and environment switches.
"""

import os
from dataclasses import dataclass

# Profiling infrastructure - zero-cost when disabled
PROFILE_HOT_PATHS = __debug__ and "JTREE_PROFILE" in os.environ


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures parsing behavior with immutable settings.

    max_depth bounds how deeply arrays and objects may nest; None leaves the
    depth limited only by the interpreter's recursion limit.
    """

    max_depth: int | None = None

    def __post_init__(self) -> None:
        if self.max_depth is not None:
            if isinstance(self.max_depth, bool) or not isinstance(
                self.max_depth, int
            ):
                raise TypeError("max_depth must be an integer or None")
            if self.max_depth < 1:
                raise ValueError("max_depth must be at least 1")


DEFAULT_PARSE_CONFIG = ParseConfig()
