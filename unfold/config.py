"""
Runtime Configuration
=====================

Environment-driven settings. Nothing here is read at import time of the
core; callers ask for a config when they need one.

Variables:
- UNFOLD_LOG_LEVEL          level name for configure_logging (WARNING)
- UNFOLD_NEWTON_TOLERANCE   residual at which newton_sqrt stops (1e-8)
- UNFOLD_NEWTON_MAX_STEPS   iterates newton_sqrt examines at most (100)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Mapping, Optional
import logging
import os


DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_NEWTON_TOLERANCE = 1e-8
DEFAULT_NEWTON_MAX_STEPS = 100

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


@dataclass(frozen=True)
class UnfoldConfig:
    """Validated package settings."""
    log_level: str = DEFAULT_LOG_LEVEL
    newton_tolerance: float = DEFAULT_NEWTON_TOLERANCE
    newton_max_steps: int = DEFAULT_NEWTON_MAX_STEPS

    def __post_init__(self):
        if self.log_level not in _LEVEL_NAMES:
            raise ValueError(
                f"Unknown log level {self.log_level!r}; expected one of {', '.join(_LEVEL_NAMES)}"
            )
        if not self.newton_tolerance > 0:
            raise ValueError("newton_tolerance must be positive")
        if self.newton_max_steps < 1:
            raise ValueError("newton_max_steps must be at least 1")

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'UnfoldConfig':
        """
        Build config from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Raises:
            ValueError: if a variable is set to an unparseable or invalid value
        """
        env = os.environ if environ is None else environ

        log_level = env.get("UNFOLD_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()

        raw_tolerance = env.get("UNFOLD_NEWTON_TOLERANCE")
        try:
            tolerance = float(raw_tolerance) if raw_tolerance else DEFAULT_NEWTON_TOLERANCE
        except ValueError:
            raise ValueError(f"UNFOLD_NEWTON_TOLERANCE is not a number: {raw_tolerance!r}") from None

        raw_steps = env.get("UNFOLD_NEWTON_MAX_STEPS")
        try:
            max_steps = int(raw_steps) if raw_steps else DEFAULT_NEWTON_MAX_STEPS
        except ValueError:
            raise ValueError(f"UNFOLD_NEWTON_MAX_STEPS is not an integer: {raw_steps!r}") from None

        return cls(
            log_level=log_level,
            newton_tolerance=tolerance,
            newton_max_steps=max_steps
        )


def get_config() -> UnfoldConfig:
    """Config read from the current process environment."""
    return UnfoldConfig.from_env()
