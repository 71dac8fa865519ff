"""
Module: common.config

Purpose:
    Configuration dataclass shared by the solver runners. Settings are
    immutable and validated on construction; environment overrides are
    read once per run by the runner, so a bad value is reported like any
    other solver error.

Key Classes:
    - ToolkitConfig: Log level and top-K size for the solvers
    - ConfigError: Invalid setting, reported through the error chain

Dependencies:
    - dataclasses: For frozen dataclass support
    - logging: Level name validation
    - .errors.ToolkitError

Used By:
    - common.runner: Resolves config, configures logging, passes it to solvers
    - calorie_counting.app: Reads top_k for the second output line
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ToolkitError

LOG_LEVEL_ENV = "AOC_LOG_LEVEL"
TOP_K_ENV = "AOC_TOP_K"


class ConfigError(ToolkitError, ValueError):
    """Raised when a configuration value is invalid."""


@dataclass(frozen=True)
class ToolkitConfig:
    """
    Configuration for a solver invocation.

    Attributes:
        log_level: Level name for the aoc_toolkit logger (default "WARNING").
            Kept above INFO so standard output carries only results.
        top_k: How many of the largest group sums the calorie counter adds
            for its second line (default 3).

    Invariants:
        - log_level is a level name known to logging
        - top_k >= 1

    Example:
        >>> ToolkitConfig.from_env({"AOC_TOP_K": "2"}).top_k
        2
    """
    log_level: str = "WARNING"
    top_k: int = 3

    def __post_init__(self) -> None:
        """Validate config on construction."""
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigError(f"Unknown log level: {self.log_level}")
        if self.top_k < 1:
            raise ConfigError(f"top_k must be at least 1: {self.top_k}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ToolkitConfig:
        """
        Build config from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            ToolkitConfig with overrides from AOC_LOG_LEVEL and AOC_TOP_K.

        Raises:
            ConfigError: If an override is not a valid value. The rejected
                value's own error is kept as __cause__.
        """
        if environ is None:
            environ = os.environ

        log_level = environ.get(LOG_LEVEL_ENV, cls.log_level).strip().upper()
        raw_top_k = environ.get(TOP_K_ENV)
        if raw_top_k is None:
            top_k = cls.top_k
        else:
            try:
                top_k = int(raw_top_k)
            except ValueError as exc:
                raise ConfigError(f"{TOP_K_ENV} must be an integer: {raw_top_k!r}") from exc

        try:
            return cls(log_level=log_level, top_k=top_k)
        except ConfigError as exc:
            raise ConfigError(
                f"invalid configuration from {LOG_LEVEL_ENV}/{TOP_K_ENV}"
            ) from exc
