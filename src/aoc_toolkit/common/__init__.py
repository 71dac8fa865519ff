"""Common utilities shared across the solvers."""

from __future__ import annotations

from .errors import (
    ErrorReport,
    ToolkitError,
    iter_error_chain,
)
from .input import (
    Description,
    InputKind,
    InputReadError,
    InputSource,
    NoInput,
    NoInputKind,
    iter_lines,
    resolve_input,
)
from .config import ConfigError, ToolkitConfig
from .runner import run
from .topk import TopK, top_k_sum

__all__ = [
    # errors
    "ErrorReport",
    "ToolkitError",
    "iter_error_chain",
    # config
    "ConfigError",
    "ToolkitConfig",
    # input
    "Description",
    "InputKind",
    "InputReadError",
    "InputSource",
    "NoInput",
    "NoInputKind",
    "iter_lines",
    "resolve_input",
    # runner
    "run",
    # topk
    "TopK",
    "top_k_sum",
]
