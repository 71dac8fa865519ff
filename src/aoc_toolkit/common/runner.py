"""
Module: common.runner

Purpose:
    The single process boundary shared by all solvers. Resolves the input
    source, reads it, hands the text to the solver and prints the results.
    This is the only place that writes to stdout/stderr on behalf of the
    helpers and maps outcomes to exit codes; everything below it returns
    values or raises.

Key Functions:
    - run(description, solve, argv): Execute a solver, return exit code

Dependencies:
    - .input: resolve_input, InputSource, NoInput
    - .errors: ToolkitError, ErrorReport
    - .logging_utils: configure_logging
    - .config: ToolkitConfig, ConfigError

Used By:
    - calorie_counting.app, rock_paper_scissors.app: main()
    - cli: "run" subcommand

Exit Codes:
    0 - results printed, or help/version shown
    1 - bad configuration, no input given, unreadable or malformed input
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Callable, Iterable, Optional, Sequence, TextIO

from .config import ToolkitConfig
from .errors import ErrorReport, ToolkitError
from .input import Description, NoInput, resolve_input
from .logging_utils import configure_logging

logger = logging.getLogger(__name__)

Solver = Callable[[str, ToolkitConfig], Iterable[object]]


def _report(error: ToolkitError, stderr: TextIO) -> int:
    stderr.write(ErrorReport(error).format(verbose=True))
    return 1


def run(
    description: Description,
    solve: Solver,
    argv: Optional[Sequence[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
    config: Optional[ToolkitConfig] = None,
) -> int:
    """
    Run a solver against the input named on the command line.

    Args:
        description: Solver metadata for help/version/usage text.
        solve: Takes the whole input text and the resolved config, returns
            the values to print, one per line. Raises ToolkitError
            subclasses on bad input.
        argv: Full argument vector including the program name.
            Defaults to sys.argv.
        stdin: Stream for --stdin. Defaults to sys.stdin.
        stdout: Stream for results and help. Defaults to sys.stdout.
        stderr: Stream for usage and error reports. Defaults to sys.stderr.
        config: Toolkit configuration. Defaults to ToolkitConfig.from_env().

    Returns:
        Process exit code (0 or 1).
    """
    if argv is None:
        argv = sys.argv
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    if config is None:
        try:
            config = ToolkitConfig.from_env()
        except ToolkitError as exc:
            return _report(exc, stderr)

    configure_logging(config.log_level, stream=stderr)

    if argv:
        description = description.with_bin_name(os.path.basename(argv[0]) or description.bin_name)
        args = list(argv[1:])
    else:
        args = []

    resolved = resolve_input(args, description)
    if isinstance(resolved, NoInput):
        logger.debug("No input resolved (%s)", resolved.kind)
        print(resolved.render(), file=stderr if resolved.is_error else stdout)
        return resolved.exit_code

    try:
        text = resolved.read_text(stdin=stdin)
        results = list(solve(text, config))
    except ToolkitError as exc:
        logger.debug("%s failed: %s", description.name, exc)
        return _report(exc, stderr)

    for value in results:
        print(value, file=stdout)
    return 0
