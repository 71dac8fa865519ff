"""
Module: common.input

Purpose:
    Resolves where a solver reads its input from (a named file or standard
    input) and reads it. Resolution is a pure function over the command-line
    arguments; help, version and missing-argument requests come back as a
    NoInput value instead of exiting, leaving output and exit codes to the
    runner.

Key Functions:
    - resolve_input(args, description): Classify the first argument
    - iter_lines(text): Split input on "\\n" (and "\\r\\n") only

Key Classes:
    - Description: Solver metadata shown in help and version text
    - InputSource: FILE(path) or STDIN, read once with read_text()
    - NoInput: Help, version or missing-argument request
    - InputReadError: I/O failure naming the source that failed

Dependencies:
    - dataclasses (std)
    - enum (std)
    - .errors.ToolkitError

Used By:
    - common.runner: run()
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional, Sequence, TextIO, Tuple, Union

from .errors import ToolkitError

logger = logging.getLogger(__name__)

HELP_FLAGS = ("--help", "-h")
VERSION_FLAGS = ("--version", "-V")
STDIN_FLAGS = ("--stdin", "-0")
END_OF_OPTIONS = "--"


@dataclass(frozen=True)
class Description:
    """
    Metadata of a solver, used when displaying help information.

    Attributes:
        name: Solver name (e.g., "calorie-counting").
        bin_name: Name of the executable as invoked; replaced by the
            basename of argv[0] at run time.
        description: Free text describing the input and the results.
        version: (major, minor, patch).
    """
    name: str
    bin_name: str
    description: str
    version: Tuple[int, int, int] = (0, 1, 0)

    @property
    def version_string(self) -> str:
        major, minor, patch = self.version
        return f"{major}.{minor}.{patch}"

    def with_bin_name(self, bin_name: str) -> Description:
        return replace(self, bin_name=bin_name)


class InputKind(str, Enum):
    """Where input is read from."""
    FILE = "file"
    STDIN = "stdin"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class InputSource:
    """
    The location to read input from; either a named file or stdin.

    Attributes:
        kind: FILE or STDIN
        path: File path for FILE sources, None for STDIN

    Invariants:
        - path is set if and only if kind is FILE
    """
    kind: InputKind
    path: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.kind is InputKind.FILE) != (self.path is not None):
            raise ValueError(f"Invalid input source: {self.kind} with path {self.path!r}")

    @classmethod
    def file(cls, path: str) -> InputSource:
        return cls(kind=InputKind.FILE, path=path)

    @classmethod
    def stdin(cls) -> InputSource:
        return cls(kind=InputKind.STDIN)

    def describe(self) -> str:
        """Short human-readable name for messages."""
        if self.kind is InputKind.FILE:
            return f"file '{self.path}'"
        return "stdin"

    def read_text(self, stdin: Optional[TextIO] = None) -> str:
        """
        Read the whole input as text.

        Args:
            stdin: Stream to read for STDIN sources. Defaults to sys.stdin.

        Returns:
            The complete input.

        Raises:
            InputReadError: If the file or stream cannot be read or decoded.
                The original error is kept as __cause__.
        """
        logger.debug("Reading input from %s", self.describe())
        try:
            if self.kind is InputKind.FILE:
                return Path(self.path).read_text(encoding="utf-8")
            return (stdin if stdin is not None else sys.stdin).read()
        except (OSError, UnicodeDecodeError) as exc:
            raise InputReadError(self) from exc


class InputReadError(ToolkitError):
    """Raised when the chosen input source cannot be read."""

    def __init__(self, source: InputSource) -> None:
        self.source = source
        if source.kind is InputKind.FILE:
            message = f"can't read file '{source.path}'"
        else:
            message = "can't read from stdin"
        super().__init__(message)


class NoInputKind(str, Enum):
    """Why no input source was resolved."""
    NO_ARGS = "no_args"    # Nothing to read; usage error
    HELP = "help"          # --help / -h
    VERSION = "version"    # --version / -V

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class NoInput:
    """
    Returned by resolve_input when there is nothing to read.

    Help and version requests are not errors: they render to stdout and
    exit 0. A missing argument renders a short usage message to stderr and
    exits 1.

    Attributes:
        kind: NO_ARGS, HELP or VERSION
        description: Solver metadata for the rendered text
    """
    kind: NoInputKind
    description: Description

    @property
    def exit_code(self) -> int:
        return 1 if self.kind is NoInputKind.NO_ARGS else 0

    @property
    def is_error(self) -> bool:
        return self.kind is NoInputKind.NO_ARGS

    def render(self) -> str:
        """Text to print for this request, without a trailing newline."""
        d = self.description
        if self.kind is NoInputKind.NO_ARGS:
            return (
                "The following required argument was not provided: <FILE>\n"
                "\n"
                f"Usage: {d.bin_name} [OPTIONS] [FILE]\n"
                "\n"
                "For more information try '--help'"
            )
        if self.kind is NoInputKind.HELP:
            return (
                f"{d.name} {d.version_string}\n"
                "Solution app for advent of code 2022.\n"
                f"{d.description}\n"
                "\n"
                f"Usage: {d.bin_name} [OPTIONS] [FILE]\n"
                "\n"
                "Args:\n"
                "    <FILE>    File to read as input\n"
                "\n"
                "Options:\n"
                "    -h, --help       Print help information\n"
                "    -V, --version    Print version information\n"
                "    -0  --stdin      Read input from stdin instead of a file"
            )
        return f"{d.name} {d.version_string}"

    def __str__(self) -> str:
        return self.render()


def resolve_input(
    args: Sequence[str],
    description: Description,
) -> Union[InputSource, NoInput]:
    """
    Classify command-line arguments into an input source.

    Only the first argument is inspected (plus the one following "--").
    Anything after it is ignored.

    Args:
        args: Arguments after the program name.
        description: Solver metadata carried into NoInput results.

    Returns:
        InputSource for a file or stdin, or NoInput for help, version or a
        missing argument.

    Example:
        >>> resolve_input(["--", "-h"], description)
        InputSource(kind=<InputKind.FILE: 'file'>, path='-h')
    """
    if not args:
        return NoInput(NoInputKind.NO_ARGS, description)

    first = args[0]
    if first in HELP_FLAGS:
        return NoInput(NoInputKind.HELP, description)
    if first in VERSION_FLAGS:
        return NoInput(NoInputKind.VERSION, description)
    if first in STDIN_FLAGS:
        return InputSource.stdin()
    if first == END_OF_OPTIONS:
        if len(args) < 2:
            return NoInput(NoInputKind.NO_ARGS, description)
        return InputSource.file(args[1])
    return InputSource.file(first)


def iter_lines(text: str) -> Iterator[str]:
    """
    Split input text on "\\n" only, dropping the "\\r" of each "\\r\\n".

    Other characters str.splitlines() treats as breaks (form feed, vertical
    tab, \\x85, \\u2028, ...) stay inside the line, so parsers see and reject
    them. A final newline does not produce a trailing empty line, and a
    lone "\\r" not followed by "\\n" is kept.

    Example:
        >>> list(iter_lines("1\\r\\n\\n2\\x0c3\\n"))
        ['1', '', '2\\x0c3']
    """
    pieces = text.split("\n")
    last = pieces.pop()
    for piece in pieces:
        yield piece[:-1] if piece.endswith("\r") else piece
    if last:
        yield last
