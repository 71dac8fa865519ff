"""
Module: common.errors

Purpose:
    Error base class for the solvers and a uniform report wrapper that
    prints an exception either on its own or followed by every cause in
    its chain.

Key Functions:
    - iter_error_chain(error): Walk an exception and its __cause__ links

Key Classes:
    - ToolkitError: Base class for errors raised by solvers and helpers
    - ErrorReport: Wraps any exception for terse or verbose display

Dependencies:
    - dataclasses (std)
    - typing (std)

Used By:
    - common.input: InputReadError
    - common.runner: Formats failures for stderr
    - calorie_counting.parser, rock_paper_scissors.parser: Parse errors

Chain Semantics:
    Wrapping always uses ``raise NewError(...) from original`` so each link
    is an explicit ``__cause__``. Implicit ``__context__`` links (an error
    raised while handling another) are not part of the chain.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


class ToolkitError(Exception):
    """Base class for failures reported to the user by a solver."""


def iter_error_chain(error: BaseException) -> Iterator[BaseException]:
    """
    Yield error, then its cause, then the cause's cause, and so on.

    Each call returns a fresh single-pass iterator starting at the outermost
    error. A cyclic chain is cut at the first repeated error.

    Args:
        error: Outermost (symptom) error.

    Yields:
        Errors from symptom to root cause.
    """
    seen = set()
    current = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__


@dataclass(frozen=True)
class ErrorReport:
    """
    Uniform, display-only wrapper around any exception.

    The wrapped exception and its causes are not altered.

    Attributes:
        error: The outermost exception.

    Example:
        >>> try:
        ...     raise ToolkitError("can't read from stdin") from OSError("closed")
        ... except ToolkitError as exc:
        ...     report = ErrorReport(exc)
        >>> str(report)
        "can't read from stdin"
        >>> print(report.format(verbose=True), end="")
        error: can't read from stdin
          - closed
    """
    error: BaseException

    def chain(self) -> Iterator[BaseException]:
        """Iterate over the wrapped error and all of its causes."""
        return iter_error_chain(self.error)

    @property
    def cause(self) -> BaseException | None:
        return self.error.__cause__

    def format(self, verbose: bool = False) -> str:
        """
        Render the report.

        Args:
            verbose: When False only the outermost message is returned. When
                True the message is prefixed with "error: " and each cause
                follows on its own "  - " line, every line newline-terminated.

        Returns:
            Formatted text.
        """
        if not verbose:
            return str(self.error)

        chain = self.chain()
        lines = [f"error: {next(chain)}\n"]
        lines.extend(f"  - {cause}\n" for cause in chain)
        return "".join(lines)

    def __str__(self) -> str:
        return self.format()
