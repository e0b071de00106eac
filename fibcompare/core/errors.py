# SPDX-License-Identifier: GPL-3.0-only
import textwrap
from typing import ClassVar

from fibcompare import APP_NAME

_argument_not_specified = "__argument_not_specified__"


class BaseError(Exception):
    """Root of the error hierarchy. Don't raise this directly, use more specific error types."""

    is_invalid_usage: ClassVar[bool] = False
    default_solution: ClassVar[str | None] = None

    def __init__(
        self,
        reason: str,
        *,
        solution: str | None = _argument_not_specified,
    ) -> None:
        """Initialize BaseError.

        :param reason: explain what went wrong
        :param solution: politely suggest a potential solution to the user
        """
        super().__init__(reason)
        if solution == _argument_not_specified:
            self.solution = self.default_solution
        else:
            self.solution = solution

    def friendly_msg(self) -> str:
        """Return the user-friendly representation of this error."""
        msg = str(self)
        if self.solution:
            msg += f"\n{textwrap.indent(self.solution, prefix='  ')}"
        return msg


class UsageError(BaseError):
    """Generic error for "fibcompare was used incorrectly." Prefer more specific errors."""

    is_invalid_usage: ClassVar[bool] = True


class InvalidInput(UsageError):
    """User input was invalid."""


class NegativeIndex(InvalidInput):
    """A Fibonacci number was requested for an index below zero."""

    def __init__(
        self,
        n: int,
        *,
        solution: str | None = _argument_not_specified,
    ) -> None:
        """Initialize NegativeIndex.

        :param n: the rejected index
        :param solution: politely suggest a potential solution to the user
        """
        self.n = n
        super().__init__(f"Fibonacci index must not be negative, got {n}", solution=solution)

    default_solution = (
        f"{APP_NAME} only computes F(n) for n >= 0, the sequence is seeded by F(0)=0, F(1)=1."
    )
