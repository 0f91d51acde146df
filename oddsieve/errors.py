"""
Error classification.

Responsibility: the error kinds a run can end in, and how each one is
reported. Nothing here knows how bounds are parsed or how the sieve works.

Note
----
The resolver returns `Failure` values instead of raising. The engine is
a library function and raises `RangeError` / `AllocationError`; both carry
the same `kind` tag so the top-level handler treats every path alike.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    USAGE = 'usage'            # wrong argument count
    PARSE = 'parse'            # not a number, or outside int32
    RANGE = 'range'            # numeric but outside [2, 10^9]
    ALLOCATION = 'allocation'  # candidate array could not be allocated
    UNKNOWN = 'unknown'


# Process exit codes (-1, -2, -4 as seen by a POSIX shell)
EXIT_USAGE = 255
EXIT_ALLOCATION = 254
EXIT_UNKNOWN = 252

_EXIT_CODES = {
    ErrorKind.USAGE: EXIT_USAGE,
    ErrorKind.PARSE: EXIT_USAGE,
    ErrorKind.RANGE: EXIT_USAGE,
    ErrorKind.ALLOCATION: EXIT_ALLOCATION,
    ErrorKind.UNKNOWN: EXIT_UNKNOWN,
}

USAGE_TEMPLATE = "Usage: {program} [upto]\n\nUpto must be between two and one billion.\n"
ALLOCATION_MESSAGE = "Error allocating memory.  Aborting...\n"
UNKNOWN_TEMPLATE = "Unknown exception: {detail}.  Aborting...\n"


@dataclass(frozen=True)
class Failure:
    """
    A classified failure.

    Parameters
    ----------
    kind : ErrorKind
        Which of the five failure classes this is.
    detail : str
        Human-readable description ("not a number", the underlying
        exception text, ...). Only UNKNOWN failures show it to the user.
    """

    kind: ErrorKind
    detail: str = ''

    @property
    def exit_code(self) -> int:
        return _EXIT_CODES[self.kind]

    def render(self, program: str) -> str:
        """Return the text written to stderr for this failure."""
        if self.kind is ErrorKind.ALLOCATION:
            return ALLOCATION_MESSAGE
        if self.kind is ErrorKind.UNKNOWN:
            return UNKNOWN_TEMPLATE.format(detail=self.detail)
        return USAGE_TEMPLATE.format(program=program)


class RangeError(ValueError):
    """Bound is an integer but lies outside [2, 10^9]."""

    kind = ErrorKind.RANGE

    def to_failure(self) -> Failure:
        return Failure(self.kind, str(self))


class AllocationError(MemoryError):
    """The candidate array for a bound could not be allocated."""

    kind = ErrorKind.ALLOCATION

    def to_failure(self) -> Failure:
        return Failure(self.kind, str(self))
