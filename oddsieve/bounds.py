"""
Bound resolution.

Responsibility: turn the command-line arguments into the sieve bound N.
Returns a Failure value on bad input; never raises for user error.
"""

import re
from typing import Sequence, Union

from .errors import ErrorKind, Failure

MIN_BOUND = 2
MAX_BOUND = 1_000_000_000

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
_INT32_DIGITS = len(str(INT32_MAX))

# Optional minus sign, then ASCII digits only. int() alone would also take
# surrounding whitespace, '+', '_' separators and non-ASCII digits.
_DECIMAL = re.compile(r'-?[0-9]+', re.ASCII)


def parse_int32(text: str) -> Union[int, Failure]:
    """
    Parse `text` as a base-10 signed 32-bit integer, whole string only.

    Parameters
    ----------
    text : str
        Raw argument.

    Returns
    -------
    int or Failure
        The value, or a PARSE failure with detail "not a number" /
        "number out of range".
    """
    if _DECIMAL.fullmatch(text) is None:
        return Failure(ErrorKind.PARSE, 'not a number')

    # int() refuses strings past sys.get_int_max_str_digits(); anything
    # longer than INT32 allows is out of range without converting it.
    negative = text.startswith('-')
    digits = text.lstrip('-').lstrip('0') or '0'
    if len(digits) > _INT32_DIGITS:
        return Failure(ErrorKind.PARSE, 'number out of range')

    value = -int(digits) if negative else int(digits)
    if value < INT32_MIN or value > INT32_MAX:
        return Failure(ErrorKind.PARSE, 'number out of range')
    return value


def check_bound(n: int) -> Union[int, Failure]:
    """Return n if MIN_BOUND <= n <= MAX_BOUND, else a RANGE failure."""
    if n < MIN_BOUND or n > MAX_BOUND:
        return Failure(ErrorKind.RANGE, 'number out of range')
    return n


def resolve(args: Sequence[str]) -> Union[int, Failure]:
    """
    Resolve the sieve bound from the arguments (program name excluded).

    Exactly one argument is accepted. It must parse as a 32-bit integer
    and lie in [2, 10^9].
    """
    if len(args) != 1:
        return Failure(ErrorKind.USAGE, f'expected 1 argument, got {len(args)}')

    parsed = parse_int32(args[0])
    if isinstance(parsed, Failure):
        return parsed
    return check_bound(parsed)
