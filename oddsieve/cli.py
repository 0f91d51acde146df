#!/usr/bin/env python3
"""
Command-line entry point.

Usage:
    oddsieve 30                  # 2 3 5 7 11 13 17 19 23 29
    python -m oddsieve.cli 1000000

Exit codes: 0 on success, 255 usage/parse/range, 254 allocation,
252 anything else.
"""

import sys
from typing import Optional, Sequence

from .bounds import resolve
from .emitter import emit
from .engine import sieve
from .errors import AllocationError, ErrorKind, Failure, RangeError


def run(bound: int) -> None:
    """Sieve up to `bound` and write the primes to stdout."""
    emit(sieve(bound))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Resolve, sieve, emit. The only place failures become exit codes.

    Parameters
    ----------
    argv : sequence of str, optional
        Full argument vector including the program name. Defaults to
        sys.argv.

    Returns
    -------
    int
        Process exit code.
    """
    if argv is None:
        argv = sys.argv
    program = argv[0] if argv else 'oddsieve'

    failure = None
    try:
        bound = resolve(argv[1:])
        if isinstance(bound, Failure):
            failure = bound
        else:
            run(bound)
    except (RangeError, AllocationError) as exc:
        failure = exc.to_failure()
    except MemoryError as exc:
        failure = Failure(ErrorKind.ALLOCATION, str(exc))
    except Exception as exc:
        failure = Failure(ErrorKind.UNKNOWN, str(exc))

    if failure is None:
        return 0

    sys.stderr.write(failure.render(program))
    sys.stderr.flush()
    return failure.exit_code


if __name__ == '__main__':
    sys.exit(main())
