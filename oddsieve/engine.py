"""
Odd-only elimination sieve.

Responsibility: produce the primes <= N. No argument parsing, no output.

Candidate layout:
- Index 0    → 2 (the only even prime)
- Index i>=1 → 2i + 1  (3, 5, 7, ... up to the largest odd <= N)

Length is (N - 1) // 2 + 1:
For N=2: 1 entry  [2]
For N=3: 2 entries [2, 3]
For N=10: 5 entries [2, 3, 5, 7, 9]

Each confirmed prime d <= ceil(sqrt(N)) removes the later candidates it
divides. The array is compacted in place, survivors keep their order, and
entries before the current divisor are never written again.
"""

import math

import numpy as np
from numba import njit

from .bounds import MAX_BOUND, MIN_BOUND, check_bound
from .errors import AllocationError, Failure, RangeError


def count_candidates(N: int) -> int:
    """Number of entries in the initial candidate array for bound N."""
    return (N - 1) // 2 + 1


def cutoff_for(N: int) -> int:
    """Largest divisor that still has to be tested: ceil(sqrt(N))."""
    return math.ceil(math.sqrt(N))


@njit
def _fill_candidates(candidates):
    """Write 2, 3, 5, 7, ... into a preallocated int32 array."""
    candidates[0] = 2
    value = 1
    for i in range(1, candidates.shape[0]):
        value += 2
        candidates[i] = value


@njit
def _eliminate_composites(candidates, cutoff):
    """
    Remove composites in place and return the number of survivors.

    Entries past the returned length are stale and must be discarded.
    """
    size = candidates.shape[0]
    pos = 0
    while pos < size and candidates[pos] <= cutoff:
        divisor = candidates[pos]
        write = pos + 1
        for read in range(pos + 1, size):
            value = candidates[read]
            if value % divisor != 0:
                candidates[write] = value
                write += 1
        size = write
        pos += 1
    return size


def build_candidates(N: int) -> np.ndarray:
    """
    Allocate and fill the candidate array for bound N.

    Parameters
    ----------
    N : int
        Upper bound (inclusive), already range-checked.

    Returns
    -------
    np.ndarray
        int32 array [2, 3, 5, 7, ..., largest odd <= N].

    Raises
    ------
    AllocationError
        If numpy cannot allocate the array.
    """
    count = count_candidates(N)
    try:
        candidates = np.empty(count, dtype=np.int32)
    except MemoryError as exc:
        raise AllocationError(
            f"cannot allocate {count:,} candidates ({4 * count / 1e9:.1f}GB)"
        ) from exc

    _fill_candidates(candidates)
    return candidates


def sieve(N: int) -> np.ndarray:
    """
    Return all primes <= N in ascending order.

    Parameters
    ----------
    N : int
        Upper bound (inclusive), 2 <= N <= 10^9.

    Returns
    -------
    np.ndarray
        int32 array of primes, strictly increasing.

    Raises
    ------
    RangeError
        If N is outside [2, 10^9].
    AllocationError
        If the candidate array cannot be allocated.
    """
    N = int(N)
    if isinstance(check_bound(N), Failure):
        raise RangeError(f"bound {N} outside [{MIN_BOUND}, {MAX_BOUND:,}]")

    candidates = build_candidates(N)
    size = _eliminate_composites(candidates, cutoff_for(N))

    # Shrink to the survivors; nothing else holds a view of the buffer.
    candidates.resize(size, refcheck=False)
    return candidates
