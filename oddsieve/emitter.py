"""
Result output.

Every prime is followed by a single space and the line ends with one
newline, so the output for N=10 is "2 3 5 7 \\n".
"""

import sys
from typing import Optional, TextIO

import numpy as np

DEFAULT_CHUNK_SIZE = 65_536


def _render_chunk(chunk: np.ndarray) -> str:
    return ''.join(f"{p} " for p in chunk.tolist())


def format_primes(primes: np.ndarray) -> str:
    """Return the full output text for `primes` (small inputs only)."""
    return _render_chunk(np.asarray(primes)) + "\n"


def emit(primes: np.ndarray, stream: Optional[TextIO] = None,
         chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
    """
    Write `primes` to `stream` in order, without filtering.

    Parameters
    ----------
    primes : np.ndarray
        Values to write, already sorted.
    stream : file-like, optional
        Destination. Defaults to sys.stdout at call time.
    chunk_size : int
        Values rendered per write, bounding the size of each string.
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")
    if stream is None:
        stream = sys.stdout

    primes = np.asarray(primes)
    for start in range(0, len(primes), chunk_size):
        stream.write(_render_chunk(primes[start:start + chunk_size]))
    stream.write("\n")
    stream.flush()
