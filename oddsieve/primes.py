"""
Reference primality oracles.

Responsibility: independent answers to check the engine against. Uses a
flag-array Sieve of Eratosthenes, which shares no code with engine.py.
"""

import math

import numpy as np


def prime_flags_upto(N: int) -> np.ndarray:
    """
    Primality table indexed by value: flags[n] is True iff n is prime.

    Evens are cleared up front, so each odd prime p only strikes its odd
    multiples p*p, p*p + 2p, ... with one strided slice assignment.

    Parameters
    ----------
    N : int
        Largest value covered, N >= 0.

    Returns
    -------
    np.ndarray
        bool array of length N+1.
    """
    flags = np.zeros(N + 1, dtype=bool)
    flags[3::2] = True
    if N >= 2:
        flags[2] = True

    for p in range(3, math.isqrt(N) + 1, 2):
        if flags[p]:
            flags[p * p::2 * p] = False
    return flags


def primes_upto(N: int) -> np.ndarray:
    """Return all primes <= N as an int32 array, ascending."""
    return np.flatnonzero(prime_flags_upto(N)).astype(np.int32)


def is_prime(n: int) -> bool:
    """Trial division, for spot checks of single large values."""
    n = int(n)
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    for d in range(3, math.isqrt(n) + 1, 2):
        if n % d == 0:
            return False
    return True
