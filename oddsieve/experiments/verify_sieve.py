#!/usr/bin/env python3
"""
Verify the elimination sieve against the reference flag sieve.

Checks:
1. Exact match with primes_upto(N)
2. Ordering and range invariants of the output
3. Trial-division spot check of the largest primes found

Usage:
    python -m oddsieve.experiments.verify_sieve --N 1e6
"""

import argparse
import sys
import time

import numpy as np

from ..engine import count_candidates, cutoff_for, sieve
from ..primes import is_prime, primes_upto

SPOT_CHECK_COUNT = 20


def verify_against_reference(N: int, verbose: bool = True) -> bool:
    """Compare sieve(N) with the reference sieve, value by value."""
    if verbose:
        print(f"\n=== Verifying against reference for N={N:,} ===")

    t0 = time.time()
    got = sieve(N)
    t_engine = time.time() - t0

    t0 = time.time()
    expected = primes_upto(N)
    t_reference = time.time() - t0

    if verbose:
        print(f"  Engine:    {t_engine:.2f}s, {len(got):,} primes")
        print(f"  Reference: {t_reference:.2f}s, {len(expected):,} primes")

    if np.array_equal(got, expected):
        if verbose:
            print(f"  ✓ All {len(expected):,} primes match!")
        return True

    if len(got) != len(expected):
        print(f"  Length mismatch: engine={len(got):,}, reference={len(expected):,}")

    missing = np.setdiff1d(expected, got)
    extra = np.setdiff1d(got, expected)
    for p in missing[:10]:
        print(f"  MISSING {p}")
    for n in extra[:10]:
        print(f"  EXTRA {n}")

    if verbose:
        print(f"  ✗ {len(missing):,} missing, {len(extra):,} extra")
    return False


def verify_invariants(N: int, verbose: bool = True) -> bool:
    """Check ordering, bounds and primality of sieve(N) without the reference."""
    if verbose:
        print(f"\n=== Verifying invariants for N={N:,} ===")
        print(f"  Candidates: {count_candidates(N):,}, cutoff: {cutoff_for(N):,}")

    primes = sieve(N)
    errors = []

    if len(primes) == 0 or primes[0] != 2:
        errors.append("first value is not 2")
    if len(primes) > 1 and not np.all(np.diff(primes) > 0):
        errors.append("values are not strictly increasing")
    if len(primes) and (primes.min() < 2 or primes.max() > N):
        errors.append(f"values outside [2, {N}]")

    for p in primes[-SPOT_CHECK_COUNT:]:
        if not is_prime(p):
            errors.append(f"{p} is composite")

    if verbose:
        if errors:
            for e in errors:
                print(f"  ✗ {e}")
        else:
            print(f"  ✓ Largest {min(SPOT_CHECK_COUNT, len(primes))} values pass trial division")

    return not errors


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Verify elimination sieve correctness')
    parser.add_argument('--N', type=float, default=1e6, help='Upper bound (default: 1e6)')
    args = parser.parse_args(argv)

    N = int(args.N)

    print("Elimination Sieve Verification")
    print(f"N = {N:,}")
    print("=" * 50)

    reference_ok = verify_against_reference(N)
    invariants_ok = verify_invariants(N)

    print("\n" + "=" * 50)
    if reference_ok and invariants_ok:
        print("✓ All verifications passed!")
        return 0
    print("✗ Some verifications failed!")
    return 1


if __name__ == '__main__':
    sys.exit(main())
