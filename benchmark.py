#!/usr/bin/env python3
"""
Benchmark the elimination sieve.

Compares:
1. Elimination sieve (oddsieve.engine.sieve)
2. Reference flag sieve (oddsieve.primes.primes_upto)
3. Emission cost of the result

Run at N=10^6 or 10^7 for quick comparison; the elimination sieve does
far more work per prime than the flag sieve, so expect it to lose.
"""

import argparse
import io
import time
from typing import Dict

import numpy as np

from oddsieve.emitter import DEFAULT_CHUNK_SIZE, emit
from oddsieve.engine import count_candidates, cutoff_for, sieve
from oddsieve.primes import primes_upto


def _best_of(fn, repeats: int):
    """Run fn `repeats` times; return (last result, fastest time)."""
    best = float('inf')
    result = None
    for _ in range(repeats):
        t0 = time.time()
        result = fn()
        best = min(best, time.time() - t0)
    return result, best


def benchmark(N: int, repeats: int = 3, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Dict[str, float]:
    """Time engine, reference and emission at bound N."""
    print("=" * 60)
    print(f"Sieve Benchmark: N = {N:,}")
    print("=" * 60)

    count = count_candidates(N)
    print(f"Candidates: {count:,} ({4 * count / 1e6:.1f}MB int32), cutoff: {cutoff_for(N):,}")
    print()

    # Warm up the compiled loops so the first repeat is not a JIT timing
    sieve(30)

    print("Elimination sieve...", end=" ", flush=True)
    primes, t_engine = _best_of(lambda: sieve(N), repeats)
    print(f"{t_engine:.3f}s")

    print("Reference sieve...  ", end=" ", flush=True)
    expected, t_reference = _best_of(lambda: primes_upto(N), repeats)
    print(f"{t_reference:.3f}s")

    print("Emission...         ", end=" ", flush=True)
    _, t_emit = _best_of(lambda: emit(primes, io.StringIO(), chunk_size), repeats)
    print(f"{t_emit:.3f}s")
    print()

    match = np.array_equal(primes, expected)
    print(f"Found {len(primes):,} primes ({'✓ matches' if match else '✗ differs from'} reference)")
    print(f"First 10: {primes[:10].tolist()}")
    print(f"Last 10:  {primes[-10:].tolist()}")
    print(f"Engine / reference: {t_engine / max(t_reference, 1e-9):.1f}x")

    return {
        'N': N,
        'primes': len(primes),
        'engine_s': t_engine,
        'reference_s': t_reference,
        'emit_s': t_emit,
        'match': match,
    }


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Benchmark the elimination sieve')
    parser.add_argument('--N', type=float, default=1e6, help='Upper bound (default: 1e6)')
    parser.add_argument('--repeats', type=int, default=3, help='Timing repeats (best of)')
    args = parser.parse_args()

    benchmark(int(args.N), args.repeats)
