#!/usr/bin/env python3
"""
Full verification and timing suite.

Cross-checks the elimination sieve at every configured bound, then
times it against the reference sieve.

Usage:
    python run_all.py
    python run_all.py --config config/custom.yaml
"""

import argparse
import sys
import time

from benchmark import benchmark
from oddsieve.config import DEFAULT_CONFIG_PATH, load_config
from oddsieve.experiments.verify_sieve import verify_against_reference, verify_invariants


def main():
    parser = argparse.ArgumentParser(description='Run sieve verification and benchmarks')
    parser.add_argument('--config', type=str, default=str(DEFAULT_CONFIG_PATH),
                        help='Path to config file')
    parser.add_argument('--skip-benchmark', action='store_true',
                        help='Only run verification')
    args = parser.parse_args()

    config = load_config(args.config)

    print("=" * 60)
    print("Odd-only Elimination Sieve - Full Suite")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  verify_bounds = {config['verify_bounds']}")
    print(f"  benchmark_bounds = {config['benchmark_bounds']}")
    print(f"  repeats = {config['repeats']}")
    print(f"  chunk_size = {config['chunk_size']}")
    print()

    total_start = time.time()

    # 1. Verification
    print("-" * 60)
    print("1. Verification against reference sieve")
    print("-" * 60)
    failed = []
    start = time.time()
    for N in config['verify_bounds']:
        N = int(N)
        ok = verify_against_reference(N, verbose=False) and verify_invariants(N, verbose=False)
        print(f"  N={N:>12,}: {'✓' if ok else '✗'}")
        if not ok:
            failed.append(N)
    print(f"   Completed in {time.time() - start:.1f}s")
    print()

    # 2. Benchmarks
    results = []
    if not args.skip_benchmark:
        print("-" * 60)
        print("2. Benchmarks")
        print("-" * 60)
        for N in config['benchmark_bounds']:
            results.append(benchmark(int(N), int(config['repeats']), int(config['chunk_size'])))
            print()

    # Summary
    print("=" * 60)
    print("COMPLETE")
    print("=" * 60)
    print(f"\nTotal runtime: {time.time() - total_start:.1f}s")

    if results:
        print(f"\n  {'N':>12} {'primes':>10} {'engine':>9} {'reference':>10} {'emit':>8}")
        for r in results:
            print(f"  {r['N']:>12,} {r['primes']:>10,} {r['engine_s']:>8.3f}s "
                  f"{r['reference_s']:>9.3f}s {r['emit_s']:>7.3f}s")

    if failed:
        print(f"\n✗ Verification failed for N = {failed}")
        sys.exit(1)
    print("\n✓ All verifications passed!")


if __name__ == '__main__':
    main()
