#!/usr/bin/env python3
"""
Validation script for crt-solver.

Runs a sequence of checks:
1. Extended Euclid (Bezout identity, swap symmetry)
2. Least positive residue (range, idempotence, negative inputs)
3. Small CRT systems with known answers
4. Summation vs Garner agreement on random prime moduli
5. Default 512-bit system
6. Explicit failures (zero modulus, non-coprime moduli)
7. Cross-check against sympy (if installed)

Usage:
    python scripts/validate_crt.py
"""

import math
import random
import sys
import time
import traceback
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from crt_solver.rns.reference import (
    extended_gcd, least_positive_residue, generate_primes, rns_encode,
)
from crt_solver.crt import (
    solve_congruences, solve_batch, garner_reconstruct, verify_solution,
)
from crt_solver.constants import DEFAULT_RESIDUES, DEFAULT_MODULI
from crt_solver.errors import NonCoprimeModuliError, ZeroModulusError


def section(name: str):
    print(f"\n{'='*60}")
    print(f"  {name}")
    print(f"{'='*60}")


def check(name: str, passed: bool, detail: str = ""):
    status = "PASS" if passed else "FAIL"
    mark = "✓" if passed else "✗"
    print(f"  [{status}] {mark} {name}" + (f" -- {detail}" if detail else ""))
    return passed


def main():
    print("crt-solver Validation Suite")
    print(f"Python: {sys.version}")

    results = []
    rng = random.Random(42)

    # ---------------------------------------------------------------
    # 1. Extended Euclid
    # ---------------------------------------------------------------
    section("1. Extended Euclid")

    try:
        bezout_ok = True
        swap_ok = True
        for _ in range(500):
            a = rng.randint(1, 10**40)
            b = rng.randint(1, 10**40)
            s, t = extended_gcd(a, b)
            if a * s + b * t != math.gcd(a, b):
                bezout_ok = False
                print(f"    FAIL: extended_gcd({a}, {b}) = ({s}, {t})")
            if a != b and extended_gcd(b, a) != (t, s):
                swap_ok = False
        results.append(check("Bezout identity (500 pairs)", bezout_ok))
        results.append(check("Swap symmetry (500 pairs)", swap_ok))

        # consecutive Fibonacci numbers are the worst case for Euclid
        fa, fb = 1, 1
        for _ in range(3000):
            fa, fb = fb, fa + fb
        s, t = extended_gcd(fb, fa)
        results.append(check("Deep Euclid (Fibonacci 3000)",
                             fb * s + fa * t == 1))
    except Exception as e:
        results.append(check("Extended Euclid", False, str(e)))
        traceback.print_exc()

    # ---------------------------------------------------------------
    # 2. Least positive residue
    # ---------------------------------------------------------------
    section("2. Least Positive Residue")

    try:
        range_ok = True
        for _ in range(500):
            a = rng.randint(-10**30, 10**30)
            m = rng.choice([-1, 1]) * rng.randint(1, 10**12)
            r = least_positive_residue(a, m)
            if not (0 <= r < abs(m)) or (a - r) % m != 0:
                range_ok = False
                print(f"    FAIL: least_positive_residue({a}, {m}) = {r}")
            if least_positive_residue(r, m) != r:
                range_ok = False
        results.append(check("Range, congruence, idempotence (500)", range_ok))
        results.append(check("least_positive_residue(-4, 5) == 1",
                             least_positive_residue(-4, 5) == 1))
        results.append(check("least_positive_residue(-4, -5) == 1",
                             least_positive_residue(-4, -5) == 1))
        results.append(check("least_positive_residue(-10, 5) == 0",
                             least_positive_residue(-10, 5) == 0))
    except Exception as e:
        results.append(check("Least positive residue", False, str(e)))
        traceback.print_exc()

    # ---------------------------------------------------------------
    # 3. Known systems
    # ---------------------------------------------------------------
    section("3. Known CRT Systems")

    try:
        known = [
            ([2, 3], [5, 7], 17, 35),
            ([1, 2, 3], [5, 7, 9], 156, 315),
            ([4], [11], 4, 11),
        ]
        for residues, moduli, want_x, want_M in known:
            sol = solve_congruences(residues, moduli)
            results.append(check(
                f"moduli={moduli}",
                sol.x == want_x and sol.modulus == want_M,
                str(sol),
            ))
    except Exception as e:
        results.append(check("Known systems", False, str(e)))
        traceback.print_exc()

    # ---------------------------------------------------------------
    # 4. Summation vs Garner
    # ---------------------------------------------------------------
    section("4. Summation vs Garner")

    try:
        primes = generate_primes(16)
        M = math.prod(primes)
        values = [rng.randint(0, M - 1) for _ in range(20)]
        batch = [rns_encode(x, primes) for x in values]

        t0 = time.time()
        got = solve_batch(batch, primes)
        dt = time.time() - t0
        results.append(check("Batch roundtrip (20 x 16 primes)",
                             got == values, f"{dt*1000:.2f} ms"))

        garner = [garner_reconstruct(r, primes) for r in batch]
        results.append(check("Garner matches summation", garner == got))
    except Exception as e:
        results.append(check("Summation vs Garner", False, str(e)))
        traceback.print_exc()

    # ---------------------------------------------------------------
    # 5. Default system
    # ---------------------------------------------------------------
    section("5. Default 512-bit System")

    try:
        t0 = time.time()
        sol = solve_congruences(DEFAULT_RESIDUES, DEFAULT_MODULI)
        dt = time.time() - t0
        report = verify_solution(sol.x, DEFAULT_RESIDUES, DEFAULT_MODULI)
        results.append(check("Default system verified",
                             report["verified"] and report["in_range"],
                             f"M has {sol.modulus.bit_length()} bits, "
                             f"{dt*1000:.2f} ms"))
        print(f"  {sol}")
    except Exception as e:
        results.append(check("Default system", False, str(e)))
        traceback.print_exc()

    # ---------------------------------------------------------------
    # 6. Explicit failures
    # ---------------------------------------------------------------
    section("6. Explicit Failures")

    try:
        solve_congruences([1, 2], [5, 0])
        results.append(check("Zero modulus rejected", False, "no error"))
    except ZeroModulusError as e:
        results.append(check("Zero modulus rejected", True, str(e)))

    try:
        solve_congruences([1, 2], [6, 9])
        results.append(check("Non-coprime moduli rejected", False, "no error"))
    except NonCoprimeModuliError as e:
        results.append(check("Non-coprime moduli rejected", True, str(e)))

    # ---------------------------------------------------------------
    # 7. sympy cross-check
    # ---------------------------------------------------------------
    section("7. sympy Cross-check")

    try:
        from sympy.ntheory.modular import crt as sympy_crt

        moduli = generate_primes(6)
        residues = [rng.randint(-10**12, 10**12) for _ in moduli]
        want = int(sympy_crt(moduli, residues)[0])
        got = solve_congruences(residues, moduli).x
        results.append(check("Matches sympy.ntheory.modular.crt",
                             got == want))
    except ImportError:
        print("  sympy not installed, skipping")

    # ---------------------------------------------------------------
    # Summary
    # ---------------------------------------------------------------
    section("Summary")

    n_pass = sum(1 for r in results if r)
    n_fail = sum(1 for r in results if not r)
    n_total = len(results)

    print(f"\n  {n_pass}/{n_total} checks passed, {n_fail} failed")

    if n_fail == 0:
        print("\n  All checks PASSED.")
    else:
        print("\n  Some checks FAILED. Review output above.")

    return 0 if n_fail == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
