"""
Unit tests for CRT reconstruction.

Known small systems, the built-in 512-bit system, agreement between the
summation and Garner paths, batch solving, verification and the explicit
failure modes for bad moduli.
"""

import unittest
import random
import sys
import os

import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', '..'))

from crt_solver.constants import DEFAULT_RESIDUES, DEFAULT_MODULI
from crt_solver.crt import (
    CrtBasis, check_moduli, format_solution,
    solve_congruences, solve_batch,
    garner_reconstruct, signed_reconstruct, centered,
    verify_solution,
)
from crt_solver.errors import (
    ConstraintLengthError, CrtError, NonCoprimeModuliError, ZeroModulusError,
)
from crt_solver.rns.reference import generate_primes, rns_encode, product


class TestKnownSystems(unittest.TestCase):

    def test_two_moduli(self):
        sol = solve_congruences([2, 3], [5, 7])
        self.assertEqual(sol.x, 17)
        self.assertEqual(sol.modulus, 35)
        self.assertEqual(sol.x % 5, 2)
        self.assertEqual(sol.x % 7, 3)

    def test_three_moduli(self):
        sol = solve_congruences([1, 2, 3], [5, 7, 9])
        self.assertEqual(sol.modulus, 315)
        self.assertEqual(sol.x, 156)
        self.assertEqual([sol.x % m for m in [5, 7, 9]], [1, 2, 3])
        self.assertTrue(0 <= sol.x < 315)

    def test_single_constraint(self):
        sol = solve_congruences([4], [11])
        self.assertEqual((sol.x, sol.modulus), (4, 11))
        self.assertEqual(sol.inverses, [1])

    def test_empty_system(self):
        sol = solve_congruences([], [])
        self.assertEqual((sol.x, sol.modulus), (0, 1))

    def test_inverses(self):
        # M/5 = 7, 7*(-2) = -14 = 1 mod 5;  M/7 = 5, 5*3 = 15 = 1 mod 7
        sol = solve_congruences([2, 3], [5, 7])
        self.assertEqual(sol.inverses, [-2, 3])

    def test_negative_and_large_residues(self):
        sol = solve_congruences([-3, 10], [5, 7])
        self.assertEqual(sol.x, 17)

    def test_format(self):
        sol = solve_congruences([2, 3], [5, 7])
        self.assertEqual(format_solution(sol), "x is equivalent to 17 mod 35")
        self.assertEqual(str(sol), "x is equivalent to 17 mod 35")

    def test_to_dict(self):
        d = solve_congruences([1, 2, 3], [5, 7, 9]).to_dict()
        self.assertEqual(d["x"], "156")
        self.assertEqual(d["modulus"], "315")
        self.assertEqual(d["n"], 3)
        self.assertEqual(d["method"], "summation")

    def test_numpy_inputs(self):
        sol = solve_congruences(np.array([1, 2, 3]), np.array([5, 7, 9]))
        self.assertEqual(sol.x, 156)
        self.assertIsInstance(sol.x, int)


class TestDefaultSystem(unittest.TestCase):

    def test_solution_satisfies_every_congruence(self):
        sol = solve_congruences(DEFAULT_RESIDUES, DEFAULT_MODULI)
        self.assertEqual(sol.modulus, product(DEFAULT_MODULI))
        self.assertTrue(0 <= sol.x < sol.modulus)
        for a, m in zip(DEFAULT_RESIDUES, DEFAULT_MODULI):
            self.assertEqual(sol.x % m, a % m)

    def test_garner_agrees(self):
        sol = solve_congruences(DEFAULT_RESIDUES, DEFAULT_MODULI,
                                method="garner")
        self.assertEqual(sol.x, solve_congruences(
            DEFAULT_RESIDUES, DEFAULT_MODULI).x)


class TestBasisAndBatch(unittest.TestCase):

    def setUp(self):
        self.rng = random.Random(42)
        self.primes = generate_primes(12)
        self.M = product(self.primes)

    def test_basis_reuse(self):
        basis = CrtBasis(self.primes)
        self.assertEqual(len(basis), 12)
        for _ in range(20):
            x = self.rng.randint(0, self.M - 1)
            self.assertEqual(basis.reconstruct(rns_encode(x, self.primes)), x)

    def test_basis_inverses(self):
        basis = CrtBasis([5, 7, 9])
        for partial, inv, m in zip(basis.partials, basis.inverses,
                                   basis.moduli):
            self.assertEqual((partial * inv) % m, 1)

    def test_basis_length_mismatch(self):
        with self.assertRaises(ConstraintLengthError):
            CrtBasis([5, 7]).reconstruct([1, 2, 3])

    def test_solve_batch_lists(self):
        values = [self.rng.randint(0, self.M - 1) for _ in range(10)]
        batch = [rns_encode(x, self.primes) for x in values]
        self.assertEqual(solve_batch(batch, self.primes), values)

    def test_solve_batch_numpy(self):
        batch = np.array([[2, 3], [0, 0], [4, 6]], dtype=np.int64)
        self.assertEqual(solve_batch(batch, [5, 7]), [17, 0, 34])

    def test_solve_batch_empty(self):
        self.assertEqual(solve_batch([], [5, 7]), [])

    def test_solve_batch_ragged(self):
        with self.assertRaises(ConstraintLengthError):
            solve_batch([[1, 2], [1, 2, 3]], [5, 7])


class TestGarner(unittest.TestCase):

    def setUp(self):
        self.rng = random.Random(42)

    def test_known(self):
        self.assertEqual(garner_reconstruct([1, 2, 3], [5, 7, 9]), 156)
        self.assertEqual(garner_reconstruct([4], [11]), 4)
        self.assertEqual(garner_reconstruct([], []), 0)

    def test_matches_summation(self):
        primes = generate_primes(8)
        for _ in range(30):
            residues = [self.rng.randint(-10**12, 10**12) for _ in primes]
            self.assertEqual(
                garner_reconstruct(residues, primes),
                solve_congruences(residues, primes).x,
            )

    def test_composite_moduli(self):
        # not prime, only pairwise coprime
        moduli = [8, 9, 25, 49]
        x = 12345
        self.assertEqual(garner_reconstruct(rns_encode(x, moduli), moduli), x)

    def test_centered(self):
        self.assertEqual(centered(34, 35), -1)
        self.assertEqual(centered(17, 35), 17)
        self.assertEqual(centered(18, 35), -17)
        self.assertEqual(centered(5, 10), -5)
        self.assertEqual(centered(4, 10), 4)

    def test_signed_reconstruct(self):
        primes = generate_primes(4)
        for x in [-1, -123456789, 0, 987654321]:
            residues = [x % p for p in primes]
            self.assertEqual(signed_reconstruct(residues, primes), x)

    def test_length_mismatch(self):
        with self.assertRaises(ConstraintLengthError):
            garner_reconstruct([1], [5, 7])


class TestFailures(unittest.TestCase):

    def test_zero_modulus(self):
        with self.assertRaises(ZeroModulusError):
            solve_congruences([1, 2], [5, 0])
        with self.assertRaises(ZeroModulusError):
            solve_congruences([1, 2], [5, 0], check_coprime=False)

    def test_negative_modulus(self):
        with self.assertRaises(CrtError):
            solve_congruences([1, 2], [5, -7])

    def test_non_coprime(self):
        with self.assertRaises(NonCoprimeModuliError) as ctx:
            solve_congruences([1, 2, 3], [5, 6, 9])
        self.assertEqual((ctx.exception.i, ctx.exception.j), (1, 2))
        self.assertEqual(ctx.exception.gcd, 3)

    def test_non_coprime_garner(self):
        with self.assertRaises(NonCoprimeModuliError):
            solve_congruences([1, 2], [6, 9], method="garner")

    def test_non_coprime_unchecked_is_silent(self):
        sol = solve_congruences([1, 2], [6, 9], check_coprime=False)
        self.assertEqual(sol.modulus, 54)
        self.assertTrue(0 <= sol.x < 54)
        self.assertFalse(verify_solution(sol.x, [1, 2], [6, 9])["verified"])

    def test_length_mismatch(self):
        with self.assertRaises(ConstraintLengthError):
            solve_congruences([1, 2, 3], [5, 7])

    def test_unknown_method(self):
        with self.assertRaises(ValueError):
            solve_congruences([1], [5], method="fft")

    def test_check_moduli(self):
        check_moduli([5, 7, 9])
        check_moduli([6, 9], check_coprime=False)
        with self.assertRaises(NonCoprimeModuliError):
            check_moduli([6, 9])

    def test_all_errors_are_value_errors(self):
        with self.assertRaises(ValueError):
            solve_congruences([1, 2], [4, 6])


class TestVerify(unittest.TestCase):

    def test_verified(self):
        report = verify_solution(156, [1, 2, 3], [5, 7, 9])
        self.assertTrue(report["verified"])
        self.assertTrue(report["in_range"])
        self.assertEqual(report["modulus"], "315")
        self.assertEqual(report["failures"], [])

    def test_negative_constraint(self):
        self.assertTrue(verify_solution(4, [-1], [5])["verified"])

    def test_failure_detail(self):
        report = verify_solution(17, [2, 4], [5, 7])
        self.assertFalse(report["verified"])
        self.assertEqual(report["failures"], [
            {"index": 1, "modulus": "7", "expected": "4", "got": "3"},
        ])

    def test_out_of_range(self):
        report = verify_solution(17 + 35, [2, 3], [5, 7])
        self.assertTrue(report["verified"])
        self.assertFalse(report["in_range"])


class TestSympyCrossCheck(unittest.TestCase):

    def test_matches_sympy(self):
        try:
            from sympy.ntheory.modular import crt as sympy_crt
        except ImportError:
            self.skipTest("sympy not installed")

        rng = random.Random(42)
        moduli = [8, 9, 25, 49, 11, 13]
        for _ in range(20):
            residues = [rng.randint(0, m - 1) for m in moduli]
            want = int(sympy_crt(moduli, residues)[0])
            self.assertEqual(solve_congruences(residues, moduli).x, want)


if __name__ == "__main__":
    unittest.main()
