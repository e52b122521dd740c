"""
Residue arithmetic for the CRT solver.

Pure Python reference implementations of the Euclidean algorithm, residue
normalization, modular inverses and residue encoding.
"""

from .reference import (
    extended_gcd, bezout_gcd, least_positive_residue, mod_inverse, product,
    rns_encode, rns_encode_signed,
    is_prime, generate_primes,
)

__all__ = [
    "extended_gcd", "bezout_gcd", "least_positive_residue", "mod_inverse",
    "product",
    "rns_encode", "rns_encode_signed",
    "is_prime", "generate_primes",
]
