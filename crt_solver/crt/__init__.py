"""
CRT (Chinese Remainder Theorem) solvers.

Two reconstruction paths that agree on every valid system:
1. solve: inverse-weighted summation over a precomputed CrtBasis
2. garner: iterative mixed-radix reconstruction, plus signed output
"""

from .garner import garner_reconstruct, signed_reconstruct, centered
from .solve import (
    CrtBasis, CrtSolution, METHODS,
    check_moduli, format_solution, solve_congruences, solve_batch,
)
from .verify import verify_solution

__all__ = [
    "garner_reconstruct", "signed_reconstruct", "centered",
    "CrtBasis", "CrtSolution", "METHODS",
    "check_moduli", "format_solution", "solve_congruences", "solve_batch",
    "verify_solution",
]
