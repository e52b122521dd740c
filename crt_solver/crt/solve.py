"""
CRT combination: the summation formula over precomputed inverses.

For pairwise-coprime moduli m_i with product M,

    x = sum_i (M / m_i) * a_i * inv_i    (mod M)

where inv_i is the first Bezout coefficient of extended_gcd(M / m_i, m_i),
i.e. the inverse of M / m_i modulo m_i.  The sum is accumulated without
intermediate reduction and normalized into [0, M) at the end.
"""

from dataclasses import dataclass, field
from itertools import combinations
from math import gcd
from typing import Any, Dict, List, Sequence

import numpy as np

from crt_solver.errors import (
    ConstraintLengthError, CrtError, NonCoprimeModuliError, ZeroModulusError,
)
from crt_solver.rns.reference import (
    extended_gcd, least_positive_residue, product,
)
from .garner import garner_reconstruct

METHODS = ("summation", "garner")


@dataclass
class CrtSolution:
    """Solution x of a congruence system, unique modulo `modulus`."""
    x: int
    modulus: int
    residues: List[int]
    moduli: List[int]
    inverses: List[int] = field(default_factory=list)
    method: str = "summation"

    def to_dict(self) -> Dict[str, Any]:
        # big ints as decimal strings
        return {
            "x": str(self.x),
            "modulus": str(self.modulus),
            "residues": [str(a) for a in self.residues],
            "moduli": [str(m) for m in self.moduli],
            "inverses": [str(v) for v in self.inverses],
            "method": self.method,
            "n": len(self.moduli),
        }

    def __str__(self) -> str:
        return format_solution(self)


def format_solution(solution: CrtSolution) -> str:
    """The one-line report: 'x is equivalent to <x> mod <M>'."""
    return f"x is equivalent to {solution.x} mod {solution.modulus}"


def check_moduli(moduli: Sequence[int], check_coprime: bool = True) -> None:
    """Reject zero or negative moduli and, optionally, shared factors.

    Raises:
        ZeroModulusError: a modulus is 0.
        CrtError: a modulus is negative.
        NonCoprimeModuliError: two moduli share a factor (check_coprime).
    """
    for i, m in enumerate(moduli):
        if m == 0:
            raise ZeroModulusError(f"moduli[{i}] is zero")
        if m < 0:
            raise CrtError(f"moduli[{i}] = {m} is negative")

    if not check_coprime:
        return
    for i, j in combinations(range(len(moduli)), 2):
        g = gcd(moduli[i], moduli[j])
        if g != 1:
            raise NonCoprimeModuliError(i, j, moduli[i], moduli[j], g)


class CrtBasis:
    """Precomputed M, partial products M/m_i and their inverses.

    Build once per modulus set and reuse for any number of residue vectors.

    Usage:
        basis = CrtBasis([5, 7, 9])
        x = basis.reconstruct([1, 2, 3])     # 156
    """

    def __init__(self, moduli: Sequence[int], check_coprime: bool = True):
        self.moduli = [int(m) for m in moduli]
        check_moduli(self.moduli, check_coprime=check_coprime)

        self.modulus = product(self.moduli)
        self.partials = [self.modulus // m for m in self.moduli]
        # extended_gcd(M/m_i, m_i)[0] is the inverse of M/m_i mod m_i
        # whenever gcd(M/m_i, m_i) = 1
        self.inverses = [
            extended_gcd(partial, m)[0]
            for partial, m in zip(self.partials, self.moduli)
        ]

    def __len__(self) -> int:
        return len(self.moduli)

    def reconstruct(self, residues: Sequence[int]) -> int:
        """x in [0, M) with x = residues[i] mod moduli[i] for every i."""
        if len(residues) != len(self.moduli):
            raise ConstraintLengthError(
                f"{len(residues)} residues for {len(self.moduli)} moduli"
            )

        x = 0
        for partial, a, inv in zip(self.partials, residues, self.inverses):
            x += partial * int(a) * inv

        return least_positive_residue(x, self.modulus)


def solve_congruences(
    residues: Sequence[int],
    moduli: Sequence[int],
    check_coprime: bool = True,
    method: str = "summation",
) -> CrtSolution:
    """Solve x = residues[i] (mod moduli[i]) for all i.

    Args:
        residues: One residue per modulus (any sign, any size).
        moduli: Positive, pairwise-coprime moduli.
        check_coprime: If False, skip the pairwise gcd check; non-coprime
            moduli then give an unchecked (possibly wrong) answer.
        method: "summation" (inverse-weighted sum) or "garner" (iterative).

    Returns:
        CrtSolution with x in [0, M).

    Raises:
        ConstraintLengthError, ZeroModulusError, NonCoprimeModuliError,
        CrtError: for an invalid system.
    """
    if method not in METHODS:
        raise ValueError(f"Unknown CRT method: {method}")

    residues = [int(a) for a in residues]
    moduli = [int(m) for m in moduli]
    if len(residues) != len(moduli):
        raise ConstraintLengthError(
            f"{len(residues)} residues for {len(moduli)} moduli"
        )

    if method == "garner":
        check_moduli(moduli, check_coprime=check_coprime)
        x = garner_reconstruct(residues, moduli)
        return CrtSolution(
            x=x, modulus=product(moduli), residues=residues,
            moduli=moduli, method=method,
        )

    basis = CrtBasis(moduli, check_coprime=check_coprime)
    return CrtSolution(
        x=basis.reconstruct(residues),
        modulus=basis.modulus,
        residues=residues,
        moduli=moduli,
        inverses=list(basis.inverses),
        method=method,
    )


def solve_batch(
    residues_batch,
    moduli: Sequence[int],
    check_coprime: bool = True,
) -> List[int]:
    """Solve many systems that share one modulus set.

    Args:
        residues_batch: List of residue lists, or a 2-D array with one
            system per row.
        moduli: Shared moduli.
        check_coprime: Passed to CrtBasis.

    Returns:
        List of solutions, one per row, each in [0, M).
    """
    basis = CrtBasis(moduli, check_coprime=check_coprime)
    batch = np.asarray(residues_batch, dtype=object)
    if batch.size == 0:
        return []
    if batch.ndim != 2:
        raise ConstraintLengthError(
            f"residues_batch must be 2-D, got shape {batch.shape}"
        )
    return [basis.reconstruct(row.tolist()) for row in batch]
