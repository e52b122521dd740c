"""
Iterative (Garner-style) CRT reconstruction and signed interpretation.

Adds one modulus at a time instead of forming every M/m_i, which keeps the
intermediate products small for long modulus lists.
"""

from typing import Sequence

from crt_solver.errors import ConstraintLengthError
from crt_solver.rns.reference import (
    least_positive_residue, mod_inverse, product,
)


def garner_reconstruct(residues: Sequence[int], moduli: Sequence[int]) -> int:
    """Reconstruct x from residues by mixed-radix accumulation.

    Inverses come from the extended Euclidean algorithm, so the moduli only
    need to be pairwise coprime, not prime.

    Returns x in [0, M) where M = prod(moduli).
    """
    if len(residues) != len(moduli):
        raise ConstraintLengthError(
            f"{len(residues)} residues for {len(moduli)} moduli"
        )
    if not moduli:
        return 0

    m_0 = int(moduli[0])
    x = least_positive_residue(residues[0], m_0)
    M = m_0

    for i in range(1, len(moduli)):
        m_i = int(moduli[i])
        a_i = least_positive_residue(residues[i], m_i)

        M_inv = mod_inverse(M, m_i)
        diff = least_positive_residue(a_i - x, m_i)
        t = least_positive_residue(diff * M_inv, m_i)

        x = x + M * t
        M = M * m_i

    return x


def centered(x: int, M: int) -> int:
    """Map x in [0, M) to the signed representative in [-M/2, M/2)."""
    x = least_positive_residue(x, M)
    if x >= (M + 1) // 2:
        x -= M
    return x


def signed_reconstruct(residues: Sequence[int], moduli: Sequence[int]) -> int:
    """Reconstruct a signed integer, assuming it lies in [-M/2, M/2)."""
    return centered(garner_reconstruct(residues, moduli), product(moduli))
