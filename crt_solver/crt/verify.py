"""
Check a candidate solution against every congruence of a system.
"""

from typing import Any, Dict, List, Sequence

from crt_solver.errors import ConstraintLengthError
from crt_solver.rns.reference import least_positive_residue, product


def verify_solution(
    x: int,
    residues: Sequence[int],
    moduli: Sequence[int],
) -> Dict[str, Any]:
    """Verify x = residues[i] (mod moduli[i]) for all i.

    Residues are compared as least non-negative residues, so a constraint
    of -1 mod 5 is satisfied by x = 4.

    Returns:
        Dict with: verified, in_range, modulus, n, failures.
        Each failure is {index, modulus, expected, got}; big ints are
        rendered as strings.
    """
    if len(residues) != len(moduli):
        raise ConstraintLengthError(
            f"{len(residues)} residues for {len(moduli)} moduli"
        )

    x = int(x)
    M = product(moduli)
    failures: List[Dict[str, Any]] = []

    for i, (a, m) in enumerate(zip(residues, moduli)):
        expected = least_positive_residue(a, m)
        got = least_positive_residue(x, m)
        if got != expected:
            failures.append({
                "index": i,
                "modulus": str(m),
                "expected": str(expected),
                "got": str(got),
            })

    return {
        "verified": not failures,
        "in_range": 0 <= x < M,
        "modulus": str(M),
        "n": len(moduli),
        "failures": failures,
    }
