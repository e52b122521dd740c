"""
Exceptions raised by the CRT solver.

Everything derives from CrtError (itself a ValueError), so callers can
catch one type for any bad congruence system.
"""


class CrtError(ValueError):
    """Base class for invalid congruence systems."""


class ZeroModulusError(CrtError, ZeroDivisionError):
    """A modulus (or Euclidean divisor) is zero."""


class ConstraintLengthError(CrtError):
    """Residue and modulus lists differ in length."""


class NotInvertibleError(CrtError):
    """Value has no multiplicative inverse for the given modulus."""


class NonCoprimeModuliError(CrtError):
    """Two moduli share a common factor."""

    def __init__(self, i: int, j: int, m_i: int, m_j: int, gcd: int):
        self.i = i
        self.j = j
        self.gcd = gcd
        super().__init__(
            f"moduli are not pairwise coprime: gcd(moduli[{i}], moduli[{j}]) "
            f"= {gcd} (moduli[{i}]={m_i}, moduli[{j}]={m_j})"
        )
