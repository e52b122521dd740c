"""
crt-solver: simultaneous congruences via the Chinese Remainder Theorem.

For pairwise-coprime moduli m_i with product M:
  inv_i = extended_gcd(M/m_i, m_i)[0]            inverse of M/m_i mod m_i
  x     = sum_i (M/m_i) * a_i * inv_i            unbounded accumulation
  x     = least_positive_residue(x, M)           x in [0, M)

Run `python -m crt_solver` to solve the built-in default system.
"""

__version__ = "0.1.0"

from .errors import (
    CrtError, ZeroModulusError, NonCoprimeModuliError,
    ConstraintLengthError, NotInvertibleError,
)
from .rns.reference import (
    extended_gcd, bezout_gcd, least_positive_residue, mod_inverse, product,
    rns_encode, rns_encode_signed, generate_primes,
)
from .crt import (
    CrtBasis, CrtSolution, check_moduli, format_solution,
    solve_congruences, solve_batch,
    garner_reconstruct, signed_reconstruct, centered,
    verify_solution,
)
from .constants import DEFAULT_RESIDUES, DEFAULT_MODULI, SYSTEMS_REGISTRY
from .config import SystemConfig, load_config, config_from_dict, system_config
from .logging import RunLogger, RunManifest, create_manifest

__all__ = [
    "CrtError", "ZeroModulusError", "NonCoprimeModuliError",
    "ConstraintLengthError", "NotInvertibleError",
    "extended_gcd", "bezout_gcd", "least_positive_residue", "mod_inverse",
    "product", "rns_encode", "rns_encode_signed", "generate_primes",
    "CrtBasis", "CrtSolution", "check_moduli", "format_solution",
    "solve_congruences", "solve_batch",
    "garner_reconstruct", "signed_reconstruct", "centered",
    "verify_solution",
    "DEFAULT_RESIDUES", "DEFAULT_MODULI", "SYSTEMS_REGISTRY",
    "SystemConfig", "load_config", "config_from_dict", "system_config",
    "RunLogger", "RunManifest", "create_manifest",
]
