"""
Pure-Python residue arithmetic used by the CRT solver.

All operations are exact (integer arithmetic, no floating-point) and work
on Python ints of any size.  numpy integers are accepted and coerced with
int().
"""

from typing import List, Sequence, Tuple

from crt_solver.errors import NotInvertibleError, ZeroModulusError


# ---------------------------------------------------------------------------
# Euclidean algorithm
# ---------------------------------------------------------------------------

def extended_gcd(a: int, b: int) -> Tuple[int, int]:
    """Bezout coefficients (s, t) with a*s + b*t = gcd(a, b).

    The larger argument is always divided by the smaller one: if b > a the
    call is solved for (b, a) and the coefficients are swapped back.  At
    each level a = q*b + r; when r == 0 the gcd is b and the pair is (0, 1),
    otherwise the pair (s', t') for (b, r) unwinds to (t', s' - q*t').

    The descent is done with a loop and an explicit quotient stack, so very
    large inputs never hit the interpreter recursion limit.

    Negative arguments are solved on their absolute values and the matching
    coefficient is negated, so the identity holds with gcd(|a|, |b|).

    Raises:
        ZeroModulusError: if either argument is zero.
    """
    a, b = int(a), int(b)
    if a == 0 or b == 0:
        raise ZeroModulusError(f"extended_gcd({a}, {b}): zero divisor")

    if a < 0 or b < 0:
        s, t = extended_gcd(abs(a), abs(b))
        return (s if a > 0 else -s), (t if b > 0 else -t)

    if b > a:
        s, t = extended_gcd(b, a)
        return t, s

    quotients: List[int] = []
    while True:
        q = a // b
        # a = q*b + r --> r = a - q*b
        r = a - q * b
        if r == 0:
            break
        quotients.append(q)
        a, b = b, r

    s, t = 0, 1
    for q in reversed(quotients):
        s, t = t, s - q * t
    return s, t


def bezout_gcd(a: int, b: int) -> int:
    """gcd(|a|, |b|) recovered from the Bezout coefficients."""
    s, t = extended_gcd(a, b)
    return int(a) * s + int(b) * t


def least_positive_residue(a: int, m: int) -> int:
    """Least non-negative integer congruent to a modulo |m|.

    Negative a is handled by reflection: the residue r of -a is found first
    and m - r returned.  A reflection that lands exactly on m (a is a
    negative multiple of m) is folded to 0.

    Raises:
        ZeroModulusError: if m == 0.
    """
    a, m = int(a), int(m)
    if m == 0:
        raise ZeroModulusError(f"least_positive_residue({a}, 0): zero modulus")

    # a = b mod -m  <==>  a = b mod m
    if m < 0:
        m = -m

    if 0 <= a < m:
        return a

    if a < 0:
        r = least_positive_residue(-a, m)
        return m - r if r else 0

    # a >= m > 0: division algorithm, a = q*m + r with 0 <= r < m
    q = a // m
    return a - q * m


def mod_inverse(a: int, m: int) -> int:
    """Multiplicative inverse of a modulo m, in [0, |m|).

    Raises:
        ZeroModulusError: if m == 0.
        NotInvertibleError: if gcd(a, m) != 1.
    """
    a, m = int(a), int(m)
    if m == 0:
        raise ZeroModulusError(f"mod_inverse({a}, 0): zero modulus")
    if abs(m) == 1:
        return 0
    a = least_positive_residue(a, m)
    if a == 0:
        raise NotInvertibleError(f"{a} has no inverse modulo {m}")

    s, t = extended_gcd(a, m)
    g = a * s + m * t
    if g != 1:
        raise NotInvertibleError(
            f"{a} has no inverse modulo {m} (gcd = {g})"
        )
    return least_positive_residue(s, m)


def product(values: Sequence[int]) -> int:
    """Left-fold product, 1 for an empty sequence."""
    M = 1
    for v in values:
        M *= int(v)
    return M


# ---------------------------------------------------------------------------
# Residue encode helpers
# ---------------------------------------------------------------------------

def rns_encode(x: int, moduli: Sequence[int]) -> List[int]:
    """Residues of x, one per modulus."""
    return [least_positive_residue(x, m) for m in moduli]


def rns_encode_signed(x: int, moduli: Sequence[int]) -> List[int]:
    """Encode a signed integer.  For negative x, encode M + x where
    M = prod(moduli)."""
    x = int(x)
    if x >= 0:
        return rns_encode(x, moduli)
    return rns_encode(product(moduli) + x, moduli)


# ---------------------------------------------------------------------------
# Prime generation (pairwise-coprime test moduli)
# ---------------------------------------------------------------------------

def is_prime(n: int) -> bool:
    """Trial division by 6k +/- 1; fine for 31-bit candidates."""
    if n < 2:
        return False
    if n == 2 or n == 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def generate_primes(K: int, bits: int = 31) -> List[int]:
    """Generate K distinct primes just below 2^bits.

    Args:
        K: Number of primes to generate.
        bits: Upper bound exponent; primes lie in [2^(bits-1), 2^bits).

    Returns:
        Sorted list of K primes.
    """
    prime_max = (1 << bits) - 1
    prime_min = 1 << (bits - 1)

    primes: List[int] = []
    candidate = prime_max if prime_max % 2 else prime_max - 1
    while len(primes) < K and candidate >= prime_min:
        if is_prime(candidate):
            primes.append(candidate)
        candidate -= 2  # only odd candidates
    if len(primes) < K:
        raise RuntimeError(
            f"Could not find {K} primes in [{prime_min}, {prime_max}]"
        )
    return sorted(primes)
