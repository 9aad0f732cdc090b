import secrets
from random import Random
from typing import Optional

from .modular import power_mod

# Each round lets a composite through with probability at most 1/4.
DEFAULT_ROUNDS = 100


def witness(a: int, n: int) -> bool:
    """Return True when ``a`` proves the odd number ``n`` composite."""
    u, t = n - 1, 0
    while u % 2 == 0:  # n - 1 = u * 2^t
        t += 1
        u >>= 1

    x = power_mod(a, u, n)
    for _ in range(t):
        y = power_mod(x, 2, n)
        # Non-trivial square root of 1
        if y == 1 and x != 1 and x != n - 1:
            return True
        x = y
    return x != 1


def is_prime(n: int, rounds: int = DEFAULT_ROUNDS, rng: Optional[Random] = None) -> bool:
    """Miller-Rabin probabilistic primality test.

    Primes are never rejected; a composite survives all ``rounds`` random
    witnesses with probability at most 4^-rounds.
    """
    if n < 2 or (n != 2 and n % 2 == 0):
        return False
    if n < 4:
        return True

    if rng is None:
        rng = secrets.SystemRandom()
    for _ in range(rounds):
        a = rng.randint(2, n - 2)
        if witness(a, n):
            return False
    return True
