import logging
from typing import Optional

from .errors import InvalidRange, SearchExhausted
from .modular import power_mod

logger = logging.getLogger(__name__)


def _is_full_order(g: int, p: int, q: int) -> bool:
    # The proper divisors of p - 1 = 2q are 1, 2 and q.
    return g % p != 0 and power_mod(g, 2, p) != 1 and power_mod(g, q, p) != 1


def _is_rejected_legacy(g: int, p: int, q: int) -> bool:
    # Rejects only when both powers collapse to 1 at once.
    return power_mod(g, 2, p) == 1 and power_mod(g, q, p) == 1


def find_generator(seed: int, p: int, strict: bool = True,
                   max_attempts: Optional[int] = None) -> int:
    """Scan upward from ``seed`` for a generator of the group mod safe prime p.

    With ``strict`` the first g whose order is the full 2q = p - 1 is
    returned. Without it the scan keeps the original acceptance test, which
    only skips g when g^2 and g^q are both 1 and therefore accepts elements
    of order 2 or q as well.
    """
    if p < 5:
        raise InvalidRange(f"modulus {p} is too small to be a safe prime")

    q = (p - 1) // 2
    g = seed
    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        if strict and _is_full_order(g, p, q):
            break
        if not strict and not _is_rejected_legacy(g, p, q):
            break
        g += 1
    else:
        raise SearchExhausted("find_generator", attempts)

    logger.debug("Generator %d accepted after %d candidates (strict=%s)", g, attempts, strict)
    return g
