import logging
import secrets
from random import Random
from typing import Optional

from .errors import InvalidRange, SearchExhausted
from .primality import DEFAULT_ROUNDS, is_prime

logger = logging.getLogger(__name__)


def _check_range(low: int, high: int) -> None:
    if low > high:
        raise InvalidRange(f"empty range [{low}, {high}]")
    if high < 2:
        raise InvalidRange(f"range [{low}, {high}] holds no primes")


def random_prime(low: int, high: int, rng: Optional[Random] = None,
                 max_attempts: Optional[int] = None) -> int:
    """Draw uniform integers from [low, high] until one is a probable prime.

    Half the draws are even and the rest are prime with probability about
    1/ln(high), so the loop is short in practice. Without ``max_attempts`` it
    never gives up.
    """
    _check_range(low, high)
    if rng is None:
        rng = secrets.SystemRandom()

    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        guess = rng.randint(low, high)
        if is_prime(guess, DEFAULT_ROUNDS, rng):
            logger.debug("Found prime of %d bits after %d draws", guess.bit_length(), attempts)
            return guess
    raise SearchExhausted("random_prime", attempts)


def safe_prime(low: int, high: int, rng: Optional[Random] = None,
               max_attempts: Optional[int] = None) -> int:
    """Return 2p + 1 for a Sophie Germain prime p drawn from [low, high].

    ``max_attempts`` bounds the number of candidate p values and is also
    passed down to each inner prime search.
    """
    _check_range(low, high)
    if rng is None:
        rng = secrets.SystemRandom()

    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        p = random_prime(low, high, rng, max_attempts)
        if is_prime(2 * p + 1, DEFAULT_ROUNDS, rng):
            logger.debug("Found safe prime after %d Sophie Germain candidates", attempts)
            return 2 * p + 1
    raise SearchExhausted("safe_prime", attempts)
