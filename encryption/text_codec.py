"""Reversible mapping between short byte-valued strings and one integer.

Each character code is masked with ``MASK`` and used as a base-256 digit,
least significant first. The mask keeps trailing NUL characters from
vanishing; it is not a security measure. A string whose last character is
``chr(MASK)`` loses that character, since it becomes a leading zero digit.
"""

from .errors import EncodingOverflow

MASK = 0xAA


def encode(s: str) -> int:
    total = 0
    place = 1
    for i, c in enumerate(s):
        code = ord(c)
        if code > 0xFF:
            raise EncodingOverflow(c, i)
        total += place * (MASK ^ code)
        place *= 256
    return total


def decode(n: int) -> str:
    if n < 0:
        raise ValueError("cannot decode a negative integer")
    chars = []
    while n > 0:
        chars.append(chr(MASK ^ (n % 256)))
        n //= 256
    return "".join(chars)
