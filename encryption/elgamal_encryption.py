from typing import Tuple, Optional, Union, Iterator
from dataclasses import dataclass
from random import Random
import argparse
import logging
import secrets
import sys

from number_theory.errors import InvalidRange
from number_theory.generator import find_generator
from number_theory.modular import power_mod
from number_theory.prime_search import safe_prime

from .errors import InvalidCiphertext, MessageTooLarge
from .text_codec import decode, encode

logger = logging.getLogger(__name__)

GENERATOR_SEED = 2**16 + 1
MIN_KEY_BITS = 4
DEFAULT_KEY_BITS = 128


@dataclass(frozen=True)
class PrivateKey:
    """Private half of a key pair: modulus p and secret exponent a."""
    p: int
    a: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.p, self.a))

    def __str__(self) -> str:
        return f"({self.p}, {self.a})"


@dataclass(frozen=True)
class PublicKey:
    """Public half of a key pair: modulus p, generator r and b = r^a mod p."""
    p: int
    r: int
    b: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.p, self.r, self.b))

    def __str__(self) -> str:
        return f"({self.p}, {self.r}, {self.b})"


@dataclass(frozen=True)
class Ciphertext:
    gamma: int
    delta: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.gamma, self.delta))

    def __str__(self) -> str:
        return f"({self.gamma}, {self.delta})"


def generate_keys(bit_length: int, rng: Optional[Random] = None, strict_generator: bool = True,
                  max_attempts: Optional[int] = None) -> Tuple[PrivateKey, PublicKey]:
    """Generate a key pair over a safe prime built from a ``bit_length``-bit
    Sophie Germain prime.

    The secret exponent is drawn from the upper half [(p - 1)/2, p - 2].
    """
    if bit_length < MIN_KEY_BITS:
        raise InvalidRange(f"key size must be at least {MIN_KEY_BITS} bits, got {bit_length}")
    if rng is None:
        rng = secrets.SystemRandom()

    p = safe_prime(2**(bit_length - 1), 2**bit_length - 1, rng, max_attempts)
    r = find_generator(GENERATOR_SEED, p, strict_generator, max_attempts)
    a = rng.randint((p - 1) // 2, p - 2)
    b = power_mod(r, a, p)

    logger.debug("Generated %d-bit modulus with generator %d", p.bit_length(), r)
    return PrivateKey(p=p, a=a), PublicKey(p=p, r=r, b=b)


def encrypt(m: int, pub: PublicKey, rng: Optional[Random] = None) -> Ciphertext:
    """Encrypt the field element m under ``pub`` with a fresh ephemeral k."""
    p, r, b = pub
    if not 0 <= m < p:
        raise MessageTooLarge(m, p)
    if rng is None:
        rng = secrets.SystemRandom()

    k = rng.randint(1, p - 2)
    gamma = power_mod(r, k, p)
    delta = (m * power_mod(b, k, p)) % p
    return Ciphertext(gamma=gamma, delta=delta)


def decrypt(cipher: Ciphertext, prv: PrivateKey) -> int:
    """Recover m = delta * gamma^(p - 1 - a) mod p."""
    p, a = prv
    gamma, delta = cipher
    if not (0 <= gamma < p and 0 <= delta < p):
        raise InvalidCiphertext("Invalid ciphertext")
    return (power_mod(gamma, p - 1 - a, p) * delta) % p


class ElGamal:
    def __init__(self, key_size: int = DEFAULT_KEY_BITS, rng: Optional[Random] = None,
                 strict_generator: bool = True):
        self.key_size = key_size
        self.rng = rng if rng is not None else secrets.SystemRandom()
        self.private_key, self.public_key = generate_keys(key_size, self.rng, strict_generator)

    def encrypt(self, message: Union[str, int]) -> Ciphertext:
        m = encode(message) if isinstance(message, str) else message
        return encrypt(m, self.public_key, self.rng)

    def decrypt(self, cipher: Ciphertext, as_text: bool = True) -> Union[str, int]:
        m = decrypt(cipher, self.private_key)
        return decode(m) if as_text else m


def demo():
    print("Initializing ElGamal cryptosystem...")
    elgamal = ElGamal(key_size=DEFAULT_KEY_BITS)
    print(f"\npub = {elgamal.public_key}")
    print(f"prv = {elgamal.private_key}")

    message = "Hi Buckaroos!"
    print(f"\nOriginal message: {message}")

    cipher = elgamal.encrypt(message)
    print(f"\nEncrypted (gamma, delta):\ngamma: {cipher.gamma}\ndelta: {cipher.delta}")

    decrypted = elgamal.decrypt(cipher)
    print(f"\nDecrypted message: {decrypted}")

    assert decrypted == message, "Decryption failed!"
    print("\nVerification: Success!")


def run_shell(bits: int, lines, strict_generator: bool = True, rng: Optional[Random] = None) -> None:
    """Print a fresh key pair, then encrypt and decrypt each line read."""
    prv, pub = generate_keys(bits, rng, strict_generator)
    print(f"pub = {pub}")
    print(f"prv = {prv}")

    print(">> ", end="", flush=True)
    for line in lines:
        m = line.rstrip("\n")
        try:
            c = encrypt(encode(m), pub, rng)
        except ValueError as e:
            logger.error("Cannot encrypt %r: %s", m, e)
        else:
            print(f"En[{m}] = {c}")
            t = decode(decrypt(c, prv))
            print(f"De[{c}] = {t}")
        print(">> ", end="", flush=True)
    print()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="ElGamal encryption over a safe prime field")
    parser.add_argument("--bits", type=int, help="Bit length of the Sophie Germain prime")
    parser.add_argument("--legacy-generator", action="store_true",
                        help="Accept generators the way the original script did")
    parser.add_argument("--demo", action="store_true", help="Run the fixed round-trip demo")
    parser.add_argument("--verbose", action="store_true", help="Log search progress")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s - %(levelname)s - %(message)s")

    if args.demo:
        demo()
        return 0

    bits = args.bits
    if bits is None:
        print("How many bits? ", end="", flush=True)
        try:
            bits = int(sys.stdin.readline())
        except ValueError:
            logger.error("Bit length must be an integer")
            return 2

    try:
        run_shell(bits, sys.stdin, strict_generator=not args.legacy_generator)
    except InvalidRange as e:
        logger.error("%s", e)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
