"""Shared pytest fixtures for the ElGamal test suite."""

import random

import pytest

from encryption.elgamal_encryption import generate_keys


@pytest.fixture()
def rng():
    """Seeded random source so searches and ciphertexts are reproducible."""
    return random.Random(20261018)


@pytest.fixture()
def keys_32(rng):
    return generate_keys(32, rng)


class ExplodingRandom:
    """Random source that fails the test if any value is drawn."""

    def randint(self, a, b):
        raise AssertionError("randomness consumed")


@pytest.fixture()
def no_rng():
    return ExplodingRandom()
