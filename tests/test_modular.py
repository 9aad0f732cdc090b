import pytest

from number_theory.modular import power_mod


def test_matches_builtin_pow_on_large_operands():
    p = 2**127 - 1
    base = 0xDEADBEEFCAFEBABE1234567890
    exponent = 3**80
    assert power_mod(base, exponent, p) == pow(base, exponent, p)


def test_small_values():
    assert power_mod(2, 10, 1000) == 24
    assert power_mod(3, 1, 7) == 3
    assert power_mod(10, 2, 7) == 2


@pytest.mark.parametrize("base", [0, 1, 5, 2**200])
def test_zero_exponent_is_one(base):
    for modulus in (2, 3, 97, 2**61 - 1):
        assert power_mod(base, 0, modulus) == 1


@pytest.mark.parametrize("base,exponent", [(0, 0), (7, 0), (7, 13), (2**90, 2**40)])
def test_modulus_one_is_zero(base, exponent):
    assert power_mod(base, exponent, 1) == 0


def test_base_larger_than_modulus_is_reduced():
    assert power_mod(65537, 3, 23) == pow(65537 % 23, 3, 23)


def test_rejects_bad_arguments():
    with pytest.raises(ValueError):
        power_mod(2, 3, 0)
    with pytest.raises(ValueError):
        power_mod(2, -1, 7)
