
def power_mod(base: int, exponent: int, modulus: int) -> int:
    """Compute base^exponent mod modulus by repeated squaring.

    Every exponent is a sum of powers of two, so squaring the base once per
    exponent bit and multiplying in the squares whose bit is set gives the
    full power in O(log exponent) modular multiplications.
    """
    if modulus < 1:
        raise ValueError("modulus must be at least 1")
    if exponent < 0:
        raise ValueError("exponent must be non-negative")

    value = 1 % modulus
    power = base % modulus
    while exponent > 0:
        if exponent & 1:
            value = (value * power) % modulus
        power = (power * power) % modulus
        exponent >>= 1
    return value
