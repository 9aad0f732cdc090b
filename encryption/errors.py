class EncodingOverflow(ValueError):
    """A character does not fit in the single byte the text codec allows."""

    def __init__(self, char: str, position: int):
        super().__init__(f"character {char!r} at position {position} has code point "
                         f"{ord(char)} > 255")
        self.char = char
        self.position = position


class MessageTooLarge(ValueError):
    """An encoded message that is not a field element of the key's modulus."""

    def __init__(self, message: int, modulus: int):
        super().__init__(f"Message too large for current key size "
                         f"({message.bit_length()} bits, modulus has {modulus.bit_length()})")
        self.message = message
        self.modulus = modulus


class InvalidCiphertext(ValueError):
    pass
