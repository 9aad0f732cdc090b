class InvalidRange(ValueError):
    """A bit length or search range too small to admit the arithmetic."""


class SearchExhausted(ValueError):
    """A bounded search spent its attempt budget without a result."""

    def __init__(self, what: str, attempts: int):
        super().__init__(f"{what}: no result after {attempts} attempts")
        self.what = what
        self.attempts = attempts
