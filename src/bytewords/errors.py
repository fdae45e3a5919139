"""
Errors raised when a bytewords text cannot be decoded.
"""


class DecodeError(ValueError):
    pass


class InvalidWordError(DecodeError):
    def __init__(self, token: str):
        super().__init__(f"Invalid word {token!r}.")
        self.token = token


class TooShortError(DecodeError):
    def __init__(self, length: int):
        super().__init__(f"Decoded only {length} byte(s), at least 5 are required.")
        self.length = length


class ChecksumMismatchError(DecodeError):
    def __init__(self, expected: bytes, actual: bytes):
        super().__init__(f"Checksum mismatch (expected {expected.hex()}, got {actual.hex()}).")
        self.expected = expected
        self.actual = actual
