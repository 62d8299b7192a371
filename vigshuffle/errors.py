class CipherError(Exception):
    """Base class for every error raised by the transform engine."""


class InvalidKey(CipherError, ValueError):
    """Empty key, or a key holding a code outside the 7-bit alphabet."""


class OutOfRangeCharacter(CipherError, ValueError):
    def __init__(self, position: int, value):
        self.position = position
        self.value = value
        super().__init__(f"character code {value!r} at position {position} is not an integer in [0, 128)")


class StreamIOFailure(CipherError, OSError):
    """A read or write failed mid-transform. Partial output is left as written."""
