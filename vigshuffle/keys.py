from dataclasses import dataclass
from itertools import cycle
from typing import Iterator, Tuple, Union

from .errors import InvalidKey

MODULUS = 128  # 7-bit ASCII

# Public constant used when no second key is given. Not a secret.
DEFAULT_KEY2 = "]09agvn cv8eA ino;av 478uyTR`~=( ADJ OD *^t"

KeyLike = Union[str, bytes, bytearray]


def key_codes(key: KeyLike, name: str = "key") -> Tuple[int, ...]:
    """Normalise a key to a tuple of character codes, rejecting empty or 8-bit keys."""
    if isinstance(key, str):
        codes = tuple(ord(ch) for ch in key)
    elif isinstance(key, (bytes, bytearray)):
        codes = tuple(key)
    else:
        raise InvalidKey(f"{name} must be str or bytes, not {type(key).__name__}")
    if not codes:
        raise InvalidKey(f"{name} must not be empty")
    for i, c in enumerate(codes):
        if not 0 <= c < MODULUS:
            raise InvalidKey(f"{name} has code {c} at index {i}, outside [0, {MODULUS})")
    return codes


@dataclass(frozen=True)
class KeyPair:
    key1: Tuple[int, ...]
    key2: Tuple[int, ...]

    @classmethod
    def from_keys(cls, key1: KeyLike, key2: KeyLike | None = None) -> "KeyPair":
        if key2 is None:
            key2 = DEFAULT_KEY2
        return cls(key_codes(key1, "key1"), key_codes(key2, "key2"))

    def schedule(self) -> Iterator[Tuple[int, int]]:
        # Each key rotates on its own period, both starting at index 0.
        return zip(cycle(self.key1), cycle(self.key2))
