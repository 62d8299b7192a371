"""Whole-buffer pipeline: substitute then shuffle, and back."""
import operator
from typing import Iterable, List, Union

from .errors import OutOfRangeCharacter
from .keys import DEFAULT_KEY2, MODULUS, KeyLike, KeyPair
from .shuffle import shuffle, unshuffle
from .vigenere import substitute, unsubstitute

Data = Union[str, bytes, bytearray, Iterable[int]]


def to_codes(data: Data, offset: int = 0) -> List[int]:
    """Turn str/bytes/ints into a list of 7-bit codes, rejecting anything else."""
    if isinstance(data, str):
        return to_codes([ord(ch) for ch in data], offset)
    codes = []
    for i, c in enumerate(data):
        try:
            code = operator.index(c)
        except TypeError:
            raise OutOfRangeCharacter(offset + i, c) from None
        if not 0 <= code < MODULUS:
            raise OutOfRangeCharacter(offset + i, c)
        codes.append(code)
    return codes


def from_codes(codes: List[int], like: Data):
    """Rebuild the same kind of value the caller handed in."""
    if isinstance(like, str):
        return "".join(map(chr, codes))
    if isinstance(like, (bytes, bytearray)):
        return bytes(codes)
    return codes


def encode(data: Data, key1: KeyLike, key2: KeyLike | None = DEFAULT_KEY2):
    keys = KeyPair.from_keys(key1, key2)
    codes = to_codes(data)
    return from_codes(shuffle(substitute(codes, keys)), data)


def decode(cipher: Data, key1: KeyLike, key2: KeyLike | None = DEFAULT_KEY2):
    keys = KeyPair.from_keys(key1, key2)
    codes = to_codes(cipher)
    return from_codes(unsubstitute(unshuffle(codes), keys), cipher)
