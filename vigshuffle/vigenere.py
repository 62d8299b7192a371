from typing import Iterable, Iterator, List, Tuple

from .keys import MODULUS, KeyPair


def encrypt_char(c: int, k1: int, k2: int) -> int:
    return ((c + k1) % MODULUS + k2) % MODULUS


def decrypt_char(c: int, k1: int, k2: int) -> int:
    # Undo key2 first, then key1; codes and keys are both < MODULUS
    # so a single correction brings each step back into range.
    x = c - k2
    if x < 0:
        x += MODULUS
    y = x - k1
    if y < 0:
        y += MODULUS
    return y


def enc_codes(codes: Iterable[int], schedule: Iterator[Tuple[int, int]]) -> List[int]:
    """Substitute codes pulling one (k1, k2) pair per code from a running schedule."""
    return [encrypt_char(c, k1, k2) for c, (k1, k2) in zip(codes, schedule)]


def dec_codes(codes: Iterable[int], schedule: Iterator[Tuple[int, int]]) -> List[int]:
    return [decrypt_char(c, k1, k2) for c, (k1, k2) in zip(codes, schedule)]


def substitute(codes: Iterable[int], keys: KeyPair) -> List[int]:
    return enc_codes(codes, keys.schedule())


def unsubstitute(codes: Iterable[int], keys: KeyPair) -> List[int]:
    return dec_codes(codes, keys.schedule())
