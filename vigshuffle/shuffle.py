from typing import List, Sequence, TypeVar

T = TypeVar("T")


def shuffle(seq: Sequence[T]) -> List[T]:
    """Even positions reversed, then odd positions reversed.

    [10, 20, 30, 40, 50] -> [50, 30, 10, 40, 20]
    """
    return list(seq[0::2])[::-1] + list(seq[1::2])[::-1]


def unshuffle(seq: Sequence[T]) -> List[T]:
    """Inverse of shuffle; the split point comes from the length alone."""
    n = len(seq)
    m = (n + 1) // 2
    evens = list(seq[:m])[::-1]
    odds = list(seq[m:])[::-1]
    out: List[T] = [None] * n  # type: ignore[list-item]
    out[0::2] = evens
    out[1::2] = odds
    return out
