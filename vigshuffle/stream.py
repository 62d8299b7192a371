"""Per-character transform over binary streams.

No shuffle is applied here: the interleave needs the full length up front.
Buffer the whole input and use transform.encode/decode for the shuffled form.
"""
from typing import BinaryIO, Callable, Iterator, List, Tuple

from .errors import StreamIOFailure
from .keys import DEFAULT_KEY2, KeyLike, KeyPair
from .transform import to_codes
from .vigenere import dec_codes, enc_codes

CHUNK_SIZE = 64 * 1024

Step = Callable[[List[int], Iterator[Tuple[int, int]]], List[int]]


def _pump(reader: BinaryIO, writer: BinaryIO, keys: KeyPair, step: Step, chunk_size: int) -> int:
    schedule = keys.schedule()  # carried across chunks
    done = 0
    while True:
        try:
            chunk = reader.read(chunk_size)
        except OSError as e:
            raise StreamIOFailure(f"read failed after {done} bytes: {e}") from e
        if chunk is None:
            raise StreamIOFailure(f"reader had no data ready after {done} bytes (non-blocking stream)")
        if not chunk:
            return done
        out = bytes(step(to_codes(chunk, offset=done), schedule))
        try:
            writer.write(out)
        except OSError as e:
            raise StreamIOFailure(f"write failed after {done} bytes: {e}") from e
        done += len(chunk)


def encode_stream(reader: BinaryIO, writer: BinaryIO, key1: KeyLike,
                  key2: KeyLike | None = DEFAULT_KEY2, chunk_size: int = CHUNK_SIZE) -> int:
    """Substitute every byte of reader into writer; returns the byte count."""
    return _pump(reader, writer, KeyPair.from_keys(key1, key2), enc_codes, chunk_size)


def decode_stream(reader: BinaryIO, writer: BinaryIO, key1: KeyLike,
                  key2: KeyLike | None = DEFAULT_KEY2, chunk_size: int = CHUNK_SIZE) -> int:
    return _pump(reader, writer, KeyPair.from_keys(key1, key2), dec_codes, chunk_size)
