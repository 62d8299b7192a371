from typing import Optional

from .errors import StreamIOFailure
from .keys import DEFAULT_KEY2, KeyLike, KeyPair
from .stream import decode_stream, encode_stream
from .transform import decode, encode

SUFFIX = ".enc"


def encoded_path(in_path: str) -> str:
    return in_path + SUFFIX


def decoded_path(in_path: str) -> str:
    if in_path.endswith(SUFFIX) and len(in_path) > len(SUFFIX):
        return in_path[:-len(SUFFIX)]
    return in_path + ".dec"


def _read(path: str) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except FileNotFoundError:
        raise
    except OSError as e:
        raise StreamIOFailure(f"could not read {path}: {e}") from e


def _write(path: str, data: bytes):
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise StreamIOFailure(f"could not write {path}: {e}") from e


def _stream(in_path: str, out_path: str, fn, key1, key2):
    # Open the input first so a missing file never leaves an empty output behind.
    try:
        src = open(in_path, "rb")
    except FileNotFoundError:
        raise
    except OSError as e:
        raise StreamIOFailure(f"could not read {in_path}: {e}") from e
    with src:
        try:
            dst = open(out_path, "wb")
        except OSError as e:
            raise StreamIOFailure(f"could not write {out_path}: {e}") from e
        with dst:
            fn(src, dst, key1, key2)


def encode_file(in_path: str, key1: KeyLike, key2: KeyLike | None = DEFAULT_KEY2,
                out_path: Optional[str] = None, streaming: bool = False) -> str:
    """Encode in_path into a new file and return its path.

    streaming=True writes the unshuffled per-byte form without buffering the file;
    it must be decoded with streaming=True as well.
    """
    KeyPair.from_keys(key1, key2)  # reject bad keys before touching the output
    out_path = out_path or encoded_path(in_path)
    if streaming:
        _stream(in_path, out_path, encode_stream, key1, key2)
    else:
        _write(out_path, encode(_read(in_path), key1, key2))
    return out_path


def decode_file(in_path: str, key1: KeyLike, key2: KeyLike | None = DEFAULT_KEY2,
                out_path: Optional[str] = None, streaming: bool = False) -> str:
    KeyPair.from_keys(key1, key2)
    out_path = out_path or decoded_path(in_path)
    if streaming:
        _stream(in_path, out_path, decode_stream, key1, key2)
    else:
        _write(out_path, decode(_read(in_path), key1, key2))
    return out_path
