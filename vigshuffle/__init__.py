"""Double-keyed Vigenère substitution over 7-bit ASCII followed by an even/odd shuffle."""
from .errors import CipherError, InvalidKey, OutOfRangeCharacter, StreamIOFailure
from .keys import DEFAULT_KEY2, MODULUS, KeyPair
from .vigenere import encrypt_char, decrypt_char, substitute, unsubstitute
from .shuffle import shuffle, unshuffle
from .transform import encode, decode
from .stream import encode_stream, decode_stream
from .files import encode_file, decode_file

__version__ = "1.0.0"
