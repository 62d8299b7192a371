"""
vigshuffle command line client

Usage:
    vigshuffle help
    vigshuffle demo
    vigshuffle SUBJECT s|f e|d KEY1 [KEY2] [--out PATH] [--stream] [--b64] [--api URL]

SUBJECT is the text to transform (mode s) or the path of a file (mode f).
Direction e encodes, d decodes. KEY2 falls back to the built-in default key.

With --api (or VIGSHUFFLE_API set) the transform is done by a running
server.py instead of in-process.
"""

import argparse
import base64
import binascii
import os
import sys
from dataclasses import dataclass
from typing import Optional

import requests
from dotenv import load_dotenv

from vigshuffle import encode, decode, encode_file, decode_file, CipherError
from vigshuffle.files import encoded_path, decoded_path

DEMO_TEXT = "Master of Puppets, The New Order, Rust In Peace"
DEMO_KEY = "sayaka"


# ----------------------------------------------------------------------
# API CLIENT & HELPERS
# ----------------------------------------------------------------------

@dataclass
class Session:
    api: str
    timeout: float = 30.0


def _timeout_default(default=30.0) -> float:
    try: return float(os.getenv("VIGSHUFFLE_TIMEOUT", default))
    except ValueError: return default


def _raise_for_detail(r: requests.Response):
    # Surface the server's own message for client errors
    if 400 <= r.status_code < 500:
        try:
            msg = r.json().get("detail") or r.text
        except ValueError:
            msg = r.text or r.reason
        raise RuntimeError(f"server rejected request ({r.status_code}): {msg}")
    r.raise_for_status()


def _api_transform(sess: Session, route: str, payload: bytes, key1: str, key2: Optional[str]) -> bytes:
    body = {"payload_b64": base64.b64encode(payload).decode(), "key1": key1}
    if key2 is not None:
        body["key2"] = key2
    r = requests.post(f"{sess.api}/api/{route}", json=body, timeout=sess.timeout)
    _raise_for_detail(r)
    return base64.b64decode(r.json()["payload_b64"])


def api_encode(sess: Session, payload: bytes, key1: str, key2: Optional[str] = None) -> bytes:
    return _api_transform(sess, "encode", payload, key1, key2)


def api_decode(sess: Session, payload: bytes, key1: str, key2: Optional[str] = None) -> bytes:
    return _api_transform(sess, "decode", payload, key1, key2)


def _api_file(sess: Session, route: str, in_path: str, out_path: str, key1: str, key2: Optional[str]) -> str:
    data = {"key1": key1}
    if key2 is not None:
        data["key2"] = key2
    with open(in_path, "rb") as f:
        files = {"file": (os.path.basename(in_path), f, "application/octet-stream")}
        r = requests.post(f"{sess.api}/api/{route}", data=data, files=files, timeout=sess.timeout)
    _raise_for_detail(r)
    with open(out_path, "wb") as f:
        f.write(r.content)
    return out_path


def api_encode_file(sess: Session, in_path: str, key1: str, key2: Optional[str] = None,
                    out_path: Optional[str] = None) -> str:
    return _api_file(sess, "encode-file", in_path, out_path or encoded_path(in_path), key1, key2)


def api_decode_file(sess: Session, in_path: str, key1: str, key2: Optional[str] = None,
                    out_path: Optional[str] = None) -> str:
    return _api_file(sess, "decode-file", in_path, out_path or decoded_path(in_path), key1, key2)


# ----------------------------------------------------------------------
# COMMANDS
# ----------------------------------------------------------------------

def demo():
    print(f"Plain text: {DEMO_TEXT}")
    cipher_text = encode(DEMO_TEXT, DEMO_KEY)
    print(f"Cipher text: {cipher_text}")
    print(f"Decrypted text: {decode(cipher_text, DEMO_KEY)}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="vigshuffle",
                                description="Two-key Vigenère + shuffle text obfuscation.")
    p.add_argument("subject", help="text (mode s) or file path (mode f)")
    p.add_argument("mode", type=str.lower, choices=["s", "f"], help="s = string, f = file")
    p.add_argument("direction", type=str.lower, choices=["e", "d"], help="e = encode, d = decode")
    p.add_argument("key1")
    p.add_argument("key2", nargs="?", default=None, help="defaults to the built-in second key")
    p.add_argument("--out", help="output path for file mode")
    p.add_argument("--stream", action="store_true",
                   help="file mode: per-byte streaming form, no shuffle")
    p.add_argument("--b64", action="store_true",
                   help="string mode: base64 output when encoding, base64 input when decoding")
    p.add_argument("--api", default=os.getenv("VIGSHUFFLE_API"),
                   help="server base URL; omit to run locally")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def process_string(args) -> str:
    encoding = args.direction == "e"
    if encoding or not args.b64:
        data = args.subject.encode("ascii")
    else:
        data = base64.b64decode(args.subject, validate=True)

    if args.api:
        sess = Session(args.api, _timeout_default())
        fn = api_encode if encoding else api_decode
        out = fn(sess, data, args.key1, args.key2)
    else:
        out = (encode if encoding else decode)(data, args.key1, args.key2)

    if encoding and args.b64:
        return base64.b64encode(out).decode()
    return out.decode("ascii")


def process_file(args) -> str:
    if not os.path.isfile(args.subject):
        raise FileNotFoundError(f"Could not open file {args.subject}")
    encoding = args.direction == "e"
    if args.api:
        if args.stream:
            raise ValueError("--stream is only available locally")
        sess = Session(args.api, _timeout_default())
        fn = api_encode_file if encoding else api_decode_file
        return fn(sess, args.subject, args.key1, args.key2, out_path=args.out)
    fn = encode_file if encoding else decode_file
    return fn(args.subject, args.key1, args.key2, out_path=args.out, streaming=args.stream)


def main(argv=None) -> int:
    load_dotenv()
    argv = sys.argv[1:] if argv is None else list(argv)

    if len(argv) == 1:
        arg = argv[0].lower()
        if arg in ("help", "h"):
            print(__doc__.strip())
            return 0
        if arg in ("demo", "d"):
            demo()
            return 0

    args = build_parser().parse_args(argv)
    if args.verbose:
        route = args.api or "local"
        print(f"mode={args.mode} direction={args.direction} via {route}", file=sys.stderr)

    try:
        if args.mode == "s":
            print(process_string(args))
        else:
            print(process_file(args))
    except UnicodeEncodeError:
        print("Input must be 7-bit ASCII", file=sys.stderr)
        return 1
    except (CipherError, binascii.Error, ValueError, RuntimeError, OSError,
            requests.RequestException) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
