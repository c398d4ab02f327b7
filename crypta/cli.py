from __future__ import annotations

import sys
import argparse

from typing import List, Optional

from crypta import __version__
from crypta.codec import b64decode, b64encode
from crypta.errors import CryptaError, InputReadError
from crypta.inputs import read_input
from crypta.keys import load_private_key, load_public_key, write_keypair
from crypta.sealing import open_sealed, seal


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors like every other failure (exit 1)."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(1)


def _write_stdout(data: bytes) -> None:
    out = sys.stdout.buffer
    out.write(data)
    out.flush()


def cmd_genkey(name: str) -> bool:
    """Generate a key pair and save it as ``<name>.pub`` and ``<name>.pvt``.

    Refuses to run if either file already exists.
    """
    write_keypair(name, announce=lambda line: print(line, flush=True))
    return True


def cmd_encrypt(public_key_path: str, *, input_path: Optional[str] = None) -> bool:
    """Seal the input file (or stdin) for ``public_key_path`` and print it as base64."""
    plaintext = read_input(input_path)
    public_key = load_public_key(public_key_path)
    sealed = seal(plaintext, public_key)
    print(b64encode(sealed), flush=True)
    return True


def cmd_decrypt(public_key_path: str, private_key_path: str, *, input_path: Optional[str] = None) -> bool:
    """Open base64 input (file or stdin) with the given key pair and print the plaintext."""
    encoded = read_input(input_path)
    try:
        sealed = b64decode(encoded)
    except ValueError as exc:
        raise InputReadError(f"cannot decode input: {exc}") from exc
    public_key = load_public_key(public_key_path)
    private_key = load_private_key(private_key_path)
    _write_stdout(open_sealed(sealed, public_key, private_key))
    return True


def main(argv: List[str] | None = None):
    ap = _Parser(
        prog="crypta",
        description="Just another cryptographic tool",
        epilog="Encryption uses anonymous sealed boxes: the sender cannot be identified from the ciphertext.",
    )
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = ap.add_subparsers(dest="cmd", required=True)

    ap_genkey = sub.add_parser(
        "genkey",
        help="Generate a key pair",
        description="Generate a key pair and save it as FILENAME.pub and FILENAME.pvt",
    )
    ap_genkey.add_argument("filename", help="Base filename for the key pair")

    ap_encrypt = sub.add_parser(
        "encrypt",
        help="Encrypt input with the given public key",
        description="Encrypt input file or stdin with the given public key",
    )
    ap_encrypt.add_argument("-f", "--file", help="Input file path. Uses standard input if not provided")
    ap_encrypt.add_argument("-p", "--public-key", required=True, help="Public key file path for encrypting")

    ap_decrypt = sub.add_parser(
        "decrypt",
        help="Decrypt input with the given private and public keys",
        description="Decrypt base64 input file or stdin with the given private and public keys",
    )
    ap_decrypt.add_argument("-f", "--file", help="Base64 input file path. Uses standard input if not provided")
    ap_decrypt.add_argument("-k", "--private-key", required=True, help="Private key file path for decrypting")
    ap_decrypt.add_argument("-p", "--public-key", required=True, help="Public key file path for decrypting")

    args = ap.parse_args(argv)
    try:
        if args.cmd == "genkey":
            cmd_genkey(args.filename)
        elif args.cmd == "encrypt":
            cmd_encrypt(args.public_key, input_path=args.file)
        elif args.cmd == "decrypt":
            cmd_decrypt(args.public_key, args.private_key, input_path=args.file)
        else:
            raise RuntimeError("Unknown command")
    except (CryptaError, OSError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
