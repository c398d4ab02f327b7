"""
Crypta — key pairs and anonymous public-key encryption from the command line.

Features:

- Curve25519 key pair generation, stored as base64 ``.pub``/``.pvt`` files.
- Anonymous sealing (libsodium sealed boxes via PyNaCl): the sender key is
  ephemeral, so ciphertext reveals nothing about who produced it.
- Authenticated opening: tampered input or the wrong key pair fails outright
  with a single generic error.

All cryptography is delegated to libsodium; this package only reads inputs,
validates keys, and encodes results.
"""

__version__ = "0.1"

__all__ = [
    "constants",
    "codec",
    "keys",
    "sealing",
    "inputs",
    "cli",
    "errors",
]

# Importable programmatic API is available via crypta.keys/crypta.sealing and
# the CLI functions in crypta.cli (cmd_genkey/cmd_encrypt/cmd_decrypt).
