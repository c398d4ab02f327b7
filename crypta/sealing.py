from __future__ import annotations

"""Anonymous public-key encryption backed by libsodium sealed boxes.

``seal`` encrypts for a recipient public key using an ephemeral sender key
pair that is discarded after the call; ``open_sealed`` recovers the plaintext
with the recipient's key pair. Both are direct calls into PyNaCl, and the
only work done here is key length validation and error translation.
"""

from nacl.bindings import crypto_box_seal_open
from nacl.exceptions import CryptoError
from nacl.public import PublicKey, SealedBox

from .constants import KEY_SIZE, SEAL_OVERHEAD
from .errors import DecryptionError, EncryptionError, KeyFormatError

ENCRYPT_FAILED = "cannot encrypt the input with provided public key"
DECRYPT_FAILED = "cannot decrypt the input with provided key pair"


def _check_key(key: bytes, kind: str) -> None:
    if len(key) != KEY_SIZE:
        raise KeyFormatError(f"{kind} key must be {KEY_SIZE} bytes, got {len(key)}")


def seal(plaintext: bytes, public_key: bytes) -> bytes:
    """Seal ``plaintext`` so only the holder of ``public_key``'s private half can open it."""
    _check_key(public_key, "public")
    try:
        return SealedBox(PublicKey(public_key)).encrypt(plaintext)
    except CryptoError as exc:
        raise EncryptionError(ENCRYPT_FAILED) from exc


def open_sealed(sealed: bytes, public_key: bytes, private_key: bytes) -> bytes:
    """Open a sealed message with the recipient key pair.

    Any failure (tampered or truncated data, wrong private key, public key
    that does not belong to the recipient) raises DecryptionError with the
    same message.
    """
    _check_key(public_key, "public")
    _check_key(private_key, "private")
    if len(sealed) < SEAL_OVERHEAD:
        raise DecryptionError(DECRYPT_FAILED)
    try:
        return crypto_box_seal_open(sealed, public_key, private_key)
    except CryptoError:
        raise DecryptionError(DECRYPT_FAILED) from None
