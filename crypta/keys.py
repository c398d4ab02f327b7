from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from nacl.exceptions import CryptoError
from nacl.public import PrivateKey

from .codec import b64decode, b64encode
from .constants import (
    KEY_SIZE,
    PRIVATE_KEY_MODE,
    PRIVATE_KEY_SUFFIX,
    PUBLIC_KEY_MODE,
    PUBLIC_KEY_SUFFIX,
)
from .errors import (
    InputReadError,
    KeyExistsError,
    KeyFormatError,
    KeyGenerationError,
    KeyWriteError,
)


@dataclass(frozen=True)
class KeyPair:
    """A Curve25519 key pair as raw 32-byte strings."""

    public_key: bytes
    private_key: bytes

    def __repr__(self) -> str:
        # Keep private key material out of tracebacks and debug output.
        return f"KeyPair(public_key={b64encode(self.public_key)!r}, private_key=<redacted>)"


def generate_keypair() -> KeyPair:
    """Generate a fresh key pair from the system's secure random source."""
    try:
        sk = PrivateKey.generate()
    except (CryptoError, OSError) as exc:
        raise KeyGenerationError(f"cannot generate key pair: {exc}") from exc
    return KeyPair(public_key=bytes(sk.public_key), private_key=bytes(sk))


def keypair_paths(name: str) -> Tuple[str, str]:
    """Return ``(public_path, private_path)`` for a base filename."""
    return f"{name}{PUBLIC_KEY_SUFFIX}", f"{name}{PRIVATE_KEY_SUFFIX}"


def ensure_keypair_absent(name: str) -> None:
    """Raise KeyExistsError if either half of the key pair ``name`` exists on disk."""
    pub_path, pvt_path = keypair_paths(name)
    if os.path.lexists(pvt_path):
        raise KeyExistsError(f"private key file {pvt_path!r} already exists")
    if os.path.lexists(pub_path):
        raise KeyExistsError(f"public key file {pub_path!r} already exists")


def _write_new_file(path: str, data: bytes, mode: int) -> None:
    # O_EXCL: never truncate a key file that appeared after the existence check.
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, mode)
    with os.fdopen(fd, "wb") as fh:
        fh.write(data)


def write_keypair(
    name: str,
    pair: Optional[KeyPair] = None,
    *,
    announce: Optional[Callable[[str], None]] = None,
) -> Tuple[str, str]:
    """Persist a key pair as ``<name>.pub`` and ``<name>.pvt``.

    Existing files are checked before a key pair is generated, so existing key
    material is never touched. When ``pair`` is None a new one is generated.
    ``announce`` is called with a status line before each file is written.

    The two writes are not atomic together: if the private key cannot be
    written, the public key file stays behind and KeyWriteError is raised.

    Returns:
        The ``(public_path, private_path)`` that were written.
    """
    ensure_keypair_absent(name)
    if pair is None:
        pair = generate_keypair()
    pub_path, pvt_path = keypair_paths(name)

    if announce is not None:
        announce(f"Writing public key {pub_path!r}")
    try:
        _write_new_file(pub_path, b64encode(pair.public_key).encode("ascii"), PUBLIC_KEY_MODE)
    except OSError as exc:
        raise KeyWriteError(f"cannot write public key {pub_path!r}: {exc}") from exc

    if announce is not None:
        announce(f"Writing private key {pvt_path!r}")
    try:
        _write_new_file(pvt_path, b64encode(pair.private_key).encode("ascii"), PRIVATE_KEY_MODE)
    except OSError as exc:
        raise KeyWriteError(f"cannot write private key {pvt_path!r}: {exc}") from exc

    return pub_path, pvt_path


def decode_key(text: bytes | str, *, kind: str) -> bytes:
    """Decode base64 key text and insist on exactly KEY_SIZE raw bytes.

    Args:
        text: Base64 text as read from a key file.
        kind: ``"public"`` or ``"private"``; used in error messages.
    """
    try:
        raw = b64decode(text)
    except ValueError as exc:
        raise KeyFormatError(f"cannot decode {kind} key: {exc}") from exc
    if len(raw) != KEY_SIZE:
        raise KeyFormatError(f"cannot decode {kind} key: expected {KEY_SIZE} bytes, got {len(raw)}")
    return raw


def load_key(path: str, *, kind: str) -> bytes:
    """Read and decode a key file written by :func:`write_keypair`."""
    try:
        with open(path, "rb") as fh:
            text = fh.read()
    except OSError as exc:
        raise InputReadError(f"cannot read {kind} key file {path!r}: {exc}") from exc
    return decode_key(text, kind=kind)


def load_public_key(path: str) -> bytes:
    return load_key(path, kind="public")


def load_private_key(path: str) -> bytes:
    return load_key(path, kind="private")
