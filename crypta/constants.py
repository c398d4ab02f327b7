from __future__ import annotations

# Curve25519 keys (public and private) are 32 raw bytes
KEY_SIZE = 32

# Ephemeral public key + Poly1305 tag prepended to every sealed message
SEAL_OVERHEAD = 48

PUBLIC_KEY_SUFFIX = ".pub"
PRIVATE_KEY_SUFFIX = ".pvt"

PUBLIC_KEY_MODE = 0o644
PRIVATE_KEY_MODE = 0o600
