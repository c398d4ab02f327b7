from __future__ import annotations

import base64
import binascii
from typing import Union

_LINE_BREAKS = b"\r\n"


def b64encode(data: bytes) -> str:
    """Encode raw bytes as standard-alphabet, padded base64 text."""
    return base64.b64encode(data).decode("ascii")


def b64decode(text: Union[str, bytes]) -> bytes:
    """Strictly decode standard-alphabet, padded base64.

    Line breaks anywhere and whitespace around the text are ignored (key files end
    with a newline, and pasted ciphertext may be wrapped). Any other character,
    including interior spaces or tabs, or bad padding raises ValueError.
    """
    if isinstance(text, str):
        try:
            text = text.encode("ascii")
        except UnicodeEncodeError:
            raise ValueError("illegal non-ASCII character in base64 data") from None
    compact = bytes(b for b in text.strip() if b not in _LINE_BREAKS)
    try:
        return base64.b64decode(compact, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"illegal base64 data: {exc}") from None
