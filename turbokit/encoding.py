"""Base64 helpers: the standard alphabet with padding and the URL-safe alphabet without."""

from __future__ import annotations

import base64
import string

_URL_SAFE_ALPHABET = frozenset((string.ascii_letters + string.digits + "-_").encode("ascii"))


def _as_bytes(value: str | bytes | bytearray | memoryview) -> bytes:
    if isinstance(value, str):
        return value.encode("ascii")
    return bytes(value)


def encode(data: bytes | bytearray | memoryview | str) -> str:
    """Encode bytes with the standard alphabet ('+', '/') and '=' padding."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64.b64encode(bytes(data)).decode("ascii")


def decode(text: str | bytes) -> bytes:
    """Decode standard, padded base64.

    Raises ValueError on characters outside the alphabet, wrong padding or
    non-canonical trailing bits.
    """
    raw = _as_bytes(text)
    decoded = base64.b64decode(raw, validate=True)
    if base64.b64encode(decoded) != raw:
        raise ValueError("invalid base64: non-canonical encoding")
    return decoded


def encode_url_safe(data: bytes | bytearray | memoryview | str) -> str:
    """Encode bytes with the URL-safe alphabet ('-', '_') and no padding."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64.urlsafe_b64encode(bytes(data)).rstrip(b"=").decode("ascii")


def decode_url_safe(text: str | bytes) -> bytes:
    """Decode URL-safe base64 that carries no padding.

    Raises ValueError on padding, characters outside the alphabet, an
    impossible length or non-canonical trailing bits.
    """
    raw = _as_bytes(text)
    for offset, byte in enumerate(raw):
        if byte not in _URL_SAFE_ALPHABET:
            raise ValueError(f"invalid base64 symbol {chr(byte)!r} at offset {offset}")
    if len(raw) % 4 == 1:
        raise ValueError("invalid base64 length")
    padded = raw + b"=" * (-len(raw) % 4)
    decoded = base64.urlsafe_b64decode(padded)
    if base64.urlsafe_b64encode(decoded).rstrip(b"=") != raw:
        raise ValueError("invalid base64: non-canonical encoding")
    return decoded