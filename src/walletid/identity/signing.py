# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Ed25519 message signing and verification.

Signatures cover the exact bytes given; canonicalization is the caller's
job (see :mod:`walletid.identity.grants`). Verification answers a boolean
and never raises: a malformed key, a malformed signature and a forged
signature are all simply ``False``.
"""

from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

from walletid.identity.keys import KEY_LENGTH, _load_private_key

SIGNATURE_LENGTH = 64


def _to_bytes(message: str | bytes) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    return bytes(message)


def _from_hex_or_bytes(value: str | bytes) -> bytes | None:
    if isinstance(value, str):
        try:
            return bytes.fromhex(value)
        except ValueError:
            return None
    if isinstance(value, bytes | bytearray | memoryview):
        return bytes(value)
    return None


def sign_bytes(private_key: bytes, message: bytes) -> bytes:
    """Sign ``message`` and return the raw 64-byte signature.

    Raises:
        ValueError: If ``private_key`` is not 32 bytes.
    """
    if len(private_key) != KEY_LENGTH:
        raise ValueError(f"private key must be {KEY_LENGTH} bytes")
    return _load_private_key(bytes(private_key)).sign(bytes(message))


def sign_message(private_key: bytes, message: str | bytes) -> str:
    """Sign a message (str is UTF-8 encoded) and return the signature as hex."""
    return sign_bytes(private_key, _to_bytes(message)).hex()


def verify_bytes(public_key: bytes, message: bytes, signature: bytes) -> bool:
    """Check a raw signature against a raw public key. Never raises."""
    if not all(isinstance(value, bytes | bytearray | memoryview) for value in (public_key, message, signature)):
        return False
    if len(public_key) != KEY_LENGTH or len(signature) != SIGNATURE_LENGTH:
        return False
    try:
        Ed25519PublicKey.from_public_bytes(bytes(public_key)).verify(bytes(signature), bytes(message))
    except (InvalidSignature, TypeError, ValueError):
        return False
    return True


def verify_signature(public_key: str | bytes, message: str | bytes, signature: str | bytes) -> bool:
    """Verify a signature.

    Args:
        public_key: Raw 32 bytes or a 64-character hex string.
        message: Signed payload; str is UTF-8 encoded.
        signature: Raw 64 bytes or a 128-character hex string.

    Returns:
        True only if the signature is valid for exactly this key and message.
    """
    pub = _from_hex_or_bytes(public_key)
    sig = _from_hex_or_bytes(signature)
    if pub is None or sig is None:
        return False
    if not isinstance(message, str | bytes | bytearray | memoryview):
        return False
    return verify_bytes(pub, _to_bytes(message), sig)


__all__ = [
    "SIGNATURE_LENGTH",
    "sign_bytes",
    "sign_message",
    "verify_bytes",
    "verify_signature",
]
