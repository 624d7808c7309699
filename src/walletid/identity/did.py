# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""did:key identifiers for Ed25519 public keys.

Format:
    did:key:z<base58btc(0xed 0x01 || public_key)>

Examples:
    did:key:z6MkkNpjgBvjBJvXucK24zCYcGceaXSaovQnRBDqbsNDvs1c

The leading ``z`` is the multibase tag for base58btc and ``0xed01`` is the
multicodec varint for an Ed25519 public key, so every Ed25519 did:key
begins with ``z6Mk``.

Earlier releases wrote the prefixed key as lowercase hex after the ``z``
(``did:key:zed01…``). Those identifiers are still decoded. They cannot
collide with base58btc ones because ``0`` is outside the base58 alphabet,
and every hex form contains the ``0`` of ``ed01``.
"""

from __future__ import annotations

import re

from walletid.core.config import get_config
from walletid.core.exceptions import InvalidFormatError

# =============================================================================
# CONSTANTS
# =============================================================================

DID_KEY_PREFIX = "did:key:"

# Multibase prefix for base58btc encoding
MULTIBASE_BASE58BTC = "z"

# Multicodec prefix for Ed25519 public key (0xed01)
MULTICODEC_ED25519_PUB = bytes([0xED, 0x01])

ED25519_PUBLIC_KEY_LENGTH = 32

_LEGACY_HEX_RE = re.compile(r"^ed01[0-9a-f]{64}$")


# =============================================================================
# BASE58 ENCODING (bitcoin alphabet)
# =============================================================================

BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_BASE58_INDEX = {char: i for i, char in enumerate(BASE58_ALPHABET)}


def base58_encode(data: bytes) -> str:
    """Encode bytes to base58 string."""
    num = int.from_bytes(data, "big")
    result = ""
    while num > 0:
        num, remainder = divmod(num, 58)
        result = BASE58_ALPHABET[remainder] + result

    # Leading zero bytes map to leading '1's
    for byte in data:
        if byte == 0:
            result = BASE58_ALPHABET[0] + result
        else:
            break

    return result


def base58_decode(string: str) -> bytes:
    """Decode base58 string to bytes.

    Raises:
        ValueError: On a character outside the base58 alphabet.
    """
    num = 0
    for char in string:
        try:
            num = num * 58 + _BASE58_INDEX[char]
        except KeyError:
            raise ValueError(f"Invalid base58 character: {char!r}") from None

    result = bytearray()
    while num > 0:
        num, remainder = divmod(num, 256)
        result.insert(0, remainder)

    # Leading '1's map back to zero bytes
    for char in string:
        if char == BASE58_ALPHABET[0]:
            result.insert(0, 0)
        else:
            break

    return bytes(result)


def multibase_encode(data: bytes) -> str:
    """Encode bytes to multibase (base58btc)."""
    return MULTIBASE_BASE58BTC + base58_encode(data)


def multibase_decode(string: str) -> bytes:
    """Decode a base58btc multibase string to bytes.

    Raises:
        ValueError: If the multibase tag is not ``z`` or the payload is not base58.
    """
    if not string.startswith(MULTIBASE_BASE58BTC):
        raise ValueError(f"Unsupported multibase encoding: {string[:1]!r}")
    return base58_decode(string[1:])


# =============================================================================
# DID
# =============================================================================


def create_did_from_public_key(public_key: bytes, encoding: str | None = None) -> str:
    """Encode a raw Ed25519 public key as a did:key identifier.

    Args:
        public_key: 32 raw public key bytes.
        encoding: ``"base58btc"`` or ``"hex"``; defaults to WALLETID_DID_ENCODING.

    Raises:
        ValueError: If ``public_key`` is not 32 bytes or the encoding is unknown.
    """
    if len(public_key) != ED25519_PUBLIC_KEY_LENGTH:
        raise ValueError(f"Ed25519 public key must be {ED25519_PUBLIC_KEY_LENGTH} bytes, got {len(public_key)}")

    encoding = encoding or get_config().did_encoding
    prefixed = MULTICODEC_ED25519_PUB + bytes(public_key)
    if encoding == "base58btc":
        return DID_KEY_PREFIX + multibase_encode(prefixed)
    if encoding == "hex":
        return DID_KEY_PREFIX + MULTIBASE_BASE58BTC + prefixed.hex()
    raise ValueError(f"Unknown DID encoding: {encoding}")


def public_key_from_did(did: str) -> bytes:
    """Recover the raw Ed25519 public key from a did:key identifier.

    Accepts both the base58btc form and the legacy hex form.

    Raises:
        InvalidFormatError: If the prefix, multicodec tag or payload is invalid.
    """
    if not isinstance(did, str) or not did.startswith(DID_KEY_PREFIX + MULTIBASE_BASE58BTC):
        raise InvalidFormatError(f"DID must start with '{DID_KEY_PREFIX}{MULTIBASE_BASE58BTC}'", field="did", value=did)

    encoded = did[len(DID_KEY_PREFIX) :]
    if _LEGACY_HEX_RE.match(encoded[1:]):
        decoded = bytes.fromhex(encoded[1:])
    else:
        try:
            decoded = multibase_decode(encoded)
        except ValueError as e:
            raise InvalidFormatError(f"Undecodable did:key payload: {e}", field="did", value=did) from e

    if decoded[:2] != MULTICODEC_ED25519_PUB:
        raise InvalidFormatError("did:key is not an Ed25519 public key (missing 0xed01 tag)", field="did", value=did)

    public_key = decoded[2:]
    if len(public_key) != ED25519_PUBLIC_KEY_LENGTH:
        raise InvalidFormatError(
            f"did:key carries a {len(public_key)}-byte key, expected {ED25519_PUBLIC_KEY_LENGTH}",
            field="did",
            value=did,
        )
    return public_key


def is_did_key(value: str) -> bool:
    """True if ``value`` decodes to an Ed25519 did:key."""
    try:
        public_key_from_did(value)
    except InvalidFormatError:
        return False
    return True


__all__ = [
    "BASE58_ALPHABET",
    "DID_KEY_PREFIX",
    "MULTIBASE_BASE58BTC",
    "MULTICODEC_ED25519_PUB",
    "base58_decode",
    "base58_encode",
    "create_did_from_public_key",
    "is_did_key",
    "multibase_decode",
    "multibase_encode",
    "public_key_from_did",
]
