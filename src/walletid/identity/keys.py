# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Deterministic Ed25519 key derivation from a recovery phrase.

    phrase --BIP-39 PBKDF2-HMAC-SHA512--> seed (64 bytes)
    seed   --SHA-256-->                   private key (32-byte Ed25519 seed)
    private key --Ed25519-->              public key (32 bytes)

The private key is a hash of the whole seed rather than a truncation of it,
so every seed bit contributes uniformly. The same phrase always yields the
same key pair; that is what makes the phrase a recovery root.

Purpose-specific keys (session JWTs, recovery) are split off the seed with
HKDF so that none of them can be used to recompute the main identity key.
"""

from __future__ import annotations

import enum
import hashlib
import hmac
import logging

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.kdf.hkdf import HKDF
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from walletid.core.exceptions import CryptoOperationFailure, InvalidMnemonicError, SessionStateError
from walletid.identity.mnemonic import mnemonic_to_seed, validate_mnemonic, word_count

logger = logging.getLogger(__name__)

KEY_LENGTH = 32

HKDF_SALT = b"walletid-hkdf-v1"


class KeyPurpose(enum.IntEnum):
    """Derivation paths for keys split off the master seed."""

    ENCRYPTION = 0
    JWT_SIGNING = 1
    RECOVERY = 2


KEY_DERIVATION_PATHS = {purpose.name: purpose.value for purpose in KeyPurpose}


class KeyPair:
    """An Ed25519 key pair whose private half can be wiped.

    The private key lives in a mutable buffer so :meth:`wipe` can zero it
    in place. Copies handed out through :attr:`private_key` are ordinary
    ``bytes`` owned by the caller.
    """

    __slots__ = ("_private", "public_key")

    def __init__(self, private_key: bytes, public_key: bytes) -> None:
        if len(private_key) != KEY_LENGTH:
            raise ValueError(f"private key must be {KEY_LENGTH} bytes")
        if len(public_key) != KEY_LENGTH:
            raise ValueError(f"public key must be {KEY_LENGTH} bytes")
        self._private: bytearray | None = bytearray(private_key)
        self.public_key = bytes(public_key)

    @property
    def private_key(self) -> bytes:
        if self._private is None:
            raise SessionStateError("Private key has been wiped", state="wiped")
        return bytes(self._private)

    @property
    def public_key_hex(self) -> str:
        return self.public_key.hex()

    @property
    def is_wiped(self) -> bool:
        return self._private is None

    def signing_key(self) -> Ed25519PrivateKey:
        """Return a ``cryptography`` private key object for this pair."""
        return _load_private_key(self.private_key)

    def wipe(self) -> None:
        """Zero the private key buffer and drop it. Idempotent."""
        if self._private is not None:
            for i in range(len(self._private)):
                self._private[i] = 0
            self._private = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyPair):
            return NotImplemented
        if self.is_wiped or other.is_wiped:
            return False
        return hmac.compare_digest(self.private_key, other.private_key) and self.public_key == other.public_key

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        state = "wiped" if self.is_wiped else "live"
        return f"KeyPair(public_key={self.public_key_hex!r}, private_key=<{state}>)"


def _load_private_key(private_key: bytes) -> Ed25519PrivateKey:
    try:
        return Ed25519PrivateKey.from_private_bytes(private_key)
    except UnsupportedAlgorithm as e:
        raise CryptoOperationFailure("Ed25519 is not supported by this backend", operation="ed25519") from e


def public_key_from_private(private_key: bytes) -> bytes:
    """Compute the raw 32-byte Ed25519 public key for a 32-byte private key."""
    if len(private_key) != KEY_LENGTH:
        raise ValueError(f"private key must be {KEY_LENGTH} bytes")
    return _load_private_key(private_key).public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)


def _require_valid(mnemonic: str) -> None:
    if not validate_mnemonic(mnemonic):
        raise InvalidMnemonicError(word_count=word_count(mnemonic))


def derive_seed(mnemonic: str) -> bytes:
    """Expand a validated phrase into its 64-byte seed.

    Raises:
        InvalidMnemonicError: If the phrase fails validation.
    """
    _require_valid(mnemonic)
    return mnemonic_to_seed(mnemonic)


def key_pair_from_private(private_key: bytes) -> KeyPair:
    return KeyPair(private_key, public_key_from_private(private_key))


def derive_keys_from_mnemonic(mnemonic: str) -> KeyPair:
    """Derive the identity key pair for a recovery phrase.

    Raises:
        InvalidMnemonicError: If the phrase fails validation.
        CryptoOperationFailure: If Ed25519 is unavailable.
    """
    seed = bytearray(derive_seed(mnemonic))
    try:
        private_key = hashlib.sha256(seed).digest()
    finally:
        seed[:] = bytes(len(seed))
    keys = key_pair_from_private(private_key)
    logger.debug("Derived identity key %s", keys.public_key_hex[:16])
    return keys


def derive_purpose_key(seed: bytes, purpose: KeyPurpose, length: int = KEY_LENGTH) -> bytes:
    """HKDF-SHA256 sub-key of ``seed`` for a single purpose.

    The info string binds both the purpose name and its path index, so two
    purposes never share output.
    """
    info = f"walletid:{purpose.name.lower().replace('_', '-')}:{int(purpose)}".encode()
    return HKDF(algorithm=hashes.SHA256(), length=length, salt=HKDF_SALT, info=info).derive(seed)


def derive_jwt_signing_key(mnemonic: str) -> KeyPair:
    """Derive the Ed25519 key pair used to sign session JWTs.

    Isolated from the identity key: leaking it does not expose the identity
    key or the vault.

    Raises:
        InvalidMnemonicError: If the phrase fails validation.
    """
    seed = derive_seed(mnemonic)
    return key_pair_from_private(derive_purpose_key(seed, KeyPurpose.JWT_SIGNING))


__all__ = [
    "KEY_DERIVATION_PATHS",
    "KEY_LENGTH",
    "KeyPair",
    "KeyPurpose",
    "derive_jwt_signing_key",
    "derive_keys_from_mnemonic",
    "derive_purpose_key",
    "derive_seed",
    "key_pair_from_private",
    "public_key_from_private",
]
