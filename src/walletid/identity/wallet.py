# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Shareable wallet identity and its JSON export format.

A :class:`WalletIdentity` is the only artifact meant to leave the device.
It carries the DID, the hex public key and a creation timestamp; the
private key is not a field, so no export can contain it.
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Any

from walletid.core.exceptions import InvalidFormatError
from walletid.identity.did import create_did_from_public_key, public_key_from_did
from walletid.identity.keys import KeyPair, derive_keys_from_mnemonic

logger = logging.getLogger(__name__)

EXPORT_FIELDS = ("did", "publicKey", "createdAt")


def now_ms() -> int:
    """Current UNIX time in milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass(frozen=True)
class WalletIdentity:
    """Public identity derived from a key pair.

    Attributes:
        did: ``did:key:z…`` identifier; a pure function of ``public_key``.
        public_key: Lowercase hex of the 32-byte Ed25519 public key.
        created_at: Creation time, UNIX milliseconds.
    """

    did: str
    public_key: str
    created_at: int

    @property
    def public_key_bytes(self) -> bytes:
        return bytes.fromhex(self.public_key)

    @classmethod
    def from_keys(cls, keys: KeyPair, created_at: int | None = None) -> WalletIdentity:
        return cls(
            did=create_did_from_public_key(keys.public_key),
            public_key=keys.public_key_hex,
            created_at=now_ms() if created_at is None else created_at,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "did": self.did,
            "publicKey": self.public_key,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], verify_did: bool = True) -> WalletIdentity:
        """Build an identity from its wire form.

        Raises:
            InvalidFormatError: If a field is missing or has the wrong type, or
                (with ``verify_did``) the DID does not encode ``publicKey``.
        """
        if not isinstance(data, dict):
            raise InvalidFormatError("Invalid identity format: expected a JSON object")

        for name in EXPORT_FIELDS:
            if not data.get(name):
                raise InvalidFormatError(f"Invalid identity format: missing '{name}'", field=name)

        did, public_key, created_at = data["did"], data["publicKey"], data["createdAt"]
        if not isinstance(did, str):
            raise InvalidFormatError("Invalid identity format: 'did' must be a string", field="did", value=did)
        if not isinstance(public_key, str):
            raise InvalidFormatError(
                "Invalid identity format: 'publicKey' must be a hex string", field="publicKey", value=public_key
            )
        if isinstance(created_at, bool) or not isinstance(created_at, int | float):
            raise InvalidFormatError(
                "Invalid identity format: 'createdAt' must be a number", field="createdAt", value=created_at
            )

        if verify_did:
            try:
                key_bytes = bytes.fromhex(public_key)
            except ValueError as e:
                raise InvalidFormatError(
                    "Invalid identity format: 'publicKey' is not hex", field="publicKey", value=public_key
                ) from e
            if public_key_from_did(did) != key_bytes:
                raise InvalidFormatError("Invalid identity format: DID does not match publicKey", field="did", value=did)

        if isinstance(created_at, float) and created_at.is_integer():
            created_at = int(created_at)
        return cls(did=did, public_key=public_key.lower(), created_at=created_at)


def create_wallet_identity(mnemonic: str) -> tuple[WalletIdentity, KeyPair]:
    """Derive keys from a phrase and wrap the public half as an identity.

    Raises:
        InvalidMnemonicError: If the phrase fails validation.
    """
    keys = derive_keys_from_mnemonic(mnemonic)
    identity = WalletIdentity.from_keys(keys)
    logger.info("Created wallet identity %s", identity.did)
    return identity, keys


def export_identity(identity: WalletIdentity) -> str:
    """Serialize an identity to JSON with exactly ``did``, ``publicKey``, ``createdAt``."""
    return json.dumps(identity.to_dict(), indent=2)


def import_identity(payload: str | bytes, verify_did: bool = True) -> WalletIdentity:
    """Parse an exported identity.

    Raises:
        InvalidFormatError: If the payload is not JSON or a field is missing.
    """
    try:
        data = json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError, TypeError) as e:
        raise InvalidFormatError(f"Invalid identity format: {e}") from e
    return WalletIdentity.from_dict(data, verify_did=verify_did)


__all__ = [
    "EXPORT_FIELDS",
    "WalletIdentity",
    "create_wallet_identity",
    "export_identity",
    "import_identity",
    "now_ms",
]
