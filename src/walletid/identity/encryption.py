# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Two-factor vault key derivation.

    key material = private_key || utf8(password)
    salt         = SHA-256(private_key)
    vault key    = PBKDF2-HMAC(key material, salt, iterations, 32 bytes)

Neither the recovery phrase nor the password alone reproduces the vault
key. The salt depends only on the private key, so the same pair of factors
always yields the same key and no salt has to be stored beside the vault.
A wrong password is not detected here; it produces a different key and
decryption fails later.
"""

from __future__ import annotations

import hashlib
import logging

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from walletid.core.config import get_config
from walletid.core.exceptions import CryptoOperationFailure
from walletid.identity.keys import KEY_LENGTH

logger = logging.getLogger(__name__)

VAULT_KEY_LENGTH = 32

_HASHES: dict[str, type[hashes.HashAlgorithm]] = {
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
}


def derive_encryption_key(private_key: bytes, password: str) -> bytes:
    """Derive the 32-byte symmetric vault key.

    Iteration count and hash come from configuration
    (WALLETID_PBKDF2_ITERATIONS, WALLETID_PBKDF2_HASH).

    Raises:
        ValueError: If ``private_key`` is not 32 bytes.
        CryptoOperationFailure: If the configured hash is unavailable.
    """
    if len(private_key) != KEY_LENGTH:
        raise ValueError(f"private key must be {KEY_LENGTH} bytes")

    config = get_config()
    algorithm = _HASHES.get(config.pbkdf2_hash)
    if algorithm is None:
        raise CryptoOperationFailure(f"Unsupported PBKDF2 hash: {config.pbkdf2_hash}", operation="pbkdf2")

    salt = hashlib.sha256(private_key).digest()
    material = bytearray(private_key) + password.encode("utf-8")
    try:
        kdf = PBKDF2HMAC(
            algorithm=algorithm(),
            length=VAULT_KEY_LENGTH,
            salt=salt,
            iterations=config.pbkdf2_iterations,
        )
        key = kdf.derive(bytes(material))
    except UnsupportedAlgorithm as e:
        raise CryptoOperationFailure("PBKDF2 is not supported by this backend", operation="pbkdf2") from e
    finally:
        material[:] = bytes(len(material))

    logger.debug("Derived vault key (pbkdf2-%s, %d iterations)", config.pbkdf2_hash, config.pbkdf2_iterations)
    return key


__all__ = ["VAULT_KEY_LENGTH", "derive_encryption_key"]
