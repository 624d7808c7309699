# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""EdDSA session tokens (JWT) signed with the wallet's JWT key.

Tokens are signed with the purpose-specific key from
:func:`walletid.identity.keys.derive_jwt_signing_key`, never with the
identity key itself. Only ``EdDSA`` is accepted on verification.
"""

from __future__ import annotations

import logging
import time
import uuid
from typing import Any

import jwt
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

from walletid.core.config import get_config
from walletid.core.exceptions import TokenError, TokenExpiredError
from walletid.identity.keys import KEY_LENGTH, _load_private_key

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "EdDSA"


def create_jwt(claims: dict[str, Any], private_key: bytes) -> str:
    """Sign ``claims`` as a compact EdDSA JWT.

    ``iat`` and ``jti`` are filled in when absent; ``exp`` defaults to
    ``iat`` + WALLETID_JWT_TTL.
    """
    payload = dict(claims)
    issued_at = int(time.time())
    payload.setdefault("iat", issued_at)
    payload.setdefault("jti", str(uuid.uuid4()))
    payload.setdefault("exp", payload["iat"] + get_config().jwt_default_ttl_seconds)

    token = jwt.encode(
        payload,
        _load_private_key(bytes(private_key)),
        algorithm=JWT_ALGORITHM,
        headers={"typ": "JWT"},
    )
    logger.debug("Issued JWT %s", payload["jti"])
    return token


def _public_key(public_key: str | bytes) -> Ed25519PublicKey:
    raw = bytes.fromhex(public_key) if isinstance(public_key, str) else bytes(public_key)
    if len(raw) != KEY_LENGTH:
        raise TokenError(f"JWT public key must be {KEY_LENGTH} bytes")
    return Ed25519PublicKey.from_public_bytes(raw)


def verify_jwt(token: str, public_key: str | bytes, leeway: int = 0) -> dict[str, Any]:
    """Verify an EdDSA JWT and return its claims.

    Raises:
        TokenError: ``Invalid JWT format``, ``Unsupported algorithm`` or
            ``Invalid JWT signature``.
        TokenExpiredError: If the ``exp`` claim has passed.
    """
    if not isinstance(token, str) or token.count(".") != 2:
        raise TokenError("Invalid JWT format")

    try:
        header = jwt.get_unverified_header(token)
    except jwt.DecodeError as e:
        raise TokenError("Invalid JWT format") from e

    algorithm = header.get("alg")
    if algorithm != JWT_ALGORITHM:
        raise TokenError(f"Unsupported algorithm: {algorithm}")

    try:
        key = _public_key(public_key)
    except ValueError as e:
        raise TokenError("Invalid JWT public key") from e

    try:
        return jwt.decode(
            token,
            key,
            algorithms=[JWT_ALGORITHM],
            leeway=leeway,
            options={"require": ["exp", "iat"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise TokenExpiredError("JWT has expired") from e
    except jwt.InvalidSignatureError as e:
        raise TokenError("Invalid JWT signature") from e
    except jwt.DecodeError as e:
        raise TokenError("Invalid JWT format") from e
    except jwt.InvalidTokenError as e:
        raise TokenError(f"Invalid JWT: {e}") from e


__all__ = ["JWT_ALGORITHM", "create_jwt", "verify_jwt"]
