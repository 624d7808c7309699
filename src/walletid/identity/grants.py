# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Signed access grants.

An access grant states that ``grantee`` may exercise ``permissions`` until
``expiresAt``. The issuer signs a canonical encoding of the grant:

    {"id":…,"grantee":…,"permissions":[…],"expiresAt":…}

- Field order is fixed as above; keys are not sorted.
- ``permissions`` is de-duplicated and sorted ascending, so the caller's
  ordering never reaches the signature.
- Compact separators, UTF-8, non-ASCII left unescaped.

Grants are immutable once signed. Revocation is external: a grant lapses
at ``expiresAt`` or is listed in a revocation registry; it is never edited.
"""

from __future__ import annotations

import json
import logging
import uuid
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from walletid.core.config import get_config
from walletid.core.exceptions import InvalidFormatError
from walletid.identity.did import DID_KEY_PREFIX, public_key_from_did
from walletid.identity.signing import sign_bytes, verify_signature
from walletid.identity.wallet import now_ms

logger = logging.getLogger(__name__)

GRANT_ID_PREFIX = "grant_"


def _require_utf8(value: str, field_name: str) -> None:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidFormatError(f"{field_name} is not valid UTF-8 text", field=field_name) from e


def _normalize_permissions(permissions: Iterable[str]) -> tuple[str, ...]:
    if isinstance(permissions, str):
        raise InvalidFormatError("permissions must be a collection of strings, not a string", field="permissions")
    items = list(permissions)
    for perm in items:
        if not isinstance(perm, str) or not perm:
            raise InvalidFormatError("each permission must be a non-empty string", field="permissions", value=perm)
        _require_utf8(perm, "permissions")
    if isinstance(permissions, set | frozenset):
        items.sort()
    return tuple(items)


def _normalize_expiry(expires_at: Any) -> int:
    if isinstance(expires_at, bool) or not isinstance(expires_at, int | float):
        raise InvalidFormatError("expiresAt must be a number of milliseconds", field="expiresAt", value=expires_at)
    if isinstance(expires_at, float):
        if not expires_at.is_integer():
            raise InvalidFormatError("expiresAt must be a whole number of milliseconds", field="expiresAt", value=expires_at)
        return int(expires_at)
    return expires_at


def canonical_permissions(permissions: Iterable[str]) -> list[str]:
    """De-duplicated, ascending permission list used in the signed payload."""
    return sorted(set(permissions))


@dataclass(frozen=True)
class GrantDraft:
    """An access grant before signing.

    Attributes:
        id: Unique grant identifier.
        grantee: DID or other identifier of the party receiving access.
        permissions: Granted permissions. Lists and tuples keep the caller's
            order; sets have no order and are stored sorted. The signed
            payload always uses the sorted, de-duplicated form.
        expires_at: Expiry, UNIX milliseconds.
    """

    id: str
    grantee: str
    permissions: tuple[str, ...]
    expires_at: int

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id:
            raise InvalidFormatError("grant id must be a non-empty string", field="id", value=self.id)
        if not isinstance(self.grantee, str) or not self.grantee:
            raise InvalidFormatError("grantee must be a non-empty string", field="grantee", value=self.grantee)
        _require_utf8(self.id, "id")
        _require_utf8(self.grantee, "grantee")
        object.__setattr__(self, "permissions", _normalize_permissions(self.permissions))
        object.__setattr__(self, "expires_at", _normalize_expiry(self.expires_at))

    @classmethod
    def create(
        cls,
        grantee: str,
        permissions: Iterable[str],
        ttl_seconds: int | None = None,
        grant_id: str | None = None,
    ) -> GrantDraft:
        """Draft a grant expiring ``ttl_seconds`` from now (default WALLETID_GRANT_TTL)."""
        ttl = get_config().default_grant_ttl_seconds if ttl_seconds is None else ttl_seconds
        return cls(
            id=grant_id or f"{GRANT_ID_PREFIX}{uuid.uuid4().hex}",
            grantee=grantee,
            permissions=tuple(permissions),
            expires_at=now_ms() + ttl * 1000,
        )

    def payload_bytes(self) -> bytes:
        """Canonical bytes covered by the issuer's signature."""
        payload = {
            "id": self.id,
            "grantee": self.grantee,
            "permissions": canonical_permissions(self.permissions),
            "expiresAt": self.expires_at,
        }
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


@dataclass(frozen=True)
class AccessGrant(GrantDraft):
    """A signed access grant.

    Attributes:
        signature: Hex Ed25519 signature over :meth:`payload_bytes`.
    """

    signature: str = field(default="")

    def __post_init__(self) -> None:
        super().__post_init__()
        if not isinstance(self.signature, str) or not self.signature:
            raise InvalidFormatError("grant signature must be a non-empty hex string", field="signature")

    def is_expired(self, now: int | None = None) -> bool:
        """True once ``now`` (UNIX ms, default current time) reaches ``expires_at``."""
        return (now_ms() if now is None else now) >= self.expires_at

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "grantee": self.grantee,
            "permissions": list(self.permissions),
            "expiresAt": self.expires_at,
            "signature": self.signature,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AccessGrant:
        """Parse the wire form.

        Raises:
            InvalidFormatError: If a field is missing or malformed.
        """
        if not isinstance(data, dict):
            raise InvalidFormatError("Invalid grant format: expected a JSON object")
        for name in ("id", "grantee", "permissions", "expiresAt", "signature"):
            if name not in data:
                raise InvalidFormatError(f"Invalid grant format: missing '{name}'", field=name)
        permissions = data["permissions"]
        if not isinstance(permissions, list):
            raise InvalidFormatError("Invalid grant format: 'permissions' must be a list", field="permissions")
        return cls(
            id=data["id"],
            grantee=data["grantee"],
            permissions=tuple(permissions),
            expires_at=data["expiresAt"],
            signature=data["signature"],
        )

    @classmethod
    def from_json(cls, payload: str | bytes) -> AccessGrant:
        try:
            data = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError, TypeError) as e:
            raise InvalidFormatError(f"Invalid grant format: {e}") from e
        return cls.from_dict(data)


def canonical_grant_payload(draft: GrantDraft) -> bytes:
    """Return the canonical signing payload of a grant or draft."""
    return draft.payload_bytes()


def sign_access_grant(draft: GrantDraft, private_key: bytes) -> AccessGrant:
    """Sign a draft with the issuer's private key.

    The returned grant keeps the draft's fields as given (including the
    caller's permission order) and adds the hex signature.
    """
    signature = sign_bytes(private_key, draft.payload_bytes()).hex()
    grant = AccessGrant(
        id=draft.id,
        grantee=draft.grantee,
        permissions=draft.permissions,
        expires_at=draft.expires_at,
        signature=signature,
    )
    logger.info(
        "Signed access grant %s",
        grant.id,
        extra={"extra_data": {"grantee": grant.grantee, "permissions": canonical_permissions(grant.permissions)}},
    )
    return grant


def verify_access_grant(grant: AccessGrant, issuer: str | bytes) -> bool:
    """Check a grant's signature against its issuer.

    Args:
        grant: The signed grant.
        issuer: Raw public key, hex public key, or the issuer's did:key.

    Returns:
        True only if the signature covers this grant's canonical payload.
        Expiry is not checked here; see :meth:`AccessGrant.is_expired`.
    """
    if isinstance(issuer, str) and issuer.startswith(DID_KEY_PREFIX):
        try:
            issuer = public_key_from_did(issuer)
        except InvalidFormatError:
            return False
    try:
        payload = grant.payload_bytes()
    except UnicodeEncodeError:
        return False
    return verify_signature(issuer, payload, grant.signature)


__all__ = [
    "GRANT_ID_PREFIX",
    "AccessGrant",
    "GrantDraft",
    "canonical_grant_payload",
    "canonical_permissions",
    "sign_access_grant",
    "verify_access_grant",
]
