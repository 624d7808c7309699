# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Storage collaborator interface for publishing identities.

Content-addressed storage (an IPFS pinning service in production) is an
external collaborator. walletid only depends on the two capabilities in
:class:`StorageProvider`. Credentials are checked when a provider is built,
not when the first upload fails.
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from walletid.core.config import get_config
from walletid.core.exceptions import StorageError
from walletid.identity.did import multibase_encode
from walletid.identity.wallet import WalletIdentity, export_identity

logger = logging.getLogger(__name__)


@runtime_checkable
class StorageProvider(Protocol):
    """Abstract content-addressed storage backend."""

    def upload(self, data: bytes, name: str) -> str: ...
    def get_gateway_url(self, cid: str) -> str: ...


@dataclass(frozen=True)
class StorageCredentials:
    """Credentials for a pinning service: a bearer JWT, or an API key and secret.

    Raises:
        StorageError: At construction, if neither form is complete.
    """

    jwt: str | None = None
    api_key: str | None = None
    api_secret: str | None = None

    def __post_init__(self) -> None:
        if not self.jwt and not (self.api_key and self.api_secret):
            raise StorageError("Storage credentials require a JWT or both an API key and secret")

    def auth_headers(self) -> dict[str, str]:
        if self.jwt:
            return {"Authorization": f"Bearer {self.jwt}"}
        return {"pinata_api_key": self.api_key or "", "pinata_secret_api_key": self.api_secret or ""}

    def __repr__(self) -> str:
        kind = "jwt" if self.jwt else "api_key"
        return f"StorageCredentials(<{kind}>)"


class InMemoryStorage:
    """Content-addressed in-memory implementation of :class:`StorageProvider`.

    Identifiers are multibase base58btc SHA-256 digests, so identical
    content always gets the same identifier.
    """

    def __init__(self, credentials: StorageCredentials, gateway_url: str | None = None) -> None:
        if not isinstance(credentials, StorageCredentials):
            raise StorageError("InMemoryStorage requires StorageCredentials", provider="memory")
        self._credentials = credentials
        self._gateway = gateway_url or get_config().storage_gateway_url
        self._objects: dict[str, tuple[str, bytes]] = {}

    def upload(self, data: bytes, name: str) -> str:
        cid = multibase_encode(hashlib.sha256(data).digest())
        self._objects[cid] = (name, bytes(data))
        return cid

    def get_gateway_url(self, cid: str) -> str:
        return self._gateway.rstrip("/") + "/" + cid

    def get(self, cid: str) -> bytes | None:
        entry = self._objects.get(cid)
        return entry[1] if entry else None


def publish_identity(identity: WalletIdentity, storage: StorageProvider) -> tuple[str, str]:
    """Upload an identity's export payload.

    Returns:
        Tuple of (content identifier, public gateway URL).
    """
    payload = export_identity(identity).encode("utf-8")
    cid = storage.upload(payload, f"{identity.did}.json")
    url = storage.get_gateway_url(cid)
    logger.info("Published identity %s as %s", identity.did, cid)
    return cid, url


__all__ = [
    "InMemoryStorage",
    "StorageCredentials",
    "StorageProvider",
    "publish_identity",
]
