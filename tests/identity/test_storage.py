"""Tests for the storage collaborator interface."""

from __future__ import annotations

import json

import pytest

from walletid.core.exceptions import StorageError
from walletid.identity.storage import (
    InMemoryStorage,
    StorageCredentials,
    StorageProvider,
    publish_identity,
)
from walletid.identity.wallet import WalletIdentity


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage(StorageCredentials(jwt="test-jwt"), gateway_url="https://gw.example/ipfs/")


class TestStorageCredentials:
    def test_jwt(self):
        assert StorageCredentials(jwt="abc").auth_headers() == {"Authorization": "Bearer abc"}

    def test_key_and_secret(self):
        headers = StorageCredentials(api_key="k", api_secret="s").auth_headers()
        assert headers == {"pinata_api_key": "k", "pinata_secret_api_key": "s"}

    @pytest.mark.parametrize("kwargs", [{}, {"api_key": "k"}, {"api_secret": "s"}, {"jwt": ""}])
    def test_incomplete_rejected(self, kwargs):
        with pytest.raises(StorageError):
            StorageCredentials(**kwargs)

    def test_repr_hides_secrets(self):
        text = repr(StorageCredentials(api_key="k-123", api_secret="s-456"))
        assert "k-123" not in text
        assert "s-456" not in text


class TestInMemoryStorage:
    def test_satisfies_protocol(self, storage):
        assert isinstance(storage, StorageProvider)

    def test_requires_credentials(self):
        with pytest.raises(StorageError):
            InMemoryStorage(None)  # type: ignore[arg-type]

    def test_content_addressed(self, storage):
        a = storage.upload(b"data", "a.json")
        b = storage.upload(b"data", "b.json")

        assert a == b
        assert a.startswith("z")
        assert storage.get(a) == b"data"

    def test_unknown_cid(self, storage):
        assert storage.get("zNothing") is None

    def test_gateway_url(self, storage):
        assert storage.get_gateway_url("zabc") == "https://gw.example/ipfs/zabc"

    def test_gateway_from_config(self, clean_env, monkeypatch):
        monkeypatch.setenv("WALLETID_STORAGE_GATEWAY", "https://cfg.example/ipfs")
        s = InMemoryStorage(StorageCredentials(jwt="x"))
        assert s.get_gateway_url("zabc") == "https://cfg.example/ipfs/zabc"


class TestPublishIdentity:
    def test_publishes_export_payload(self, storage, vectors):
        identity = WalletIdentity(did=vectors.did, public_key=vectors.public_key_hex, created_at=1)

        cid, url = publish_identity(identity, storage)

        assert url.endswith(cid)
        assert json.loads(storage.get(cid)) == identity.to_dict()
