"""Tests for walletid.core.exceptions."""

from __future__ import annotations

import pytest

from walletid.core.exceptions import (
    CryptoOperationFailure,
    InvalidFormatError,
    InvalidMnemonicError,
    SessionStateError,
    StorageError,
    TokenError,
    TokenExpiredError,
    WalletException,
)


class TestWalletException:
    def test_message_and_details(self):
        exc = WalletException("boom", {"k": "v"})

        assert str(exc) == "boom"
        assert exc.message == "boom"
        assert exc.details == {"k": "v"}

    def test_to_dict(self):
        assert WalletException("boom").to_dict() == {
            "error": "WalletException",
            "message": "boom",
            "details": {},
        }

    @pytest.mark.parametrize(
        "exc",
        [
            InvalidMnemonicError(),
            InvalidFormatError("bad"),
            CryptoOperationFailure("bad"),
            SessionStateError("bad"),
            TokenError("bad"),
            StorageError("bad"),
        ],
    )
    def test_all_errors_share_base(self, exc):
        assert isinstance(exc, WalletException)


class TestSpecificErrors:
    def test_invalid_mnemonic_default_message(self):
        exc = InvalidMnemonicError(word_count=11)

        assert exc.message == "Invalid mnemonic phrase"
        assert exc.word_count == 11
        assert exc.details == {"word_count": 11}

    def test_invalid_format_records_field(self):
        exc = InvalidFormatError("missing did", field="did", value=None)

        assert exc.field == "did"
        assert exc.details == {"field": "did"}

    def test_invalid_format_stringifies_value(self):
        exc = InvalidFormatError("bad", field="expiresAt", value=1.5)
        assert exc.details["value"] == "1.5"

    def test_crypto_failure_operation(self):
        exc = CryptoOperationFailure("no ed25519", operation="ed25519")
        assert exc.to_dict()["details"] == {"operation": "ed25519"}

    def test_session_state(self):
        assert SessionStateError("no", state="wiped").state == "wiped"

    def test_token_expired_is_token_error(self):
        assert issubclass(TokenExpiredError, TokenError)

    def test_storage_provider(self):
        assert StorageError("no creds", provider="pinata").provider == "pinata"
