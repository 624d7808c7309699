# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Exception hierarchy for walletid.

Every failure raised by the identity core maps to one distinguishable
exception type. Signature verification is deliberately absent here:
verifiers answer ``False`` instead of raising.
"""

from __future__ import annotations

from typing import Any


class WalletException(Exception):  # noqa: N818 - public name
    """Base exception for all walletid errors."""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class InvalidMnemonicError(WalletException):
    """Recovery phrase failed word-count, wordlist or checksum validation.

    Deterministic: retrying with the same phrase fails the same way.
    """

    def __init__(self, message: str = "Invalid mnemonic phrase", word_count: int | None = None):
        details = {}
        if word_count is not None:
            details["word_count"] = word_count
        super().__init__(message, details)
        self.word_count = word_count


class InvalidFormatError(WalletException):
    """Malformed identity export payload or DID string.

    Raised when:
    - A required field is missing from an imported identity
    - A payload is not valid JSON
    - A DID lacks the expected prefix or multicodec tag
    """

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        super().__init__(message, details)
        self.field = field
        self.value = value


class CryptoOperationFailure(WalletException):  # noqa: N818 - public name
    """An underlying cryptographic primitive is unavailable or failed.

    Fatal for the current operation. Not retried automatically: identical
    inputs would fail identically.
    """

    def __init__(self, message: str, operation: str | None = None):
        details = {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
        self.operation = operation


class SessionStateError(WalletException):
    """Illegal identity lifecycle transition, or use of a wiped session."""

    def __init__(self, message: str, state: str | None = None):
        details = {}
        if state:
            details["state"] = state
        super().__init__(message, details)
        self.state = state


class TokenError(WalletException):
    """A session JWT is malformed, unsigned by the expected key, or unsupported."""


class TokenExpiredError(TokenError):
    """A session JWT is past its ``exp`` claim."""


class StorageError(WalletException):
    """Storage collaborator misconfigured (e.g. missing credentials)."""

    def __init__(self, message: str, provider: str | None = None):
        details = {}
        if provider:
            details["provider"] = provider
        super().__init__(message, details)
        self.provider = provider
