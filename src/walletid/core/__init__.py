# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""walletid Core - shared configuration, errors and logging."""

from .config import WalletSettings, clear_config_cache, get_config
from .exceptions import (
    CryptoOperationFailure,
    InvalidFormatError,
    InvalidMnemonicError,
    SessionStateError,
    StorageError,
    TokenError,
    TokenExpiredError,
    WalletException,
)

__all__ = [
    "CryptoOperationFailure",
    "InvalidFormatError",
    "InvalidMnemonicError",
    "SessionStateError",
    "StorageError",
    "TokenError",
    "TokenExpiredError",
    "WalletException",
    "WalletSettings",
    "clear_config_cache",
    "get_config",
]
