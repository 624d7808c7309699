# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Core configuration - centralized config for the walletid package.

All environment-based configuration flows through this module. Key
derivation parameters live here so they are fixed for the whole system
rather than chosen per call.

Usage:
    from walletid.core.config import get_config
    config = get_config()

    iterations = config.pbkdf2_iterations
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_PBKDF2_HASHES = ("sha256", "sha384", "sha512")


class WalletSettings(BaseSettings):
    """Configuration settings for walletid.

    Settings can be configured via environment variables with the
    WALLETID_ prefix, or a local ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ==========================================================================
    # KEY DERIVATION SETTINGS
    # ==========================================================================
    # Changing either value changes every derived vault key. Existing vaults
    # only decrypt with the values they were encrypted under.

    pbkdf2_iterations: int = Field(
        default=100_000,
        description="PBKDF2 iteration count for vault key derivation",
        validation_alias="WALLETID_PBKDF2_ITERATIONS",
        ge=1,
    )
    pbkdf2_hash: str = Field(
        default="sha256",
        description="PBKDF2 HMAC hash: sha256, sha384 or sha512",
        validation_alias="WALLETID_PBKDF2_HASH",
    )
    mnemonic_language: Literal["english"] = Field(
        default="english",
        description="BIP-39 wordlist language (only the English list validates reliably)",
        validation_alias="WALLETID_MNEMONIC_LANGUAGE",
    )

    # ==========================================================================
    # IDENTITY SETTINGS
    # ==========================================================================

    did_encoding: Literal["base58btc", "hex"] = Field(
        default="base58btc",
        description="did:key payload encoding: 'base58btc' (standard) or 'hex' (legacy)",
        validation_alias="WALLETID_DID_ENCODING",
    )
    default_grant_ttl_seconds: int = Field(
        default=3600,
        description="Default lifetime of a new access grant",
        validation_alias="WALLETID_GRANT_TTL",
        gt=0,
    )
    jwt_default_ttl_seconds: int = Field(
        default=3600,
        description="Default lifetime of a session JWT",
        validation_alias="WALLETID_JWT_TTL",
        gt=0,
    )

    # ==========================================================================
    # STORAGE SETTINGS
    # ==========================================================================

    storage_gateway_url: str = Field(
        default="https://gateway.pinata.cloud/ipfs/",
        description="Gateway prefix used to build public content URLs",
        validation_alias="WALLETID_STORAGE_GATEWAY",
    )

    # ==========================================================================
    # LOGGING SETTINGS
    # ==========================================================================

    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
        validation_alias="WALLETID_LOG_LEVEL",
    )
    log_format: str = Field(
        default="",
        description="Log format: 'json', 'text', or '' (auto-detect)",
        validation_alias="WALLETID_LOG_FORMAT",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (optional)",
        validation_alias="WALLETID_LOG_FILE",
    )

    @field_validator("pbkdf2_hash")
    @classmethod
    def _check_hash(cls, value: str) -> str:
        value = value.lower().replace("-", "")
        if value not in SUPPORTED_PBKDF2_HASHES:
            raise ValueError(f"pbkdf2_hash must be one of {', '.join(SUPPORTED_PBKDF2_HASHES)}")
        return value


# ==========================================================================
# GLOBAL CONFIG INSTANCE (lazy loaded)
# ==========================================================================

_config: WalletSettings | None = None


def get_config() -> WalletSettings:
    """Get the global configuration instance.

    Returns:
        The singleton WalletSettings instance.
    """
    global _config
    if _config is None:
        _config = WalletSettings()
    return _config


def clear_config_cache() -> None:
    """Clear the config cache. Useful for testing."""
    global _config
    _config = None
