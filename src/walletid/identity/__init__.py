"""Wallet identity for walletid: one recovery phrase, one Ed25519 identity.

Key concepts:
- **Mnemonic**: 12/24-word BIP-39 phrase; the only recovery root.
- **KeyPair**: Ed25519 keys derived deterministically from the phrase.
- **WalletIdentity**: ``did:key`` + hex public key; the only exportable artifact.
- **AccessGrant**: issuer-signed, time-bounded permission statement.
- **WalletSession**: the single in-memory holder of the private key.

Security properties:
- Same phrase, same keys, on every run and every implementation.
- The private key is never part of an export and is zeroed on sign-out.
- Grant signatures ignore the order in which permissions were listed.
"""

from walletid.identity.did import create_did_from_public_key, public_key_from_did
from walletid.identity.encryption import derive_encryption_key
from walletid.identity.grants import (
    AccessGrant,
    GrantDraft,
    canonical_grant_payload,
    sign_access_grant,
    verify_access_grant,
)
from walletid.identity.keys import (
    KEY_DERIVATION_PATHS,
    KeyPair,
    KeyPurpose,
    derive_jwt_signing_key,
    derive_keys_from_mnemonic,
    derive_seed,
)
from walletid.identity.mnemonic import generate_mnemonic, validate_mnemonic
from walletid.identity.session import IdentityState, WalletSession, get_session
from walletid.identity.signing import sign_message, verify_signature
from walletid.identity.tokens import create_jwt, verify_jwt
from walletid.identity.wallet import (
    WalletIdentity,
    create_wallet_identity,
    export_identity,
    import_identity,
)

__all__ = [
    "KEY_DERIVATION_PATHS",
    "AccessGrant",
    "GrantDraft",
    "IdentityState",
    "KeyPair",
    "KeyPurpose",
    "WalletIdentity",
    "WalletSession",
    "canonical_grant_payload",
    "create_did_from_public_key",
    "create_jwt",
    "create_wallet_identity",
    "derive_encryption_key",
    "derive_jwt_signing_key",
    "derive_keys_from_mnemonic",
    "derive_seed",
    "export_identity",
    "generate_mnemonic",
    "get_session",
    "import_identity",
    "public_key_from_did",
    "sign_access_grant",
    "sign_message",
    "validate_mnemonic",
    "verify_access_grant",
    "verify_jwt",
    "verify_signature",
]
