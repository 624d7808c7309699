# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Async wrappers that run key derivation and signing off the event loop.

PBKDF2 and Ed25519 are bounded CPU work with no I/O. These helpers move
them to a worker thread so an interactive loop stays responsive. The calls
are independent; no ordering is guaranteed between them.
"""

from __future__ import annotations

import asyncio

from walletid.identity.encryption import derive_encryption_key
from walletid.identity.grants import AccessGrant, GrantDraft, sign_access_grant, verify_access_grant
from walletid.identity.keys import KeyPair, derive_keys_from_mnemonic
from walletid.identity.signing import sign_message, verify_signature


async def derive_keys_async(mnemonic: str) -> KeyPair:
    return await asyncio.to_thread(derive_keys_from_mnemonic, mnemonic)


async def derive_encryption_key_async(private_key: bytes, password: str) -> bytes:
    return await asyncio.to_thread(derive_encryption_key, private_key, password)


async def sign_message_async(private_key: bytes, message: str | bytes) -> str:
    return await asyncio.to_thread(sign_message, private_key, message)


async def verify_signature_async(public_key: str | bytes, message: str | bytes, signature: str | bytes) -> bool:
    return await asyncio.to_thread(verify_signature, public_key, message, signature)


async def sign_access_grant_async(draft: GrantDraft, private_key: bytes) -> AccessGrant:
    return await asyncio.to_thread(sign_access_grant, draft, private_key)


async def verify_access_grant_async(grant: AccessGrant, issuer: str | bytes) -> bool:
    return await asyncio.to_thread(verify_access_grant, grant, issuer)


__all__ = [
    "derive_encryption_key_async",
    "derive_keys_async",
    "sign_access_grant_async",
    "sign_message_async",
    "verify_access_grant_async",
    "verify_signature_async",
]
