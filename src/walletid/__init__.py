# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""walletid - deterministic wallet identity and signed access grants.

A memorable recovery phrase is the root of everything:

  phrase (BIP-39)
    → seed (64 bytes)
    → Ed25519 key pair
    → did:key identifier, message signatures, vault key, access grants

The private key stays in memory for the signed-in session only; the
shareable artifact is the public :class:`~walletid.identity.WalletIdentity`.

CLI entry point: ``walletid``
"""

__version__ = "0.3.0"

from . import (
    core as core,
)
from . import (
    identity as identity,
)
