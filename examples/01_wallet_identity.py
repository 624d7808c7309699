#!/usr/bin/env python3
"""Example 01: Wallet Identity - from recovery phrase to shareable DID.

This example demonstrates the core walletid workflow:
1. Generating a recovery phrase
2. Deriving the Ed25519 key pair and did:key
3. Signing and verifying a message
4. Exporting and re-importing the public identity
5. Deriving a password-bound vault key and signing out

Requirements:
    - `pip install walletid` or run from source

Usage:
    python examples/01_wallet_identity.py
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path when running from source
src_path = Path(__file__).parent.parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from walletid.identity import (
    WalletSession,
    import_identity,
    verify_signature,
)


def main() -> None:
    """Run the wallet identity example."""
    print("=" * 60)
    print("  walletid Example 01: Wallet Identity")
    print("=" * 60)
    print()

    with WalletSession() as session:
        # =====================================================================
        # Step 1: Generate a recovery phrase
        # =====================================================================
        print("[Step 1] Generating a recovery phrase...")
        print("-" * 40)
        phrase = session.generate()
        print(f"  Phrase: {phrase}")
        print("  (Write it down. It is the only way to recover this identity.)")
        print()

        # =====================================================================
        # Step 2: Derive keys and DID
        # =====================================================================
        print("[Step 2] Deriving the identity...")
        print("-" * 40)
        identity = session.derive()
        print(f"  DID:        {identity.did}")
        print(f"  Public key: {identity.public_key}")
        print(f"  State:      {session.state}")
        print()

        # =====================================================================
        # Step 3: Sign and verify
        # =====================================================================
        print("[Step 3] Signing a message...")
        print("-" * 40)
        signature = session.sign_message("Hello, World!")
        print(f"  Signature: {signature[:32]}...")
        print(f"  Valid:     {verify_signature(identity.public_key, 'Hello, World!', signature)}")
        print(f"  Tampered:  {verify_signature(identity.public_key, 'Hello, World?', signature)}")
        print()

        # =====================================================================
        # Step 4: Export / import
        # =====================================================================
        print("[Step 4] Exporting the public identity...")
        print("-" * 40)
        payload = session.export()
        print(payload)
        restored = import_identity(payload)
        print(f"  Round trip matches: {restored == identity}")
        print()

        # =====================================================================
        # Step 5: Vault key
        # =====================================================================
        print("[Step 5] Deriving the vault key...")
        print("-" * 40)
        vault_key = session.derive_encryption_key("correct horse battery staple")
        print(f"  Vault key: {len(vault_key)} bytes (not shown)")
        print()

    print(f"Signed out. Session state: {session.state}")


if __name__ == "__main__":
    main()
