#!/usr/bin/env python3
"""Example 02: Access Grants - delegate scoped, time-bounded access.

This example demonstrates:
1. Issuing a grant to another identity
2. Verifying it by the issuer's DID
3. Showing that permission order does not change the signature
4. Detecting a tampered grant

Usage:
    python examples/02_access_grants.py
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path when running from source
src_path = Path(__file__).parent.parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from walletid.identity import (
    AccessGrant,
    GrantDraft,
    create_wallet_identity,
    generate_mnemonic,
    sign_access_grant,
    verify_access_grant,
)


def main() -> None:
    """Run the access grant example."""
    print("=" * 60)
    print("  walletid Example 02: Access Grants")
    print("=" * 60)
    print()

    issuer, issuer_keys = create_wallet_identity(generate_mnemonic())
    client, client_keys = create_wallet_identity(generate_mnemonic())
    client_keys.wipe()
    print(f"Issuer: {issuer.did}")
    print(f"Client: {client.did}")
    print()

    # Step 1: issue
    draft = GrantDraft.create(client.did, ["read:memories", "read:identity"], ttl_seconds=600)
    grant = sign_access_grant(draft, issuer_keys.private_key)
    print("[Step 1] Issued grant:")
    print(grant.to_json())
    print()

    # Step 2: verify
    print(f"[Step 2] Valid for issuer DID: {verify_access_grant(grant, issuer.did)}")
    print(f"         Expired:              {grant.is_expired()}")
    print()

    # Step 3: permission order
    reordered = GrantDraft(draft.id, draft.grantee, tuple(reversed(draft.permissions)), draft.expires_at)
    same = sign_access_grant(reordered, issuer_keys.private_key).signature == grant.signature
    print(f"[Step 3] Reordered permissions, same signature: {same}")
    print()

    # Step 4: tamper
    escalated = AccessGrant.from_dict(grant.to_dict() | {"permissions": ["read:memories", "write:memories"]})
    print(f"[Step 4] Escalated grant still valid: {verify_access_grant(escalated, issuer.did)}")

    issuer_keys.wipe()


if __name__ == "__main__":
    main()
