# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""CLI commands for access grants (walletid grant)."""

from __future__ import annotations

import argparse
import json

from ...core.exceptions import InvalidFormatError, InvalidMnemonicError
from ...identity.grants import AccessGrant, GrantDraft, sign_access_grant, verify_access_grant
from ...identity.keys import derive_keys_from_mnemonic
from ..output import output_error, output_result
from ..utils import add_mnemonic_argument, read_document, read_mnemonic


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``grant`` command group."""
    grant_parser = subparsers.add_parser("grant", help="Issue and check access grants")
    grant_sub = grant_parser.add_subparsers(dest="grant_command", required=True)

    sign_p = grant_sub.add_parser("sign", help="Issue a signed access grant")
    sign_p.add_argument("--grantee", "-g", required=True, help="Grantee identifier (usually a did:key)")
    sign_p.add_argument(
        "--permission",
        "-p",
        dest="permissions",
        action="append",
        required=True,
        help="Permission to grant (repeatable)",
    )
    sign_p.add_argument("--ttl", type=int, default=None, help="Lifetime in seconds (default: $WALLETID_GRANT_TTL)")
    sign_p.add_argument("--id", dest="grant_id", default=None, help="Grant id (default: random)")
    add_mnemonic_argument(sign_p)
    sign_p.set_defaults(func=cmd_grant_sign)

    verify_p = grant_sub.add_parser("verify", help="Check a grant's signature and expiry")
    verify_p.add_argument("grant", help="Grant JSON file ('-' reads stdin)")
    verify_p.add_argument("--issuer", "-i", required=True, help="Issuer's did:key or hex public key")
    verify_p.add_argument(
        "--allow-expired",
        action="store_true",
        help="Only check the signature",
    )
    verify_p.set_defaults(func=cmd_grant_verify)


def cmd_grant_sign(args: argparse.Namespace) -> int:
    try:
        draft = GrantDraft.create(args.grantee, args.permissions, ttl_seconds=args.ttl, grant_id=args.grant_id)
    except InvalidFormatError as e:
        output_error(e.message)
        return 1

    try:
        keys = derive_keys_from_mnemonic(read_mnemonic(args))
    except InvalidMnemonicError as e:
        output_error(e.message)
        return 1

    try:
        grant = sign_access_grant(draft, keys.private_key)
    finally:
        keys.wipe()

    print(json.dumps(grant.to_dict(), indent=2, ensure_ascii=False))
    return 0


def cmd_grant_verify(args: argparse.Namespace) -> int:
    """Exit 0 for a correctly signed, unexpired grant."""
    try:
        grant = AccessGrant.from_json(read_document(args.grant))
    except OSError as e:
        output_error(f"Cannot read grant: {e}")
        return 1
    except InvalidFormatError as e:
        output_error(e.message)
        return 1

    signature_ok = verify_access_grant(grant, args.issuer)
    expired = grant.is_expired()
    valid = signature_ok and (args.allow_expired or not expired)

    if not signature_ok:
        summary = "invalid signature"
    elif expired:
        summary = "expired" if not args.allow_expired else "valid (expired)"
    else:
        summary = "valid"

    result = {
        "valid": valid,
        "signatureValid": signature_ok,
        "expired": expired,
        "id": grant.id,
        "grantee": grant.grantee,
        "formatted": summary,
    }
    output_result(result, getattr(args, "json", False))
    return 0 if valid else 1
