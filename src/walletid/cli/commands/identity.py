# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""CLI commands for the public identity (walletid identity)."""

from __future__ import annotations

import argparse
from pathlib import Path

from ...core.exceptions import InvalidMnemonicError
from ...identity.wallet import create_wallet_identity, export_identity
from ..output import output_error, output_result
from ..utils import add_mnemonic_argument, read_mnemonic


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``identity`` command group."""
    identity_parser = subparsers.add_parser("identity", help="Derive and export the wallet identity")
    identity_sub = identity_parser.add_subparsers(dest="identity_command", required=True)

    derive_p = identity_sub.add_parser("derive", help="Show the DID and public key for a phrase")
    add_mnemonic_argument(derive_p)
    derive_p.set_defaults(func=cmd_identity_derive)

    export_p = identity_sub.add_parser("export", help="Write the shareable identity JSON")
    add_mnemonic_argument(export_p)
    export_p.add_argument("--output", "-o", help="Output file (default: stdout)")
    export_p.set_defaults(func=cmd_identity_export)


def cmd_identity_derive(args: argparse.Namespace) -> int:
    try:
        identity, keys = create_wallet_identity(read_mnemonic(args))
    except InvalidMnemonicError as e:
        output_error(e.message)
        return 1
    keys.wipe()

    result = {
        "did": identity.did,
        "publicKey": identity.public_key,
        "formatted": f"DID:        {identity.did}\nPublic key: {identity.public_key}",
    }
    output_result(result, getattr(args, "json", False))
    return 0


def cmd_identity_export(args: argparse.Namespace) -> int:
    """Export the public identity. The private key is never written."""
    try:
        identity, keys = create_wallet_identity(read_mnemonic(args))
    except InvalidMnemonicError as e:
        output_error(e.message)
        return 1
    keys.wipe()

    payload = export_identity(identity)
    output = getattr(args, "output", None)
    if output:
        Path(output).write_text(payload + "\n", encoding="utf-8")
        print(f"Exported {identity.did} to {output}")
    else:
        print(payload)
    return 0
