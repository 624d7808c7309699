# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""CLI commands for message signatures (walletid sign / walletid verify)."""

from __future__ import annotations

import argparse

from ...core.exceptions import InvalidFormatError, InvalidMnemonicError
from ...identity.did import is_did_key, public_key_from_did
from ...identity.keys import derive_keys_from_mnemonic
from ...identity.signing import sign_message, verify_signature
from ...identity.wallet import WalletIdentity
from ..output import output_error, output_result
from ..utils import add_mnemonic_argument, read_mnemonic, read_text


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``sign`` and ``verify`` commands."""
    sign_p = subparsers.add_parser("sign", help="Sign a message with the wallet key")
    sign_p.add_argument("message", help="Message to sign ('-' reads stdin)")
    add_mnemonic_argument(sign_p)
    sign_p.set_defaults(func=cmd_sign)

    verify_p = subparsers.add_parser("verify", help="Verify a message signature")
    verify_p.add_argument("message", help="Signed message ('-' reads stdin)")
    verify_p.add_argument("signature", help="Hex signature")
    verify_p.add_argument(
        "--public-key",
        "-k",
        required=True,
        help="Signer's hex public key or did:key",
    )
    verify_p.set_defaults(func=cmd_verify)


def cmd_sign(args: argparse.Namespace) -> int:
    # Read the phrase first so '-' can still feed the message from stdin
    # when the phrase comes from a flag or the environment.
    phrase = read_mnemonic(args)
    message = read_text(args.message)
    try:
        keys = derive_keys_from_mnemonic(phrase)
    except InvalidMnemonicError as e:
        output_error(e.message)
        return 1

    try:
        signature = sign_message(keys.private_key, message)
        identity = WalletIdentity.from_keys(keys)
    finally:
        keys.wipe()

    result = {
        "signature": signature,
        "did": identity.did,
        "publicKey": identity.public_key,
        "formatted": signature,
    }
    output_result(result, getattr(args, "json", False))
    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    """Exit 0 when the signature is valid, 1 otherwise."""
    public_key: str | bytes = args.public_key
    if is_did_key(args.public_key):
        try:
            public_key = public_key_from_did(args.public_key)
        except InvalidFormatError as e:
            output_error(e.message)
            return 1

    valid = verify_signature(public_key, read_text(args.message), args.signature)
    output_result({"valid": valid, "formatted": "valid" if valid else "invalid"}, getattr(args, "json", False))
    return 0 if valid else 1
