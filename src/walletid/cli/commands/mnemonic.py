# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""CLI commands for recovery phrases (walletid mnemonic)."""

from __future__ import annotations

import argparse

from ...identity.mnemonic import ENTROPY_WORDS, generate_mnemonic, validate_mnemonic, word_count
from ..output import output_error, output_result
from ..utils import add_mnemonic_argument, read_mnemonic

_WORDS_TO_BITS = {words: bits for bits, words in ENTROPY_WORDS.items()}


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``mnemonic`` command group."""
    mnemonic_parser = subparsers.add_parser("mnemonic", help="Generate or check recovery phrases")
    mnemonic_sub = mnemonic_parser.add_subparsers(dest="mnemonic_command", required=True)

    generate_p = mnemonic_sub.add_parser("generate", help="Generate a new recovery phrase")
    generate_p.add_argument(
        "--words",
        "-w",
        type=int,
        choices=sorted(_WORDS_TO_BITS),
        default=12,
        help="Number of words (default: 12)",
    )
    generate_p.set_defaults(func=cmd_mnemonic_generate)

    validate_p = mnemonic_sub.add_parser("validate", help="Check a recovery phrase")
    add_mnemonic_argument(validate_p)
    validate_p.set_defaults(func=cmd_mnemonic_validate)


def cmd_mnemonic_generate(args: argparse.Namespace) -> int:
    """Print a freshly generated phrase."""
    words = getattr(args, "words", 12)
    bits = _WORDS_TO_BITS.get(words)
    if bits is None:
        output_error(f"--words must be one of {sorted(_WORDS_TO_BITS)}")
        return 1
    phrase = generate_mnemonic(bits)
    output_result({"mnemonic": phrase, "words": words, "formatted": phrase}, getattr(args, "json", False))
    return 0


def cmd_mnemonic_validate(args: argparse.Namespace) -> int:
    """Exit 0 when the phrase is valid, 1 otherwise."""
    phrase = read_mnemonic(args)
    valid = validate_mnemonic(phrase)
    result = {
        "valid": valid,
        "words": word_count(phrase),
        "formatted": "valid" if valid else "invalid",
    }
    output_result(result, getattr(args, "json", False))
    return 0 if valid else 1
