"""Utility functions for the walletid CLI."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

MNEMONIC_ENV = "WALLETID_MNEMONIC"


def add_mnemonic_argument(parser: argparse.ArgumentParser) -> None:
    """Add the shared ``--mnemonic`` option."""
    parser.add_argument(
        "--mnemonic",
        "-m",
        default=None,
        help=f"Recovery phrase (default: ${MNEMONIC_ENV}, then stdin)",
    )


def read_mnemonic(args: argparse.Namespace) -> str:
    """Resolve the recovery phrase: flag, then environment, then stdin.

    Surrounding whitespace is stripped; inner spacing is kept as typed.
    """
    phrase = getattr(args, "mnemonic", None)
    if phrase is None:
        phrase = os.environ.get(MNEMONIC_ENV)
    if phrase is None:
        phrase = sys.stdin.readline()
    return phrase.strip()


def read_text(value: str) -> str:
    """Return ``value``, or the contents of stdin when it is ``-``."""
    if value == "-":
        return sys.stdin.read()
    return value


def read_document(source: str) -> str:
    """Read a JSON document from a file path, or stdin when ``-``."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")
