# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""
walletid CLI - deterministic wallet identity from a recovery phrase.

Commands:
  walletid mnemonic generate       Create a new recovery phrase
  walletid mnemonic validate       Check a recovery phrase
  walletid identity derive         Show the DID and public key
  walletid identity export         Write the shareable identity JSON
  walletid sign <message>          Sign a message
  walletid verify <msg> <sig>      Verify a message signature
  walletid grant sign              Issue a signed access grant
  walletid grant verify <file>     Check an access grant
"""

from __future__ import annotations

import argparse
import sys

from .. import __version__
from ..core.exceptions import WalletException
from ..core.logging import configure_logging, correlation_context, get_logger
from .commands import COMMAND_MODULES
from .output import output_error

logger = get_logger(__name__)


def app() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="walletid",
        description="Deterministic wallet identity and signed access grants",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  walletid mnemonic generate --words 24          New 24-word phrase
  walletid identity derive -m "abandon ..."      Show DID for a phrase
  echo "$PHRASE" | walletid identity export -o identity.json
  walletid sign "hello"                          Uses $WALLETID_MNEMONIC
  walletid verify "hello" <sig> -k did:key:z6Mk...
  walletid grant sign -g did:key:z6Mk... -p read:memories --ttl 600
  walletid grant verify grant.json -i did:key:z6Mk...
        """,
    )
    parser.add_argument("--version", action="version", version=f"walletid {__version__}")
    parser.add_argument("--json", "-j", action="store_true", help="Output as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--correlation-id",
        default=None,
        help="Correlation ID for log lines (default: a new UUID per command)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    for module in COMMAND_MODULES:
        module.register(subparsers)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = app()
    args = parser.parse_args(argv)

    configure_logging(level="DEBUG" if args.verbose else None)

    try:
        with correlation_context(args.correlation_id) as cid:
            logger.debug("Running %s (correlation %s)", args.command, cid)
            return args.func(args)
    except WalletException as e:
        logger.debug("Command failed: %s", e.to_dict())
        output_error(e.message)
        return 1
    except KeyboardInterrupt:
        return 1


if __name__ == "__main__":
    sys.exit(main())
