"""CLI command modules for walletid.

Each module exposes a ``register(subparsers)`` function that wires up
its argparse sub-commands and sets ``parser.set_defaults(func=handler)``.
"""

from . import grants, identity, mnemonic, signing
from .grants import cmd_grant_sign, cmd_grant_verify
from .identity import cmd_identity_derive, cmd_identity_export
from .mnemonic import cmd_mnemonic_generate, cmd_mnemonic_validate
from .signing import cmd_sign, cmd_verify

# All command modules with register() functions, in registration order.
COMMAND_MODULES = [
    mnemonic,
    identity,
    signing,
    grants,
]

__all__ = [
    "COMMAND_MODULES",
    "cmd_grant_sign",
    "cmd_grant_verify",
    "cmd_identity_derive",
    "cmd_identity_export",
    "cmd_mnemonic_generate",
    "cmd_mnemonic_validate",
    "cmd_sign",
    "cmd_verify",
]
