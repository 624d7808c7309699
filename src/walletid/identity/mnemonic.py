# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""BIP-39 recovery phrases: generation, validation and seed expansion.

The ``mnemonic`` package (Trezor reference implementation) supplies the
wordlist, checksum and the standard PBKDF2-HMAC-SHA512 seed stretch. This
module narrows it to the two phrase lengths walletid accepts (12 and 24
words) and maps its failure modes onto walletid's exception hierarchy.
"""

from __future__ import annotations

import functools
import logging
import secrets

from mnemonic import Mnemonic

from walletid.core.config import get_config
from walletid.core.exceptions import CryptoOperationFailure

logger = logging.getLogger(__name__)

# entropy bits -> word count
ENTROPY_WORDS = {128: 12, 256: 24}
VALID_WORD_COUNTS = frozenset(ENTROPY_WORDS.values())

SEED_LENGTH = 64


@functools.lru_cache(maxsize=4)
def _wordlist(language: str) -> Mnemonic:
    return Mnemonic(language)


def _mnemo() -> Mnemonic:
    return _wordlist(get_config().mnemonic_language)


def generate_mnemonic(entropy_bits: int = 128) -> str:
    """Create a new recovery phrase.

    Args:
        entropy_bits: 128 for a 12-word phrase, 256 for 24 words.

    Returns:
        Space-separated phrase whose last word carries the checksum.

    Raises:
        ValueError: If ``entropy_bits`` is not a supported size.
        CryptoOperationFailure: If the OS entropy source fails.
    """
    if entropy_bits not in ENTROPY_WORDS:
        raise ValueError(f"entropy_bits must be one of {sorted(ENTROPY_WORDS)}, got {entropy_bits}")

    try:
        entropy = secrets.token_bytes(entropy_bits // 8)
    except (OSError, NotImplementedError) as e:
        raise CryptoOperationFailure("Entropy source unavailable", operation="generate_mnemonic") from e

    phrase = _mnemo().to_mnemonic(entropy)
    logger.debug("Generated %d-word mnemonic", ENTROPY_WORDS[entropy_bits])
    return phrase


def validate_mnemonic(phrase: object) -> bool:
    """Return True only for a well-formed 12/24-word phrase with a valid checksum.

    Never raises. Whitespace is not normalised: a leading, trailing or
    doubled space makes the phrase invalid.
    """
    if not isinstance(phrase, str) or not phrase:
        return False
    mnemo = _mnemo()
    if len(phrase.split(mnemo.delimiter)) not in VALID_WORD_COUNTS:
        return False
    try:
        return bool(mnemo.check(phrase))
    except (ValueError, TypeError, LookupError):
        return False


def mnemonic_to_seed(phrase: str) -> bytes:
    """Stretch a phrase into the 64-byte BIP-39 seed.

    No passphrase is mixed in; the phrase alone is the recovery root.
    Callers validate first: this function hashes whatever it is given.
    """
    return Mnemonic.to_seed(phrase, passphrase="")


def word_count(phrase: object) -> int | None:
    """Number of delimiter-separated tokens in ``phrase``, or None for non-strings."""
    if not isinstance(phrase, str):
        return None
    return len(phrase.split(_mnemo().delimiter)) if phrase else 0


__all__ = [
    "ENTROPY_WORDS",
    "SEED_LENGTH",
    "VALID_WORD_COUNTS",
    "generate_mnemonic",
    "mnemonic_to_seed",
    "validate_mnemonic",
    "word_count",
]
