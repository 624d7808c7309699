# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Process-scoped wallet session holding the live private key.

Lifecycle::

    UNSET -> GENERATED -> DERIVED -> EXPORTED -> WIPED
                 (phrase)   (keys)    (DID shared) (key zeroed)

- ``GENERATED``: a phrase exists in memory (new or restored).
- ``DERIVED``: the key pair is in memory; the phrase has been dropped.
- ``EXPORTED``: the public identity has been handed out. The private key
  still never leaves memory.
- ``WIPED``: the private key has been zeroed. A new sign-in starts over
  at ``GENERATED`` or ``DERIVED``.

Every state holding a key can reach ``WIPED``: on :meth:`WalletSession.clear_session`,
when an exception escapes a ``with session:`` block, when a signing
primitive fails fatally, and (best effort) at interpreter exit.
"""

from __future__ import annotations

import atexit
import enum
import logging
import threading
import weakref
from collections.abc import Callable
from typing import TypeVar

from walletid.core.exceptions import CryptoOperationFailure, InvalidMnemonicError, SessionStateError
from walletid.identity.encryption import derive_encryption_key
from walletid.identity.grants import AccessGrant, GrantDraft, sign_access_grant
from walletid.identity.keys import KeyPair, derive_keys_from_mnemonic
from walletid.identity.mnemonic import generate_mnemonic, validate_mnemonic, word_count
from walletid.identity.signing import sign_message
from walletid.identity.wallet import WalletIdentity, export_identity

logger = logging.getLogger(__name__)

T = TypeVar("T")


class IdentityState(enum.StrEnum):
    """Lifecycle state of the session identity."""

    UNSET = "unset"
    GENERATED = "generated"
    DERIVED = "derived"
    EXPORTED = "exported"
    WIPED = "wiped"


_TRANSITIONS: dict[IdentityState, frozenset[IdentityState]] = {
    IdentityState.UNSET: frozenset({IdentityState.GENERATED, IdentityState.DERIVED}),
    IdentityState.GENERATED: frozenset({IdentityState.GENERATED, IdentityState.DERIVED, IdentityState.WIPED}),
    IdentityState.DERIVED: frozenset({IdentityState.EXPORTED, IdentityState.WIPED}),
    IdentityState.EXPORTED: frozenset({IdentityState.EXPORTED, IdentityState.WIPED}),
    IdentityState.WIPED: frozenset({IdentityState.GENERATED, IdentityState.DERIVED, IdentityState.WIPED}),
}

_live_sessions: weakref.WeakSet[WalletSession] = weakref.WeakSet()


class WalletSession:
    """The single holder of a private key for an authenticated user.

    Typical workflow::

        session = WalletSession()
        phrase = session.generate()      # show to the user once
        identity = session.derive()
        payload = session.export()       # safe to share
        grant = session.sign_grant(GrantDraft.create("did:key:z…", ["read_memory"]))
        session.clear_session()          # sign-out
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._state = IdentityState.UNSET
        self._mnemonic: str | None = None
        self._keys: KeyPair | None = None
        self._identity: WalletIdentity | None = None
        _live_sessions.add(self)

    # -- state ----------------------------------------------------------------

    @property
    def state(self) -> IdentityState:
        return self._state

    @property
    def identity(self) -> WalletIdentity | None:
        return self._identity

    @property
    def keys(self) -> KeyPair:
        """The live key pair.

        Raises:
            SessionStateError: If no key is held.
        """
        with self._lock:
            if self._keys is None or self._keys.is_wiped:
                raise SessionStateError("No active wallet session", state=self._state.value)
            return self._keys

    def _transition(self, target: IdentityState) -> None:
        if target not in _TRANSITIONS[self._state]:
            raise SessionStateError(
                f"Cannot move wallet session from {self._state.value} to {target.value}",
                state=self._state.value,
            )
        logger.debug("Wallet session %s -> %s", self._state.value, target.value)
        self._state = target

    # -- sign-in ----------------------------------------------------------------

    def generate(self, entropy_bits: int = 128) -> str:
        """Create a new phrase and hold it until :meth:`derive`."""
        with self._lock:
            self._transition(IdentityState.GENERATED)
            self._mnemonic = generate_mnemonic(entropy_bits)
            return self._mnemonic

    def restore(self, mnemonic: str) -> None:
        """Load an existing phrase for derivation.

        Raises:
            InvalidMnemonicError: If the phrase fails validation.
        """
        if not validate_mnemonic(mnemonic):
            raise InvalidMnemonicError(word_count=word_count(mnemonic))
        with self._lock:
            self._transition(IdentityState.GENERATED)
            self._mnemonic = mnemonic

    def derive(self) -> WalletIdentity:
        """Derive keys from the held phrase, then forget the phrase."""
        with self._lock:
            if self._mnemonic is None:
                raise SessionStateError("No mnemonic to derive from", state=self._state.value)
            keys = derive_keys_from_mnemonic(self._mnemonic)
            self._mnemonic = None
            return self.set_session(keys)

    def set_session(self, keys: KeyPair, identity: WalletIdentity | None = None) -> WalletIdentity:
        """Install an already-derived key pair as the active session."""
        with self._lock:
            self._transition(IdentityState.DERIVED)
            if self._keys is not None and self._keys is not keys:
                self._keys.wipe()
            self._keys = keys
            self._identity = identity or WalletIdentity.from_keys(keys)
            logger.info("Wallet session started for %s", self._identity.did)
            return self._identity

    def has_session(self) -> bool:
        with self._lock:
            return self._keys is not None and not self._keys.is_wiped

    def export(self) -> str:
        """Export the public identity. The private key is not part of it."""
        with self._lock:
            if self._identity is None or not self.has_session():
                raise SessionStateError("No identity to export", state=self._state.value)
            self._transition(IdentityState.EXPORTED)
            return export_identity(self._identity)

    # -- sign-out ---------------------------------------------------------------

    def clear_session(self) -> None:
        """Zero the private key and drop the phrase. Safe to call repeatedly."""
        with self._lock:
            if self._keys is not None:
                self._keys.wipe()
                self._keys = None
            self._mnemonic = None
            if self._state is not IdentityState.UNSET:
                self._transition(IdentityState.WIPED)
                logger.info("Wallet session cleared")

    def __enter__(self) -> WalletSession:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            logger.warning("Wiping wallet session after %s", exc_type.__name__)
        self.clear_session()

    # -- operations with the held key ---------------------------------------------

    def _with_key(self, operation: Callable[[bytes], T]) -> T:
        keys = self.keys
        try:
            return operation(keys.private_key)
        except CryptoOperationFailure:
            logger.error("Cryptographic failure with live key; wiping session")
            self.clear_session()
            raise

    def sign_message(self, message: str | bytes) -> str:
        return self._with_key(lambda key: sign_message(key, message))

    def sign_grant(self, draft: GrantDraft) -> AccessGrant:
        return self._with_key(lambda key: sign_access_grant(draft, key))

    def derive_encryption_key(self, password: str) -> bytes:
        return self._with_key(lambda key: derive_encryption_key(key, password))


# =============================================================================
# PROCESS-SCOPED SESSION
# =============================================================================

_session: WalletSession | None = None
_session_lock = threading.Lock()


def get_session() -> WalletSession:
    """Return the process-wide session, creating it on first use."""
    global _session
    with _session_lock:
        if _session is None:
            _session = WalletSession()
        return _session


def reset_session() -> None:
    """Wipe and discard the process-wide session. Useful for testing."""
    global _session
    with _session_lock:
        if _session is not None:
            _session.clear_session()
        _session = None


def _wipe_live_sessions() -> None:
    for session in list(_live_sessions):
        session.clear_session()


atexit.register(_wipe_live_sessions)


__all__ = [
    "IdentityState",
    "WalletSession",
    "get_session",
    "reset_session",
]
