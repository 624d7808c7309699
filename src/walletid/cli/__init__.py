# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""walletid CLI - recovery phrases, identities, signatures and grants."""

from .main import app, main

__all__ = ["main", "app"]
