# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Output formatting for CLI commands.

Handles JSON vs plain text output based on the ``--json`` flag.
"""

from __future__ import annotations

import json
import sys
from typing import Any


def output_result(data: dict[str, Any], as_json: bool = False) -> None:
    """Print a command result.

    With ``as_json`` the full result is pretty-printed. Otherwise the
    ``formatted`` entry is printed if present, else one ``key: value``
    line per entry.
    """
    if as_json:
        print(json.dumps({k: v for k, v in data.items() if k != "formatted"}, indent=2, default=str))
    elif "formatted" in data:
        print(data["formatted"])
    else:
        for key, value in data.items():
            print(f"{key}: {value}")


def output_error(message: str) -> None:
    """Print error message to stderr."""
    print(f"Error: {message}", file=sys.stderr)
