"""
Queue command parsing.
"""

from __future__ import annotations

DELETE_ALL = "DELETE_ALL"

SUPPORTED_COMMANDS = frozenset({DELETE_ALL})


def parse_command(body: str | None) -> str | None:
    """Return the command carried by a queue message body, or None if unsupported.

    Matching is exact: no trimming, no case folding.
    """
    if isinstance(body, str) and body in SUPPORTED_COMMANDS:
        return body
    return None
