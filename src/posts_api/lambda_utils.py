"""
Shared Lambda plumbing: logging, request ids, responses, store construction.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from .config import Settings, load_settings
from .posts import PostTable

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    level = getattr(logging, settings.log_level, logging.INFO)
    logging.getLogger("posts_api").setLevel(level)
    root = logging.getLogger()
    if root.level and root.level > level:
        root.setLevel(level)


def rid(context: Any) -> str | None:
    return getattr(context, "aws_request_id", None)


def log(msg: str, level: int = logging.INFO, **fields: Any) -> None:
    try:
        rec = {"msg": msg, **fields}
        logger.log(level, json.dumps(rec, ensure_ascii=False, default=str))
    except (TypeError, ValueError):
        # Fallback to plain log
        logger.log(level, "%s | %s", msg, fields)


def response(status: int, body: dict[str, Any]) -> dict[str, Any]:
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, ensure_ascii=False),
    }


def setup(store: PostTable | None) -> PostTable:
    """Per-invocation setup. Returns the injected store or one built from env."""
    settings = load_settings()
    configure_logging(settings)
    return store if store is not None else PostTable.from_settings(settings)
