"""
AWS Lambda handler for SQS-delivered maintenance commands.
"""

from __future__ import annotations

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from . import commands
from .lambda_utils import log, rid, setup
from .posts import PostTable


class UnsupportedCommandError(Exception):
    """Queue message body is not a known command."""


def _delete_all(store: PostTable, context: Any) -> int:
    count = 0
    try:
        for post in store.scan():
            store.delete(post)
            count += 1
    except (ClientError, BotoCoreError) as e:
        log(
            "delete_all_failed",
            level=logging.ERROR,
            rid=rid(context),
            error=type(e).__name__,
            deleted=count,
        )
        raise
    log("delete_all_ok", rid=rid(context), deleted=count)
    return count


def delete_all_posts(
    event: dict[str, Any], context: Any, store: PostTable | None = None
) -> None:
    """Process queue records in order; the first failure aborts the batch.

    Deletes already performed are not rolled back.
    """
    store = setup(store)
    for record in event.get("Records") or []:
        body = record.get("body")
        cmd = commands.parse_command(body)
        if cmd == commands.DELETE_ALL:
            _delete_all(store, context)
            continue
        log(
            "unsupported_command",
            level=logging.ERROR,
            rid=rid(context),
            messageId=record.get("messageId"),
            record=record,
        )
        raise UnsupportedCommandError(f"Unsupported queue command: {body}")
