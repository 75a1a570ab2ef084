"""
Post entity and its DynamoDB table accessor.

Single table keyed by `post_uuid`; `created_at` is stored as epoch seconds.
"""

from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Iterator

from botocore.exceptions import BotoCoreError, ClientError

from .config import Settings

logger = logging.getLogger(__name__)

HASH_KEY = "post_uuid"


class ConfigError(RuntimeError):
    """Raised when the store cannot be built from the current settings."""


def _boto3():
    # Allow tests to monkeypatch module-level `boto3` symbol.
    return globals().get("boto3") or importlib.import_module("boto3")


@dataclass(frozen=True)
class Post:
    post_uuid: str
    title: str | None
    body: str | None
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """External (JSON-ready) representation."""
        return {
            "post_uuid": self.post_uuid,
            "title": self.title,
            "body": self.body,
            "created_at": self.created_at.isoformat(),
        }

    def to_item(self) -> dict[str, Any]:
        return {
            "post_uuid": self.post_uuid,
            "title": self.title,
            "body": self.body,
            "created_at": int(self.created_at.timestamp()),
        }

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "Post":
        # DynamoDB numbers come back as Decimal
        created = datetime.fromtimestamp(int(item["created_at"]), tz=timezone.utc)
        return cls(
            post_uuid=str(item["post_uuid"]),
            title=item.get("title"),
            body=item.get("body"),
            created_at=created,
        )


class PostCollection:
    """Lazy scan result. Nothing is read until `page()` or iteration."""

    def __init__(self, table: Any, limit: int | None = None) -> None:
        self._table = table
        self.limit = limit

    def _scan_page(self, start_key: dict[str, Any] | None) -> dict[str, Any]:
        kwargs: dict[str, Any] = {}
        if self.limit:
            kwargs["Limit"] = self.limit
        if start_key:
            kwargs["ExclusiveStartKey"] = start_key
        return self._table.scan(**kwargs)

    def page(self) -> list[Post]:
        """First page only, in store order."""
        resp = self._scan_page(None)
        return [Post.from_item(it) for it in resp.get("Items") or []]

    def __iter__(self) -> Iterator[Post]:
        start_key = None
        while True:
            resp = self._scan_page(start_key)
            for it in resp.get("Items") or []:
                yield Post.from_item(it)
            start_key = resp.get("LastEvaluatedKey")
            if not start_key:
                return


class PostTable:
    def __init__(self, table: Any) -> None:
        self.table = table

    @classmethod
    def from_settings(cls, settings: Settings) -> "PostTable":
        if not settings.table_name:
            raise ConfigError("TABLE_NAME is not configured")
        kwargs: dict[str, Any] = {}
        if settings.aws_region:
            kwargs["region_name"] = settings.aws_region
        if settings.dynamodb_endpoint_url:
            kwargs["endpoint_url"] = settings.dynamodb_endpoint_url
        dynamodb = _boto3().resource("dynamodb", **kwargs)
        return cls(dynamodb.Table(settings.table_name))

    def scan(self, limit: int | None = None) -> PostCollection:
        return PostCollection(self.table, limit=limit)

    def find(self, post_uuid: str) -> Post | None:
        resp = self.table.get_item(Key={HASH_KEY: post_uuid})
        item = resp.get("Item")
        return Post.from_item(item) if item else None

    def create(self, post: Post) -> bool:
        """Persist a new post. Return False if DynamoDB rejected the write.

        A post whose key already exists is rejected, never overwritten.
        """
        if not post.post_uuid:
            raise ValueError("post_uuid is required")
        if post.created_at is None:
            raise ValueError("created_at is required")
        try:
            self.table.put_item(
                Item=post.to_item(),
                ConditionExpression=f"attribute_not_exists({HASH_KEY})",
            )
        except (ClientError, BotoCoreError):
            logger.exception("put_item failed for post %s", post.post_uuid)
            return False
        return True

    def delete(self, post: Post) -> None:
        self.table.delete_item(Key={HASH_KEY: post.post_uuid})
