"""
AWS Lambda handlers for the posts HTTP API (API Gateway proxy events).

One function per route; routing itself is configured outside this package.
"""

from __future__ import annotations

import base64
import json
import uuid
from datetime import datetime, timezone
from typing import Any

from .config import LIST_PAGE_SIZE
from .lambda_utils import log, response, rid, setup
from .posts import Post, PostTable


def _now() -> datetime:
    # Persisted as epoch seconds, so drop sub-second precision up front.
    return datetime.now(timezone.utc).replace(microsecond=0)


def _new_id() -> str:
    return str(uuid.uuid4())


def _create_params(event: dict[str, Any]) -> dict[str, Any]:
    """Pick `title` and `body` out of the JSON request body.

    Malformed JSON is not caught here: it fails the invocation.
    """
    body = event.get("body")
    if event.get("isBase64Encoded"):
        body = base64.b64decode(body)
    if isinstance(body, (bytes, bytearray)):
        body = body.decode("utf-8")
    payload = json.loads(body)
    return {"title": payload.get("title"), "body": payload.get("body")}


def index(event: dict[str, Any], context: Any, store: PostTable | None = None) -> dict[str, Any]:
    store = setup(store)
    posts = [p.to_dict() for p in store.scan(limit=LIST_PAGE_SIZE).page()]
    log("posts_listed", rid=rid(context), count=len(posts))
    return response(200, {"posts": posts})


def get(event: dict[str, Any], context: Any, store: PostTable | None = None) -> dict[str, Any]:
    store = setup(store)
    post_id = event["pathParameters"]["uuid"]
    post = store.find(post_id)
    if post is None:
        log("post_not_found", rid=rid(context), postId=post_id)
        return response(404, {"error": f"Post {post_id} not found!"})
    return response(200, {"post": post.to_dict()})


def create(event: dict[str, Any], context: Any, store: PostTable | None = None) -> dict[str, Any]:
    store = setup(store)
    params = _create_params(event)
    post = Post(post_uuid=_new_id(), created_at=_now(), **params)
    if store.create(post):
        log("post_created", rid=rid(context), postId=post.post_uuid)
        return response(200, {"post": post.to_dict()})
    log("post_create_failed", rid=rid(context), postId=post.post_uuid)
    return response(500, {"error": "Failed to create new post."})
