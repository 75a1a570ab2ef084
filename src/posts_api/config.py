"""
Configuration helpers and defaults.

Centralize tunables to avoid magic numbers in code/tests.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

# Page size used by the list endpoint. Only the first page is ever returned.
LIST_PAGE_SIZE = 25


def _env(name: str, default: str | None = None) -> str | None:
    v = os.getenv(name)
    return v if v is not None else default


@dataclass(frozen=True)
class Settings:
    table_name: str | None
    aws_region: str | None
    dynamodb_endpoint_url: str | None
    log_level: str


def load_settings() -> Settings:
    """Load settings from environment with safe defaults for local tests."""

    return Settings(
        table_name=_env("TABLE_NAME") or None,
        aws_region=_env("AWS_REGION") or None,
        dynamodb_endpoint_url=_env("DYNAMODB_ENDPOINT_URL") or None,
        log_level=(_env("LOG_LEVEL", "INFO") or "INFO").upper(),
    )
