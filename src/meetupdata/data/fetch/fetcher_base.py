"""
Data model shared by the fetcher, the fetch manager and the metadata ledger.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

# Fetched payloads are passed through untouched: a list of events or an
# object carrying an "events" list, with arbitrary extra fields.
JsonValue = Any


class GroupConfig(BaseModel):
    """
    Configuration for one community group.
    """

    slug: str = Field(..., min_length=1, description="Unique group identifier")
    endpoint: str = Field(..., description="URL returning the group's events")
    output_path: Path = Field(..., description="File the payload is written to")

    model_config = {"frozen": True}


class FetchOptions(BaseModel):
    """
    Tunable options for the retrying HTTP fetcher.
    """

    timeout: float = Field(default=30.0, gt=0, description="Seconds per attempt")
    retries: int = Field(default=3, ge=0, description="Retries after a failure")
    retry_delay: float = Field(default=1.0, ge=0, description="Seconds between tries")
    user_agent: str = Field(default="mauritius-meetups-data-fetcher/1.0.0")

    model_config = {"frozen": True}


class FetchResult(BaseModel):
    """
    Result of a fetch-and-persist operation for one group.
    """

    slug: str
    success: bool
    error: Optional[str] = None
    events_count: Optional[int] = None

    model_config = {"frozen": True}


def count_events(payload: JsonValue) -> Optional[int]:
    """
    Number of events in a payload, or None when the shape is not recognised.
    """
    if isinstance(payload, list):
        return len(payload)
    if isinstance(payload, dict) and isinstance(payload.get("events"), list):
        return len(payload["events"])
    return None
