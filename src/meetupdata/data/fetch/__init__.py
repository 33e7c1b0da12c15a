"""
Fetching: retrying JSON fetcher, result models and the fetch manager.
"""

from .fetcher_base import (  # noqa: F401
    FetchOptions,
    FetchResult,
    GroupConfig,
    count_events,
)
from .fetchers import FetchManager, fetch_all_groups  # noqa: F401
from .http_fetcher import FetchError, JsonFetcher, fetch_json  # noqa: F401

__all__ = [
    "FetchOptions",
    "FetchResult",
    "GroupConfig",
    "count_events",
    "FetchManager",
    "fetch_all_groups",
    "FetchError",
    "JsonFetcher",
    "fetch_json",
]
