"""
meetupdata data package: fetching, persisting and the metadata ledger.
"""

from .fetch import (  # noqa: F401
    FetchManager,
    FetchResult,
    GroupConfig,
    fetch_all_groups,
)
from .ledger import CommunityMetadata, MetadataLedger, update_ledger  # noqa: F401
from .utils import read_json, write_json  # noqa: F401

__all__ = [
    "FetchManager",
    "FetchResult",
    "GroupConfig",
    "fetch_all_groups",
    "CommunityMetadata",
    "MetadataLedger",
    "update_ledger",
    "read_json",
    "write_json",
]
