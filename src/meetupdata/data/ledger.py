"""
Metadata ledger: last run / last successful update time per group.

The ledger is a single JSON object mapping slug -> entry. Updates are a full
read, an in-memory merge and a full write; entries for slugs that are not part
of the current run are written back exactly as they were read.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from pydantic import BaseModel, Field, ValidationError

from .fetch.fetcher_base import FetchResult
from .utils import read_json, utc_timestamp, write_json

logger = logging.getLogger(__name__)


class CommunityMetadata(BaseModel):
    """
    Ledger entry for one group. Stored with camelCase keys.
    """

    last_run: Optional[str] = Field(default=None, alias="lastRun")
    last_updated: Optional[str] = Field(default=None, alias="lastUpdated")
    meta: Dict[str, Any] = Field(default_factory=dict)

    model_config = {"populate_by_name": True, "extra": "allow"}

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class MetadataLedger:
    """
    Reads and merges run outcomes into the metadata file.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self.logger = logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}"
        )

    def load(self) -> Dict[str, Any]:
        """
        Return the raw ledger mapping; empty when the file is missing,
        unparseable or not a JSON object.
        """
        try:
            data = read_json(self.path)
        except FileNotFoundError:
            self.logger.warning(
                "No metadata file at %s, starting with an empty ledger", self.path
            )
            return {}
        except (OSError, json.JSONDecodeError) as e:
            self.logger.warning(
                "Could not read metadata file %s (%s), starting with an empty ledger",
                self.path,
                e,
            )
            return {}

        if not isinstance(data, dict):
            self.logger.warning(
                "Metadata file %s does not hold a JSON object, ignoring it", self.path
            )
            return {}
        return data

    def merge(
        self, ledger: Dict[str, Any], results: Iterable[FetchResult], timestamp: str
    ) -> Dict[str, Any]:
        """
        Apply run outcomes to ``ledger`` in place and return it.

        ``lastRun`` is set for every result; ``lastUpdated`` only for
        successful ones.
        """
        for result in results:
            entry = self._entry_for(ledger.get(result.slug), result.slug)
            entry.last_run = timestamp
            if result.success:
                entry.last_updated = timestamp
            ledger[result.slug] = entry.to_json()
        return ledger

    def update(self, results: Iterable[FetchResult]) -> None:
        """
        Merge ``results`` into the ledger file. Failures are logged, never raised.
        """
        results = list(results)
        try:
            timestamp = utc_timestamp()
            ledger = self.merge(self.load(), results, timestamp)
            write_json(ledger, self.path)

            successful = sum(1 for r in results if r.success)
            self.logger.info(
                "Updated metadata: %d successful, %d failed",
                successful,
                len(results) - successful,
            )
        except Exception:
            self.logger.exception("Failed to update metadata file %s", self.path)

    def _entry_for(self, raw: Any, slug: str) -> CommunityMetadata:
        if raw is None:
            return CommunityMetadata()
        try:
            return CommunityMetadata.model_validate(raw)
        except ValidationError as e:
            self.logger.warning("Resetting malformed metadata entry for %s: %s", slug, e)
            return CommunityMetadata()


def update_ledger(results: Iterable[FetchResult], path: Path) -> None:
    """
    Convenience function that wraps the ledger.
    """
    MetadataLedger(path).update(results)
