"""
Fetch manager: fetch-and-persist for one group, and for all groups at once.
"""

from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Sequence

import httpx

from ..ledger import MetadataLedger
from ..utils import write_json
from .fetcher_base import FetchOptions, FetchResult, GroupConfig, count_events
from .http_fetcher import JsonFetcher

if TYPE_CHECKING:
    from ...settings import Settings

logger = logging.getLogger(__name__)


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)


def _error_message(error: BaseException) -> str:
    return str(error) or error.__class__.__name__


class FetchManager:
    """
    Runs the fetch-and-persist operation for configured groups and records
    the outcome in the metadata ledger.
    """

    def __init__(
        self,
        options: Optional[FetchOptions] = None,
        metadata_file: Optional[Path] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.options = options or FetchOptions()
        self.ledger = MetadataLedger(metadata_file) if metadata_file else None
        self.transport = transport
        self.logger = logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}"
        )

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport, follow_redirects=True)

    async def fetch_group(
        self, config: GroupConfig, fetcher: Optional[JsonFetcher] = None
    ) -> FetchResult:
        """
        Fetch one group's payload and write it to its output path.

        Never raises; every failure ends up in the returned FetchResult.
        """
        if fetcher is None:
            async with self._client() as client:
                return await self.fetch_group(config, JsonFetcher(client, self.options))

        start = time.monotonic()
        self.logger.info("Fetching data for %s...", config.slug)

        try:
            payload = await fetcher.fetch(config.endpoint)
            await asyncio.to_thread(write_json, payload, config.output_path)
        except Exception as e:
            error = _error_message(e)
            self.logger.error(
                "%s: Failed to fetch data - %s (%dms)",
                config.slug,
                error,
                _elapsed_ms(start),
            )
            return FetchResult(slug=config.slug, success=False, error=error)

        events_count = count_events(payload)
        self.logger.info(
            "%s: Successfully saved %s events to %s (%dms)",
            config.slug,
            events_count if events_count is not None else "unknown",
            config.output_path,
            _elapsed_ms(start),
        )
        return FetchResult(slug=config.slug, success=True, events_count=events_count)

    async def fetch_all(self, configs: Sequence[GroupConfig]) -> List[FetchResult]:
        """
        Fetch every group concurrently, log a summary and update the ledger.

        Returns:
            One FetchResult per config, in configuration order
        """
        self.logger.info("Starting to fetch data for %d meetup groups...", len(configs))
        start = time.monotonic()

        async with self._client() as client:
            fetcher = JsonFetcher(client, self.options)
            results = await asyncio.gather(
                *(self.fetch_group(config, fetcher) for config in configs)
            )

        failed = [r for r in results if not r.success]
        self.logger.info(
            "Summary: %d successful, %d failed, total time %dms",
            len(results) - len(failed),
            len(failed),
            _elapsed_ms(start),
        )
        for result in failed:
            self.logger.warning("Failed group %s: %s", result.slug, result.error)

        # Only after every group finished, so the file sees a single writer
        if self.ledger is not None:
            await asyncio.to_thread(self.ledger.update, results)

        return list(results)


def fetch_all_groups(
    configs: Sequence[GroupConfig],
    settings: "Settings",
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[FetchResult]:
    """
    Convenience function that runs the fetch manager on a fresh event loop.
    """
    manager = FetchManager(
        options=settings.fetch_options(),
        metadata_file=settings.metadata_file,
        transport=transport,
    )
    return asyncio.run(manager.fetch_all(configs))
