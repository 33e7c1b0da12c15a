"""
Retrying JSON fetcher built on httpx.

Every failure (network error, timeout, non-2xx status, non-JSON response) is
retried the same way: a fixed delay, then another attempt, until the attempt
budget is spent and the last error is raised to the caller.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import httpx

from .fetcher_base import FetchOptions, JsonValue

logger = logging.getLogger(__name__)


class FetchError(RuntimeError):
    """
    Raised when a response is received but cannot be used.
    """


async def _delay(seconds: float) -> None:
    await asyncio.sleep(seconds)


class JsonFetcher:
    """
    Fetch JSON documents with a per-attempt timeout and fixed-delay retries.
    """

    def __init__(self, client: httpx.AsyncClient, options: Optional[FetchOptions] = None):
        self.client = client
        self.options = options or FetchOptions()
        self.headers = {
            "User-Agent": self.options.user_agent,
            "Accept": "application/json",
        }

    async def fetch(self, url: str, max_retries: Optional[int] = None) -> JsonValue:
        """
        GET ``url`` and return the decoded JSON body.

        Args:
            url: Endpoint to request
            max_retries: Retries after the first attempt; defaults to
                ``options.retries``

        Raises:
            FetchError: Last attempt timed out, got a bad status or a non-JSON
                body
            Exception: Whatever else the last attempt raised, unchanged
        """
        retries = self.options.retries if max_retries is None else max(max_retries, 0)
        last_error: Optional[Exception] = None

        for attempt in range(retries + 1):
            try:
                return await self._attempt(url)
            except Exception as e:
                last_error = e
                if attempt < retries:
                    logger.warning(
                        "Attempt %d failed for %s: %s. Retrying in %ss...",
                        attempt + 1,
                        url,
                        e,
                        self.options.retry_delay,
                    )
                    await _delay(self.options.retry_delay)

        raise last_error

    async def _attempt(self, url: str) -> JsonValue:
        # httpx timeouts apply per connect/read/write step, so also bound the
        # whole request
        try:
            response = await asyncio.wait_for(
                self.client.get(url, headers=self.headers, timeout=self.options.timeout),
                self.options.timeout,
            )
        except asyncio.TimeoutError:
            raise FetchError(f"Request timed out after {self.options.timeout}s") from None

        if not response.is_success:
            raise FetchError(f"HTTP {response.status_code}: {response.reason_phrase}")

        content_type = response.headers.get("content-type", "")
        if "application/json" not in content_type:
            raise FetchError("Response is not JSON")

        return response.json()


async def fetch_json(
    url: str,
    options: Optional[FetchOptions] = None,
    max_retries: Optional[int] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> JsonValue:
    """
    Convenience wrapper that opens a client for a single fetch.
    """
    async with httpx.AsyncClient(transport=transport, follow_redirects=True) as client:
        return await JsonFetcher(client, options).fetch(url, max_retries)
