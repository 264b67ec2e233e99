"""Bounded-concurrency fetching of URL body digests."""

import asyncio
import hashlib
import logging
from collections.abc import Sequence

import httpx

from .protocols import FetchFailure, FetchJob, FetchResult

logger = logging.getLogger(__name__)


def md5_hex(data: bytes) -> str:
    """Return the lowercase hex MD5 digest of raw bytes."""
    return hashlib.md5(data).hexdigest()


class BatchFetcher:
    """Fetch many URLs through a shared client and digest each body.

    Results come back in input order no matter which request finishes first.
    A failed URL yields a failed result in its own slot and never affects
    the rest of the batch.
    """

    def __init__(self, client: httpx.AsyncClient, timeout: float):
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout}")
        self._client = client
        self._timeout = timeout

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    @property
    def timeout(self) -> float:
        return self._timeout

    async def fetch_all(self, concurrency: int, urls: Sequence[str]) -> list[FetchResult]:
        """Fetch every URL with at most ``concurrency`` requests in flight.

        Returns one result per input URL, where ``results[i].url == urls[i]``.
        """
        if concurrency < 1:
            raise ValueError(f"concurrency must be at least 1, got {concurrency}")

        if not urls:
            return []

        results: list[FetchResult | None] = [None] * len(urls)

        queue: asyncio.Queue[FetchJob] = asyncio.Queue()
        for index, url in enumerate(urls):
            queue.put_nowait(FetchJob(index=index, url=url))

        num_workers = min(concurrency, len(urls))
        logger.info("Fetching %d URLs with %d workers", len(urls), num_workers)

        workers = [
            asyncio.create_task(self._worker(queue, results))
            for _ in range(num_workers)
        ]
        try:
            await asyncio.gather(*workers)
        finally:
            for worker in workers:
                worker.cancel()
            await asyncio.gather(*workers, return_exceptions=True)

        return results  # type: ignore[return-value]

    async def _worker(self, queue: asyncio.Queue[FetchJob], results: list[FetchResult | None]):
        """Drain the job queue, writing each outcome into its own slot."""
        while True:
            try:
                job = queue.get_nowait()
            except asyncio.QueueEmpty:
                return
            results[job.index] = await self._fetch_one(job.url)

    async def _fetch_one(self, url: str) -> FetchResult:
        """Fetch one URL and digest its body.

        Transport errors and malformed URLs (httpx raises ValueError subclasses
        such as IDNAError or UnicodeEncodeError for those) become a failed result.
        """
        try:
            body = await asyncio.wait_for(self._get_body(url), timeout=self._timeout)
        except (TimeoutError, httpx.TimeoutException) as e:
            logger.debug("Timeout fetching %s", url)
            failure = FetchFailure(url, f"timeout after {self._timeout}s")
            failure.__cause__ = e
            return FetchResult.failure(url, failure)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.debug("Request error for %s: %s", url, e)
            failure = FetchFailure(url, str(e) or type(e).__name__)
            failure.__cause__ = e
            return FetchResult.failure(url, failure)

        return FetchResult.success(url, md5_hex(body))

    async def _get_body(self, url: str) -> bytes:
        resp = await self._client.get(url, timeout=httpx.Timeout(self._timeout))
        return resp.content
