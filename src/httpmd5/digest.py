"""Batch digest runner: fetch, report and save results."""

import time
from collections.abc import Iterable, Sequence

import typer

from .config import settings
from .core import BatchFetcher, FetchResult, create_client
from .output import StreamingOutputWriter, format_result


def read_urls(lines: Iterable[str]) -> list[str]:
    """Parse a URL list, skipping blank lines and # comments."""
    urls = []
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        urls.append(line)
    return urls


async def run_digest(
    urls: Sequence[str],
    concurrency: int = 10,
    timeout: float = 10.0,
    output_path: str | None = None,
    quiet: bool = False,
) -> list[FetchResult]:
    """Digest every URL and report the results."""
    if not quiet:
        typer.echo(f"Fetching {len(urls)} URLs (concurrency: {concurrency}, timeout: {timeout}s)", err=True)

    start_time = time.time()
    async with create_client(
        user_agent=settings.user_agent,
        max_connections=settings.max_connections,
        max_keepalive_connections=settings.max_keepalive_connections,
    ) as client:
        fetcher = BatchFetcher(client, timeout=timeout)
        results = await fetcher.fetch_all(concurrency, urls)
    elapsed = time.time() - start_time

    for result in results:
        typer.echo(format_result(result))

    if output_path:
        with StreamingOutputWriter(output_path) as writer:
            for result in results:
                writer.write_one(result)
        if not quiet:
            typer.echo(f"Results saved to {output_path}", err=True)

    if not quiet:
        failed = sum(1 for r in results if not r.ok)
        typer.echo(f"{len(results) - failed} ok, {failed} failed in {elapsed:.1f}s", err=True)

    return results
