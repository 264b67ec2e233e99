"""CLI interface using typer."""

import asyncio
import logging

import typer

from .config import settings

app = typer.Typer(
    name="httpmd5",
    help="Fetch URLs concurrently and print the MD5 of each response body",
    no_args_is_help=True,
)


@app.command()
def digest(
    urls: list[str] = typer.Argument(None, help="URLs to fetch"),
    input_file: typer.FileText = typer.Option(None, "-i", "--input", help="File with one URL per line ('-' for stdin)"),
    concurrency: int = typer.Option(settings.concurrency, "--concurrency", "-c", min=1, help="Concurrent requests"),
    timeout: float = typer.Option(settings.timeout, "--timeout", "-t", min=0.001, help="Per-request timeout (seconds)"),
    output: str = typer.Option(None, "-o", "--output", help="Output file (JSONL)"),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Only output result lines"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
):
    """Fetch URLs and print the MD5 digest of each body, in input order."""
    from .digest import read_urls, run_digest

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    all_urls = list(urls or [])
    if input_file is not None:
        all_urls.extend(read_urls(input_file))

    if not all_urls:
        typer.echo("No URLs given", err=True)
        raise typer.Exit(code=2)

    results = asyncio.run(run_digest(
        urls=all_urls,
        concurrency=concurrency,
        timeout=timeout,
        output_path=output,
        quiet=quiet,
    ))

    if any(not r.ok for r in results):
        raise typer.Exit(code=1)


@app.command()
def version():
    """Show version."""
    from . import __version__

    typer.echo(f"httpmd5 {__version__}")


if __name__ == "__main__":
    app()
