"""Concurrent HTTP body digests."""

from .core import BatchFetcher, FetchFailure, FetchResult, create_client

__version__ = "0.1.0"

__all__ = ["BatchFetcher", "FetchFailure", "FetchResult", "create_client", "__version__"]
