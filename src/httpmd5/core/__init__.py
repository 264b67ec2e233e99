"""Core fetching components."""

from .batch import BatchFetcher, md5_hex
from .client import create_client
from .protocols import FetchFailure, FetchJob, FetchResult

__all__ = [
    "BatchFetcher",
    "FetchFailure",
    "FetchJob",
    "FetchResult",
    "create_client",
    "md5_hex",
]
