"""Data types shared by the batch fetcher and its callers."""

from dataclasses import dataclass


class FetchFailure(Exception):
    """A single URL could not be fetched."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


@dataclass(frozen=True)
class FetchJob:
    """A URL to fetch, tagged with its position in the input."""

    index: int
    url: str


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one fetch: either a digest or an error, never both."""

    url: str
    digest: str | None = None
    error: FetchFailure | None = None

    def __post_init__(self):
        if (self.digest is None) == (self.error is None):
            raise ValueError("exactly one of digest or error must be set")

    @classmethod
    def success(cls, url: str, digest: str) -> "FetchResult":
        return cls(url=url, digest=digest)

    @classmethod
    def failure(cls, url: str, error: FetchFailure) -> "FetchResult":
        return cls(url=url, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        """Render as a JSON-serializable dict."""
        return {
            "url": self.url,
            "md5": self.digest,
            "error": self.error.reason if self.error is not None else None,
        }
