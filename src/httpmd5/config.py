"""Configuration using pydantic-settings."""

from pydantic_settings import BaseSettings


class FetcherSettings(BaseSettings):
    """Batch fetcher configuration."""

    timeout: float = 10.0
    concurrency: int = 10
    user_agent: str = "httpmd5/0.1"
    max_connections: int = 100
    max_keepalive_connections: int = 20

    model_config = {"env_prefix": "HTTPMD5_"}


settings = FetcherSettings()
