"""Configuration for the Schwab API client.

Base URLs are resolved once into an immutable ``SchwabApiConfig`` and
injected into every call. Environment overrides are loaded with
pydantic-settings (prefixed SCHWAB_). Credentials are never settings:
callers pass them on every call.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings

DEFAULT_BASE_URL = "https://api.schwabapi.com"


class SchwabApiSettings(BaseSettings):
    """Client settings loaded from environment variables."""

    base_url: str = DEFAULT_BASE_URL
    request_timeout: float = 30.0
    follow_redirects: bool = False

    model_config = {
        "env_prefix": "SCHWAB_",
        "env_file": ".env",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> SchwabApiSettings:
    """Get cached settings singleton."""
    return SchwabApiSettings()


@dataclass(frozen=True)
class SchwabApiConfig:
    """Static endpoint configuration shared by all calls."""
    base_url: str = DEFAULT_BASE_URL
    request_timeout: float = 30.0
    follow_redirects: bool = False

    def __post_init__(self):
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @property
    def oauth_url(self) -> str:
        return f"{self.base_url}/v1/oauth"

    @property
    def trader_url(self) -> str:
        return f"{self.base_url}/trader/v1"

    @property
    def marketdata_url(self) -> str:
        return f"{self.base_url}/marketdata/v1"

    @classmethod
    def from_settings(cls, settings: Optional[SchwabApiSettings] = None) -> "SchwabApiConfig":
        settings = settings or get_settings()
        return cls(
            base_url=settings.base_url,
            request_timeout=settings.request_timeout,
            follow_redirects=settings.follow_redirects,
        )


DEFAULT_CONFIG = SchwabApiConfig()
