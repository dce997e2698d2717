"""Library configuration.

Why here:
- Centralizes environment variables (pydantic-settings) so adapters read
  timeouts and URLs the same way.
- Keeps the request core free of I/O defaults: it only sees the transport.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PORTAL_URL = "https://www.meethue.com/api/nupnp"


class AppSettings(BaseSettings):
    """Central settings for the default transport and URL templates.

    Why pydantic-settings:
    - Typed, validated values at the edge (env vars) without leaking that
      logic into the request core.
    - One settings contract for every adapter.
    """

    model_config = SettingsConfigDict(
        env_prefix="HUEBRIDGE_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    portal_url: str = Field(
        default=DEFAULT_PORTAL_URL,
        min_length=8,
        description="Discovery endpoint of the remote portal.",
    )
    bridge_scheme: str = Field(
        default="http",
        pattern=r"^https?$",
        description="URL scheme used to reach a bridge on the local network.",
    )
    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Per-request timeout (seconds) for the httpx transport.",
    )
    user_agent: str = Field(
        default="huebridge/0.1",
        min_length=1,
        description="User-Agent sent by the httpx transport.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Level used by `setup_logging` when none is given.",
    )
