"""Configuration for the memory server client."""

import os

import httpx
from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_TIMEOUT = 30.0


class MemoryConfig(BaseModel):
    """Where the memory server lives and how long to wait for it."""

    model_config = ConfigDict(frozen=True)

    base_url: str
    timeout: float = DEFAULT_TIMEOUT  # seconds

    @field_validator("base_url")
    @classmethod
    def _normalize_base_url(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        try:
            url = httpx.URL(value)
        except httpx.InvalidURL as e:
            raise ValueError(f"base_url is not a valid URL: {e}") from e
        if not url.host:
            raise ValueError("base_url must include a host")
        return value.rstrip("/")

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("timeout must be positive")
        return value

    @classmethod
    def from_env(cls) -> "MemoryConfig":
        """Build a config from MEMORY_SERVER_URL and MEMORY_SERVER_TIMEOUT."""
        return cls(
            base_url=os.getenv("MEMORY_SERVER_URL", DEFAULT_BASE_URL),
            timeout=float(os.getenv("MEMORY_SERVER_TIMEOUT", DEFAULT_TIMEOUT)),
        )
