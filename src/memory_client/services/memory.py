"""Shared memory server connection: configuration plus HTTP transport."""

from typing import Optional
from urllib.parse import quote

import httpx
import structlog

from ..config import MemoryConfig

logger = structlog.get_logger()


class MemoryClient:
    """Handle passed into every chat operation.

    Holds the immutable configuration and the ``httpx.AsyncClient`` used to
    reach the memory server. A transport created here is owned and closed by
    ``aclose``; one supplied by the caller is left for the caller to close.
    """

    def __init__(
        self,
        config: MemoryConfig,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config
        self._owns_client = http_client is None
        self.client = http_client or httpx.AsyncClient(timeout=config.timeout)
        logger.info(
            "memory_client_initialized",
            base_url=config.base_url,
            owns_transport=self._owns_client,
        )

    @classmethod
    def from_env(cls, http_client: Optional[httpx.AsyncClient] = None) -> "MemoryClient":
        """Create a client configured from the environment."""
        return cls(MemoryConfig.from_env(), http_client=http_client)

    def url(self, *segments: str) -> str:
        """Join the base URL with percent-encoded path segments."""
        path = "/".join(quote(segment, safe="") for segment in segments)
        return f"{self.config.base_url}/{path}"

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "MemoryClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
