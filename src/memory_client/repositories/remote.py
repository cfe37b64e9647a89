"""Chat repository backed by the remote memory server."""

from typing import List, Optional, Sequence

import httpx

from ..config import MemoryConfig
from ..domain.models import Chat, ChatMessage
from ..services import chats
from ..services.memory import MemoryClient
from .base import ChatRepository


class MemoryApiClient(ChatRepository):
    """Facade binding one ``MemoryClient`` to the chat operations."""

    def __init__(self, client: MemoryClient) -> None:
        self.client = client

    @classmethod
    def connect(
        cls,
        config: MemoryConfig,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "MemoryApiClient":
        """Build a facade over a new MemoryClient for ``config``."""
        return cls(MemoryClient(config, http_client=http_client))

    async def create_chat(self, session_id: str) -> Chat:
        """Create a new chat for a session."""
        return await chats.chat_create(self.client, session_id)

    async def get_chat(self, chat_id: str) -> Chat:
        """Retrieve a chat by ID."""
        return await chats.chat_get(self.client, chat_id)

    async def list_chats(self) -> List[Chat]:
        """List all chats."""
        return await chats.chat_list(self.client)

    async def add_messages(self, chat_id: str, messages: Sequence[ChatMessage]) -> None:
        """Append messages to a chat."""
        await chats.chat_add_messages(self.client, chat_id, messages)

    async def get_messages(self, chat_id: str) -> List[ChatMessage]:
        """Get the messages of a chat, in server order."""
        return await chats.chat_get_messages(self.client, chat_id)

    async def set_summary(self, chat_id: str, summary: str) -> None:
        """Replace the summary of a chat."""
        await chats.chat_set_summary(self.client, chat_id, summary)

    async def aclose(self) -> None:
        """Close the underlying MemoryClient."""
        await self.client.aclose()

    async def __aenter__(self) -> "MemoryApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
