"""Base repository interface."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from ..domain.models import Chat, ChatMessage


class ChatRepository(ABC):
    """Abstract base class for chat storage backends."""

    @abstractmethod
    async def create_chat(self, session_id: str) -> Chat:
        """Create a new chat for a session."""
        pass

    @abstractmethod
    async def get_chat(self, chat_id: str) -> Chat:
        """Retrieve a chat by ID."""
        pass

    @abstractmethod
    async def list_chats(self) -> List[Chat]:
        """List all chats."""
        pass

    @abstractmethod
    async def add_messages(self, chat_id: str, messages: Sequence[ChatMessage]) -> None:
        """Append messages to a chat."""
        pass

    @abstractmethod
    async def get_messages(self, chat_id: str) -> List[ChatMessage]:
        """Get the messages of a chat."""
        pass

    @abstractmethod
    async def set_summary(self, chat_id: str, summary: str) -> None:
        """Replace the summary of a chat."""
        pass
