"""Domain models for the memory server API."""

from enum import Enum
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class MessageRole(str, Enum):
    """Sender category of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class Chat(BaseModel):
    """Chat model."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    session_id: str = Field(alias="sessionId")
    created_at: str = Field(alias="createdAt")  # opaque, server formatted
    updated_at: str = Field(alias="updatedAt")
    summary: Optional[str] = None


class ChatMessage(BaseModel):
    """Chat message model.

    ``is_sync`` belongs to the memory server; it is carried through untouched.
    """

    model_config = ConfigDict(populate_by_name=True)

    role: MessageRole
    content: str
    is_sync: bool = Field(
        default=False,
        validation_alias=AliasChoices("is_sync", "isSync"),
        serialization_alias="is_sync",
    )
