"""Chat operations against the memory server.

Each function performs exactly one HTTP round trip through the injected
``MemoryClient``. Non-2xx responses and transport errors raise
``RequestFailed``; bodies that do not validate raise ``DecodeFailed``.
"""

from typing import Any, List, Optional, Sequence

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from ..domain.errors import DecodeFailed, RequestFailed
from ..domain.models import Chat, ChatMessage
from .memory import MemoryClient

logger = structlog.get_logger()

_chat_adapter = TypeAdapter(Chat)
_chat_list_adapter = TypeAdapter(List[Chat])
_message_list_adapter = TypeAdapter(List[ChatMessage])


async def _send(
    client: MemoryClient,
    method: str,
    url: str,
    action: str,
    event: str,
    json: Optional[Any] = None,
    **context: Any,
) -> httpx.Response:
    """Send a request and raise ``RequestFailed`` unless the status is 2xx."""
    try:
        response = await client.client.request(method, url, json=json)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning(event, error=str(e), **context)
        raise RequestFailed(action, reason=str(e) or type(e).__name__) from e

    logger.debug(
        "memory_server_response",
        method=method,
        url=url,
        status_code=response.status_code,
    )

    if not response.is_success:
        try:
            body = response.text
        except (httpx.HTTPError, UnicodeDecodeError):
            body = ""
        logger.warning(event, status_code=response.status_code, error=body, **context)
        raise RequestFailed(action, status_code=response.status_code, body=body)

    return response


def _decode(response: httpx.Response, adapter: TypeAdapter, action: str, **context: Any):
    """Validate a JSON body, raising ``DecodeFailed`` on malformed or mismatched data."""
    try:
        return adapter.validate_json(response.content)
    except ValidationError as e:
        logger.error("memory_server_decode_failed", action=action, error=str(e), **context)
        raise DecodeFailed(action, body=response.text) from e


async def chat_create(client: MemoryClient, session_id: str) -> Chat:
    """Create a new Chat on the memory server."""
    logger.debug("chat_create_started", session_id=session_id)

    response = await _send(
        client,
        "POST",
        client.url("chats"),
        "Failed to create chat",
        "chat_create_failed",
        json={"sessionId": session_id},
        session_id=session_id,
    )

    chat = _decode(response, _chat_adapter, "Failed to parse chat", session_id=session_id)
    logger.debug("chat_created", chat_id=chat.id, session_id=session_id)
    return chat


async def chat_get(client: MemoryClient, chat_id: str) -> Chat:
    """Get a Chat from the memory server."""
    logger.debug("chat_get_started", chat_id=chat_id)

    response = await _send(
        client,
        "GET",
        client.url("chats", chat_id),
        "Failed to get chat",
        "chat_get_failed",
        chat_id=chat_id,
    )

    chat = _decode(response, _chat_adapter, "Failed to parse chat", chat_id=chat_id)
    logger.debug("chat_fetched", chat_id=chat.id)
    return chat


async def chat_list(client: MemoryClient) -> List[Chat]:
    """List all Chats on the memory server."""
    logger.debug("chat_list_started")

    response = await _send(
        client,
        "GET",
        client.url("chats"),
        "Failed to list chats",
        "chat_list_failed",
    )

    chats = _decode(response, _chat_list_adapter, "Failed to parse chats")
    logger.debug("chats_listed", count=len(chats))
    return chats


async def chat_add_messages(
    client: MemoryClient,
    chat_id: str,
    messages: Sequence[ChatMessage],
) -> None:
    """Write messages to a Chat on the memory server."""
    logger.debug("chat_add_messages_started", chat_id=chat_id, count=len(messages))

    payload = {
        "messages": [m.model_dump(mode="json", by_alias=True) for m in messages],
    }
    await _send(
        client,
        "PUT",
        client.url("chats", chat_id, "messages"),
        "Failed to add messages",
        "chat_add_messages_failed",
        json=payload,
        chat_id=chat_id,
    )

    logger.debug("chat_messages_added", chat_id=chat_id, count=len(messages))


async def chat_get_messages(client: MemoryClient, chat_id: str) -> List[ChatMessage]:
    """Get all messages of a Chat, in server order."""
    logger.debug("chat_get_messages_started", chat_id=chat_id)

    response = await _send(
        client,
        "GET",
        client.url("chats", chat_id, "messages"),
        "Failed to get messages",
        "chat_get_messages_failed",
        chat_id=chat_id,
    )

    messages = _decode(
        response, _message_list_adapter, "Failed to parse messages", chat_id=chat_id
    )
    logger.debug("chat_messages_fetched", chat_id=chat_id, count=len(messages))
    return messages


async def chat_set_summary(client: MemoryClient, chat_id: str, summary: str) -> None:
    """Replace the summary of a Chat."""
    logger.debug("chat_set_summary_started", chat_id=chat_id, summary_length=len(summary))

    await _send(
        client,
        "PUT",
        client.url("chats", chat_id, "summary"),
        "Failed to set chat summary",
        "chat_set_summary_failed",
        json={"summary": summary},
        chat_id=chat_id,
    )

    logger.debug("chat_summary_set", chat_id=chat_id)
