"""HTTP client for the chat backend.

Wraps the two endpoints the widget depends on:
    - GET /api/init-thread: issues a thread identifier
    - POST /api/chat: answers a user message

The response body is parsed whatever the HTTP status, so an error status
with a well-formed body is treated the same as a success. Transport errors and
unparseable bodies surface as BackendError so callers handle a single
exception type.
"""

import logging

import httpx
from pydantic import ValidationError

from chat_widget.models.schemas import ChatReply, ChatRequest, InitThreadResponse

logger = logging.getLogger(__name__)

INIT_THREAD_PATH = "/api/init-thread"
CHAT_PATH = "/api/chat"


class BackendError(Exception):
    """Raised when a backend call fails or returns an unusable response."""


class BackendClient:
    """Async client for the init-thread and chat endpoints.

    A fresh httpx.AsyncClient is opened per call, so requests from the
    bootstrap and from a submission can be in flight at the same time.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the backend client.

        Args:
            base_url: Backend origin, e.g. http://localhost:3000.
            timeout: Seconds before giving up. None waits indefinitely.
            transport: Optional transport override (ASGI or mock in tests).
        """
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        )

    async def init_thread(self) -> str:
        """Request a new thread identifier.

        Returns:
            The opaque thread identifier.

        Raises:
            BackendError: If the endpoint is unreachable or the response is malformed.
        """
        async with self._client() as client:
            try:
                response = await client.get(INIT_THREAD_PATH)
                payload = InitThreadResponse.model_validate_json(response.content)
            except httpx.RequestError as e:
                raise BackendError(f"Init thread connection failed: {e}") from e
            except ValidationError as e:
                raise BackendError(f"Init thread returned malformed response: {e}") from e

        if response.is_error:
            logger.warning(f"Init thread answered HTTP {response.status_code}, using body anyway")

        logger.info(f"Initialized thread {payload.thread_id}")
        return payload.thread_id

    async def send_message(self, message: str, thread_id: str | None) -> str | None:
        """Send a user message and return the assistant's reply.

        Args:
            message: The user's message, as typed.
            thread_id: Thread identifier, or None if not initialized.

        Returns:
            The reply text, or None when the response carries no reply.

        Raises:
            BackendError: On transport failure or a malformed body.
        """
        request = ChatRequest(message=message, thread_id=thread_id)

        async with self._client() as client:
            try:
                response = await client.post(
                    CHAT_PATH,
                    json=request.model_dump(by_alias=True),
                )
                payload = ChatReply.model_validate_json(response.content)
            except httpx.RequestError as e:
                raise BackendError(f"Chat connection failed: {e}") from e
            except ValidationError as e:
                raise BackendError(f"Chat returned malformed response: {e}") from e

        if response.is_error:
            logger.warning(f"Chat answered HTTP {response.status_code}, using body anyway")

        return payload.reply
