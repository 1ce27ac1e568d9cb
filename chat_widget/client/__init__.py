"""Backend client for the chat endpoints.

Thin async HTTP layer over /api/init-thread and /api/chat using HTTPX.
Contains no conversation state; the session controller decides what a
reply or a failure means for the transcript.
"""

from chat_widget.client.backend import BackendClient, BackendError

__all__ = ["BackendClient", "BackendError"]
