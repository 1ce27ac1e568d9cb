"""Keeps the durable transcript in step with the conversation."""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from chat_widget.models.schemas import ChangeKind, Message
from chat_widget.storage.transcript import PersistenceError, TranscriptStore

if TYPE_CHECKING:
    from chat_widget.session.controller import ChatSessionController

logger = logging.getLogger(__name__)


class PersistenceSynchronizer:
    """Writes the transcript after every message change and on teardown.

    Both writes go through the same store, so the store's trim-on-overflow
    policy applies uniformly. Write failures are logged and dropped.
    """

    def __init__(self, store: TranscriptStore) -> None:
        self._store = store

    def on_change(self, controller: "ChatSessionController", change: ChangeKind) -> None:
        if change is ChangeKind.MESSAGES:
            self.sync(controller.messages)

    def sync(self, messages: Sequence[Message]) -> bool:
        """Persist messages, returning False if the write failed."""
        try:
            self._store.save(messages)
        except PersistenceError as e:
            logger.error(f"Error saving chat history: {e}")
            return False
        return True

    def flush(self, messages: Sequence[Message]) -> bool:
        """Final best-effort write when the session is torn down."""
        logger.info(f"Flushing {len(messages)} messages on teardown")
        return self.sync(messages)
