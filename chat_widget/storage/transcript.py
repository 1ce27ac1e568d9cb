"""Transcript persistence over a string-valued key-value store.

The transcript is kept as a compact JSON array of messages under one key.
Size is measured in UTF-16 code units, the unit browser storage quotas are
expressed in. When the serialized transcript exceeds the ceiling only the
most recent messages are written; the caller's list is never modified.
"""

import json
import logging
from collections.abc import MutableMapping, Sequence
from typing import Protocol

from pydantic import TypeAdapter, ValidationError

from chat_widget.models.schemas import Message

logger = logging.getLogger(__name__)

STORAGE_KEY = "chat_history"
MAX_SERIALIZED_LENGTH = 6_000_000
KEEP_LAST_MESSAGES = 25

_transcript_adapter = TypeAdapter(list[Message])


class PersistenceError(Exception):
    """Raised when the transcript cannot be written."""


class TranscriptStore(Protocol):
    """Port for durable transcript storage."""

    def load(self) -> list[Message]:
        """Return the stored transcript, or an empty list if there is none."""
        ...

    def save(self, messages: Sequence[Message]) -> None:
        """Persist the transcript.

        Raises:
            PersistenceError: If the write fails.
        """
        ...


def utf16_length(text: str) -> int:
    """Length of text in UTF-16 code units (astral characters count twice)."""
    return len(text.encode("utf-16-le", errors="surrogatepass")) // 2


def serialize_transcript(messages: Sequence[Message]) -> str:
    """Serialize messages to compact JSON, keeping non-ASCII characters as-is."""
    return json.dumps(
        [message.model_dump() for message in messages],
        ensure_ascii=False,
        separators=(",", ":"),
    )


class KeyValueTranscriptStore:
    """TranscriptStore backed by any mutable mapping of strings.

    Works with NiceGUI's per-browser ``app.storage.user`` as well as a plain
    dict. An optional quota emulates the capacity limit of browser storage.
    """

    def __init__(
        self,
        backend: MutableMapping[str, str],
        key: str = STORAGE_KEY,
        max_length: int = MAX_SERIALIZED_LENGTH,
        keep_last: int = KEEP_LAST_MESSAGES,
        quota: int | None = None,
    ) -> None:
        self._backend = backend
        self._key = key
        self._max_length = max_length
        self._keep_last = keep_last
        self._quota = quota

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> list[Message]:
        raw = self._backend.get(self._key)
        if raw is None:
            return []

        try:
            messages = _transcript_adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Ignoring malformed transcript under '{self._key}': {e}")
            return []

        logger.info(f"Loaded {len(messages)} messages from '{self._key}'")
        return messages

    def save(self, messages: Sequence[Message]) -> None:
        try:
            data = serialize_transcript(messages)
            length = utf16_length(data)
            if length > self._max_length:
                kept = list(messages)[-self._keep_last :]
                logger.warning(
                    f"Transcript length {length} exceeds {self._max_length}, "
                    f"storing last {len(kept)} of {len(messages)} messages"
                )
                data = serialize_transcript(kept)
                length = utf16_length(data)
        except (TypeError, ValueError) as e:
            raise PersistenceError(f"Failed to serialize transcript: {e}") from e

        if self._quota is not None and length > self._quota:
            raise PersistenceError(
                f"Storage quota exceeded: {length} > {self._quota} for '{self._key}'"
            )

        try:
            self._backend[self._key] = data
        except (OSError, TypeError, ValueError) as e:
            raise PersistenceError(f"Failed to write '{self._key}': {e}") from e
