"""Durable transcript storage.

Responsibilities:
    - Persistence port (load/save) injected into the session controller
    - Compact JSON serialization measured in UTF-16 code units
    - Trim-on-overflow: keep only the most recent messages past the ceiling
    - Tolerant loading: malformed stored data starts an empty transcript
"""

from chat_widget.storage.transcript import (
    KEEP_LAST_MESSAGES,
    MAX_SERIALIZED_LENGTH,
    STORAGE_KEY,
    KeyValueTranscriptStore,
    PersistenceError,
    TranscriptStore,
    serialize_transcript,
    utf16_length,
)

__all__ = [
    "KEEP_LAST_MESSAGES",
    "MAX_SERIALIZED_LENGTH",
    "STORAGE_KEY",
    "KeyValueTranscriptStore",
    "PersistenceError",
    "TranscriptStore",
    "serialize_transcript",
    "utf16_length",
]
