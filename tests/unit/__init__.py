"""Unit tests for individual components in isolation.

Coverage:
    - models/: Pydantic validation, aliases and config fallbacks
    - storage/: Serialization, size measurement and trim-on-overflow
    - session/: Controller state machine with a stub backend

Uses a stub backend instead of HTTP. Follows single responsibility per
test function.
"""
