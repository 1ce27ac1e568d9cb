"""Chat Widget - single-page chat front end with durable browser history.

Combines NiceGUI for the page, HTTPX for backend calls, FastAPI for hosting,
and Pydantic for data validation.

Components:
    - models: Message schema, endpoint payloads, presentation config
    - client: HTTP client for the init-thread and chat endpoints
    - storage: Transcript persistence with trim-on-overflow
    - session: Conversation state machine and persistence synchronizer
    - ui: Web interface for chat interactions
    - api: FastAPI application hosting the page
"""

__version__ = "0.1.0"
