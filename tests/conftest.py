"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - fake_backend: Mutable state behind an in-process chat backend
    - backend_client: BackendClient wired to the fake backend via ASGITransport
    - offline_client: BackendClient whose transport refuses every connection
    - storage / store: Plain dict standing in for per-browser storage
    - bot_config: Presentation config with explicit welcome and error strings
    - async_client: HTTPX client for the widget's own FastAPI app
"""

from collections.abc import AsyncGenerator

import httpx
import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from httpx import ASGITransport, AsyncClient

from chat_widget.api.app import app
from chat_widget.client.backend import BackendClient
from chat_widget.models.bot_config import BotConfig
from chat_widget.storage.transcript import KeyValueTranscriptStore

BACKEND_URL = "http://backend.test"


class FakeBackend:
    """Scriptable state for the fake /api/init-thread and /api/chat endpoints."""

    def __init__(self) -> None:
        self.init_body: object = {"threadId": "t1"}
        self.init_status = 200
        self.chat_body: object = {"reply": "hi there"}
        self.chat_status = 200
        self.chat_raw: str | None = None
        self.init_calls = 0
        self.chat_requests: list[dict] = []


def create_backend_app(backend: FakeBackend) -> FastAPI:
    """Build a FastAPI app that answers from the given FakeBackend state."""
    application = FastAPI()

    @application.get("/api/init-thread")
    async def init_thread() -> JSONResponse:
        backend.init_calls += 1
        return JSONResponse(backend.init_body, status_code=backend.init_status)

    @application.post("/api/chat")
    async def chat(request: Request) -> Response:
        backend.chat_requests.append(await request.json())
        if backend.chat_raw is not None:
            return Response(
                backend.chat_raw, status_code=backend.chat_status, media_type="text/plain"
            )
        return JSONResponse(backend.chat_body, status_code=backend.chat_status)

    return application


def _refuse_connection(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("Connection refused", request=request)


@pytest.fixture
def fake_backend() -> FakeBackend:
    """Return fresh fake backend state (thread t1, reply 'hi there')."""
    return FakeBackend()


@pytest.fixture
def backend_client(fake_backend: FakeBackend) -> BackendClient:
    """BackendClient talking to the fake backend in-process.

    Args:
        fake_backend: State the fake endpoints answer from.

    Returns:
        Client using ASGITransport, no network involved.
    """
    transport = ASGITransport(app=create_backend_app(fake_backend))
    return BackendClient(BACKEND_URL, transport=transport)


@pytest.fixture
def offline_client() -> BackendClient:
    """BackendClient whose every request fails with a connection error."""
    return BackendClient(BACKEND_URL, transport=httpx.MockTransport(_refuse_connection))


@pytest.fixture
def storage() -> dict[str, str]:
    """Empty key-value storage standing in for the browser store."""
    return {}


@pytest.fixture
def store(storage: dict[str, str]) -> KeyValueTranscriptStore:
    """Transcript store over the shared storage dict with default limits."""
    return KeyValueTranscriptStore(storage)


@pytest.fixture
def bot_config() -> BotConfig:
    """Bot config with explicit welcome and error messages."""
    return BotConfig(welcomeMessage="Welcome!", errorMessage="Something went wrong.")


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for the widget's FastAPI app.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
