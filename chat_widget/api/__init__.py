"""FastAPI host for the chat widget.

Serves the NiceGUI page and a health check on one server. The chat
endpoints themselves (/api/init-thread, /api/chat) belong to the backend
configured by CHAT_API_BASE_URL and are not implemented here.

Endpoints:
    - GET /health: Service health status
"""

from chat_widget.api.app import create_app

__all__ = ["create_app"]
