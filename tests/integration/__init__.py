"""Integration tests for components working together as a system.

Coverage:
    - BackendClient against a real FastAPI app over ASGITransport
    - Full session lifecycle: bootstrap, submissions, persistence, reload
    - Widget host app endpoints

No external services required.
"""
