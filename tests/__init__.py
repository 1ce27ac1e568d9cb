"""Test package for Chat Widget.

Provides test coverage for all components with unit tests for isolated
logic and integration tests for the session running against a backend.

Structure:
    - unit/: Individual function and class tests
    - integration/: Controller and client against an in-process backend

Integration tests use a FastAPI fake backend through ASGITransport, so no
network access or external services are required.
Leverages pytest with pytest-check for soft assertions.
"""
