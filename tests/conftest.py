"""Shared test fixtures."""

from __future__ import annotations

import httpx
import pytest
import pytest_asyncio

from apps.aivi.models.errors import NetworkError
from doubles import RecordingTransport
from stub_service import create_app


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def failing_transport() -> RecordingTransport:
    return RecordingTransport(error=NetworkError("Connection refused", url="http://svc"))


@pytest_asyncio.fixture
async def stub_client():
    """httpx client bound in-process to the stub AIVI service at http://testserver."""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=create_app()), base_url="http://testserver"
    ) as client:
        yield client
