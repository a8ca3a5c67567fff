"""Service test fixtures — FastAPI test client.

Invariants:
    - Every route test talks to the ASGI app in-process (no network)

Design Decisions:
    - httpx.AsyncClient over ASGITransport: same client the app is served with
"""

import pytest
from httpx import ASGITransport, AsyncClient

from server_data_gate.main import app


@pytest.fixture
async def client():
    """FastAPI test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
