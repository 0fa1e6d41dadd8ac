import httpx
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from weatherstats.core.http import set_http_client
from weatherstats.main import create_app


@pytest_asyncio.fixture
async def api_client():
    app = create_app()

    # ASGITransport skips the lifespan, so install the upstream client by hand.
    async with httpx.AsyncClient() as upstream:
        set_http_client(upstream)
        try:
            async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
                yield client
        finally:
            set_http_client(None)
