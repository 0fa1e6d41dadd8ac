from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

import httpx

from weatherstats.core.config import Settings, get_settings
from weatherstats.core.errors import MalformedDataError, UpstreamNetworkError


logger = logging.getLogger(__name__)

_client: Optional[httpx.AsyncClient] = None


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    limits = httpx.Limits(max_keepalive_connections=20, max_connections=50)
    timeout = httpx.Timeout(settings.http_timeout_seconds)
    return httpx.AsyncClient(
        timeout=timeout,
        limits=limits,
        headers={"User-Agent": "weatherstats/0.1"},
        follow_redirects=True,
    )


def set_http_client(client: Optional[httpx.AsyncClient]) -> None:
    global _client
    _client = client


def get_http_client() -> httpx.AsyncClient:
    if _client is None:
        raise RuntimeError("HTTP client not initialized. Did you start the FastAPI app?")
    return _client


async def request_with_retries(
    client: httpx.AsyncClient,
    *,
    method: str,
    url: str,
    retries: int,
    backoff_seconds: float,
    **kwargs,
) -> httpx.Response:
    last_exc: Exception | None = None
    for attempt in range(retries + 1):
        try:
            resp = await client.request(method, url, **kwargs)
            if resp.status_code in {429, 500, 502, 503, 504} and attempt < retries:
                await asyncio.sleep(backoff_seconds * (2**attempt))
                continue
            return resp
        except (httpx.TimeoutException, httpx.NetworkError) as exc:
            last_exc = exc
            if attempt >= retries:
                raise
            await asyncio.sleep(backoff_seconds * (2**attempt))
    if last_exc:
        raise last_exc
    raise RuntimeError("request_with_retries failed unexpectedly")


async def fetch_json(url: str, params: dict[str, Any]) -> Any:
    """GET ``url`` and decode the JSON body, mapping failures onto lookup errors."""
    client = get_http_client()
    settings = get_settings()
    try:
        resp = await request_with_retries(
            client,
            method="GET",
            url=url,
            params=params,
            retries=settings.http_retries,
            backoff_seconds=settings.http_retry_backoff_seconds,
        )
    except httpx.HTTPError as exc:
        logger.warning("HTTP request error for %s: %s", url, exc)
        raise UpstreamNetworkError(f"Upstream error: {type(exc).__name__}") from exc

    if resp.status_code != 200:
        logger.warning("Upstream %s answered with status %s", url, resp.status_code)
        raise UpstreamNetworkError(f"Upstream status {resp.status_code}")

    try:
        return resp.json()
    except ValueError as exc:
        raise MalformedDataError(f"Upstream {url} returned a non-JSON body") from exc
