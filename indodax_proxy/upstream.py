import logging
from typing import Any, Optional

import httpx

from indodax_proxy.config import settings

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    """The upstream API could not be reached or answered with garbage."""


class IndodaxClient:
    """Thin async client for the three public Indodax endpoints the proxy uses."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        charts_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.UPSTREAM_BASE_URL).rstrip("/")
        self.charts_url = (charts_url or settings.UPSTREAM_CHARTS_URL).rstrip("/")
        self.timeout = settings.UPSTREAM_TIMEOUT_SECONDS if timeout is None else timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout, transport=self._transport)
        return self._client

    async def _get_json(self, url: str) -> Any:
        client = self._get_client()
        try:
            resp = await client.get(url)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise UpstreamError(f"GET {url} returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"GET {url} failed: {e!r}") from e
        try:
            return resp.json()
        except ValueError as e:
            raise UpstreamError(f"GET {url} returned invalid JSON") from e

    async def fetch_webdata(self) -> Any:
        """Full market snapshot; pairs live under the ``pairs`` key."""
        return await self._get_json(f"{self.base_url}/webdata")

    async def fetch_chart(self, pair: str, timeframe: str) -> Any:
        return await self._get_json(f"{self.charts_url}/{pair}/{timeframe}/data")

    async def fetch_ticker(self, pair: str) -> Any:
        return await self._get_json(f"{self.base_url}/ticker/{pair}")

    async def close(self):
        if self._client is not None:
            try:
                await self._client.aclose()
            except Exception as e:
                logger.exception("Error closing upstream connection: %s", e)
            self._client = None
