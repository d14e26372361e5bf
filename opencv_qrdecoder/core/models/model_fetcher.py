"""
HTTP Model Fetcher Implementation.

Retrieves WeChat QRCode model artifacts from the configured model origin
with a plain GET request. No caching, no retry: every initialization
re-fetches.
"""

import logging
from typing import Optional

import httpx

from opencv_qrdecoder.core.errors import TransportError
from opencv_qrdecoder.core.interfaces.model_fetcher_interface import IModelFetcher


class HttpModelFetcher(IModelFetcher):
    """
    Model fetcher backed by httpx.AsyncClient.

    The client is created lazily and closed by close() unless it was
    injected by the caller.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize HttpModelFetcher.

        Args:
            timeout: Request timeout in seconds
            client: Optional shared client (not closed by this fetcher)
            logger: Logger instance
        """
        self._timeout = timeout
        self._client = client
        self._ownsClient = client is None
        self._logger = logger or logging.getLogger(__name__)

    def _ensureClient(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                follow_redirects=True
            )
        return self._client

    async def fetch(self, baseAddress: str, artifactName: str) -> bytes:
        url = f"{baseAddress}/{artifactName}"
        self._logger.info(f"Fetching model artifact: {url}")

        try:
            response = await self._ensureClient().get(url)
        except httpx.HTTPError as e:
            self._logger.error(f"Failed to fetch {url}: {e}")
            raise TransportError(f"Failed to fetch {url}: {e}", url=url) from e

        if not response.is_success:
            self._logger.error(
                f"Failed to fetch {url}: HTTP {response.status_code}"
            )
            raise TransportError(
                f"Failed to fetch {url}: HTTP {response.status_code}",
                url=url,
                statusCode=response.status_code
            )

        data = response.content
        self._logger.info(f"Fetched {artifactName} ({len(data)} bytes)")
        return data

    async def close(self) -> None:
        if self._client is not None and self._ownsClient:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpModelFetcher":
        return self

    async def __aexit__(self, *excInfo) -> None:
        await self.close()
