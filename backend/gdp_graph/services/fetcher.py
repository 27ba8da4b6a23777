import json
from typing import List, Optional

import httpx

from ..config.settings import settings
from ..models.dataset import Dataset
from ..models.errors import NetworkError, ParseError
from ..utils.logger import log
from .transformer import transform

logger = log


class GDPFetcher:
    """
    One-shot loader for the GDP feed.

    `fetch` blocks until the whole response is in; `fetch_async` is the
    awaitable equivalent for callers running inside an event loop. Neither
    retries, and neither sets a timeout. Redirects are followed.
    """

    def __init__(self, url: Optional[str] = None,
                 transport: Optional[httpx.BaseTransport] = None,
                 async_transport: Optional[httpx.AsyncBaseTransport] = None):
        self.url = url or settings.DATA_URL
        self.transport = transport
        self.async_transport = async_transport

    def fetch_raw(self, url: Optional[str] = None) -> List[list]:
        url = url or self.url
        logger.info(f"📦 Fetching GDP data from {url}")
        with httpx.Client(transport=self.transport, timeout=None, follow_redirects=True) as client:
            try:
                r = client.get(url)
            except httpx.HTTPError as e:
                logger.error(f"❌ Request to {url} failed: {e}")
                raise NetworkError(f"Request to {url} failed: {e}", url) from e
        return self._parse(r, url)

    async def fetch_raw_async(self, url: Optional[str] = None) -> List[list]:
        url = url or self.url
        logger.info(f"📦 Fetching GDP data from {url}")
        async with httpx.AsyncClient(transport=self.async_transport, timeout=None, follow_redirects=True) as client:
            try:
                r = await client.get(url)
            except httpx.HTTPError as e:
                logger.error(f"❌ Request to {url} failed: {e}")
                raise NetworkError(f"Request to {url} failed: {e}", url) from e
        return self._parse(r, url)

    def fetch(self, url: Optional[str] = None) -> Dataset:
        return transform(self.fetch_raw(url))

    async def fetch_async(self, url: Optional[str] = None) -> Dataset:
        return transform(await self.fetch_raw_async(url))

    @staticmethod
    def _parse(r: httpx.Response, url: str) -> List[list]:
        if not r.is_success:
            logger.error(f"❌ {url} answered {r.status_code}")
            raise NetworkError(f"{url} answered {r.status_code}", url, status_code=r.status_code)

        try:
            payload = r.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"❌ Malformed JSON from {url}: {e}")
            raise ParseError(f"Malformed JSON from {url}") from e

        if not isinstance(payload, dict) or not isinstance(payload.get("data"), list):
            raise ParseError(f"Response from {url} has no 'data' list")

        data = payload["data"]
        logger.info(f"✅ Received {len(data)} rows")
        return data
