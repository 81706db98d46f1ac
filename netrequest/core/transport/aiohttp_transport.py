"""
aiohttp transport.

Default Transport implementation backed by a lazily created
aiohttp.ClientSession.
"""
import asyncio
from typing import Optional

import aiohttp
from multidict import CIMultiDict, CIMultiDictProxy

from ..config import RequesterConfig
from ..logging import get_logger
from ..models import HTTPRequest, HTTPResponse
from ..types import CachePolicy
from .session_factory import SessionFactory


class AiohttpTransport:
    """
    Transport performing requests with aiohttp.

    Client errors (aiohttp.ClientError, asyncio.TimeoutError) propagate
    unchanged.

    Example:
        >>> async with AiohttpTransport() as transport:
        ...     response = await transport.send(request)
    """

    def __init__(
        self,
        config: Optional[RequesterConfig] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """
        Args:
            config: Requester configuration (uses defaults if not provided)
            session: Existing session to use; it is not closed by close()
        """
        self._config = config or RequesterConfig.default()
        self._session = session
        self._owns_session = session is None
        self._lock = asyncio.Lock()
        self._logger = get_logger('netrequest.transport')

    @property
    def config(self) -> RequesterConfig:
        """Get current configuration."""
        return self._config

    async def __aenter__(self) -> 'AiohttpTransport':
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created and open."""
        async with self._lock:
            if self._session is None or self._session.closed:
                self._session = SessionFactory.create_session(self._config)
                self._owns_session = True
        return self._session

    def _request_headers(self, request: HTTPRequest) -> CIMultiDict:
        # aiohttp replaces values whose names differ only by case, so every
        # value of a name is sent under the first spelling seen
        spellings = {}
        headers = CIMultiDict()
        for name, value in request.headers.items():
            name = spellings.setdefault(name.lower(), name)
            headers.add(name, value)
        if (request.cache_policy is CachePolicy.RELOAD_IGNORING_LOCAL_CACHE_DATA
                and 'Cache-Control' not in headers):
            headers['Cache-Control'] = 'no-cache'
        return headers

    async def send(self, request: HTTPRequest) -> HTTPResponse:
        """
        Perform the request and read the full response body.

        Args:
            request: Request to send

        Returns:
            Status, headers and body of the response
        """
        session = await self._ensure_session()
        proxy = self._config.proxy.to_aiohttp_proxy() if self._config.proxy else None

        self._logger.debug("Sending %s %s", request.method, request.url)
        async with session.request(
            request.method,
            request.url,
            headers=self._request_headers(request),
            data=request.body,
            timeout=self._config.timeout.to_aiohttp_timeout(request.timeout),
            proxy=proxy,
        ) as response:
            body = await response.read()
            return HTTPResponse(
                status_code=response.status,
                headers=CIMultiDictProxy(CIMultiDict(response.headers)),
                body=body,
            )

    async def close(self):
        """Close the session if this transport created it."""
        if self._session and self._owns_session and not self._session.closed:
            await self._session.close()
        self._session = None
