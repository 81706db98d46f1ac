"""
Transport-level request and response models.

A RequestDraft is mutated by parameter encoders while a request is being
assembled; RequestBuilder then freezes it into an HTTPRequest.
"""
from dataclasses import dataclass, field
from typing import Optional

from multidict import CIMultiDict, CIMultiDictProxy
from yarl import URL

from .types import CachePolicy


@dataclass
class RequestDraft:
    """In-progress request handed to parameter encoders."""
    url: URL
    headers: CIMultiDict = field(default_factory=CIMultiDict)
    body: Optional[bytes] = None
    method: str = 'GET'
    cache_policy: CachePolicy = CachePolicy.USE_PROTOCOL_CACHE_POLICY
    timeout: float = 60.0

    def freeze(self) -> 'HTTPRequest':
        """Create the immutable request from the current draft state."""
        return HTTPRequest(
            url=self.url,
            method=self.method,
            headers=CIMultiDictProxy(CIMultiDict(self.headers)),
            body=self.body,
            cache_policy=self.cache_policy,
            timeout=self.timeout,
        )


@dataclass(frozen=True)
class HTTPRequest:
    """
    Request ready to be handed to a transport.

    Attributes:
        url: Absolute target URL, including any encoded query
        method: HTTP method string
        headers: Read-only, case-insensitive, multi-value header view
        body: Encoded body bytes, None when the request has no body
        cache_policy: Cache behaviour requested from the transport
        timeout: Total timeout for the round-trip in seconds
    """
    url: URL
    method: str
    headers: CIMultiDictProxy
    body: Optional[bytes] = None
    cache_policy: CachePolicy = CachePolicy.USE_PROTOCOL_CACHE_POLICY
    timeout: float = 60.0


@dataclass(frozen=True)
class HTTPResponse:
    """
    Response produced by a transport.

    A body of None means the transport produced no body reference at all,
    which differs from an empty body.
    """
    status_code: int
    headers: CIMultiDictProxy = field(
        default_factory=lambda: CIMultiDictProxy(CIMultiDict())
    )
    body: Optional[bytes] = None
