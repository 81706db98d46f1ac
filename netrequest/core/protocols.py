"""
Collaborator protocols.

Defines the interfaces the requester depends on: header policy, transport,
decoder, and the requestable facade contract.
"""
from typing import Any, Mapping, Optional, Protocol, Type, TypeVar, runtime_checkable

from .encoding.parameters import Parameters
from .models import HTTPRequest, HTTPResponse
from .types import (
    AuthorizationType,
    CachePolicy,
    HTTPMethod,
    ParameterEncoding,
    RequestAcceptType,
    RequestContentType,
)

T = TypeVar('T')


@runtime_checkable
class HeaderPolicy(Protocol):
    """
    Protocol for default header providers.

    Called once per request, before explicit per-call headers are merged
    over the result. Must not block.
    """

    def compute_headers(
        self,
        content_type: RequestContentType,
        accept_type: RequestAcceptType,
        authorization_type: AuthorizationType,
        url: str,
        method: HTTPMethod,
    ) -> Mapping[str, str]:
        """
        Compute default headers for a request.

        Returns:
            Header name to value mapping
        """
        ...


@runtime_checkable
class Transport(Protocol):
    """
    Protocol for HTTP transports.

    Implementations perform the network round-trip. Their errors are
    propagated to the caller unchanged.
    """

    async def send(self, request: HTTPRequest) -> HTTPResponse:
        """
        Perform the request.

        Args:
            request: Request to send

        Returns:
            The HTTP response
        """
        ...

    async def close(self) -> None:
        """Release transport resources."""
        ...


@runtime_checkable
class ResponseDecoder(Protocol):
    """Protocol for response body decoders."""

    def decode(self, data: bytes, response_type: Type[T]) -> T:
        """
        Decode body bytes into the requested type.

        Raises:
            DecodingError: If the bytes are malformed or do not match the type
        """
        ...


@runtime_checkable
class Requestable(Protocol):
    """
    Protocol for objects that issue requests on behalf of callers.

    Facades over a Requester implement this to add application concerns
    such as access tokens while keeping the call signature.
    """

    async def perform_request(
        self,
        url: str,
        http_method: HTTPMethod,
        headers: Optional[Mapping[str, str]] = None,
        authorization_type: AuthorizationType = AuthorizationType.BEARER,
        content_type: RequestContentType = RequestContentType.JSON,
        parameters: Optional[Parameters] = None,
        encoding: Optional[ParameterEncoding] = ParameterEncoding.JSON,
        cache_policy: Optional[CachePolicy] = None,
        timeout: Optional[float] = None,
        response_type: Type[T] = Any,
    ) -> T:
        """Perform a request and decode its response."""
        ...
