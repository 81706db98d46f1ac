"""
Requester - single entry point for typed HTTP requests.

Merges default and explicit headers, encodes parameters, sends the request
through a transport and classifies the response.

Example:
    >>> from netrequest import Requester, HTTPMethod, DefaultHeaderPolicy
    >>>
    >>> policy = DefaultHeaderPolicy(access_token_provider=lambda: token)
    >>> async with Requester(header_policy=policy) as requester:
    ...     user = await requester.perform_request(
    ...         'https://api.example.com/users/1',
    ...         HTTPMethod.GET,
    ...         encoding=None,
    ...         response_type=User,
    ...     )
"""
from typing import Any, Callable, Mapping, Optional, Type, TypeVar, Union

from .core.config import RequesterConfig
from .core.decoding import JSONDecoder
from .core.encoding import ParameterEncoderSet, Parameters
from .core.exceptions import IncorrectResponseTypeError
from .core.headers import merge_headers
from .core.logging import get_logger
from .core.models import HTTPResponse
from .core.protocols import HeaderPolicy, ResponseDecoder, Transport
from .core.request import RequestBuilder, ResponseHandler
from .core.types import (
    AuthorizationType,
    CachePolicy,
    HTTPMethod,
    ParameterEncoding,
    RequestAcceptType,
    RequestContentType,
)

T = TypeVar('T')

HeaderPolicyLike = Union[HeaderPolicy, Callable[..., Mapping[str, str]]]


class Requester:
    """
    Performs requests and decodes their responses.

    Configuration is read-only after construction, so one instance can
    serve concurrent calls.
    """

    def __init__(
        self,
        decoder: Optional[ResponseDecoder] = None,
        transport: Optional[Transport] = None,
        header_policy: Optional[HeaderPolicyLike] = None,
        config: Optional[RequesterConfig] = None,
        encoders: Optional[ParameterEncoderSet] = None,
    ):
        """
        Initialize requester.

        Args:
            decoder: Response decoder (JSONDecoder if not provided)
            transport: Transport (AiohttpTransport if not provided)
            header_policy: HeaderPolicy or callable computing default headers
            config: Requester configuration (uses defaults if not provided)
            encoders: Parameter encoder set (default strategies if not provided)
        """
        self._config = config or RequesterConfig.default()
        self._decoder = decoder or JSONDecoder()
        self._header_policy = header_policy
        self._encoders = encoders or ParameterEncoderSet()
        self._owns_transport = transport is None
        if transport is None:
            from .core.transport import AiohttpTransport
            transport = AiohttpTransport(self._config)
        self._transport = transport

        self._logger = get_logger('netrequest.requester')
        if self._config.log_level is not None:
            self._logger.setLevel(self._config.log_level)

    @property
    def config(self) -> RequesterConfig:
        """Get current configuration."""
        return self._config

    @property
    def transport(self) -> Transport:
        return self._transport

    async def __aenter__(self) -> 'Requester':
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """Close the transport if this requester created it."""
        if self._owns_transport:
            await self._transport.close()

    def _default_headers(
        self,
        content_type: RequestContentType,
        authorization_type: AuthorizationType,
        url: str,
        http_method: HTTPMethod,
    ) -> Optional[Mapping[str, str]]:
        policy = self._header_policy
        if policy is None:
            return None

        # Responses are always decoded as JSON
        args = (content_type, RequestAcceptType.JSON, authorization_type, url, http_method)
        if isinstance(policy, HeaderPolicy):
            return policy.compute_headers(*args)
        return policy(*args)

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
        """
        Perform a request and decode its response.

        Args:
            url: Target URL
            http_method: HTTP method
            headers: Explicit headers, overriding policy defaults per key
            authorization_type: Whether the policy should add authorization
            content_type: Media type of the request body
            parameters: Parameters for the chosen encoding
            encoding: Parameter encoding, None to send no parameters
            cache_policy: Cache behaviour (config default if not provided)
            timeout: Round-trip timeout in seconds (config default if not provided)
            response_type: Type the response body is decoded into

        Returns:
            The decoded response body

        Raises:
            RequestBuildError: If the request cannot be built
            IncorrectResponseTypeError: If the transport returns no HTTP response
            MissingDataError: If a 2xx response has no body
            HTTPResponseError: If the response status is not 2xx
            DecodingError: If the body does not decode into response_type
        """
        merged_headers = merge_headers(
            self._default_headers(content_type, authorization_type, url, http_method),
            headers,
        )

        request = RequestBuilder.build(
            url,
            http_method,
            parameters=parameters,
            encoder=self._encoders.encoder_for(encoding),
            headers=merged_headers,
            cache_policy=cache_policy or self._config.default_cache_policy,
            timeout=self._config.default_timeout if timeout is None else timeout,
        )

        response = await self._transport.send(request)

        if not isinstance(response, HTTPResponse) or not isinstance(response.status_code, int):
            raise IncorrectResponseTypeError(
                f"Expected an HTTP response, got {type(response).__name__}"
            )

        self._logger.debug("%s %s -> %d", request.method, request.url, response.status_code)

        return ResponseHandler.handle(
            response.status_code,
            response.body,
            self._decoder,
            response_type,
        )
