"""Request builder for transport-level requests."""
from typing import Mapping, Optional, Union

from yarl import URL

from ..encoding import ParameterEncoder, Parameters
from ..exceptions import InvalidRequestError, InvalidURLError
from ..models import HTTPRequest, RequestDraft
from ..types import CachePolicy, HTTPMethod


class RequestBuilder:
    """Builds HTTPRequest objects from call inputs."""

    @staticmethod
    def parse_url(url: Union[str, URL]) -> URL:
        """Parses the target URL, requiring a scheme and a host."""
        if isinstance(url, URL):
            parsed = url
        else:
            if not isinstance(url, str) or not url:
                raise InvalidURLError(url)
            try:
                parsed = URL(url)
            except (TypeError, ValueError) as e:
                raise InvalidURLError(url) from e

        if not parsed.is_absolute() or not parsed.scheme or not parsed.host:
            raise InvalidURLError(str(url))
        return parsed

    @classmethod
    def build(
        cls,
        url: Union[str, URL],
        method: Union[HTTPMethod, str],
        parameters: Optional[Parameters] = None,
        encoder: Optional[ParameterEncoder] = None,
        headers: Optional[Mapping[str, str]] = None,
        cache_policy: CachePolicy = CachePolicy.USE_PROTOCOL_CACHE_POLICY,
        timeout: float = 60.0,
    ) -> HTTPRequest:
        """
        Builds a request.

        Parameters are encoded before headers and method are applied, since
        query encoders rewrite the URL. Headers are added one by one, so a
        key repeated across calls keeps every value.

        Args:
            url: Target URL
            method: HTTP method
            parameters: Parameters for the encoder
            encoder: Strategy placing parameters into the request
            headers: Header fields to add
            cache_policy: Cache behaviour requested from the transport
            timeout: Total round-trip timeout in seconds

        Returns:
            The immutable request

        Raises:
            InvalidURLError: If the URL does not parse
            ParameterEncodingError: If the encoder rejects the parameters
        """
        draft = RequestDraft(
            url=cls.parse_url(url),
            cache_policy=cache_policy,
            timeout=timeout,
        )

        if parameters is not None and encoder is not None:
            encoder.encode(parameters, draft)

        if headers:
            for name, value in headers.items():
                draft.headers.add(name, value)

        method_name = method.value if isinstance(method, HTTPMethod) else method
        if not method_name:
            raise InvalidRequestError("HTTP method must not be empty")
        draft.method = method_name

        return draft.freeze()
