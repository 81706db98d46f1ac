"""
Parameter encoding strategies.

Implements Strategy Pattern for placing call parameters into a request:
JSON body, URL-encoded body, URL query string, or raw body bytes.
"""
import json
from abc import ABC, abstractmethod
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

from yarl import URL

from ..exceptions import (
    InvalidParametersTypeError,
    InvalidQueryStringError,
    InvalidRequestError,
    JSONSerializationError,
)
from ..logging import get_logger
from ..models import RequestDraft
from ..types import ParameterEncoding
from .parameters import Parameters

logger = get_logger('netrequest.encoding')


def stringify(value: Any) -> str:
    """Render a parameter value the way it appears on the wire."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if value is None:
        return ''
    return str(value)


def rfc3986_encode(value: str) -> str:
    """Percent-escape everything outside the RFC 3986 unreserved set.

    quote() leaves only ASCII letters, digits and '_.-~' unescaped.
    """
    return quote(value, safe='')


class ParameterEncoder(ABC):
    """Abstract encoder that places parameters into a request."""

    @abstractmethod
    def encode(self, parameters: Parameters, request: RequestDraft) -> None:
        """
        Encode the given parameters into the given request.

        Args:
            parameters: Parameters to encode
            request: The in-progress request to mutate
        """
        pass

    @staticmethod
    def _require_mapping(parameters: Any) -> Mapping:
        if not isinstance(parameters, Mapping):
            raise InvalidParametersTypeError(
                f"Expected a mapping of parameters, got {type(parameters).__name__}"
            )
        if not all(isinstance(key, str) for key in parameters):
            raise InvalidParametersTypeError("Parameter keys must be strings")
        return parameters

    @staticmethod
    def _require_url(request: RequestDraft) -> URL:
        url = request.url
        if not isinstance(url, URL) or not url.is_absolute():
            raise InvalidRequestError(f"Cannot decompose request URL: {url!r}")
        return url


class JSONParameterEncoder(ParameterEncoder):
    """Serializes a mapping or list into a JSON request body."""

    def encode(self, parameters: Parameters, request: RequestDraft) -> None:
        if isinstance(parameters, Mapping):
            parameters = dict(parameters)
        elif isinstance(parameters, tuple):
            parameters = list(parameters)
        elif not isinstance(parameters, list):
            raise JSONSerializationError(
                f"Top-level JSON value must be an object or array, got {type(parameters).__name__}"
            )

        try:
            body = json.dumps(parameters, allow_nan=False).encode('utf-8')
        except (TypeError, ValueError) as e:
            raise JSONSerializationError(str(e)) from e

        logger.debug("JSON body: %s", body.decode('utf-8'))
        request.body = body


class URLEncodedBodyParameterEncoder(ParameterEncoder):
    """Encodes a mapping as an application/x-www-form-urlencoded body."""

    def encode(self, parameters: Parameters, request: RequestDraft) -> None:
        mapping = self._require_mapping(parameters)
        self._require_url(request)

        try:
            body = '&'.join(
                f"{rfc3986_encode(key)}={rfc3986_encode(stringify(value))}"
                for key, value in mapping.items()
            ).encode('ascii')
        except UnicodeEncodeError as e:
            raise InvalidParametersTypeError(f"Parameter is not encodable as UTF-8: {e}") from e

        logger.debug("URL-encoded body: %s", body.decode('ascii'))
        request.body = body


class URLParameterEncoder(ParameterEncoder):
    """Appends a mapping to the request URL as query parameters."""

    def encode(self, parameters: Parameters, request: RequestDraft) -> None:
        mapping = self._require_mapping(parameters)
        url = self._require_url(request)

        pairs: List[Tuple[str, str]] = [
            (key, stringify(value)) for key, value in mapping.items()
        ]
        if not pairs:
            raise InvalidQueryStringError("Query string is empty")

        try:
            request.url = url.with_query(list(url.query.items()) + pairs)
        except (TypeError, ValueError) as e:
            raise InvalidRequestError(str(e)) from e

        logger.debug("Query URL: %s", request.url)


class DataParameterEncoder(ParameterEncoder):
    """Sets raw bytes as the request body without transformation."""

    def encode(self, parameters: Parameters, request: RequestDraft) -> None:
        if not isinstance(parameters, (bytes, bytearray, memoryview)):
            raise InvalidParametersTypeError(
                f"Expected raw bytes, got {type(parameters).__name__}"
            )
        request.body = bytes(parameters)


class ParameterEncoderSet:
    """
    Fixed mapping from ParameterEncoding to its encoder.

    The mapping covers every ParameterEncoding member and cannot be
    changed after construction.

    Example:
        >>> encoders = ParameterEncoderSet()
        >>> encoders.encoder_for(ParameterEncoding.JSON)
        <...JSONParameterEncoder object at ...>
    """

    def __init__(self, overrides: Optional[Mapping] = None):
        """
        Args:
            overrides: Optional encoders replacing the defaults per kind
        """
        encoders: Dict[ParameterEncoding, ParameterEncoder] = {
            ParameterEncoding.URL_ENCODED_BODY: URLEncodedBodyParameterEncoder(),
            ParameterEncoding.JSON: JSONParameterEncoder(),
            ParameterEncoding.QUERY_STRING: URLParameterEncoder(),
            ParameterEncoding.RAW_DATA: DataParameterEncoder(),
        }
        if overrides:
            for encoding, encoder in overrides.items():
                if not isinstance(encoding, ParameterEncoding):
                    raise TypeError(f"Unknown parameter encoding: {encoding!r}")
                encoders[encoding] = encoder
        self._encoders = MappingProxyType(encoders)

    @property
    def encoders(self) -> Mapping:
        """Read-only view of the encoding to encoder mapping."""
        return self._encoders

    def encoder_for(self, encoding: Optional[ParameterEncoding]) -> Optional[ParameterEncoder]:
        """Resolve the encoder for an encoding, None when no encoding is given."""
        if encoding is None:
            return None
        return self._encoders[encoding]
