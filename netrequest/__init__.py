"""
netrequest - thin async HTTP request/response layer.

Usage:
    >>> from netrequest import Requester, HTTPMethod, ParameterEncoding
    >>>
    >>> async with Requester() as requester:
    ...     items = await requester.perform_request(
    ...         'https://api.example.com/items',
    ...         HTTPMethod.GET,
    ...         parameters={'page': 2},
    ...         encoding=ParameterEncoding.QUERY_STRING,
    ...     )
"""
import logging
from .requester import Requester

from .core.types import (
    HTTPMethod,
    RequestContentType,
    RequestAcceptType,
    AuthorizationType,
    ParameterEncoding,
    CachePolicy,
)

# Configuration
from .core.config import RequesterConfig, ProxyConfig, SSLConfig, TimeoutConfig

# Collaborators
from .core.protocols import HeaderPolicy, Transport, ResponseDecoder, Requestable
from .core.headers import DefaultHeaderPolicy
from .core.decoding import JSONDecoder
from .core.transport import AiohttpTransport
from .core.models import HTTPRequest, HTTPResponse
from .core.encoding import ParameterEncoderSet, dictionary_representation

# Errors
from .core.exceptions import (
    NetworkingError,
    RequestBuildError,
    InvalidURLError,
    ParameterEncodingError,
    InvalidParametersTypeError,
    InvalidRequestError,
    InvalidQueryStringError,
    JSONSerializationError,
    ResponseError,
    IncorrectResponseTypeError,
    MissingDataError,
    HTTPResponseError,
    DecodingError,
)

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for netrequest modules.

    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'netrequest',
        'netrequest.requester',
        'netrequest.encoding',
        'netrequest.transport',
    ]

    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'Requester',
    'HTTPMethod',
    'RequestContentType',
    'RequestAcceptType',
    'AuthorizationType',
    'ParameterEncoding',
    'CachePolicy',
    'RequesterConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'HeaderPolicy',
    'Transport',
    'ResponseDecoder',
    'Requestable',
    'DefaultHeaderPolicy',
    'JSONDecoder',
    'AiohttpTransport',
    'HTTPRequest',
    'HTTPResponse',
    'ParameterEncoderSet',
    'dictionary_representation',
    'NetworkingError',
    'RequestBuildError',
    'InvalidURLError',
    'ParameterEncodingError',
    'InvalidParametersTypeError',
    'InvalidRequestError',
    'InvalidQueryStringError',
    'JSONSerializationError',
    'ResponseError',
    'IncorrectResponseTypeError',
    'MissingDataError',
    'HTTPResponseError',
    'DecodingError',
    'setup_logging',
]
