"""netrequest core: types, encoding, request building, transports."""
from .config import RequesterConfig, ProxyConfig, SSLConfig, TimeoutConfig
from .decoding import JSONDecoder
from .encoding import (
    ParameterEncoder,
    JSONParameterEncoder,
    URLEncodedBodyParameterEncoder,
    URLParameterEncoder,
    DataParameterEncoder,
    ParameterEncoderSet,
    Parameters,
    dictionary_representation,
)
from .exceptions import (
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
from .headers import DefaultHeaderPolicy, merge_headers
from .models import HTTPRequest, HTTPResponse, RequestDraft
from .protocols import HeaderPolicy, Transport, ResponseDecoder, Requestable
from .request import RequestBuilder, ResponseHandler
from .transport import AiohttpTransport, SessionFactory
from .types import (
    HTTPMethod,
    RequestContentType,
    RequestAcceptType,
    AuthorizationType,
    ParameterEncoding,
    CachePolicy,
)
