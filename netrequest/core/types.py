"""
Request attribute types.

Enumerations describing how a request is sent and what it expects back.
"""
from enum import Enum


class HTTPMethod(str, Enum):
    """HTTP method definitions."""
    
    CONNECT = 'CONNECT'
    DELETE = 'DELETE'
    GET = 'GET'
    HEAD = 'HEAD'
    OPTIONS = 'OPTIONS'
    PATCH = 'PATCH'
    POST = 'POST'
    PUT = 'PUT'
    TRACE = 'TRACE'


class RequestContentType(str, Enum):
    """The media type (MIME type) sent as part of the request."""
    
    JSON = 'application/json'
    URL_ENCODED = 'application/x-www-form-urlencoded'


class RequestAcceptType(str, Enum):
    """The media type (MIME type) of the response accepted by the client."""
    
    JSON = 'application/json'
    URL_ENCODED = 'application/x-www-form-urlencoded'


class AuthorizationType(Enum):
    """Whether an authorization header should be attached."""
    
    NONE = 'none'
    BEARER = 'bearer'


class ParameterEncoding(Enum):
    """Selects the strategy used to place parameters into a request."""
    
    URL_ENCODED_BODY = 'url_encoded_body'
    QUERY_STRING = 'query_string'
    JSON = 'json'
    RAW_DATA = 'raw_data'


class CachePolicy(Enum):
    """Cache behaviour requested from the transport."""
    
    USE_PROTOCOL_CACHE_POLICY = 'use_protocol_cache_policy'
    RELOAD_IGNORING_LOCAL_CACHE_DATA = 'reload_ignoring_local_cache_data'
    RETURN_CACHE_DATA_ELSE_LOAD = 'return_cache_data_else_load'
    RETURN_CACHE_DATA_DONT_LOAD = 'return_cache_data_dont_load'
