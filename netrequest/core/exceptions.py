"""
Custom exceptions for netrequest.

Build errors are raised while a request is assembled, response errors
while the transport's answer is classified. Transport errors are never
wrapped and reach the caller as raised by the transport.
"""
from typing import Optional


class NetworkingError(Exception):
    """Base exception for all netrequest errors."""

    def __init__(self, message: Optional[str] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message (if available)
        """
        self.message = message
        super().__init__(message if message is not None else self.__class__.__name__)


class RequestBuildError(NetworkingError):
    """Exception raised when a request cannot be assembled."""
    pass


class InvalidURLError(RequestBuildError):
    """Exception raised when the target URL does not parse."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Invalid URL: {url!r}")


class ParameterEncodingError(RequestBuildError):
    """Base exception for parameter encoder failures."""
    pass


class InvalidParametersTypeError(ParameterEncodingError):
    """The parameters are not of the shape the encoder expects."""
    pass


class InvalidRequestError(ParameterEncodingError):
    """The request to encode into is not valid."""
    pass


class InvalidQueryStringError(ParameterEncodingError):
    """The resulting query string is empty."""
    pass


class JSONSerializationError(ParameterEncodingError):
    """The parameters could not be converted to JSON."""
    pass


class ResponseError(NetworkingError):
    """Base exception for response classification failures."""
    pass


class IncorrectResponseTypeError(ResponseError):
    """The transport returned something that is not an HTTP response."""
    pass


class MissingDataError(ResponseError):
    """A successful response arrived without a body reference."""

    def __init__(self, message: Optional[str] = "Missing data") -> None:
        super().__init__(message)


class HTTPResponseError(ResponseError):
    """Exception raised for non-success HTTP status codes."""

    def __init__(self, status_code: int, message: Optional[str] = None) -> None:
        """
        Initialize the exception.

        Args:
            status_code: HTTP status code of the response
            message: Error message, None for plain client errors
        """
        self.status_code = status_code
        super().__init__(message)

    def __str__(self) -> str:
        if self.message is None:
            return f"HTTP {self.status_code}"
        return f"HTTP {self.status_code}: {self.message}"


class DecodingError(NetworkingError):
    """Exception raised when a response body cannot be decoded."""
    pass
