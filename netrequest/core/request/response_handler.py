"""Response handler for HTTP responses."""
from typing import Any, Optional, Type, TypeVar

from ..exceptions import HTTPResponseError, MissingDataError
from ..protocols import ResponseDecoder

T = TypeVar('T')

EMPTY_JSON_OBJECT = b'{}'
NOT_FOUND_MESSAGE = "Route or resource not found"
SERVER_ERROR_MESSAGE = "Server not responding"


class ResponseHandler:
    """Classifies HTTP responses into decoded values or typed errors."""

    @staticmethod
    def is_success(status_code: int) -> bool:
        """Checks for a 2xx status."""
        return 200 <= status_code < 300

    @staticmethod
    def classify(status_code: int) -> Optional[HTTPResponseError]:
        """Returns the error for a status code, None for 2xx."""
        if ResponseHandler.is_success(status_code):
            return None
        if status_code == 404:
            return HTTPResponseError(status_code, NOT_FOUND_MESSAGE)
        if status_code in (400, 402, 403) or 405 <= status_code <= 499:
            return HTTPResponseError(status_code)
        return HTTPResponseError(status_code, SERVER_ERROR_MESSAGE)

    @staticmethod
    def handle(
        status_code: int,
        body: Optional[bytes],
        decoder: ResponseDecoder,
        response_type: Type[T] = Any,
    ) -> T:
        """
        Decodes a successful response or raises its error.

        An empty body decodes as an empty JSON object; a missing body
        reference is an error.

        Raises:
            MissingDataError: If a 2xx response has no body reference
            HTTPResponseError: If the status is not 2xx
            DecodingError: If the decoder rejects the body
        """
        error = ResponseHandler.classify(status_code)
        if error is not None:
            raise error

        if body is None:
            raise MissingDataError()

        return decoder.decode(body or EMPTY_JSON_OBJECT, response_type)
