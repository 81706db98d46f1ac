"""Request building and response classification."""
from .request_builder import RequestBuilder
from .response_handler import ResponseHandler

__all__ = [
    'RequestBuilder',
    'ResponseHandler',
]
