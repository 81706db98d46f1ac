"""
JSON response decoding.

JSONDecoder validates response bodies against any type pydantic
understands: models, dataclasses, TypedDicts, builtin containers, Any.
ISO 8601 strings decode into datetime fields.
"""
from functools import lru_cache
from typing import Any, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from .exceptions import DecodingError

T = TypeVar('T')


@lru_cache(maxsize=256)
def _adapter_for(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


class JSONDecoder:
    """Decodes JSON bytes into a requested type."""

    def __init__(self, strict: bool = False):
        """
        Args:
            strict: Disable pydantic's lax coercion (e.g. "1" to 1)
        """
        self.strict = strict

    def decode(self, data: bytes, response_type: Type[T] = Any) -> T:
        """
        Decode body bytes.

        Raises:
            DecodingError: If the body is not valid JSON or does not match
        """
        try:
            adapter = _adapter_for(response_type)
        except TypeError as e:
            raise DecodingError(f"Unsupported response type: {response_type!r}") from e

        try:
            return adapter.validate_json(data, strict=self.strict)
        except ValidationError as e:
            raise DecodingError(str(e)) from e
