"""Helpers for turning typed objects into encodable parameters."""
import dataclasses
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, TypeAdapter

# Shapes accepted by the encoders: a string-keyed mapping for form, query
# and JSON encodings, a list for JSON arrays, raw bytes for raw bodies.
Parameters = Union[Mapping, List[Any], bytes, bytearray, memoryview]


def dictionary_representation(value: Any) -> Optional[Dict[str, Any]]:
    """
    Convert a pydantic model, dataclass instance or mapping to a plain dict.

    Values are converted to their JSON-compatible form, so the result can be
    passed to any mapping-based encoder.

    Args:
        value: Object to convert

    Returns:
        A string-keyed dict, or None if the value has no object representation
    """
    if isinstance(value, BaseModel):
        data = value.model_dump(mode='json')
    elif dataclasses.is_dataclass(value) and not isinstance(value, type):
        data = TypeAdapter(type(value)).dump_python(value, mode='json')
    elif isinstance(value, Mapping):
        data = dict(value)
    else:
        return None

    if not isinstance(data, dict) or not all(isinstance(key, str) for key in data):
        return None
    return data
