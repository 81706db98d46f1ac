"""Parameter encoding using Strategy Pattern."""
from .strategies import (
    ParameterEncoder,
    JSONParameterEncoder,
    URLEncodedBodyParameterEncoder,
    URLParameterEncoder,
    DataParameterEncoder,
    ParameterEncoderSet,
)
from .parameters import Parameters, dictionary_representation

__all__ = [
    'ParameterEncoder',
    'JSONParameterEncoder',
    'URLEncodedBodyParameterEncoder',
    'URLParameterEncoder',
    'DataParameterEncoder',
    'ParameterEncoderSet',
    'Parameters',
    'dictionary_representation',
]
