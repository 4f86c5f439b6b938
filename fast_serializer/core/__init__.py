"""Core components of fast-serializer."""

from .events import EventEmitter
from .exceptions import (
    DecodingError,
    EncodingError,
    NoNormalizerRegisteredError,
    SerializerError,
    UnnormalizableValueError,
    UnsupportedFormatError,
    UnsupportedTypeError,
)

__all__ = [
    "EventEmitter",
    "SerializerError",
    "UnsupportedFormatError",
    "NoNormalizerRegisteredError",
    "UnsupportedTypeError",
    "UnnormalizableValueError",
    "EncodingError",
    "DecodingError",
]
