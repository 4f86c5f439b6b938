"""Fast Serializer turns typed Python objects into JSON, XML or YAML and back."""

__version__ = "0.1.0"

from .core import (
    DecodingError,
    EncodingError,
    EventEmitter,
    NoNormalizerRegisteredError,
    SerializerError,
    UnnormalizableValueError,
    UnsupportedFormatError,
    UnsupportedTypeError,
)
from .encoder import (
    ChainDecoder,
    ChainEncoder,
    JsonDecode,
    JsonEncode,
    XmlDecode,
    XmlEncode,
    YamlDecode,
    YamlEncode,
)
from .normalizer import DataclassNormalizer, Normalizer, SerializerAwareNormalizer
from .serializer import Serializer

__all__ = [
    "__version__",
    "Serializer",
    "Normalizer",
    "SerializerAwareNormalizer",
    "DataclassNormalizer",
    "ChainEncoder",
    "ChainDecoder",
    "JsonEncode",
    "JsonDecode",
    "XmlEncode",
    "XmlDecode",
    "YamlEncode",
    "YamlDecode",
    "EventEmitter",
    "SerializerError",
    "UnsupportedFormatError",
    "NoNormalizerRegisteredError",
    "UnsupportedTypeError",
    "UnnormalizableValueError",
    "EncodingError",
    "DecodingError",
]
