"""Encoders and decoders for fast-serializer."""

from .base import Decoder, Encoder
from .chain import ChainDecoder, ChainEncoder
from .json_codec import JsonDecode, JsonEncode
from .xml_codec import XmlDecode, XmlEncode
from .yaml_codec import YamlDecode, YamlEncode

__all__ = [
    "Encoder",
    "Decoder",
    "ChainEncoder",
    "ChainDecoder",
    "JsonEncode",
    "JsonDecode",
    "XmlEncode",
    "XmlDecode",
    "YamlEncode",
    "YamlDecode",
]
