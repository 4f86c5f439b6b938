"""Normalizers for fast-serializer."""

from .base import Normalizer, SerializerAwareNormalizer
from .dataclass_normalizer import DataclassNormalizer

__all__ = [
    "Normalizer",
    "SerializerAwareNormalizer",
    "DataclassNormalizer",
]
