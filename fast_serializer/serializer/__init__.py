"""Serializer module combining all functionality."""

from .core import CoreSerializer
from .encoding import EncodingSerializer
from .normalization import NormalizingSerializer


class Serializer(EncodingSerializer):
    """Complete serializer implementation with all functionality.

    This class combines all serializer mixins:
    - Normalizer registry, codec wiring and checks (CoreSerializer)
    - Recursive normalization and denormalization (NormalizingSerializer)
    - serialize/deserialize and codec delegation (EncodingSerializer)
    """

    pass


__all__ = ["Serializer", "CoreSerializer", "NormalizingSerializer", "EncodingSerializer"]
