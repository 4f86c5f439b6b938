"""Base classes for normalizers.

A normalizer reduces typed objects to normalized data (dicts, lists and
scalars) and restores them. It takes part in (de)serialization by
answering the supports_(de)normalization checks; the serializer asks
every registered normalizer in order and uses the first that accepts.
"""

from typing import TYPE_CHECKING, Any

from ..core.events import EventEmitter

if TYPE_CHECKING:
    from ..serializer import Serializer


class Normalizer(EventEmitter):
    """Abstract normalizer. Subclasses override the methods they support."""

    async def normalize(
        self, data: Any, format: str, context: dict[str, Any] | None = None
    ) -> Any:
        """Normalize a typed object into dicts, lists and scalars.

        Args:
            data: The typed object
            format: Format name
            context: Options normalizers and encoders have access to

        Returns:
            The normalized data
        """
        raise NotImplementedError("This method is not implemented.")

    def supports_normalization(self, data: Any, format: str) -> bool:
        """Check whether this normalizer can normalize data."""
        raise NotImplementedError("This method is not implemented.")

    async def denormalize(
        self,
        data: Any,
        target_type: type,
        format: str,
        context: dict[str, Any] | None = None,
    ) -> Any:
        """Restore an object of target_type from normalized data.

        Args:
            data: The normalized data
            target_type: The class of the desired object
            format: Format name
            context: Options normalizers and decoders have access to

        Returns:
            The restored object
        """
        raise NotImplementedError("This method is not implemented.")

    def supports_denormalization(
        self, data: Any, target_type: type, format: str
    ) -> bool:
        """Check whether this normalizer can build target_type from data."""
        raise NotImplementedError("This method is not implemented.")


class SerializerAwareNormalizer(Normalizer):
    """Normalizer holding a reference to the serializer that owns it.

    The serializer is attached at construction time and lets the
    normalizer recurse into nested values of other types.
    """

    def __init__(self):
        super().__init__()
        self._serializer: "Serializer | None" = None

    def set_serializer(self, serializer: "Serializer") -> None:
        self._serializer = serializer

    @property
    def serializer(self) -> "Serializer":
        if self._serializer is None:
            raise RuntimeError(
                f"{self.__class__.__name__} is not attached to a serializer"
            )
        return self._serializer
