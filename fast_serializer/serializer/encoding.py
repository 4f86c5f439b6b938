"""Public serialize/deserialize entry points and codec delegation."""

from typing import Any

from ..core.exceptions import UnsupportedFormatError
from .core import maybe_await
from .normalization import NormalizingSerializer


class EncodingSerializer(NormalizingSerializer):
    """Serializer layer combining normalization with encoding."""

    async def serialize(
        self, data: Any, format: str, context: dict[str, Any] | None = None
    ) -> str:
        """Serialize data into the given format.

        Args:
            data: Any value
            format: Format name, e.g. "json" or "application/xml"
            context: Options normalizers and encoders have access to

        Returns:
            The encoded string

        Raises:
            UnsupportedFormatError: If the encoder does not handle the format
        """
        if not self.supports_encoding(format):
            raise UnsupportedFormatError(format, "Serialization")

        # Encoders without the hook are assumed to need normalized data
        needs_normalization = getattr(self.encoder, "needs_normalization", None)
        if needs_normalization is None or needs_normalization(format):
            data = await self.normalize(data, format, context)

        return await self.encode(data, format, context)

    async def deserialize(
        self,
        data: str | bytes,
        target_type: Any,
        format: str,
        context: dict[str, Any] | None = None,
    ) -> Any:
        """Deserialize a string into an object of target_type.

        Raises:
            UnsupportedFormatError: If the decoder does not handle the format
        """
        if not self.supports_decoding(format):
            raise UnsupportedFormatError(format, "Deserialization")

        decoded = await self.decode(data, format, context)
        return await self.denormalize(decoded, target_type, format, context)

    async def encode(
        self, data: Any, format: str, context: dict[str, Any] | None = None
    ) -> str:
        """Encode normalized data into a string."""
        return await maybe_await(self.encoder.encode(data, format, context))

    async def decode(
        self, data: str | bytes, format: str, context: dict[str, Any] | None = None
    ) -> Any:
        """Decode a string into normalized data."""
        return await maybe_await(self.decoder.decode(data, format, context))
