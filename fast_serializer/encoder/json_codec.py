"""JSON codec backed by msgspec."""

from typing import Any

import msgspec

from ..core.exceptions import DecodingError, EncodingError
from .base import TokenFormatMixin


class JsonEncode(TokenFormatMixin):
    """Encodes normalized data into a compact JSON string."""

    format_token = "json"

    def __init__(self):
        self._encoder = msgspec.json.Encoder()

    def encode(
        self, data: Any, format: str = "json", context: dict[str, Any] | None = None
    ) -> str:
        """Encode data to JSON."""
        try:
            return self._encoder.encode(data).decode("utf-8")
        except (msgspec.EncodeError, TypeError, OverflowError) as e:
            raise EncodingError(format, str(e)) from e

    def supports_encoding(self, format: str) -> bool:
        """Check if the format contains "json"."""
        return self._matches(format)

    def needs_normalization(self, format: str = "json") -> bool:
        """JSON encoding always works on normalized data."""
        return True


class JsonDecode(TokenFormatMixin):
    """Decodes a JSON string into normalized data."""

    format_token = "json"

    def __init__(self):
        self._decoder = msgspec.json.Decoder()

    def decode(
        self,
        data: str | bytes,
        format: str = "json",
        context: dict[str, Any] | None = None,
    ) -> Any:
        """Decode JSON into dicts, lists and scalars."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        try:
            return self._decoder.decode(data)
        except msgspec.DecodeError as e:
            raise DecodingError(format, str(e)) from e

    def supports_decoding(self, format: str) -> bool:
        """Check if the format contains "json"."""
        return self._matches(format)
