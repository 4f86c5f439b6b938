"""Encoder and decoder interfaces."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Encoder(Protocol):
    """Protocol for encoders turning normalized data into a string."""

    def encode(
        self, data: Any, format: str, context: dict[str, Any] | None = None
    ) -> str:
        """Encode data into the given format."""
        ...

    def supports_encoding(self, format: str) -> bool:
        """Check whether this encoder handles the format."""
        ...

    def needs_normalization(self, format: str) -> bool:
        """Check whether data must be normalized before encoding."""
        ...


@runtime_checkable
class Decoder(Protocol):
    """Protocol for decoders turning a string into normalized data."""

    def decode(
        self, data: str | bytes, format: str, context: dict[str, Any] | None = None
    ) -> Any:
        """Decode a string in the given format."""
        ...

    def supports_decoding(self, format: str) -> bool:
        """Check whether this decoder handles the format."""
        ...


class TokenFormatMixin:
    """Format matching by substring containment of a token.

    A format is supported when it contains ``format_token``, so compound
    identifiers such as ``"application/json"`` are accepted.
    """

    format_token: str = ""

    def _matches(self, format: str) -> bool:
        return self.format_token in format
