"""Chain encoders and decoders: pick the codec for a format and cache it."""

import logging
from collections.abc import Sequence
from typing import Any

from .base import Decoder, Encoder
from .json_codec import JsonDecode, JsonEncode

logger = logging.getLogger(__name__)


class _ChainResolver:
    """Chain of responsibility over a list of codecs.

    The first candidate whose check accepts a format wins. A built-in JSON
    codec is appended as the final, always-matching candidate, so resolution
    never fails. Results are cached by the raw format string; equivalent
    formats spelled differently are resolved independently.
    """

    def __init__(self, candidates: Sequence[Any], fallback: Any):
        self._candidates = list(candidates)
        self._fallback = fallback
        self._by_format: dict[str, Any] = {}

    def _accepts(self, candidate: Any, format: str) -> bool:
        raise NotImplementedError

    def _resolve(self, format: str) -> Any:
        cached = self._by_format.get(format)
        if cached is not None:
            return cached

        resolved = next(
            (c for c in self._candidates if self._accepts(c, format)), self._fallback
        )
        logger.debug(
            "Resolved format %r to %s", format, resolved.__class__.__name__
        )
        self._by_format[format] = resolved
        return resolved


class ChainEncoder(_ChainResolver):
    """Finds the encoder for a format and delegates to it."""

    def __init__(self, encoders: Sequence[Encoder] | None = None):
        """Initialize the chain.

        Args:
            encoders: Candidate encoders sorted by priority
        """
        super().__init__(encoders or [], JsonEncode())

    @property
    def encoders(self) -> list[Encoder]:
        return self._candidates

    def _accepts(self, candidate: Any, format: str) -> bool:
        return candidate.supports_encoding(format)

    def get_encoder(self, format: str) -> Encoder:
        """Get the encoder for a format, falling back to JSON."""
        return self._resolve(format)

    def encode(
        self, data: Any, format: str, context: dict[str, Any] | None = None
    ) -> Any:
        """Encode data with the encoder resolved for the format."""
        return self.get_encoder(format).encode(data, format, context)

    def supports_encoding(self, format: str) -> bool:
        """Always True: unknown formats fall back to JSON."""
        return self.get_encoder(format) is not None

    def needs_normalization(self, format: str) -> bool:
        """Check whether data must be normalized before encoding.

        Encoders that know how to normalize on their own (they expose a
        ``normalize`` method) do not need the serializer's normalizers. A
        nested chain answers for its own resolved encoder.
        """
        encoder = self.get_encoder(format)

        if callable(getattr(encoder, "get_encoder", None)):
            return encoder.needs_normalization(format)

        return not callable(getattr(encoder, "normalize", None))


class ChainDecoder(_ChainResolver):
    """Finds the decoder for a format and delegates to it."""

    def __init__(self, decoders: Sequence[Decoder] | None = None):
        """Initialize the chain.

        Args:
            decoders: Candidate decoders sorted by priority
        """
        super().__init__(decoders or [], JsonDecode())

    @property
    def decoders(self) -> list[Decoder]:
        return self._candidates

    def _accepts(self, candidate: Any, format: str) -> bool:
        return candidate.supports_decoding(format)

    def get_decoder(self, format: str) -> Decoder:
        """Get the decoder for a format, falling back to JSON."""
        return self._resolve(format)

    def decode(
        self, data: str | bytes, format: str, context: dict[str, Any] | None = None
    ) -> Any:
        """Decode data with the decoder resolved for the format."""
        return self.get_decoder(format).decode(data, format, context)

    def supports_decoding(self, format: str) -> bool:
        """Always True: unknown formats fall back to JSON."""
        return self.get_decoder(format) is not None
