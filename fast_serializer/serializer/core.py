"""Core serializer: construction, normalizer lookup and capability checks."""

import inspect
import logging
from collections.abc import Sequence
from functools import partial
from typing import Any

from ..core.events import EventEmitter
from ..encoder.base import Decoder, Encoder
from ..encoder.chain import ChainDecoder, ChainEncoder
from ..encoder.json_codec import JsonDecode, JsonEncode

logger = logging.getLogger(__name__)

# Events forwarded from normalizers to the serializer's own listeners
FORWARDED_EVENTS = ("error", "info")


async def maybe_await(value: Any) -> Any:
    """Await value if it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(value):
        return await value
    return value


def type_name(target_type: Any) -> str:
    """Readable name of a class or typing construct."""
    return getattr(target_type, "__name__", None) or repr(target_type)


class CoreSerializer(EventEmitter):
    """Core serializer with the normalizer registry and codec wiring.

    Normalizers are tried in registration order: the first one whose check
    accepts a value handles it, so more specific normalizers must be
    registered before general ones.
    """

    def __init__(
        self,
        normalizers: Sequence[Any] | None = None,
        encoders: Sequence[Encoder] | Encoder | None = None,
        decoders: Sequence[Decoder] | Decoder | None = None,
    ):
        """Initialize the serializer.

        Args:
            normalizers: Normalizers sorted by priority
            encoders: Encoders for a ChainEncoder, or a single encoder.
                Defaults to JSON only.
            decoders: Decoders for a ChainDecoder, or a single decoder.
                Defaults to JSON only.
        """
        super().__init__()
        self.normalizers: list[Any] = list(normalizers or [])

        for normalizer in self.normalizers:
            # Serializer-aware normalizers can recurse into nested values
            if callable(getattr(normalizer, "set_serializer", None)):
                normalizer.set_serializer(self)
            if callable(getattr(normalizer, "on", None)):
                for event in FORWARDED_EVENTS:
                    normalizer.on(event, partial(self.emit, event))

        self.encoder: Any = self._build_encoder(encoders)
        self.decoder: Any = self._build_decoder(decoders)

    @staticmethod
    def _build_encoder(encoders: Any) -> Any:
        if encoders is None:
            return JsonEncode()
        if isinstance(encoders, list | tuple):
            return ChainEncoder(encoders)
        return encoders

    @staticmethod
    def _build_decoder(decoders: Any) -> Any:
        if decoders is None:
            return JsonDecode()
        if isinstance(decoders, list | tuple):
            return ChainDecoder(decoders)
        return decoders

    def _trace(self, message: str, **fields: Any) -> None:
        logger.debug(message)
        self.emit("trace", {"message": message, **fields})

    def get_normalizer(self, data: Any, format: str) -> Any | None:
        """Find the first normalizer supporting data, or None."""
        for normalizer in self.normalizers:
            self._trace(
                f"Checking if {normalizer.__class__.__name__} supports normalization",
                format=format,
            )
            if normalizer.supports_normalization(data, format):
                self._trace(
                    f"Normalizer found: {normalizer.__class__.__name__}", format=format
                )
                return normalizer
        return None

    def get_denormalizer(
        self, data: Any, target_type: Any, format: str
    ) -> Any | None:
        """Find the first denormalizer able to build target_type, or None.

        A check that raises counts as "not supported"; discovery continues
        with the next normalizer.
        """
        for denormalizer in self.normalizers:
            name = denormalizer.__class__.__name__
            self._trace(
                f"Checking if {name} supports denormalization",
                format=format,
                type=type_name(target_type),
            )
            try:
                supported = denormalizer.supports_denormalization(
                    data, target_type, format
                )
            except Exception as e:
                logger.debug(
                    "Denormalization check of %s raised, skipping it",
                    name,
                    exc_info=True,
                )
                self.emit(
                    "trace",
                    {
                        "message": f"Denormalization check of {name} raised: {e}",
                        "format": format,
                        "type": type_name(target_type),
                    },
                )
                continue
            if supported:
                self._trace(f"Normalizer found: {name}", format=format)
                return denormalizer
        return None

    def supports_normalization(self, data: Any, format: str) -> bool:
        """Check whether a registered normalizer accepts data."""
        return self.get_normalizer(data, format) is not None

    def supports_denormalization(
        self, data: Any, target_type: Any, format: str
    ) -> bool:
        """Check whether a registered denormalizer can build target_type."""
        return self.get_denormalizer(data, target_type, format) is not None

    def supports_encoding(self, format: str) -> bool:
        """Check whether the encoder handles the format."""
        return bool(self.encoder.supports_encoding(format))

    def supports_decoding(self, format: str) -> bool:
        """Check whether the decoder handles the format."""
        return bool(self.decoder.supports_decoding(format))
