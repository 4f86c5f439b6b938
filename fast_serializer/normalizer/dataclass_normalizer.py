"""Normalizer for dataclass instances."""

import asyncio
import dataclasses
import typing
from typing import Any

import msgspec

from ..core.exceptions import UnsupportedTypeError
from .base import SerializerAwareNormalizer


class DataclassNormalizer(SerializerAwareNormalizer):
    """Normalizes dataclasses field by field.

    Field values go back through the serializer in both directions, so
    nested objects are handled by whichever normalizer supports them.
    Fields no denormalizer claims are converted with msgspec.
    """

    def supports_normalization(self, data: Any, format: str) -> bool:
        return dataclasses.is_dataclass(data) and not isinstance(data, type)

    async def normalize(
        self, data: Any, format: str, context: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        names = [f.name for f in dataclasses.fields(data)]
        values = await asyncio.gather(
            *(
                self.serializer.normalize(getattr(data, name), format, context)
                for name in names
            )
        )
        self.emit(
            "info",
            {
                "message": f"Normalized {type(data).__name__}",
                "format": format,
            },
        )
        return dict(zip(names, values, strict=True))

    def supports_denormalization(
        self, data: Any, target_type: type, format: str
    ) -> bool:
        return (
            isinstance(target_type, type)
            and dataclasses.is_dataclass(target_type)
            and isinstance(data, dict)
        )

    async def denormalize(
        self,
        data: Any,
        target_type: type,
        format: str,
        context: dict[str, Any] | None = None,
    ) -> Any:
        names = [
            f.name
            for f in dataclasses.fields(target_type)
            if f.init and f.name in data
        ]
        try:
            hints = typing.get_type_hints(target_type)
            values = await asyncio.gather(
                *(
                    self._denormalize_field(
                        data[name], hints.get(name, Any), format, context
                    )
                    for name in names
                )
            )
            return target_type(**dict(zip(names, values, strict=True)))
        except UnsupportedTypeError:
            raise
        except (msgspec.ValidationError, TypeError, NameError) as e:
            self.emit(
                "error",
                {
                    "message": f"Could not denormalize {target_type.__name__}: {e}",
                    "format": format,
                },
            )
            raise UnsupportedTypeError(
                f"Could not denormalize object of type {target_type.__name__}: {e}",
                type_name=target_type.__name__,
            ) from e

    async def _denormalize_field(
        self, value: Any, hint: Any, format: str, context: dict[str, Any] | None
    ) -> Any:
        """Restore one field, preferring a registered denormalizer over msgspec."""
        if self.serializer.supports_denormalization(value, hint, format):
            return await self.serializer.denormalize(value, hint, format, context)
        return msgspec.convert(value, hint, strict=False)
