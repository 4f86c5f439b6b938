"""Recursive normalization and denormalization."""

import asyncio
import inspect
import pprint
import sys
from typing import Any

from ..core.exceptions import (
    NoNormalizerRegisteredError,
    UnnormalizableValueError,
    UnsupportedTypeError,
)
from .core import CoreSerializer, maybe_await, type_name

_UNNORMALIZABLE_CHECKS = (
    inspect.isroutine,
    inspect.isclass,
    inspect.ismodule,
    inspect.iscoroutine,
    inspect.isgenerator,
    inspect.isasyncgen,
    inspect.isframe,
    inspect.iscode,
    inspect.istraceback,
)


def _is_unnormalizable(data: Any) -> bool:
    return any(check(data) for check in _UNNORMALIZABLE_CHECKS)


class NormalizingSerializer(CoreSerializer):
    """Serializer layer walking value graphs through the normalizers."""

    async def normalize(
        self, data: Any, format: str, context: dict[str, Any] | None = None
    ) -> Any:
        """Normalize data into dicts, lists and scalars.

        Resolution order:
        1. A registered normalizer accepting the value handles it entirely.
        2. None and scalars are returned unchanged.
        3. Lists and tuples are normalized element-wise into a list.
        4. Plain dicts are normalized value-wise, keeping key order.
        5. Anything else fails.

        Sibling values are normalized concurrently; results keep the input
        order.

        Args:
            data: The value to normalize
            format: Format name
            context: Options normalizers and encoders have access to

        Returns:
            The normalized data

        Raises:
            UnnormalizableValueError: For functions, classes, modules and the like
            NoNormalizerRegisteredError: For typed objects with no normalizers
            UnsupportedTypeError: For typed objects no normalizer accepts
        """
        context = context if context is not None else {}

        normalizer = self.get_normalizer(data, format)
        if normalizer is not None:
            return await maybe_await(normalizer.normalize(data, format, context))

        if data is None or isinstance(data, bool | int | float | str):
            return data

        if isinstance(data, list | tuple):
            # gather keeps the input order regardless of completion order
            return list(
                await asyncio.gather(
                    *(self.normalize(item, format, context) for item in data)
                )
            )

        if type(data) is dict:
            keys = list(data.keys())
            values = await asyncio.gather(
                *(self.normalize(data[key], format, context) for key in keys)
            )
            return dict(zip(keys, values, strict=True))

        if _is_unnormalizable(data):
            rendering = pprint.pformat(data, width=sys.maxsize)
            raise UnnormalizableValueError(rendering)

        if not self.normalizers:
            raise NoNormalizerRegisteredError(
                "You must register at least one normalizer to be able to "
                "normalize objects."
            )

        name = type(data).__name__
        raise UnsupportedTypeError(
            f"Could not normalize object of type {name}, "
            "no supporting normalizer found.",
            type_name=name,
        )

    async def denormalize(
        self,
        data: Any,
        target_type: Any,
        format: str,
        context: dict[str, Any] | None = None,
    ) -> Any:
        """Restore an object of target_type from normalized data.

        Raises:
            NoNormalizerRegisteredError: If no normalizers are registered
            UnsupportedTypeError: If no denormalizer accepts target_type
        """
        if not self.normalizers:
            raise NoNormalizerRegisteredError(
                "You must register at least one normalizer to be able to "
                "denormalize objects."
            )

        denormalizer = self.get_denormalizer(data, target_type, format)
        if denormalizer is None:
            name = type_name(target_type)
            raise UnsupportedTypeError(
                f"Could not denormalize object of type {name}, "
                "no supporting denormalizer found.",
                type_name=name,
            )

        context = context if context is not None else {}
        return await maybe_await(
            denormalizer.denormalize(data, target_type, format, context)
        )
