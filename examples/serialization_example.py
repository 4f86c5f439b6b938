"""Example demonstrating serialization capabilities."""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import date

from fast_serializer import DataclassNormalizer, Normalizer, Serializer
from fast_serializer.encoder import (
    JsonDecode,
    JsonEncode,
    XmlDecode,
    XmlEncode,
    YamlDecode,
    YamlEncode,
)


@dataclass
class LineItem:
    sku: str
    quantity: int
    price: float


@dataclass
class Order:
    number: str
    placed_on: date
    items: list[LineItem] = field(default_factory=list)


class DateNormalizer(Normalizer):
    """Dates travel as ISO strings."""

    def supports_normalization(self, data, format):
        return isinstance(data, date)

    async def normalize(self, data, format, context=None):
        return data.isoformat()

    def supports_denormalization(self, data, target_type, format):
        return target_type is date and isinstance(data, str)

    async def denormalize(self, data, target_type, format, context=None):
        return date.fromisoformat(data)


def create_serializer() -> Serializer:
    """Create a serializer handling JSON, XML and YAML."""
    serializer = Serializer(
        [DateNormalizer(), DataclassNormalizer()],
        encoders=[XmlEncode(), YamlEncode(), JsonEncode()],
        decoders=[XmlDecode(), YamlDecode(), JsonDecode()],
    )
    serializer.on("info", lambda event: print(f"[info] {event['message']}"))
    return serializer


async def main():
    """Run the serialization examples."""
    logging.basicConfig(level=logging.INFO)
    serializer = create_serializer()

    order = Order(
        number="A-1001",
        placed_on=date(2025, 1, 31),
        items=[LineItem("apple", 3, 0.5), LineItem("pear", 1, 0.75)],
    )

    print("=== JSON ===")
    encoded = await serializer.serialize(order, "application/json")
    print(encoded)
    restored = await serializer.deserialize(encoded, Order, "application/json")
    print(f"Round trip equal: {restored == order}")

    print("\n=== YAML ===")
    print(await serializer.serialize(order, "yaml"))

    print("=== XML ===")
    print(await serializer.serialize({"order": order}, "xml"))

    print("\n=== XML without declaration ===")
    print(
        await serializer.serialize(
            {"order": order}, "xml", {"xml_encoder": {"headless": True}}
        )
    )


if __name__ == "__main__":
    asyncio.run(main())
