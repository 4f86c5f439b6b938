"""Codec option defaults and per-call overrides.

Each codec reads its options from a namespaced bag in the context dict
(``context["xml_encoder"]``, ``context["xml_decoder"]``,
``context["yaml_encoder"]``). Overrides are merged over the defaults
declared here.
"""

from dataclasses import dataclass, fields
from typing import Any, TypeVar

import msgspec

T = TypeVar("T")

XML_ENCODER_KEY = "xml_encoder"
XML_DECODER_KEY = "xml_decoder"
YAML_ENCODER_KEY = "yaml_encoder"


@dataclass
class XmlEncoderOptions:
    """Options for rendering IR as XML."""

    root_name: str = "root"  # Used when the data has more than one top-level key
    headless: bool = False
    pretty: bool = True
    indent: str = "  "
    attr_key: str = "$"
    char_key: str = "_"
    xml_version: str = "1.0"
    encoding: str = "UTF-8"
    standalone: bool | None = True


@dataclass
class XmlDecoderOptions:
    """Options for parsing XML into IR."""

    explicit_root: bool = True
    explicit_array: bool = True
    attr_key: str = "$"
    char_key: str = "_"
    empty_tag: str = ""
    trim: bool = False


@dataclass
class YamlEncoderOptions:
    """Options for rendering IR as YAML."""

    default_flow_style: bool = False
    sort_keys: bool = False
    allow_unicode: bool = True
    indent: int = 2


def load_options(
    options_type: type[T], context: dict[str, Any] | None, key: str
) -> T:
    """Build codec options from the defaults and the context override bag.

    Args:
        options_type: Options dataclass to build
        context: The context passed to the codec (may be None)
        key: Name of the option bag inside the context

    Returns:
        An instance of options_type

    Raises:
        ValueError: If the bag has unknown keys or values of the wrong type
    """
    overrides = (context or {}).get(key) or {}
    if isinstance(overrides, options_type):
        return overrides
    if not isinstance(overrides, dict):
        raise ValueError(f"Options '{key}' must be a mapping, got {type(overrides)}")

    known = {f.name for f in fields(options_type)}  # type: ignore[arg-type]
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ValueError(f"Unknown {key} options: {', '.join(unknown)}")

    try:
        return msgspec.convert(overrides, options_type)
    except msgspec.ValidationError as e:
        raise ValueError(f"Invalid {key} options: {e}") from e
