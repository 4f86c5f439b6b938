"""YAML codec backed by PyYAML."""

from typing import Any

import yaml  # type: ignore[import-untyped]

from ..config import YAML_ENCODER_KEY, YamlEncoderOptions, load_options
from ..core.exceptions import DecodingError, EncodingError
from .base import TokenFormatMixin


class YamlEncode(TokenFormatMixin):
    """Encodes normalized data into a block-style YAML document."""

    format_token = "yaml"

    def encode(
        self, data: Any, format: str = "yaml", context: dict[str, Any] | None = None
    ) -> str:
        """Encode data to YAML, keeping mapping order."""
        options = load_options(YamlEncoderOptions, context, YAML_ENCODER_KEY)
        try:
            return yaml.safe_dump(
                data,
                default_flow_style=options.default_flow_style,
                sort_keys=options.sort_keys,
                allow_unicode=options.allow_unicode,
                indent=options.indent,
            )
        except yaml.YAMLError as e:
            raise EncodingError(format, str(e)) from e

    def supports_encoding(self, format: str) -> bool:
        return self._matches(format)

    def needs_normalization(self, format: str = "yaml") -> bool:
        return True


class YamlDecode(TokenFormatMixin):
    """Decodes a YAML document into normalized data."""

    format_token = "yaml"

    def decode(
        self,
        data: str | bytes,
        format: str = "yaml",
        context: dict[str, Any] | None = None,
    ) -> Any:
        if isinstance(data, bytes):
            data = data.decode("utf-8")
        try:
            return yaml.safe_load(data)
        except yaml.YAMLError as e:
            raise DecodingError(format, str(e)) from e

    def supports_decoding(self, format: str) -> bool:
        return self._matches(format)
