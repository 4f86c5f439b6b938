"""
Unit tests for the YAML codec.
"""

import pytest

from fast_serializer import DecodingError, EncodingError
from fast_serializer.encoder import YamlDecode, YamlEncode


class TestYamlCodec:
    """Test YamlEncode and YamlDecode"""

    def test_encode_block_style_keeps_order(self):
        """Test block style output without key sorting"""
        actual = YamlEncode().encode({"name": "tri", "items": [1, 2]}, "yaml")
        assert actual == "name: tri\nitems:\n- 1\n- 2\n"

    def test_encode_flow_style_option(self):
        context = {"yaml_encoder": {"default_flow_style": True}}
        actual = YamlEncode().encode({"a": [1, 2]}, "yaml", context)
        assert actual == "{a: [1, 2]}\n"

    def test_encode_typed_object_fails(self):
        """Test objects that were not normalized are rejected"""
        with pytest.raises(EncodingError, match="yaml"):
            YamlEncode().encode({"a": object()}, "yaml")

    def test_decode(self):
        assert YamlDecode().decode("name: tri\nitems:\n- 1\n- 2\n") == {
            "name": "tri",
            "items": [1, 2],
        }

    def test_decode_invalid(self):
        with pytest.raises(DecodingError):
            YamlDecode().decode("a: [1, 2", "yaml")

    def test_supports_format(self):
        """Test substring matching of the format"""
        assert YamlEncode().supports_encoding("application/yaml")
        assert YamlDecode().supports_decoding("text/x-yaml")
        assert not YamlEncode().supports_encoding("json")
        assert YamlEncode().needs_normalization()
