"""
Unit tests for codec option loading.
"""

import pytest

from fast_serializer.config import (
    XML_DECODER_KEY,
    XML_ENCODER_KEY,
    XmlDecoderOptions,
    XmlEncoderOptions,
    YamlEncoderOptions,
    load_options,
)


class TestLoadOptions:
    """Test merging context overrides over defaults"""

    def test_defaults(self):
        options = load_options(XmlEncoderOptions, None, XML_ENCODER_KEY)
        assert options == XmlEncoderOptions()
        assert options.pretty is True
        assert options.root_name == "root"

    def test_missing_key_uses_defaults(self):
        options = load_options(XmlDecoderOptions, {"other": 1}, XML_DECODER_KEY)
        assert options.explicit_array is True

    def test_override(self):
        context = {XML_ENCODER_KEY: {"pretty": False, "indent": "\t"}}
        options = load_options(XmlEncoderOptions, context, XML_ENCODER_KEY)
        assert options.pretty is False
        assert options.indent == "\t"
        assert options.headless is False

    def test_instance_is_used_as_is(self):
        custom = YamlEncoderOptions(sort_keys=True)
        options = load_options(YamlEncoderOptions, {"yaml_encoder": custom}, "yaml_encoder")
        assert options is custom

    def test_unknown_option(self):
        with pytest.raises(ValueError, match="Unknown xml_encoder options: bogus"):
            load_options(XmlEncoderOptions, {XML_ENCODER_KEY: {"bogus": 1}}, XML_ENCODER_KEY)

    def test_wrong_type(self):
        with pytest.raises(ValueError, match="Invalid xml_encoder options"):
            load_options(
                XmlEncoderOptions, {XML_ENCODER_KEY: {"pretty": "yes"}}, XML_ENCODER_KEY
            )

    def test_not_a_mapping(self):
        with pytest.raises(ValueError, match="must be a mapping"):
            load_options(XmlEncoderOptions, {XML_ENCODER_KEY: [1]}, XML_ENCODER_KEY)
