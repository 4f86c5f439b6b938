"""
Unit tests for ChainEncoder and ChainDecoder format resolution.
"""

from unittest.mock import MagicMock

import pytest

from fast_serializer.encoder import (
    ChainDecoder,
    ChainEncoder,
    JsonDecode,
    JsonEncode,
    XmlDecode,
    XmlEncode,
)


def make_fake_encoder(format_name: str = "the format") -> MagicMock:
    encoder = MagicMock(spec=["encode", "supports_encoding", "needs_normalization"])
    encoder.encode.return_value = "foo"
    encoder.supports_encoding.side_effect = lambda format: format == format_name
    return encoder


def make_fake_decoder(format_name: str = "the format") -> MagicMock:
    decoder = MagicMock(spec=["decode", "supports_decoding"])
    decoder.decode.return_value = {"foo": "bar"}
    decoder.supports_decoding.side_effect = lambda format: format == format_name
    return decoder


class TestChainEncoder:
    """Test ChainEncoder"""

    def test_encode_delegates(self):
        """Test encode is delegated to the resolved encoder"""
        fake = make_fake_encoder()
        chain = ChainEncoder([fake])

        assert chain.encode({}, "the format", {}) == "foo"
        fake.encode.assert_called_once_with({}, "the format", {})

    def test_supports_encoding_is_total(self):
        """Test every format is supported thanks to the JSON fallback"""
        assert ChainEncoder([]).supports_encoding("the format")
        assert ChainEncoder([make_fake_encoder()]).supports_encoding("the format")
        assert ChainEncoder().supports_encoding("")

    def test_get_encoder_fallback(self):
        """Test the JSON encoder is used when nothing matches"""
        assert isinstance(ChainEncoder([]).get_encoder("the format"), JsonEncode)
        chain = ChainEncoder([make_fake_encoder()])
        assert isinstance(chain.get_encoder("other"), JsonEncode)

    def test_get_encoder_is_memoized(self):
        """Test the second lookup does not check candidates again"""
        fake = make_fake_encoder()
        chain = ChainEncoder([fake])

        first = chain.get_encoder("the format")
        second = chain.get_encoder("the format")

        assert first is fake
        assert second is first
        assert fake.supports_encoding.call_count == 1

    def test_cache_key_is_raw_format(self):
        """Test differently spelled formats are resolved separately"""
        xml = XmlEncode()
        chain = ChainEncoder([xml])

        assert chain.get_encoder("application/xml") is xml
        assert isinstance(chain.get_encoder("XML"), JsonEncode)
        assert chain.get_encoder("text/xml") is xml

    def test_first_matching_encoder_wins(self):
        """Test candidates are checked in order"""
        first = make_fake_encoder()
        second = make_fake_encoder()
        chain = ChainEncoder([first, second])

        assert chain.get_encoder("the format") is first
        second.supports_encoding.assert_not_called()

    def test_needs_normalization(self):
        """Test needs_normalization depends on the resolved encoder"""
        fake = make_fake_encoder()
        chain = ChainEncoder([fake])

        # No normalize hook: normalization is needed
        assert chain.needs_normalization("the format") is True

        # The encoder normalizes by itself
        fake.normalize = lambda data, format, context=None: data
        assert chain.needs_normalization("the format") is False

        # A nested chain answers for itself
        fake.get_encoder = lambda format: None
        fake.needs_normalization.return_value = "lorem"
        assert chain.needs_normalization("the format") == "lorem"

    def test_nested_chain_defers(self):
        """Test a chain nested in a chain defers needs_normalization"""

        class SelfNormalizing:
            def supports_encoding(self, format):
                return "raw" in format

            def normalize(self, data, format, context=None):
                return data

            def encode(self, data, format, context=None):
                return str(data)

        outer = ChainEncoder([ChainEncoder([SelfNormalizing()])])

        assert outer.needs_normalization("raw") is False
        assert outer.needs_normalization("json") is True

    def test_fallback_json_needs_normalization(self):
        """Test the JSON fallback requires normalized data"""
        assert ChainEncoder([]).needs_normalization("anything") is True


class TestChainDecoder:
    """Test ChainDecoder"""

    def test_decode_delegates(self):
        """Test decode is delegated to the resolved decoder"""
        fake = make_fake_decoder()
        chain = ChainDecoder([fake])

        assert chain.decode("data", "the format", {}) == {"foo": "bar"}
        fake.decode.assert_called_once_with("data", "the format", {})

    def test_supports_decoding_is_total(self):
        """Test every format is supported thanks to the JSON fallback"""
        assert ChainDecoder([]).supports_decoding("the format")
        assert ChainDecoder([make_fake_decoder()]).supports_decoding("the format")

    def test_get_decoder(self):
        """Test resolution, fallback and memoization"""
        fake = make_fake_decoder()
        chain = ChainDecoder([fake])

        assert isinstance(ChainDecoder([]).get_decoder("the format"), JsonDecode)
        assert chain.get_decoder("the format") is fake
        assert chain.get_decoder("the format") is fake
        assert fake.supports_decoding.call_count == 1

    def test_fallback_decodes_json(self):
        """Test the fallback decoder really parses JSON"""
        chain = ChainDecoder([XmlDecode()])
        assert chain.decode('{"foo":"bar"}', "unknown") == {"foo": "bar"}

    @pytest.mark.parametrize(
        "format,expected",
        [("application/xml", XmlDecode), ("application/json", JsonDecode)],
    )
    def test_real_codecs(self, format, expected):
        """Test resolution with the shipped decoders"""
        chain = ChainDecoder([XmlDecode(), JsonDecode()])
        assert isinstance(chain.get_decoder(format), expected)
