"""
Tests for the Encoder and Decoder protocols.
"""

from fast_serializer.encoder import (
    ChainDecoder,
    ChainEncoder,
    Decoder,
    Encoder,
    JsonDecode,
    JsonEncode,
    XmlDecode,
    XmlEncode,
    YamlDecode,
    YamlEncode,
)


def test_shipped_codecs_implement_protocols():
    """Test the shipped encoders and decoders match the protocols"""
    for encoder in (JsonEncode(), XmlEncode(), YamlEncode(), ChainEncoder()):
        assert isinstance(encoder, Encoder)
    for decoder in (JsonDecode(), XmlDecode(), YamlDecode(), ChainDecoder()):
        assert isinstance(decoder, Decoder)


def test_custom_encoder_matches_protocol():
    """Test a plain class with the right methods satisfies the protocol"""

    class ConcreteEncoder:
        def encode(self, data, format, context=None):  # noqa: ARG002
            return f"encoded_{format}"

        def supports_encoding(self, format):
            return format == "custom"

        def needs_normalization(self, format):  # noqa: ARG002
            return True

    encoder = ConcreteEncoder()
    assert isinstance(encoder, Encoder)
    assert not isinstance(encoder, Decoder)
    assert encoder.encode({}, "custom") == "encoded_custom"


def test_incomplete_decoder_does_not_match():
    """Test a class missing the check does not satisfy the protocol"""

    class DecodeOnly:
        def decode(self, data, format, context=None):  # noqa: ARG002
            return data

    assert not isinstance(DecodeOnly(), Decoder)
