"""Tests for the transcode engine and format registry."""
import logging

import pytest

from encoding_converter.application.codecs.base import Codec
from encoding_converter.application.codecs.plain import PLAIN_TEXT
from encoding_converter.application.codecs.registry import DEFAULT_REGISTRY, FormatRegistry, get_codec
from encoding_converter.application.engine import TranscodeEngine, convert, transcode
from encoding_converter.domain.errors import EncodeError
from encoding_converter.domain.formats import FormatId, to_units
from encoding_converter.domain.results import ConversionRequest, Failure, Stage, Success

ROUND_TRIP_FORMATS = [
    FormatId.BASE64,
    FormatId.HEX,
    FormatId.BINARY,
    FormatId.URI,
    FormatId.URL,
    FormatId.ASCII,
    FormatId.UNICODE,
]


class TestFormatRegistry:
    """Test FormatRegistry."""

    def test_every_format_is_registered(self):
        assert DEFAULT_REGISTRY.list_formats() == FormatId.all_types()
        for format_id in FormatId.all_types():
            assert DEFAULT_REGISTRY.is_supported(format_id)
            assert get_codec(format_id).format == format_id

    def test_unknown_format_fails_fast(self):
        registry = FormatRegistry([PLAIN_TEXT])
        with pytest.raises(KeyError, match="No codec registered"):
            registry.get_codec(FormatId.HEX)

    def test_duplicate_codec_rejected(self):
        with pytest.raises(ValueError, match="Duplicate codec"):
            FormatRegistry([PLAIN_TEXT, PLAIN_TEXT])

    def test_engine_raises_for_unregistered_format(self):
        engine = TranscodeEngine(FormatRegistry([PLAIN_TEXT]))
        with pytest.raises(KeyError):
            engine.convert("x", FormatId.TEXT, FormatId.HEX)


class TestTranscode:
    """Test transcode end to end."""

    @pytest.mark.parametrize("text", ["", "Hello", "tab\there", "héllo wörld \U0001F600", "\ud800"])
    def test_plain_text_identity(self, text):
        assert convert(text, FormatId.TEXT, FormatId.TEXT) == Success(text)

    def test_base64_to_text(self):
        request = ConversionRequest("SGVsbG8=", FormatId.BASE64, FormatId.TEXT)
        assert transcode(request) == Success("Hello")

    def test_text_to_hex(self):
        assert convert("Hello", FormatId.TEXT, FormatId.HEX) == Success("48656c6c6f")

    def test_hex_to_text(self):
        assert convert("48656c6c6f", FormatId.HEX, FormatId.TEXT) == Success("Hello")

    def test_missing_padding_is_decode_failure(self):
        result = convert("SGVsbG8", FormatId.BASE64, FormatId.TEXT)
        assert isinstance(result, Failure)
        assert result.stage == Stage.DECODE
        assert result.format == FormatId.BASE64
        assert "padding" in result.message
        assert result.ok is False

    def test_binary_partial_group_discarded(self):
        assert convert("010010000100", FormatId.BINARY, FormatId.TEXT) == Success("H")

    def test_same_format_validates_input(self):
        result = convert("not base64!", FormatId.BASE64, FormatId.BASE64)
        assert isinstance(result, Failure)
        assert result.stage == Stage.DECODE

    def test_same_format_normalizes(self):
        assert convert("48656C6C6F", FormatId.HEX, FormatId.HEX) == Success("48656c6c6f")

    def test_cross_format(self):
        assert convert("72, 105", FormatId.ASCII, FormatId.BINARY) == Success("01001000 01101001")
        assert convert("\\u003c\\u0062\\u003e", FormatId.UNICODE, FormatId.HTML) == Success("&lt;b&gt;")
        assert convert("a%20b", FormatId.URI, FormatId.BASE64) == Success("YSBi")

    def test_encode_failure(self):
        result = convert("\\ud800", FormatId.UNICODE, FormatId.URI)
        assert isinstance(result, Failure)
        assert result.stage == Stage.ENCODE
        assert result.format == FormatId.URI
        assert "unpaired surrogate" in result.message

    def test_huge_decimal_is_a_decode_failure(self):
        result = convert("9" * 5000, FormatId.ASCII, FormatId.TEXT)
        assert isinstance(result, Failure)
        assert result.stage == Stage.DECODE
        assert result.format == FormatId.ASCII
        assert "outside the range" in result.message

    def test_huge_html_entity_is_left_alone(self):
        text = "&#" + "9" * 5000 + ";"
        assert convert(text, FormatId.HTML, FormatId.TEXT) == Success(text)

    def test_url_decodes_like_decode_uri(self):
        assert convert("%21%28%29%2A%27%5B%5D", FormatId.URL, FormatId.TEXT) == Success("!()*'[]")
        assert convert("%21", FormatId.URL, FormatId.URL) == Success("!")
        assert convert("a%2Fb", FormatId.URL, FormatId.URL) == Success("a%252Fb")

    def test_failure_string_names_format_and_stage(self):
        result = convert("zz", FormatId.HEX, FormatId.TEXT)
        assert str(result).startswith("Hexadecimal decode failed: ")

    def test_failure_is_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger="encoding_converter"):
            convert("1", FormatId.HEX, FormatId.TEXT)
        assert "decode failed for hex" in caplog.text

    def test_custom_codec_encode_error(self):
        def refuse(units):
            raise EncodeError(FormatId.HEX, "nope")

        registry = FormatRegistry([PLAIN_TEXT, Codec(FormatId.HEX, PLAIN_TEXT.decode, refuse)])
        result = TranscodeEngine(registry).convert("x", FormatId.TEXT, FormatId.HEX)
        assert result == Failure(Stage.ENCODE, FormatId.HEX, "nope")


class TestRoundTrip:
    """decode(encode(c)) == c for the lossless formats."""

    BYTE_SAMPLES = [(), (0,), (72, 101, 108, 108, 111), tuple(range(256))]
    UNIT_SAMPLES = [
        (),
        to_units("Hello, World!"),
        to_units("a b&c=d/e?f#g%h"),
        to_units("naïve café ☕ \U0001F600"),
        to_units("<>&\"' ~*()"),
    ]

    @pytest.mark.parametrize("format_id", ROUND_TRIP_FORMATS)
    @pytest.mark.parametrize("units", BYTE_SAMPLES)
    def test_byte_values(self, format_id, units):
        codec = get_codec(format_id)
        assert codec.decode(codec.encode(units)) == units

    @pytest.mark.parametrize(
        "format_id",
        [FormatId.URI, FormatId.URL, FormatId.ASCII, FormatId.UNICODE, FormatId.TEXT],
    )
    @pytest.mark.parametrize("units", UNIT_SAMPLES)
    def test_text_values(self, format_id, units):
        codec = get_codec(format_id)
        assert codec.decode(codec.encode(units)) == units

    def test_html_round_trip_for_markup_characters(self):
        codec = get_codec(FormatId.HTML)
        units = to_units("<p class=\"x\">a & 'b'</p>")
        assert codec.decode(codec.encode(units)) == units

    def test_html_numeric_entities_are_not_reproduced(self):
        result = convert("&#x48;&#105;", FormatId.HTML, FormatId.HTML)
        assert result == Success("Hi")

    def test_lossy_byte_formats_truncate_above_latin1(self):
        result = convert("€", FormatId.TEXT, FormatId.HEX)
        assert result == Success("ac")
        assert convert("ac", FormatId.HEX, FormatId.TEXT) == Success("\xac")
