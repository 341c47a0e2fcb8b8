"""Unit tests for delimiter encoding and codec lookups."""

import pytest

from tabledef.common.exceptions import ArgumentError, DelimiterRangeError, ErrorCode
from tabledef.hive.codecs import get_codec_class_name, is_lzop_codec
from tabledef.hive.delimiters import encode_delimiter


class TestEncodeDelimiter:
    """Test octal escaping of delimiter characters."""

    def test_tab_is_escaped(self):
        assert encode_delimiter(9) == "\\011"

    def test_comma_and_newline(self):
        assert encode_delimiter(ord(",")) == "\\054"
        assert encode_delimiter(ord("\n")) == "\\012"

    def test_bounds(self):
        assert encode_delimiter(0) == "\\000"
        assert encode_delimiter(127) == "\\177"

    def test_every_code_decodes_back(self):
        """Every code in range yields a backslash and three octal digits."""
        for code in range(128):
            encoded = encode_delimiter(code)
            assert len(encoded) == 4
            assert encoded[0] == "\\"
            assert int(encoded[1:], 8) == code

    def test_code_above_range_rejected(self):
        with pytest.raises(DelimiterRangeError, match="Character 128 is an out-of-range delimiter"):
            encode_delimiter(128)

    def test_negative_code_rejected(self):
        with pytest.raises(DelimiterRangeError):
            encode_delimiter(-1)

    def test_range_error_carries_value(self):
        with pytest.raises(DelimiterRangeError) as exc_info:
            encode_delimiter(200)

        assert exc_info.value.details["value"] == 200
        assert exc_info.value.error_code == ErrorCode.DELIMITER_OUT_OF_RANGE
        assert isinstance(exc_info.value, ValueError)


class TestCodecs:
    """Test the compression codec registry."""

    def test_short_name_lookup(self):
        assert get_codec_class_name("gzip") == "org.apache.hadoop.io.compress.GzipCodec"
        assert get_codec_class_name("LZOP") == "com.hadoop.compression.lzo.LzopCodec"

    def test_none_has_no_class(self):
        assert get_codec_class_name("none") is None

    def test_unknown_codec_rejected(self):
        with pytest.raises(ArgumentError, match="Unknown compression codec: zstd-ish") as exc_info:
            get_codec_class_name("zstd-ish")
        assert exc_info.value.error_code == ErrorCode.UNSUPPORTED_CODEC

    @pytest.mark.parametrize("codec,expected", [
        ("lzop", True),
        ("LZOP", False),
        ("com.hadoop.compression.lzo.LzopCodec", True),
        ("lzo", False),
        ("com.hadoop.compression.lzo.LzoCodec", False),
        ("gzip", False),
        (None, False),
    ])
    def test_is_lzop_codec(self, codec, expected):
        assert is_lzop_codec(codec) is expected
