from kolor.conversions import parse_css_hex, format_css_hex, format_css_rgba, format_rgba_string, pack_rgb, to_byte
from kolor.errors import InvalidColorFormatError
from kolor.samples import samples_rgb_int
import logging
import pytest


def test_parse_long_hex():
    assert parse_css_hex("#FF0000") == (1.0, 0.0, 0.0)
    assert parse_css_hex("#00ff00") == (0.0, 1.0, 0.0)
    assert parse_css_hex("#336699") == pytest.approx((0.2, 0.4, 0.6))


def test_parse_short_hex_divides_by_16():
    assert parse_css_hex("#f00") == (15 / 16, 0.0, 0.0)
    assert parse_css_hex("#888") == (0.5, 0.5, 0.5)


@pytest.mark.parametrize("text", [
    "", "#", "FF0000", "#FF00", "#FF00000", "#GG0000", "#ggg", "rgb(1,2,3)", " #FFF", None, 0xFF0000,
])
def test_parse_rejects_malformed(text):
    with pytest.raises(InvalidColorFormatError):
        parse_css_hex(text)


def test_invalid_format_is_value_error():
    with pytest.raises(ValueError, match="Invalid input format"):
        parse_css_hex("#12")


def test_parse_logs_rejection(caplog):
    with caplog.at_level(logging.DEBUG, logger="kolor"):
        with pytest.raises(InvalidColorFormatError):
            parse_css_hex("#12")
    assert "#12" in caplog.text


def test_format_css_hex():
    assert format_css_hex((1.0, 0.0, 0.0)) == "#FF0000"
    assert format_css_hex((0.0, 0.0, 0.0)) == "#000000"
    assert format_css_hex((1.0, 0.0, 0.0), 1) == "#F00"
    assert format_css_hex((1.0, 0.0, 0.5), 4) == "#FFFF00008000"


def test_format_css_hex_pads_small_values():
    # 1/255 -> 0x01, must stay two characters wide
    assert format_css_hex((1 / 255, 0.0, 10 / 255)) == "#01000A"


def test_format_css_rgba_clamps():
    assert format_css_rgba((1.0, 0.0, 0.5), 0.5) == "rgba(255,0,128,0.500)"
    assert format_css_rgba((1.5, -0.2, 0.5), 0.25) == "rgba(255,0,128,0.250)"
    assert format_css_rgba((0.0, 0.0, 0.0), -3.0) == "rgba(0,0,0,0.000)"
    assert format_css_rgba((0.0, 0.0, 0.0), 0.12345) == "rgba(0,0,0,0.123)"


def test_format_rgba_string_raw_alpha():
    assert format_rgba_string((1.0, 0.0, 0.0), 1.0) == "rgba(255,0,0,1)"
    assert format_rgba_string((1.0, 0.0, 0.0), 0.5) == "rgba(255,0,0,0.5)"
    assert format_rgba_string((0.0, 0.0, 0.0), 2.5) == "rgba(0,0,0,2.5)"


def test_to_byte_rounds_half_up():
    for rgb, rgb_int in samples_rgb_int.items():
        assert tuple(to_byte(c) for c in rgb) == rgb_int


def test_pack_rgb():
    assert pack_rgb((1.0, 0.0, 0.0)) == 0xFF0000
    assert pack_rgb((0.0, 1.0, 0.0)) == 0x00FF00
    assert pack_rgb((0.0, 0.0, 1.0)) == 0x0000FF
    assert pack_rgb((1.0, 1.0, 1.0)) == 16777215
