"""
Kolor Color Space Conversions
=============================

Scalar and vectorized (numpy) conversions between unit RGB and HSV, plus
the CSS string codecs used by :class:`kolor.Color`.

RGB → HSV:
    rgb_to_hsv(r, g, b)
    np_rgb_to_hsv(r, g, b)

HSV → RGB:
    hsv_to_rgb(h, s, v)
    np_hsv_to_rgb(h, s, v)

CSS:
    parse_css_hex(text)
    format_css_hex(rgb, byte_width=2)
    format_css_rgba(rgb, alpha)

Examples
--------
>>> from kolor.conversions import rgb_to_hsv, hsv_to_rgb
>>> rgb_to_hsv(1.0, 0.5, 0.0)
(30.0, 1.0, 1.0)
>>> hsv_to_rgb(30.0, 1.0, 1.0)
(1.0, 0.5, 0.0)
"""

from .to_hsv import rgb_to_hsv, np_rgb_to_hsv
from .to_rgb import hsv_to_rgb, np_hsv_to_rgb
from .css import (
    parse_css_hex,
    format_css_hex,
    format_css_rgba,
    format_rgba_string,
    pack_rgb,
    to_byte,
)

__all__ = [
    'rgb_to_hsv',
    'np_rgb_to_hsv',
    'hsv_to_rgb',
    'np_hsv_to_rgb',
    'parse_css_hex',
    'format_css_hex',
    'format_css_rgba',
    'format_rgba_string',
    'pack_rgb',
    'to_byte',
]
