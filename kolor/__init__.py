"""
Kolor - Color Value Object
==========================

A small mutable color type for UI and graphics code. A :class:`Color`
keeps RGB and HSV views of the same color, computing whichever one is
missing on demand, and renders to CSS strings and packed integers.

Quick Start
-----------
>>> from kolor import Color, RED
>>>
>>> c = Color(0.0, 0.25, 0.5)
>>> c.hue
210.0
>>> c.value = 1.0          # HSV write, RGB is recomputed on next read
>>> c.to_css_hex()
'#0080FF'
>>> Color([1, 0, 0, 0.5]).to_css()
'rgba(255,0,0,0.500)'
>>> Color.from_css_hex('#FF0000').to_number()
16711680

Modules
-------
- colors: Color, FrozenColor and the named constants
- conversions: scalar and numpy RGB <-> HSV conversions, CSS codecs
- errors: InvalidColorFormatError
"""
import logging

from .colors import Color, FrozenColor, WHITE, BLACK, RED, GREEN, BLUE
from .conversions import rgb_to_hsv, hsv_to_rgb, np_rgb_to_hsv, np_hsv_to_rgb
from .errors import InvalidColorFormatError
from .types.color_types import Authority

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    # Color classes
    "Color", "FrozenColor", "Authority",

    # Constants
    "WHITE", "BLACK", "RED", "GREEN", "BLUE",

    # Conversions
    "rgb_to_hsv", "hsv_to_rgb",
    "np_rgb_to_hsv", "np_hsv_to_rgb",

    # Errors
    "InvalidColorFormatError",

    # Version
    "__version__",
]
