from .color import Color, FrozenColor
from .constants import WHITE, BLACK, RED, GREEN, BLUE, named_colors

__all__ = [
    "Color", "FrozenColor",
    "WHITE", "BLACK", "RED", "GREEN", "BLUE",
    "named_colors",
]
