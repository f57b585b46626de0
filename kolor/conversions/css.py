"""
CSS string rendering and parsing for RGB triples.

All channel inputs are unit floats; 8-bit and hex scaling happens here.
"""
import logging
import re
from typing import Sequence, Tuple
from ..errors import InvalidColorFormatError
from ..types.format_type import BYTE_MAX, DEFAULT_BYTE_WIDTH
from ..utils import clamp, clamp01, format_number, pad_hex, round_half_up

logger = logging.getLogger(__name__)

_SHORT_HEX = re.compile(r"#([0-9a-fA-F])([0-9a-fA-F])([0-9a-fA-F])")
_LONG_HEX = re.compile(r"#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")

# divisor per digit count; a single digit is scaled by 16, not 15
_HEX_DIVISORS = {1: 16, 2: BYTE_MAX}


def to_byte(channel: float) -> int:
    """Scale a unit channel to 0..255 with half-up rounding (no clamp)."""
    return round_half_up(channel * BYTE_MAX)


def format_css_hex(rgb: Sequence[float], byte_width: int = DEFAULT_BYTE_WIDTH) -> str:
    """Render '#RRGGBB' (or wider) with byte_width uppercase hex digits per channel."""
    maximum = 16 ** byte_width - 1
    return "#" + "".join(pad_hex(round_half_up(c * maximum), byte_width) for c in rgb)


def format_css_rgba(rgb: Sequence[float], alpha: float) -> str:
    """Render 'rgba(R,G,B,A)' with clamped 8-bit channels and a 3-decimal alpha."""
    r, g, b = (clamp(to_byte(c), 0, BYTE_MAX) for c in rgb)
    return f"rgba({r},{g},{b},{clamp01(alpha):.3f})"


def format_rgba_string(rgb: Sequence[float], alpha: float) -> str:
    r, g, b = (to_byte(c) for c in rgb)
    return f"rgba({r},{g},{b},{format_number(alpha)})"


def pack_rgb(rgb: Sequence[float]) -> int:
    r, g, b = (to_byte(c) for c in rgb)
    return (r << 16) | (g << 8) | b


def parse_css_hex(text: str) -> Tuple[float, float, float]:
    """
    Parse '#rgb' or '#rrggbb' into a unit RGB triple.

    Raises:
        InvalidColorFormatError: for any other shape, including non-strings.
    """
    pattern = {4: _SHORT_HEX, 7: _LONG_HEX}.get(len(text)) if isinstance(text, str) else None
    match = pattern.fullmatch(text) if pattern is not None else None
    if match is None:
        logger.debug("Rejecting CSS hex input %r", text)
        raise InvalidColorFormatError(text)

    divisor = _HEX_DIVISORS[len(match.group(1))]
    r, g, b = (int(part, 16) / divisor for part in match.groups())
    return r, g, b
