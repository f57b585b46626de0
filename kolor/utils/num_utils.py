import math
from typing import Optional, TypeVar
from boundednumbers.functions import clamp, clamp01, cyclic_wrap_float

T = TypeVar("T")


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with .5 going up.

    Python's round() rounds half to even (round(2.5) == 2), which would make
    CSS output disagree with every browser on .5 boundaries.
    """
    if not math.isfinite(value):
        return 0
    return math.floor(value + 0.5)


def format_number(value: float) -> str:
    """Render a number without a trailing '.0' when it is integral."""
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else str(value)
    return str(value)


def pad_hex(value: int, width: int) -> str:
    """Uppercase hex of value, left padded with zeros to width characters."""
    return format(value, "X").rjust(width, "0")


def value_or_default(value: Optional[T], default: T) -> T:
    """Return value unless it is None; used for optional alpha inputs."""
    return value if value is not None else default
