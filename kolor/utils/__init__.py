from .num_utils import (
    clamp, clamp01, cyclic_wrap_float,
    round_half_up, format_number, pad_hex, value_or_default,
)

__all__ = [
    "clamp", "clamp01", "cyclic_wrap_float",
    "round_half_up", "format_number", "pad_hex", "value_or_default",
]
