"""Basic Kolor usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from kolor import Color, RED, np_rgb_to_hsv
from kolor.errors import InvalidColorFormatError


def demonstrate_colors() -> None:
    # Build colors from the different input shapes.
    accent = Color(1.0, 0.5, 0.25)
    print("RGB:", accent.rgb(), "HSV:", accent.hsv())

    from_record = Color({"h": 200, "s": 0.6, "v": 0.9, "a": 0.75})
    print("HSV record -> CSS:", from_record.to_css())

    # Writing a hue channel makes HSV authoritative; RGB is recomputed on read.
    accent.hue = 180.0
    print("Rotated hue:", accent.to_css_hex(), accent.authority.value)


def demonstrate_rendering() -> None:
    print("RED as number:", hex(RED.to_number()))
    print("RED as string:", str(RED))
    print("Translucent:", Color([0.2, 0.4, 0.6, 0.5]).to_css())

    try:
        Color.from_css_hex("#12345")
    except InvalidColorFormatError as exc:
        print("Rejected:", exc)


def demonstrate_arrays() -> None:
    # Vectorized conversion for a batch of random colors.
    rgb = np.random.default_rng(0).random((4, 3))
    hsv = np_rgb_to_hsv(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    print("Batch HSV:\n", hsv.round(3))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_rendering()
    demonstrate_arrays()
