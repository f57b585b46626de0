from .colors import samples_rgb_hsv, samples_rgb_int

__all__ = ["samples_rgb_hsv", "samples_rgb_int"]
