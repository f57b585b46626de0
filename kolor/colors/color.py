from __future__ import annotations
import logging
from collections.abc import Mapping, Sequence
from typing import Any, List, Optional, Self, Tuple
import numpy as np
from ..conversions import (
    rgb_to_hsv,
    hsv_to_rgb,
    parse_css_hex,
    format_css_hex,
    format_css_rgba,
    format_rgba_string,
    pack_rgb,
)
from ..types.color_types import Authority, ChannelSequence, ColorRecord, Scalar
from ..types.format_type import DEFAULT_ALPHA, DEFAULT_BYTE_WIDTH
from ..utils import value_or_default

logger = logging.getLogger(__name__)

# (authority, authoritative triple, alpha)
ColorState = Tuple[Authority, List[Scalar], Scalar]


def _channels_state(r: Scalar, g: Scalar, b: Scalar, a: Optional[Scalar] = None) -> ColorState:
    return Authority.RGB, [r, g, b], value_or_default(a, DEFAULT_ALPHA)


def _sequence_state(seq: ChannelSequence) -> ColorState:
    if isinstance(seq, np.ndarray):
        seq = seq.tolist()
    if len(seq) not in (3, 4):
        raise TypeError(f"Color sequence must hold 3 or 4 channels, got {len(seq)}")
    alpha = seq[3] if len(seq) == 4 else None
    return _channels_state(seq[0], seq[1], seq[2], alpha)


def _rgba_state(record: ColorRecord) -> ColorState:
    return _channels_state(record["r"], record["g"], record["b"], record.get("a"))


def _hsva_state(record: ColorRecord) -> ColorState:
    alpha = value_or_default(record.get("a"), DEFAULT_ALPHA)
    return Authority.HSV, [record["h"], record["s"], record["v"]], alpha


def _color_state(other: Color) -> ColorState:
    # Copying always goes through RGB, materialising it on the source
    return Authority.RGB, other.rgb(), other.alpha


def _resolve_args(args: Tuple[Any, ...]) -> ColorState:
    """Pick the construction path from the shape of the positional arguments."""
    if not args:
        return _channels_state(0.0, 0.0, 0.0)
    if len(args) in (3, 4):
        return _channels_state(*args)
    if len(args) != 1:
        raise TypeError(f"Color() takes 0, 1, 3 or 4 arguments ({len(args)} given)")

    arg = args[0]
    if isinstance(arg, Color):
        return _color_state(arg)
    if isinstance(arg, Mapping):
        if "r" in arg:
            return _rgba_state(arg)
        if "h" in arg:
            return _hsva_state(arg)
        raise TypeError(f"Color record needs an 'r' or 'h' key, got {sorted(arg)}")
    if isinstance(arg, str):
        raise TypeError("Color() does not parse strings; use Color.from_css_hex()")
    if isinstance(arg, (Sequence, np.ndarray)):
        return _sequence_state(arg)
    raise TypeError(f"Cannot build a Color from {type(arg).__name__}")


class Color:
    """
    Mutable color holding an RGB and/or HSV triple plus an alpha scalar.

    Exactly one triple is authoritative (see :attr:`authority`). The other
    one is a cache: it is computed on first read and dropped whenever a
    channel of the authoritative space is written. Channels are unit floats
    except hue, which is in degrees.

    Construction:
        Color()                     -> opaque black
        Color(r, g, b[, a])
        Color([r, g, b[, a]])       -> any sequence or numpy array
        Color({"r":..,"g":..,"b":..,"a":..})
        Color({"h":..,"s":..,"v":..,"a":..})
        Color(other_color)          -> copies RGB and alpha

    Values are not validated or clamped here; out-of-range inputs only get
    clamped by :meth:`to_css`.
    """
    __slots__ = ('_rgb', '_hsv', '_alpha', '_authority')

    def __init__(self, *args: Any) -> None:
        self._reset(*_resolve_args(args))

    def _store(self, name: str, value: Any) -> None:
        # Internal writes bypass __setattr__ so frozen instances can still cache
        object.__setattr__(self, name, value)

    def _reset(self, authority: Authority, triple: List[Scalar], alpha: Scalar) -> None:
        self._store('_authority', authority)
        self._store('_rgb', list(triple) if authority is Authority.RGB else None)
        self._store('_hsv', list(triple) if authority is Authority.HSV else None)
        self._store('_alpha', alpha)

    @classmethod
    def _from_state(cls, authority: Authority, triple: List[Scalar], alpha: Scalar) -> Self:
        color = cls.__new__(cls)
        color._reset(authority, triple, alpha)
        return color

    # ------------------ FACTORIES ------------------
    @classmethod
    def from_channels(cls, r: Scalar, g: Scalar, b: Scalar, a: Optional[Scalar] = None) -> Self:
        return cls._from_state(*_channels_state(r, g, b, a))

    @classmethod
    def from_sequence(cls, seq: ChannelSequence) -> Self:
        """Build from ``[r, g, b]`` or ``[r, g, b, a]``."""
        return cls._from_state(*_sequence_state(seq))

    @classmethod
    def from_rgba(cls, record: ColorRecord) -> Self:
        return cls._from_state(*_rgba_state(record))

    @classmethod
    def from_hsva(cls, record: ColorRecord) -> Self:
        """Build an HSV-backed color from ``{"h", "s", "v"[, "a"]}``."""
        return cls._from_state(*_hsva_state(record))

    @classmethod
    def from_hsv(cls, h: Scalar, s: Scalar, v: Scalar, a: Optional[Scalar] = None) -> Self:
        return cls.from_hsva({"h": h, "s": s, "v": v, "a": a})

    @classmethod
    def from_color(cls, other: Color) -> Self:
        return cls._from_state(*_color_state(other))

    @classmethod
    def from_css_hex(cls, text: str) -> Self:
        """
        Parse ``#rgb`` or ``#rrggbb``. Alpha is always 1.0.

        Raises:
            InvalidColorFormatError: if text has any other form.
        """
        return cls.from_channels(*parse_css_hex(text), DEFAULT_ALPHA)

    @classmethod
    def from_memento(cls, memento: ChannelSequence) -> Self:
        return cls.from_sequence(memento)

    from_json = from_memento

    @classmethod
    def random(cls, rng: Optional[np.random.Generator] = None) -> Self:
        """Uniform random RGB in [0, 1), fully opaque."""
        if rng is None:
            rng = np.random.default_rng()
        r, g, b = (float(c) for c in rng.random(3))
        return cls.from_channels(r, g, b, DEFAULT_ALPHA)

    # ------------------ MATERIALISATION ------------------
    @property
    def authority(self) -> Authority:
        """The color space that was written last and holds exact values."""
        return self._authority

    def _materialized_rgb(self) -> List[Scalar]:
        if self._rgb is None:
            assert self._hsv is not None, "Color lost both its RGB and HSV triples"
            self._store('_rgb', list(hsv_to_rgb(*self._hsv)))
            logger.debug("Materialised RGB %s from HSV %s", self._rgb, self._hsv)
        return self._rgb

    def _materialized_hsv(self) -> List[Scalar]:
        if self._hsv is None:
            assert self._rgb is not None, "Color lost both its RGB and HSV triples"
            self._store('_hsv', list(rgb_to_hsv(*self._rgb)))
            logger.debug("Materialised HSV %s from RGB %s", self._hsv, self._rgb)
        return self._hsv

    def _write(self, authority: Authority, index: int, value: Scalar) -> None:
        if authority is Authority.RGB:
            self._materialized_rgb()[index] = value
        else:
            self._materialized_hsv()[index] = value
        self._store('_authority', authority)
        self._store('_' + authority.other.value, None)

    # ------------------ BULK READS ------------------
    def rgb(self) -> List[Scalar]:
        """Copy of ``[r, g, b]``."""
        return list(self._materialized_rgb())

    def hsv(self) -> List[Scalar]:
        """Copy of ``[h, s, v]``."""
        return list(self._materialized_hsv())

    def rgba(self) -> List[Scalar]:
        return [*self._materialized_rgb(), self._alpha]

    # ------------------ CHANNELS ------------------
    @property
    def alpha(self) -> Scalar:
        return self._alpha

    @alpha.setter
    def alpha(self, a: Scalar) -> None:
        self._store('_alpha', a)

    @property
    def red(self) -> Scalar:
        return self._materialized_rgb()[0]

    @red.setter
    def red(self, r: Scalar) -> None:
        self._write(Authority.RGB, 0, r)

    @property
    def green(self) -> Scalar:
        return self._materialized_rgb()[1]

    @green.setter
    def green(self, g: Scalar) -> None:
        self._write(Authority.RGB, 1, g)

    @property
    def blue(self) -> Scalar:
        return self._materialized_rgb()[2]

    @blue.setter
    def blue(self, b: Scalar) -> None:
        self._write(Authority.RGB, 2, b)

    @property
    def hue(self) -> Scalar:
        """Hue in degrees."""
        return self._materialized_hsv()[0]

    @hue.setter
    def hue(self, h: Scalar) -> None:
        self._write(Authority.HSV, 0, h)

    @property
    def saturation(self) -> Scalar:
        return self._materialized_hsv()[1]

    @saturation.setter
    def saturation(self, s: Scalar) -> None:
        self._write(Authority.HSV, 1, s)

    @property
    def value(self) -> Scalar:
        return self._materialized_hsv()[2]

    @value.setter
    def value(self, v: Scalar) -> None:
        self._write(Authority.HSV, 2, v)

    # ------------------ RENDERING ------------------
    def to_css(self, byte_width: int = DEFAULT_BYTE_WIDTH) -> str:
        """
        CSS color string.

        Opaque colors (alpha >= 1) render as hex via :meth:`to_css_hex`,
        translucent ones as ``rgba(R,G,B,A)`` with channels clamped to
        0..255 and alpha clamped to [0, 1] with three decimals.
        """
        if self._alpha >= 1.0:
            return self.to_css_hex(byte_width)
        return format_css_rgba(self._materialized_rgb(), self._alpha)

    def to_css_hex(self, byte_width: int = DEFAULT_BYTE_WIDTH) -> str:
        """``#RRGGBB`` with byte_width hex digits per channel; alpha is dropped."""
        return format_css_hex(self._materialized_rgb(), byte_width)

    def to_number(self) -> int:
        """Pack 8-bit channels as ``0xRRGGBB``."""
        return pack_rgb(self._materialized_rgb())

    def to_string(self) -> str:
        return format_rgba_string((self.red, self.green, self.blue), self.alpha)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_memento()!r})"

    # ------------------ MEMENTO ------------------
    def to_memento(self) -> List[Scalar]:
        """``[r, g, b, a]`` with RGB materialised."""
        return self.rgba()

    to_json = to_memento

    def clone(self) -> Color:
        """Independent, mutable, RGB-backed copy."""
        return Color.from_memento(self.to_memento())

    def __copy__(self) -> Color:
        return self.clone()

    def __deepcopy__(self, memo: dict) -> Color:
        return self.clone()


class FrozenColor(Color):
    """
    A Color whose channels cannot be written.

    Reads still fill the internal cache. :meth:`clone` returns a regular
    mutable :class:`Color`.
    """
    __slots__ = ('_is_frozen',)

    def __setattr__(self, name: str, value: Any) -> None:
        """Block attribute changes after construction."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def _reset(self, authority: Authority, triple: List[Scalar], alpha: Scalar) -> None:
        super()._reset(authority, triple, alpha)
        self._store('_is_frozen', True)

