from __future__ import annotations
from enum import Enum
from typing import Mapping, Sequence, Tuple, TypedDict, Union

Scalar = int | float
Triple = Tuple[float, float, float]
ChannelSequence = Sequence[Scalar]


class RGBARecord(TypedDict, total=False):
    r: Scalar
    g: Scalar
    b: Scalar
    a: Scalar


class HSVARecord(TypedDict, total=False):
    h: Scalar
    s: Scalar
    v: Scalar
    a: Scalar


ColorRecord = Union[RGBARecord, HSVARecord, Mapping[str, Scalar]]


class Authority(str, Enum):
    """Which triple of a Color was written last and is therefore exact."""
    RGB = "rgb"
    HSV = "hsv"

    @property
    def other(self) -> Authority:
        return Authority.HSV if self is Authority.RGB else Authority.RGB
