import numbers

import numba
import numpy as np

from utils.constants import COLOR_EPSILON, MAX_COLOR_VALUE
from utils.misc import round_half_away
from utils.vectors import approx_equal


@numba.njit
def channel_to_byte(value):
    scaled = value * MAX_COLOR_VALUE
    if scaled < 0.0:
        scaled = 0.0
    elif scaled > MAX_COLOR_VALUE:
        scaled = float(MAX_COLOR_VALUE)
    # the clamp keeps this non-negative, so ties round up
    return np.uint8(round_half_away(scaled))


@numba.njit
def to_rgb_bytes(channels):
    """
    Convert an (n, 4) buffer of rgba channels into a flat array of
    n * 3 bytes, dropping alpha.
    """
    n = channels.shape[0]
    out = np.empty(n * 3, dtype=np.uint8)
    for i in range(n):
        for c in range(3):
            out[i * 3 + c] = channel_to_byte(channels[i, c])
    return out


class Color:
    """
    RGBA color. Channels are clamped to at most 1.0 on construction but may
    go negative during arithmetic; the byte conversion clamps both ends.
    """
    __slots__ = ('channels',)

    def __init__(self, r, g, b, a=1.0):
        channels = np.minimum(np.array([r, g, b, a], dtype=np.float64), 1.0)
        channels.flags.writeable = False
        self.channels = channels

    @classmethod
    def rgb(cls, r, g, b):
        return cls(r, g, b, 1.0)

    @classmethod
    def rgba(cls, r, g, b, a):
        return cls(r, g, b, a)

    @classmethod
    def from_array(cls, channels):
        if channels.shape[0] == 3:
            return cls(channels[0], channels[1], channels[2])
        return cls(channels[0], channels[1], channels[2], channels[3])

    @property
    def r(self):
        return float(self.channels[0])

    @property
    def g(self):
        return float(self.channels[1])

    @property
    def b(self):
        return float(self.channels[2])

    @property
    def a(self):
        return float(self.channels[3])

    def __add__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return Color.from_array(self.channels[:3] + other.channels[:3])

    def __sub__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return Color.from_array(self.channels[:3] - other.channels[:3])

    def __mul__(self, other):
        if isinstance(other, Color):
            # hadamard product
            return Color.from_array(self.channels[:3] * other.channels[:3])
        if isinstance(other, numbers.Real):
            return Color.from_array(self.channels[:3] * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return Color.from_array(self.channels[:3] * other)
        return NotImplemented

    def __truediv__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError(f"cannot divide {self!r} by zero")
        return Color.from_array(self.channels[:3] / scalar)

    def to_byte_triple(self):
        return tuple(int(v) for v in to_rgb_bytes(self.channels.reshape(1, 4)))

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return approx_equal(self.channels, other.channels, COLOR_EPSILON)

    __hash__ = None

    def __repr__(self):
        return f"Color({self.r!r}, {self.g!r}, {self.b!r}, {self.a!r})"


BLACK = Color.rgb(0.0, 0.0, 0.0)
WHITE = Color.rgb(1.0, 1.0, 1.0)
