import math
from typing import NamedTuple

import numpy as np

from primitives.color import Color
from utils.constants import OPAQUE_BLACK
from utils.misc import round_half_away


class Pixel(NamedTuple):
    col: int
    row: int

    @classmethod
    def from_point(cls, point):
        return cls(int(round_half_away(point.x)), int(round_half_away(point.y)))


class Canvas:
    """
    A width x height grid of colors, stored as a flat (width * height, 4)
    rgba buffer indexed by row * width + col.

    Row 0 is the top of the image; callers plotting with y pointing up
    should flip_vertical() before encoding.
    """
    __slots__ = ('width', 'height', 'pixels')

    def __init__(self, width, height):
        if width < 0 or height < 0:
            raise ValueError(f"Canvas dimensions must be non-negative, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.tile(OPAQUE_BLACK, (width * height, 1))

    def _index(self, pixel):
        col, row = pixel
        if not (0 <= col < self.width and 0 <= row < self.height):
            raise IndexError(f"{pixel} is outside the {self.width}x{self.height} canvas")
        return row * self.width + col

    def set_pixel(self, pixel, color):
        self.pixels[self._index(pixel)] = color.channels

    def get_pixel(self, pixel):
        return Color.from_array(self.pixels[self._index(pixel)])

    __setitem__ = set_pixel
    __getitem__ = get_pixel

    def in_bounds(self, point):
        if not (math.isfinite(point.x) and math.isfinite(point.y)):
            return False
        col, row = Pixel.from_point(point)
        return 0 <= col < self.width and 0 <= row < self.height

    def rows(self):
        return self.pixels.reshape(self.height, self.width, 4)

    def copy(self):
        canvas = Canvas(self.width, self.height)
        canvas.pixels[:] = self.pixels
        return canvas

    def flip_vertical(self):
        canvas = Canvas(self.width, self.height)
        canvas.pixels[:] = self.rows()[::-1].reshape(-1, 4)
        return canvas

    def __len__(self):
        return self.width * self.height
