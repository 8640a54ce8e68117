import logging
import textwrap

import numpy as np

from primitives.color import to_rgb_bytes
from utils.constants import MAX_COLOR_VALUE, PPM_LINE_WIDTH, PPM_MAGIC

logger = logging.getLogger(__name__)


class Ppm:
    """
    Plain-text (P3) PPM image of a canvas snapshot.

    The body holds one byte triple per canvas cell, rows scanned from
    row 0 (the top of the image) down, so no flip happens here.
    """
    __slots__ = ('width', 'height', '_body')

    def __init__(self, width, height, body):
        body = np.array(body, dtype=np.uint8).ravel()
        if body.shape[0] != width * height * 3:
            raise ValueError(
                f"PPM body for {width}x{height} needs {width * height * 3} values, got {body.shape[0]}")
        body.flags.writeable = False
        self.width = width
        self.height = height
        self._body = body

    @classmethod
    def from_canvas(cls, canvas):
        return cls(canvas.width, canvas.height, to_rgb_bytes(canvas.pixels))

    @property
    def body(self):
        return self._body

    def header(self):
        return f"{PPM_MAGIC}\n{self.width} {self.height}\n{MAX_COLOR_VALUE}"

    def __len__(self):
        return self._body.shape[0] // 3

    def is_empty(self):
        return len(self) == 0

    def render(self):
        values = " ".join(str(v) for v in self._body.tolist())
        body = textwrap.fill(values, width=PPM_LINE_WIDTH)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Encoded %d pixels into %d body lines", len(self), body.count("\n") + 1 if body else 0)
        return f"{self.header()}\n{body}\n"

    __str__ = render

    def to_bytes(self):
        return self.render().encode("ascii")
