#
# PROJECT: donut-cli-renderer
# MODULE: donut_cli_renderer/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import math
from typing import Iterable

from .config import DEFAULT_RAMP
from .scene import Sample

LOGGER = logging.getLogger(__name__)


class Canvas:
    """
    Frame buffer for one frame of point samples.

    depth holds ooz = 1 / (z + K2) per cell (larger is nearer, 0 means
    empty); luminosity holds the value of the sample that won that cell.
    Both grids are indexed [row][col].

    Rows are y * ooz / 2 from the centre. With scale_rows the row offset is
    also multiplied by K1, like the column offset.
    """
    __slots__ = ['w', 'h', 'ramp', 'cull_backfaces', 'scale_rows', 'depth', 'luminosity']

    def __init__(self, w, h, ramp=DEFAULT_RAMP, cull_backfaces=True, scale_rows=False):
        self.w, self.h = w, h
        self.ramp = ramp
        self.cull_backfaces = cull_backfaces
        self.scale_rows = scale_rows
        self.depth = [[0.0] * w for _ in range(h)]
        self.luminosity = [[0.0] * w for _ in range(h)]

    def clear(self):
        for y in range(self.h):
            depth_row = self.depth[y]
            lum_row = self.luminosity[y]
            for x in range(self.w):
                depth_row[x] = 0.0
                lum_row[x] = 0.0

    def plot(self, x, y, ooz, lum) -> bool:
        """Depth-test one cell. Equal depth keeps the earlier sample."""
        if x < 0 or x >= self.w or y < 0 or y >= self.h:
            return False
        if ooz > self.depth[y][x]:
            self.depth[y][x] = ooz
            self.luminosity[y][x] = lum
            return True
        return False

    def project(self, samples: Iterable[Sample], k1: float, k2: float) -> int:
        """
        Perspective-project samples into the buffer.

        Returns the number of samples that won their cell at the time they
        were written.
        """
        half_w = self.w // 2
        half_h = self.h // 2
        cull = self.cull_backfaces
        row_scale = k1 if self.scale_rows else 1.0
        written = 0
        degenerate = 0

        for s in samples:
            if cull and s.luminosity <= 0:
                continue
            p = s.position
            denom = p.z + k2
            if denom == 0:
                degenerate += 1
                continue
            ooz = 1.0 / denom
            fx = p.x * ooz * k1
            # Terminal cells are about twice as tall as they are wide
            fy = p.y * ooz * row_scale / 2
            if not (math.isfinite(fx) and math.isfinite(fy)):
                degenerate += 1
                continue
            if self.plot(math.floor(fx) + half_w, math.floor(fy) + half_h, ooz, s.luminosity):
                written += 1

        if degenerate:
            LOGGER.debug("Discarded %d samples on the projection plane", degenerate)
        return written

    def draw(self) -> str:
        """Row-major text of the buffer, one line per row."""
        ramp = self.ramp
        lines = []
        for row in self.luminosity:
            lines.append(''.join(glyph_for(lum, ramp) for lum in row))
            lines.append('\n')
        return ''.join(lines)


def glyph_for(lum: float, ramp: str = DEFAULT_RAMP) -> str:
    """
    Quantize a luminosity onto the glyph ramp (brightest last).
    Zero or less is blank; values at or above 1 clamp to the last glyph.
    """
    if lum <= 0:
        return ' '
    n = len(ramp)
    scaled = lum * n
    if not scaled < n:
        return ramp[n - 1]
    return ramp[math.floor(scaled)]
