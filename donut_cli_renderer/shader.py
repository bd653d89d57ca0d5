#
# PROJECT: donut-cli-renderer
# MODULE: donut_cli_renderer/shader.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from dataclasses import replace
from typing import Iterable, List

from .math_utils import Vec3
from .scene import Sample


def luminosity(normal: Vec3, light: Vec3) -> float:
    """
    Lambertian intensity: max(0, n . L) / |n|.

    The light vector is not normalized, so its length acts as intensity and
    the result can exceed 1. Clamping is left to the glyph mapping.
    """
    length = normal.length()
    if length == 0:
        return 0.0
    return max(0.0, normal.dot(light)) / length


def shade(samples: Iterable[Sample], light: Vec3) -> List[Sample]:
    """Return copies of the samples with luminosity attached."""
    return [replace(s, luminosity=luminosity(s.normal, light)) for s in samples]
