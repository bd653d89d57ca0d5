#
# PROJECT: donut-cli-renderer
# MODULE: donut_cli_renderer/scene.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from dataclasses import dataclass
from typing import List, Protocol

from .math_utils import Vec3
from .animation import AnimationState


@dataclass(frozen=True)
class Sample:
    """
    One surface sample of a renderable object for the current frame.

    position and normal are in view space (after all rotations). luminosity
    stays 0 until the shader attaches it.
    """
    position: Vec3
    normal: Vec3
    luminosity: float = 0.0


class Renderable(Protocol):
    """
    Anything the renderer can draw.

    An object produces its surface samples for a given animation state and
    knows how to step that state forward by one tick.
    """

    def generate_samples(self, state: AnimationState) -> List[Sample]:
        ...

    def advance(self, state: AnimationState) -> AnimationState:
        ...
