#
# PROJECT: donut-cli-renderer
# MODULE: donut_cli_renderer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .animation import AnimationState
from .canvas import Canvas
from .config import ScreenConfig, ControlState
from .scene import Renderable
from .shader import shade


class Renderer:
    """
    Runs one frame through the pipeline and returns it as text.

    Pipeline:
      1. Clear the canvas
      2. Generate object samples for the animation state
      3. Shade them against the snapshot's light
      4. Project and depth-test with the snapshot's K1/K2
      5. Map the winning luminosities to glyphs

    The canvas is allocated once and reused for every frame.
    """

    def __init__(self, obj: Renderable, screen: ScreenConfig):
        self.obj = obj
        self.screen = screen
        self.canvas = Canvas(screen.width, screen.height,
                             ramp=screen.ramp,
                             cull_backfaces=screen.cull_backfaces,
                             scale_rows=screen.scale_rows)
        self.last_samples = []

    def render(self, state: AnimationState, controls: ControlState) -> str:
        canv = self.canvas
        canv.clear()
        samples = shade(self.obj.generate_samples(state), controls.light)
        canv.project(samples, controls.k1, controls.k2)
        self.last_samples = samples
        return canv.draw()
