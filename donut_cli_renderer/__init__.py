#
# PROJECT: donut-cli-renderer
# MODULE: donut_cli_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import Vec3, Mat3
from .animation import AnimationState
from .config import ConfigError, TorusShape, ScreenConfig, ControlState
from .scene import Sample, Renderable
from .torus import Torus
from .shader import luminosity, shade
from .canvas import Canvas, glyph_for
from .renderer import Renderer
from .controls import CommandError, ControlChannel, InputReader, parse_command
from .demo import DemoApp
