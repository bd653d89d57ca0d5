#
# PROJECT: donut-cli-renderer
# MODULE: donut_cli_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
import shutil
from dataclasses import dataclass, field

from .math_utils import Vec3

DEFAULT_RAMP = ".,-~:;=!*#$@"


class ConfigError(ValueError):
    """Raised when a configuration value is out of range."""


def _is_count(value):
    # bool is an int subclass but never a size
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _require_positive(name, value):
    if not math.isfinite(value) or value <= 0:
        raise ConfigError(f"{name} must be a finite number > 0, got {value!r}")


@dataclass(frozen=True)
class TorusShape:
    """Torus geometry and sampling density."""
    tube_radius: float = 1.0   # r1
    ring_radius: float = 2.0   # r2
    step_theta: float = 0.07
    step_phi: float = 0.02

    def __post_init__(self):
        _require_positive("tube_radius", self.tube_radius)
        _require_positive("ring_radius", self.ring_radius)
        # A zero step would never leave the sampling loop
        _require_positive("step_theta", self.step_theta)
        _require_positive("step_phi", self.step_phi)

    @property
    def outer_radius(self) -> float:
        return self.tube_radius + self.ring_radius


@dataclass
class ScreenConfig:
    """Output grid, projection constants and glyph ramp."""
    width: int = 80
    height: int = 24
    k1: float = 30.0
    k2: float = 5.0
    ramp: str = DEFAULT_RAMP
    # Discard samples facing away from the light instead of letting them
    # win the depth test as blanks
    cull_backfaces: bool = True
    # Multiply row offsets by K1 as well; off, rows are y * ooz / 2 and the
    # vertical size of the picture does not follow K1
    scale_rows: bool = False

    def __post_init__(self):
        if not _is_count(self.width):
            raise ConfigError(f"width must be an integer > 0, got {self.width!r}")
        if not _is_count(self.height):
            raise ConfigError(f"height must be an integer > 0, got {self.height!r}")
        if not self.ramp:
            raise ConfigError("ramp must contain at least one glyph")
        if not math.isfinite(self.k1) or not math.isfinite(self.k2):
            raise ConfigError(f"k1/k2 must be finite, got {self.k1!r}/{self.k2!r}")

    def fit_k1(self, shape: TorusShape, margin: float = 0.9) -> float:
        """
        K1 that makes a torus of this shape fill `margin` of the screen.

        Horizontal extent is K1 * R / K2 cells from the centre. With
        scale_rows the vertical extent is half that, since rows are
        compressed by 2, so the height can be the limit too.
        """
        half = self.width / 2.0
        if self.scale_rows:
            half = min(half, float(self.height))
        return margin * half * self.k2 / shape.outer_radius

    @classmethod
    def detect_terminal(cls, **overrides) -> 'ScreenConfig':
        """
        Size the screen from the current terminal.

        One row is kept free for the status line.
        """
        cols, rows = shutil.get_terminal_size()
        params = dict(width=max(1, cols), height=max(1, rows - 1))
        params.update(overrides)
        return cls(**params)


@dataclass(frozen=True)
class ControlState:
    """
    Snapshot of every externally adjustable parameter.

    Never mutated; input replaces it wholesale and the frame loop reads
    one snapshot per frame.
    """
    speed1: float = 0.01
    speed2: float = 0.01
    k1: float = 30.0
    k2: float = 5.0
    # Unnormalized: its length scales the overall brightness
    light: Vec3 = field(default_factory=lambda: Vec3(0.0, 1.0, -1.0))
    paused: bool = False
    running: bool = True
