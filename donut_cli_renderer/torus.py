#
# PROJECT: donut-cli-renderer
# MODULE: donut_cli_renderer/torus.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
from typing import List

from .animation import AnimationState
from .config import TorusShape
from .math_utils import Vec3, Mat3, animation_rotation
from .scene import Sample

TAU = 2.0 * math.pi


def sweep_angles(step: float) -> List[float]:
    """
    Angles 0, step, 2*step, ... strictly below 2*pi.

    Angles are computed as i * step rather than accumulated, so a step that
    divides 2*pi exactly does not pick up the wrap point through rounding.
    """
    angles = []
    i = 0
    while True:
        a = i * step
        if a >= TAU:
            break
        angles.append(a)
        i += 1
    return angles


class Torus:
    """
    Torus surface sampler.

    The tube circle of radius r1 sits in the XY plane, centred r2 away from
    the Y axis:

        point  = (r2 + r1 cos(theta), r1 sin(theta), 0)
        normal = (cos(theta), sin(theta), 0)

    Sweeping it by phi around Y gives the ring. The animation then rotates
    by angle1 around X and angle2 around Z. Point and normal go through the
    same rotation Rz(angle2) @ Rx(angle1) @ Ry(phi).
    """

    def __init__(self, shape: TorusShape):
        self.shape = shape

    def sample_count(self) -> int:
        return (len(sweep_angles(self.shape.step_theta))
                * len(sweep_angles(self.shape.step_phi)))

    def _tube_circle(self):
        r1 = self.shape.tube_radius
        r2 = self.shape.ring_radius
        circle = []
        for theta in sweep_angles(self.shape.step_theta):
            c, s = math.cos(theta), math.sin(theta)
            circle.append((Vec3(r2 + r1 * c, r1 * s, 0.0), Vec3(c, s, 0.0)))
        return circle

    def generate_samples(self, state: AnimationState) -> List[Sample]:
        """Surface samples for this state, theta-major, no luminosity yet."""
        spin = animation_rotation(state.angle1, state.angle2)
        sweeps = [spin @ Mat3.rotation_y(phi)
                  for phi in sweep_angles(self.shape.step_phi)]

        samples = []
        for point, normal in self._tube_circle():
            for rot in sweeps:
                samples.append(Sample(rot.mul_vec3(point), rot.mul_vec3(normal)))
        return samples

    def advance(self, state: AnimationState) -> AnimationState:
        return state.advance()
