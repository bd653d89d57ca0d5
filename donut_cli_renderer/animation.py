#
# PROJECT: donut-cli-renderer
# MODULE: donut_cli_renderer/animation.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class AnimationState:
    """
    Rotation state of the animated object.

    angle1 rotates around the X axis, angle2 around the Z axis (radians).
    The angles are never wrapped; the trig functions take care of that.
    Each tick adds speed1/speed2 to the respective angle.
    """
    angle1: float = 0.0
    angle2: float = 0.0
    speed1: float = 0.0
    speed2: float = 0.0

    def advance(self) -> 'AnimationState':
        """Return the state one tick later."""
        return replace(self,
                       angle1=self.angle1 + self.speed1,
                       angle2=self.angle2 + self.speed2)

    def with_speeds(self, speed1: float, speed2: float) -> 'AnimationState':
        return replace(self, speed1=speed1, speed2=speed2)
