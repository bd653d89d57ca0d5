#
# PROJECT: donut-cli-renderer
# MODULE: donut_cli_renderer/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import sys
import threading
import time
from dataclasses import replace

from .animation import AnimationState
from .config import ConfigError, ControlState, ScreenConfig, TorusShape
from .controls import ControlChannel, InputReader
from .math_utils import Vec3
from .renderer import Renderer
from .terminal import TerminalController
from .torus import Torus

LOGGER = logging.getLogger(__name__)


class DemoApp:
    """
    Render loop for the spinning torus.

    Every `interval` seconds the loop takes one ControlState snapshot,
    advances the animation with its speeds (unless paused), renders and
    writes the frame. Input is read on a separate InputReader thread that
    only ever touches the ControlChannel.

    While paused the same angles are rendered again, so the frame stays on
    screen and still reacts to K1/K2/light changes.
    """

    def __init__(self, shape: TorusShape = None, screen: ScreenConfig = None,
                 controls: ControlState = None, interval: float = 0.05,
                 max_frames: int = 0, input_stream=None, out=None,
                 exit_on_eof: bool = False):
        if not interval > 0:
            raise ConfigError(f"interval must be > 0 seconds, got {interval!r}")
        if max_frames < 0:
            raise ConfigError(f"max_frames must be >= 0, got {max_frames!r}")

        self.shape = shape if shape is not None else TorusShape()
        self.screen = screen if screen is not None else ScreenConfig()
        if controls is None:
            controls = ControlState(k1=self.screen.k1, k2=self.screen.k2)
        self.channel = ControlChannel(controls)
        self.interval = interval
        self.max_frames = max_frames
        self.out = out if out is not None else sys.stdout

        self.torus = Torus(self.shape)
        self.renderer = Renderer(self.torus, self.screen)
        self.state = AnimationState(speed1=controls.speed1, speed2=controls.speed2)

        self.stop_event = threading.Event()
        self.message = ""
        self.reader = None
        if input_stream is not None:
            self.reader = InputReader(input_stream, self.channel,
                                      report=self.report,
                                      stop_event=self.stop_event,
                                      exit_on_eof=exit_on_eof,
                                      on_apply=self.clear_message)

        self.frame_count = 0
        self.frame_ms = 0.0

    def report(self, message: str):
        """Show a message on the status line (called from the input thread)."""
        self.message = message

    def clear_message(self):
        """Drop the status message once a command has been accepted."""
        self.message = ""

    def stop(self):
        self.stop_event.set()

    # ────────────────────────────────────────────────────────────────────
    # One frame
    # ────────────────────────────────────────────────────────────────────
    def tick(self, controls: ControlState = None) -> str:
        if controls is None:
            controls = self.channel.snapshot()
        if not controls.paused:
            state = self.state.with_speeds(controls.speed1, controls.speed2)
            self.state = self.torus.advance(state)
        self.frame_count += 1
        return self.renderer.render(self.state, controls)

    def status_line(self, controls: ControlState) -> str:
        light = controls.light
        hdr = (f" A1:{self.state.angle1:.2f} A2:{self.state.angle2:.2f}"
               f" | S1:{controls.speed1:g} S2:{controls.speed2:g}"
               f" | K1:{controls.k1:g} K2:{controls.k2:g}"
               f" | L:({light.x:g},{light.y:g},{light.z:g})"
               f" | {'PAUSED' if controls.paused else 'RUN'}"
               f" | {self.frame_ms:.1f}ms")
        if self.message:
            hdr += f" | {self.message}"
        return hdr[:self.screen.width]

    # ────────────────────────────────────────────────────────────────────
    # Main loop
    # ────────────────────────────────────────────────────────────────────
    def run(self):
        LOGGER.info("Rendering %s on %dx%d every %.3fs",
                    self.shape, self.screen.width, self.screen.height, self.interval)
        if self.reader is not None:
            self.reader.start()

        with TerminalController(self.out) as term:
            try:
                while not self.stop_event.is_set():
                    start_time = time.monotonic()

                    controls = self.channel.snapshot()
                    if not controls.running:
                        break

                    frame = self.tick(controls)
                    self.frame_ms = (time.monotonic() - start_time) * 1000
                    term.present(frame, self.status_line(controls))

                    if self.max_frames and self.frame_count >= self.max_frames:
                        break

                    elapsed = time.monotonic() - start_time
                    self.stop_event.wait(max(0.0, self.interval - elapsed))
            except KeyboardInterrupt:
                pass
            finally:
                self.stop_event.set()

        LOGGER.info("Stopped after %d frames", self.frame_count)


def main(args):
    """Build a DemoApp from parsed command-line arguments and run it."""
    shape = TorusShape(tube_radius=args.r1, ring_radius=args.r2,
                       step_theta=args.step_theta, step_phi=args.step_phi)

    overrides = dict(k2=args.k2, cull_backfaces=not args.keep_backfaces,
                     scale_rows=args.scale_rows)
    if args.ramp:
        overrides['ramp'] = args.ramp
    if args.width:
        overrides['width'] = args.width
    if args.height:
        overrides['height'] = args.height
    if args.k1 is not None:
        overrides['k1'] = args.k1
    screen = ScreenConfig.detect_terminal(**overrides)
    if args.k1 is None:
        screen = replace(screen, k1=screen.fit_k1(shape))

    controls = ControlState(speed1=args.speed1, speed2=args.speed2,
                            k1=screen.k1, k2=screen.k2,
                            light=Vec3(*args.light),
                            paused=args.paused)

    app = DemoApp(shape, screen, controls,
                  interval=args.interval,
                  max_frames=args.frames,
                  input_stream=sys.stdin,
                  exit_on_eof=args.exit_on_eof)
    app.run()
