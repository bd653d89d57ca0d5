#
# PROJECT: donut-cli-renderer
# MODULE: donut_cli_renderer/controls.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import math
import threading
from dataclasses import replace

from .config import ControlState
from .math_utils import Vec3

LOGGER = logging.getLogger(__name__)


class CommandError(ValueError):
    """A command line that could not be parsed."""


# command word -> ControlState field it sets
_SCALAR_COMMANDS = {
    's1': 'speed1',
    's2': 'speed2',
    'k1': 'k1',
    'k2': 'k2',
}


def _number(token):
    try:
        value = float(token)
    except ValueError:
        raise CommandError(f"not a number: {token!r}") from None
    if not math.isfinite(value):
        raise CommandError(f"not a finite number: {token!r}")
    return value


def _arity(words, expected):
    if len(words) - 1 != expected:
        raise CommandError(
            f"{words[0]!r} takes {expected} argument{'s' if expected != 1 else ''}, "
            f"got {len(words) - 1}")


def parse_command(line: str) -> dict:
    """
    Parse one input line into ControlState field changes.

    Commands:
        <float>          set both rotation speeds
        s1 / s2 <float>  set one rotation speed
        k1 / k2 <float>  set a projection constant
        l <x> <y> <z>    set the light direction
        stop / start     pause / resume
        quit / q         stop rendering

    A blank line returns an empty dict. Every token is parsed before any
    change is returned, so a bad token never leaves a partial update.
    """
    words = line.split()
    if not words:
        return {}

    cmd = words[0].lower()

    if cmd in _SCALAR_COMMANDS:
        _arity(words, 1)
        return {_SCALAR_COMMANDS[cmd]: _number(words[1])}
    if cmd == 'l':
        _arity(words, 3)
        x, y, z = (_number(t) for t in words[1:])
        return {'light': Vec3(x, y, z)}
    if cmd == 'stop':
        _arity(words, 0)
        return {'paused': True}
    if cmd == 'start':
        _arity(words, 0)
        return {'paused': False}
    if cmd in ('quit', 'q'):
        _arity(words, 0)
        return {'running': False}

    if len(words) == 1:
        try:
            speed = _number(words[0])
        except CommandError:
            raise CommandError(f"unknown command: {words[0]!r}") from None
        return {'speed1': speed, 'speed2': speed}

    raise CommandError(f"unknown command: {words[0]!r}")


class ControlChannel:
    """
    Single slot holding the latest ControlState.

    Writers replace the whole snapshot under the lock; the frame loop takes
    one snapshot per frame and never sees a half-applied command.
    """

    def __init__(self, initial: ControlState = None):
        self._lock = threading.Lock()
        self._state = initial if initial is not None else ControlState()

    def snapshot(self) -> ControlState:
        with self._lock:
            return self._state

    def apply(self, **changes) -> ControlState:
        with self._lock:
            if changes:
                self._state = replace(self._state, **changes)
            return self._state


class InputReader(threading.Thread):
    """
    Input activity: reads command lines and publishes them to a channel.

    Runs as a daemon thread since a blocking readline() cannot be
    interrupted; the render loop never waits on it. Parse errors go to
    `report` and leave the channel untouched; every accepted command that
    changes something calls `on_apply`.
    """

    def __init__(self, stream, channel: ControlChannel, report=None,
                 stop_event: threading.Event = None, exit_on_eof=False,
                 on_apply=None):
        super().__init__(name="input-reader", daemon=True)
        self.stream = stream
        self.channel = channel
        self.report = report if report is not None else (lambda msg: None)
        self.stop_event = stop_event if stop_event is not None else threading.Event()
        self.exit_on_eof = exit_on_eof
        self.on_apply = on_apply if on_apply is not None else (lambda: None)

    def handle_line(self, line: str) -> bool:
        """Apply one line. Returns False if it was rejected."""
        try:
            changes = parse_command(line)
        except CommandError as e:
            LOGGER.warning("Rejected input %r: %s", line.strip(), e)
            self.report(f"Invalid input: {e}")
            return False
        if changes:
            self.channel.apply(**changes)
            LOGGER.info("Applied %s", changes)
            self.on_apply()
        return True

    def run(self):
        for line in iter(self.stream.readline, ''):
            if self.stop_event.is_set():
                return
            self.handle_line(line)
        LOGGER.info("Input stream closed")
        if self.exit_on_eof:
            self.channel.apply(running=False)
