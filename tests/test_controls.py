import io
import threading

import pytest

from donut_cli_renderer.config import ControlState
from donut_cli_renderer.controls import (CommandError, ControlChannel, InputReader,
                                         parse_command)
from donut_cli_renderer.math_utils import Vec3


@pytest.mark.parametrize("line,changes", [
    ("s1 0.5", {"speed1": 0.5}),
    ("s2 -1e-2", {"speed2": -0.01}),
    ("k1 40", {"k1": 40.0}),
    ("  K2   6.5 \n", {"k2": 6.5}),
    ("l 0 1 -1", {"light": Vec3(0, 1, -1)}),
    ("stop", {"paused": True}),
    ("START", {"paused": False}),
    ("quit", {"running": False}),
    ("q", {"running": False}),
    ("0.25", {"speed1": 0.25, "speed2": 0.25}),
    ("3", {"speed1": 3.0, "speed2": 3.0}),
    ("", {}),
    ("   \n", {}),
])
def test_parse_command(line, changes):
    assert parse_command(line) == changes


@pytest.mark.parametrize("line", [
    "s1",
    "s1 fast",
    "s1 1 2",
    "k2 nan",
    "k1 inf",
    "l 0 1",
    "l 0 1 x",
    "l 0 1 -1 2",
    "stop now",
    "spin 2",
    "hello",
    "inf",
])
def test_parse_command_rejects(line):
    with pytest.raises(CommandError):
        parse_command(line)


def test_channel_replaces_snapshot():
    channel = ControlChannel(ControlState(speed1=0.1))
    before = channel.snapshot()
    after = channel.apply(speed1=0.2, paused=True)
    assert before.speed1 == 0.1 and not before.paused
    assert after is channel.snapshot()
    assert after.speed1 == 0.2 and after.paused


def test_channel_apply_nothing_keeps_snapshot():
    channel = ControlChannel()
    before = channel.snapshot()
    assert channel.apply() is before


def test_rejected_light_leaves_state_untouched():
    channel = ControlChannel()
    messages = []
    reader = InputReader(io.StringIO(), channel, report=messages.append)
    before = channel.snapshot()
    assert not reader.handle_line("l 5 5 oops")
    assert channel.snapshot() is before
    assert len(messages) == 1 and "oops" in messages[0]


def test_reader_applies_lines_in_order():
    channel = ControlChannel()
    messages = []
    stream = io.StringIO("s1 0.3\nbogus\nl 1 2 3\nstop\nk1 12\n")
    reader = InputReader(stream, channel, report=messages.append)
    reader.start()
    reader.join(timeout=5)
    assert not reader.is_alive()

    state = channel.snapshot()
    assert state.speed1 == 0.3
    assert state.light == Vec3(1, 2, 3)
    assert state.paused
    assert state.k1 == 12.0
    assert state.running
    assert len(messages) == 1


def test_reader_exit_on_eof():
    channel = ControlChannel()
    reader = InputReader(io.StringIO("start\n"), channel, exit_on_eof=True)
    reader.run()
    assert not channel.snapshot().running


def test_reader_stops_when_event_set():
    channel = ControlChannel()
    stop = threading.Event()
    stop.set()
    reader = InputReader(io.StringIO("s1 9\n"), channel, stop_event=stop)
    reader.run()
    assert channel.snapshot().speed1 == ControlState().speed1


def test_reader_is_daemon():
    assert InputReader(io.StringIO(), ControlChannel()).daemon


def test_on_apply_called_for_accepted_changes_only():
    applied = []
    reader = InputReader(io.StringIO(), ControlChannel(), on_apply=lambda: applied.append(1))
    reader.handle_line("s1 x")
    reader.handle_line("")
    assert applied == []
    reader.handle_line("s1 0.2")
    assert applied == [1]
