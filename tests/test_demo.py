import io
import math

import pytest

from donut_cli_renderer.config import ConfigError, ControlState, ScreenConfig, TorusShape
from donut_cli_renderer.demo import DemoApp
from donut_cli_renderer.math_utils import Vec3
from donut_cli_renderer.terminal import CURSOR_HOME


def coarse_app(**controls):
    shape = TorusShape(tube_radius=1, ring_radius=2, step_theta=math.pi, step_phi=math.pi)
    screen = ScreenConfig(width=10, height=10, k1=10, k2=5)
    params = dict(speed1=0.0, speed2=0.0, k1=10, k2=5, light=Vec3(0, 0, 1))
    params.update(controls)
    return DemoApp(shape, screen, ControlState(**params), out=io.StringIO())


def test_four_sample_frame():
    # Samples (theta, phi) at zero rotation:
    #   (0, 0)   point ( 3, 0, 0)  normal ( 1, 0, 0)
    #   (0, pi)  point (-3, 0, 0)  normal (-1, 0, 0)
    #   (pi, 0)  point ( 1, 0, 0)  normal (-1, 0, 0)
    #   (pi, pi) point (-1, 0, 0)  normal ( 1, 0, 0)
    # Every normal is perpendicular to the light, so in exact arithmetic all
    # four are unlit and the grid is blank. In floating point sin(pi) is
    # about 1.2e-16, which tilts the (pi, pi) normal slightly toward +z: it
    # gets a luminosity of about 1.2e-16, survives culling and lands at
    # ooz = 0.2, col = -2 + 5, row = 0 + 5 as the dimmest glyph.
    app = coarse_app()
    frame = app.tick()
    expected = (
        "          \n" * 5
        + "   .      \n"
        + "          \n" * 4
    )
    assert frame == expected
    lit = [s.luminosity for s in app.renderer.last_samples if s.luminosity > 0]
    assert len(lit) == 1 and lit[0] < 1e-15
    assert len(app.renderer.last_samples) == 4
    assert app.state.angle1 == 0.0 and app.state.angle2 == 0.0


def test_frame_shape():
    app = DemoApp(TorusShape(step_theta=0.3, step_phi=0.1),
                  ScreenConfig(width=30, height=12, k1=15, k2=5),
                  out=io.StringIO())
    lines = app.tick().split("\n")
    assert lines[-1] == ""
    assert len(lines[:-1]) == 12
    assert all(len(line) == 30 for line in lines[:-1])
    assert any(line.strip() for line in lines)


def test_tick_advances_angles():
    app = coarse_app(speed1=0.1, speed2=-0.2)
    app.tick()
    app.tick()
    assert app.state.angle1 == pytest.approx(0.2)
    assert app.state.angle2 == pytest.approx(-0.4)


def test_pause_freezes_samples():
    app = coarse_app(speed1=0.1, speed2=0.05)
    app.tick()
    app.channel.apply(paused=True)
    app.tick()
    first = app.renderer.last_samples
    angles = (app.state.angle1, app.state.angle2)
    app.tick()
    assert app.renderer.last_samples == first
    assert (app.state.angle1, app.state.angle2) == angles

    app.channel.apply(paused=False)
    app.tick()
    assert app.state.angle1 > angles[0]
    assert app.renderer.last_samples != first


def test_speed_change_applies_from_next_frame():
    app = coarse_app(speed1=0.1)
    app.tick()
    app.channel.apply(speed1=1.0)
    app.tick()
    assert app.state.angle1 == pytest.approx(1.1)


def test_invalid_interval():
    with pytest.raises(ConfigError):
        DemoApp(interval=0)
    with pytest.raises(ConfigError):
        DemoApp(max_frames=-1)


def test_run_writes_frames_and_stops():
    out = io.StringIO()
    app = DemoApp(TorusShape(step_theta=0.5, step_phi=0.5),
                  ScreenConfig(width=20, height=8, k1=10, k2=5),
                  interval=0.001, max_frames=3, out=out)
    app.run()
    assert app.frame_count == 3
    assert out.getvalue().count(CURSOR_HOME) == 3
    assert app.stop_event.is_set()


def test_run_reports_bad_input_and_quits():
    out = io.StringIO()
    app = DemoApp(TorusShape(step_theta=0.5, step_phi=0.5),
                  ScreenConfig(width=120, height=8, k1=10, k2=5),
                  interval=0.001, out=out,
                  input_stream=io.StringIO("k1 x\n"), exit_on_eof=True)
    app.run()
    assert "Invalid input" in app.message
    assert not app.channel.snapshot().running


def test_status_line_fits_width():
    app = coarse_app()
    app.report("Invalid input: something long enough to be cut off")
    status = app.status_line(app.channel.snapshot())
    assert len(status) <= 10


def test_accepted_command_clears_error_message():
    app = DemoApp(TorusShape(step_theta=0.5, step_phi=0.5),
                  ScreenConfig(width=120, height=8, k1=10, k2=5),
                  out=io.StringIO(), input_stream=io.StringIO())
    app.reader.handle_line("k2 five")
    assert "Invalid input" in app.status_line(app.channel.snapshot())
    app.reader.handle_line("k2 6")
    assert app.message == ""
    assert "Invalid input" not in app.status_line(app.channel.snapshot())


def test_blank_line_keeps_error_message():
    app = DemoApp(out=io.StringIO(), input_stream=io.StringIO())
    app.reader.handle_line("s1 ?")
    app.reader.handle_line("\n")
    assert "Invalid input" in app.message
