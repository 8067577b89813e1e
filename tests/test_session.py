import pytest

from rubikview.core.base import QUARTER_TURN
from rubikview.core.config import Config, ControlsConfig
from rubikview.session import InputQueue, PuzzleSession, move_for, split_key_sequence


def test_move_for_directions():
    assert move_for("right").amount == -QUARTER_TURN
    assert move_for("left").amount == QUARTER_TURN
    assert move_for("up").amount == -QUARTER_TURN
    assert move_for("right", inverted=True).amount == QUARTER_TURN
    assert move_for("back", duration=0.25).duration == 0.25


def test_input_queue_is_fifo():
    queue = InputQueue()
    queue.press("r")
    queue.release("r")
    assert len(queue) == 2
    events = queue.drain()
    assert [(e.kind, e.key) for e in events] == [("press", "r"), ("release", "r")]
    assert len(queue) == 0


def test_plain_key_turns_clockwise(session, clock):
    session.press("r")
    assert session.tick(clock())
    assert session.cube.busy
    session.settle(clock)
    assert session.last_move == "right"
    assert session.cube.engine.completed_moves == 1


def test_held_modifier_inverts(session, clock):
    session.play_keys(["r"], clock)
    session.press("shift")
    session.press("r")
    session.tick(clock())
    session.settle(clock)
    assert session.last_move == "right'"
    assert session.cube.is_solved()

    session.release("shift")
    session.tick(clock())
    assert not session.inverted


def test_uppercase_means_modifier(session, clock):
    applied = session.play_keys(["f", "F"], clock)
    assert applied == ["front", "front'"]
    assert session.cube.is_solved()


def test_combined_key_name(session, clock):
    applied = session.play_keys(["shift+u", "u"], clock)
    assert applied == ["up'", "up"]


def test_modifier_alone_does_not_move(session, clock):
    session.press("shift")
    session.release("shift")
    session.tick(clock())
    assert not session.cube.busy
    assert session.cube.engine.completed_moves == 0


def test_one_move_per_tick(session, clock):
    session.press("r")
    session.press("u")
    session.tick(clock())
    session.settle(clock)
    assert session.cube.engine.completed_moves == 1
    assert session.last_move == "right"


def test_keys_dropped_while_busy(session, clock):
    session.press("r")
    session.tick(clock())
    session.press("u")
    session.tick(clock.advance(0.1))
    session.settle(clock)
    assert session.cube.engine.completed_moves == 1


def test_reset_camera_keeps_puzzle(session, clock):
    session.play_keys(["r"], clock)
    signature = session.cube.signature()
    session.camera.elev, session.camera.azim = 80.0, 10.0

    session.press("c")
    assert session.tick(clock())

    assert (session.camera.elev, session.camera.azim) == (25.0, -35.0)
    assert session.camera.resets == 1
    assert session.cube.signature() == signature
    assert not session.cube.busy


def test_unbound_key_is_ignored(session, clock):
    session.press("x")
    session.press(None)
    assert not session.tick(clock())
    assert session.cube.engine.completed_moves == 0


def test_custom_bindings(clock, quiet_logger):
    config = Config(controls=ControlsConfig(right="k"))
    session = PuzzleSession(config, clock=clock, logger=quiet_logger)
    assert session.play_keys(["r", "k"], clock) == ["right"]


def test_settle_uses_simulated_tick(session, clock):
    session.press("u")
    session.tick(clock())
    ticks = session.settle(clock)
    assert ticks == pytest.approx(1.0 / session.config.runner.simulated_tick, abs=1)


@pytest.mark.parametrize("text, expected", [
    ("r u F", ["r", "u", "F"]),
    ("ruF", ["r", "u", "F"]),
    ("r,u", ["r", "u"]),
    ("", []),
])
def test_split_key_sequence(text, expected):
    assert split_key_sequence(text, ["u", "d", "l", "r", "f", "b"]) == expected
