"""
Input dispatch for the puzzle.

Key events are queued as they arrive and drained once per tick. Draining
updates the modifier state, resets the camera, and issues at most one move
per tick, and only while the engine is idle. The same session drives both
the interactive window and the headless command line.
"""

import time
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Deque, Dict, Iterable, List, Optional, Tuple

from rubikview.core.base import MoveOutcome, MoveRequest, QUARTER_TURN
from rubikview.core.config import Config
from rubikview.puzzle.cube import RubiksCube
from rubikview.utils.display import LiveLogger, get_logger


MOVE_VECTORS: Dict[str, Tuple[int, int, int]] = {
    "up": (0, 1, 0),
    "down": (0, -1, 0),
    "left": (-1, 0, 0),
    "right": (1, 0, 0),
    "front": (0, 0, 1),
    "back": (0, 0, -1),
}


def move_for(name: str, inverted: bool = False, duration: float = 1.0) -> MoveRequest:
    """
    The move request for one of the six named moves.

    A plain move turns its face clockwise as seen from outside that face,
    i.e. a negative right-hand rotation about the face's outward axis.
    The inverting modifier turns it the other way.
    """
    vector = MOVE_VECTORS[name]
    amount = -sum(vector) * QUARTER_TURN
    if inverted:
        amount = -amount
    return MoveRequest(vector=vector, amount=amount, duration=duration)


@dataclass
class KeyEvent:
    kind: str  # "press" or "release"
    key: str


class InputQueue:
    """FIFO of key events waiting for the next tick."""

    def __init__(self):
        self._events: Deque[KeyEvent] = deque()

    def press(self, key: str):
        self._events.append(KeyEvent("press", key))

    def release(self, key: str):
        self._events.append(KeyEvent("release", key))

    def drain(self) -> List[KeyEvent]:
        events = list(self._events)
        self._events.clear()
        return events

    def __len__(self) -> int:
        return len(self._events)


@dataclass
class Camera:
    """Viewing angles of the 3D axes."""
    elev: float
    azim: float
    initial: Tuple[float, float] = field(init=False)
    resets: int = field(default=0, init=False)

    def __post_init__(self):
        self.initial = (self.elev, self.azim)

    def reset(self):
        self.elev, self.azim = self.initial
        self.resets += 1


class SimulatedClock:
    """A clock that only moves when told to."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, dt: float) -> float:
        self.now += dt
        return self.now


class PuzzleSession:
    """Key bindings, input queue, camera and cube for one user session."""

    def __init__(self, config: Optional[Config] = None,
                 clock: Callable[[], float] = time.monotonic,
                 logger: Optional[LiveLogger] = None):
        self.config = config or Config()
        self.clock = clock
        self.logger = logger or get_logger()
        self.cube = RubiksCube.from_config(self.config.engine, clock=clock, logger=self.logger)
        self.queue = InputQueue()
        self.camera = Camera(self.config.view.elev, self.config.view.azim)
        self.inverted = False
        self.last_move: Optional[str] = None

        controls = self.config.controls
        self.move_keys = controls.move_keys()
        self.modifier_key = controls.invert_modifier
        self.reset_key = controls.reset_view

    def press(self, key: Optional[str]):
        if key:
            self.queue.press(key)

    def release(self, key: Optional[str]):
        if key:
            self.queue.release(key)

    def _parse_key(self, raw: str) -> Tuple[str, bool]:
        """Split a raw key name into (base key, modifier held for this key)."""
        parts = raw.split("+")
        base = parts[-1]
        held = self.modifier_key in (p.lower() for p in parts[:-1])
        # shift+r arrives as "R"
        if len(base) == 1 and base.isalpha() and base.isupper():
            held = held or self.modifier_key == "shift"
        return base.lower(), held

    def tick(self, now: Optional[float] = None) -> bool:
        """
        Drain pending input and advance the engine.

        Returns:
            True if anything visible changed and the view should redraw.
        """
        changed = False
        move_issued = False

        for event in self.queue.drain():
            key, held = self._parse_key(event.key)

            if key == self.modifier_key:
                self.inverted = event.kind == "press"
                continue
            if event.kind != "press":
                continue

            if key == self.reset_key:
                self.camera.reset()
                changed = True
            elif key in self.move_keys:
                if move_issued or self.cube.busy:
                    continue
                name = self.move_keys[key]
                inverted = self.inverted or held
                move = move_for(name, inverted, self.config.engine.quarter_turn_duration)
                outcome = self.cube.request_move(move)
                if outcome is MoveOutcome.ACCEPTED:
                    move_issued = True
                    changed = True
                    self.last_move = name + ("'" if inverted else "")
            else:
                self.logger.log_info(f"Unbound key '{event.key}'")

        if self.cube.busy:
            changed = True
        if self.cube.tick(now):
            changed = True
        return changed

    def settle(self, clock: SimulatedClock, step: Optional[float] = None, max_ticks: int = 100000) -> int:
        """Advance a simulated clock, ticking, until the engine is idle."""
        step = step or self.config.runner.simulated_tick
        ticks = 0
        while self.cube.busy:
            if ticks >= max_ticks:
                raise RuntimeError("Turn did not complete")
            self.tick(clock.advance(step))
            ticks += 1
        return ticks

    def play_keys(self, keys: Iterable[str], clock: SimulatedClock) -> List[str]:
        """
        Feed key presses one at a time, letting each turn finish.

        An uppercase letter is pressed with the modifier held.

        Returns:
            Names of the moves that were applied.
        """
        applied = []
        for key in keys:
            before = self.cube.engine.completed_moves
            self.press(key)
            self.release(key)
            self.tick(clock())
            self.settle(clock)
            if self.cube.engine.completed_moves > before:
                applied.append(self.last_move)
        return applied


def split_key_sequence(text: str, bound_keys: Iterable[str]) -> List[str]:
    """'r u F' or 'ruF' -> ['r', 'u', 'F']; multi-letter bound names are kept whole."""
    bound = {k.lower() for k in bound_keys}
    keys = []
    for token in text.replace(",", " ").split():
        if token.lower() in bound:
            keys.append(token)
        else:
            keys.extend(token)
    return keys
