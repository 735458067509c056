"""
Frame loop driving the simulation

The loop never blocks. Each frame asks a FrameScheduler to call it back at
the next presentation opportunity; the host decides when that is (the arcade
window pumps its QueueScheduler once per on_update, tests pump it by hand).
"""

from __future__ import annotations

import logging
import time
from collections import deque
from enum import Enum
from typing import Callable, Deque, Optional, Protocol

from .difficulty import get_difficulty
from .entities import RunState
from .input import InputState
from .simulation import Simulation, StepEvents

logger = logging.getLogger(__name__)

FrameCallback = Callable[[], None]


class FrameScheduler(Protocol):
    def request_frame(self, callback: FrameCallback) -> None: ...


class InputSource(Protocol):
    def snapshot(self) -> InputState: ...


class RenderSink(Protocol):
    def render(self, state: RunState) -> None: ...


class Hud(Protocol):
    def score_changed(self, score: int) -> None: ...

    def game_over(self, score: int) -> None: ...


class QueueScheduler:
    """FIFO of pending frame callbacks"""

    def __init__(self):
        self._pending: Deque[FrameCallback] = deque()

    def request_frame(self, callback: FrameCallback) -> None:
        self._pending.append(callback)

    def run_pending(self) -> int:
        """
        Run the callbacks queued before this call.

        Callbacks requested while pumping wait for the next pump, so one
        pump is one presentation opportunity. Returns how many ran.
        """
        count = len(self._pending)
        for _ in range(count):
            self._pending.popleft()()
        return count

    def __len__(self) -> int:
        return len(self._pending)


class LoopState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    TERMINATED = "terminated"


class FrameLoop:
    """
    Runs one simulation step and one render per scheduled frame.

    IDLE -> RUNNING on start_run, RUNNING -> TERMINATED when the ship is hit
    or stop_run is called. Each run gets a generation number; frames
    scheduled for an older run are ignored, so restarting never leaves two
    chains of frames advancing the same state.
    """

    def __init__(
        self,
        simulation: Simulation,
        scheduler: FrameScheduler,
        input_source: InputSource,
        render_sink: Optional[RenderSink] = None,
        hud: Optional[Hud] = None,
        clock: Callable[[], float] = time.perf_counter,
        max_dt: Optional[float] = None,
    ):
        self.simulation = simulation
        self.scheduler = scheduler
        self.input_source = input_source
        self.render_sink = render_sink
        self.hud = hud
        self.clock = clock
        self.max_dt = max_dt if max_dt is not None else simulation.config.max_dt

        self.state = LoopState.IDLE
        self.run: Optional[RunState] = None
        self.frames = 0
        self._generation = 0
        self._last_time = 0.0

    # ----------------------------
    # Lifecycle
    # ----------------------------

    def start_run(self, difficulty: str) -> RunState:
        get_difficulty(difficulty)
        if self.state is LoopState.RUNNING:
            raise RuntimeError("A run is already in progress; use restart_run")

        self.run = self.simulation.new_run(difficulty)
        self._generation += 1
        self._last_time = self.clock()
        self.frames = 0
        self.state = LoopState.RUNNING
        logger.info("Run %d started on %s", self._generation, difficulty)

        if self.hud is not None:
            self.hud.score_changed(self.run.score)
        self._schedule()
        return self.run

    def stop_run(self):
        """Abandon the current run; pending frames become no-ops"""
        if self.state is not LoopState.RUNNING:
            return
        self.state = LoopState.TERMINATED
        self.run.running = False
        logger.info("Run %d stopped after %d frames", self._generation, self.frames)

    def restart_run(self, difficulty: str) -> RunState:
        get_difficulty(difficulty)
        self.stop_run()
        return self.start_run(difficulty)

    def reset(self):
        """Stop any run and go back to IDLE, dropping the run state"""
        self.stop_run()
        self.state = LoopState.IDLE
        self.run = None

    # ----------------------------
    # Frames
    # ----------------------------

    def _schedule(self):
        generation = self._generation
        self.scheduler.request_frame(lambda: self._frame(generation))

    def _frame(self, generation: int):
        if generation != self._generation or self.state is not LoopState.RUNNING:
            return
        run = self.run

        now = self.clock()
        dt = min(self.max_dt, max(0.0, now - self._last_time))
        self._last_time = now

        events = self.simulation.step(run, self.input_source.snapshot(), dt, now * 1000.0)
        self.frames += 1

        if self.render_sink is not None:
            self.render_sink.render(run)
        self._notify(events, run)

        if run.running:
            self._schedule()
        else:
            self.state = LoopState.TERMINATED
            logger.info("Run %d ended after %d frames, score %d", generation, self.frames, run.score)

    def _notify(self, events: StepEvents, run: RunState):
        if self.hud is None:
            return
        if events.score_changed:
            self.hud.score_changed(run.score)
        if events.game_over:
            self.hud.game_over(run.score)
