"""
stepper.py — Step-Log Playback Controller
==========================================
Walks a finished StepLog on its own clock.  The algorithm already ran;
playback only moves a cursor and hands `log[cursor]` to `on_frame`, so
any position can be shown at any time (scrubbing is always safe).

State machine (shared RunStateMachine):
    IDLE (no log)  →  start(log)  →  RUNNING (cursor 0)
    RUNNING  →  pause()  →  PAUSED  →  resume()  →  RUNNING
    RUNNING  →  tick past the last snapshot  →  COMPLETED
    any      →  reset()  →  IDLE (log dropped, cursor -1)
    COMPLETED → restart() → IDLE → RUNNING from snapshot 0

Clock:
  Inside a running asyncio loop, start()/resume() arm a timer task that
  calls tick() every `speed_ms`.  With no running loop the controller
  is in manual-tick mode: nothing advances until the caller calls
  tick() itself (tests, a Qt / Tk timer, a server polling endpoint).
"""

import asyncio
import logging
from typing import Callable, List, Optional, Sequence, Union

from algorithms.step import Snapshot, StepLog
from engine.config import EngineConfig
from engine.run_state import RunState, RunStateMachine


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Speed presets (milliseconds per step)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   1500,   # teaching mode
    "medium": 1000,
    "fast":   400,
    "turbo":  100,    # demo mode
}


def _current_task() -> Optional[asyncio.Task]:
    try:
        return asyncio.current_task()
    except RuntimeError:
        return None


# ---------------------------------------------------------------------------
# Playback
# ---------------------------------------------------------------------------
class Playback:
    """
    Attributes:
        log      : The StepLog being played (None while IDLE).
        cursor   : Index of the snapshot on screen, -1 when IDLE.
        speed_ms : Milliseconds between ticks.
        machine  : RunStateMachine the UI branches on.
        on_frame : Optional callback(Snapshot) fired every time the cursor moves.
    """

    def __init__(
        self,
        on_frame: Optional[Callable[[Snapshot], None]] = None,
        config: Optional[EngineConfig] = None,
    ):
        self.config:   EngineConfig      = config or EngineConfig()
        self.log:      Optional[StepLog] = None
        self.cursor:   int               = -1
        self.speed_ms: float             = max(self.config.min_playback_ms, self.config.playback_speed_ms)
        self.machine:  RunStateMachine   = RunStateMachine()
        self.on_frame: Optional[Callable[[Snapshot], None]] = on_frame
        self._timer:   Optional[asyncio.Task] = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, log: Union[StepLog, Sequence[Snapshot]], speed_ms: Optional[float] = None) -> None:
        """Load `log`, show snapshot 0 and start playing."""
        if not isinstance(log, StepLog):
            log = StepLog(steps=list(log))
        if len(log) == 0:
            raise ValueError("cannot play an empty step log")

        self._cancel_timer()
        self._to_idle()
        self.log = log
        if speed_ms is not None:
            self.speed_ms = self._clamp(speed_ms)
        self.machine.start()
        logger.info("playback started: %d snapshot(s) at %g ms", len(log), self.speed_ms)
        self._goto(0)
        self._arm_timer()

    def reset(self) -> None:
        """Back to IDLE — caller must call start() again."""
        self._cancel_timer()
        self.log    = None
        self.cursor = -1
        self._to_idle()

    def restart(self) -> None:
        """Replay the current log from snapshot 0."""
        if self.log is None:
            return
        log = self.log
        self.reset()
        self.start(log)

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def pause(self) -> bool:
        if not self.machine.pause():
            return False
        self._cancel_timer()
        return True

    def resume(self) -> bool:
        if not self.machine.resume():
            return False
        self._arm_timer()
        return True

    def toggle_play(self) -> None:
        state = self.machine.state
        if state is RunState.RUNNING:
            self.pause()
        elif state is RunState.PAUSED:
            self.resume()
        elif state is RunState.COMPLETED:
            self.restart()

    # ------------------------------------------------------------------
    # Tick  (called by the timer, or by hand in manual mode)
    # ------------------------------------------------------------------
    def tick(self) -> bool:
        """Advance one snapshot if RUNNING.  Returns True if the cursor moved."""
        if self.machine.state is not RunState.RUNNING:
            return False
        if self.cursor < len(self.log) - 1:
            self._goto(self.cursor + 1)
            return True
        self._cancel_timer()
        self.machine.finish()
        logger.info("playback completed at snapshot %d", self.cursor)
        return False

    # ------------------------------------------------------------------
    # Navigation (pure cursor moves; state is left alone)
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step forward.  Returns False if already at end."""
        if self.log is None or self.cursor >= len(self.log) - 1:
            return False
        self._goto(self.cursor + 1)
        return True

    def prev_step(self) -> bool:
        """Rewind one step.  Returns False if already at start."""
        if self.log is None or self.cursor <= 0:
            return False
        self._goto(self.cursor - 1)
        return True

    def goto_step(self, idx: int) -> bool:
        """Jump to an arbitrary snapshot index."""
        if self.log is None or not 0 <= idx < len(self.log):
            return False
        self._goto(idx)
        return True

    def rewind(self) -> bool:
        """Seek back to snapshot 0."""
        return self.goto_step(0)

    def jump_to_end(self) -> None:
        """Show the last snapshot and finish the run."""
        if self.log is None:
            return
        self._cancel_timer()
        self._goto(len(self.log) - 1)
        if self.machine.state is RunState.PAUSED:
            self.machine.resume()
        self.machine.finish()

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, speed: Union[float, str]) -> None:
        """Milliseconds per step, or a SPEED_PRESETS name.  Takes effect from the next tick."""
        if isinstance(speed, str):
            if speed not in SPEED_PRESETS:
                raise ValueError(f"Unknown speed preset: {speed}")
            speed = SPEED_PRESETS[speed]
        self.speed_ms = self._clamp(speed)
        if self.machine.state is RunState.RUNNING:
            self._arm_timer()

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def state(self) -> RunState:
        return self.machine.state

    @property
    def current_step(self) -> Optional[Snapshot]:
        if self.log is not None and 0 <= self.cursor < len(self.log):
            return self.log[self.cursor]
        return None

    @property
    def steps(self) -> List[Snapshot]:
        return self.log.steps if self.log is not None else []

    @property
    def is_finished(self) -> bool:
        return self.machine.state is RunState.COMPLETED

    @property
    def is_playing(self) -> bool:
        return self.machine.state is RunState.RUNNING

    @property
    def manual(self) -> bool:
        """True when nothing is ticking on its own."""
        return self._timer is None

    async def wait(self) -> None:
        """Wait until the timer stops (end of log, pause or reset)."""
        while self._timer is not None and not self._timer.done():
            await asyncio.wait({self._timer})

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _clamp(self, speed_ms: float) -> float:
        return max(self.config.min_playback_ms, float(speed_ms))

    def _to_idle(self) -> None:
        if self.machine.state is RunState.IDLE:
            return
        if not self.machine.restart():
            self.machine.stop()

    def _arm_timer(self) -> None:
        self._cancel_timer()
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return  # manual tick mode
        self._timer = loop.create_task(self._run_timer())

    def _cancel_timer(self) -> None:
        timer, self._timer = self._timer, None
        if timer is not None and not timer.done() and timer is not _current_task():
            timer.cancel()

    async def _run_timer(self) -> None:
        me = asyncio.current_task()
        while self._timer is me and self.machine.state is RunState.RUNNING:
            await asyncio.sleep(self.speed_ms / 1000.0)
            # re-armed from inside a callback: the newer timer owns the clock
            if self._timer is not me or not self.tick():
                break

    def _goto(self, idx: int) -> None:
        self.cursor = idx
        self._notify(self.log[idx])

    def _notify(self, step: Snapshot) -> None:
        if self.on_frame is not None:
            self.on_frame(step)
