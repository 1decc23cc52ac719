"""
session.py — Live Session Controller
=====================================
What a UI holds for one live visualizer: one CancellationTokens pair,
one RunStateMachine, at most one running task.

    session = LiveSession(on_frame=render)
    await session.start("quick_sort", [5, 3, 8, 1], delay_ms=200)
    session.pause(); session.resume()
    completed = await session.wait()

Starting a new run while one is in flight is serialised here:
request stop → await the old task → reset tokens → start.  The old run
therefore never renders into the new one, and a stale stop flag can
never no-op the new run.

Unknown keys and declared-but-unimplemented algorithms leave the
session in UNAVAILABLE instead of raising.
"""

import asyncio
import inspect
import logging
from typing import Any, Callable, List, Optional

from algorithms import LIVE
from algorithms.frame import Frame
from engine.catalog import UnavailableAlgorithm, build_generator, resolve
from engine.config import EngineConfig
from engine.live import run_live
from engine.run_state import RunState, RunStateMachine
from engine.tokens import CancellationTokens


logger = logging.getLogger(__name__)


class LiveSession:
    """
    Attributes:
        tokens   : The CancellationTokens handed to every run of this session.
        machine  : RunStateMachine the UI branches on.
        frames   : Frames rendered by the current run, in order.
        delay_ms : Nominal delay per checkpoint; changes apply from the next frame.
        result   : True / False once the current run has ended, else None.
    """

    def __init__(self, on_frame: Optional[Callable[[Frame], Any]] = None, config: Optional[EngineConfig] = None):
        self.config:   EngineConfig       = config or EngineConfig()
        self.tokens:   CancellationTokens = CancellationTokens()
        self.machine:  RunStateMachine    = RunStateMachine()
        self.on_frame                      = on_frame
        self.delay_ms: float              = self.config.default_delay_ms
        self.frames:   List[Frame]        = []
        self.result:   Optional[bool]     = None
        self.key:      Optional[str]      = None
        self._task:    Optional[asyncio.Task] = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    async def start(self, key: str, payload: Any, delay_ms: Optional[float] = None, **params) -> RunState:
        await self._halt()
        self._to_idle()
        self.tokens.reset()
        self.frames = []
        self.result = None
        self.key = key

        try:
            info = resolve(key, mode=LIVE)
        except UnavailableAlgorithm as e:
            logger.info("algorithm unavailable: %s", e)
            self.machine.mark_unavailable()
            return self.state

        frames = build_generator(info, payload, **params)
        if delay_ms is not None:
            self.set_delay(delay_ms)

        self.machine.start()
        logger.info("live run started: %s (delay %g ms)", key, self.delay_ms)
        self._task = asyncio.ensure_future(self._drive(frames))
        return self.state

    async def restart(self) -> None:
        """Completed / Unavailable → Idle with fresh tokens, ready for start()."""
        await self._halt()
        if not self.machine.restart():
            self.machine.stop()
        self.tokens.reset()
        self.frames = []
        self.result = None

    async def wait(self) -> Optional[bool]:
        """Wait for the current run to end; its result (None if nothing ran)."""
        if self._task is not None:
            await self._task
        return self.result

    # ------------------------------------------------------------------
    # Controls
    # ------------------------------------------------------------------
    def pause(self) -> bool:
        if not self.machine.pause():
            return False
        self.tokens.request_pause()
        return True

    def resume(self) -> bool:
        if not self.machine.resume():
            return False
        self.tokens.clear_pause()
        return True

    def stop(self) -> bool:
        """Request stop.  Safe to call any number of times."""
        self.tokens.request_stop()
        stopped = self.machine.is_active and self.machine.stop()
        if stopped:
            logger.info("live run stopped: %s", self.key)
        return stopped

    def set_delay(self, delay_ms: float) -> None:
        if delay_ms < 0:
            raise ValueError("delay_ms must be >= 0")
        self.delay_ms = float(delay_ms)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def state(self) -> RunState:
        return self.machine.state

    @property
    def last_frame(self) -> Optional[Frame]:
        return self.frames[-1] if self.frames else None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    async def _drive(self, frames) -> None:
        try:
            completed = await run_live(frames, self._render, lambda: self.delay_ms, self.tokens, self.config)
        except Exception:
            self.machine.stop()
            raise
        self.result = completed
        if completed and self.machine.finish():
            logger.info("live run completed: %s (%d frames)", self.key, len(self.frames))
        elif not completed:
            self.machine.stop()

    def _render(self, frame: Frame):
        self.frames.append(frame)
        if self.on_frame is None:
            return None
        result = self.on_frame(frame)
        return result if inspect.isawaitable(result) else None

    async def _halt(self) -> None:
        task, self._task = self._task, None
        if task is None or task.done():
            return
        self.stop()
        await asyncio.wait({task})
        if not task.cancelled() and task.exception() is not None:
            logger.warning("previous run of %s ended with %r", self.key, task.exception())

    def _to_idle(self) -> None:
        if self.machine.state is RunState.IDLE:
            return
        if not self.machine.restart():
            self.machine.stop()
