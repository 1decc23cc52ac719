"""
live.py — Live Runner
======================
Drives one live algorithm generator under a CancellationTokens pair.

    tokens = CancellationTokens()
    done = await run_live(bubble_sort(items), render, 30, tokens)

For every frame, in order:
    1. stop requested?      → close the generator, return False
    2. pull the next frame  (the algorithm runs up to its next checkpoint)
    3. on_frame(frame)      (awaited when it returns an awaitable)
    4. cooperative delay    → False means stop: close, return False

The frame flagged `is_final` gets no trailing delay.  If the run is
paused at that moment the runner holds until resume (or stop) before
reporting completion, so the session never lands in Completed while
the user still sees Paused.

Stopping closes the generator, which raises GeneratorExit at the
innermost `yield` and unwinds every `yield from` above it: a deep
quick-sort recursion is abandoned in one go, with no frame emitted
after the stop.
"""

import inspect
import logging
from typing import Any, Awaitable, Callable, Iterable, Optional, Union

from algorithms.frame import Frame
from engine.config import EngineConfig
from engine.delay import cooperative_delay
from engine.tokens import CancellationTokens


logger = logging.getLogger(__name__)

FrameCallback = Callable[[Frame], Union[None, Awaitable[Any]]]
DelaySource = Union[float, Callable[[], float]]


async def run_live(
    frames: Iterable[Frame],
    on_frame: Optional[FrameCallback] = None,
    delay_ms: Optional[DelaySource] = None,
    tokens: Optional[CancellationTokens] = None,
    config: Optional[EngineConfig] = None,
) -> bool:
    """True on natural completion, False when stopped."""
    config = config or EngineConfig()
    tokens = tokens or CancellationTokens()
    if delay_ms is None:
        delay_ms = config.default_delay_ms
    current_delay = delay_ms if callable(delay_ms) else (lambda: delay_ms)
    if current_delay() < 0:
        raise ValueError("delay_ms must be >= 0")

    gen = iter(frames)
    rendered = 0
    try:
        while True:
            if tokens.stop_requested:
                logger.debug("stopped after %d frame(s)", rendered)
                return False
            try:
                frame = next(gen)
            except StopIteration:
                break

            result = on_frame(frame) if on_frame is not None else None
            if inspect.isawaitable(result):
                await result
            rendered += 1

            if frame.is_final:
                break

            wait_ms = frame.delay_for(max(0.0, current_delay()))
            if not await cooperative_delay(wait_ms, tokens, config.slice_ms, config.pause_poll_ms):
                logger.debug("stopped after %d frame(s)", rendered)
                return False

        # hold a pause that is still in force at the end
        if not await cooperative_delay(0, tokens, config.slice_ms, config.pause_poll_ms):
            return False
        logger.debug("completed after %d frame(s)", rendered)
        return True
    finally:
        close = getattr(gen, "close", None)
        if close is not None:
            close()
