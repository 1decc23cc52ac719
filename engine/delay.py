"""
delay.py — Cooperative Delay
=============================
The single suspension point of the live model.

    ok = await cooperative_delay(300, tokens)
    if not ok:
        return            # stopped

Sleeps in slices of at most `slice_ms`, checking `stop_requested` before
and after every slice, so a stop is observed within one slice no matter
how long the nominal delay is.  While `pause_requested` is set it keeps
polling (still watching for stop) and none of that time is charged to
the nominal duration.
"""

import asyncio

from engine.tokens import CancellationTokens


DEFAULT_SLICE_MS = 50.0
DEFAULT_POLL_MS  = 50.0


async def cooperative_delay(
    duration_ms: float,
    tokens: CancellationTokens,
    slice_ms: float = DEFAULT_SLICE_MS,
    poll_ms: float = DEFAULT_POLL_MS,
) -> bool:
    """Wait `duration_ms` of un-paused time.  False as soon as a stop is seen."""
    if slice_ms <= 0:
        raise ValueError("slice_ms must be positive")

    remaining = max(0.0, float(duration_ms))

    if tokens.stop_requested:
        return False
    # always yield once so a zero delay still lets the controller run
    await asyncio.sleep(0)

    while True:
        if tokens.stop_requested:
            return False

        if tokens.pause_requested:
            await asyncio.sleep(min(poll_ms, slice_ms) / 1000.0)
            continue

        if remaining <= 0:
            return True

        chunk = min(slice_ms, remaining)
        await asyncio.sleep(chunk / 1000.0)
        remaining -= chunk
