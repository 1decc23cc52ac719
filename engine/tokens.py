"""
tokens.py — Cancellation Token Pair
====================================
The two flags a controller shares with exactly one live run.

    stop_requested  – permanent for the run it was issued to
    pause_requested – toggled any number of times

The controller is the only writer; the live runner and the cooperative
delay only read.  A token pair is an ordinary object handed to the run,
never module state, so two visualizers on one page cannot cross-talk.
"""

import logging
from dataclasses import dataclass


logger = logging.getLogger(__name__)


@dataclass
class CancellationTokens:
    stop_requested:  bool = False
    pause_requested: bool = False

    def request_stop(self) -> None:
        if not self.stop_requested:
            logger.debug("stop requested")
        self.stop_requested = True

    def request_pause(self) -> None:
        self.pause_requested = True

    def clear_pause(self) -> None:
        self.pause_requested = False

    def reset(self) -> None:
        """Back to (False, False) for a brand-new run."""
        self.stop_requested = False
        self.pause_requested = False
