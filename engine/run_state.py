"""
run_state.py — Run-State Machine
=================================
The one piece of state the UI branches on, shared by the live session
and the step-log playback.

    IDLE  ──start──▶  RUNNING  ──finish──▶  COMPLETED
                      │    ▲                    │
                 pause│    │resume         restart/stop
                      ▼    │                    ▼
                      PAUSED               IDLE
    RUNNING | PAUSED  ──stop──▶  IDLE
    IDLE  ──mark_unavailable──▶  UNAVAILABLE  ──stop/restart──▶  IDLE

Illegal events are ignored: `fire()` returns False and logs at debug.
Nothing here skips RUNNING on the way to COMPLETED.
"""

import logging
from enum import Enum
from collections import deque
from typing import Callable, Deque, Dict, List, Optional, Tuple


logger = logging.getLogger(__name__)


class RunState(Enum):
    IDLE        = "idle"
    RUNNING     = "running"
    PAUSED      = "paused"
    COMPLETED   = "completed"
    UNAVAILABLE = "unavailable"


TRANSITIONS: Dict[Tuple[RunState, str], RunState] = {
    (RunState.IDLE,        "start"):            RunState.RUNNING,
    (RunState.IDLE,        "mark_unavailable"): RunState.UNAVAILABLE,
    (RunState.RUNNING,     "pause"):            RunState.PAUSED,
    (RunState.PAUSED,      "resume"):           RunState.RUNNING,
    (RunState.RUNNING,     "finish"):           RunState.COMPLETED,
    (RunState.RUNNING,     "stop"):             RunState.IDLE,
    (RunState.PAUSED,      "stop"):             RunState.IDLE,
    (RunState.COMPLETED,   "stop"):             RunState.IDLE,
    (RunState.COMPLETED,   "restart"):          RunState.IDLE,
    (RunState.UNAVAILABLE, "stop"):             RunState.IDLE,
    (RunState.UNAVAILABLE, "restart"):          RunState.IDLE,
}


# states kept in RunStateMachine.history
HISTORY_LIMIT = 64


class RunStateMachine:
    """
    Attributes:
        state     : Current RunState.
        history   : The last `history_limit` states entered, oldest first.
        listeners : callback(old, new) fired after each accepted transition.
    """

    def __init__(self, initial: RunState = RunState.IDLE, history_limit: int = HISTORY_LIMIT):
        if history_limit < 2:
            raise ValueError("history_limit must be at least 2")
        self.state:     RunState        = initial
        self.history:   Deque[RunState] = deque([initial], maxlen=history_limit)
        self.listeners: List[Callable[[RunState, RunState], None]] = []

    def can(self, event: str) -> bool:
        return (self.state, event) in TRANSITIONS

    def fire(self, event: str) -> bool:
        target = TRANSITIONS.get((self.state, event))
        if target is None:
            logger.debug("ignored %r in state %s", event, self.state.value)
            return False
        old, self.state = self.state, target
        self.history.append(target)
        for listener in list(self.listeners):
            listener(old, target)
        return True

    # -- named events --
    def start(self) -> bool:            return self.fire("start")
    def pause(self) -> bool:            return self.fire("pause")
    def resume(self) -> bool:           return self.fire("resume")
    def finish(self) -> bool:           return self.fire("finish")
    def stop(self) -> bool:             return self.fire("stop")
    def restart(self) -> bool:          return self.fire("restart")
    def mark_unavailable(self) -> bool: return self.fire("mark_unavailable")

    def subscribe(self, listener: Callable[[RunState, RunState], None]) -> None:
        self.listeners.append(listener)

    @property
    def is_active(self) -> bool:
        return self.state in (RunState.RUNNING, RunState.PAUSED)

    @property
    def previous(self) -> Optional[RunState]:
        return self.history[-2] if len(self.history) > 1 else None
