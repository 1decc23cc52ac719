"""
engine/
-------
Execution, playback & recording layer.

    from engine import LiveSession, run_live, CancellationTokens
    from engine import Playback, Recorder, generate_log
"""

from engine.config    import EngineConfig
from engine.tokens    import CancellationTokens
from engine.delay     import cooperative_delay
from engine.run_state import RunState, RunStateMachine
from engine.catalog   import (
    UnavailableAlgorithm, resolve, prepare_input, build_generator, generate_input, input_size, check_input_size,
)
from engine.live      import run_live
from engine.session   import LiveSession
from engine.stepper   import Playback, SPEED_PRESETS
from engine.recorder  import Recorder, RunMetrics, generate_log

__all__ = [
    "EngineConfig",
    "CancellationTokens",
    "cooperative_delay",
    "RunState",
    "RunStateMachine",
    "UnavailableAlgorithm",
    "resolve",
    "prepare_input",
    "build_generator",
    "generate_input",
    "input_size",
    "check_input_size",
    "run_live",
    "LiveSession",
    "Playback",
    "SPEED_PRESETS",
    "Recorder",
    "RunMetrics",
    "generate_log",
]
