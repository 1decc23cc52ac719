"""
config.py — Engine Configuration
=================================
One dataclass holds every tunable the engine reads.  Defaults suit the
browser front end; `from_env()` lets a deployment override them with
ALGOVIZ_* environment variables.

    ALGOVIZ_SLICE_MS            cooperative-delay slice (stop latency bound)
    ALGOVIZ_PAUSE_POLL_MS       how often a paused run re-checks its flags
    ALGOVIZ_DEFAULT_DELAY_MS    live-run delay when the caller gives none
    ALGOVIZ_PLAYBACK_SPEED_MS   step-log playback interval
    ALGOVIZ_MIN_PLAYBACK_MS     floor for playback interval
    ALGOVIZ_LOG_LEVEL           logging level name
    ALGOVIZ_MAX_ARRAY_SIZE      largest array the API accepts or generates
    ALGOVIZ_MAX_GRAPH_NODES     largest graph (node count)
    ALGOVIZ_MAX_LIST_SIZE       longest linked list
    ALGOVIZ_MAX_TEXT_LENGTH     longest Huffman input text
"""

import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional


ENV_PREFIX = "ALGOVIZ_"


@dataclass
class EngineConfig:
    slice_ms:          float = 50.0
    pause_poll_ms:     float = 50.0
    default_delay_ms:  float = 30.0
    playback_speed_ms: float = 1000.0
    min_playback_ms:   float = 10.0
    log_level:         str   = "INFO"
    max_array_size:    int   = 80
    max_graph_nodes:   int   = 15
    max_list_size:     int   = 12
    max_text_length:   int   = 2000

    def __post_init__(self):
        if self.slice_ms <= 0:
            raise ValueError("slice_ms must be positive")
        if self.pause_poll_ms <= 0:
            raise ValueError("pause_poll_ms must be positive")
        if self.default_delay_ms < 0:
            raise ValueError("default_delay_ms must be >= 0")
        if self.min_playback_ms <= 0:
            raise ValueError("min_playback_ms must be positive")
        for name in ("max_array_size", "max_graph_nodes", "max_list_size", "max_text_length"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be at least 1")
        self.log_level = self.log_level.upper()

    def size_limit(self, kind: str) -> int:
        """Largest accepted input for an input kind (array, graph, linked_list, text)."""
        limits = {
            "array":       self.max_array_size,
            "graph":       self.max_graph_nodes,
            "linked_list": self.max_list_size,
            "text":        self.max_text_length,
        }
        if kind not in limits:
            raise ValueError(f"Unknown input kind: {kind}")
        return limits[kind]

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        """Build a config, overriding defaults with any ALGOVIZ_* variables present."""
        environ = os.environ if environ is None else environ
        overrides = {}
        for f in fields(cls):
            raw = environ.get(ENV_PREFIX + f.name.upper())
            if raw is None or raw == "":
                continue
            if f.name == "log_level":
                overrides[f.name] = raw
            else:
                parse = int if f.type is int else float
                try:
                    overrides[f.name] = parse(raw)
                except ValueError:
                    raise ValueError(f"{ENV_PREFIX}{f.name.upper()} must be a number, got {raw!r}")
        return cls(**overrides)
