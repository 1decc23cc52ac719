import pytest

from engine.config import EngineConfig


def test_defaults():
    cfg = EngineConfig()
    assert cfg.slice_ms == 50
    assert cfg.playback_speed_ms == 1000
    assert cfg.log_level == "INFO"


def test_from_env_overrides():
    cfg = EngineConfig.from_env({
        "ALGOVIZ_SLICE_MS": "20",
        "ALGOVIZ_DEFAULT_DELAY_MS": "0",
        "ALGOVIZ_LOG_LEVEL": "debug",
        "UNRELATED": "x",
    })
    assert cfg.slice_ms == 20.0
    assert cfg.default_delay_ms == 0.0
    assert cfg.log_level == "DEBUG"
    assert cfg.pause_poll_ms == 50


def test_from_env_rejects_garbage():
    with pytest.raises(ValueError):
        EngineConfig.from_env({"ALGOVIZ_SLICE_MS": "fast"})
    with pytest.raises(ValueError):
        EngineConfig.from_env({"ALGOVIZ_SLICE_MS": "0"})


def test_size_limits():
    cfg = EngineConfig()
    assert cfg.size_limit("array") == 80
    assert cfg.size_limit("graph") == 15
    assert cfg.size_limit("linked_list") == 12
    assert cfg.size_limit("text") == 2000
    with pytest.raises(ValueError):
        cfg.size_limit("tree")
    with pytest.raises(ValueError):
        EngineConfig(max_array_size=0)


def test_size_limits_from_env_are_integers():
    cfg = EngineConfig.from_env({"ALGOVIZ_MAX_ARRAY_SIZE": "120"})
    assert cfg.max_array_size == 120
    assert isinstance(cfg.max_array_size, int)
    with pytest.raises(ValueError):
        EngineConfig.from_env({"ALGOVIZ_MAX_GRAPH_NODES": "7.5"})
