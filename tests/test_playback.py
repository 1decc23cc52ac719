import asyncio

import pytest

from engine import EngineConfig, Playback, RunState, SPEED_PRESETS, generate_log


QUICK = EngineConfig(min_playback_ms=1)


@pytest.fixture
def log(abcd_graph):
    return generate_log("dijkstra", abcd_graph, source="A")


# ---------------------------------------------------------------------------
# Manual-tick mode (no event loop)
# ---------------------------------------------------------------------------
def test_start_renders_first_snapshot(log):
    seen = []
    pb = Playback(on_frame=seen.append)
    pb.start(log)
    assert pb.state is RunState.RUNNING
    assert pb.cursor == 0
    assert pb.manual
    assert seen == [log[0]]


def test_ticks_walk_the_log_then_complete(log):
    seen = []
    pb = Playback(on_frame=seen.append)
    pb.start(log)
    while pb.tick():
        pass
    assert pb.state is RunState.COMPLETED
    assert pb.cursor == len(log) - 1
    assert seen == log.steps
    assert pb.tick() is False


def test_pause_and_resume_keep_cursor(log):
    pb = Playback()
    pb.start(log)
    pb.tick()
    assert pb.pause()
    assert pb.tick() is False
    assert pb.cursor == 1
    assert not pb.pause()
    assert pb.resume()
    assert pb.tick()
    assert pb.cursor == 2


def test_reset_drops_the_log(log):
    pb = Playback()
    pb.start(log)
    pb.tick()
    pb.reset()
    assert pb.state is RunState.IDLE
    assert pb.cursor == -1
    assert pb.log is None
    assert pb.current_step is None
    assert not pb.next_step()


def test_seeking_is_pure(log):
    seen = []
    pb = Playback(on_frame=seen.append)
    pb.start(log)
    assert pb.goto_step(4)
    assert pb.current_step is log[4]
    assert pb.prev_step() and pb.cursor == 3
    assert pb.next_step() and pb.cursor == 4
    assert pb.rewind() and pb.cursor == 0
    assert not pb.prev_step()
    assert not pb.goto_step(len(log))
    assert seen == [log[0], log[4], log[3], log[4], log[0]]
    assert pb.state is RunState.RUNNING


def test_jump_to_end_from_pause_goes_through_running(log):
    pb = Playback()
    pb.start(log)
    pb.pause()
    pb.jump_to_end()
    assert pb.state is RunState.COMPLETED
    assert pb.current_step.is_final
    assert list(pb.machine.history)[-2:] == [RunState.RUNNING, RunState.COMPLETED]


def test_toggle_and_restart(log):
    pb = Playback()
    pb.start(log)
    pb.toggle_play()
    assert pb.state is RunState.PAUSED
    pb.toggle_play()
    assert pb.state is RunState.RUNNING
    pb.jump_to_end()
    pb.toggle_play()
    assert pb.state is RunState.RUNNING
    assert pb.cursor == 0
    assert pb.log is log


def test_speed_presets_and_floor(log):
    pb = Playback()
    pb.set_speed("fast")
    assert pb.speed_ms == SPEED_PRESETS["fast"]
    pb.set_speed(1)
    assert pb.speed_ms == EngineConfig().min_playback_ms
    with pytest.raises(ValueError):
        pb.set_speed("ludicrous")


def test_empty_log_is_rejected():
    with pytest.raises(ValueError):
        Playback().start([])


# ---------------------------------------------------------------------------
# Timer mode (inside an event loop)
# ---------------------------------------------------------------------------
def test_timer_plays_to_completion(log):
    seen = []

    async def scenario():
        pb = Playback(on_frame=seen.append, config=QUICK)
        pb.start(log, speed_ms=1)
        assert not pb.manual
        await pb.wait()
        return pb

    pb = asyncio.run(scenario())
    assert pb.state is RunState.COMPLETED
    assert seen == log.steps


def test_speed_change_while_running_neither_skips_nor_repeats(log):
    seen = []

    async def scenario():
        pb = Playback(on_frame=seen.append, config=QUICK)
        pb.start(log, speed_ms=10_000)
        await asyncio.sleep(0.01)
        pb.set_speed(1)
        await pb.wait()
        return pb

    pb = asyncio.run(scenario())
    assert pb.state is RunState.COMPLETED
    assert [s.step_number for s in seen] == list(range(len(log)))


def test_timer_respects_pause(log):
    async def scenario():
        pb = Playback(config=QUICK)
        pb.start(log, speed_ms=5)
        await asyncio.sleep(0.02)
        pb.pause()
        held = pb.cursor
        await asyncio.sleep(0.05)
        still = pb.cursor
        pb.resume()
        await pb.wait()
        return pb, held, still

    pb, held, still = asyncio.run(scenario())
    assert held == still
    assert pb.state is RunState.COMPLETED


def test_reset_cancels_the_timer(log):
    async def scenario():
        seen = []
        pb = Playback(on_frame=seen.append, config=QUICK)
        pb.start(log, speed_ms=5)
        await asyncio.sleep(0.01)
        pb.reset()
        count = len(seen)
        await asyncio.sleep(0.05)
        return pb, count, len(seen)

    pb, before, after = asyncio.run(scenario())
    assert before == after
    assert pb.state is RunState.IDLE
