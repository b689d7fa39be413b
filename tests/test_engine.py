import asyncio

import pytest

from abyssal_watcher.engine import Engine, EngineCommand
from abyssal_watcher.watcher import CheckStrategy


class CountingCheck(CheckStrategy):
    def __init__(self, result=False):
        self.calls = 0
        self.result = result

    def check(self):
        self.calls += 1
        return self.result


@pytest.mark.asyncio
async def test_engine_runs_checks_periodically():
    strategy = CountingCheck()
    engine = Engine(strategy, interval=0.01)
    engine.start()
    await asyncio.sleep(0.1)
    await engine.stop()
    assert strategy.calls >= 2
    assert engine.checks == strategy.calls
    assert engine.threats == 0


@pytest.mark.asyncio
async def test_engine_counts_threats():
    strategy = CountingCheck(result=True)
    engine = Engine(strategy, interval=0.01)
    engine.start()
    await asyncio.sleep(0.05)
    await engine.stop()
    assert engine.threats == engine.checks
    assert engine.threats >= 1


@pytest.mark.asyncio
async def test_first_check_is_immediate():
    strategy = CountingCheck()
    engine = Engine(strategy, interval=100.0)
    engine.start()
    await asyncio.sleep(0.05)
    await engine.stop()
    assert strategy.calls == 1


@pytest.mark.asyncio
async def test_trigger_handles_manual_tick():
    engine = Engine(CountingCheck(), interval=100.0)
    engine.start()
    engine.trigger()
    engine.trigger()
    await asyncio.sleep(0.05)
    await engine.stop()
    assert engine.manual_ticks == 2


@pytest.mark.asyncio
async def test_trigger_without_start_raises():
    engine = Engine(CountingCheck())
    with pytest.raises(RuntimeError):
        engine.trigger()


@pytest.mark.asyncio
async def test_stop_ends_engine():
    engine = Engine(CountingCheck(), interval=0.01)
    engine.start()
    assert engine.running is True
    await engine.stop()
    assert engine.running is False


@pytest.mark.asyncio
async def test_double_start_raises():
    engine = Engine(CountingCheck(), interval=100.0)
    engine.start()
    try:
        with pytest.raises(RuntimeError):
            engine.start()
    finally:
        await engine.stop()


def test_engine_command_tick_member():
    assert EngineCommand("tick") is EngineCommand.TICK