import asyncio

import pytest

from countermodel.core import RepeatingTimer, TimerUnavailableError


def make_timer(clock, interval=1.0):
    fired = []
    timer = RepeatingTimer(lambda: fired.append(clock.now), lambda: interval, sleep=clock.sleep)
    return timer, fired


def test_start_without_event_loop_raises(clock):
    timer, _ = make_timer(clock)
    with pytest.raises(TimerUnavailableError):
        timer.start()
    assert not timer.running


@pytest.mark.asyncio
async def test_fires_after_each_interval(clock):
    timer, fired = make_timer(clock)
    timer.start()
    await clock.advance(3.5)
    assert fired == [1.0, 2.0, 3.0]
    timer.stop()
    await timer.wait_stopped()


@pytest.mark.asyncio
async def test_stop_cancels_task(clock):
    timer, fired = make_timer(clock)
    timer.start()
    await clock.settle()
    assert timer.running
    timer.stop()
    await timer.wait_stopped()
    assert not timer.running
    assert clock.pending == 0
    await clock.advance(5)
    assert fired == []


@pytest.mark.asyncio
async def test_start_twice_keeps_single_task(clock):
    timer, fired = make_timer(clock)
    timer.start()
    await clock.settle()
    timer.start()
    await clock.settle()
    assert clock.pending == 1
    await clock.advance(1.0)
    assert fired == [1.0]
    timer.stop()
    await timer.wait_stopped()


@pytest.mark.asyncio
async def test_woken_task_does_not_fire_after_stop(clock):
    timer, fired = make_timer(clock)
    timer.start()
    await clock.settle()
    # The wait completes, but stop is requested before the task gets to run
    clock.release_next()
    timer.stop()
    await clock.settle()
    await timer.wait_stopped()
    assert fired == []


@pytest.mark.asyncio
async def test_interval_is_read_before_every_wait(clock):
    intervals = iter([1.0, 2.0, 4.0])
    fired = []
    timer = RepeatingTimer(lambda: fired.append(clock.now), lambda: next(intervals), sleep=clock.sleep)
    timer.start()
    await clock.advance(6.5)
    assert fired == [1.0, 3.0]
    assert clock.requested == [1.0, 2.0, 4.0]
    timer.stop()
    await timer.wait_stopped()


@pytest.mark.asyncio
async def test_callback_error_is_logged_and_loop_continues(clock, caplog):
    calls = []

    def flaky():
        calls.append(clock.now)
        if len(calls) == 1:
            raise RuntimeError("boom")

    timer = RepeatingTimer(flaky, lambda: 1.0, sleep=clock.sleep, name="flaky")
    timer.start()
    await clock.advance(2.5)
    assert calls == [1.0, 2.0]
    assert "flaky: error in timer callback" in caplog.text
    timer.stop()
    await timer.wait_stopped()


@pytest.mark.asyncio
async def test_real_sleep_smoke():
    fired = asyncio.Event()
    timer = RepeatingTimer(fired.set, lambda: 0.01)
    timer.start()
    await asyncio.wait_for(fired.wait(), timeout=2)
    timer.stop()
    await timer.wait_stopped()
    assert not timer.running
