"""
Unit tests for the TickDriver pacing loop.
"""

import pytest

from graphalgo.config import SPEED_OPTIONS
from graphalgo.search import SearchEngine, SearchStatus, TickDriver


@pytest.fixture
def sleeps():
    """Collects the sleep durations requested by a driver."""
    return []


@pytest.fixture
def engine(chain):
    """Engine with a started bfs run over the chain graph."""
    g, *_ = chain
    e = SearchEngine(g)
    e.start("bfs")
    return e


class TestRun:
    """Test the tick loop."""

    def test_runs_to_completion(self, engine, sleeps):
        """The driver steps until solved and sleeps between frames only."""
        steps = []
        driver = TickDriver(
            engine,
            frame_delay_ms=500,
            speed=2,
            on_step=steps.append,
            sleep=sleeps.append,
        )
        result = driver.run()
        assert result.solved
        assert [s.step_number for s in steps] == [1, 2, 3]
        assert sleeps == [0.25, 0.25]

    def test_cancel_from_callback(self, engine, sleeps):
        """Cancelling mid-run stops before the next tick and resets the engine."""
        driver = None

        def on_step(step):
            if step.step_number == 1:
                driver.cancel()

        driver = TickDriver(engine, on_step=on_step, sleep=sleeps.append)
        assert driver.run() is None
        assert driver.cancelled
        assert engine.status is SearchStatus.IDLE
        assert engine.steps_taken == 0

    def test_tick_after_finish_returns_none(self, engine, sleeps):
        """Ticking a finished engine does nothing."""
        driver = TickDriver(engine, frame_delay_ms=0, sleep=sleeps.append)
        driver.run()
        assert driver.tick() is None

    def test_invalid_settings(self, engine):
        """Speed must be positive and delay non-negative."""
        with pytest.raises(ValueError):
            TickDriver(engine, speed=0)
        with pytest.raises(ValueError):
            TickDriver(engine, frame_delay_ms=-1)


class TestSpeed:
    """Test the speed ladder."""

    def test_speed_up_and_down(self, engine):
        """Speed moves one rung at a time."""
        driver = TickDriver(engine, speed=1)
        assert driver.speed_up() == 1.5
        assert driver.slow_down() == 1
        assert driver.slow_down() == 0.75

    def test_clamped_at_ends(self, engine):
        """Speed never leaves the ladder."""
        driver = TickDriver(engine, speed=SPEED_OPTIONS[-1])
        assert driver.speed_up() == SPEED_OPTIONS[-1]
        driver.speed = SPEED_OPTIONS[0]
        assert driver.slow_down() == SPEED_OPTIONS[0]

    def test_off_ladder_speed_snaps(self, engine):
        """A custom speed snaps to its nearest rung before stepping."""
        driver = TickDriver(engine, speed=1.9)
        assert driver.speed_up() == 3.5

    def test_frame_interval(self, engine):
        """Interval is delay divided by speed, in seconds."""
        driver = TickDriver(engine, frame_delay_ms=1000, speed=4)
        assert driver.frame_interval_s == pytest.approx(0.25)
