from unittest.mock import patch

import pytest

from quasarcore.chronometer import Chronometer, ElapsedTime


class FakeClock:
    def __init__(self, now_ns=1_000_000_000):
        self.now_ns = now_ns

    def advance_us(self, microseconds):
        self.now_ns += microseconds * 1_000

    def __call__(self):
        return self.now_ns


@pytest.fixture
def clock():
    fake = FakeClock()
    with patch("time.time_ns", fake):
        yield fake


def test_not_started_stays_at_zero(clock):
    chrono = Chronometer(start=False)
    clock.advance_us(5_000)
    assert chrono.elapsed_time() == ElapsedTime(0.0, 0.0, 0.0)
    assert chrono.paused is True


def test_running_time_in_all_units(clock):
    chrono = Chronometer()
    clock.advance_us(2_500)
    elapsed = chrono.elapsed_time()
    assert elapsed.microseconds == 2_500.0
    assert elapsed.milliseconds == pytest.approx(elapsed.microseconds / 1_000)
    assert elapsed.seconds == pytest.approx(elapsed.microseconds / 1_000_000)


def test_stop_freezes_elapsed_time(clock):
    chrono = Chronometer()
    clock.advance_us(1_000)
    chrono.stop()
    frozen = chrono.elapsed_time()
    clock.advance_us(9_000)
    assert chrono.elapsed_time() == frozen
    assert frozen.microseconds == 1_000.0


def test_resume_accumulates(clock):
    chrono = Chronometer()
    clock.advance_us(300)
    chrono.stop()
    clock.advance_us(10_000)
    chrono.start()
    clock.advance_us(700)
    chrono.stop()
    assert chrono.elapsed_time().microseconds == 300.0 + 700.0


def test_sub_microsecond_is_truncated(clock):
    chrono = Chronometer()
    clock.now_ns += 999
    assert chrono.elapsed_time().microseconds == 0.0


def test_reset_clears_and_pauses(clock):
    chrono = Chronometer()
    clock.advance_us(400)
    chrono.reset()
    clock.advance_us(400)
    assert chrono.elapsed_time() == ElapsedTime()
    assert chrono.paused is True


def test_restart_starts_from_zero(clock):
    chrono = Chronometer()
    clock.advance_us(800)
    chrono.stop()
    chrono.restart()
    clock.advance_us(50)
    assert chrono.elapsed_time().microseconds == 50.0
    assert chrono.paused is False