import pytest

from shark_dash.scheduler import GameScheduler


class Recorder:
    def __init__(self):
        self.frames = []
        self.seconds = 0

    def on_frame(self, now_ms):
        self.frames.append(now_ms)

    def on_second(self):
        self.seconds += 1


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def scheduler(recorder):
    return GameScheduler(
        on_frame=recorder.on_frame,
        on_second=recorder.on_second,
        frame_interval_ms=10,
        countdown_interval_ms=1000,
        max_frames=200,
    )


def test_frames_fire_at_fixed_interval(scheduler, recorder):
    scheduler.advance(35)
    assert recorder.frames == [10, 20, 30]
    scheduler.advance(5)
    assert recorder.frames == [10, 20, 30, 40]
    assert scheduler.now_ms == 40


def test_countdown_fires_every_second(scheduler, recorder):
    scheduler.advance(999)
    assert recorder.seconds == 0
    scheduler.advance(1)
    assert recorder.seconds == 1
    scheduler.advance(2000)
    assert recorder.seconds == 3


def test_suspend_and_resume(scheduler, recorder):
    scheduler.advance(500)
    scheduler.suspend()
    assert not scheduler.running

    scheduler.advance(2000)
    assert recorder.seconds == 0
    assert len(recorder.frames) == 50

    scheduler.resume()
    scheduler.advance(600)
    assert recorder.seconds == 0
    scheduler.advance(400)
    assert recorder.seconds == 1
    assert scheduler.now_ms == 3500


def test_cancel_stops_all_callbacks(scheduler, recorder):
    scheduler.cancel()
    scheduler.advance(5000)
    scheduler.resume()
    scheduler.advance(5000)
    assert recorder.frames == []
    assert recorder.seconds == 0
    assert scheduler.cancelled


def test_backlog_is_capped(recorder):
    scheduler = GameScheduler(recorder.on_frame, recorder.on_second, frame_interval_ms=10, max_frames=5)
    scheduler.advance(100)
    assert len(recorder.frames) == 5
    scheduler.advance(5)
    assert len(recorder.frames) == 5


def test_suspend_from_frame_callback_stops_remaining_ticks():
    fired = []

    def on_frame(now_ms):
        fired.append(now_ms)
        scheduler.suspend()

    scheduler = GameScheduler(on_frame, lambda: fired.append("second"), frame_interval_ms=10, max_frames=200)
    scheduler.advance(1500)
    assert fired == [10]


def test_negative_elapsed_is_rejected(scheduler):
    with pytest.raises(ValueError):
        scheduler.advance(-1)
