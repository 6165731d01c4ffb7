from app.limits import SlidingWindowLimiter


class FakeTimer:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_allows_up_to_max_then_blocks():
    timer = FakeTimer()
    limiter = SlidingWindowLimiter(3, 60, timer=timer)
    assert [limiter.hit("a")[0] for _ in range(3)] == [True, True, True]
    allowed, wait = limiter.hit("a")
    assert allowed is False
    assert wait == 60


def test_window_slides():
    timer = FakeTimer()
    limiter = SlidingWindowLimiter(2, 60, timer=timer)
    limiter.hit("a")
    timer.now = 30
    limiter.hit("a")
    timer.now = 59
    assert limiter.hit("a") == (False, 1)
    timer.now = 60
    assert limiter.hit("a")[0] is True


def test_keys_are_independent():
    limiter = SlidingWindowLimiter(1, 60, timer=FakeTimer())
    assert limiter.hit("a")[0] is True
    assert limiter.hit("b")[0] is True
    assert limiter.hit("a")[0] is False


def test_reset():
    limiter = SlidingWindowLimiter(1, 60, timer=FakeTimer())
    limiter.hit("a")
    limiter.reset()
    assert limiter.hit("a")[0] is True


def test_idle_clients_are_forgotten():
    timer = FakeTimer()
    limiter = SlidingWindowLimiter(5, 60, timer=timer)
    for i in range(50):
        limiter.hit(f"10.0.0.{i}")
    assert len(limiter) == 50

    timer.now = 61
    limiter.hit("10.0.1.1")
    assert len(limiter) == 1


def test_active_clients_keep_their_history():
    timer = FakeTimer()
    limiter = SlidingWindowLimiter(2, 60, timer=timer)
    limiter.hit("a")
    timer.now = 40
    limiter.hit("a")
    timer.now = 61
    limiter.hit("b")
    assert len(limiter) == 2
    # The hit at 40 still counts: one slot left
    assert limiter.hit("a")[0] is True
    assert limiter.hit("a")[0] is False
