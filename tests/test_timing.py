import time
from datetime import datetime
from unittest import mock

from sparkengine.services import ServiceLocator
from sparkengine.timing import GlobalClock, get_date, get_date_and_time, get_time

FIXED = time.struct_time((2024, 3, 5, 7, 8, 9, 1, 65, 0))


def fake_clock(*ticks):
    values = iter(ticks)
    return lambda: next(values)


def test_get_date_format():
    with mock.patch("time.localtime", return_value=FIXED):
        assert get_date() == "2024-03-05"


def test_get_time_format():
    with mock.patch("time.localtime", return_value=FIXED):
        assert get_time() == "07:08:09"


def test_get_date_and_time_joins_with_space():
    with mock.patch("time.localtime", return_value=FIXED):
        assert get_date_and_time() == "2024-03-05 07:08:09"


def test_real_date_and_time_parse_back():
    parsed = datetime.strptime(get_date_and_time(), "%Y-%m-%d %H:%M:%S")
    assert abs((datetime.now() - parsed).total_seconds()) < 5


def test_clock_can_be_provided_as_a_service():
    clock = ServiceLocator.provide(GlobalClock)
    try:
        assert ServiceLocator.get(GlobalClock) is clock
        assert clock.duration_ms >= 0.0
    finally:
        ServiceLocator.unregister(GlobalClock)


def test_delta_starts_at_zero():
    clock = GlobalClock(fake_clock(1_000))
    assert clock.delta_ms == 0.0


def test_update_delta_measures_between_updates():
    clock = GlobalClock(fake_clock(0, 1_500_000, 2_000_000))
    clock.update_delta()
    assert clock.delta_ms == 1.5
    clock.update_delta()
    assert clock.delta_ms == 0.5


def test_delta_truncates_below_a_microsecond():
    clock = GlobalClock(fake_clock(0, 999))
    clock.update_delta()
    assert clock.delta_ms == 0.0


def test_start_resets_duration():
    clock = GlobalClock(fake_clock(0, 10_000_000, 10_000_000, 12_000_000))
    clock.start()
    assert clock.duration_ms == 0.0
    assert clock.duration_ms == 2.0


def test_real_clock_is_monotonic():
    clock = GlobalClock()
    first = clock.duration_ms
    clock.update_delta()
    second = clock.duration_ms
    assert second >= first >= 0.0
    assert clock.delta_ms >= 0.0