import pytest

from termgames.stopwatch import (
    DEFAULT_WARNING_MS,
    FLASH_WINDOW_MS,
    HOUR_MS,
    MAX_LAPS,
    MAX_VISIBLE_LAPS,
    Stopwatch,
    centiseconds,
    format_duration,
    hours,
    interval_ms,
    lap_area_height,
    minutes,
    seconds,
    visible_laps,
)


def test_interval_ms_whole_seconds():
    assert interval_ms(1.0, 2.5) == 1500


def test_interval_ms_truncates_sub_millisecond():
    assert interval_ms(0.0, 0.0019) == 1


@pytest.mark.parametrize("ms", [0, 9, 10, 999, 61_234, 3_599_999, 86_399_999])
def test_components_recompose(ms):
    rebuilt = hours(ms) * HOUR_MS + minutes(ms) * 60_000 + seconds(ms) * 1000 + centiseconds(ms) * 10
    assert rebuilt == ms - ms % 10


@pytest.mark.parametrize("ms", [0, 5_000, 1_234_567, 90_000_000])
def test_component_ranges(ms):
    assert 0 <= centiseconds(ms) < 100
    assert 0 <= seconds(ms) < 60
    assert 0 <= minutes(ms) < 60
    assert 0 <= hours(ms) < 24


def test_format_duration_worked_example():
    assert format_duration(3_723_450) == " 1 :  2 :  3 : 45"


def test_format_duration_zero_width():
    assert len(format_duration(0)) == len(format_duration(86_399_999))


def test_new_stopwatch_defaults():
    watch = Stopwatch()
    assert watch.total_ms == 0
    assert watch.warning_ms == DEFAULT_WARNING_MS == 25000
    assert watch.running is False
    assert watch.laps == []


def test_tick_accumulates_only_while_running():
    watch = Stopwatch()
    watch.tick(5.0)
    assert watch.total_ms == 0
    watch.toggle(10.0)
    watch.tick(10.5)
    watch.tick(11.0)
    assert watch.total_ms == interval_ms(10.0, 11.0)
    watch.toggle(11.0)
    watch.tick(20.0)
    assert watch.total_ms == interval_ms(10.0, 11.0)


def test_restart_does_not_count_pause():
    watch = Stopwatch()
    watch.toggle(0.0)
    watch.tick(1.0)
    watch.toggle(1.0)
    watch.toggle(100.0)
    watch.tick(101.0)
    assert watch.total_ms == 2 * interval_ms(0.0, 1.0)


def test_reset_keeps_warning():
    watch = Stopwatch()
    watch.increase_warning(1000)
    watch.toggle(0.0)
    watch.tick(3.0)
    watch.add_lap()
    watch.reset()
    assert (watch.total_ms, watch.running, watch.laps) == (0, False, [])
    assert watch.warning_ms == DEFAULT_WARNING_MS + 1000


def test_laps_are_capped():
    watch = Stopwatch()
    results = [watch.add_lap() for _ in range(MAX_LAPS + 3)]
    assert results.count(True) == MAX_LAPS
    assert results[-1] is False
    assert len(watch.laps) == MAX_LAPS
    assert watch.laps_full


def test_lap_records_current_total():
    watch = Stopwatch(total_ms=4321)
    watch.add_lap()
    assert watch.laps == [4321]


def test_warning_round_trip():
    watch = Stopwatch()
    watch.increase_warning(HOUR_MS)
    watch.decrease_warning(HOUR_MS)
    assert watch.warning_ms == DEFAULT_WARNING_MS


def test_decrease_warning_never_reaches_zero():
    watch = Stopwatch()
    watch.decrease_warning(HOUR_MS)
    assert watch.warning_ms == DEFAULT_WARNING_MS
    watch.decrease_warning(DEFAULT_WARNING_MS)
    assert watch.warning_ms == DEFAULT_WARNING_MS


def test_flashing_window():
    watch = Stopwatch()
    watch.total_ms = watch.warning_ms
    assert not watch.is_flashing()
    watch.total_ms = watch.warning_ms + 1
    assert watch.is_flashing()
    watch.total_ms = watch.warning_ms + FLASH_WINDOW_MS - 1
    assert watch.is_flashing()
    watch.total_ms = watch.warning_ms + FLASH_WINDOW_MS
    assert not watch.is_flashing()


def test_visible_laps_newest_first():
    laps = [100, 200, 300]
    assert visible_laps(laps, 40) == [(3, 300), (2, 200), (1, 100)]


def test_visible_laps_limited_on_tall_screen():
    laps = list(range(10))
    shown = visible_laps(laps, 40)
    assert len(shown) == MAX_VISIBLE_LAPS
    assert shown[0] == (10, laps[9])
    numbers = [number for number, _ in shown]
    assert numbers == sorted(numbers, reverse=True)


def test_visible_laps_short_screen():
    laps = [1, 2, 3, 4]
    assert len(visible_laps(laps, 15)) == 15 - 13
    assert visible_laps(laps, 5) == []


def test_lap_area_height():
    assert lap_area_height([], 40) == 1
    assert lap_area_height([1, 2, 3], 40) == 3
    assert lap_area_height(list(range(10)), 40) == MAX_VISIBLE_LAPS
    assert lap_area_height([1], 15) == 15 - 13