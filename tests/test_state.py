from datetime import timedelta

import pytest

from stakeholder.progress import ProgressState, format_duration


def make_state(clock, max_value=10, spinner_length=4):
    return ProgressState(max_value, spinner_length, clock)


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "00:00:00"),
        (59.9, "00:00:59"),
        (61, "00:01:01"),
        (3600 + 125, "01:02:05"),
        (100 * 3600, "100:00:00"),
        (-5, "00:00:00"),
    ],
)
def test_format_duration(seconds, expected):
    assert format_duration(timedelta(seconds=seconds)) == expected


def test_rejects_non_positive_max(clock):
    with pytest.raises(ValueError):
        make_state(clock, max_value=0)


def test_value_is_clamped(clock):
    state = make_state(clock)
    state.set_value(25)
    assert state.value == 10
    state.set_value(-3)
    assert state.value == 0


def test_elapsed_uses_clock(clock):
    state = make_state(clock)
    clock.advance(75)
    assert state.elapsed() == timedelta(seconds=75)


def test_eta_zero_at_boundaries(clock):
    state = make_state(clock)
    clock.advance(30)
    assert state.eta() == timedelta(0)

    state.set_value(10)
    assert state.eta() == timedelta(0)


def test_eta_linear_projection(clock):
    state = make_state(clock)
    state.set_value(2)
    clock.advance(10)
    # 10s for 2 of 10 items: 50s total, 40s left
    assert state.eta() == timedelta(seconds=40)


def test_eta_positive_strictly_inside_range(clock):
    state = make_state(clock)
    clock.advance(1)
    for value in range(1, 10):
        state.set_value(value)
        assert state.eta() > timedelta(0)


def test_spinner_wraps(clock):
    state = make_state(clock, spinner_length=3)
    frames = []
    for _ in range(5):
        frames.append(state.spinner_frame)
        state.advance_spinner()
    assert frames == [0, 1, 2, 0, 1]


def test_high_water_mark_only_grows(clock):
    state = make_state(clock)
    state.record_width(12)
    state.record_width(5)
    assert state.max_rendered_width == 12
