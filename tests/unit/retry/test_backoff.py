"""
Unit tests for the backoff schedule.
"""

import pytest

from http_retry.retry.backoff import BackoffSchedule


@pytest.mark.parametrize(
    "attempt,expected",
    [(1, 1.0), (2, 3.0), (3, 5.0), (4, 5.0), (10, 5.0)],
)
def test_delay_per_attempt_clamps_to_last(attempt, expected):
    """Delays follow the list, then repeat the last entry."""
    schedule = BackoffSchedule.of([1, 3, 5])

    assert schedule.delay_for(attempt) == expected


def test_empty_schedule_means_no_wait():
    schedule = BackoffSchedule()

    assert schedule.delay_for(1) == 0.0
    assert schedule.delay_for(7) == 0.0


def test_single_entry_is_constant():
    schedule = BackoffSchedule.of([0.25])

    assert [schedule.delay_for(a) for a in (1, 2, 3)] == [0.25, 0.25, 0.25]


def test_schedule_is_monotonic_for_sorted_delays():
    """A non-decreasing delay list yields non-decreasing delays for any attempt count."""
    schedule = BackoffSchedule.of([0.5, 1, 2])
    delays = [schedule.delay_for(a) for a in range(1, 8)]

    assert delays == sorted(delays)


def test_attempt_is_one_indexed():
    schedule = BackoffSchedule.of([1])

    with pytest.raises(ValueError, match=">= 1"):
        schedule.delay_for(0)


def test_negative_delay_rejected():
    with pytest.raises(ValueError, match=">= 0"):
        BackoffSchedule.of([1, -2])


def test_zero_delay_entry_allowed():
    schedule = BackoffSchedule.of([0, 2])

    assert schedule.delay_for(1) == 0.0
    assert schedule.delay_for(2) == 2.0
