# coding: utf-8
""" Tests for the elapsed time estimation """

import datetime

import pytest
from dateutil import tz

import achievements.base
from achievements.interval import (DAY_IN_SECONDS, DECADE, MONTH, TIERS, WEEK,
                                   YEAR, Estimate, Interval, approx_days,
                                   days_since, estimate, markers, tier)

# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
#  Constants
# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

NOW = datetime.datetime(2024, 4, 7, 10, 0, 0, tzinfo=tz.UTC)
MOON_LANDING = datetime.datetime(1969, 7, 20, 20, 17, 40, tzinfo=tz.UTC)
BERLIN_WALL = datetime.datetime(
    1989, 11, 9, 18, 53, 0, tzinfo=tz.tzoffset(None, 3600))


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
#  Days
# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

def test_approx_days_boundaries():
    assert approx_days(0) == 0
    assert approx_days(86399) == 0
    assert approx_days(86400) == 1
    assert approx_days(2 * 86400 - 1) == 1


def test_approx_days_is_floor_division():
    previous = 0
    for seconds in range(0, 40 * DAY_IN_SECONDS, 3607):
        days = approx_days(seconds)
        assert days == seconds // 86400
        assert days >= previous
        previous = days


def test_approx_days_negative():
    with pytest.raises(achievements.base.InvalidInterval):
        approx_days(-1)


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
#  Tiers
# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

def test_tier_table_is_ascending():
    thresholds = [threshold for threshold, _ in TIERS]
    counts = [count for _, count in TIERS]
    assert thresholds == sorted(set(thresholds))
    assert counts == sorted(counts)
    assert thresholds[0] == 0


def test_tier_thresholds():
    assert markers(0) == 0
    assert markers(1) == 1
    assert markers(YEAR - 1) == 1
    assert markers(YEAR) == 2
    assert markers(DECADE - 1) == 2
    assert markers(DECADE) == 3
    assert markers(40 * YEAR) == 4
    assert markers(50 * YEAR) == 5
    assert markers(500 * YEAR) == 5


def test_tier_monotonic():
    previous_tier = previous_markers = 0
    for days in range(0, 60 * YEAR, 11):
        assert tier(days) >= previous_tier
        assert markers(days) >= previous_markers
        previous_tier, previous_markers = tier(days), markers(days)


def test_tier_negative():
    with pytest.raises(achievements.base.InvalidInterval):
        tier(-1)


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
#  Estimate
# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

def test_estimate_exact_days():
    """ Epoch exactly given number of days before now """
    elapsed = estimate(NOW - datetime.timedelta(days=19984), NOW)
    assert elapsed.total_seconds == 19984 * 86400
    assert elapsed.days == 19984
    assert elapsed.markers == 5
    assert str(elapsed) == "19984 days 💎💎💎💎💎"

    elapsed = estimate(NOW - datetime.timedelta(days=12567), NOW)
    assert elapsed.days == 12567
    assert elapsed.markers == 3
    assert elapsed.badges("*") == "***"


def test_estimate_coarse_units():
    elapsed = Estimate(19984 * 86400 + 500)
    assert elapsed.days == 19984
    assert elapsed.weeks == 19984 // WEEK
    assert elapsed.months == 19984 // MONTH
    assert elapsed.years == 54
    assert elapsed.decades == 5


def test_estimate_is_pure():
    epoch = NOW - datetime.timedelta(days=3, seconds=17)
    assert estimate(epoch, NOW) == estimate(epoch, NOW)


def test_estimate_same_instant():
    elapsed = estimate(NOW, NOW)
    assert elapsed.days == 0
    assert elapsed.markers == 0


def test_estimate_future_epoch():
    """ Epoch one second after now is refused """
    with pytest.raises(achievements.base.InvalidInterval):
        estimate(NOW + datetime.timedelta(seconds=1), NOW)


def test_estimate_ignores_sub_second():
    epoch = NOW - datetime.timedelta(seconds=86399, microseconds=999999)
    assert estimate(epoch, NOW).days == 0


def test_documented_discrepancy_is_kept():
    """ One day fewer than the calendar counts """
    assert estimate(MOON_LANDING, NOW).days == 19984
    assert (NOW.date() - MOON_LANDING.date()).days == 19985
    assert estimate(BERLIN_WALL, NOW).days == 12567
    assert (NOW.date() - BERLIN_WALL.date()).days == 12568


def test_days_since(monkeypatch):
    monkeypatch.setattr(achievements.base, "now", lambda: NOW)
    assert days_since(MOON_LANDING) == 19984
    assert days_since(MOON_LANDING, NOW + datetime.timedelta(days=1)) == 19985


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
#  Interval
# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

def test_interval_units():
    assert Interval.from_days(3 * DECADE).unit == "decade"
    assert Interval.from_days(3 * DECADE).count == 3
    assert Interval.from_days(33 * YEAR).unit == "year"
    assert Interval.from_days(5 * MONTH).count == 5
    assert Interval.from_days(3 * WEEK).unit == "week"
    assert Interval.from_days(15).unit == "day"
    assert Interval.from_days(0).count == 0


def test_interval_to_words():
    cases = [
        (3 * DECADE, "3 decades"),
        (DECADE, "1 decade, that's amazing"),
        (33 * YEAR, "33 years"),
        (11 * YEAR, "11 years"),
        (YEAR, "1 year, happy anniversary!"),
        (5 * MONTH, "5 months"),
        (MONTH, "1 month"),
        (3 * WEEK, "3 weeks"),
        (WEEK, "1 week"),
        (15, "15 days"),
        (10, "10 days"),
        (1, "1 day"),
        (0, "Recently"),
        ]
    for days, words in cases:
        assert Interval.from_days(days).to_words() == words
        assert str(Interval(days)) == words


def test_interval_negative():
    with pytest.raises(achievements.base.InvalidInterval):
        Interval(-3)
