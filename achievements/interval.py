"""
Estimate, tiers & Interval, the core of the elapsed time reporting

The way the number of days (months, years...) is calculated is very
simple and deliberately not calendar accurate: a day is 86400 seconds,
a month is 30 days and a year 365 days. Reported intervals are thus
only a rough indication and may be one day off, for example the tool
reports 19984 days since the Moon landing where a calendar would
count 19985.
"""

from __future__ import annotations

import bisect
import datetime
from typing import NamedTuple, Optional

import achievements.base
from achievements import utils
from achievements.base import InvalidInterval

# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
#  Constants
# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

DAY_IN_SECONDS = 24 * 60 * 60

WEEK = 7
MONTH = 30
YEAR = 365
DECADE = 10 * YEAR

# Tiers as (threshold in days, number of markers), thresholds ascending
TIERS = (
    (0, 0),
    (1, 1),
    (YEAR, 2),
    (DECADE, 3),
    (40 * YEAR, 4),
    (50 * YEAR, 5),
    )

_THRESHOLDS = [threshold for threshold, _ in TIERS]

# Default decorative marker
MARKER = achievements.base.DEFAULT_MARKER


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
#  Tiers
# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

def approx_days(seconds: int) -> int:
    """ Whole 86400 second days in given number of seconds """
    if seconds < 0:
        raise InvalidInterval(
            f"Negative interval of {seconds} seconds.")
    return seconds // DAY_IN_SECONDS


def tier(days: int) -> int:
    """ Index of the greatest tier threshold not exceeding days """
    if days < 0:
        raise InvalidInterval(f"Negative interval of {days} days.")
    return bisect.bisect_right(_THRESHOLDS, days) - 1


def markers(days: int) -> int:
    """ Number of decorative markers for given number of days """
    return TIERS[tier(days)][1]


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
#  Estimate
# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

class Estimate(NamedTuple):
    """ Approximate time elapsed since an epoch """
    total_seconds: int

    @property
    def days(self) -> int:
        return approx_days(self.total_seconds)

    @property
    def weeks(self) -> int:
        return self.days // WEEK

    @property
    def months(self) -> int:
        return self.days // MONTH

    @property
    def years(self) -> int:
        return self.days // YEAR

    @property
    def decades(self) -> int:
        return self.years // 10

    @property
    def tier(self) -> int:
        return tier(self.days)

    @property
    def markers(self) -> int:
        return markers(self.days)

    def badges(self, marker: str = MARKER) -> str:
        """ Markers repeated according to the tier """
        return marker * self.markers

    def __str__(self) -> str:
        """ Day count followed by the tier badges, e.g. 12567 days 💎💎💎 """
        return f"{self.days} {utils.pluralize('day', self.days)} {self.badges()}"


def estimate(
        epoch: datetime.datetime,
        now: datetime.datetime) -> Estimate:
    """
    Estimate the time elapsed between epoch and now

    Pure function of its arguments. Both instants are expected to be
    timezone aware. Raises ``InvalidInterval`` when the epoch lies
    after now, a negative day count is never produced.
    """
    elapsed = now - epoch
    if elapsed < datetime.timedelta(0):
        raise InvalidInterval(
            "Epoch {0} is after {1}.".format(
                epoch.isoformat(), now.isoformat()))
    return Estimate(int(elapsed.total_seconds()))


def days_since(
        epoch: datetime.datetime,
        now: Optional[datetime.datetime] = None) -> int:
    """
    Return the number of days since the given date

    Reads the clock when ``now`` is not provided.
    """
    if now is None:
        now = achievements.base.now()
    return estimate(epoch, now).days


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
#  Interval
# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

class Interval():
    """
    Number of days described in the largest whole unit

    The unit is chosen only when it divides the day count exactly,
    otherwise plain days are used::

        Interval(5).to_words() ...... 5 days
        Interval(7).to_words() ...... 1 week
        Interval(10).to_words() ..... 10 days
        Interval(60).to_words() ..... 2 months
        Interval(730).to_words() .... 2 years
    """

    # Special wording for the first anniversaries
    PHRASES = {
        ("decade", 1): "1 decade, that's amazing",
        ("year", 1): "1 year, happy anniversary!",
        ("day", 0): "Recently",
        }

    def __init__(self, days: int):
        if days < 0:
            raise InvalidInterval(f"Negative interval of {days} days.")
        self.days = days
        self.unit, self.count = self._unit(days)

    @classmethod
    def from_days(cls, days: int) -> Interval:
        """ Builds an ``Interval`` from a number of days """
        return cls(days)

    @staticmethod
    def _unit(days):
        """ Largest unit dividing the days exactly and the unit count """
        if days == 0:
            return "day", 0
        if days % YEAR == 0:
            years = days // YEAR
            if years % 10 == 0:
                return "decade", years // 10
            return "year", years
        if days % MONTH == 0:
            return "month", days // MONTH
        if days % WEEK == 0:
            return "week", days // WEEK
        return "day", days

    def to_words(self) -> str:
        """ Convert to words, accounts for singular and plural """
        try:
            return self.PHRASES[(self.unit, self.count)]
        except KeyError:
            return f"{self.count} {utils.pluralize(self.unit, self.count)}"

    def __eq__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return self.days == other.days

    def __repr__(self):
        return f"Interval({self.days})"

    def __str__(self):
        return self.to_words()
