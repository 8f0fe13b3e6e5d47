#! /usr/bin/env python
"""Conversion between ISO week dates and calendar dates"""

from . import errors
from . import gregorian
from .values import MAX_YEAR, MIN_YEAR, make_date


MIN_WEEK = 1
MAX_WEEK = 53
MIN_WEEKDAY = 1     # Monday
MAX_WEEKDAY = 7     # Sunday


def week_date_to_calendar(iso_year, iso_week, iso_weekday):
    """Returns the :class:`values.CalendarDate` of an ISO week date

    Week 1 is the week containing 4th January, so we find the Monday of
    that week and count forward.  Week 53 is accepted for every year: in
    years with only 52 weeks it simply lands in week 1 of the following
    ISO year.

    Raises :class:`errors.InvalidWeek` or :class:`errors.InvalidWeekday`
    for out of range values, and :class:`errors.OutOfRange` if the
    result falls outside the supported years."""
    src = "%04i-W%02i-%i" % (iso_year, iso_week, iso_weekday)
    if iso_year < MIN_YEAR or iso_year > MAX_YEAR:
        raise errors.OutOfRange(src, "year", "ISO year out of valid range")
    if iso_week < MIN_WEEK or iso_week > MAX_WEEK:
        raise errors.InvalidWeek(src, "invalid ISO week %i" % iso_week)
    if iso_weekday < MIN_WEEKDAY or iso_weekday > MAX_WEEKDAY:
        raise errors.InvalidWeekday(src, "invalid ISO weekday %i" %
                                    iso_weekday)
    jan4 = gregorian.ordinal_from_date(iso_year, 1, 4)
    week1 = jan4 - (gregorian.iso_weekday(iso_year, 1, 4) - 1)
    year, month, day = gregorian.date_from_ordinal(
        week1 + (iso_week - 1) * 7 + (iso_weekday - 1))
    return make_date(year, month, day)


def calendar_to_iso_week_date(date):
    """Returns the :class:`values.ISOWeekDate` of a calendar date

    *date* is a :class:`values.CalendarDate` (or anything with year,
    month and day attributes, including :class:`datetime.date`).  The
    date is validated first, see :meth:`values.CalendarDate.get_week_day`."""
    return make_date(date.year, date.month, date.day).get_week_day()
