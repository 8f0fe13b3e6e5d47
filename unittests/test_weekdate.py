#! /usr/bin/env python

"""Runs unit tests on the isoparse.weekdate module"""

import datetime
import logging
import unittest

from isoparse import errors
from isoparse import gregorian
from isoparse import values
from isoparse import weekdate


def suite():
    return unittest.TestSuite((
        unittest.defaultTestLoader.loadTestsFromTestCase(WeekDateTests),
    ))


ISO_TO_GREGORIAN = {
    (1950, 1, 1): (1950, 1, 2),
    (1950, 1, 3): (1950, 1, 4),
    (1950, 1, 5): (1950, 1, 6),
    (1950, 1, 6): (1950, 1, 7),
    (1950, 20, 1): (1950, 5, 15),
    (1950, 20, 3): (1950, 5, 17),
    (1950, 20, 5): (1950, 5, 19),
    (1950, 20, 6): (1950, 5, 20),
    (1950, 27, 1): (1950, 7, 3),
    (1950, 27, 3): (1950, 7, 5),
    (1950, 27, 5): (1950, 7, 7),
    (1950, 27, 6): (1950, 7, 8),
    (1950, 53, 1): (1951, 1, 1),
    (1950, 53, 3): (1951, 1, 3),
    (1950, 53, 5): (1951, 1, 5),
    (1950, 53, 6): (1951, 1, 6),
    (1984, 1, 1): (1984, 1, 2),
    (1984, 1, 3): (1984, 1, 4),
    (1984, 1, 5): (1984, 1, 6),
    (1984, 1, 6): (1984, 1, 7),
    (1984, 20, 1): (1984, 5, 14),
    (1984, 20, 3): (1984, 5, 16),
    (1984, 20, 5): (1984, 5, 18),
    (1984, 20, 6): (1984, 5, 19),
    (1984, 27, 1): (1984, 7, 2),
    (1984, 27, 3): (1984, 7, 4),
    (1984, 27, 5): (1984, 7, 6),
    (1984, 27, 6): (1984, 7, 7),
    (1984, 53, 1): (1984, 12, 31),
    (1984, 53, 3): (1985, 1, 2),
    (1984, 53, 5): (1985, 1, 4),
    (1984, 53, 6): (1985, 1, 5),
    (2002, 1, 1): (2001, 12, 31),
    (2002, 1, 3): (2002, 1, 2),
    (2002, 1, 5): (2002, 1, 4),
    (2002, 1, 6): (2002, 1, 5),
    (2002, 20, 1): (2002, 5, 13),
    (2002, 20, 3): (2002, 5, 15),
    (2002, 20, 5): (2002, 5, 17),
    (2002, 20, 6): (2002, 5, 18),
    (2002, 27, 1): (2002, 7, 1),
    (2002, 27, 3): (2002, 7, 3),
    (2002, 27, 5): (2002, 7, 5),
    (2002, 27, 6): (2002, 7, 6),
    (2002, 53, 1): (2002, 12, 30),
    (2002, 53, 3): (2003, 1, 1),
    (2002, 53, 5): (2003, 1, 3),
    (2002, 53, 6): (2003, 1, 4),
}


class WeekDateTests(unittest.TestCase):

    def test_week_date_to_calendar(self):
        for week_date, calendar_date in ISO_TO_GREGORIAN.items():
            result = weekdate.week_date_to_calendar(*week_date)
            self.assertTrue(isinstance(result, values.CalendarDate))
            self.assertTrue(result.get_calendar_day() == calendar_date,
                            "%s: %s" % (repr(week_date), str(result)))

    def test_calendar_to_iso_week_date(self):
        for calendar_date, week_date in (
                ((2018, 9, 22), (2018, 38, 6)),
                ((1, 1, 1), (1, 1, 1)),
                ((1912, 4, 12), (1912, 15, 5)),
                ((2010, 1, 3), (2009, 53, 7)),
                ((2008, 12, 29), (2009, 1, 1))):
            result = weekdate.calendar_to_iso_week_date(
                values.make_date(*calendar_date))
            self.assertTrue(isinstance(result, values.ISOWeekDate))
            self.assertTrue(result.get_week_day() == week_date,
                            "%s: %s" % (repr(calendar_date), str(result)))
        # datetime.date is accepted too
        self.assertTrue(weekdate.calendar_to_iso_week_date(
            datetime.date(1985, 4, 12)) == (1985, 15, 5))

    def test_single_implementation(self):
        d = datetime.date(2008, 12, 20)
        for i in range(30):
            date = values.make_date(d.year, d.month, d.day)
            self.assertTrue(weekdate.calendar_to_iso_week_date(d) ==
                            date.get_week_day(), str(d))
            self.assertTrue(date.get_week_day() == d.isocalendar()[:3],
                            str(d))
            d += datetime.timedelta(days=1)
        # the unchecked constructor allows an impossible date
        try:
            weekdate.calendar_to_iso_week_date(
                values.CalendarDate(2013, 2, 29))
            self.fail("2013-02-29 has no week date")
        except errors.OutOfRange as err:
            self.assertTrue(err.field == "day")

    def test_round_trip(self):
        years = list(range(1, 9)) + list(range(1890, 1910)) + \
            list(range(1995, 2035)) + list(range(9990, 9999))
        for year in years:
            for week in range(1, gregorian.week_count(year) + 1):
                for weekday in range(1, 8):
                    date = weekdate.week_date_to_calendar(year, week, weekday)
                    result = weekdate.calendar_to_iso_week_date(date)
                    self.assertTrue(
                        result == (year, week, weekday),
                        "%04i-W%02i-%i: %s" % (year, week, weekday, result))

    def test_week_53_overflow(self):
        # 1950 has only 52 weeks, week 53 is week 1 of 1951
        self.assertTrue(gregorian.week_count(1950) == 52)
        date = weekdate.week_date_to_calendar(1950, 53, 1)
        self.assertTrue(weekdate.calendar_to_iso_week_date(date) ==
                        (1951, 1, 1))

    def test_invalid(self):
        for week in (0, 54, 55, -1):
            try:
                weekdate.week_date_to_calendar(2012, week, 1)
                self.fail("week %i" % week)
            except errors.InvalidWeek as err:
                self.assertTrue(err.field == "week")
                self.assertTrue(isinstance(err, errors.OutOfRange))
        for weekday in (0, 8):
            try:
                weekdate.week_date_to_calendar(2012, 1, weekday)
                self.fail("weekday %i" % weekday)
            except errors.InvalidWeekday as err:
                self.assertTrue(err.field == "weekday")
        for year in (0, 10000):
            try:
                weekdate.week_date_to_calendar(year, 1, 1)
                self.fail("year %i" % year)
            except errors.OutOfRange as err:
                self.assertTrue(err.field == "year")
        # 9999-W53 would land in year 10000
        try:
            weekdate.week_date_to_calendar(9999, 53, 7)
            self.fail("beyond 9999-12-31")
        except errors.OutOfRange:
            pass


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    unittest.main()
