#! /usr/bin/env python

"""Runs unit tests on the isoparse.gregorian module"""

import datetime
import logging
import unittest

from isoparse import gregorian


def suite():
    return unittest.TestSuite((
        unittest.defaultTestLoader.loadTestsFromTestCase(CalendarTests),
    ))


LEAP_YEARS = (1804, 1856, 1892, 1952, 1984, 2000, 2008, 2012, 2068, 2096)
NON_LEAP_YEARS = (1803, 1855, 1891, 1900, 1953, 1985, 2009, 2011, 2067,
                  2097, 2100)


class CalendarTests(unittest.TestCase):

    def test_leap_year(self):
        for year in LEAP_YEARS:
            self.assertTrue(gregorian.leap_year(year), "%i is leap" % year)
        for year in NON_LEAP_YEARS:
            self.assertFalse(gregorian.leap_year(year),
                             "%i is not leap" % year)

    def test_days_in_month(self):
        self.assertTrue(gregorian.days_in_month(2012, 2) == 29)
        self.assertTrue(gregorian.days_in_month(2013, 2) == 28)
        self.assertTrue(gregorian.days_in_month(2000, 2) == 29)
        self.assertTrue(gregorian.days_in_month(1900, 2) == 28)
        self.assertTrue(gregorian.days_in_month(2014, 4) == 30)
        self.assertTrue(gregorian.days_in_month(2014, 12) == 31)
        for year in LEAP_YEARS + NON_LEAP_YEARS:
            total = 0
            for month in range(1, 13):
                total += gregorian.days_in_month(year, month)
            self.assertTrue(total == (366 if year in LEAP_YEARS else 365))

    def test_days_before_year(self):
        self.assertTrue(gregorian.days_before_year(1) == 0)
        self.assertTrue(gregorian.days_before_year(5) == 1461)
        self.assertTrue(gregorian.days_before_year(101) == 36524)
        self.assertTrue(gregorian.days_before_year(401) == 146097)

    def test_days_before_month(self):
        self.assertTrue(gregorian.days_before_month(2013, 1) == 0)
        self.assertTrue(gregorian.days_before_month(2012, 2) == 31)
        self.assertTrue(gregorian.days_before_month(2013, 3) == 59)
        self.assertTrue(gregorian.days_before_month(2012, 3) == 60)
        self.assertTrue(gregorian.days_before_month(2012, 12) == 335)

    def test_ordinal_from_date(self):
        self.assertTrue(gregorian.ordinal_from_date(1, 1, 1) == 1)
        for year, month, day in ((1, 12, 31), (4, 2, 29), (1900, 3, 1),
                                 (1985, 4, 12), (2000, 12, 31),
                                 (9999, 12, 31)):
            self.assertTrue(
                gregorian.ordinal_from_date(year, month, day) ==
                datetime.date(year, month, day).toordinal(),
                "%04i-%02i-%02i" % (year, month, day))

    def test_date_from_ordinal(self):
        last = datetime.date(9999, 12, 31).toordinal()
        for ordinal in range(1, last + 1, 97):
            d = datetime.date.fromordinal(ordinal)
            self.assertTrue(gregorian.date_from_ordinal(ordinal) ==
                            (d.year, d.month, d.day), str(d))
        # the last day of every year, including each quad century
        for year in range(1, 10000):
            ordinal = gregorian.ordinal_from_date(year, 12, 31)
            self.assertTrue(gregorian.date_from_ordinal(ordinal) ==
                            (year, 12, 31), "%i-12-31" % year)
            self.assertTrue(gregorian.date_from_ordinal(ordinal + 1) ==
                            (year + 1, 1, 1), "%i-01-01" % (year + 1))

    def test_iso_weekday(self):
        # 0001-01-01 was a Monday
        self.assertTrue(gregorian.iso_weekday(1, 1, 1) == 1)
        # 1985-04-12 was a Friday
        self.assertTrue(gregorian.iso_weekday(1985, 4, 12) == 5)
        # 2010-01-03 was a Sunday
        self.assertTrue(gregorian.iso_weekday(2010, 1, 3) == 7)
        d = datetime.date(2000, 1, 1)
        for i in range(400):
            self.assertTrue(gregorian.iso_weekday(d.year, d.month, d.day) ==
                            d.isoweekday(), str(d))
            d += datetime.timedelta(days=1)

    def test_week_count(self):
        week53 = set((1998, 2004, 2009, 2015, 2020, 2026, 2032, 2037, 2043,
                      2048))
        for year in range(1998, 2050):
            if year in week53:
                self.assertTrue(gregorian.week_count(year) == 53,
                                "%i has 53 weeks" % year)
            else:
                self.assertTrue(gregorian.week_count(year) == 52,
                                "%i has 52 weeks" % year)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    unittest.main()
