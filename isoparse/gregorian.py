#! /usr/bin/env python
"""Proleptic Gregorian calendar arithmetic

Days are counted using an ordinal in which day 1 is 0001-01-01, the
same convention used by :meth:`datetime.date.toordinal`.  None of these
functions raise errors, they are total over the documented ranges and
callers are expected to validate their results."""

MONTH_SIZES = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
MONTH_SIZES_LEAPYEAR = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
MONTH_OFFSETS = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def leap_year(year):
    """leap_year returns True if *year* is a leap year and False otherwise.

    Note that leap years famously fall on all years that divide by 4
    except those that divide by 100 but including those that divide
    by 400."""
    if year % 4:            # doesn't divide by 4
        return False
    elif year % 100:        # doesn't divide by 100
        return True
    elif year % 400:        # doesn't divide by 400
        return False
    else:
        return True


def days_in_month(year, month):
    """Returns the number of days in *month* of *year*"""
    if leap_year(year):
        return MONTH_SIZES_LEAPYEAR[month - 1]
    else:
        return MONTH_SIZES[month - 1]


def days_before_year(year):
    """Returns the number of days before 1st January of *year*

    There are, by definition, 0 days before year 1."""
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400


def days_before_month(year, month):
    """Returns the number of days in *year* before the 1st of *month*"""
    if month > 2 and leap_year(year):
        return MONTH_OFFSETS[month - 1] + 1
    else:
        return MONTH_OFFSETS[month - 1]


def ordinal_from_date(year, month, day):
    """Returns the day number of the given date, 0001-01-01 being 1"""
    return days_before_year(year) + days_before_month(year, month) + day


def date_from_ordinal(ordinal):
    """Returns a tuple of (year, month, day) for a day number

    The inverse of :func:`ordinal_from_date`."""
    quad_century = 146097   # 365*400+97 always holds
    century = 36524         # 365*100+24 excludes centennial leap
    quad_year = 1461        # 365*4+1    includes leap
    n = ordinal - 1
    year = 400 * (n // quad_century) + 1
    n = n % quad_century
    ncenturies = n // century
    n = n % century
    nquads = n // quad_year
    n = n % quad_year
    nyears = n // 365
    n = n % 365
    year = year + 100 * ncenturies + 4 * nquads + nyears
    if ncenturies == 4 or nyears == 4:
        # the extra day at the end of a quad century or quad year
        return year - 1, 12, 31
    if leap_year(year):
        msizes = MONTH_SIZES_LEAPYEAR
    else:
        msizes = MONTH_SIZES
    day = n + 1
    month = 1
    for m in msizes:
        if day > m:
            day = day - m
            month = month + 1
        else:
            break
    return year, month, day


def iso_weekday(year, month, day):
    """Returns the day of week 1-7

    1 being Monday (and 7 Sunday) for the given year, month and day"""
    weekday = ordinal_from_date(year, month, day) % 7
    if weekday == 0:
        return 7
    return weekday


def week_count(year):
    """Week count returns the number of calendar weeks in a year.

    Most years have 52 weeks of course, but if the year begins on a
    Thursday or a leap year begins on a Wednesday then it has 53."""
    weekday = iso_weekday(year, 1, 1)
    if weekday == 4:
        return 53
    elif weekday == 3 and leap_year(year):
        return 53
    else:
        return 52
