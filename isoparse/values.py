#! /usr/bin/env python
"""Value types produced by the ISO 8601 parser

All values are immutable once constructed.  The constructors do not
check their arguments, use :func:`make_date` and :func:`make_datetime`
to create validated instances."""

import datetime

from . import errors
from . import gregorian


MIN_YEAR = 1
MAX_YEAR = 9999
MAX_HOUR = 24       # 24:00 is midnight at the end of the day
MAX_NANOSECOND = 999999999


class SortableMixin(object):

    """Mixin class for handling comparisons

    Classes must define a method :meth:`sortkey` which returns a
    sortable key value representing the instance.

    Derived classes may optionally override :meth:`otherkey` to control
    which other objects they can be compared with.

    This mixin then adds implementations for all of the comparison
    methods: __eq__, __ne__, __lt__, __le__, __gt__, __ge__."""

    def sortkey(self):
        """Returns a value to use as a key for sorting.

        By default returns NotImplemented.  This value causes the
        comparison functions to also return NotImplemented."""
        return NotImplemented

    def otherkey(self, other):
        """Returns the key to use when comparing *other* with self

        By default returns other.sortkey() if *other* is an instance of
        the same class as *self*, otherwise NotImplemented."""
        if isinstance(other, self.__class__):
            return other.sortkey()
        else:
            return NotImplemented

    def _keys(self, other):
        a = self.sortkey()
        b = self.otherkey(other)
        if a is NotImplemented or b is NotImplemented:
            return None
        return a, b

    def __eq__(self, other):
        keys = self._keys(other)
        if keys is None:
            return NotImplemented
        return keys[0] == keys[1]

    def __ne__(self, other):
        keys = self._keys(other)
        if keys is None:
            return NotImplemented
        return keys[0] != keys[1]

    def __lt__(self, other):
        keys = self._keys(other)
        if keys is None:
            return NotImplemented
        return keys[0] < keys[1]

    def __le__(self, other):
        keys = self._keys(other)
        if keys is None:
            return NotImplemented
        return keys[0] <= keys[1]

    def __gt__(self, other):
        keys = self._keys(other)
        if keys is None:
            return NotImplemented
        return keys[0] > keys[1]

    def __ge__(self, other):
        keys = self._keys(other)
        if keys is None:
            return NotImplemented
        return keys[0] >= keys[1]

    def __hash__(self):
        return hash(self.sortkey())


class CalendarDate(SortableMixin):

    """A complete calendar date in the range 0001-01-01 to 9999-12-31

    Instances are created by :func:`make_date` (or as part of
    :func:`make_datetime`), which guarantees that the day never exceeds
    the length of the month.  Instances are immutable and can be used
    as dictionary keys."""

    def __init__(self, year, month, day):
        #: the year, 1..9999
        self.year = year
        #: the month, 1..12
        self.month = month
        #: the day, 1..31
        self.day = day

    def get_calendar_day(self):
        """Returns a tuple of (year, month, day)"""
        return self.year, self.month, self.day

    def get_ordinal_day(self):
        """Returns a tuple of (year, ordinal_day), 1st Jan being day 1"""
        return (self.year,
                gregorian.days_before_month(self.year, self.month) + self.day)

    def get_absolute_day(self):
        """Returns the day number of this date, 0001-01-01 being 1"""
        return gregorian.ordinal_from_date(self.year, self.month, self.day)

    def iso_weekday(self):
        """Returns the day of the week, Monday is 1 and Sunday is 7"""
        return gregorian.iso_weekday(self.year, self.month, self.day)

    def get_week_day(self):
        """Returns an :class:`ISOWeekDate` for this date

        Near the start and end of the year the ISO year may differ from
        :attr:`year`."""
        iso_year, iso_week, _ = datetime.date(
            self.year, self.month, self.day).isocalendar()
        return ISOWeekDate(iso_year, iso_week, self.iso_weekday())

    def offset(self, days=0):
        """Returns a new date *days* after (or before) this one

        The result is validated, stepping outside the supported range
        raises :class:`errors.OutOfRange`."""
        year, month, day = gregorian.date_from_ordinal(
            self.get_absolute_day() + days)
        return make_date(year, month, day)

    def sortkey(self):
        return (self.year, self.month, self.day)

    def __str__(self):
        return "%04i-%02i-%02i" % (self.year, self.month, self.day)

    def __repr__(self):
        return "CalendarDate(year=%i, month=%i, day=%i)" % (
            self.year, self.month, self.day)


class ClockTime(SortableMixin):

    """A time of day with nanosecond precision

    The hour may be 24 only when all other fields are 0, representing
    midnight at the end of the day."""

    def __init__(self, hour=0, minute=0, second=0, nanosecond=0):
        #: the hour, 0..24
        self.hour = hour
        #: the minute, 0..59
        self.minute = minute
        #: the second, 0..59
        self.second = second
        #: the fraction of the second, 0..999999999
        self.nanosecond = nanosecond

    def get_time(self):
        """Returns a tuple of (hour, minute, second, nanosecond)"""
        return self.hour, self.minute, self.second, self.nanosecond

    def get_total_seconds(self):
        """Returns the number of whole seconds since midnight"""
        return self.hour * 3600 + self.minute * 60 + self.second

    def sortkey(self):
        return self.get_time()

    def __str__(self):
        return "%02i:%02i:%02i.%09i" % self.get_time()

    def __repr__(self):
        return ("ClockTime(hour=%i, minute=%i, second=%i, nanosecond=%i)" %
                self.get_time())


class Offset(object):

    """A UTC offset, or the absence of one

    There are two kinds of Offset.  :attr:`UNSPECIFIED` represents text
    that contained no offset at all, what that means (local time, UTC,
    something else) is left to the caller.  All other instances are
    explicit offsets with a whole number of :attr:`seconds` east of
    UTC.

    An explicit offset of zero is always equal to :attr:`UTC`, whatever
    sign was used in the original text.  Offsets are limited to 23:59
    in either direction."""

    #: the largest offset magnitude, in seconds (23:59)
    MAX_SECONDS = 23 * 3600 + 59 * 60

    #: the unspecified offset, set below
    UNSPECIFIED = None

    #: the canonical UTC offset, set below
    UTC = None

    def __init__(self, seconds=None):
        if seconds is not None and abs(seconds) > self.MAX_SECONDS:
            raise errors.OffsetOutOfRange(
                "%i seconds" % seconds, "offset must be within 23:59 of UTC")
        #: seconds east of UTC or None if unspecified
        self.seconds = seconds

    @classmethod
    def from_seconds(cls, seconds):
        """Returns an explicit offset, zero is collapsed to :attr:`UTC`"""
        if seconds == 0:
            return cls.UTC
        return cls(seconds)

    def is_specified(self):
        """True if this is an explicit offset"""
        return self.seconds is not None

    def is_utc(self):
        """True if this is an explicit offset of zero"""
        return self.seconds == 0

    def get_zone3(self):
        """Returns a tuple of (zdirection, zhour, zminute)

        zdirection is None for the unspecified offset, 0 for UTC and +1
        or -1 for offsets East or West of UTC.  zhour and zminute are
        never negative."""
        if self.seconds is None:
            return None, None, None
        elif self.seconds == 0:
            return 0, 0, 0
        elif self.seconds > 0:
            zdirection = 1
        else:
            zdirection = -1
        zminutes = abs(self.seconds) // 60
        return zdirection, zminutes // 60, zminutes % 60

    def to_tzinfo(self):
        """Returns a :class:`datetime.timezone` or None if unspecified"""
        if self.seconds is None:
            return None
        elif self.seconds == 0:
            return datetime.timezone.utc
        return datetime.timezone(datetime.timedelta(seconds=self.seconds))

    def __eq__(self, other):
        if isinstance(other, Offset):
            return self.seconds == other.seconds
        return NotImplemented

    def __ne__(self, other):
        if isinstance(other, Offset):
            return self.seconds != other.seconds
        return NotImplemented

    def __hash__(self):
        return hash(self.seconds)

    def __str__(self):
        zdirection, zhour, zminute = self.get_zone3()
        if zdirection is None:
            return ""
        elif zdirection == 0:
            return "Z"
        return "%s%02i:%02i" % ("+" if zdirection > 0 else "-", zhour,
                                zminute)

    def __repr__(self):
        if self.seconds is None:
            return "Offset.UNSPECIFIED"
        elif self.seconds == 0:
            return "Offset.UTC"
        return "Offset(%i)" % self.seconds


Offset.UNSPECIFIED = Offset()
Offset.UTC = Offset(0)


class CalendarDatetime(SortableMixin):

    """A calendar date, a time of day and a UTC offset

    The output of the parser.  The time never has hour 24, the parser
    rolls 24:00 over into the start of the following day.

    Values are only ordered against other values with the same
    offset."""

    def __init__(self, date, time, offset=Offset.UNSPECIFIED):
        #: a :class:`CalendarDate`
        self.date = date
        #: a :class:`ClockTime`
        self.time = time
        #: an :class:`Offset`
        self.offset = offset

    @property
    def year(self):
        return self.date.year

    @property
    def month(self):
        return self.date.month

    @property
    def day(self):
        return self.date.day

    @property
    def hour(self):
        return self.time.hour

    @property
    def minute(self):
        return self.time.minute

    @property
    def second(self):
        return self.time.second

    @property
    def nanosecond(self):
        return self.time.nanosecond

    def get_calendar_time_point(self):
        """Returns a tuple of (year, month, day, hour, minute, second,
        nanosecond)"""
        return self.date.get_calendar_day() + self.time.get_time()

    def with_offset(self, offset):
        """Returns a new value with the same fields and *offset*

        The date and time are unchanged, this is a re-labelling of the
        value and not a conversion to a different zone."""
        return type(self)(self.date, self.time, offset)

    def to_datetime(self):
        """Returns an equivalent :class:`datetime.datetime`

        Nanoseconds are truncated to microseconds.  The result is naive
        if the offset is unspecified."""
        return datetime.datetime(
            self.year, self.month, self.day, self.hour, self.minute,
            self.second, self.nanosecond // 1000, self.offset.to_tzinfo())

    def sortkey(self):
        return self.get_calendar_time_point()

    def otherkey(self, other):
        if isinstance(other, self.__class__) and self.offset == other.offset:
            return other.sortkey()
        return NotImplemented

    def __hash__(self):
        return hash((self.sortkey(), self.offset))

    def __str__(self):
        return "%sT%s%s" % (self.date, self.time, self.offset)

    def __repr__(self):
        return "CalendarDatetime(%r, %r, %r)" % (self.date, self.time,
                                                 self.offset)


class ISOWeekDate(SortableMixin):

    """A date expressed as ISO year, week and weekday

    Week 1 is the week containing 4th January, weeks start on Monday
    (weekday 1).  As a result :attr:`iso_year` is not always the
    Gregorian year of the same day, e.g., 2009-W53-7 is 2010-01-03."""

    def __init__(self, iso_year, iso_week, iso_weekday):
        self.iso_year = iso_year
        self.iso_week = iso_week
        self.iso_weekday = iso_weekday

    def get_week_day(self):
        """Returns a tuple of (iso_year, iso_week, iso_weekday)"""
        return self.iso_year, self.iso_week, self.iso_weekday

    def sortkey(self):
        return self.get_week_day()

    def otherkey(self, other):
        if isinstance(other, tuple):
            return other
        return super(ISOWeekDate, self).otherkey(other)

    def __str__(self):
        return "%04i-W%02i-%i" % self.get_week_day()

    def __repr__(self):
        return ("ISOWeekDate(iso_year=%i, iso_week=%i, iso_weekday=%i)" %
                self.get_week_day())


def _check_range(value, low, high, field, src):
    if value < low or value > high:
        raise errors.OutOfRange(src, field, "%s out of valid range" % field)


def make_date(year, month, day):
    """Returns a validated :class:`CalendarDate`

    Raises :class:`errors.OutOfRange` if any field is outside its
    range, days are checked against the actual length of the month."""
    src = "%04i-%02i-%02i" % (year, month, day)
    _check_range(year, MIN_YEAR, MAX_YEAR, "year", src)
    _check_range(month, 1, 12, "month", src)
    _check_range(day, 1, gregorian.days_in_month(year, month), "day", src)
    return CalendarDate(year, month, day)


def make_datetime(year, month, day, hour=0, minute=0, second=0,
                  nanosecond=0, offset=Offset.UNSPECIFIED):
    """Returns a validated :class:`CalendarDatetime`

    Fields are checked in order from year to nanosecond and the first
    failure raises :class:`errors.OutOfRange` naming the field.  Nothing
    is ever rolled over, day 32 is an error and not the 1st of the
    following month.

    Hour 24 passes the range check but only with all other time fields
    zero, the caller is responsible for rolling it over to the next
    day."""
    src = "%04i-%02i-%02iT%02i:%02i:%02i.%09i%s" % (
        year, month, day, hour, minute, second, nanosecond, offset)
    _check_range(year, MIN_YEAR, MAX_YEAR, "year", src)
    _check_range(month, 1, 12, "month", src)
    _check_range(day, 1, gregorian.days_in_month(year, month), "day", src)
    _check_range(hour, 0, MAX_HOUR, "hour", src)
    _check_range(minute, 0, 59, "minute", src)
    _check_range(second, 0, 59, "second", src)
    _check_range(nanosecond, 0, MAX_NANOSECOND, "nanosecond", src)
    if hour == MAX_HOUR and (minute or second or nanosecond):
        raise errors.InvalidMidnight(src)
    return CalendarDatetime(CalendarDate(year, month, day),
                            ClockTime(hour, minute, second, nanosecond),
                            offset)
