#! /usr/bin/env python
"""ISO8601 Date and Time Parser

This module parses dates, times and combined datetimes written in
ISO 8601:2004 without being told the format in advance.  The following
date forms are recognised::

    YYYY        YYYY-MM         YYYY-MM-DD      YYYYMMDD
    YYYY-DDD    YYYYDDD         (ordinal dates)
    YYYY-Www    YYYYWww         YYYY-Www-D      YYYYWwwD

Times are hh, hhmm, hhmmss, hh:mm or hh:mm:ss, optionally followed by
a decimal fraction of a second (using either '.' or ',') and a UTC
offset of the form Z, +hh, +hhmm or +hh:mm.  Any ASCII character other
than a digit may separate the date from the time, not just 'T'.

YYYYMM is deliberately rejected as it is easily confused with the
truncated YYMMDD form.  Truncated and expanded representations,
fractional hours and minutes, durations and intervals are not
supported.

The simplest way to use the module is through the functions::

    >>> from isoparse import iso8601
    >>> print(iso8601.parse_datetime("1985-W15-5T10:15+04"))
    1985-04-12T10:15:00.000000000+04:00

Errors are always subclasses of :class:`errors.DateTimeError`, itself a
ValueError."""

from . import errors
from . import gregorian
from .basicparser import BasicParser, ParserError
from .values import MAX_HOUR, Offset, make_date, make_datetime
from .weekdate import week_date_to_calendar


DATE_SEPARATOR = "-"
TIME_SEPARATOR = ":"
WEEK_DESIGNATOR = "W"
DECIMAL_SIGNS = ".,"
UTC_DESIGNATOR = "Z"
MINUS_SIGN = "\u2212"
OFFSET_SIGNS = "+-" + MINUS_SIGN
OFFSET_STARTS = UTC_DESIGNATOR + OFFSET_SIGNS
MAX_FRACTION_DIGITS = 9         # nanosecond precision
TIME_FIELDS = ("hour", "minute", "second")


class ISO8601Parser(BasicParser):

    """Parses ISO 8601 representations from a character string

    The require\\_* methods follow the convention of
    :class:`basicparser.BasicParser`, parsing from the current position
    and leaving the parser positioned after the parsed production.  All
    failures are raised as :class:`errors.DateTimeError` with the
    complete source string attached.

    A new parser should be created for each string, see the module
    functions for the normal entry points."""

    def __init__(self, src):
        if isinstance(src, str):
            super(ISO8601Parser, self).__init__(src)
        else:
            raise errors.DateTimeError(
                repr(src), "iso8601 requires character source, not "
                "binary data")

    def require_field(self, ndigits, field):
        """Parses a fixed width numeric *field*

        Raises :class:`errors.InvalidField` if there are not *ndigits*
        ASCII digits at the current position."""
        try:
            return self.require_fixed_digits(ndigits, field)
        except ParserError as err:
            raise errors.InvalidField(
                self.src, field, "expected %i digit %s at [%i]" %
                (ndigits, field, err.pos))

    def require_date_common(self):
        """Parses YYYY, YYYY-MM, YYYY-MM-DD or YYYYMMDD

        Returns a tuple of (year, month, day), missing fields default to
        1.  The values are not range checked.

        This is the fast route for the common calendar forms.  It raises
        a syntactic error (never :class:`errors.OutOfRange`) when it
        can't parse the date so that :meth:`require_date` can go on to
        try the ordinal and week forms, some of which look like the
        start of a calendar date, e.g., 1985102 (YYYYDDD)."""
        if self.remaining() < 4:
            raise errors.TooShort(self.src, "date string too short")
        year = self.require_field(4, "year")
        if self.match_end():
            return year, 1, 1
        extended = self.parse_one(DATE_SEPARATOR) is not None
        month = self.require_field(2, "month")
        if self.match_end():
            if extended:
                return year, month, 1
            raise errors.InvalidField(
                self.src, "day", "YYYYMM is not a valid date")
        if extended:
            if self.parse_one(DATE_SEPARATOR) is None:
                raise errors.InvalidSeparator(self.src, "invalid separator")
        elif self.match_one(DATE_SEPARATOR):
            raise errors.InconsistentSeparator(
                self.src, "inconsistent date separator")
        day = self.require_field(2, "day")
        return year, month, day

    def require_date_uncommon(self):
        """Parses YYYY[-]Www[[-]D] or YYYY[-]DDD

        Returns a tuple of (year, month, day).  Week dates are converted
        to calendar dates, so the year returned may differ from the ISO
        year in the text.  Ordinal days and week numbers are validated
        here, raising :class:`errors.OutOfRange`."""
        if self.remaining() < 4:
            raise errors.TooShort(self.src, "date string too short")
        year = self.require_field(4, "year")
        extended = self.parse_one(DATE_SEPARATOR) is not None
        if self.parse_one(WEEK_DESIGNATOR):
            week = self.require_field(2, "week")
            weekday = 1
            if self.match_one(DATE_SEPARATOR):
                if not extended:
                    raise errors.InconsistentSeparator(
                        self.src, "inconsistent date separator")
                self.next_char()
                weekday = self.require_field(1, "weekday")
            elif self.match_digit():
                if extended:
                    raise errors.InconsistentSeparator(
                        self.src, "inconsistent date separator")
                weekday = self.require_field(1, "weekday")
            return week_date_to_calendar(
                year, week, weekday).get_calendar_day()
        # ordinal dates, YYYYDDD or YYYY-DDD
        if self.remaining() < 3:
            raise errors.InvalidField(self.src, "ordinal day",
                                      "invalid ordinal day")
        if self.remaining() == 4:
            # a 4 character remainder is MMDD or MM-D in disguise
            third_last = self.src[-3]
            if extended and third_last != DATE_SEPARATOR:
                raise errors.InconsistentSeparator(
                    self.src, "inconsistent date separator")
            elif not extended and third_last == DATE_SEPARATOR:
                raise errors.InconsistentSeparator(
                    self.src, "inconsistent date separator")
        ordinal_day = self.require_field(3, "ordinal day")
        year_length = 366 if gregorian.leap_year(year) else 365
        if ordinal_day < 1 or ordinal_day > year_length:
            raise errors.OutOfRange(
                self.src, "ordinal day", "invalid ordinal day for given year")
        return make_date(year, 1, 1).offset(
            days=ordinal_day - 1).get_calendar_day()

    def require_date(self):
        """Parses any of the supported date forms

        Returns a tuple of (year, month, day).  The common forms are
        tried first, if they fail with a syntax error the parser is
        rewound and the uncommon (ordinal and week) forms are tried
        instead.  Range errors are never retried.  If both fail the
        error from the uncommon forms is raised."""
        start = self.pos
        try:
            return self.require_date_common()
        except errors.OutOfRange:
            raise
        except errors.DateTimeError:
            self.setpos(start)
        return self.require_date_uncommon()

    def require_offset(self):
        """Parses a UTC offset that runs to the end of the source

        Accepts Z, +hh, +hhmm and +hh:mm where the sign may also be an
        ASCII hyphen or the Unicode minus sign U+2212.  Returns an
        :class:`values.Offset`, zero offsets always return
        :attr:`values.Offset.UTC` whatever the sign."""
        if self.match_end():
            raise errors.TooShort(self.src, "missing UTC offset")
        if self.parse_one(UTC_DESIGNATOR):
            if not self.match_end():
                raise errors.TrailingComponents(
                    self.src, "unexpected text after Z")
            return Offset.UTC
        sign = self.parse_one(OFFSET_SIGNS)
        if sign is None:
            raise errors.InvalidSign(
                self.src, "unrecognized UTC offset sign %r" % self.the_char)
        length = self.remaining()
        if length not in (2, 4, 5):
            raise errors.InvalidLength(
                self.src, "UTC offset must be +hh, +hhmm or +hh:mm")
        hour = self.require_field(2, "offset hour")
        minute = 0
        if length == 5:
            if self.parse_one(TIME_SEPARATOR) is None:
                raise errors.InvalidSeparator(
                    self.src, "invalid UTC offset separator")
            minute = self.require_field(2, "offset minute")
        elif length == 4:
            minute = self.require_field(2, "offset minute")
        if hour > MAX_HOUR or minute > 59:
            raise errors.OffsetOutOfRange(
                self.src, "offset component out of valid range")
        if hour == 0 and minute == 0:
            return Offset.UTC
        seconds = hour * 3600 + minute * 60
        if seconds > Offset.MAX_SECONDS:
            raise errors.OffsetOutOfRange(
                self.src, "offset must be within 23:59 of UTC")
        if sign == "+":
            return Offset.from_seconds(seconds)
        else:
            return Offset.from_seconds(-seconds)

    def require_time(self):
        """Parses a time, with optional fraction and UTC offset

        Returns a tuple of (hour, minute, second, nanosecond, offset).
        The time must run to the end of the source.

        The ':' separator is detected after the hour and, once used, is
        required between minute and second too.  A UTC offset may follow
        the hour, minute or second (or fraction).  Fractions are
        truncated (not rounded) to nanoseconds.

        Hour 24 is allowed with zero minutes, seconds and fraction, it
        is returned as hour 24 and it is up to the caller to roll it
        over to the next day."""
        if self.remaining() < 2:
            raise errors.TooShort(self.src, "time string too short")
        extended = self.peek(3)[2:] == TIME_SEPARATOR
        fields = [0, 0, 0]
        nanosecond = 0
        offset = Offset.UNSPECIFIED
        for i, field in enumerate(TIME_FIELDS):
            if i:
                if self.match_end() or self.match_one(OFFSET_STARTS):
                    break
                if extended:
                    if self.match_digit():
                        raise errors.InconsistentSeparator(
                            self.src, "inconsistent time separator")
                    elif self.parse_one(TIME_SEPARATOR) is None:
                        break
                elif self.match_one(TIME_SEPARATOR):
                    raise errors.InconsistentSeparator(
                        self.src, "inconsistent time separator")
            fields[i] = self.require_field(2, field)
        else:
            if self.parse_one(DECIMAL_SIGNS):
                digits = self.parse_digit_run()
                if not digits:
                    raise errors.InvalidField(
                        self.src, "fraction",
                        "expected digits after decimal sign")
                digits = digits[:MAX_FRACTION_DIGITS]
                nanosecond = int(digits.ljust(MAX_FRACTION_DIGITS, "0"))
        if self.match_one(OFFSET_STARTS):
            offset = self.require_offset()
        if not self.match_end():
            raise errors.TrailingComponents(self.src, "unused components")
        hour, minute, second = fields
        if hour == MAX_HOUR and (minute or second or nanosecond):
            raise errors.InvalidMidnight(self.src)
        return hour, minute, second, nanosecond, offset

    def require_date_time_separator(self):
        """Parses the character between a date and a time

        Any ASCII character other than a digit is allowed."""
        c = self.the_char
        if c is None or c in self.digits or ord(c) > 0x7F:
            raise errors.InvalidSeparator(
                self.src, "date/time separator must be a non-numeric "
                "ASCII character")
        self.next_char()
        return c

    def require_datetime(self):
        """Parses a date with an optional time

        Returns a validated :class:`values.CalendarDatetime`.  If there
        is text after the date it must be a separator followed by a
        complete time.  A time of 24:00 is returned as midnight at the
        start of the following day."""
        year, month, day = self.require_date()
        hour = minute = second = nanosecond = 0
        offset = Offset.UNSPECIFIED
        if not self.match_end():
            self.require_date_time_separator()
            hour, minute, second, nanosecond, offset = self.require_time()
        if hour == MAX_HOUR:
            # validate the date as written before rolling it over
            year, month, day = make_date(year, month, day).offset(
                days=1).get_calendar_day()
            hour = 0
        return make_datetime(year, month, day, hour, minute, second,
                             nanosecond, offset)


def parse_date_components(src):
    """Parses the date at the start of *src*

    Returns a tuple of ((year, month, day), consumed) where consumed
    is the number of characters of *src* that made up the date.  The
    components are not range checked."""
    p = ISO8601Parser(src)
    date = p.require_date()
    return date, p.pos


def parse_date(src):
    """Parses a date with no time

    Returns a :class:`values.CalendarDatetime` at midnight with an
    unspecified offset.  Raises :class:`errors.TrailingComponents` if
    anything follows the date."""
    (year, month, day), consumed = parse_date_components(src)
    if consumed < len(src):
        raise errors.TrailingComponents(
            src, "string contains unknown ISO components")
    return make_datetime(year, month, day)


def parse_time_components(src):
    """Parses a time with no date

    Returns a tuple of ((hour, minute, second, nanosecond, offset),
    consumed).  The time must make up the whole of *src*."""
    p = ISO8601Parser(src)
    result = p.require_time()
    return result, p.pos


def parse_time(src):
    """Parses a time with no date

    Returns a tuple of (hour, minute, second, nanosecond, offset) where
    offset is an :class:`values.Offset`.

    Only the shape of the fields is checked, not their values: hour
    24 is allowed for midnight and is not rolled over, and
    "23:99:99" is returned as (23, 99, 99, 0, Offset.UNSPECIFIED).
    Pass the fields to :func:`values.make_datetime`, or parse with
    :func:`parse_datetime`, to get range checked values."""
    result, consumed = parse_time_components(src)
    return result


def parse_offset(src):
    """Parses a UTC offset: Z, +hh, +hhmm or +hh:mm

    Returns an :class:`values.Offset`."""
    p = ISO8601Parser(src)
    return p.require_offset()


def parse_datetime(src):
    """Parses a date with an optional time

    Returns a :class:`values.CalendarDatetime`.  When *src* contains
    only a date the time is midnight and the offset is unspecified."""
    p = ISO8601Parser(src)
    return p.require_datetime()


def apply_offset(value, offset):
    """Returns *value* with its offset replaced by *offset*

    value
        A :class:`values.CalendarDatetime`

    offset
        An :class:`values.Offset` or a string to parse with
        :func:`parse_offset`.

    The year, month, day and time fields are not changed."""
    if isinstance(offset, str):
        offset = parse_offset(offset)
    return value.with_offset(offset)
