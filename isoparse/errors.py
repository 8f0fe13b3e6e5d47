#! /usr/bin/env python
"""Exceptions raised when parsing ISO 8601 representations"""


class DateTimeError(ValueError):

    """Base error for all parsing and validation failures

    src
        The text (or a rendering of the values) that could not be
        parsed.

    reason
        An optional human readable explanation.

    DateTimeError is a subclass of ValueError so callers that only care
    about bad input can catch ValueError."""

    def __init__(self, src, reason=None):
        #: the offending text
        self.src = src
        #: the reason for the failure (may be None)
        self.reason = reason
        if reason:
            msg = "cannot parse %r: %s" % (src, reason)
        else:
            msg = "cannot parse %r" % (src, )
        super(DateTimeError, self).__init__(msg)


class TooShort(DateTimeError):

    """Raised when the input is shorter than the smallest valid form"""
    pass


class InvalidSeparator(DateTimeError):

    """Raised when an unexpected separator character is found"""
    pass


class InconsistentSeparator(InvalidSeparator):

    """Raised when basic and extended separators are mixed

    For example, 2014-0423 uses a hyphen between the year and the month
    but not between the month and the day."""
    pass


class FieldError(DateTimeError):

    """Base error for failures attributed to a single named field

    field
        The name of the field, e.g., "month" or "offset hour"."""

    def __init__(self, src, field, reason=None):
        #: the name of the offending field
        self.field = field
        if reason is None:
            reason = "invalid %s" % field
        super(FieldError, self).__init__(src, reason)


class InvalidField(FieldError):

    """Raised when a field is not made of the expected digits"""
    pass


class InvalidSign(InvalidField):

    """Raised when a UTC offset does not start with Z, + or -"""

    def __init__(self, src, reason=None):
        super(InvalidSign, self).__init__(src, "offset sign", reason)


class InvalidLength(InvalidField):

    """Raised when a UTC offset is not one of the permitted lengths"""

    def __init__(self, src, reason=None):
        super(InvalidLength, self).__init__(src, "offset", reason)


class OutOfRange(FieldError):

    """Raised when a well-formed field has an impossible value

    Month 13, day 32 and minute 60 are all examples.  Fields are never
    rolled over into the next unit."""
    pass


class OffsetOutOfRange(OutOfRange):

    """Raised when a UTC offset's hour or minute is out of range"""

    def __init__(self, src, reason=None):
        super(OffsetOutOfRange, self).__init__(src, "offset", reason)


class InvalidWeek(OutOfRange):

    """Raised when an ISO week number is outside 1..53"""

    def __init__(self, src, reason=None):
        super(InvalidWeek, self).__init__(src, "week", reason)


class InvalidWeekday(OutOfRange):

    """Raised when an ISO weekday is outside 1..7"""

    def __init__(self, src, reason=None):
        super(InvalidWeekday, self).__init__(src, "weekday", reason)


class InvalidMidnight(OutOfRange):

    """Raised when hour 24 is used with a non-zero minute, second or
    fraction"""

    def __init__(self, src, reason=None):
        if reason is None:
            reason = "hour 24 requires zero minutes, seconds and fraction"
        super(InvalidMidnight, self).__init__(src, "hour", reason)


class TrailingComponents(DateTimeError):

    """Raised when text remains after a complete value was parsed"""
    pass
