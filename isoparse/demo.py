#! /usr/bin/env python
"""Command line front end for the ISO 8601 parser

Run as a module to parse the strings given on the command line::

    python -m isoparse.demo 1985-W15-5T10:15+04 2009-W53-7

Each value is printed in extended format, one per line.  Strings that
can't be parsed are logged as errors and the exit status is 1.  With
-f a table of all the supported formats is printed instead."""

import logging
import sys

from optparse import OptionParser

from . import errors
from . import iso8601
from .info import title


#: sample strings for each supported format, dates first
FORMATS = [
    ("YYYYMMDD", "19850412"),
    ("YYYY-MM-DD", "1985-04-12"),
    ("YYYY-MM", "1985-04"),
    ("YYYY", "1985"),
    ("YYYYDDD", "1985102"),
    ("YYYY-DDD", "1985-102"),
    ("YYYYWwwD", "1985W155"),
    ("YYYY-Www-D", "1985-W15-5"),
    ("YYYYWww", "1985W15"),
    ("YYYY-Www", "1985-W15"),
    ("YYYYMMDDThhmmss", "19850412T101530"),
    ("YYYYMMDDThhmmssZ", "19850412T101530Z"),
    ("YYYYMMDDThhmmss+hhmm", "19850412T101530+0400"),
    ("YYYYMMDDThhmmss+hh", "19850412T101530+04"),
    ("YYYY-MM-DDThh:mm:ss", "1985-04-12T10:15:30"),
    ("YYYY-MM-DDThh:mm:ssZ", "1985-04-12T10:15:30Z"),
    ("YYYY-MM-DDThh:mm:ss+hh:mm", "1985-04-12T10:15:30+04:00"),
    ("YYYY-MM-DDThh:mm:ss+hh", "1985-04-12T10:15:30+04"),
    ("YYYYMMDDThhmm", "19850412T1015"),
    ("YYYY-MM-DDThh:mm", "1985-04-12T10:15"),
    ("YYYYDDDThhmmZ", "1985102T1015Z"),
    ("YYYY-DDDThh:mmZ", "1985-102T10:15Z"),
    ("YYYYWwwDThhmm+hhmm", "1985W155T1015+0400"),
    ("YYYY-Www-DThh:mm+hh", "1985-W15-5T10:15+04"),
]


def print_formats(out):
    """Writes a table of :data:`FORMATS` to the file-like *out*

    The three columns are the format, the sample string and the result
    of parsing it with :func:`iso8601.parse_datetime`."""
    row = "%25s\t%25s\t%40s\n"
    out.write(row % ("format", "string", "result"))
    out.write(row % ("------", "------", "------"))
    for format, sample in FORMATS:
        out.write(row % (format, sample, iso8601.parse_datetime(sample)))


PARSERS = {
    'datetime': iso8601.parse_datetime,
    'date': iso8601.parse_date,
    'time': iso8601.parse_time,
}


def format_time(result):
    hour, minute, second, nanosecond, offset = result
    return "%02i:%02i:%02i.%09i%s" % (hour, minute, second, nanosecond,
                                      offset)


def main(argv=None, out=None):
    """Runs the command line tool, returning the exit status

    argv
        The arguments, defaults to sys.argv[1:]

    out
        File-like object for the results, defaults to sys.stdout"""
    if out is None:
        out = sys.stdout
    parser = OptionParser(usage="%prog [options] string...",
                          version=title)
    parser.add_option("-m", "--mode", dest="mode", default="datetime",
                      type="choice", choices=sorted(PARSERS.keys()),
                      help="parse each string as a date, time or "
                      "datetime (default)")
    parser.add_option("-z", "--assume-offset", dest="offset",
                      help="UTC offset for values that don't specify one")
    parser.add_option("-f", "--formats", action="store_true",
                      dest="formats", default=False,
                      help="print the table of supported formats")
    parser.add_option("-v", action="count", dest="logging",
                      default=0, help="increase verbosity of output")
    (options, args) = parser.parse_args(argv)
    if options.logging > 3:
        level = 3
    else:
        level = options.logging
    logging.basicConfig(level=[logging.ERROR, logging.WARN, logging.INFO,
                        logging.DEBUG][level])
    if options.formats:
        print_formats(out)
        return 0
    if not args:
        parser.error("no strings to parse")
    offset = None
    if options.offset is not None:
        try:
            offset = iso8601.parse_offset(options.offset)
        except errors.DateTimeError as err:
            parser.error(str(err))
        logging.info("Assuming UTC offset %s", offset)
    parse = PARSERS[options.mode]
    status = 0
    for src in args:
        logging.debug("Parsing %r as %s", src, options.mode)
        try:
            result = parse(src)
        except errors.DateTimeError as err:
            logging.error("%s", err)
            status = 1
            continue
        if options.mode == 'time':
            if offset is not None and not result[4].is_specified():
                result = result[:4] + (offset, )
            out.write(format_time(result) + "\n")
        else:
            if offset is not None and not result.offset.is_specified():
                result = iso8601.apply_offset(result, offset)
            out.write("%s\n" % result)
    return status


if __name__ == "__main__":
    sys.exit(main())
