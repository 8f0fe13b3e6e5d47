#! /usr/bin/env python
"""The module creates some basic constants to describe the isoparse package."""

title_name = "isoparse"
name = "isoparse"
copyright = "\xA92018-2026, isoparse contributors"

major_version = "0.3"
build_date = "20261018"
version = "%s.%s" % (major_version, build_date)

title = (
    "isoparse: "
    "format-detecting parser for ISO 8601 dates, times and datetimes")
