#! /usr/bin/env python
"""Runs unit tests on all isoparse modules"""

import unittest
import logging

import test_basicparser
import test_demo
import test_gregorian
import test_iso8601
import test_values
import test_weekdate


all_tests = unittest.TestSuite()
all_tests.addTest(test_basicparser.suite())
all_tests.addTest(test_demo.suite())
all_tests.addTest(test_gregorian.suite())
all_tests.addTest(test_iso8601.suite())
all_tests.addTest(test_values.suite())
all_tests.addTest(test_weekdate.suite())


def suite():
    global all_tests
    return all_tests


def load_tests(loader, tests, pattern):
    return suite()


if __name__ == "__main__":
    logging.basicConfig(level=logging.ERROR)
    unittest.main()
