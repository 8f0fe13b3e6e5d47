#!/usr/bin/env python

import logging
import sys
import isoparse.info

if sys.hexversion < 0x03060000:
    logging.error("isoparse requires Python Version 3.6 (or greater)")
else:
    from setuptools import setup

    with open('README.rst') as f:
        long_description = f.read()

    setup(name=isoparse.info.name,
          version=isoparse.info.version,
          description=isoparse.info.title,
          long_description=long_description,
          packages=['isoparse'],
          python_requires='>=3.6',
          classifiers=['Development Status :: 3 - Alpha',
                       'Intended Audience :: Developers',
                       'Natural Language :: English',
                       'Operating System :: OS Independent',
                       'Programming Language :: Python',
                       'Programming Language :: Python :: 3',
                       'Topic :: Software Development :: '
                       'Libraries :: Python Modules',
                       'Topic :: Text Processing']
          )
