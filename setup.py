#!/usr/bin/env python

from setuptools import setup

# All metadata lives in setup.cfg. Retain for compatibility with legacy builds
# or build tool versions.
setup()
