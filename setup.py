import sys

from setuptools import setup

if sys.version_info < (3, 10):
    raise RuntimeError("aiocrud requires Python 3.10+")


setup()
