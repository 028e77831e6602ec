#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

RICHDELTA_PATH = HERE / "richdelta"


def get_version(path):
    with open(path) as f:
        match = re.search(r'^__version__ = "([^"]+)"', f.read(), re.M)
    return match.group(1)


VERSION = get_version(RICHDELTA_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name="richdelta",
      version=VERSION,
      description="Rich text deltas: insert, retain and delete ops kept in minimal form",
      long_description=LONG_DESCRIPTION,
      long_description_content_type="text/markdown",
      license="BSD-3-Clause",
      packages=find_packages(include=["richdelta", "richdelta.*"]),
      python_requires=">=3.8",
      install_requires=[
          "colorama",
          "jupyter_core",
          "traitlets>=5",
      ],
      extras_require={
          "test": [
              "pytest>=6.0",
          ],
      },
      entry_points={
          "console_scripts": [
              "richdelta = richdelta.__main__:main_dispatch",
          ],
      },
    )
