#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

DEEPDELTA_PATH = HERE / "deepdelta"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(DEEPDELTA_PATH / '_version.py')


if __name__ == '__main__':
    setup(
      name="deepdelta",
      version=VERSION,
      description="Structural diff and revert of nested Python and json values",
      license="BSD-3-Clause",
      python_requires=">=3.8",
      packages=find_packages(include=["deepdelta", "deepdelta.*"]),
      package_data={"deepdelta": ["*.schema.json"]},
      install_requires=[
          "colorama",
          "jsonschema",
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
              "deepdelta = deepdelta.__main__:main_dispatch",
              "deltadiff = deepdelta.deltadiffapp:main",
              "deltapatch = deepdelta.deltapatchapp:main",
          ],
      },
    )
