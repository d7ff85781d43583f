#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

FLATPATCH_PATH = HERE / "flatpatch"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(FLATPATCH_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name="flatpatch",
      version=VERSION,
      description="Diff and patch json-like documents with RFC 6902 operations",
      long_description=LONG_DESCRIPTION,
      long_description_content_type="text/markdown",
      license="BSD-3-Clause",
      packages=find_packages(include=["flatpatch", "flatpatch.*"]),
      package_data={"flatpatch": ["*.schema.json"]},
      python_requires=">=3.7",
      install_requires=[
          "jupyter_core",
          "traitlets>=5",
      ],
      extras_require={
          "test": [
              "jsonschema",
              "pytest>=6.0",
          ],
      },
      )
