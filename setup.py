#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

JPDIFF_PATH = HERE / "jpdiff"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(JPDIFF_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name="jpdiff",
      version=VERSION,
      description="Compute the difference between two JSON documents as a JSON patch",
      long_description=LONG_DESCRIPTION,
      long_description_content_type="text/markdown",
      license="BSD-3-Clause",
      python_requires=">=3.8",
      packages=find_packages(include=["jpdiff", "jpdiff.*"]),
      package_data={
          "jpdiff": ["patch_format.schema.json"],
          "jpdiff.tests": ["files/*.json"],
      },
      install_requires=[
          "colorama",
          "jupyter_core",
          "traitlets>=5",
      ],
      extras_require={
          "test": [
              "jsonschema",
              "pytest>=6.0",
          ],
      },
      entry_points={
          "console_scripts": [
              "jpdiff = jpdiff.jpdiffapp:main",
          ],
      },
    )
