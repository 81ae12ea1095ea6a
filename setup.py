#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib

HERE = pathlib.Path(__file__).parent.absolute()

IMMERS_PATH = HERE / "immers"


def get_version(path):
    "Read __version__ from a module without importing the package."
    namespace = {}
    with open(path) as f:
        exec(f.read(), namespace)
    return namespace["__version__"]


VERSION = get_version(IMMERS_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='immers',
      version=VERSION,
      description='Minimal structural patches between values of the same type',
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      license='BSD-3-Clause',
      python_requires='>=3.7',
      packages=find_packages(include=['immers', 'immers.*']),
      package_data={'immers': ['*.schema.json']},
      install_requires=[
          'colorama',
          'jupyter_core',
          'traitlets>=5',
      ],
      extras_require={
          'test': [
              'jsonschema',
              'pytest>=6.0',
          ],
      },
      )
