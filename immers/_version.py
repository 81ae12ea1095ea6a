# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple

VersionInfo = namedtuple("VersionInfo", ["major", "minor", "micro"])

__version__ = "0.1.0"

version_info = VersionInfo(*(int(part) for part in __version__.split(".")))
