# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .config import DiffConfig
from .generic import diff
from .observing import observe, collect, InvalidSinkError

__all__ = ["diff", "observe", "collect", "DiffConfig", "InvalidSinkError"]
