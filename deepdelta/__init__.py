# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .change_format import ChangeEntry, ChangeKind
from .diffing import diff, observe, collect, DiffConfig, InvalidSinkError
from .patching import revert, revert_changes, apply_change, apply_changes


__all__ = [
    "__version__",
    "ChangeEntry", "ChangeKind",
    "diff", "observe", "collect", "DiffConfig", "InvalidSinkError",
    "revert", "revert_changes", "apply_change", "apply_changes",
    ]
