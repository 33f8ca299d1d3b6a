# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from contextlib import contextmanager

from ..change_format import (
    Missing, change_new, change_deleted, change_edited, change_array)
from ..utils import real_type_of, regexp_source, is_nan, order_independent_hash

from .config import DiffConfig

__all__ = ["diff", "deep_diff", "ComparisonStack"]


class ComparisonStack:
    """The (lhs, rhs) container pairs currently being compared.

    Only used to detect reference cycles, one stack per top level diff.
    """

    def __init__(self):
        self._frames = []

    def __len__(self):
        return len(self._frames)

    @contextmanager
    def frame(self, lhs, rhs):
        "Push a pair for the duration of a with block."
        self._frames.append((lhs, rhs))
        try:
            yield
        finally:
            self._frames.pop()

    def find(self, lhs):
        "Return the newest frame whose left value is lhs, or None."
        for frame in reversed(self._frames):
            if frame[0] is lhs:
                return frame
        return None


def diff(lhs, rhs, config=None):
    """Compute the changes transforming lhs into rhs.

    Returns a list of change records in emission order: for mappings the
    keys of lhs in their order followed by the keys only found in rhs,
    for arrays the tail insertions or removals from the highest index
    down, followed by the common elements from the highest index down.

    Neither lhs nor rhs is modified.
    """
    if config is None:
        config = DiffConfig()
    changes = []
    deep_diff(lhs, rhs, changes, config)
    return changes


def deep_diff(lhs, rhs, changes, config, path=(), key=Missing, stack=None):
    """Append the changes between lhs and rhs to changes.

    lhs and rhs are found at key below path. Either may be Missing when
    the key only exists on one side.
    """
    if stack is None:
        stack = ComparisonStack()

    current_path = list(path)
    if key is not Missing:
        if config.should_skip(current_path, key):
            return
        current_path.append(key)

    ltype = real_type_of(lhs)
    rtype = real_type_of(rhs)

    if ltype == 'regexp' and rtype == 'regexp':
        if regexp_source(lhs) != regexp_source(rhs):
            changes.append(change_edited(current_path, lhs, rhs))
        return

    if lhs is Missing and rhs is Missing:
        return
    elif lhs is Missing:
        changes.append(change_new(current_path, rhs))
    elif rhs is Missing:
        changes.append(change_deleted(current_path, lhs))
    elif ltype != rtype:
        changes.append(change_edited(current_path, lhs, rhs))
    elif ltype == 'date':
        if lhs != rhs:
            changes.append(change_edited(current_path, lhs, rhs))
    elif ltype in ('array', 'object'):
        frame = stack.find(lhs)
        if frame is not None:
            # lhs loops back to a value being compared further up
            if lhs is not rhs and frame[1] is not rhs:
                changes.append(change_edited(current_path, lhs, rhs))
            return
        with stack.frame(lhs, rhs):
            if ltype == 'array':
                _diff_arrays(lhs, rhs, changes, config, current_path, stack)
            else:
                _diff_mappings(lhs, rhs, changes, config, current_path, stack)
    elif lhs is not rhs and lhs != rhs:
        if not (is_nan(lhs) and is_nan(rhs)):
            changes.append(change_edited(current_path, lhs, rhs))


def _diff_arrays(lhs, rhs, changes, config, path, stack):
    if config.order_independent:
        # Sorted copies, the caller's lists keep their order
        lhs = sorted(lhs, key=order_independent_hash)
        rhs = sorted(rhs, key=order_independent_hash)

    i = len(rhs) - 1
    j = len(lhs) - 1

    while i > j:
        changes.append(change_array(path, i, change_new([], rhs[i])))
        i -= 1

    while j > i:
        changes.append(change_array(path, j, change_deleted([], lhs[j])))
        j -= 1

    while i >= 0:
        deep_diff(lhs[i], rhs[i], changes, config, path, i, stack)
        i -= 1


def _diff_mappings(lhs, rhs, changes, config, path, stack):
    for key in lhs:
        if key in rhs:
            deep_diff(lhs[key], rhs[key], changes, config, path, key, stack)
        else:
            deep_diff(lhs[key], Missing, changes, config, path, key, stack)

    for key in rhs:
        if key not in lhs:
            deep_diff(Missing, rhs[key], changes, config, path, key, stack)
