# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from deepdelta import diff, revert_changes, apply_changes
from deepdelta.change_format import is_valid_changes
from deepdelta.diffing import DiffConfig


def check_diff_and_revert(a, b, **kwargs):
    "Check that reverting diff(a, b) on a copy of b reproduces a."
    d = diff(a, b, DiffConfig(**kwargs))
    assert is_valid_changes(d, deep=True)
    target = copy.deepcopy(b)
    assert revert_changes(target, d) == a
    return d


def check_diff_and_apply(a, b, **kwargs):
    "Check that applying diff(a, b) on a copy of a reproduces b."
    d = diff(a, b, DiffConfig(**kwargs))
    assert is_valid_changes(d, deep=True)
    target = copy.deepcopy(a)
    assert apply_changes(target, d) == b
    return d


def check_symmetric_diff_and_revert(a, b):
    "Check both directions of diff, revert and apply for a and b."
    check_diff_and_revert(a, b)
    check_diff_and_revert(b, a)
    check_diff_and_apply(a, b)
    check_diff_and_apply(b, a)
