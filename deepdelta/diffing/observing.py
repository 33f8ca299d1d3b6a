# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .config import DiffConfig
from .generic import diff

__all__ = ["observe", "collect", "InvalidSinkError"]


class InvalidSinkError(TypeError):
    pass


def observe(lhs, rhs, observer=None, prefilter=None, order_independent=False):
    """Diff lhs against rhs and report each change to observer.

    The observer is called once per change, in emission order, after
    the whole diff has been computed. The full list of changes is
    returned whether or not an observer is given.
    """
    config = DiffConfig(prefilter=prefilter, order_independent=order_independent)
    changes = diff(lhs, rhs, config)
    if observer is not None:
        for change in changes:
            observer(change)
    return changes


def collect(lhs, rhs, order_independent=False, prefilter=None, sink=None):
    """Diff lhs against rhs, appending the changes to sink if given.

    Returns the sink when one is given, otherwise a new list of changes.
    """
    if sink is None:
        return observe(lhs, rhs, None, prefilter, order_independent)

    append = getattr(sink, "append", None)
    if not callable(append):
        raise InvalidSinkError(
            "sink should have an 'append()' method, got %r" % type(sink).__name__)
    observe(lhs, rhs, append, prefilter, order_independent)
    return sink
