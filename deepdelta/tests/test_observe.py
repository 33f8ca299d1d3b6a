# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import deque

import pytest

from deepdelta import observe, collect, InvalidSinkError
from deepdelta.change_format import change_new, change_deleted, change_edited


left = {"a": 1, "b": {"c": [1, 2]}, "d": "gone"}
right = {"a": 2, "b": {"c": [1, 2, 3]}, "e": "new"}


def test_observe_reports_changes_in_emission_order():
    seen = []
    changes = observe(left, right, seen.append)
    assert seen == changes
    assert [c.kind for c in seen] == ["E", "A", "D", "N"]


def test_observe_runs_after_traversal():
    changes_at_call = []

    def observer(change):
        changes_at_call.append(change)
        # Would show up as a new record if the diff was still running
        right["touched"] = True

    try:
        changes = observe(left, right, observer)
    finally:
        right.pop("touched", None)
    assert len(changes) == 4
    assert all("touched" not in c.path for c in changes)


def test_observe_without_observer():
    assert observe({"x": 1}, {"x": 1}) == []
    assert observe({"x": 1}, {}) == [change_deleted(["x"], 1)]


def test_observe_options():
    assert observe([1, 2], [2, 1], order_independent=True) == []
    assert observe({"a": 1, "b": 1}, {"a": 2, "b": 2},
                   prefilter=lambda path, key: key == "b") == [change_edited(["a"], 1, 2)]


def test_collect_returns_new_list():
    changes = collect({"x": 1}, {"x": 1, "y": 2})
    assert isinstance(changes, list)
    assert changes == [change_new(["y"], 2)]
    assert collect({}, {}) == []


def test_collect_appends_to_given_sink():
    sink = [change_new(["old"], 0)]
    result = collect({"x": 1}, {"x": 2}, sink=sink)
    assert result is sink
    assert sink == [change_new(["old"], 0), change_edited(["x"], 1, 2)]


def test_collect_returns_empty_sink_identity():
    sink = []
    assert collect({"x": 1}, {"x": 1}, sink=sink) is sink
    assert sink == []


def test_collect_custom_sink():
    sink = deque()
    assert collect([1], [2], sink=sink) is sink
    assert list(sink) == [change_edited([0], 1, 2)]


def test_collect_with_options():
    sink = []
    collect([3, 1], [1, 3], True, None, sink)
    assert sink == []
    collect({"a": 1, "b": 1}, {"a": 2, "b": 2}, prefilter=lambda path, key: key == "a", sink=sink)
    assert sink == [change_edited(["b"], 1, 2)]


@pytest.mark.parametrize("sink", [
    "not a sink",
    42,
    {"append": 1},
    object(),
])
def test_collect_invalid_sink(sink):
    with pytest.raises(InvalidSinkError):
        collect({"x": 1}, {"x": 2}, sink=sink)


def test_invalid_sink_is_type_error():
    with pytest.raises(TypeError):
        collect({}, {"y": 1}, sink=(1, 2))
