# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
from collections.abc import Mapping, MutableMapping

from .change_format import ChangeKind
from .log import debug, warning


__all__ = [
    "revert", "revert_array_change", "revert_changes",
    "apply_change", "apply_array_change", "apply_changes",
    ]


_kinds = (ChangeKind.NEW, ChangeKind.DELETED, ChangeKind.EDITED, ChangeKind.ARRAY)


def _kind_of(change):
    if isinstance(change, Mapping):
        kind = change.get("kind")
        if kind in _kinds:
            return kind
    return None


def _is_absent(container, key):
    if isinstance(container, list):
        return not isinstance(key, int) or not -len(container) <= key < len(container)
    return key not in container


def _store(container, key, value):
    "Set container[key] to a copy of value, padding lists with None as needed."
    value = copy.deepcopy(value)
    if isinstance(container, list):
        if key >= len(container):
            container.extend([None] * (key - len(container) + 1))
    container[key] = value


def _remove(container, key):
    if isinstance(container, list):
        if not _is_absent(container, key):
            del container[key]
    else:
        container.pop(key, None)


def _walk(target, path, make_container):
    """Return the container holding the last segment of path.

    Absent intermediate segments are created with make_container(next_segment).
    """
    it = target
    for i, segment in enumerate(path[:-1]):
        if _is_absent(it, segment):
            _store(it, segment, make_container(path[i + 1]))
        it = it[segment]
    return it


def _replace_contents(target, value):
    "Make target hold value in place, as the root object cannot be rebound."
    if isinstance(target, list) and isinstance(value, list):
        target[:] = copy.deepcopy(value)
        return True
    if isinstance(target, MutableMapping) and isinstance(value, Mapping):
        target.clear()
        target.update(copy.deepcopy(value))
        return True
    return False


def revert_array_change(arr, index, item):
    """Undo the change described by item on the array element at index.

    Arrays only grow or shrink at the tail in a diff, so undoing an
    insertion truncates the array at index, while undoing a removal
    inserts the removed value back at index.
    """
    path = item.get("path") or []
    if path:
        revert(arr[index], item)
        return arr

    kind = _kind_of(item)
    if kind == ChangeKind.ARRAY:
        revert_array_change(arr[index], item["index"], item["item"])
    elif kind == ChangeKind.DELETED:
        arr.insert(index, copy.deepcopy(item["lhs"]))
    elif kind == ChangeKind.EDITED:
        _store(arr, index, item["lhs"])
    elif kind == ChangeKind.NEW:
        del arr[index:]
    return arr


def revert(target, change):
    """Undo a single change on target, in place.

    Intermediate locations missing from target are created as empty
    dicts. Does nothing if target is None or the change kind is unknown.
    """
    kind = _kind_of(change)
    if target is None or kind is None:
        debug("Skipping revert of %r on %r", change, type(target).__name__)
        return

    path = change["path"]
    if not path:
        if kind == ChangeKind.ARRAY:
            revert_array_change(target, change["index"], change["item"])
        elif kind == ChangeKind.NEW or not _replace_contents(target, change["lhs"]):
            warning("Cannot revert change of kind %r at the root of a %s",
                    kind, type(target).__name__)
        return

    it = _walk(target, path, lambda _: {})
    last = path[-1]
    if kind == ChangeKind.ARRAY:
        revert_array_change(it[last], change["index"], change["item"])
    elif kind in (ChangeKind.DELETED, ChangeKind.EDITED):
        _store(it, last, change["lhs"])
    elif kind == ChangeKind.NEW:
        _remove(it, last)


def _new_container(next_segment):
    return [] if isinstance(next_segment, int) else {}


def apply_array_change(arr, index, item):
    "Perform the change described by item on the array element at index."
    path = item.get("path") or []
    if path:
        apply_change(arr[index], item)
        return arr

    kind = _kind_of(item)
    if kind == ChangeKind.ARRAY:
        apply_array_change(arr[index], item["index"], item["item"])
    elif kind == ChangeKind.DELETED:
        _remove(arr, index)
    elif kind in (ChangeKind.EDITED, ChangeKind.NEW):
        _store(arr, index, item["rhs"])
    return arr


def apply_change(target, change):
    """Perform a single change on target, in place.

    The forward counterpart of revert: intermediate locations missing
    from target are created as lists when the next path segment is an
    integer and as dicts otherwise.
    """
    kind = _kind_of(change)
    if target is None or kind is None:
        debug("Skipping change %r on %r", change, type(target).__name__)
        return

    path = change["path"]
    if not path:
        if kind == ChangeKind.ARRAY:
            apply_array_change(target, change["index"], change["item"])
        elif kind == ChangeKind.DELETED or not _replace_contents(target, change["rhs"]):
            warning("Cannot apply change of kind %r at the root of a %s",
                    kind, type(target).__name__)
        return

    it = _walk(target, path, _new_container)
    last = path[-1]
    if kind == ChangeKind.ARRAY:
        if _is_absent(it, last):
            _store(it, last, [])
        apply_array_change(it[last], change["index"], change["item"])
    elif kind == ChangeKind.DELETED:
        _remove(it, last)
    elif kind in (ChangeKind.EDITED, ChangeKind.NEW):
        _store(it, last, change["rhs"])


def apply_changes(target, changes):
    """Apply changes to target in emission order.

    Each change is applied on its own, a failure leaves the changes
    before it applied. Returns target for convenience.
    """
    for change in changes:
        apply_change(target, change)
    return target


def revert_changes(target, changes):
    """Revert changes on target in reverse emission order.

    Each change is reverted on its own, a failure leaves the changes
    after it reverted. Returns target for convenience.
    """
    for change in reversed(changes):
        revert(target, change)
    return target
