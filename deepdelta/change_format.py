# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import DeltaFormatError


# Sentinel to allow None as a value
Missing = object()


class ChangeEntry(dict):
    """For internal usage in deepdelta library.

    Minimal class providing attribute access to change record keys.
    The dict shape is also the json representation of a record.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value

    @property
    def value(self):
        "The side of the record that exists: rhs for new values, lhs otherwise."
        if self["kind"] == ChangeKind.NEW:
            return self["rhs"]
        return self["lhs"]


class ChangeKind:
    "Collection of valid values for the kind field in change records."
    NEW = "N"
    DELETED = "D"
    EDITED = "E"
    ARRAY = "A"


def change_new(path, rhs):
    "Create a record for a value that only exists on the right."
    return ChangeEntry(kind=ChangeKind.NEW, path=list(path), rhs=rhs)

def change_deleted(path, lhs):
    "Create a record for a value that only exists on the left."
    return ChangeEntry(kind=ChangeKind.DELETED, path=list(path), lhs=lhs)

def change_edited(path, lhs, rhs):
    "Create a record for a value that differs between left and right."
    return ChangeEntry(kind=ChangeKind.EDITED, path=list(path), lhs=lhs, rhs=rhs)

def change_array(path, index, item):
    "Create a record for an array element inserted or removed at index."
    assert item is not None, "Array change needs an item record"
    return ChangeEntry(kind=ChangeKind.ARRAY, path=list(path), index=index, item=item)


# Fields required for each kind, in addition to kind and path
required_fields = {
    ChangeKind.NEW: ("rhs",),
    ChangeKind.DELETED: ("lhs",),
    ChangeKind.EDITED: ("lhs", "rhs"),
    ChangeKind.ARRAY: ("index", "item"),
    }

array_item_kinds = (ChangeKind.NEW, ChangeKind.DELETED)


def is_valid_changes(changes, deep=False):
    """Checks whether a list of change records is well formed.

    Returns a boolean indicating the well-formedness of the changes.
    """
    try:
        validate_changes(changes, deep=deep)
        result = True
    except DeltaFormatError:
        result = False
        raise
    return result


def validate_changes(changes, deep=False):
    """Check whether a list of change records is well formed.

    Raises a DeltaFormatError if not well formed.
    """
    if not isinstance(changes, list):
        raise DeltaFormatError("Changes must be a list.")
    for e in changes:
        validate_change(e, deep=deep)


def validate_change(e, deep=False):
    """Check that e is a well formed change record.

    Raises a DeltaFormatError if not well formed.
    """
    if not isinstance(e, ChangeEntry):
        raise DeltaFormatError("Change record '{}' is not a change type.".format(e))

    kind = e.get("kind")
    if kind not in required_fields:
        raise DeltaFormatError("Unknown change kind '{}'.".format(kind))
    if not isinstance(e.get("path"), list):
        raise DeltaFormatError(
            "Change record path must be a list, not '{}'.".format(e.get("path")))
    for name in required_fields[kind]:
        if name not in e:
            raise DeltaFormatError(
                "Change record of kind '{}' is missing field '{}'.".format(kind, name))

    if kind == ChangeKind.ARRAY:
        index = e.index
        if not isinstance(index, int) or isinstance(index, bool) or index < 0:
            raise DeltaFormatError(
                "Array change expects a non-negative integer index, not '{}'.".format(index))
        item = e.item
        if not isinstance(item, ChangeEntry) or item.get("kind") not in array_item_kinds:
            raise DeltaFormatError(
                "Array change item must be a new or deleted record, not '{}'.".format(item))
        # The item is only checked fully if the "deep" argument is true
        if deep:
            validate_change(item, deep=deep)

    # Note that false positives are possible, we're not checking
    # the values in any way, as they can be arbitrary objects
