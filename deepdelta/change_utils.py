# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import datetime
import io
import json
import os

from jsonschema import Draft7Validator as Validator

from .change_format import ChangeEntry, ChangeKind, validate_changes
from .log import DeltaFormatError
from .utils import regexp_source, real_type_of


schema_path = os.path.join(os.path.dirname(__file__), 'change_format.schema.json')

_validator = None


def change_schema():
    "Load the json schema describing serialized change lists."
    with io.open(schema_path, encoding="utf8") as f:
        return json.load(f)


def change_validator():
    global _validator
    if _validator is None:
        _validator = Validator(change_schema())
    return _validator


def to_clean_dicts(di):
    "Recursively convert ChangeEntry objects to plain dicts."
    if isinstance(di, dict):
        return {k: to_clean_dicts(v) for k, v in di.items()}
    elif isinstance(di, list):
        return [to_clean_dicts(v) for v in di]
    else:
        return di


def _as_change_entry(d):
    e = ChangeEntry(d)
    e.path = list(e.path)
    if e.kind == ChangeKind.ARRAY:
        e.item = _as_change_entry(e.item)
    return e


def to_change_entries(data):
    """Convert a json-loaded change list to ChangeEntry records.

    Raises DeltaFormatError if data does not follow the change list schema.
    Values inside records are left untouched.
    """
    errors = sorted(change_validator().iter_errors(data), key=lambda e: str(e.path))
    if errors:
        e = errors[0]
        where = "/".join(str(p) for p in e.path)
        raise DeltaFormatError(
            "Invalid change list at '/{}': {}".format(where, e.message))
    changes = [_as_change_entry(d) for d in data]
    validate_changes(changes, deep=True)
    return changes


class ChangeEncoder(json.JSONEncoder):
    """Json encoder for change lists holding non-json values.

    Dates become ISO-8601 strings, compiled patterns their '/source/flags'
    form, and tuples or sets become lists.
    """
    def default(self, o):
        if isinstance(o, (datetime.date, datetime.time)):
            return o.isoformat()
        if real_type_of(o) == 'regexp':
            return regexp_source(o)
        if isinstance(o, (set, frozenset)):
            return sorted(o, key=repr)
        if isinstance(o, bytes):
            return o.decode('utf8', 'backslashreplace')
        return super(ChangeEncoder, self).default(o)


def dumps_changes(changes, **kwargs):
    "Serialize a change list to a json string."
    kwargs.setdefault('cls', ChangeEncoder)
    return json.dumps(to_clean_dicts(changes), **kwargs)


def _escape_pointer(key):
    return str(key).replace('~', '~0').replace('/', '~1')


def _pointer(path):
    return "".join("/" + _escape_pointer(p) for p in path)


def to_json_patch(changes):
    """Convert a deepdelta change list into the RFC6902 JSON Patch format.

    Array changes become add/remove operations on the element pointer.
    Runs of array insertions on the same array are emitted with
    ascending indices, since JSON Patch cannot add past the end of an
    array. Everything else keeps emission order.
    """
    patch = []
    # (array pointer, index, value) of consecutive insertions
    pending = []

    def flush():
        for array, index, value in sorted(pending, key=lambda x: x[1]):
            patch.append({'op': 'add', 'path': array + "/" + str(index), 'value': value})
        del pending[:]

    for e in changes:
        kind = e.kind
        if kind == ChangeKind.ARRAY and e.item.kind == ChangeKind.NEW:
            array = _pointer(e.path)
            if pending and pending[-1][0] != array:
                flush()
            pending.append((array, e.index, e.item.rhs))
            continue
        flush()
        if kind == ChangeKind.NEW:
            patch.append({'op': 'add', 'path': _pointer(e.path), 'value': e.rhs})
        elif kind == ChangeKind.DELETED:
            patch.append({'op': 'remove', 'path': _pointer(e.path)})
        elif kind == ChangeKind.EDITED:
            patch.append({'op': 'replace', 'path': _pointer(e.path), 'value': e.rhs})
        elif kind == ChangeKind.ARRAY:
            patch.append({'op': 'remove', 'path': _pointer(list(e.path) + [e.index])})
        else:
            raise DeltaFormatError("Invalid change kind '{}'".format(kind))
    flush()
    return patch
