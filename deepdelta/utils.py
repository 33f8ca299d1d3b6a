# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import datetime
import io
import json
import numbers
import os
import re
import sys
from collections.abc import Mapping

import colorama

from .change_format import Missing


if os.name == 'nt':
    EXPLICIT_MISSING_FILE = 'nul'
else:
    EXPLICIT_MISSING_FILE = '/dev/null'


_regexp_type = type(re.compile(''))

_regexp_flags = (
    (re.IGNORECASE, 'i'),
    (re.MULTILINE, 'm'),
    (re.DOTALL, 's'),
    (re.VERBOSE, 'x'),
    (re.ASCII, 'a'),
    )


def real_type_of(value):
    """Classify a value into the tag used to pick a comparison strategy.

    Values with different tags are never compared structurally, they
    always produce a single edit record.
    """
    if value is Missing:
        return 'undefined'
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, numbers.Number):
        return 'number'
    if isinstance(value, str):
        return 'string'
    if isinstance(value, datetime.date):
        return 'date'
    if isinstance(value, _regexp_type):
        return 'regexp'
    if isinstance(value, list):
        return 'array'
    if isinstance(value, Mapping):
        return 'object'
    if callable(value):
        return 'function'
    return type(value).__name__.lower()


def is_nan(value):
    "True for float-like NaN values, which compare unequal to themselves."
    return isinstance(value, numbers.Number) and value != value


def regexp_source(pattern):
    "Canonical '/source/flags' text of a compiled regular expression."
    source = pattern.pattern
    if isinstance(source, bytes):
        source = source.decode('latin-1')
    flags = ''.join(c for f, c in _regexp_flags if pattern.flags & f)
    return '/%s/%s' % (source, flags)


def _hash_string(s):
    # 32 bit string hash, h = h * 31 + c wrapped to a signed int
    h = 0
    for c in s:
        h = ((h << 5) - h + ord(c)) & 0xFFFFFFFF
    if h & 0x80000000:
        h -= 0x100000000
    return h


def _hash_text(value):
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        if is_nan(value):
            return 'NaN'
        if value.is_integer():
            return str(int(value))
    if isinstance(value, datetime.date):
        return value.isoformat()
    if isinstance(value, _regexp_type):
        return regexp_source(value)
    return str(value)


def order_independent_hash(value):
    """Deterministic integer key of a value, insensitive to element order.

    Only used as a sort key when arrays are compared without regard to
    order, so collisions merely leave colliding items in their original
    relative order.
    """
    accum = 0
    kind = real_type_of(value)
    if kind == 'array':
        for item in value:
            accum += order_independent_hash(item)
        return accum + _hash_string('[type: array, hash: %d]' % accum)
    if kind == 'object':
        for key, item in value.items():
            accum += _hash_string('[ type: object, key: %s, value hash: %d]' % (
                key, order_independent_hash(item)))
        return accum
    return _hash_string('[ type: %s ; value: %s]' % (kind, _hash_text(value)))


def read_json(f, on_null='empty'):
    """Load a json document.

    f is a filename or an open file. The explicit null filename
    ("/dev/null", or "nul" on Windows) stands for a document that does
    not exist: on_null='empty' reads it as {}, on_null='none' as None.
    """
    if f == EXPLICIT_MISSING_FILE:
        if on_null not in _null_documents:
            raise ValueError('on_null should be one of %r, not %r' % (
                sorted(_null_documents), on_null))
        return _null_documents[on_null]()
    if isinstance(f, str):
        with io.open(f, encoding='utf-8') as fo:
            return json.load(fo)
    return json.load(f)


_null_documents = {
    'empty': dict,
    'none': lambda: None,
}


def missing_files(filenames):
    "Filenames that neither exist nor are the explicit null filename."
    return [fn for fn in filenames
            if fn != EXPLICIT_MISSING_FILE and not os.path.exists(fn)]


def split_path(path):
    "'/foo/0/bar' -> ['foo', '0', 'bar']"
    return [segment for segment in path.split("/") if segment]


def join_path(*args):
    "['foo', 0, 'bar'] or 'foo', 0, 'bar' -> '/foo/0/bar'"
    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        args = args[0]
    return "/" + "/".join(str(a).strip("/") for a in args if str(a).strip("/"))


_int_segment = re.compile(r"^[-+]?\d+$")

def star_path(path):
    "Path text with every array index replaced by *, as used by ignore patterns."
    return join_path(['*' if isinstance(p, int) or _int_segment.match(str(p)) else p
                      for p in path])


def setup_std_streams():
    """Prepare sys.stdout/err for the command line entry points.

    Unencodable characters are escaped instead of raising, and colorama
    translates the ANSI color escapes on Windows.
    """
    if not os.getenv('PYTHONIOENCODING'):
        for name in ('stdout', 'stderr'):
            stream = getattr(sys, name)
            # Captured or redirected streams are left alone
            if stream is getattr(sys, '__%s__' % name) and hasattr(stream, 'reconfigure'):
                stream.reconfigure(errors='backslashreplace')
    # after the reconfiguration, which would undo the colorama wrapping
    if sys.platform.startswith('win'):
        colorama.init()
