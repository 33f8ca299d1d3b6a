# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import datetime
import os
import pprint
import sys

import colorama

from .change_format import ChangeKind, Missing
from .log import DeltaFormatError
from .utils import join_path, real_type_of, regexp_source


# Indentation of nested values
IND = "  "

# Lists printed on a single line must fit in this width
MAXWIDTH = 78


LineMarks = namedtuple('LineMarks', ('INFO', 'ADD', 'REMOVE', 'RESET'))

line_marks = {
    True: LineMarks(
        INFO=colorama.Fore.BLUE + colorama.Style.BRIGHT + '## ',
        ADD=colorama.Fore.GREEN + '+  ',
        REMOVE=colorama.Fore.RED + '-  ',
        RESET=colorama.Style.RESET_ALL,
    ),
    False: LineMarks(
        INFO='## ',
        ADD='+  ',
        REMOVE='-  ',
        RESET='',
    ),
}


class PrettyPrintConfig:
    def __init__(self, out=sys.stdout, use_color=True):
        self.out = out
        self.use_color = use_color

    @property
    def marks(self):
        "Line prefixes for the current color setting."
        return line_marks[bool(self.use_color)]


class PrintWriter:
    """File-like object writing through print().

    Output captured by pytest's capsys does not see writes made to a
    sys.stdout object saved earlier, print() always uses the current one.
    """
    def write(self, text):
        print(text, end="")


DefaultConfig = PrettyPrintConfig()


def file_timestamp(filename):
    "Modification time of filename as text, for diff headers."
    if not os.path.exists(filename):
        return "(no timestamp)"
    mtime = datetime.datetime.fromtimestamp(os.path.getmtime(filename))
    return mtime.isoformat(" ")


def format_value(value):
    "Text of a leaf value: strings as is, patterns as /source/flags, else pprint."
    if isinstance(value, str):
        return value
    if real_type_of(value) == 'regexp':
        return regexp_source(value)
    return pprint.pformat(value)


def _write_lines(text, prefix, config):
    for line in text.splitlines() or [""]:
        config.out.write(prefix + line + "\n")


def pretty_print_item(key, value, prefix="", config=DefaultConfig):
    "Print a labelled value, nesting containers and multiline text below the label."
    if isinstance(value, dict):
        config.out.write("%s%s:\n" % (prefix, key))
        pretty_print_dict(value, prefix + IND, config)
    elif isinstance(value, list):
        config.out.write("%s%s:\n" % (prefix, key))
        pretty_print_list(value, prefix + IND, config)
    else:
        text = format_value(value)
        if "\n" in text:
            config.out.write("%s%s:\n" % (prefix, key))
            _write_lines(text, prefix + IND, config)
        else:
            config.out.write("%s%s: %s\n" % (prefix, key, text))


def pretty_print_list(li, prefix="", config=DefaultConfig):
    text = pprint.pformat(li)
    if "\n" not in text and len(prefix) + len(text) < MAXWIDTH:
        config.out.write(prefix + text + "\n")
    else:
        for i, value in enumerate(li):
            pretty_print_item("item[%d]" % i, value, prefix, config)


def pretty_print_dict(d, prefix="", config=DefaultConfig):
    """Print the items of a dict without braces, sorted by key text:

        key: value
        key:
          nested: value

    """
    for key in sorted(d, key=str):
        pretty_print_item(key, d[key], prefix, config)


def pretty_print_value(value, prefix="", config=DefaultConfig):
    """Print a possibly nested value with every line starting with prefix.

    Non-empty dicts and lists are printed item by item, anything else
    through format_value.
    """
    if isinstance(value, dict) and value:
        pretty_print_dict(value, prefix, config)
    elif isinstance(value, list) and value:
        pretty_print_list(value, prefix, config)
    else:
        _write_lines(format_value(value), prefix, config)


def _type_change(a, b):
    if type(a) is type(b):
        return ""
    return " (type changed from %s to %s)" % (type(a).__name__, type(b).__name__)


def pretty_print_change(e, config=DefaultConfig):
    """Print one change record.

    A header line names the action and the location, followed by the
    removed value and the added value, where the record has them.
    """
    location = join_path(e.path)
    kind = e.kind
    removed = added = Missing

    if kind == ChangeKind.NEW:
        action, added = "added", e.rhs
    elif kind == ChangeKind.DELETED:
        action, removed = "deleted", e.lhs
    elif kind == ChangeKind.EDITED:
        action, removed, added = "replaced" + _type_change(e.lhs, e.rhs), e.lhs, e.rhs
    elif kind == ChangeKind.ARRAY:
        location = join_path(list(e.path) + [e.index])
        if e.item.kind == ChangeKind.NEW:
            action, added = "inserted", e.item.rhs
        else:
            action, removed = "removed", e.item.lhs
    else:
        raise DeltaFormatError("Unknown change kind {}".format(kind))

    marks = config.marks
    config.out.write("%s%s %s:%s\n" % (marks.INFO, action, location, marks.RESET))
    if removed is not Missing:
        pretty_print_value(removed, marks.REMOVE, config)
    if added is not Missing:
        pretty_print_value(added, marks.ADD, config)
    config.out.write("\n" + marks.RESET)


def pretty_print_changes(changes, config=DefaultConfig):
    "Print change records in emission order."
    for e in changes:
        pretty_print_change(e, config)


def pretty_print_json_diff(lfn, rfn, changes, config=DefaultConfig):
    """Print the changes between two json files under a diff header.

    Parameters
    ----------

    lfn: str
        Filename of the left document
    rfn: str
        Filename of the right document
    changes: list
        Change records transforming the left document into the right one
    config: PrettyPrintConfig
        Where and how the output is written

    Nothing is printed when there are no changes.
    """
    if not changes:
        return
    config.out.write("deltadiff %s %s\n" % (lfn, rfn))
    config.out.write("--- %s  %s\n" % (lfn, file_timestamp(lfn)))
    config.out.write("+++ %s  %s\n" % (rfn, file_timestamp(rfn)))
    pretty_print_changes(changes, config)
