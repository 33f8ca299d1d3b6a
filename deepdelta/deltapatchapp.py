# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import sys

from .args import (
    add_generic_args, add_prettyprint_args, add_filename_args,
    ConfigBackedParser, prettyprint_config_from_args,
    )
from .change_utils import to_change_entries
from .log import DeltaFormatError, error, info
from .patching import apply_changes, revert_changes
from .prettyprint import pretty_print_value, PrintWriter
from .utils import read_json, missing_files, setup_std_streams


_description = ("Apply a change list written by deltadiff to a json document, "
                "or revert it to get the original document back.")


def main_patch(args):
    """Patch the document named by parsed deltapatch arguments.

    Returns the exit status.
    """
    missing = missing_files([args.target, args.changes])
    if missing:
        print("Missing file {}".format(missing[0]))
        return 1

    target = read_json(args.target, on_null='empty')
    # A null change file is an empty change list
    data = read_json(args.changes, on_null='none')
    try:
        changes = to_change_entries([] if data is None else data)
    except DeltaFormatError as e:
        error("Could not read change list %s: %s", args.changes, e)
        return 1

    if args.revert:
        info("Reverting %d changes on %s", len(changes), args.target)
        patched = revert_changes(target, changes)
    else:
        info("Applying %d changes to %s", len(changes), args.target)
        patched = apply_changes(target, changes)

    if args.output:
        with io.open(args.output, "w", encoding="utf8") as f:
            json.dump(patched, f, indent=2, separators=(",", ": "))
    else:
        config = prettyprint_config_from_args(args, out=PrintWriter())
        pretty_print_value(patched, config=config)
    return 0


def _build_arg_parser(prog='deltapatch'):
    """Creates an argument parser for the deltapatch command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_prettyprint_args(parser)
    add_filename_args(parser, ["target", "changes"])
    parser.add_argument(
        '--revert',
        action='store_true',
        default=False,
        help="undo the changes, last one first, turning the right "
             "document of the diff back into the left one.")
    parser.add_argument(
        '-o', '--output',
        default=None,
        help="write the patched document to this json file "
             "instead of printing it.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_patch(arguments)


if __name__ == "__main__":
    sys.exit(main())
