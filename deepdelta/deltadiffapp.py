# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import sys

from .args import (
    add_generic_args, add_diff_args, add_prettyprint_args, add_filename_args,
    ConfigBackedParser, prettyprint_config_from_args, diff_config_from_args,
    )
from .change_utils import dumps_changes
from .diffing import diff
from .log import info
from .prettyprint import pretty_print_json_diff, PrintWriter
from .utils import read_json, missing_files, setup_std_streams


_description = ("Compute the changes turning one json document into another, "
                "and print them or save them as a json change list.")


def main_diff(args):
    """Diff the documents named by parsed deltadiff arguments.

    Returns the exit status.
    """
    missing = missing_files([args.left, args.right])
    if missing:
        print("Missing file {}".format(missing[0]))
        return 1

    # The null filename reads as an empty document
    left = read_json(args.left, on_null='empty')
    right = read_json(args.right, on_null='empty')

    changes = diff(left, right, diff_config_from_args(args))
    info("%d changes between %s and %s", len(changes), args.left, args.right)

    if args.out:
        with io.open(args.out, "w", encoding="utf8") as f:
            f.write(dumps_changes(changes, indent=2, separators=(",", ": ")))
    else:
        config = prettyprint_config_from_args(args, out=PrintWriter())
        pretty_print_json_diff(args.left, args.right, changes, config)
    return 0


def _build_arg_parser(prog='deltadiff'):
    """Creates an argument parser for the deltadiff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_diff_args(parser)
    add_prettyprint_args(parser)
    add_filename_args(parser, ["left", "right"])
    parser.add_argument(
        '--out',
        default=None,
        help="write the change list to this json file "
             "instead of printing it.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
