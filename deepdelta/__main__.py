# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import importlib
import sys

from ._version import __version__

# Subcommand name -> module with the main(args) of the command
COMMANDS = {
    "diff": "deepdelta.deltadiffapp",
    "patch": "deepdelta.deltapatchapp",
}

HELP_MESSAGE_VERBOSE = ("Usage: deepdelta [OPTIONS]\n\n"
                        "OPTIONS: -h, --version, --config, COMMANDS{%s}\n\n"
                        "Examples: deepdelta --version\n"
                        "          deepdelta diff -h\n"
                        "          deepdelta diff left.json right.json --out changes.json\n"
                        "          deepdelta patch right.json changes.json --revert\n"
                        % ", ".join(COMMANDS))


def print_all_config():
    """Print the effective config of every command to stderr."""
    from .args import print_entrypoint_config
    from .config import entrypoint_configurables
    print('All available config options, and their current values:\n',
          file=sys.stderr)
    for entrypoint in entrypoint_configurables:
        print_entrypoint_config(entrypoint, sys.stderr)
        print('', file=sys.stderr)


def main_dispatch(args=None):
    if args is None:
        args = sys.argv[1:]
    if not args:
        sys.exit("Option missing.\n\n%s" % HELP_MESSAGE_VERBOSE)

    cmd, args = args[0], args[1:]
    if cmd in COMMANDS:
        return importlib.import_module(COMMANDS[cmd]).main(args)

    if cmd == '--version':
        sys.exit(__version__)
    elif cmd in ('-h', '--help'):
        sys.exit(HELP_MESSAGE_VERBOSE)
    elif cmd == '--config':
        print_all_config()
        sys.exit(1)
    sys.exit("Unrecognized command '%s'\n\n%s" % (cmd, HELP_MESSAGE_VERBOSE))


if __name__ == "__main__":
    # python -m deepdelta <args>
    sys.exit(main_dispatch())
