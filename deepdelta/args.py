# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import build_config, entrypoint_configurables
from .log import LOG_LEVELS, init_logging, set_deepdelta_log_level


class ConfigBackedParser(argparse.ArgumentParser):
    """Argument parser whose defaults come from the deepdelta config.

    The entry point is the first word of prog. Parsers of other
    programs keep the defaults given to their arguments.
    """

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        if entrypoint in entrypoint_configurables:
            self.set_defaults(**build_config(entrypoint))
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    """Apply the log level as soon as the option is parsed.

    Logging is set up with the default level when the parser is
    built, as actions are not called for absent options.
    """
    def __init__(self, option_strings, dest, default=None, **kwargs):
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_deepdelta_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        set_deepdelta_log_level(getattr(logging, values))
        setattr(namespace, self.dest, values)


def config_for_print(config):
    """Json encode the leaf values of a nested config dict for display."""
    printable = {}
    for key, value in config.items():
        if isinstance(value, dict):
            printable[key] = config_for_print(value) or '{}'
        else:
            printable[key] = json.dumps(value)
    return printable


def print_entrypoint_config(entrypoint, out):
    """Print the effective config of an entry point, under its class name."""
    from .prettyprint import pretty_print_dict, PrettyPrintConfig
    name = entrypoint_configurables[entrypoint].__name__
    config = build_config(entrypoint, include_none=True)
    pretty_print_dict({name: config_for_print(config)},
                      config=PrettyPrintConfig(out=out))


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        print_entrypoint_config(parser.prog, sys.stderr)
        sys.exit(1)


def add_generic_args(parser):
    """Arguments shared by every deepdelta command."""
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        action=ConfigHelpAction,
        help="print the config keys of this command with their "
             "effective values, then exit")
    parser.add_argument(
        '--log-level',
        action=LogLevelAction,
        default='INFO',
        choices=LOG_LEVELS,
        help="log level name, default %(default)s.")


def add_diff_args(parser):
    """Arguments of commands computing a diff."""
    parser.add_argument(
        '--order-independent',
        action='store_true',
        default=False,
        help="compare arrays as unordered collections, sorting both "
             "sides before comparing them element by element.")
    parser.add_argument(
        '-i', '--ignore',
        action='append',
        default=[],
        metavar='PATH',
        help="leave the value at PATH out of the diff. PATH is on the "
             "form /key/*/key, where * matches any array index. "
             "Can be repeated.")


def add_prettyprint_args(parser):
    """Arguments controlling the terminal output."""
    parser.add_argument(
        '--no-color',
        dest='use_color',
        action="store_false",
        default=True,
        help="print without ANSI color escapes")


filename_help = {
    "left": "json document before the changes.",
    "right": "json document after the changes.",
    "target": "json document to patch.",
    "changes": "json change list, as written by deltadiff --out.",
    }


def add_filename_args(parser, names):
    """Add positional filename arguments with consistent help texts."""
    for name in names:
        parser.add_argument(name, help=filename_help[name])


def prettyprint_config_from_args(arguments, **kwargs):
    from .prettyprint import PrettyPrintConfig
    kwargs.setdefault('use_color', getattr(arguments, 'use_color', True))
    return PrettyPrintConfig(**kwargs)


def diff_config_from_args(arguments):
    """The DiffConfig described by parsed diff arguments."""
    from .diffing.config import DiffConfig, prefilter_from_paths
    ignore = getattr(arguments, 'ignore', None)
    return DiffConfig(
        prefilter=prefilter_from_paths(ignore) if ignore else None,
        order_independent=getattr(arguments, 'order_independent', False),
    )
