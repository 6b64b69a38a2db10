# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import sys

from traitlets import TraitError

from ._version import __version__
from .config import (
    CONFIG_BASENAME, get_defaults_for_argparse, build_config, entrypoint_configurables,
)
from .log import LOG_LEVELS, init_logging, set_jpdiff_log_level


class ConfigBackedParser(argparse.ArgumentParser):

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        try:
            defs = get_defaults_for_argparse(entrypoint)
            self.set_defaults(**defs)
        except ValueError:
            pass
        except TraitError as e:
            self.error("invalid value in %s.json: %s" % (CONFIG_BASENAME, e))
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = default or 'INFO'
        init_logging(level=level)
        set_jpdiff_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        set_jpdiff_log_level(values, True)


def modify_config_for_print(config):
    output = {}
    for k, v in config.items():
        if isinstance(v, dict):
            output[k] = modify_config_for_print(v)
            if not output[k]:
                output[k] = '{}'
        else:
            output[k] = json.dumps(v)
    return output


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        header = entrypoint_configurables[parser.prog].__name__
        config = modify_config_for_print(build_config(parser.prog, True))
        print('%s:' % header, file=sys.stderr)
        for k in sorted(config):
            print('  %s: %s' % (k, config[k]), file=sys.stderr)
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all jpdiff commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=LOG_LEVELS,
        help="set the log level by name.",
        action=LogLevelAction,
    )


def add_diff_args(parser):
    """Adds a set of arguments for commands that perform diffs.
    """
    order = parser.add_mutually_exclusive_group()
    order.add_argument(
        '--sort-keys',
        dest='key_order',
        action='store_const',
        const='sorted',
        help="emit operations on object keys sorted by key.")
    order.add_argument(
        '--document-order',
        dest='key_order',
        action='store_const',
        const='document',
        help="emit operations on object keys in the order of the input "
             "documents (default).")
    parser.set_defaults(key_order='document')


filename_help = {
    "file1": "The original (left) JSON document.",
    "file2": "The target (right) JSON document.",
    }


def add_filename_args(parser, names):
    """Add the file1 and file2 positional arguments.

    Helps getting consistent doc strings.
    """
    for name in names:
        parser.add_argument(name, help=filename_help[name])


def add_prettyprint_args(parser):
    """Adds optional arguments for controlling pretty print behavior.
    """
    color = parser.add_mutually_exclusive_group()
    color.add_argument(
        '--color',
        dest='use_color',
        action="store_true",
        help=("use ANSI color code escapes for text output")
    )
    color.add_argument(
        '--no-color',
        dest='use_color',
        action="store_false",
        help=("prevent use of ANSI color code escapes for text output")
    )
    parser.set_defaults(use_color=False)


def prettyprint_config_from_args(arguments, **kwargs):
    from .prettyprint import PrettyPrintConfig
    return PrettyPrintConfig(
        use_color=getattr(arguments, 'use_color', False),
        **kwargs
    )


def diff_config_from_args(arguments):
    from .diffing.config import DiffConfig
    return DiffConfig(key_order=getattr(arguments, 'key_order', None) or 'document')
