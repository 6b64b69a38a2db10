# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import sys

from . import log
from .args import (
    add_generic_args, add_diff_args, add_filename_args, add_prettyprint_args,
    ConfigBackedParser, diff_config_from_args, prettyprint_config_from_args,
    )
from .diffing import compare
from .patch_format import to_wire_list
from .prettyprint import pretty_print_comparison
from .utils import InputError, read_document, setup_std_streams


_description = "Compute the difference between two JSON documents as a JSON patch."


def main_diff(args):
    """Main handler of diff CLI"""
    output = getattr(args, 'out', None)
    log.set_jpdiff_log_level(args.log_level)

    try:
        return _handle_diff(args.file1, args.file2, output, args)
    except InputError as e:
        # Nothing has been printed yet, so there is no partial output
        log.debug("Failed to load input", exc_info=True)
        print(str(e), file=sys.stderr)
        return 1


def _handle_diff(file1, file2, output, args):
    """Handles diffs of files, either as filenames or file-like objects"""
    log.debug("Reading %s", file1)
    a = read_document(file1)
    log.debug("Reading %s", file2)
    b = read_document(file2)

    patches = compare(a, b, config=diff_config_from_args(args))

    if output:
        with io.open(output, "w", encoding="utf-8") as df:
            json.dump(to_wire_list(patches), df, indent=2,
                      separators=(",", ": "), ensure_ascii=False, allow_nan=False)
        log.info("Wrote %d operations to %s", len(patches), output)

    # This printer is to keep the unit tests passing,
    # some tests capture output with capsys which doesn't
    # pick up on sys.stdout.write()
    class Printer:
        def write(self, text):
            print(text, end="")

    config = prettyprint_config_from_args(args, out=Printer())
    # Separate out filenames:
    name1 = file1 if isinstance(file1, str) else file1.name
    name2 = file2 if isinstance(file2, str) else file2.name
    pretty_print_comparison(name1, name2, patches, config)

    return 0


def _build_arg_parser(prog='jpdiff'):
    """Creates an argument parser for the jpdiff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_diff_args(parser)
    add_prettyprint_args(parser)
    add_filename_args(parser, ["file1", "file2"])

    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the patch is also written to this file as JSON.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
