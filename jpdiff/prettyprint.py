# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import json
import sys

import colorama

from .patch_format import PatchOp, to_wire


# Indentation offset in pretty-print
IND = "  "

NO_DIFFERENCES = "No differences were detected."

comparison_header = "Comparing {afn} and {bfn}"


ColoredConstants = namedtuple('ColoredConstants', (
    'ADD',
    'REMOVE',
    'REPLACE',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        ADD     = colorama.Fore.GREEN,
        REMOVE  = colorama.Fore.RED,
        REPLACE = colorama.Fore.CYAN,
        RESET   = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        ADD     = '',
        REMOVE  = '',
        REPLACE = '',
        RESET   = '',
    )
}


class PrettyPrintConfig:
    def __init__(
            self,
            out=sys.stdout,
            use_color=False,
            ):
        self.out = out
        self.use_color = use_color

    @property
    def colors(self):
        return col_const[bool(self.use_color)]

    def op_color(self, op):
        return {
            PatchOp.ADD: self.colors.ADD,
            PatchOp.REMOVE: self.colors.REMOVE,
            PatchOp.REPLACE: self.colors.REPLACE,
        }[op]


DefaultConfig = PrettyPrintConfig()


def format_patch(patch):
    """Format one patch entry as a compact JSON object.

    Keys come out as op, path, value and non-ASCII text is kept as is.
    """
    return json.dumps(to_wire(patch), separators=(",", ":"),
                      ensure_ascii=False, allow_nan=False)


def pretty_print_patch_list(patches, config=DefaultConfig):
    """Pretty-print a list of patches, one operation per line:

        [
          {"op":"add","path":"/2","value":"c"},
          {"op":"add","path":"/3","value":"d"}
        ]

    """
    reset = config.colors.RESET
    lines = [
        IND + config.op_color(e.op) + format_patch(e) + reset
        for e in patches
    ]
    config.out.write("[\n")
    if lines:
        config.out.write(",\n".join(lines))
        config.out.write("\n")
    config.out.write("]\n")


def pretty_print_comparison(afn, bfn, patches, config=DefaultConfig):
    "Pretty-print the outcome of comparing the files afn and bfn."
    config.out.write(comparison_header.format(afn=afn, bfn=bfn) + "\n")
    if not patches:
        config.out.write(NO_DIFFERENCES + "\n")
    else:
        pretty_print_patch_list(patches, config)
