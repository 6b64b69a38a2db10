# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import compare
from .patch_format import Patch, PatchOp, to_wire_list
from .utils import read_document


__all__ = [
    "__version__",
    "compare",
    "Patch", "PatchOp", "to_wire_list",
    "read_document",
    ]
