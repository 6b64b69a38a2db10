# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..log import debug
from ..patch_format import PatchListBuilder, validate_patch
from ..utils import child_path, ROOT_PATH

from .comparing import values_equal
from .config import DiffConfig

__all__ = ["compare"]


def compare(left, right, config=None):
    """Compute the patches turning the json-like object left into right.

    Returns a list of Patch entries in emission order. An empty list
    means the two documents are structurally equal.
    """
    if config is None:
        config = DiffConfig()

    di = PatchListBuilder()
    compare_values(left, right, di, path="", config=config)

    patches = di.validated()

    # We can turn this off for performance once the format has settled:
    validate_patch(patches)

    debug("Comparison produced %d patch entries", len(patches))
    return patches


def compare_values(a, b, di, path="", config=None):
    """Compare two values at path, appending patches to the builder di.

    Objects and arrays are decomposed further, anything else that
    differs (including a mix of shapes) is replaced as a whole.
    """
    if config is None:
        config = DiffConfig()

    if isinstance(a, dict) and isinstance(b, dict):
        compare_objects(a, b, di, path=path, config=config)
    elif isinstance(a, list) and isinstance(b, list):
        compare_arrays(a, b, di, path=path, config=config)
    elif not values_equal(a, b):
        # Only the document root has an empty path
        di.replace(path or ROOT_PATH, b, a)


def compare_arrays(a, b, di, path="", config=None):
    """Compare two lists index by index.

    Items at shared indices are compared recursively and trailing items
    of a are removed in the same ascending pass. Trailing items of b
    are added afterwards, also in ascending order.
    """
    if config is None:
        config = DiffConfig()

    if values_equal(a, b):
        return

    nb = len(b)
    for i, avalue in enumerate(a):
        subpath = child_path(path, i)
        if i < nb:
            bvalue = b[i]
            if not values_equal(avalue, bvalue):
                compare_values(avalue, bvalue, di, path=subpath, config=config)
        else:
            di.remove(subpath, avalue)

    for i in range(len(a), nb):
        di.add(child_path(path, i), b[i])


def compare_objects(a, b, di, path="", config=None):
    """Compare two dicts key by key.

    Keys only in a are removed, keys only in b are added, and keys
    in both are compared recursively when their values differ. Keys
    with equal values produce no patches.
    """
    if config is None:
        config = DiffConfig()

    if not isinstance(a, dict) or not isinstance(b, dict):
        raise TypeError('Arguments to compare_objects need to be dicts, got %r and %r' % (a, b))

    for key in config.ordered_keys(k for k in a if k not in b):
        di.remove(child_path(path, key), a[key])

    for key in config.ordered_keys(k for k in b if k not in a):
        di.add(child_path(path, key), b[key])

    for key in config.ordered_keys(k for k in a if k in b):
        avalue = a[key]
        bvalue = b[key]
        if not values_equal(avalue, bvalue):
            compare_values(avalue, bvalue, di, path=child_path(path, key), config=config)
