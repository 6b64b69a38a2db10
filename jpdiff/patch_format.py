# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import PatchFormatError


class Patch(dict):
    """A single patch operation.

    Minimal class providing attribute access to the entry fields
    `op`, `path`, `value` and `old_value`. Fields that do not apply
    to an operation are left out of the dict, so `value` is absent
    for removals and `old_value` is absent for additions.

    Equality is plain dict equality, which makes it easy to compare
    computed patches against expected ones in tests.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __repr__(self):
        return "Patch(%s)" % ", ".join(
            "%s=%r" % (k, self[k]) for k in ("op", "path", "value", "old_value")
            if k in self)


class PatchOp:
    "Collection of valid values for the op field in patch entries."
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"

    OPS = (ADD, REMOVE, REPLACE)


# Fields each op carries, besides op and path
_op_fields = {
    PatchOp.ADD: ("value",),
    PatchOp.REMOVE: ("old_value",),
    PatchOp.REPLACE: ("value", "old_value"),
}

# Fields each op carries in the external representation
_wire_fields = {
    PatchOp.ADD: ("op", "path", "value"),
    PatchOp.REMOVE: ("op", "path"),
    PatchOp.REPLACE: ("op", "path", "value"),
}


def op_add(path, value):
    "Create a patch entry to add value at path."
    return Patch(op=PatchOp.ADD, path=path, value=value)

def op_remove(path, old_value):
    "Create a patch entry to remove old_value at path."
    return Patch(op=PatchOp.REMOVE, path=path, old_value=old_value)

def op_replace(path, value, old_value):
    "Create a patch entry to replace old_value at path with value."
    return Patch(op=PatchOp.REPLACE, path=path, value=value, old_value=old_value)


class PatchListBuilder(object):
    """Collects patch entries in emission order.

    One builder is shared by a whole comparison; every level of the
    recursion appends to it.
    """

    def __init__(self):
        self._patches = []

    def __len__(self):
        return len(self._patches)

    def validated(self):
        return self._patches

    def append(self, entry):
        # Typechecking (just for internal consistency checking)
        assert isinstance(entry, Patch)
        assert entry.get("op") in PatchOp.OPS
        assert entry.get("path", "").startswith("/")
        self._patches.append(entry)

    def add(self, path, value):
        self.append(op_add(path, value))

    def remove(self, path, old_value):
        self.append(op_remove(path, old_value))

    def replace(self, path, value, old_value):
        self.append(op_replace(path, value, old_value))


def is_valid_patch(patches):
    """Checks whether a patch list is well formed.

    Returns a boolean indicating the well-formedness of the list.
    """
    try:
        validate_patch(patches)
    except PatchFormatError:
        return False
    return True


def validate_patch(patches):
    """Check whether a patch list is well formed.

    Raises a PatchFormatError if not well formed.
    """
    if not isinstance(patches, list):
        raise PatchFormatError("Patch list must be a list.")
    for e in patches:
        validate_patch_entry(e)


def validate_patch_entry(e):
    """Check that e is a well formed patch entry.

    Raises a PatchFormatError if not well formed.
    """
    if not isinstance(e, Patch):
        raise PatchFormatError("Patch entry '{}' is not a patch type.".format(e))

    op = e.get("op")
    if op not in PatchOp.OPS:
        raise PatchFormatError("Unknown patch op '{}'.".format(op))

    path = e.get("path")
    if not isinstance(path, str) or not path.startswith("/"):
        raise PatchFormatError(
            "Patch path '{}' must be a string starting with '/'.".format(path))

    expected = set(("op", "path") + _op_fields[op])
    if set(e.keys()) != expected:
        raise PatchFormatError(
            "A '{}' entry needs exactly the fields {}, got {}.".format(
                op, sorted(expected), sorted(e.keys())))


def to_wire(patch):
    """Convert a patch entry to its external JSON patch object.

    The old value is diagnostic only and is never included.
    """
    return {k: patch[k] for k in _wire_fields[patch.op]}


def to_wire_list(patches):
    return [to_wire(e) for e in patches]
