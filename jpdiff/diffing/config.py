# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

# Valid values for the key_order setting
KEY_ORDERS = ("document", "sorted")


class DiffConfig:
    """Set of comparison options to pass around the recursion"""

    def __init__(self, *, key_order="document"):
        if key_order not in KEY_ORDERS:
            raise ValueError("key_order must be one of %r, got %r" % (KEY_ORDERS, key_order))
        self.key_order = key_order

    def ordered_keys(self, keys):
        "Return keys in the order patches for them should be emitted."
        if self.key_order == "sorted":
            return sorted(keys)
        return list(keys)

    def __repr__(self):
        return "DiffConfig(key_order=%r)" % (self.key_order,)
