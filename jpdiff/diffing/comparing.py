# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

__all__ = ["value_kind", "values_equal"]


def value_kind(x):
    """Return the name of the JSON variant x belongs to.

    bool is checked before int since bool is an int subclass in Python.
    """
    if x is None:
        return "null"
    if isinstance(x, bool):
        return "boolean"
    if isinstance(x, int):
        return "integer"
    if isinstance(x, float):
        return "float"
    if isinstance(x, str):
        return "string"
    if isinstance(x, list):
        return "array"
    if isinstance(x, dict):
        return "object"
    raise TypeError("Not a JSON value: %r" % (x,))


def values_equal(a, b):
    """Deep, type-sensitive equality of two JSON values.

    Unlike ==, True does not equal 1 and 1 does not equal 1.0,
    also when nested inside lists or dicts. Object key order
    is not significant.
    """
    if a is b:
        return True
    kind = value_kind(a)
    if kind != value_kind(b):
        return False
    if kind == "array":
        return len(a) == len(b) and all(values_equal(x, y) for x, y in zip(a, b))
    if kind == "object":
        if len(a) != len(b):
            return False
        for key, x in a.items():
            if key not in b or not values_equal(x, b[key]):
                return False
        return True
    return a == b
