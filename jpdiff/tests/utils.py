# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from contextlib import contextmanager
import json

import pytest

from jpdiff import compare
from jpdiff.patch_format import is_valid_patch, to_wire_list


def check_compare(a, b):
    "Compare a and b, check the result is well formed and return it."
    patches = compare(a, b)
    assert is_valid_patch(patches)
    # Wire form must survive a trip through json
    wire = to_wire_list(patches)
    assert json.loads(json.dumps(wire)) == wire
    return patches


def check_reflexive(a):
    "Check that comparing a value with itself and a copy finds nothing."
    assert check_compare(a, a) == []
    assert check_compare(a, json.loads(json.dumps(a))) == []


def assert_same_patches(expected, actual):
    "Compare patch lists ignoring emission order."
    assert len(expected) == len(actual)
    for e in expected:
        assert e in actual


@contextmanager
def assert_clean_exit():
    """Assert that SystemExit is called with code=0"""
    with pytest.raises(SystemExit) as e:
        yield
    assert e.value.code == 0
