# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from jsonschema import Draft4Validator as Validator

from jpdiff import compare
from jpdiff.log import PatchFormatError
from jpdiff.patch_format import (
    Patch, PatchOp, PatchListBuilder,
    op_add, op_remove, op_replace,
    is_valid_patch, validate_patch, to_wire, to_wire_list,
)


def test_check_schema(json_schema_patch):
    Validator.check_schema(json_schema_patch)


def test_validate_object_patch(patch_validator):
    a = {"foo": [1, 2, 3], "bar": {"ting": 7, "tang": 123}}
    b = {"foo": [1, 3], "bar": {"tang": 126, "hello": "world"}}
    patch_validator.validate(to_wire_list(compare(a, b)))


def test_validate_array_patch(patch_validator):
    patch_validator.validate(to_wire_list(compare([2, 3, 4], [1, 2])))
    patch_validator.validate(to_wire_list(compare([2], [2, 3, None])))


def test_validate_root_replace(patch_validator):
    patch_validator.validate(to_wire_list(compare("a", {"b": 1})))


def test_schema_rejects_old_value(patch_validator):
    assert not patch_validator.is_valid([dict(op_replace("/a", 1, 2))])
    assert not patch_validator.is_valid([{"op": "move", "from": "/a", "path": "/b"}])


def test_patch_fields():
    e = op_add("/a", 1)
    assert e.op == PatchOp.ADD
    assert e.path == "/a"
    assert e.value == 1
    assert "old_value" not in e
    with pytest.raises(AttributeError):
        e.old_value

    e = op_remove("/a", None)
    assert e.old_value is None
    assert "value" not in e

    e = op_replace("/", [1], {})
    assert (e.value, e.old_value) == ([1], {})


def test_patch_equality():
    assert op_add("/a", 1) == Patch(op="add", path="/a", value=1)
    assert op_remove("/a", 1) != op_remove("/a", 2)
    assert op_replace("/a", 1, 2) != op_add("/a", 1)


def test_patch_repr():
    assert repr(op_remove("/x", "y")) == "Patch(op='remove', path='/x', old_value='y')"


def test_to_wire_drops_old_value():
    assert to_wire(op_add("/a", 1)) == {"op": "add", "path": "/a", "value": 1}
    assert to_wire(op_remove("/a", 1)) == {"op": "remove", "path": "/a"}
    assert to_wire(op_replace("/a", 2, 1)) == {"op": "replace", "path": "/a", "value": 2}


def test_to_wire_keeps_none_value():
    assert to_wire(op_replace("/a", None, 1)) == {"op": "replace", "path": "/a", "value": None}


def test_builder_keeps_emission_order():
    di = PatchListBuilder()
    di.remove("/b", 1)
    di.add("/a", 2)
    di.replace("/c", 3, 4)
    assert len(di) == 3
    assert di.validated() == [op_remove("/b", 1), op_add("/a", 2), op_replace("/c", 3, 4)]


def test_builder_rejects_bad_entries():
    di = PatchListBuilder()
    with pytest.raises(AssertionError):
        di.append({"op": "add", "path": "/a", "value": 1})
    with pytest.raises(AssertionError):
        di.append(Patch(op="move", path="/a"))
    with pytest.raises(AssertionError):
        di.add("a", 1)


@pytest.mark.parametrize("patches", [
    {"op": "add"},
    [{"op": "add", "path": "/a", "value": 1}],
    [Patch(op="test", path="/a", value=1)],
    [Patch(op="add", path="a", value=1)],
    [Patch(op="add", path=3, value=1)],
    [Patch(op="add", path="/a")],
    [Patch(op="add", path="/a", value=1, old_value=0)],
    [Patch(op="remove", path="/a")],
    [Patch(op="remove", path="/a", value=1, old_value=1)],
    [Patch(op="replace", path="/a", value=1)],
])
def test_validate_patch_rejects(patches):
    with pytest.raises(PatchFormatError):
        validate_patch(patches)
    assert not is_valid_patch(patches)


def test_validate_patch_accepts():
    patches = [op_add("/a", 1), op_remove("/", None), op_replace("/b/0", {}, [])]
    validate_patch(patches)
    assert is_valid_patch(patches)
    assert is_valid_patch([])
