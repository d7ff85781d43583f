# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
import json
import pickle

import pytest

from flatpatch import Add, Remove, Replace, PatchFormatError
from flatpatch.patch_format import (
    PatchOp, PatchEntry, JsonPatchError, InputError, PathError, TraversalError,
    is_valid_patch, validate_patch)


def test_operations_are_dicts():
    assert Add("/a", 1) == {"op": "add", "path": "/a", "value": 1}
    assert Remove("/a") == {"op": "remove", "path": "/a"}
    assert Replace("/a", None) == {"op": "replace", "path": "/a", "value": None}
    assert json.loads(json.dumps(Add("/a", [1]))) == {"op": "add", "path": "/a", "value": [1]}


def test_operation_attributes():
    e = Replace("/a/b", {"c": 1})
    assert e.op == PatchOp.REPLACE
    assert e.path == "/a/b"
    assert e.value == {"c": 1}
    with pytest.raises(AttributeError):
        Remove("/a").value


def test_operation_equality():
    assert Add("/a", 1) == Add("/a", 1)
    assert Add("/a", 1) != Replace("/a", 1)
    assert Add("/a", 1) != Add("/a", 2)
    assert Add("/a", 1) != Add("/b", 1)
    assert len({Add("/a", 1), Add("/a", 1), Remove("/a")}) == 2


def test_operations_are_immutable():
    e = Add("/a", 1)
    with pytest.raises(TypeError):
        e["path"] = "/b"
    with pytest.raises(TypeError):
        e.path = "/b"
    with pytest.raises(TypeError):
        del e["value"]
    with pytest.raises(TypeError):
        e.update(path="/b")
    with pytest.raises(TypeError):
        e.pop("value")
    assert e == Add("/a", 1)


def test_operations_copy_and_pickle():
    e = Add("/a", {"b": [1, 2]})
    c = copy.deepcopy(e)
    assert c == e
    assert type(c) is Add
    assert c.value is not e.value
    assert pickle.loads(pickle.dumps(Remove("/x"))) == Remove("/x")


def test_operation_repr():
    assert repr(Add("/a", 1)) == "Add(path='/a', value=1)"
    assert repr(Remove("/a")) == "Remove(path='/a')"


def test_error_hierarchy():
    for cls in (InputError, PathError, TraversalError):
        assert issubclass(cls, JsonPatchError)
        assert issubclass(cls, ValueError)
    assert issubclass(PatchFormatError, ValueError)


def test_validate_patch():
    validate_patch([])
    validate_patch([Add("/a", 1), Replace("/b", 2), Remove("/c")])
    assert is_valid_patch((Add("/", 1),))


@pytest.mark.parametrize("patch", [
    Add("/a", 1),
    {"op": "add", "path": "/a", "value": 1},
    [{"op": "add", "path": "/a", "value": 1}],
    [Add("a", 1)],
    [Add(1, 1)],
    [Remove("")],
])
def test_invalid_patch(patch):
    assert not is_valid_patch(patch)
    with pytest.raises(PatchFormatError):
        validate_patch(patch)


def test_invalid_patch_entry_types():
    class Test(PatchEntry):
        op = "test"

        def __init__(self, path, value):
            super(Test, self).__init__(path=path, value=value)

    assert not is_valid_patch([Test("/a", 1)])
