# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .flatmap import copy_value
from .log import PatchFormatError
from .patch_format import PatchOp, PatchEntry, Add, Remove, Replace, op_classes
from .patching import apply_operation
from .pointer import get_final_destination, resolve


def to_clean_dicts(di):
    "Recursively convert dict-like objects to straight python dicts."
    if isinstance(di, dict):
        return {k: to_clean_dicts(v) for k, v in di.items()}
    elif isinstance(di, list):
        return [to_clean_dicts(v) for v in di]
    else:
        return di


def to_json_patch(patch):
    """Convert a patch into the RFC6902 JSON Patch format.

    The result is a list of plain dicts ready for json.dumps.
    """
    if isinstance(patch, PatchEntry):
        patch = [patch]
    return [to_clean_dicts(e) for e in patch]


def from_json_patch(jp):
    """Convert a list of RFC6902 JSON Patch objects to patch entries.

    Only the "add", "remove" and "replace" operations are supported.
    """
    if isinstance(jp, dict):
        jp = [jp]
    patch = []
    for obj in jp:
        if not isinstance(obj, dict):
            raise PatchFormatError("JSON patch entry '{}' is not an object.".format(obj))
        op = obj.get("op")
        cls = op_classes.get(op)
        if cls is None:
            raise PatchFormatError("Unsupported JSON patch op '{}'.".format(op))
        if "path" not in obj:
            raise PatchFormatError("JSON patch '{}' entry without path.".format(op))
        if cls is Remove:
            patch.append(Remove(obj["path"]))
        elif "value" not in obj:
            raise PatchFormatError("JSON patch '{}' entry without value.".format(op))
        else:
            patch.append(cls(obj["path"], copy_value(obj["value"])))
    return patch


def invert_patch(patch, document):
    """Compute the patch undoing patch when applied to document.

    apply_patch(invert_patch(p, d), apply_patch(p, d)) == d
    """
    if isinstance(patch, PatchEntry):
        patch = [patch]
    inverse = []
    for e in patch:
        patched = apply_operation(e, document)
        if e.op == PatchOp.ADD:
            container, key = get_final_destination(document, e.path)
            if isinstance(container, dict) and key in container:
                inverse.append(Replace(e.path, copy_value(container[key])))
            else:
                inverse.append(Remove(e.path))
        elif e.op == PatchOp.REPLACE:
            inverse.append(Replace(e.path, copy_value(resolve(document, e.path))))
        elif e.op == PatchOp.REMOVE:
            inverse.append(Add(e.path, copy_value(resolve(document, e.path))))
        document = patched
    inverse.reverse()
    return inverse
