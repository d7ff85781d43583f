# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import flatpatch.log

from .log import PatchFormatError
from .patch_format import (
    PatchOp, PatchEntry, InputError, PathError, TraversalError, validate_patch)
from .flatmap import copy_value
from .pointer import get_final_destination, update_final_destination, list_index


__all__ = ["apply_patch", "apply_operation"]


def _has_key(container, key, path):
    if isinstance(container, dict):
        return key in container
    return list_index(key, path) < len(container)


def apply_add(entry, document):
    "Insert or set entry.value at entry.path."
    path = entry.path
    container, key = get_final_destination(document, path)
    container = container.copy()
    value = copy_value(entry.value)
    if isinstance(container, dict):
        container[key] = value
    else:
        index = list_index(key, path)
        if index > len(container):
            raise PathError(
                "Cannot add at index {} of a list of length {} ({!r}).".format(
                    index, len(container), path), path)
        container.insert(index, value)
    return update_final_destination(document, container, path)


def apply_replace(entry, document):
    "Overwrite the existing value at entry.path with entry.value."
    path = entry.path
    container, key = get_final_destination(document, path)
    if not _has_key(container, key, path):
        raise PathError("Cannot replace missing value at {!r}.".format(path), path)
    container = container.copy()
    if isinstance(container, dict):
        container[key] = copy_value(entry.value)
    else:
        container[int(key)] = copy_value(entry.value)
    return update_final_destination(document, container, path)


def apply_remove(entry, document):
    "Delete the value at entry.path."
    path = entry.path
    container, key = get_final_destination(document, path)
    if not _has_key(container, key, path):
        raise TraversalError("Cannot remove missing value at {!r}.".format(path), path)
    container = container.copy()
    if isinstance(container, dict):
        del container[key]
    else:
        del container[int(key)]
    return update_final_destination(document, container, path)


def apply_operation(entry, document):
    "Apply a single patch entry to document and return the new document."
    op = entry.op
    if op == PatchOp.ADD:
        return apply_add(entry, document)
    elif op == PatchOp.REPLACE:
        return apply_replace(entry, document)
    elif op == PatchOp.REMOVE:
        return apply_remove(entry, document)
    else:
        raise PatchFormatError("Invalid op {}.".format(op))


def apply_patch(patch, document, validate=True):
    """Produce a patched version of document.

    The patch is either a single operation (Add, Remove or Replace)
    or a list of them, which are applied in order with each operation
    seeing the result of the previous one.

    The document itself is never modified. Containers on the path of
    each operation are copied and the rest of the result is shared with
    the input, so if an operation fails nothing has changed.

    A valid document is a dict or list whose values are leaf values,
    or arbitrarily nested dicts and lists of such values.
    """
    if isinstance(patch, PatchEntry):
        patch = [patch]
    elif not isinstance(patch, (list, tuple)):
        raise PatchFormatError("Invalid patch type: {}".format(type(patch).__name__))
    if not isinstance(document, (dict, list)):
        raise InputError("Invalid object type to patch: {}".format(type(document).__name__))

    if validate:
        validate_patch(patch)

    for entry in patch:
        flatpatch.log.debug("Applying %r", entry)
        document = apply_operation(entry, document)
    return document
