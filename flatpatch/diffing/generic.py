# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import operator
from collections import defaultdict

import flatpatch.log

from ..flatmap import FlatMap, flatten, pointer_sort_key, copy_value
from ..patch_format import Add, Remove, Replace, InputError, Missing, validate_patch
from ..pointer import split_pointer, join_pointer

from .config import DiffConfig

__all__ = ["diff", "create_additions", "create_replaces", "create_removes"]


def strict_equal(x, y):
    "Compare json values like ==, except that bools never equal numbers."
    if isinstance(x, bool) or isinstance(y, bool):
        return type(x) is type(y) and x == y
    if isinstance(x, dict) and isinstance(y, dict):
        return x.keys() == y.keys() and all(strict_equal(x[k], y[k]) for k in x)
    if isinstance(x, list) and isinstance(y, list):
        return len(x) == len(y) and all(strict_equal(a, b) for a, b in zip(x, y))
    return x == y


def default_predicates(strict_types=True):
    if strict_types:
        return defaultdict(lambda: strict_equal)
    return defaultdict(lambda: operator.__eq__)


def _prefixes(path):
    "Yield path and all its ancestor pointers, shallowest first."
    segments = split_pointer(path)
    for n in range(1, len(segments) + 1):
        yield join_pointer(segments[:n])


def _shallowest_missing(flat, path):
    "Return the shallowest ancestor-or-self of path with no node in flat."
    for p in _prefixes(path):
        if flat.kind(p) is Missing:
            return p
    return None


def _kind_change(source, destination, path):
    """Return the shallowest ancestor-or-self of path where the node
    is a leaf in one document and a container in the other, or a dict in
    one and a list in the other."""
    for p in _prefixes(path):
        a = source.kind(p)
        b = destination.kind(p)
        if a is Missing or b is Missing:
            return None
        if a is not b:
            return p
    return None


def _check_flatmaps(source, destination):
    if not (isinstance(source, FlatMap) and isinstance(destination, FlatMap)):
        raise InputError("Source and destination must be flattened, see flatpatch.flatten.")


def create_additions(source, destination, accumulator=None):
    """Create "add" operations for the leaves of destination missing in source.

    Source and destination have to be FlatMaps. When a whole subtree
    of destination is missing in source, a single operation adds it at
    the root of that subtree.
    """
    _check_flatmaps(source, destination)
    paths = set()
    for key in destination:
        if key in source or _kind_change(source, destination, key):
            continue
        paths.add(_shallowest_missing(source, key))

    additions = [Add(p, copy_value(destination.value_at(p)))
                 for p in sorted(paths, key=pointer_sort_key)]
    return (accumulator or []) + additions


def create_removes(source, destination, accumulator=None):
    """Create "remove" operations for the leaves of source missing in destination.

    Source and destination have to be FlatMaps. Removals come out in
    descending pointer order, so that removing several entries from the
    same list works when they are applied one after the other.
    """
    _check_flatmaps(source, destination)
    paths = set()
    for key in source:
        if key in destination or _kind_change(source, destination, key):
            continue
        paths.add(_shallowest_missing(destination, key))

    removes = [Remove(p) for p in sorted(paths, key=pointer_sort_key, reverse=True)]
    return (accumulator or []) + removes


def create_replaces(source, destination, accumulator=None, config=None):
    """Create "replace" operations by comparing the leaves of source and destination.

    Source and destination have to be FlatMaps. Where a node changes
    between leaf, dict and list, the whole node is replaced.
    """
    _check_flatmaps(source, destination)
    if config is None:
        config = DiffConfig()

    replaced = {}
    for key in destination:
        changed = _kind_change(source, destination, key)
        if changed:
            replaced[changed] = destination.value_at(changed)
        elif key in source and not config.compare(
                source[key], destination[key], destination.pattern(key)):
            replaced[key] = destination[key]
    for key in source:
        changed = _kind_change(source, destination, key)
        if changed:
            replaced[changed] = destination.value_at(changed)

    replaces = [Replace(p, copy_value(replaced[p]))
                for p in sorted(replaced, key=pointer_sort_key)]
    return (accumulator or []) + replaces


def diff(source, destination, config=None):
    """Compute the patch that turns source into destination.

    Both arguments must be json-like documents with a dict or list at
    the root, and of the same type. The patch holds all additions first,
    then all replacements, then all removals.

    >>> diff({"a": 1, "b": 2}, {"a": 3, "c": 4})
    [Add(path='/c', value=4), Replace(path='/a', value=3), Remove(path='/b')]
    """
    if config is None:
        config = DiffConfig()

    for name, document in (("source", source), ("destination", destination)):
        if not isinstance(document, (dict, list)):
            raise InputError("Can only diff dict or list documents, {} is a {}.".format(
                name, type(document).__name__))
    if isinstance(source, dict) != isinstance(destination, dict):
        raise InputError("Cannot diff a {} against a {}.".format(
            type(source).__name__, type(destination).__name__))

    source = flatten(source, config)
    destination = flatten(destination, config)

    patch = create_additions(source, destination)
    patch = create_replaces(source, destination, patch, config=config)
    patch = create_removes(source, destination, patch)

    flatpatch.log.debug("Diff of %d and %d leaves gave %d operations",
                        len(source), len(destination), len(patch))

    # We can turn this off for performance after the library has been well tested:
    validate_patch(patch)

    return patch
