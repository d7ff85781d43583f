# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .patch_format import Missing, InputError
from .pointer import split_pointer, list_index, join_pointer, index_pattern


__all__ = ["FlatMap", "walk", "flatten", "unflatten", "pointer_sort_key", "copy_value"]


class FlatMap(dict):
    """Mapping from pointer to leaf value of a flattened document.

    Besides the leaves, a FlatMap remembers the container found at every
    inner pointer (containers) and the path pattern of every leaf
    (patterns), which is the pointer with list indices replaced by "*".
    """

    def __init__(self, *args, **kwargs):
        super(FlatMap, self).__init__(*args, **kwargs)
        self.containers = {}
        self.patterns = {}

    def kind(self, path):
        """Return the type of the container at path, None for a leaf
        and Missing if there is no node at path."""
        if path in self.containers:
            return dict if isinstance(self.containers[path], dict) else list
        if path in self:
            return None
        return Missing

    def value_at(self, path):
        "Return the leaf or container at path."
        if path in self.containers:
            return self.containers[path]
        try:
            return self[path]
        except KeyError:
            raise InputError("No value at {!r}.".format(path))

    def pattern(self, path):
        return self.patterns.get(path, path)


def pointer_sort_key(path):
    "Sort key for pointers comparing list indices as numbers."
    return [(0, int(s), "") if index_pattern.match(s) else (1, 0, s)
            for s in split_pointer(path)]


def _children(node, path, pattern):
    if isinstance(node, dict):
        for key, value in node.items():
            if "/" in key:
                raise InputError("Cannot address the key {!r} in {!r} with a pointer.".format(
                    key, path or "/"))
            yield path + "/" + key, pattern + "/" + key, value
    else:
        for index, value in enumerate(node):
            yield "%s/%d" % (path, index), pattern + "/*", value


def walk(document, config=None):
    """Yield (pointer, pattern, value, is_leaf) for each node below the root.

    Parents come before their children, and siblings come in the
    iteration order of their container. A node is a leaf if it is not
    a dict or list, if it is an empty dict or list, or if its pattern is
    configured as atomic.
    """
    if config is None:
        from .diffing.config import DiffConfig
        config = DiffConfig()

    stack = [_children(document, "", "")]
    while stack:
        for path, pattern, value in stack[-1]:
            leaf = config.is_atomic(value, pattern)
            yield path, pattern, value, leaf
            if not leaf:
                stack.append(_children(value, path, pattern))
                break
        else:
            stack.pop()


def flatten(document, config=None):
    """Flatten a nested document to a FlatMap.

    >>> flatten({"a": {"b": 1}, "c": [True, None]})
    {'/a/b': 1, '/c/0': True, '/c/1': None}
    """
    flat = FlatMap()
    for path, pattern, value, leaf in walk(document, config):
        if leaf:
            flat[path] = value
            flat.patterns[path] = pattern
        else:
            flat.containers[path] = value
    return flat


def copy_value(value):
    """Copy a json-like value, sharing no dict or list with the original.

    Works without recursion, so values nested deeper than the
    interpreter's recursion limit can be copied.
    """
    if not isinstance(value, (dict, list)):
        return value
    root = {} if isinstance(value, dict) else []
    stack = [(value, root)]
    while stack:
        node, target = stack.pop()
        items = node.items() if isinstance(node, dict) else enumerate(node)
        for key, child in items:
            if isinstance(child, (dict, list)):
                new = {} if isinstance(child, dict) else []
                stack.append((child, new))
            else:
                new = child
            if isinstance(target, dict):
                target[key] = new
            else:
                target.append(new)
    return root


def _set_child(node, segment, value, path):
    if isinstance(node, dict):
        node[segment] = value
        return
    index = list_index(segment, path)
    if index == len(node):
        node.append(value)
    elif index < len(node):
        node[index] = value
    else:
        raise InputError("Missing list entries before {!r}.".format(path))


def unflatten(flatmap):
    """Rebuild a nested dict from a mapping of pointers to leaves.

    Segments that are list indices make the container holding them a
    list, so dicts with only numeric keys do not survive a flatten and
    unflatten round.
    """
    document = {}
    for path in sorted(flatmap, key=pointer_sort_key):
        segments = split_pointer(path)
        node = document
        for i, segment in enumerate(segments[:-1]):
            if isinstance(node, dict):
                child = node.get(segment, Missing)
            else:
                index = list_index(segment, path)
                child = node[index] if index < len(node) else Missing
            if child is Missing:
                child = [] if index_pattern.match(segments[i + 1]) else {}
                _set_child(node, segment, child, join_pointer(segments[:i + 1]))
            elif not isinstance(child, (dict, list)):
                raise InputError("Pointer {!r} passes through the leaf at {!r}.".format(
                    path, join_pointer(segments[:i + 1])))
            node = child
        _set_child(node, segments[-1], copy_value(flatmap[path]), path)
    return document
