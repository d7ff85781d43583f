# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Locate and replace values in nested documents by slash-delimited pointers.

A pointer like "/a/b/0" addresses document["a"]["b"][0]. Dicts are
indexed by key and lists by decimal index. Nothing here mutates the
document it is given: update_final_destination copies every container
on the path from the root down to the parent of the addressed value
and shares everything else with the input.
"""

import re

from .patch_format import TraversalError


__all__ = ["split_pointer", "join_pointer", "get_final_destination",
           "update_final_destination", "resolve"]


container_types = (dict, list)

index_pattern = re.compile(r"(?:0|[1-9][0-9]*)\Z")


def split_pointer(path):
    """Split a pointer into its list of segments.

    The first element of "/a/b".split("/") is always "", it is dropped.
    """
    if not isinstance(path, str):
        raise TraversalError("Pointer must be a string, not {!r}.".format(path), path)
    if not path.startswith("/"):
        raise TraversalError("Pointer must start with '/': {!r}.".format(path), path)
    return path.split("/")[1:]


def join_pointer(segments):
    "Inverse of split_pointer."
    return "".join("/" + str(s) for s in segments)


def list_index(segment, path):
    "Convert segment to a list index, or raise TraversalError."
    if not index_pattern.match(segment):
        raise TraversalError(
            "Invalid list index {!r} in pointer {!r}.".format(segment, path), path)
    return int(segment)


def _child(node, segment, path):
    "Look up segment in node, which must be a container holding it."
    if isinstance(node, dict):
        try:
            return node[segment]
        except KeyError:
            raise TraversalError(
                "Key {!r} of pointer {!r} not found.".format(segment, path), path)
    elif isinstance(node, list):
        index = list_index(segment, path)
        if index >= len(node):
            raise TraversalError(
                "Index {} of pointer {!r} out of range.".format(index, path), path)
        return node[index]
    raise TraversalError(
        "Cannot look up {!r} of pointer {!r} in a {}.".format(
            segment, path, type(node).__name__), path)


def _spine(document, segments, path):
    "Return the containers from document down to the parent of the final segment."
    if not segments:
        raise TraversalError("Pointer {!r} has no segments.".format(path), path)
    nodes = [document]
    for segment in segments[:-1]:
        nodes.append(_child(nodes[-1], segment, path))
    if not isinstance(nodes[-1], container_types):
        raise TraversalError(
            "Parent of pointer {!r} is a {}, not a container.".format(
                path, type(nodes[-1]).__name__), path)
    return nodes


def get_final_destination(document, path):
    """Find the container holding the value that path points to.

    Returns a (container, key) tuple where key is the last segment of
    path as a string. The key itself does not need to exist in the
    container, callers decide if that is an error.

    >>> get_final_destination({"a": {"b": {"c": {"d": 1}}}}, "/a/b/c/d")
    ({'d': 1}, 'd')
    """
    segments = split_pointer(path)
    return _spine(document, segments, path)[-1], segments[-1]


def update_final_destination(document, new_destination, path):
    """Replace the container holding the value at path with new_destination.

    Returns a new document. The containers along the path are shallow
    copies, all other values are shared with document.

    >>> update_final_destination({"a": {"b": {"c": {"d": 1}}}}, {"e": 1}, "/a/b/c/d")
    {'a': {'b': {'c': {'e': 1}}}}
    """
    segments = split_pointer(path)
    nodes = _spine(document, segments, path)
    replacement = new_destination
    # Walk back up from the parent's parent, copying each ancestor
    for node, segment in zip(reversed(nodes[:-1]), reversed(segments[:-1])):
        node = node.copy()
        if isinstance(node, list):
            node[int(segment)] = replacement
        else:
            node[segment] = replacement
        replacement = node
    return replacement


def resolve(document, path):
    "Return the value that path points to."
    segments = split_pointer(path)
    container = _spine(document, segments, path)[-1]
    return _child(container, segments[-1], path)
