# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import PatchFormatError


# Sentinel to allow None as a value
Missing = object()


class JsonPatchError(ValueError):
    "Base class for errors raised while diffing or applying patches."


class InputError(JsonPatchError):
    "Raised when diff is given something that is not a document."


class TraversalError(JsonPatchError):
    "Raised when a pointer cannot be walked inside a document."

    def __init__(self, message, path=None):
        super(TraversalError, self).__init__(message)
        self.path = path


class PathError(JsonPatchError):
    "Raised when an operation targets a location that must exist but does not."

    def __init__(self, message, path=None):
        super(PathError, self).__init__(message)
        self.path = path


class PatchOp:
    "Collection of valid values for the op field in patch entries."
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"


class PatchEntry(dict):
    """Base class of the patch operations.

    A patch entry is a dict holding the RFC 6902 fields of one
    operation ("op", "path" and for some ops "value"), so it can be
    passed to json.dumps as is. The fields are also available as
    attributes. Entries are immutable, and two entries are equal
    when op, path and value are equal.
    """
    op = None

    def __init__(self, **fields):
        dict.__init__(self, op=self.op, **fields)

    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def _immutable(self, *args, **kwargs):
        raise TypeError("{} is immutable".format(type(self).__name__))

    __setattr__ = _immutable
    __delattr__ = _immutable
    __setitem__ = _immutable
    __delitem__ = _immutable
    clear = _immutable
    pop = _immutable
    popitem = _immutable
    setdefault = _immutable
    update = _immutable

    def __hash__(self):
        return hash((self.op, self.path))

    def __reduce__(self):
        return (type(self), self._args())

    def __repr__(self):
        fields = ", ".join("{}={!r}".format(name, self[name])
                           for name in ("path", "value") if name in self)
        return "{}({})".format(type(self).__name__, fields)


class Add(PatchEntry):
    "Add value at path, inserting into sequences."
    op = PatchOp.ADD

    def __init__(self, path, value):
        super(Add, self).__init__(path=path, value=value)

    def _args(self):
        return (self.path, self.value)


class Remove(PatchEntry):
    "Remove the value at path."
    op = PatchOp.REMOVE

    def __init__(self, path):
        super(Remove, self).__init__(path=path)

    def _args(self):
        return (self.path,)


class Replace(PatchEntry):
    "Replace the existing value at path."
    op = PatchOp.REPLACE

    def __init__(self, path, value):
        super(Replace, self).__init__(path=path, value=value)

    def _args(self):
        return (self.path, self.value)


op_classes = {
    PatchOp.ADD: Add,
    PatchOp.REMOVE: Remove,
    PatchOp.REPLACE: Replace,
}


def op_add(path, value):
    "Create a patch entry to add value at path."
    return Add(path, value)

def op_remove(path):
    "Create a patch entry to remove value at path."
    return Remove(path)

def op_replace(path, value):
    "Create a patch entry to replace value at path with given value."
    return Replace(path, value)


def is_valid_patch(patch):
    """Checks wheter a patch (list of patch entries) is well formed.

    Returns a boolean indicating the well-formedness of the patch.
    """
    try:
        validate_patch(patch)
    except PatchFormatError:
        return False
    return True


def validate_patch(patch):
    """Check wheter a patch (list of patch entries) is well formed.

    Raises a PatchFormatError if not well formed.
    """
    if not isinstance(patch, (list, tuple)):
        raise PatchFormatError("Patch must be a list, not '{}'.".format(
            type(patch).__name__))
    for e in patch:
        validate_patch_entry(e)


def validate_patch_entry(e):
    """Check that e is a well formed patch entry.

    Raises a PatchFormatError if not well formed.
    """
    if not isinstance(e, PatchEntry):
        raise PatchFormatError("Patch entry '{}' is not a patch type.".format(e))

    op = e.op
    if op_classes.get(op) is not type(e):
        raise PatchFormatError("Unknown patch op '{}'.".format(op))

    path = e.path
    if not isinstance(path, str) or not path.startswith("/"):
        raise PatchFormatError(
            "Invalid patch path '{}'. Expecting a string starting with '/'.".format(path))

    if op in (PatchOp.ADD, PatchOp.REPLACE):
        if "value" not in e:
            raise PatchFormatError("'{}' expects a value.".format(op))
    elif "value" in e:
        raise PatchFormatError("'{}' does not take a value.".format(op))
