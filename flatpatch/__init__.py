# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import diff, DiffConfig
from .flatmap import flatten, unflatten
from .log import PatchFormatError
from .patch_format import Add, Remove, Replace, InputError, TraversalError, PathError
from .patching import apply_patch
from .patch_utils import to_json_patch, from_json_patch, invert_patch


__all__ = [
    "__version__",
    "diff", "DiffConfig",
    "apply_patch",
    "Add", "Remove", "Replace",
    "flatten", "unflatten",
    "to_json_patch", "from_json_patch", "invert_patch",
    "InputError", "TraversalError", "PathError", "PatchFormatError",
    ]
