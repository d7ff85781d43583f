# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from flatpatch import apply_patch, diff
from flatpatch.patch_format import is_valid_patch


def check_diff_and_patch(a, b):
    "Check that apply_patch(diff(a,b), a) reproduces b and leaves a alone."
    original = copy.deepcopy(a)
    d = diff(a, b)
    assert is_valid_patch(d)
    assert apply_patch(d, a) == b
    assert a == original


def check_symmetric_diff_and_patch(a, b):
    "Check that apply_patch(diff(a,b), a) reproduces b and vice versa."
    check_diff_and_patch(a, b)
    check_diff_and_patch(b, a)
