# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import random
import time

from flatpatch import diff, apply_patch


def make_document(rng, depth, width):
    if depth == 0:
        return rng.choice([rng.randint(0, 5), "s%d" % rng.randint(0, 5), None, True])
    doc = {}
    for i in range(width):
        if rng.random() < 0.2:
            doc["k%d" % i] = [make_document(rng, depth - 1, width // 2 or 1)
                              for _ in range(rng.randint(0, 4))]
        elif rng.random() < 0.8:
            doc["k%d" % i] = make_document(rng, depth - 1, width)
    return doc


def test_random_documents_round_trip():
    rng = random.Random(1234)
    for _ in range(50):
        a = make_document(rng, 3, 4)
        b = make_document(rng, 3, 4)
        assert apply_patch(diff(a, b), a) == b
        assert diff(a, a) == []


def test_large_document_diff(slow):
    rng = random.Random(42)
    a = make_document(rng, 5, 7)
    b = make_document(rng, 5, 7)
    start = time.time()
    d = diff(a, b)
    assert apply_patch(d, a) == b
    assert time.time() - start < 60
