# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os

from jsonschema import Draft4Validator as Validator
from pytest import fixture, skip

from flatpatch import config as flatpatch_config


pjoin = os.path.join

schema_dir = os.path.abspath(pjoin(os.path.dirname(__file__), ".."))


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture
def json_schema_patch(request):
    schema_path = os.path.join(schema_dir, 'patch_format.schema.json')
    with io.open(schema_path, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture
def patch_validator(request, json_schema_patch):
    return Validator(json_schema_patch)


@fixture
def bob():
    "The source and destination of the canonical example."
    source = {"name": "Bob", "married": False, "hobbies": ["Elixir", "Sport", "Football"]}
    destination = {"name": "Bob", "married": True, "hobbies": ["Elixir!"], "age": 33}
    return source, destination


@fixture
def config_dir(tmpdir, monkeypatch):
    """Run in an empty directory that only sees its own config files."""
    monkeypatch.setattr(flatpatch_config, 'jupyter_config_path', lambda: [])
    monkeypatch.setattr(flatpatch_config, '_config_cache', {})
    with tmpdir.as_cwd():
        yield tmpdir
