# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import logging
import os

from jsonschema import Draft4Validator as Validator
from pytest import fixture

from jpdiff import config as jpdiff_config


pjoin = os.path.join

schema_dir = os.path.abspath(pjoin(os.path.dirname(__file__), ".."))


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


@fixture
def slow():
    "Marks a test as slow, so --quick skips it and --slow selects it"


@fixture(scope='session')
def filespath():
    return os.path.join(testspath(), "files")


@fixture
def reset_log():
    # clear root logger handlers before test and reset afterwards
    handlers = list(logging.getLogger().handlers)
    logging.getLogger().handlers[:] = []
    yield
    logging.getLogger().handlers[:] = handlers


@fixture
def isolated_config(tmpdir, monkeypatch):
    """Run with tmpdir as cwd and no config files on the jupyter path"""
    monkeypatch.chdir(str(tmpdir))
    monkeypatch.setattr(jpdiff_config, 'jupyter_config_path', lambda: [])
    return tmpdir


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
def object_doc():
    return {
        "string": "This is a string.",
        "integer": 42,
        "float": 3.14159,
        "object": {
            "substring": "This is another string."
        },
        "array": ["one", "two"],
        "boolean": True,
        "null": None,
    }
