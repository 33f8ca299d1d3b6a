# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os

from jsonschema import Draft7Validator as Validator
from pytest import fixture, skip

from deepdelta.change_utils import schema_path


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture
def json_schema_changes(request):
    with io.open(schema_path, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture
def changes_validator(request, json_schema_changes):
    return Validator(json_schema_changes)


@fixture
def write_json(tmpdir):
    """Fixture returning a function writing a value to a json file in tmpdir"""
    def write(name, value):
        fn = str(tmpdir.join(name))
        with io.open(fn, 'w', encoding='utf8') as f:
            json.dump(value, f)
        return fn
    return write


@fixture
def read_json_file():
    def read(fn):
        with io.open(fn, encoding='utf8') as f:
            return json.load(f)
    return read
