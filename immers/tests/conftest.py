# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os

from jsonschema import Draft4Validator as Validator
from pytest import fixture, skip

from immers.config import clear_config_cache


pjoin = os.path.join

schema_dir = os.path.abspath(pjoin(os.path.dirname(__file__), ".."))


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user and working directory config files out of the tests."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv('JUPYTER_CONFIG_DIR', str(tmp_path / 'jupyter-config'))
    monkeypatch.delenv('JUPYTER_CONFIG_PATH', raising=False)
    clear_config_cache()
    yield tmp_path
    clear_config_cache()


@fixture
def write_config(isolated_config):
    """Fixture writing an immers_config.json into the working directory"""
    def _write(config):
        with io.open(str(isolated_config / 'immers_config.json'), 'w', encoding='utf8') as f:
            json.dump(config, f)
        clear_config_cache()
    return _write


@fixture(scope='session')
def json_schema_patch():
    schema_path = os.path.join(schema_dir, 'patch_format.schema.json')
    with io.open(schema_path, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture
def patch_validator(json_schema_patch):
    return Validator(json_schema_patch)
