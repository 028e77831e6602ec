# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os

from pytest import fixture, skip

from richdelta import Delta, Op, of


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture
def sample_ops():
    return [
        Op.insert("abc"),
        Op.retain(1, of("color", "red")),
        Op.delete(4),
        Op.insert("def", of("bold", True)),
        Op.retain(6),
    ]


@fixture
def embed_delta():
    return Delta().insert(1, of("alt", "Description")).delete(1)


@fixture
def config_dir(tmpdir):
    """Empty directory to place richdelta_config.json files in."""
    return str(tmpdir.mkdir('config'))


@fixture
def write_config(config_dir):
    def write(content):
        with open(os.path.join(config_dir, 'richdelta_config.json'), 'w') as f:
            json.dump(content, f)
        return config_dir
    return write
