from __future__ import annotations

import json

import jsonschema
import pytest
from jsonschema.exceptions import ValidationError

from csvrecord.config.loader import SCHEMA_PATH

"""Conversion options schema contract test."""


def _schema() -> dict:
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def test_options_schema_valid_example():
    config = {
        "default_int": 0,
        "default_uint": 0,
        "default_bool": False,
        "default_string": "",
        "true_values": ["t", "true", "1", "active"],
        "false_values": ["f", "false", "0", "inactive"],
    }
    jsonschema.validate(config, _schema())


def test_options_schema_empty_is_valid():
    jsonschema.validate({}, _schema())


@pytest.mark.parametrize(
    "config",
    [
        {"unknown": 1},
        {"default_int": "1"},
        {"default_uint": -1},
        {"default_bool": "yes"},
        {"true_values": []},
        {"false_values": [""]},
    ],
)
def test_options_schema_rejects(config):
    with pytest.raises(ValidationError):
        jsonschema.validate(config, _schema())
