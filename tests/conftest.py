# Shared pytest fixtures
from __future__ import annotations
import logging
import tempfile
from pathlib import Path

import pytest

from csvrecord.logging.init import LOGGER_NAME


@pytest.fixture(autouse=True)
def _clean_logging():
    yield
    # setup_logging() disables propagation; restore it so caplog keeps working
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def value_header() -> list[str]:
    return ["a", "b", "c"]


@pytest.fixture()
def value_rows(value_header) -> list[list[str]]:
    return [
        value_header,
        ["1", "2", "true"],
    ]


@pytest.fixture()
def sample_options_yaml() -> str:
    return """default_int: -1
default_uint: 7
default_bool: true
default_string: n/a
true_values: ["y", "yes", "on"]
false_values: ["n", "no", "off"]
"""


@pytest.fixture()
def write_options(temp_workdir: Path, sample_options_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "options.yml"
    cfg.write_text(sample_options_yaml, encoding="utf-8")
    return cfg
