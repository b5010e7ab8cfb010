"""Pytest configuration and fixtures."""

import logging
import textwrap
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Reset testasserts loggers after each test so handlers do not leak."""
    yield

    names = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("testasserts")
    ]

    for name in names:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


@pytest.fixture()
def tmp_yaml(tmp_path):
    """Helper that writes YAML content to a temp file and returns its path."""

    def _write(content: str, name: str = "checks.yaml") -> Path:
        p = tmp_path / name
        p.write_text(textwrap.dedent(content))
        return p

    return _write
