"""Pytest configuration and fixtures."""

import logging
import textwrap
from dataclasses import dataclass
from pathlib import Path

import pytest

from containment import ContainmentEngine


class NullObject:
    """Test double that answers every attribute lookup with itself."""

    __null_object__ = True

    def __getattr__(self, name):
        return self

    def __call__(self, *args, **kwargs):
        return self

    def __repr__(self):
        return f"<NullObject {id(self):#x}>"


@dataclass
class Domain:
    """Plain value object that happens to define matches()."""

    domain: str

    def matches(self, url: str) -> bool:
        return url.split("/")[2] == self.domain


@pytest.fixture()
def engine():
    return ContainmentEngine()


@pytest.fixture()
def tmp_yaml(tmp_path):
    """Helper that writes YAML content to a temp file and returns its path."""

    def _write(content: str, name: str = "suite.yaml") -> Path:
        p = tmp_path / name
        p.write_text(textwrap.dedent(content))
        return p

    return _write


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Drop handlers that tests (or the CLI --debug flag) installed."""
    yield

    root = logging.getLogger()
    for handler in list(root.handlers):
        if type(handler).__name__ == "RichHandler":
            root.removeHandler(handler)
