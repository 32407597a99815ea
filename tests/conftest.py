"""Shared pytest fixtures for enumbind tests."""

import importlib.util
import itertools
from pathlib import Path
from types import ModuleType
from typing import Any

import pytest

from enumbind.core.models import EnumSpec

_module_counter = itertools.count()


@pytest.fixture
def color_record() -> dict[str, Any]:
    """Return the plain Color record."""
    return {
        "name": "Color",
        "package": "com.example",
        "variant": "plain",
        "constants": [
            {"name": "RED", "value": 1},
            {"name": "GREEN", "value": 2},
            {"name": "BLUE", "value": 3},
        ],
    }


@pytest.fixture
def http_status_record() -> dict[str, Any]:
    """Return the error-domain HTTPStatus record."""
    return {
        "name": "HTTPStatus",
        "package": "com.example.net",
        "variant": "error-domain",
        "errorDomainClassName": "HTTPErrorDomain",
        "constants": [
            {"name": "OK", "value": 200},
            {"name": "NOT_FOUND", "value": 404, "doc": "No such resource."},
        ],
    }


@pytest.fixture
def color_spec(color_record: dict[str, Any]) -> EnumSpec:
    return EnumSpec.from_record(color_record)


@pytest.fixture
def http_status_spec(http_status_record: dict[str, Any]) -> EnumSpec:
    return EnumSpec.from_record(http_status_record)


def import_generated(path: Path) -> ModuleType:
    """Import a generated Python module from its file path."""
    module_name = f"_enumbind_generated_{path.stem}_{next(_module_counter)}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def load_generated():
    """Return a helper that imports generated Python modules."""
    return import_generated
