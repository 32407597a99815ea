"""
Enum spec loading.

Reads input records from YAML, JSON or TOML files and turns them into
validated EnumSpecs. A file may hold a single record, a list of records,
or a mapping with an ``enums`` list.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

import yaml

from .errors import SpecLoadError, SpecValidationError
from .models import EnumSpec

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml", ".json"}
TOML_SUFFIXES = {".toml"}


def read_records(path: Path) -> list[dict[str, Any]]:
    """
    Read raw enum records from a spec file.

    Args:
        path: Path to a .yaml/.yml/.json/.toml file

    Returns:
        List of raw records in file order

    Raises:
        SpecLoadError: If the file is missing, unparsable or has no records
    """
    if not path.exists():
        raise SpecLoadError(f"Spec file not found: {path}")

    suffix = path.suffix.lower()
    try:
        content = path.read_text(encoding="utf-8")
        if suffix in YAML_SUFFIXES:
            data = yaml.safe_load(content)
        elif suffix in TOML_SUFFIXES:
            data = tomllib.loads(content)
        else:
            raise SpecLoadError(f"Unsupported spec file type '{suffix}': {path}")
    except yaml.YAMLError as e:
        raise SpecLoadError(f"Invalid YAML in {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise SpecLoadError(f"Invalid TOML in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise SpecLoadError(f"Cannot decode {path}: {e}") from e
    except OSError as e:
        raise SpecLoadError(f"Cannot read {path}: {e}") from e

    if isinstance(data, dict) and "enums" in data:
        data = data["enums"]
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list) or not data:
        raise SpecLoadError(f"No enum records found in {path}")

    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise SpecLoadError(f"Record {index} in {path} is not a mapping")
    logger.debug("Read %d enum record(s) from %s", len(data), path)
    return data


def load_specs(path: Path) -> list[EnumSpec]:
    """
    Load and validate every enum in a spec file.

    Raises:
        SpecLoadError: If the file cannot be read
        SpecValidationError: On the first invalid record
    """
    return [EnumSpec.from_record(record) for record in read_records(path)]


def load_single_spec(path: Path) -> EnumSpec:
    """
    Load a spec file that must describe exactly one enum.

    Raises:
        SpecValidationError: If the file holds more than one record
    """
    records = read_records(path)
    if len(records) != 1:
        names = ", ".join(str(r.get("name", "<unnamed>")) for r in records)
        raise SpecValidationError(f"expected exactly one enum in {path}, found {len(records)} ({names})")
    return EnumSpec.from_record(records[0])
