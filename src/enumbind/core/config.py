"""
Generator configuration.

Parses the [enumbind] table from enumbind.toml, or the [tool.enumbind]
table from pyproject.toml, and provides typed defaults for the CLI and
the generation pipeline.
"""

from __future__ import annotations

import logging
import tomllib
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import SpecLoadError

logger = logging.getLogger(__name__)

CONFIG_FILE = "enumbind.toml"
PYPROJECT_FILE = "pyproject.toml"


class TargetLanguage(str, Enum):
    """Languages the generator can emit."""

    JAVA = "java"
    PYTHON = "python"


class EnumBindConfig(BaseModel):
    """Complete generator configuration."""

    model_config = ConfigDict(extra="forbid")

    language: TargetLanguage = TargetLanguage.JAVA
    merge_existing: bool = True
    lookup_threshold: int = Field(default=16, ge=0)
    license_file: Path | None = None
    output_dir: str = "generated/"

    def get_output_path(self, project_root: Path) -> Path:
        """Get absolute output directory path."""
        output_dir = Path(self.output_dir)
        if output_dir.is_absolute():
            return output_dir
        return project_root / output_dir

    def license_header(self) -> str | None:
        """Read the license text, if one is configured."""
        if self.license_file is None:
            return None
        try:
            return self.license_file.read_text(encoding="utf-8").rstrip("\n")
        except (OSError, UnicodeDecodeError) as e:
            raise SpecLoadError(f"Cannot read license file {self.license_file}: {e}") from e


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SpecLoadError(f"Invalid TOML in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise SpecLoadError(f"Cannot decode {path}: {e}") from e
    except OSError as e:
        raise SpecLoadError(f"Cannot read {path}: {e}") from e


def load_config(path: Path) -> EnumBindConfig:
    """
    Load generator configuration from a TOML file.

    ``enumbind.toml`` is read from its ``[enumbind]`` table (or the top
    level when the table is absent); any other file is read from
    ``[tool.enumbind]``. A relative ``license_file`` is resolved against
    the file's directory.

    Args:
        path: Path to enumbind.toml or pyproject.toml

    Returns:
        EnumBindConfig with parsed values or defaults
    """
    if not path.exists():
        return EnumBindConfig()

    data = _read_toml(path)
    if path.name == CONFIG_FILE:
        section = data.get("enumbind", data)
    else:
        section = data.get("tool", {}).get("enumbind", {})

    if not section:
        return EnumBindConfig()

    try:
        config = EnumBindConfig(**section)
    except ValidationError as e:
        raise SpecLoadError(f"Invalid configuration in {path}: {e}") from e

    if config.license_file is not None and not config.license_file.is_absolute():
        config = config.model_copy(update={"license_file": path.parent / config.license_file})
    logger.debug("Loaded configuration from %s", path)
    return config


def find_config(project_root: Path) -> EnumBindConfig:
    """
    Load configuration from the project root.

    Prefers enumbind.toml over pyproject.toml; returns defaults when
    neither is present.
    """
    for name in (CONFIG_FILE, PYPROJECT_FILE):
        candidate = project_root / name
        if candidate.exists():
            return load_config(candidate)
    return EnumBindConfig()
