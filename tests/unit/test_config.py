"""
Tests for generator configuration loading.
"""

from pathlib import Path

import pytest

from enumbind.core.config import EnumBindConfig, TargetLanguage, find_config, load_config
from enumbind.core.errors import SpecLoadError


class TestEnumBindConfig:
    """Test config defaults and helpers."""

    def test_defaults(self):
        config = EnumBindConfig()
        assert config.language == TargetLanguage.JAVA
        assert config.merge_existing is True
        assert config.lookup_threshold == 16
        assert config.license_file is None
        assert config.license_header() is None

    def test_relative_output_path(self, tmp_path: Path):
        config = EnumBindConfig(output_dir="out/java")
        assert config.get_output_path(tmp_path) == tmp_path / "out" / "java"

    def test_absolute_output_path(self, tmp_path: Path):
        config = EnumBindConfig(output_dir=str(tmp_path / "abs"))
        assert config.get_output_path(Path("/elsewhere")) == tmp_path / "abs"

    def test_missing_license_file(self, tmp_path: Path):
        config = EnumBindConfig(license_file=tmp_path / "LICENSE")
        with pytest.raises(SpecLoadError, match="Cannot read license file"):
            config.license_header()


class TestLoadConfig:
    """Test TOML config loading."""

    def test_missing_file_returns_defaults(self, tmp_path: Path):
        assert load_config(tmp_path / "enumbind.toml") == EnumBindConfig()

    def test_enumbind_toml(self, tmp_path: Path):
        path = tmp_path / "enumbind.toml"
        path.write_text(
            """
[enumbind]
language = "python"
merge_existing = false
lookup_threshold = 4
"""
        )

        config = load_config(path)

        assert config.language == TargetLanguage.PYTHON
        assert config.merge_existing is False
        assert config.lookup_threshold == 4

    def test_enumbind_toml_without_table(self, tmp_path: Path):
        path = tmp_path / "enumbind.toml"
        path.write_text('language = "python"\n')

        assert load_config(path).language == TargetLanguage.PYTHON

    def test_pyproject_tool_table(self, tmp_path: Path):
        path = tmp_path / "pyproject.toml"
        path.write_text(
            """
[project]
name = "bindings"

[tool.enumbind]
output_dir = "src/generated"
"""
        )

        assert load_config(path).output_dir == "src/generated"

    def test_pyproject_without_tool_table(self, tmp_path: Path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "bindings"\n')

        assert load_config(path) == EnumBindConfig()

    def test_relative_license_file_resolves_against_config(self, tmp_path: Path):
        (tmp_path / "LICENSE.txt").write_text("Copyright (C) 2024 Example\n\nLicensed.\n")
        path = tmp_path / "enumbind.toml"
        path.write_text('[enumbind]\nlicense_file = "LICENSE.txt"\n')

        config = load_config(path)

        assert config.license_file == tmp_path / "LICENSE.txt"
        assert config.license_header() == "Copyright (C) 2024 Example\n\nLicensed."

    def test_invalid_value(self, tmp_path: Path):
        path = tmp_path / "enumbind.toml"
        path.write_text('[enumbind]\nlanguage = "cobol"\n')

        with pytest.raises(SpecLoadError, match="Invalid configuration"):
            load_config(path)

    def test_invalid_toml(self, tmp_path: Path):
        path = tmp_path / "enumbind.toml"
        path.write_text("[enumbind\n")

        with pytest.raises(SpecLoadError, match="Invalid TOML"):
            load_config(path)

    def test_undecodable_file(self, tmp_path: Path):
        path = tmp_path / "enumbind.toml"
        path.write_bytes(b'[enumbind]\nlanguage = "\xff"\n')

        with pytest.raises(SpecLoadError, match="Cannot decode"):
            load_config(path)

    def test_unreadable_file(self, tmp_path: Path):
        path = tmp_path / "enumbind.toml"
        path.mkdir()

        with pytest.raises(SpecLoadError, match="Cannot read"):
            load_config(path)


class TestFindConfig:
    """Test config discovery in a project root."""

    def test_prefers_enumbind_toml(self, tmp_path: Path):
        (tmp_path / "enumbind.toml").write_text('[enumbind]\nlanguage = "python"\n')
        (tmp_path / "pyproject.toml").write_text('[tool.enumbind]\nlanguage = "java"\n')

        assert find_config(tmp_path).language == TargetLanguage.PYTHON

    def test_falls_back_to_pyproject(self, tmp_path: Path):
        (tmp_path / "pyproject.toml").write_text('[tool.enumbind]\nlanguage = "python"\n')

        assert find_config(tmp_path).language == TargetLanguage.PYTHON

    def test_defaults_when_nothing_present(self, tmp_path: Path):
        assert find_config(tmp_path) == EnumBindConfig()
