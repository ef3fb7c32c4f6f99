"""
Unit tests for configuration loading.

Tests verify:
- Defaults when no config file exists
- .hashtool/config.toml and pyproject.toml [tool.hashtool] discovery
- Environment variables override TOML values
- Unreadable, malformed and invalid configs raise typed errors
"""

from pathlib import Path

import pytest

from hashtool.core.exceptions import ConfigFileError, ConfigValidationError
from hashtool.core.models.config import HashToolConfig
from hashtool.core.models.digest import HashAlgorithm
from hashtool.core.settings import find_config_file, load_settings


def _write_config(root: Path, body: str) -> Path:
    config_dir = root / ".hashtool"
    config_dir.mkdir(parents=True, exist_ok=True)
    path = config_dir / "config.toml"
    path.write_text(body)
    return path


class TestDefaults:
    """Settings with nothing configured."""

    def test_defaults(self, tmp_path):
        config = load_settings(start_dir=str(tmp_path)).to_config()
        assert config.hash.algorithm is HashAlgorithm.SHA256
        assert config.hash.hex is False
        assert config.hash.update is False
        assert config.hash.quiet is False
        assert config.output.preview_width == 40
        assert config.logging.level == "warning"
        assert config.logging.file is False

    def test_model_defaults_match(self, tmp_path):
        loaded = load_settings(start_dir=str(tmp_path)).to_config()
        assert loaded.model_dump() == HashToolConfig().model_dump()

    def test_dot_notation_get(self):
        config = HashToolConfig()
        assert config.get("hash.algorithm") is HashAlgorithm.SHA256
        assert config.get("hash.nope", "fallback") == "fallback"


class TestConfigDiscovery:
    """Finding the config file."""

    def test_finds_config_in_parent(self, tmp_path):
        path = _write_config(tmp_path, "[hash]\nalgorithm = 'md5'\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_file(str(nested)) == path

    def test_pyproject_with_tool_table(self, tmp_path):
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.hashtool.hash]\nalgorithm = 'blake3'\n")
        assert find_config_file(str(tmp_path)) == pyproject
        config = load_settings(start_dir=str(tmp_path)).to_config()
        assert config.hash.algorithm is HashAlgorithm.BLAKE3

    def test_pyproject_without_tool_table_is_skipped(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text("[project]\nname = 'other'\n")
        assert find_config_file(str(tmp_path)) is None


class TestTomlValues:
    """Values read from TOML."""

    def test_sections_loaded(self, tmp_path):
        _write_config(
            tmp_path,
            """
[hash]
algorithm = "BLAKE3"
quiet = true
hex = true

[output]
preview_width = 12

[logging]
level = "DEBUG"
console = true
""",
        )
        config = load_settings(start_dir=str(tmp_path)).to_config()
        assert config.hash.algorithm is HashAlgorithm.BLAKE3
        assert config.hash.quiet is True
        assert config.hash.hex is True
        assert config.output.preview_width == 12
        assert config.logging.level == "debug"
        assert config.logging.console is True

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text("[hash]\nupdate = true\n")
        config = load_settings(config_path=path).to_config()
        assert config.hash.update is True

    def test_unknown_keys_ignored(self, tmp_path):
        _write_config(tmp_path, "[hash]\ncolour = 'blue'\n[extra]\nx = 1\n")
        config = load_settings(start_dir=str(tmp_path)).to_config()
        assert config.hash.algorithm is HashAlgorithm.SHA256


class TestEnvironment:
    """HASHTOOL_* environment variables."""

    def test_env_overrides_toml(self, tmp_path, monkeypatch):
        _write_config(tmp_path, "[hash]\nalgorithm = 'blake3'\nquiet = true\n")
        monkeypatch.setenv("HASHTOOL_HASH__ALGORITHM", "md5")
        config = load_settings(start_dir=str(tmp_path)).to_config()
        assert config.hash.algorithm is HashAlgorithm.MD5
        assert config.hash.quiet is True

    def test_env_without_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HASHTOOL_LOGGING__LEVEL", "info")
        config = load_settings(start_dir=str(tmp_path)).to_config()
        assert config.logging.level == "info"


class TestConfigErrors:
    """Broken configuration is reported, not ignored."""

    def test_malformed_toml(self, tmp_path):
        path = _write_config(tmp_path, "[hash\nalgorithm = ")
        with pytest.raises(ConfigFileError) as exc_info:
            load_settings(start_dir=str(tmp_path))
        assert exc_info.value.context["file_path"] == str(path)
        assert exc_info.value.exit_code == 78

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigFileError):
            load_settings(config_path=tmp_path / "absent.toml")

    def test_unknown_algorithm(self, tmp_path):
        _write_config(tmp_path, "[hash]\nalgorithm = 'sha512'\n")
        with pytest.raises(ConfigValidationError) as exc_info:
            load_settings(start_dir=str(tmp_path))
        assert "hash.algorithm" in str(exc_info.value)
        assert exc_info.value.exit_code == 78

    def test_invalid_preview_width(self, tmp_path):
        _write_config(tmp_path, "[output]\npreview_width = 0\n")
        with pytest.raises(ConfigValidationError):
            load_settings(start_dir=str(tmp_path))
