"""
Pydantic Settings for hashtool configuration.

Provides settings loading from TOML files, environment variables, and defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .exceptions import ConfigFileError, ConfigValidationError
from .models.config import HashConfig, HashToolConfig, LoggingConfig, OutputConfig

CONFIG_DIR_NAME = ".hashtool"
CONFIG_FILE_NAME = "config.toml"


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Find .hashtool/config.toml by walking up from start_dir (or cwd).

    A pyproject.toml with a [tool.hashtool] table also counts.

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

        pyproject = parent / "pyproject.toml"
        if pyproject.exists():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
            except (tomllib.TOMLDecodeError, OSError):
                # Someone else's pyproject; keep walking.
                continue
            if "hashtool" in data.get("tool", {}):
                return pyproject

    return None


def read_config_file(path: Path) -> dict[str, Any]:
    """
    Load the hashtool table from a TOML file.

    Raises:
        ConfigFileError: If the file cannot be read or parsed
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigFileError(
            f"Failed to parse config file {path}: {e}", file_path=str(path), cause=e
        ) from e
    except OSError as e:
        raise ConfigFileError(
            f"Failed to read config file {path}: {e.strerror or e}", file_path=str(path), cause=e
        ) from e

    if path.name == "pyproject.toml":
        data = data.get("tool", {}).get("hashtool", {})
    return data


class TomlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from TOML config files."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._start_dir = start_dir
        self._data: dict[str, Any] | None = None
        self.source_path: Path | None = None

    def _load_toml(self) -> dict[str, Any]:
        """Load and cache TOML data."""
        if self._data is not None:
            return self._data

        path = self._config_path or find_config_file(self._start_dir)
        self.source_path = path
        self._data = read_config_file(path) if path is not None else {}
        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        return self._load_toml().get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all TOML data for settings initialization."""
        return self._load_toml()


class HashToolSettings(BaseSettings):
    """hashtool configuration settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (HASHTOOL_<section>__<field>)
    3. TOML config file (.hashtool/config.toml or pyproject.toml [tool.hashtool])
    4. Model defaults
    """

    model_config = {
        "env_prefix": "HASHTOOL_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    hash: HashConfig = HashConfig()
    output: OutputConfig = OutputConfig()
    logging: LoggingConfig = LoggingConfig()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to add TOML loading.

        The TOML source is prepared by load_settings() and handed over
        through a module-level variable, since pydantic builds the
        sources from the class alone.
        """
        sources: tuple[PydanticBaseSettingsSource, ...] = (init_settings, env_settings)
        if _current_toml_source is not None:
            sources += (_current_toml_source,)
        return sources

    def to_config(self) -> HashToolConfig:
        """Convert settings to the plain configuration model."""
        return HashToolConfig(hash=self.hash, output=self.output, logging=self.logging)


# Module-level variable for passing to settings_customise_sources
_current_toml_source: TomlConfigSource | None = None


def load_settings(config_path: Path | None = None, start_dir: str | None = None) -> HashToolSettings:
    """Load hashtool settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)

    Returns:
        HashToolSettings instance with all sources merged

    Raises:
        ConfigFileError: If the config file cannot be read or parsed
        ConfigValidationError: If a configured value is invalid
    """
    global _current_toml_source

    toml_source = TomlConfigSource(HashToolSettings, config_path, start_dir)
    # Surface file errors before pydantic wraps them.
    toml_source()
    _current_toml_source = toml_source
    try:
        return HashToolSettings()
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first.get("loc", ()))
        raise ConfigValidationError(
            f"Invalid configuration value for '{key}': {first.get('msg')}",
            key=key or None,
            context={"config_file": str(toml_source.source_path)}
            if toml_source.source_path
            else None,
            cause=e,
        ) from e
    finally:
        _current_toml_source = None
