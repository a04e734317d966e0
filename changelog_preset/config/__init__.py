"""Configuration Management Package"""

import json
import sys
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

# Valid configuration values
VALID_FORMATS = {"json", "text"}
URL_SCHEMES = ("http://", "https://")


@dataclass
class Config:
    """User configuration with sensible defaults."""
    host: Optional[str] = "https://github.com"
    owner: Optional[str] = None
    repository: Optional[str] = None
    repo_url: Optional[str] = None
    output_format: str = "text"
    templates_dir: Optional[str] = None

    def to_dict(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults silently after warning.
        """
        warnings = []
        defaults = Config()

        if self.output_format not in VALID_FORMATS:
            warnings.append(f"Invalid output_format '{self.output_format}', using '{defaults.output_format}'")
            self.output_format = defaults.output_format

        if self.host is not None and not str(self.host).startswith(URL_SCHEMES):
            warnings.append(f"Invalid host '{self.host}', using '{defaults.host}'")
            self.host = defaults.host

        if self.repo_url is not None and not str(self.repo_url).startswith(URL_SCHEMES):
            warnings.append(f"Invalid repo_url '{self.repo_url}', ignoring it")
            self.repo_url = None

        # Links are joined with '/', so a trailing slash would double up
        for name in ("host", "repo_url"):
            value = getattr(self, name)
            if value and value.endswith('/'):
                setattr(self, name, value.rstrip('/'))

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        # Validate and print warnings to stderr
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


class ConfigManager:
    """Manages loading and saving configuration.

    Lookup order: .clprc in the current directory, then in the home
    directory, then built-in defaults.
    """

    CONFIG_FILENAME = ".clprc"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        local_path = Path.cwd() / self.CONFIG_FILENAME
        if local_path.exists():
            self._config = self._load_from_file(local_path)
            self._config_path = local_path
            return self._config

        home_path = Path.home() / self.CONFIG_FILENAME
        if home_path.exists():
            self._config = self._load_from_file(home_path)
            self._config_path = home_path
            return self._config

        self._config = Config()
        return self._config

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("expected a JSON object")
            return Config.from_dict(data)
        except (json.JSONDecodeError, ValueError, IOError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()

    def save(self, config: Config, global_config: bool = True) -> Path:
        path = Path.home() / self.CONFIG_FILENAME if global_config else Path.cwd() / self.CONFIG_FILENAME
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(config.to_dict(), f, indent=2)
        return path

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


_manager = ConfigManager()


def load_config() -> Config:
    return _manager.load()


def save_config(config: Config, global_config: bool = True) -> Path:
    return _manager.save(config, global_config)


def get_config_path() -> Optional[Path]:
    return _manager.get_config_path()


__all__ = [
    "Config",
    "ConfigManager",
    "load_config",
    "save_config",
    "get_config_path",
    "VALID_FORMATS",
]
