"""
Configuration Management Package

Looks for .git-cc.yaml in (order):

1. the repository root (project-specific)
2. the home directory (global default)
3. built-in defaults

Config format (YAML):

    use_defaults: true
    custom_commit_types:
      - perf
    scopes:
      - api
      - cli

The GIT_CC_USE_DEFAULTS environment variable overrides use_defaults.
"""

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from gitcc import CONFIG_FILENAME
from gitcc.commit.choices import ChoiceSet, resolve_choices

ENV_USE_DEFAULTS = "GIT_CC_USE_DEFAULTS"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _as_string_list(value) -> Optional[list[str]]:
    """Coerce a YAML value to a list of strings. None if it can't be."""
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        return None
    if any(isinstance(item, (dict, list)) or item is None for item in value):
        return None
    return [str(item) for item in value]


@dataclass
class Config:
    """User configuration with sensible defaults."""
    use_defaults: bool = True
    custom_commit_types: list[str] = field(default_factory=list)
    scopes: list[str] = field(default_factory=list)

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults after warning.
        """
        warnings = []

        if not isinstance(self.use_defaults, bool):
            warnings.append(f"Invalid use_defaults '{self.use_defaults}', using true")
            self.use_defaults = True

        for name in ('custom_commit_types', 'scopes'):
            value = getattr(self, name)
            coerced = _as_string_list(value)
            if coerced is None:
                warnings.append(f"Invalid {name} '{value}', expected a list of strings")
                coerced = []
            setattr(self, name, coerced)

        return warnings

    def resolve_choices(self) -> ChoiceSet:
        return resolve_choices(self.use_defaults, self.custom_commit_types, self.scopes)

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


class ConfigManager:
    """Loads configuration for one repository."""

    def __init__(self, root: Optional[Path] = None, home: Optional[Path] = None):
        self.root = Path(root) if root is not None else Path.cwd()
        self.home = Path(home) if home is not None else Path.home()
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def candidates(self) -> list[Path]:
        return [self.root / CONFIG_FILENAME, self.home / CONFIG_FILENAME]

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        config = None
        for path in self.candidates():
            if path.is_file():
                config = self._load_from_file(path)
                self._config_path = path
                break
        if config is None:
            config = Config()

        self._apply_env(config)
        self._config = config
        return config

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except (yaml.YAMLError, OSError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()

        if data is None:
            return Config()
        if not isinstance(data, dict):
            print(f"Warning: {path} must contain a YAML mapping", file=sys.stderr)
            return Config()
        return Config.from_dict(data)

    def _apply_env(self, config: Config) -> None:
        raw = os.environ.get(ENV_USE_DEFAULTS)
        if raw is None:
            return
        value = raw.strip().lower()
        if value in _TRUE_VALUES:
            config.use_defaults = True
        elif value in _FALSE_VALUES:
            config.use_defaults = False
        else:
            print(f"Config warning: Invalid {ENV_USE_DEFAULTS} '{raw}', ignoring", file=sys.stderr)

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


__all__ = [
    "Config",
    "ConfigManager",
    "ENV_USE_DEFAULTS",
]
