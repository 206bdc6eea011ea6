"""Configuration with file and environment overrides."""

import json
import os
from pathlib import Path
from typing import Any

# Module-level cache for singleton pattern
_config_cache: "Config | None" = None


def clear_config_cache() -> None:
    """Clear the config cache. Useful for testing or config reload."""
    global _config_cache
    _config_cache = None


def get_default_config_dir() -> Path:
    """Get default config directory, respecting TERMMENU_CONFIG_DIR env var."""
    config_dir = os.environ.get("TERMMENU_CONFIG_DIR")
    if config_dir:
        return Path(config_dir)
    return Path.home() / ".config" / "termmenu"


class ConfigMeta:
    """Schema definition - separate from runtime state."""

    SETTINGS: dict[str, str] = {
        "full_screen": "Draw prompts on the alternate screen",
        "input_width": "Visible width of the text input field (0 = unlimited)",
        "input_char_limit": "Maximum characters accepted by text input (0 = unlimited)",
        "blink_interval": "Seconds between cursor blinks in text input",
    }


class Config:
    """Runtime configuration with env override support."""

    DEFAULTS: dict[str, Any] = {
        "full_screen": False,
        "input_width": 20,
        "input_char_limit": 156,
        "blink_interval": 0.53,
    }

    def __init__(self, config_dir: Path | None = None):
        self._config_dir = config_dir or get_default_config_dir()
        self._config_file = self._config_dir / "config.json"
        self._data: dict[str, Any] = {}

    @property
    def config_dir(self) -> Path:
        return self._config_dir

    @classmethod
    def load(cls, config_dir: Path | None = None) -> "Config":
        """Factory method - explicit loading with caching."""
        global _config_cache

        if _config_cache is not None and config_dir is None:
            return _config_cache

        config = cls(config_dir)
        config._load_from_file()
        config._apply_env_overrides()

        if config_dir is None:
            _config_cache = config

        return config

    def __getattr__(self, name: str) -> Any:
        """Access config values as attributes."""
        if name.startswith("_"):
            raise AttributeError(name)
        if name in self._data:
            return self._data[name]
        if name in self.DEFAULTS:
            return self.DEFAULTS[name]
        raise AttributeError(f"Config has no attribute '{name}'")

    def get_settings(self) -> list[tuple[str, str, Any]]:
        """Return (name, description, value) for every known setting."""
        return [(name, desc, getattr(self, name)) for name, desc in ConfigMeta.SETTINGS.items()]

    def _load_from_file(self) -> None:
        if self._config_file.exists():
            try:
                content = self._config_file.read_text()
                if content.strip():
                    self._data = json.loads(content)
            except json.JSONDecodeError:
                # Corrupted config - use defaults
                self._data = {}

    def _apply_env_overrides(self) -> None:
        """Apply TERMMENU_* env vars (highest priority)."""
        for key, default in self.DEFAULTS.items():
            env_key = f"TERMMENU_{key.upper()}"
            if env_key in os.environ:
                self._data[key] = self._coerce(os.environ[env_key], type(default))

    @staticmethod
    def _coerce(value: str, target_type: type) -> Any:
        """Coerce string env value to target type."""
        if target_type is bool:
            return value.lower() in ("true", "1", "yes")
        if target_type is int:
            return int(value)
        if target_type is float:
            return float(value)
        return value
