"""Locate, load and save the KeyMover YAML configuration."""

import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import KeyMoverConfig

# Overrides the search below when set
CONFIG_ENV_VAR = "KEYMOVER_CONFIG"

USER_CONFIG_PATH = Path.home() / ".config" / "keymover" / "config.yaml"


class ConfigManager:
    """
    Finds the KeyMover config file and turns it into a ``KeyMoverConfig``.

    Lookup order: the explicit path given to the constructor, the file named by
    ``$KEYMOVER_CONFIG``, then ``DEFAULT_CONFIG_LOCATIONS``. When nothing is
    found the package runs on defaults, so a config file is always optional.
    """

    DEFAULT_CONFIG_LOCATIONS = [
        Path("config/keymover.yaml"),
        USER_CONFIG_PATH,
    ]

    def __init__(self, config_path: Path | None = None):
        self.config_path = Path(config_path) if config_path is not None else None
        self._config: KeyMoverConfig | None = None

    def candidate_paths(self) -> list[Path]:
        """Config locations in the order they are tried."""
        candidates = []
        if self.config_path is not None:
            candidates.append(self.config_path)
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            candidates.append(Path(env_path))
        candidates.extend(self.DEFAULT_CONFIG_LOCATIONS)
        return candidates

    def load(self, create_if_missing: bool = False) -> KeyMoverConfig:
        """
        Load and validate the first config file found.

        Args:
            create_if_missing: Use the default config when no file exists.

        Raises:
            FileNotFoundError: No file found and create_if_missing is False.
            ValueError: The file is not valid YAML or holds invalid settings.
        """
        config_file = next((p for p in self.candidate_paths() if p.is_file()), None)

        if config_file is None:
            if not create_if_missing:
                raise FileNotFoundError(
                    f"No KeyMover config found. Searched: {self.candidate_paths()}"
                )
            self._config = KeyMoverConfig()
            return self._config

        try:
            with open(config_file, encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
            self._config = KeyMoverConfig.model_validate(raw)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file {config_file}: {e}") from e
        except ValidationError as e:
            raise ValueError(f"Invalid configuration in {config_file}: {e}") from e

        self.config_path = config_file
        return self._config

    def save(self, config: KeyMoverConfig | None = None, path: Path | None = None):
        """Write the config as YAML, defaulting to the loaded path or the user config."""
        config_to_save = config or self._config
        if config_to_save is None:
            raise ValueError("No configuration to save")

        save_path = Path(path) if path is not None else (self.config_path or USER_CONFIG_PATH)
        save_path.parent.mkdir(parents=True, exist_ok=True)

        with open(save_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(config_to_save.model_dump(mode="json"), f, sort_keys=False)

        self.config_path = save_path
        self._config = config_to_save

    @property
    def config(self) -> KeyMoverConfig:
        """Current configuration, loaded on first access."""
        if self._config is None:
            self.load(create_if_missing=True)
        return self._config


_config_manager: ConfigManager | None = None


def get_config_manager(config_path: Path | None = None) -> ConfigManager:
    """Return the process-wide ConfigManager, creating it on first call."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager(config_path)
    return _config_manager


def get_config(reload: bool = False) -> KeyMoverConfig:
    """
    Return the current KeyMover configuration.

    Args:
        reload: Re-read the config file instead of using the cached config.
    """
    manager = get_config_manager()
    if reload:
        return manager.load(create_if_missing=True)
    return manager.config
