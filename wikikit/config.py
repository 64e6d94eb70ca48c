"""
Configuration management for WikiKit.
"""
import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import dotenv_values

from wikikit import __version__

logger = logging.getLogger(__name__)

ENV_PREFIX = "WIKIKIT_"

# Default configuration
DEFAULT_CONFIG = {
    "http": {
        "user_agent": f"wikikit/{__version__} (Python Wikipedia client)",
        "timeout_seconds": 10,
    },
    "defaults": {
        "language": "en",
        "search_limit": 10,
    },
}


class Config:
    """
    Configuration manager for WikiKit.

    Values come from DEFAULT_CONFIG, then an optional YAML or JSON file, then
    environment variables such as WIKIKIT_HTTP__TIMEOUT_SECONDS=5 where a
    double underscore separates nesting levels. A .env file is only read when
    env_file is given; its values are merged into this Config and never
    exported to os.environ. Real environment variables win over the file.
    """
    def __init__(
        self,
        config_path: Optional[str] = None,
        environ: Optional[Dict[str, str]] = None,
        env_file: Optional[str] = None,
    ):
        """
        Initialize the Config.

        Args:
            config_path: Path to the configuration file
            environ: Environment mapping, os.environ when omitted
            env_file: Optional .env file with WIKIKIT_ settings
        """
        self.config_path = config_path
        self.env_file = env_file
        self.environ = dict(os.environ if environ is None else environ)
        self.config = self._load_config()

    def _load_config(self) -> Dict:
        """
        Load configuration from file or use defaults.

        Returns:
            Configuration dictionary
        """
        config = copy.deepcopy(DEFAULT_CONFIG)

        if self.config_path:
            try:
                path = Path(self.config_path)
                if path.exists():
                    if path.suffix.lower() in ['.yaml', '.yml']:
                        with open(path, 'r') as f:
                            user_config = yaml.safe_load(f) or {}
                    elif path.suffix.lower() == '.json':
                        with open(path, 'r') as f:
                            user_config = json.load(f)
                    else:
                        raise ValueError(f"Unsupported config file format: {path.suffix}")

                    self._update_dict(config, user_config)
                else:
                    logger.warning(f"Config file {self.config_path} does not exist, using defaults")
            except (OSError, ValueError, yaml.YAMLError) as e:
                logger.error(f"Error loading config from {self.config_path}: {e}")
                logger.error("Using default configuration")

        if self.env_file:
            file_values = {k: v for k, v in dotenv_values(self.env_file).items() if v is not None}
            self.environ = {**file_values, **self.environ}

        self._override_from_env(config)

        return config

    def _update_dict(self, target: Dict, source: Dict) -> None:
        """
        Recursively update a dictionary.

        Args:
            target: Target dictionary to update
            source: Source dictionary with new values
        """
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._update_dict(target[key], value)
            else:
                target[key] = value

    def _override_from_env(self, config: Dict) -> None:
        """
        Override configuration with environment variables.

        Args:
            config: Configuration dictionary to update
        """
        for key, value in self.environ.items():
            if not key.startswith(ENV_PREFIX) or key in (f"{ENV_PREFIX}CONFIG_PATH", f"{ENV_PREFIX}ENV_FILE"):
                continue

            parts = key[len(ENV_PREFIX):].lower().split('__')

            current = config
            for part in parts[:-1]:
                if not isinstance(current.get(part), dict):
                    current[part] = {}
                current = current[part]

            try:
                current[parts[-1]] = json.loads(value)
            except json.JSONDecodeError:
                current[parts[-1]] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Dot-separated key path (e.g., 'http.timeout_seconds')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        current = self.config
        for part in key.split('.'):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current


# Global configuration instance
config = Config(
    os.getenv(f"{ENV_PREFIX}CONFIG_PATH"),
    env_file=os.getenv(f"{ENV_PREFIX}ENV_FILE"),
)


def get_config(key: str, default: Any = None) -> Any:
    """
    Get a configuration value from the global configuration.
    """
    return config.get(key, default)
