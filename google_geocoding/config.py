"""
Configuration management for the geocoding client.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

import tomli

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PLACEHOLDER = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_-]*)\}")


def replaceMatchToEnv(match: re.Match[str]) -> str:
    """Return the environment variable named by a ``${VAR}`` match, or the placeholder if unset."""
    return os.getenv(match.group(1), match.group(0))


def substituteEnvVars(value: Any) -> Any:
    """Recursively substitute ``${VAR_NAME}`` placeholders in configuration values.

    Args:
        value: String, dict, list or any other configuration value

    Returns:
        The value with placeholders replaced; non-string leaves are returned unchanged
    """
    if isinstance(value, str):
        return ENV_PLACEHOLDER.sub(replaceMatchToEnv, value)
    elif isinstance(value, dict):
        return {k: substituteEnvVars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [substituteEnvVars(item) for item in value]
    return value


def mergeConfigs(baseConfig: Dict[str, Any], newConfig: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge two configuration dictionaries, newConfig wins, dood!"""
    merged = baseConfig.copy()

    for key, value in newConfig.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = mergeConfigs(merged[key], value)
        else:
            merged[key] = value

    return merged


class ConfigManager:
    """Loads the TOML configuration of the geocoding client.

    The main file is optional when config directories are given; every
    ``*.toml`` found in them (recursively, in sorted order) is merged on top.

    Example configuration:
        [geocoding]
        api-key = "${GOOGLE_GEOCODING_API_KEY}"
        language = "en"
        timeout = 10

        [logging]
        level = "INFO"
        console = true
    """

    def __init__(self, configPath: str = "geocoding.toml", configDirs: Optional[List[str]] = None):
        """Initialize ConfigManager with config file path and optional config directories.

        Raises:
            ConfigurationError: If nothing can be loaded or a file is not valid TOML
        """
        self.configPath = configPath
        self.configDirs = configDirs or []
        self.config: Dict[str, Any] = substituteEnvVars(self._loadConfig())

    def _findTomlFilesRecursive(self, directory: str) -> List[Path]:
        """Recursively find all .toml files in a directory."""
        dirPath = Path(directory)

        if not dirPath.is_dir():
            logger.warning(f"Config directory {directory} does not exist or is not a directory, skipping")
            return []

        tomlFiles = [path for path in dirPath.rglob("*.toml") if path.is_file()]
        for tomlFile in tomlFiles:
            logger.debug(f"Found config file: {tomlFile}")
        return sorted(tomlFiles)

    def _loadToml(self, path: Path) -> Dict[str, Any]:
        try:
            with open(path, "rb") as f:
                return tomli.load(f)
        except (OSError, tomli.TOMLDecodeError) as e:
            raise ConfigurationError(f"Failed to load configuration {path}: {e}") from e

    def _loadConfig(self) -> Dict[str, Any]:
        """Load configuration from the TOML file and optional config directories."""
        configFile = Path(self.configPath)
        hasConfigFile = configFile.exists()
        if not hasConfigFile and not self.configDirs:
            raise ConfigurationError(f"Configuration file {self.configPath} not found")

        config: Dict[str, Any] = {}
        if hasConfigFile:
            config = self._loadToml(configFile)
            logger.info(f"Loaded main config from {self.configPath}")

        for configDir in self.configDirs:
            tomlFiles = self._findTomlFilesRecursive(configDir)
            logger.info(f"Found {len(tomlFiles)} .toml files in {configDir}")
            for tomlFile in tomlFiles:
                config = mergeConfigs(config, self._loadToml(tomlFile))
                logger.info(f"Merged config from {tomlFile}")

        geocodingConfig = config.get("geocoding", {})
        if not isinstance(geocodingConfig, dict):
            raise ConfigurationError("[geocoding] must be a table")

        return config

    def get(self, key: str, default=None) -> Any:
        """Get configuration value by key."""
        return self.config.get(key, default)

    def getGeocodingConfig(self) -> Dict[str, Any]:
        """Get geocoding connection configuration (api-key, base-url, timeout, language)."""
        return self.get("geocoding", {})

    def getLoggingConfig(self) -> Dict[str, Any]:
        """Get logging-specific configuration."""
        return self.get("logging", {})
