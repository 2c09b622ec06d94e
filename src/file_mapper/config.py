"""Persisted default ignore patterns.

The configuration file is a small JSON object stored in the user's home
directory:

    {"ignorePatterns": [".git", "node_modules", "build"]}

It is loaded once per run. A missing file is created with the defaults; a
malformed one is reported and replaced by the defaults for that run only.
"""

import json
import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from file_mapper.types import PathType

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "FILE_MAPPER_CONFIG"
CONFIG_FILE_NAME = ".file_mapper_config.json"

DEFAULT_IGNORE_PATTERNS = (
    ".git",
    ".idea",
    ".vscode",
    "node_modules",
    "build",
    "out",
    "dist",
    ".dart_tool",
    ".packages",
    ".pub-cache",
    ".flutter-plugins",
    ".flutter-plugins-dependencies",
)


class ConfigFormatError(ValueError):
    """Raised when a configuration document does not have the expected shape."""


@dataclass
class FileMapperConfig:
    """Persisted settings.

    Attributes:
        ignore_patterns: Substring patterns excluded from every run.
    """

    ignore_patterns: List[str] = field(default_factory=lambda: list(DEFAULT_IGNORE_PATTERNS))

    def to_json(self) -> Dict[str, Any]:
        return {"ignorePatterns": list(self.ignore_patterns)}

    @classmethod
    def from_json(cls, data: Any) -> "FileMapperConfig":
        """Create a config from a decoded JSON document.

        A missing ``ignorePatterns`` key yields the defaults.

        Raises:
            ConfigFormatError: If the document is not an object or the patterns are
                not a list of strings.

        Example:
            >>> FileMapperConfig.from_json({"ignorePatterns": ["tmp"]}).ignore_patterns
            ['tmp']
            >>> FileMapperConfig.from_json({}).ignore_patterns[:2]
            ['.git', '.idea']
        """
        if not isinstance(data, dict):
            raise ConfigFormatError(f"expected a JSON object, got {type(data).__name__}")
        patterns = data.get("ignorePatterns")
        if patterns is None:
            return cls()
        if not isinstance(patterns, list) or not all(isinstance(p, str) for p in patterns):
            raise ConfigFormatError("'ignorePatterns' must be a list of strings")
        return cls(ignore_patterns=list(patterns))


def default_config_path() -> Path:
    """Return the config path from FILE_MAPPER_CONFIG, or the file in the home directory."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / CONFIG_FILE_NAME


class ConfigManager:
    """Loads and saves FileMapperConfig as JSON.

    Attributes:
        config_path (Path): Location of the configuration file.

    Example:
        >>> manager = ConfigManager("/tmp/fm.json")  # doctest: +SKIP
        >>> manager.load_config().ignore_patterns  # doctest: +SKIP
        ['.git', '.idea', ...]
    """

    def __init__(self, config_path: Optional[PathType] = None) -> None:
        self.config_path = Path(config_path) if config_path is not None else default_config_path()

    def load_config(self, notify_if_created: bool = True) -> FileMapperConfig:
        """Load the configuration, creating the default file if none exists.

        Never raises for a bad or unwritable file: problems are logged and the
        defaults are returned.

        Args:
            notify_if_created: Print a notice to stderr when the default file is created.
        """
        if not self.config_path.exists():
            config = FileMapperConfig()
            try:
                self.save_config(config)
            except OSError as e:
                logger.warning("Could not create config file %s: %s", self.config_path, e)
                return config
            if notify_if_created:
                print(f"Created default configuration file at: {self.config_path}", file=sys.stderr)
                print("You can edit this file to customize ignore patterns.", file=sys.stderr)
            return config

        try:
            with self.config_path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            return FileMapperConfig.from_json(data)
        except (OSError, ValueError) as e:
            # json.JSONDecodeError and ConfigFormatError are both ValueErrors
            logger.warning("Error reading config file %s: %s. Using default configuration.", self.config_path, e)
            return FileMapperConfig()

    def save_config(self, config: FileMapperConfig) -> None:
        """Write the configuration as JSON.

        Raises:
            OSError: If the file cannot be written.
        """
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with self.config_path.open("w", encoding="utf-8") as f:
            json.dump(config.to_json(), f, indent=2)
            f.write("\n")
