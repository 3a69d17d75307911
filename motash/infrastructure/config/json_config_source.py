"""Key/value configuration sources."""

import json
import os
from collections.abc import Mapping
from pathlib import Path

from loguru import logger

ENV_PREFIX = "MOTASH_"


class ConfigError(ValueError):
    """Raised when the configuration cannot be read or holds invalid values."""


class DictConfigSource:
    """Configuration held in memory."""

    def __init__(self, values: Mapping[str, object] | None = None) -> None:
        self._values = {key: _to_raw(value) for key, value in (values or {}).items()}

    def get(self, key: str, default: str = "") -> str:
        return self._values.get(key, default)


class JsonConfigSource:
    """Flat JSON object in a file, overridden by ``MOTASH_<KEY>`` environment variables.

    The variable name is the upper-cased key, so
    ``MOTASH_ROOTFOLDERPATTERN`` overrides ``RootFolderPattern``.
    """

    def __init__(self, path: Path | None = None, environ: Mapping[str, str] | None = None) -> None:
        self.path = path
        self._environ = os.environ if environ is None else environ
        self._values = self._load_file(path) if path else {}

    def get(self, key: str, default: str = "") -> str:
        env_key = f"{ENV_PREFIX}{key.upper()}"
        if env_key in self._environ:
            return self._environ[env_key]
        return self._values.get(key, default)

    @staticmethod
    def _load_file(path: Path) -> dict[str, str]:
        if not path.exists():
            logger.debug("Config file {} not found, using defaults", path)
            return {}

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")

        return {str(key): _to_raw(value) for key, value in data.items()}


def _to_raw(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list | tuple):
        return ",".join(str(item) for item in value)
    if value is None:
        return ""
    return str(value)
