"""
Configuration loading.

A configuration file names the directory to deduplicate and the hash algorithm:

    {"directory": "/data/photos", "hash_logic": "SHA256"}

Files ending in .toml are read with tomllib using the same keys. A missing file
means defaults: the current directory and MD5.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # Python < 3.11: pip install tomli

from latestonly.core.models import DeduplicationParams, HashAlgorithm
from latestonly.core.exceptions import ConfigurationError, FileOperationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "config.json"
DEFAULT_DIRECTORY = "."
DEFAULT_HASH_LOGIC = HashAlgorithm.MD5.value


def load_config(path: Union[str, Path] = DEFAULT_CONFIG_FILE) -> DeduplicationParams:
    """
    Read run settings from `path`.

    Raises:
        ConfigurationError: If the file is malformed or names an unknown algorithm
        FileOperationError: If the file exists but cannot be read
    """
    config_path = Path(path)
    if not config_path.exists():
        logger.debug(f"No configuration at {config_path}, using defaults")
        return DeduplicationParams(
            directory=DEFAULT_DIRECTORY,
            algorithm=HashAlgorithm.from_name(DEFAULT_HASH_LOGIC),
        )

    try:
        raw = config_path.read_bytes()
    except OSError as e:
        raise FileOperationError("read-config", str(config_path), e) from e

    data = _parse(raw, config_path)
    return params_from_dict(data)


def params_from_dict(data: Dict[str, Any]) -> DeduplicationParams:
    """Validate a parsed configuration mapping and build run parameters."""
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration must be an object, got {type(data).__name__}")

    directory = data.get("directory", DEFAULT_DIRECTORY)
    if not isinstance(directory, str) or not directory:
        raise ConfigurationError("'directory' must be a non-empty string")

    algorithm = HashAlgorithm.from_name(data.get("hash_logic", DEFAULT_HASH_LOGIC))

    heal = data.get("heal_stale_entries", False)
    if not isinstance(heal, bool):
        raise ConfigurationError("'heal_stale_entries' must be true or false")

    return DeduplicationParams(
        directory=directory,
        algorithm=algorithm,
        heal_stale_entries=heal,
    )


def _parse(raw: bytes, config_path: Path) -> Any:
    try:
        if config_path.suffix.lower() == ".toml":
            return tomllib.loads(raw.decode("utf-8"))
        return json.loads(raw.decode("utf-8"))
    except ValueError as e:
        # tomllib.TOMLDecodeError and json.JSONDecodeError are both ValueErrors
        raise ConfigurationError(f"Error parsing config file {config_path}: {e}") from e
