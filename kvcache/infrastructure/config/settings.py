"""Provides functions for loading and accessing configuration settings.

Supports loading from .env files, environment variables, and a dedicated
configuration file (e.g., ~/.kvcache/config.yaml).
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from ...domain.models.common import LifeTime, StorageId

logger = logging.getLogger(__name__)

# --- Configuration Constants ---
DEFAULT_CONFIG_DIR = Path.home() / ".kvcache"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.yaml"
ENV_FILE_NAME = ".env"
ENV_PREFIX = "KVCACHE_"

DEFAULT_EAGER_STORAGE_ID = "eagercache"
DEFAULT_EAGER_LIFE_TIME = 43200
DEFAULT_LAZY_NAMESPACE = "cache_"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# --- Global Configuration Store ---
_config: Dict[str, Any] = {}
_test_config: Dict[str, Any] = {}
_loaded = False


def load_configuration(
    config_file: Path = DEFAULT_CONFIG_FILE,
    env_file: Optional[Path] = None,
    force: bool = False,
) -> None:
    """Loads configuration from environment, .env file, and YAML file.

    Priority order (highest to lowest):
    1. Testing overrides
    2. Environment Variables (KVCACHE_ prefixed)
    3. .env file
    4. YAML configuration file
    5. Default values passed to get_config

    Args:
        config_file: Path to the YAML configuration file.
        env_file: Path to the .env file (searches upwards from cwd if None).
        force: Reload even if configuration was already loaded.
    """
    global _config, _loaded
    if _loaded and not force:
        logger.debug("Configuration already loaded.")
        return

    _config = {}

    # 1. YAML file (lowest priority)
    config_file = Path(config_file)
    if config_file.exists():
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                yaml_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load or parse YAML config {config_file}: {e}")
        else:
            if isinstance(yaml_config, dict):
                _config.update(_flatten(yaml_config))
                logger.info(f"Loaded configuration from YAML: {config_file}")
            elif yaml_config is not None:
                logger.warning(f"YAML config file {config_file} did not contain a dictionary.")
    else:
        logger.debug(f"YAML config file not found: {config_file}")

    # 2. .env file; override=False so real environment variables win
    dotenv_path = env_file or find_dotenv_path()
    if dotenv_path:
        if load_dotenv(dotenv_path=dotenv_path, override=False):
            logger.info(f"Loaded environment variables from: {dotenv_path}")
        else:
            logger.debug(f"Nothing loaded from .env file: {dotenv_path}")
    else:
        logger.debug("Skipping .env file loading (no file found).")

    # 3. Environment variables are read lazily in get_config

    _loaded = True
    logger.debug("Configuration loading process completed.")


def _flatten(data: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
    """Turns nested YAML mappings into dotted keys ({'a': {'b': 1}} -> {'a.b': 1})."""
    flat: Dict[str, Any] = {}
    for key, value in data.items():
        dotted = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, prefix=f"{dotted}."))
        else:
            flat[dotted] = value
    return flat


def env_var_name(key: str) -> str:
    """Environment variable consulted for a dotted key ('cache.eager.life_time' -> 'KVCACHE_CACHE_EAGER_LIFE_TIME')."""
    return ENV_PREFIX + key.upper().replace('.', '_')


def _coerce(value: str) -> Any:
    if value.lower() == 'true':
        return True
    if value.lower() == 'false':
        return False
    try:
        if '.' in value:
            return float(value)
        return int(value)
    except (ValueError, TypeError):
        return value


def get_config(key: str, default: Any = None) -> Any:
    """
    Get a configuration value by key.

    Priority:
    1. Test configuration
    2. Environment variable
    3. YAML config
    4. Default value

    Args:
        key: The dotted configuration key (e.g. 'cache.eager.life_time')
        default: Default value if the key is not found

    Returns:
        The configuration value
    """
    if key in _test_config:
        return _test_config[key]

    env_key = env_var_name(key)
    if env_key in os.environ:
        return _coerce(os.environ[env_key])

    if key in _config:
        return _config[key]

    logger.debug(f"Config key '{key}' not found in environment or loaded config. Returning default: {default}")
    return default


def set_config(key: str, value: Any) -> None:
    """Sets a configuration value for the rest of the process.

    Args:
        key: Configuration key (e.g., 'logging.level')
        value: Value to set
    """
    logger.debug(f"Setting config: {key} = {value}")
    _config[key] = value
    os.environ[env_var_name(key)] = str(value)


def find_dotenv_path() -> Optional[Path]:
    """Searches for the .env file upwards from the current directory."""
    try:
        cwd = Path.cwd()
    except OSError as e:
        logger.warning(f"Error searching for .env file: {e}")
        return None
    for path in [cwd] + list(cwd.parents):
        env_path = path / ENV_FILE_NAME
        if env_path.is_file():
            return env_path
    return None


def reset_configuration() -> None:
    """Forgets everything loaded so far; the next load starts from scratch."""
    global _config, _loaded
    _config = {}
    _loaded = False


# --- Convenience Functions ---

def get_eager_storage_id() -> StorageId:
    """Storage id of the default eager cache."""
    return StorageId(str(get_config('cache.eager.storage_id', DEFAULT_EAGER_STORAGE_ID)))


def get_eager_life_time() -> LifeTime:
    """Lifetime in seconds used when eager caches are persisted (0 => forever)."""
    value = get_config('cache.eager.life_time', DEFAULT_EAGER_LIFE_TIME)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        logger.warning(
            f"Invalid value for cache.eager.life_time: {value!r}. Defaulting to {DEFAULT_EAGER_LIFE_TIME}."
        )
        return LifeTime(DEFAULT_EAGER_LIFE_TIME)
    return LifeTime(value)


def get_lazy_namespace() -> str:
    """Token prepended to every lazy cache id before it reaches the backend."""
    return str(get_config('cache.lazy.namespace', DEFAULT_LAZY_NAMESPACE))


def get_log_level() -> int:
    """Logging level, accepting names ('DEBUG') or numbers (10)."""
    value = get_config('logging.level', DEFAULT_LOG_LEVEL)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    level = logging.getLevelName(str(value).upper())
    if not isinstance(level, int):
        logger.warning(f"Unknown logging level '{value}'. Defaulting to {DEFAULT_LOG_LEVEL}.")
        return logging.INFO
    return level


def get_log_file() -> Optional[str]:
    log_file = get_config('logging.file')
    return str(log_file) if log_file else None


def get_log_format() -> str:
    return str(get_config('logging.format', DEFAULT_LOG_FORMAT))


def set_config_for_testing(config_dict: Dict[str, Any]) -> None:
    """
    Set configuration values for testing purposes.
    These values override any other source.

    Args:
        config_dict: Dictionary of configuration values to set
    """
    _test_config.update(config_dict)
    logger.debug(f"Set testing configuration: {config_dict}")


def clear_test_config() -> None:
    """Clear all testing configuration values."""
    _test_config.clear()
    logger.debug("Cleared testing configuration")
