"""Composition root wiring configuration and logging into the caches.

This is the only place where settings reach the cache layer; the caches
themselves receive everything through their constructors.
"""

import logging
from pathlib import Path
from typing import Optional

from kvcache.core.registry import CacheRegistry
from kvcache.domain.interfaces.backend import CacheBackend
from kvcache.infrastructure.config.settings import (
    DEFAULT_CONFIG_FILE,
    get_eager_life_time,
    get_eager_storage_id,
    get_lazy_namespace,
    get_log_file,
    get_log_format,
    get_log_level,
    load_configuration,
)
from kvcache.infrastructure.monitoring.logger_setup import setup_logging

logger = logging.getLogger(__name__)


def create_cache_registry(
    backend: CacheBackend,
    config_file: Optional[Path] = None,
    env_file: Optional[Path] = None,
    configure_logging: bool = True,
) -> CacheRegistry:
    """Creates a CacheRegistry over ``backend`` from the loaded configuration.

    Args:
        backend: The storage backend every persistent cache will use.
        config_file: YAML configuration file (defaults to ~/.kvcache/config.yaml).
        env_file: .env file (searched upwards from the cwd if None).
        configure_logging: Whether to set up the package logger from settings.

    Returns:
        A registry wired with the configured storage id, lifetime and namespace.
    """
    # always reload so each registry reflects the files it was given
    load_configuration(config_file=config_file or DEFAULT_CONFIG_FILE, env_file=env_file, force=True)

    if configure_logging:
        setup_logging(log_level=get_log_level(), log_format=get_log_format(), log_file=get_log_file())

    registry = CacheRegistry(
        backend,
        eager_storage_id=get_eager_storage_id(),
        eager_life_time=get_eager_life_time(),
        lazy_namespace=get_lazy_namespace(),
    )
    logger.info(
        f"Cache registry initialized. Backend={backend.__class__.__name__}, "
        f"eager storage id='{registry.eager_storage_id}', life_time={registry.eager_life_time}s, "
        f"lazy namespace='{registry.lazy_namespace}'"
    )
    return registry
