"""
Configuration loading.

Precedence: process environment > user .env file > defaults.
"""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from todo.core.editor import EDITOR_ENV_VAR
from todo.core.paths import get_storage_path, is_dev_mode

from .env import load_layered_env
from .models import TodoConfig

logger = logging.getLogger(__name__)


def load_config(
    *,
    user_env_paths: Iterable[Path] | None = None,
    home: Path | None = None,
) -> TodoConfig:
    """
    Build the runtime configuration.

    Args:
        user_env_paths: Env files to load before reading the environment
        home: Directory holding the storage file (defaults to home dir)

    Returns:
        Validated TodoConfig
    """
    loaded = load_layered_env(user_env_paths=user_env_paths)
    if loaded:
        logger.debug("Loaded %s from user env file", ", ".join(sorted(loaded)))

    dev_mode = is_dev_mode()
    config = TodoConfig(
        dev_mode=dev_mode,
        editor=os.environ.get(EDITOR_ENV_VAR),
        storage_path=get_storage_path(dev_mode=dev_mode, home=home),
    )
    logger.debug("Using storage file %s", config.storage_path)
    return config
