"""
Configuration model and loading.

Settings are read from the environment, seeded by the user .env file.
"""

from .env import get_user_env_path, get_xdg_config_home, load_layered_env
from .loader import load_config
from .models import TodoConfig

__all__ = [
    "TodoConfig",
    "get_user_env_path",
    "get_xdg_config_home",
    "load_config",
    "load_layered_env",
]
