"""Environment loading helpers.

todo reads its settings (TODO_DEV, EDITOR) from the environment. A user
env file at ~/.config/todo/.env can provide defaults for them.

Variables already present in the process environment are never overridden:
  os.environ (pre-existing) > user .env
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from dotenv import dotenv_values

from todo.core.paths import get_home_dir


def get_xdg_config_home() -> Path:
    if xdg_home := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_home)
    return get_home_dir() / ".config"


def get_user_env_path() -> Path:
    """Path to ~/.config/todo/.env (or the XDG equivalent)."""
    return get_xdg_config_home() / "todo" / ".env"


def _read_env(path: Path) -> dict[str, str]:
    if not path.exists():
        return {}
    values = dotenv_values(path)
    out: dict[str, str] = {}
    for k, v in values.items():
        if k is None or v is None:
            continue
        out[str(k)] = str(v)
    return out


def load_layered_env(*, user_env_paths: Iterable[Path] | None = None) -> list[str]:
    """Load environment variables from user env files.

    Args:
        user_env_paths: explicit env file paths (defaults to the user .env)

    Returns:
        Names of the variables that were set from a file
    """
    if user_env_paths is None:
        user_env_paths = [get_user_env_path()]

    loaded: list[str] = []
    for p in user_env_paths:
        for k, v in _read_env(Path(p)).items():
            if k not in os.environ:
                os.environ[k] = v
                loaded.append(k)
    return loaded
