"""
Storage path resolution.

Production data lives in ~/.tasks.bin. Setting TODO_DEV selects
~/.tasks.dev.bin instead, so test runs never touch the real task list.
"""

import os
from pathlib import Path

DEV_ENV_VAR = "TODO_DEV"
STORAGE_FILENAME = ".tasks.bin"
DEV_STORAGE_FILENAME = ".tasks.dev.bin"

_FALSY = {"", "0", "false", "no", "off"}


def is_truthy(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() not in _FALSY


def is_dev_mode() -> bool:
    """Check whether development mode is enabled via TODO_DEV."""
    return is_truthy(os.environ.get(DEV_ENV_VAR))


def get_home_dir() -> Path:
    """Return the user's home directory, or the current directory if unknown."""
    try:
        return Path.home()
    except RuntimeError:
        return Path(".")


def get_storage_path(dev_mode: bool | None = None, home: Path | None = None) -> Path:
    """
    Get the path of the file backing the task table.

    Args:
        dev_mode: Use the development file. Defaults to the TODO_DEV flag.
        home: Directory holding the file. Defaults to the home directory.

    Returns:
        Path to the storage file

    Example:
        >>> get_storage_path(dev_mode=False, home=Path("/home/me"))
        PosixPath('/home/me/.tasks.bin')
        >>> get_storage_path(dev_mode=True, home=Path("/home/me"))
        PosixPath('/home/me/.tasks.dev.bin')
    """
    if dev_mode is None:
        dev_mode = is_dev_mode()
    if home is None:
        home = get_home_dir()
    return home / (DEV_STORAGE_FILENAME if dev_mode else STORAGE_FILENAME)
