"""
Configuration model for todo.

Settings come from the environment (optionally seeded from the user .env
file) and are validated via Pydantic.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from todo.core.editor import DEFAULT_EDITOR


class TodoConfig(BaseModel):
    """
    Resolved runtime settings.

    Example:
        >>> config = TodoConfig(dev_mode=True, storage_path=Path("/tmp/t.bin"))
        >>> config.editor
        'nvim'
    """

    dev_mode: bool = Field(
        default=False,
        description="Use the development storage file instead of the real one",
    )
    editor: str = Field(
        default=DEFAULT_EDITOR,
        description="Command used to edit tasks interactively",
    )
    storage_path: Path = Field(..., description="File backing the task table")

    model_config = ConfigDict(frozen=True)

    @field_validator("editor", mode="before")
    @classmethod
    def default_blank_editor(cls, v: str | None) -> str:
        """Treat an unset or blank editor as the default editor."""
        if v is None or not str(v).strip():
            return DEFAULT_EDITOR
        return str(v).strip()
