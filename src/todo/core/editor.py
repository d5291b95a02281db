"""
Editor bridge: round-trips text through the user's external editor.

The text is written to a temporary file, the editor is run on that file
and waited on, and the final contents are read back. The temporary file
is removed on every exit path.
"""

import logging
import os
import shlex
import subprocess
import tempfile

logger = logging.getLogger(__name__)

EDITOR_ENV_VAR = "EDITOR"
DEFAULT_EDITOR = "nvim"


class EditorError(Exception):
    """Raised when the external editor cannot be run or exits with an error."""

    pass


def resolve_editor(editor: str | None = None) -> str:
    """
    Pick the editor command.

    Args:
        editor: Explicit editor command; overrides the environment

    Returns:
        The explicit editor, else $EDITOR, else DEFAULT_EDITOR
    """
    if editor and editor.strip():
        return editor.strip()
    from_env = os.environ.get(EDITOR_ENV_VAR, "").strip()
    return from_env or DEFAULT_EDITOR


class EditorBridge:
    """
    Runs an external editor on a temporary file.

    The editor command is split with shlex, so values like
    ``code --wait`` or ``emacs -nw`` work as expected.

    Example:
        >>> bridge = EditorBridge("vim")
        >>> text = bridge.edit("Buy milk\\n")  # blocks until vim exits
    """

    def __init__(self, editor: str | None = None):
        self.editor = resolve_editor(editor)

    @property
    def argv(self) -> list[str]:
        return shlex.split(self.editor)

    def edit(self, text: str = "") -> str:
        """
        Let the user edit text and return the result.

        Args:
            text: Initial file contents (empty for a new task)

        Returns:
            File contents after the editor exits

        Raises:
            EditorError: If the editor cannot be started or exits non-zero
        """
        fd, temp_path = tempfile.mkstemp(prefix="todo-", suffix=".txt")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)

            try:
                cmd = [*self.argv, temp_path]
            except ValueError as e:
                raise EditorError(f"Invalid editor command '{self.editor}': {e}") from e

            logger.debug("Running editor: %s", cmd)
            try:
                result = subprocess.run(cmd, check=False)
            except OSError as e:
                raise EditorError(f"Failed to start editor '{self.editor}': {e}") from e

            if result.returncode != 0:
                raise EditorError(
                    f"Editor '{self.editor}' exited with status {result.returncode}"
                )

            try:
                with open(temp_path, encoding="utf-8") as f:
                    return f.read()
            except (OSError, UnicodeDecodeError) as e:
                raise EditorError(f"Failed to read back edited text: {e}") from e
        finally:
            try:
                os.unlink(temp_path)
            except FileNotFoundError:
                pass
