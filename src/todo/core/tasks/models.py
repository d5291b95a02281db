"""
Task data models for todo.

A task is a short note made of a head (its title line) and a free-form body.
Tasks carry no status: completing a task removes it from the store.
"""

from pydantic import BaseModel, ConfigDict, Field


def is_blank(text: str) -> bool:
    """Return True if text is empty or contains only whitespace."""
    return text.strip() == ""


def _trim_blank_lines(lines: list[str]) -> list[str]:
    """Drop leading and trailing whitespace-only lines."""
    start = 0
    end = len(lines)
    while start < end and is_blank(lines[start]):
        start += 1
    while end > start and is_blank(lines[end - 1]):
        end -= 1
    return lines[start:end]


class Task(BaseModel):
    """
    A single task (head + body).

    Example:
        >>> task = Task(head="Buy groceries", body="milk\\neggs")
        >>> task.to_text()
        'Buy groceries\\nmilk\\neggs\\n'
        >>> Task.from_text("  \\n\\t\\n") is None
        True
    """

    head: str = Field(..., description="Title line shown by `todo list`")
    body: str = Field(default="", description="Free-form text after the head")

    model_config = ConfigDict(frozen=True)

    @property
    def has_body(self) -> bool:
        return self.body != ""

    def to_text(self) -> str:
        """
        Render the task as editable text.

        The head is the first line and the body follows it. The result
        always ends with a newline so editors don't flag a missing EOL.
        """
        if self.body:
            return f"{self.head}\n{self.body}\n"
        return f"{self.head}\n"

    @classmethod
    def from_text(cls, text: str) -> "Task | None":
        """
        Parse editor text back into a task.

        Leading and trailing whitespace-only lines are ignored. The first
        remaining line becomes the head, the rest become the body with
        trailing whitespace stripped from every line. Interior blank lines
        in the body are kept.

        Args:
            text: Raw text read back from the editor

        Returns:
            Parsed Task, or None if the text is blank
        """
        if is_blank(text):
            return None

        lines = _trim_blank_lines([line.rstrip() for line in text.splitlines()])
        head = lines[0]
        body = "\n".join(_trim_blank_lines(lines[1:]))
        return cls(head=head, body=body)
