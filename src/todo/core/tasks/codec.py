"""
Binary encoding of the task table.

The storage file is a single frame:

    +-------+---------+----------------+---------------------+
    | magic | version | payload length | payload             |
    | 4 B   | 1 B     | uint32 (BE)    | UTF-8 JSON, N bytes |
    +-------+---------+----------------+---------------------+

The payload is the JSON form of a TaskTable model. The header lets a
truncated or foreign file be rejected before any JSON parsing happens.
"""

import struct

from pydantic import BaseModel, Field, ValidationError

from .models import Task

MAGIC = b"TDO1"
FORMAT_VERSION = 1

_HEADER = struct.Struct(">4sBI")


class CorruptStoreError(ValueError):
    """Raised when bytes read from the storage file cannot be decoded."""

    pass


class TaskTable(BaseModel):
    """Serialized form of the ID -> Task mapping."""

    tasks: dict[int, Task] = Field(default_factory=dict)


def encode(tasks: dict[int, Task]) -> bytes:
    """
    Encode a task mapping into a storage frame.

    Args:
        tasks: Mapping of task ID to Task

    Returns:
        Bytes ready to be written to the storage file
    """
    payload = TaskTable(tasks=tasks).model_dump_json().encode("utf-8")
    return _HEADER.pack(MAGIC, FORMAT_VERSION, len(payload)) + payload


def decode(data: bytes) -> dict[int, Task]:
    """
    Decode a storage frame into a task mapping.

    Args:
        data: Full contents of the storage file

    Returns:
        Mapping of task ID to Task, sorted by ID

    Raises:
        CorruptStoreError: If the frame or its payload is malformed
    """
    if len(data) < _HEADER.size:
        raise CorruptStoreError(f"file too short ({len(data)} bytes)")

    magic, version, length = _HEADER.unpack_from(data)
    if magic != MAGIC:
        raise CorruptStoreError(f"bad magic {magic!r}")
    if version != FORMAT_VERSION:
        raise CorruptStoreError(f"unsupported format version {version}")

    payload = data[_HEADER.size :]
    if len(payload) != length:
        raise CorruptStoreError(
            f"payload length mismatch (header says {length}, got {len(payload)})"
        )

    try:
        table = TaskTable.model_validate_json(payload)
    except ValidationError as e:
        raise CorruptStoreError(f"invalid payload: {e}") from e

    if any(task_id < 1 for task_id in table.tasks):
        raise CorruptStoreError("task IDs must be positive")

    return dict(sorted(table.tasks.items()))
