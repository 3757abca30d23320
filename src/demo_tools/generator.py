"""Synthetic user generator.

Builds ``count`` :class:`UserRecord` objects with deterministic ids, names
and emails, then writes them as a pretty-printed JSON array.  Only
``uuid`` and ``created_at`` differ between two runs with the same count.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
import uuid
from datetime import datetime, timezone
from pathlib import Path

from pydantic_core import PydanticSerializationError

from demo_tools.errors import DataFileError, SerializationError
from demo_tools.schemas.user import UserList, UserRecord

logger = logging.getLogger(__name__)

# Order matters: record N is named NAME_POOL[(N - 1) % len(NAME_POOL)] + str(N).
NAME_POOL: tuple[str, ...] = (
    "Alice",
    "Bao",
    "Chidi",
    "Dmitri",
    "Elif",
    "Farah",
    "Giulia",
    "Hiroshi",
    "Ingrid",
    "Jamal",
    "Kalani",
    "Lucia",
    "Mateo",
    "Noor",
    "Olga",
    "Priya",
)


def make_name(user_id: int) -> str:
    return f"{NAME_POOL[(user_id - 1) % len(NAME_POOL)]}{user_id}"


def make_email(user_id: int) -> str:
    return f"user{user_id}@example.com"


def build_users(count: int) -> list[UserRecord]:
    """Return ``count`` records with ids ``1..count`` in ascending order."""
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    return [
        UserRecord(
            id=user_id,
            name=make_name(user_id),
            email=make_email(user_id),
            created_at=datetime.now(timezone.utc),
            uuid=str(uuid.uuid4()),
        )
        for user_id in range(1, count + 1)
    ]


def dump_users(users: list[UserRecord]) -> str:
    """Serialize *users* as a JSON array indented by two spaces."""
    try:
        return UserList.dump_json(users, indent=2).decode("utf-8")
    except PydanticSerializationError as exc:
        raise SerializationError(f"Could not serialize user records: {exc}") from exc


def _file_mode(path: Path) -> int:
    """Mode for *path*: keep an existing file's mode, else 0666 minus the umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_users(users: list[UserRecord], output_path: str | Path) -> Path:
    """Write *users* to *output_path*, replacing any existing file.

    Writes to a temp file next to the target and renames it into place.
    The parent directory must already exist.
    """
    path = Path(output_path)
    payload = dump_users(users)

    try:
        fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    except OSError as exc:
        raise DataFileError(path, exc.strerror or str(exc)) from exc

    try:
        with open(fd, "w", encoding="utf-8") as fh:
            # mkstemp creates 0600 files
            os.chmod(tmp_path, _file_mode(path))
            fh.write(payload)
        Path(tmp_path).replace(path)
    except OSError as exc:
        Path(tmp_path).unlink(missing_ok=True)
        raise DataFileError(path, exc.strerror or str(exc)) from exc

    logger.info("Wrote %d user records to %s", len(users), path)
    return path


def generate(count: int, output_path: str | Path) -> list[UserRecord]:
    """Build ``count`` users and write them to *output_path*."""
    users = build_users(count)
    logger.info("Generated %d user records", len(users))
    write_users(users, output_path)
    return users
