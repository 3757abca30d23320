"""JSON file validator.

A file is first parsed as plain JSON; invalid syntax stops processing.
Valid JSON is then decoded strictly as a list of :class:`UserRecord`.
When that fails the document is reported generically by its first few
top-level keys.  The result is a tagged :data:`ValidationReport`.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Literal, Union

from pydantic import BaseModel, ValidationError

from demo_tools.errors import DataFileError, JSONParseError
from demo_tools.schemas.user import UserList, UserRecord

logger = logging.getLogger(__name__)

PREVIEW_LIMIT = 3
KEY_LIMIT = 5


class UserArrayReport(BaseModel):
    kind: Literal["users"] = "users"
    count: int
    preview: list[UserRecord]
    remaining: int


class GenericReport(BaseModel):
    kind: Literal["generic"] = "generic"
    is_mapping: bool
    keys: list[str]


ValidationReport = Union[UserArrayReport, GenericReport]


def decode_users(text: str) -> list[UserRecord] | None:
    """Decode *text* as a JSON array of users, or return ``None`` on mismatch."""
    try:
        return UserList.validate_json(text)
    except ValidationError as exc:
        logger.debug("Not a user array (%d schema errors)", exc.error_count())
        return None


def summarize_users(users: list[UserRecord]) -> UserArrayReport:
    return UserArrayReport(
        count=len(users),
        preview=users[:PREVIEW_LIMIT],
        remaining=max(len(users) - PREVIEW_LIMIT, 0),
    )


def summarize_generic(document: Any) -> GenericReport:
    if isinstance(document, dict):
        return GenericReport(is_mapping=True, keys=list(document)[:KEY_LIMIT])
    return GenericReport(is_mapping=False, keys=[])


def validate_text(text: str, source: str | Path = "<string>") -> ValidationReport:
    """Validate already-loaded JSON *text*; *source* is only used in errors."""
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise JSONParseError(source, str(exc)) from exc
    except RecursionError as exc:
        raise JSONParseError(source, "nesting too deep") from exc

    users = decode_users(text)
    if users is not None:
        logger.info("%s: %d user records", source, len(users))
        return summarize_users(users)

    logger.info("%s: generic JSON (%s)", source, type(document).__name__)
    return summarize_generic(document)


def validate(input_path: str | Path) -> ValidationReport:
    """Read *input_path* and validate its contents."""
    path = Path(input_path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        reason = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc)
        raise DataFileError(path, reason) from exc

    logger.info("Read %d characters from %s", len(text), path)
    return validate_text(text, source=path)
