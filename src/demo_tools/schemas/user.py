"""Pydantic model for synthetic user records.

Produced by the generator, read back by the validator and used to decode
``GET /api/users`` responses from the probed service.  Validation is
strict: no type coercion, and the email is kept exactly as written.
"""

from __future__ import annotations

from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, AwareDatetime, BaseModel, ConfigDict, Field, TypeAdapter


def _check_email(value: str) -> str:
    # Format check only: the stored value is the input, not the normalized form.
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(f"value is not a valid email address: {exc}") from None
    return value


class UserRecord(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1)
    email: Annotated[str, AfterValidator(_check_email)]
    created_at: AwareDatetime
    uuid: str = Field(..., min_length=1)


# Shared adapter for the on-disk format: a JSON array of UserRecord objects.
UserList = TypeAdapter(list[UserRecord])
