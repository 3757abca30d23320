"""Endpoint helpers for the probed service.

Both helpers follow one deployment convention (``/api/health`` and
``/api/users`` under the base URL).  No other URL cleanup is done.
"""

from __future__ import annotations

HEALTH_SUFFIX = "/health"
HEALTH_PATH = "/api/health"
USERS_PATH = "/api/users"


def normalize_health_url(base: str) -> str:
    if base.endswith(HEALTH_SUFFIX):
        return base
    return f"{base}{HEALTH_PATH}"


def normalize_users_url(base: str) -> str:
    if USERS_PATH in base:
        return base
    return f"{base}{USERS_PATH}"
