"""Shared fixtures for the test suite."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from demo_tools.prober import ApiProber


@pytest.fixture()
def user_dicts() -> list[dict]:
    """Five records in the on-disk user format."""
    return [
        {
            "id": i,
            "name": f"Person{i}",
            "email": f"user{i}@example.com",
            "created_at": "2024-01-0{}T10:00:00Z".format(i),
            "uuid": f"00000000-0000-4000-8000-00000000000{i}",
        }
        for i in range(1, 6)
    ]


@pytest.fixture()
def users_file(tmp_path: Path, user_dicts: list[dict]) -> Path:
    path = tmp_path / "users.json"
    path.write_text(json.dumps(user_dicts, indent=2))
    return path


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every DEMO_TOOLS_* variable so settings fall back to defaults."""
    for var in (
        "DEMO_TOOLS_CONFIG",
        "DEMO_TOOLS_LOG_LEVEL",
        "DEMO_TOOLS_API_URL",
        "DEMO_TOOLS_TIMEOUT",
        "DEMO_TOOLS_USER_COUNT",
        "DEMO_TOOLS_OUTPUT",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture()
def make_prober() -> Callable[[Callable[[httpx.Request], httpx.Response]], ApiProber]:
    """Build an ApiProber whose client is served by *handler* instead of the network."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> ApiProber:
        prober = ApiProber(timeout=1)
        prober._client = httpx.Client(transport=httpx.MockTransport(handler))
        return prober

    return _make
