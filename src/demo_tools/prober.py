"""API prober — smoke-tests the health and users endpoints of a live service.

Every request is sent once, with a bounded timeout, and its result is
recorded as a :class:`ProbeOutcome`.  Transport failures and non-2xx
statuses are outcomes, not exceptions, so one failed step never stops
the next one.

Lifecycle mirrors the other I/O components::

    with ApiProber(timeout=5) as prober:
        outcome = prober.health_check("http://localhost:8080")
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel

from demo_tools.schemas.user import UserRecord
from demo_tools.urls import normalize_health_url, normalize_users_url
from demo_tools.validator import decode_users

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0

# Body sent by the create-user step.
NEW_USER_PAYLOAD: dict[str, str] = {
    "name": "Test User",
    "email": "test@example.com",
}


class ProbeOutcome(BaseModel):
    """Result of a single HTTP sub-step."""

    step: str
    method: str
    url: str
    ok: bool = False
    status_code: int | None = None
    body: str | None = None
    users: list[UserRecord] | None = None
    warning: str | None = None
    error: str | None = None
    hint: str | None = None

    @property
    def transport_failed(self) -> bool:
        return self.status_code is None


class ApiProber:
    """Issue the health and users probes against a base URL."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._timeout = timeout
        self._headers = dict(headers or {})
        self._client: httpx.Client | None = None

    @property
    def name(self) -> str:
        return self.__class__.__name__

    # -- lifecycle -------------------------------------------------------

    def connect(self) -> None:
        self._client = httpx.Client(headers=self._headers, timeout=self._timeout)
        logger.info("HTTP client ready (timeout=%.1fs)", self._timeout)

    def disconnect(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("Disconnected HTTP client")

    def __enter__(self) -> ApiProber:
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        self.disconnect()

    # -- probes ----------------------------------------------------------

    def health_check(self, base_url: str) -> ProbeOutcome:
        url = normalize_health_url(base_url)
        outcome = self._send("health", "GET", url)
        if outcome.transport_failed:
            outcome.hint = _service_hint(base_url)
        return outcome

    def test_users(self, base_url: str) -> list[ProbeOutcome]:
        """GET then POST the users endpoint; the POST runs whatever the GET did."""
        url = normalize_users_url(base_url)

        listing = self._send("list-users", "GET", url)
        if listing.transport_failed:
            listing.hint = _service_hint(base_url)
        elif listing.ok and listing.body is not None:
            listing.users = decode_users(listing.body)
            if listing.users is None:
                logger.info("GET %s: body is not a user array, reporting raw text", url)

        creation = self._send("create-user", "POST", url, payload=NEW_USER_PAYLOAD)
        return [listing, creation]

    # -- internals -------------------------------------------------------

    def _send(
        self,
        step: str,
        method: str,
        url: str,
        payload: dict[str, Any] | None = None,
    ) -> ProbeOutcome:
        if self._client is None:
            self.connect()

        outcome = ProbeOutcome(step=step, method=method, url=url)
        logger.info("%s %s", method, url)

        try:
            request = self._client.build_request(method, url, json=payload)  # type: ignore[union-attr]
            response = self._client.send(request, stream=True)  # type: ignore[union-attr]
        except (httpx.TransportError, httpx.InvalidURL) as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            outcome.error = str(exc) or exc.__class__.__name__
            return outcome

        try:
            outcome.status_code = response.status_code
            outcome.ok = response.is_success
            logger.info("%s %s -> %d", method, url, response.status_code)
            if outcome.ok:
                try:
                    response.read()
                    outcome.body = response.text
                except (httpx.HTTPError, httpx.StreamError) as exc:
                    logger.warning("Could not read body from %s: %s", url, exc)
                    outcome.warning = f"could not read response body: {exc}"
        finally:
            response.close()

        return outcome


def _service_hint(base_url: str) -> str:
    return f"make sure the service is running at {base_url}"
