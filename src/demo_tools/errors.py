"""Exception hierarchy for demo-tools.

Only file-side and configuration failures are raised.  Network failures
and non-2xx responses are recorded as data on a
:class:`~demo_tools.prober.ProbeOutcome`, and a schema mismatch is a
checked outcome (``decode_users()`` returns ``None``).
"""

from __future__ import annotations

from pathlib import Path


class DemoToolsError(Exception):
    """Base class for every error the CLI reports and recovers from."""


class ConfigError(DemoToolsError):
    """Settings file or environment values could not be loaded."""


class DataFileError(DemoToolsError):
    """A data file could not be read or written."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class SerializationError(DemoToolsError):
    """User records could not be encoded as JSON."""


class JSONParseError(DemoToolsError):
    """File content is not syntactically valid JSON."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")
