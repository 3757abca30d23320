"""Mock system and process monitor.

All figures are fixed placeholders; only the timestamp and hostname are
read from the running environment.
"""

from __future__ import annotations

import os
from datetime import datetime, timezone

from demo_tools.schemas.system import ProcessInfo, SystemInfo

_PROCESS_OVERVIEW: tuple[ProcessInfo, ...] = (
    ProcessInfo(name="demo-backend", pid=12345, memory="128MB", cpu="2.5%"),
    ProcessInfo(name="node", pid=12346, memory="256MB", cpu="5.2%"),
    ProcessInfo(name="demo-tools", pid=12347, memory="32MB", cpu="0.8%"),
)


def system_info() -> SystemInfo:
    return SystemInfo(
        timestamp=datetime.now(timezone.utc),
        hostname=os.environ.get("HOSTNAME", "unknown"),
        uptime="2 days 3 hours (simulated)",
        memory_usage="4.2GB / 16GB (26%)",
        cpu_usage="15%",
    )


def process_info(name: str | None = None) -> list[ProcessInfo]:
    """Return the single named process, or the fixed overview when *name* is empty."""
    if name:
        return [ProcessInfo(name=name, pid=12345, memory="128MB", cpu="2.5%")]
    return list(_PROCESS_OVERVIEW)
