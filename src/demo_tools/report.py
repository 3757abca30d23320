"""Console rendering for every result type the CLI produces.

Results go to stdout, failures to stderr.  Nothing here decides outcomes;
it only prints what the core modules returned.
"""

from __future__ import annotations

import sys
from pathlib import Path

from demo_tools.prober import ProbeOutcome
from demo_tools.schemas.system import ProcessInfo, SystemInfo
from demo_tools.schemas.user import UserRecord
from demo_tools.validator import PREVIEW_LIMIT, GenericReport, ValidationReport

_STEP_LABELS = {
    "health": ("API service is healthy", "API service unhealthy"),
    "list-users": ("Users list API is working", "Users list API failed"),
    "create-user": ("User created", "Create user failed"),
}


def print_error(message: str) -> None:
    print(f"❌ {message}", file=sys.stderr)


def _print_user_lines(users: list[UserRecord]) -> None:
    for index, user in enumerate(users[:PREVIEW_LIMIT], start=1):
        print(f"  {index}. {user.name} ({user.email})")


# ---------------------------------------------------------------------------
# data
# ---------------------------------------------------------------------------

def print_generated(count: int, output_path: str | Path) -> None:
    print(f"✅ Wrote user data file: {output_path}")
    print(f"📊 Users generated: {count}")


def print_validation(report: ValidationReport) -> None:
    print("✅ JSON syntax is valid")
    if isinstance(report, GenericReport):
        print("📄 Generic JSON document, top-level structure:")
        if not report.is_mapping:
            print("  (not an object, no keys to list)")
        for key in report.keys:
            print(f"  - {key}")
        return

    print(f"📊 User data detected, {report.count} records")
    _print_user_lines(report.preview)
    if report.remaining:
        print(f"  ... and {report.remaining} more")


# ---------------------------------------------------------------------------
# monitor
# ---------------------------------------------------------------------------

def print_system(info: SystemInfo) -> None:
    print("📊 System status:")
    print(f"  🕐 Timestamp: {info.timestamp:%Y-%m-%d %H:%M:%S} UTC")
    print(f"  🏠 Hostname:  {info.hostname}")
    print(f"  ⏱️  Uptime:    {info.uptime}")
    print(f"  💾 Memory:    {info.memory_usage}")
    print(f"  🔥 CPU:       {info.cpu_usage}")


def print_processes(processes: list[ProcessInfo], name: str | None = None) -> None:
    if name:
        proc = processes[0]
        print(f"🔍 Process: {proc.name}")
        print(f"📊 Status: {proc.status}")
        print(f"  💾 Memory: {proc.memory}")
        print(f"  🔥 CPU: {proc.cpu}")
        print(f"  🆔 PID: {proc.pid}")
        return

    print("📋 Process overview:")
    for proc in processes:
        print(f"  📦 {proc.name} (PID: {proc.pid}) - memory: {proc.memory}, CPU: {proc.cpu}")


# ---------------------------------------------------------------------------
# api
# ---------------------------------------------------------------------------

def print_outcome(outcome: ProbeOutcome) -> None:
    passed, failed = _STEP_LABELS.get(outcome.step, ("OK", "Failed"))

    if outcome.transport_failed:
        print_error(f"{outcome.method} {outcome.url} failed: {outcome.error}")
        if outcome.hint:
            print(f"💡 {outcome.hint}", file=sys.stderr)
        return

    print(f"📡 HTTP status: {outcome.status_code}")
    if not outcome.ok:
        print(f"❌ {failed}, status code: {outcome.status_code}")
        return

    if outcome.warning:
        print(f"⚠️  {outcome.warning}")
        return

    print(f"✅ {passed}")
    if outcome.users is not None:
        print(f"📊 Users: {len(outcome.users)}")
        _print_user_lines(outcome.users)
    else:
        print(f"📄 Response body: {outcome.body}")
