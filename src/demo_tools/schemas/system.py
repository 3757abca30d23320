"""Pydantic models for the mock system/process monitor."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class SystemInfo(BaseModel):
    timestamp: datetime
    hostname: str
    uptime: str
    memory_usage: str
    cpu_usage: str


class ProcessInfo(BaseModel):
    name: str
    pid: int
    memory: str
    cpu: str
    status: str = "running"
