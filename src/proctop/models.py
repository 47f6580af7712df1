"""Data models for proctop."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


@dataclass(slots=True, frozen=True)
class ProcessRecord:
    """Immutable snapshot of a single process."""

    pid: int
    user: str
    cpu_utilization: float  # fraction; may exceed 1.0 on multi-core
    ram: str  # megabytes, as reported by the provider
    uptime_seconds: float
    command: str


@dataclass(slots=True, frozen=True)
class SystemSnapshot:
    """Immutable snapshot of overall system state."""

    operating_system: str
    kernel: str
    cpu_utilization: float  # 0.0 - 1.0
    memory_utilization: float  # 0.0 - 1.0
    total_processes: int
    running_processes: int
    uptime_seconds: float


# Provider order, not sorted.
ProcessSnapshot = Sequence[ProcessRecord]


class SortKey(Enum):
    """Sort keys for the process table."""

    CPU = "cpu"
    RAM = "ram"
    PID = "pid"


class KillResult(Enum):
    """Outcome of a terminate request."""

    KILLED = "killed"
    FAILED = "failed"


class LoopState(Enum):
    """States of the render-and-control loop."""

    RUNNING = "running"
    TERMINATED = "terminated"
