"""Shared test fixtures for proctop."""

import pytest

from proctop.config import Config
from proctop.logging import configure
from proctop.models import ProcessRecord, SystemSnapshot
from proctop.monitor import ProviderUnavailable


@pytest.fixture(autouse=True)
def quiet_logging():
    """Route structlog into a NullHandler so tests never print log events."""
    configure(Config())


def make_process(
    pid: int = 100,
    user: str = "user",
    cpu: float = 0.1,
    ram: str = "10",
    uptime: float = 60.0,
    command: str = "/bin/test",
) -> ProcessRecord:
    """Create a ProcessRecord for testing."""
    return ProcessRecord(
        pid=pid,
        user=user,
        cpu_utilization=cpu,
        ram=ram,
        uptime_seconds=uptime,
        command=command,
    )


def make_system(**overrides) -> SystemSnapshot:
    """Create a SystemSnapshot for testing."""
    values = {
        "operating_system": "Test Linux 1.0",
        "kernel": "6.1.0-test",
        "cpu_utilization": 0.25,
        "memory_utilization": 0.5,
        "total_processes": 3,
        "running_processes": 1,
        "uptime_seconds": 3661.0,
    }
    values.update(overrides)
    return SystemSnapshot(**values)


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeProvider:
    """Provider returning canned snapshots; can be switched to fail."""

    def __init__(self, processes: list[ProcessRecord], system: SystemSnapshot | None = None):
        self.processes = list(processes)
        self.system = system or make_system(total_processes=len(processes))
        self.fail = False
        self.calls = 0

    def get_system_snapshot(self) -> SystemSnapshot:
        self.calls += 1
        if self.fail:
            raise ProviderUnavailable("host unreadable")
        return self.system

    def get_process_snapshot(self) -> list[ProcessRecord]:
        if self.fail:
            raise ProviderUnavailable("host unreadable")
        return list(self.processes)


@pytest.fixture
def clock() -> FakeClock:
    """Provide a controllable clock."""
    return FakeClock()


@pytest.fixture
def three_processes() -> list[ProcessRecord]:
    """Three processes in provider order with distinct CPU and RAM."""
    return [
        make_process(pid=10, user="root", cpu=0.1, ram="300", command="/sbin/init"),
        make_process(pid=20, user="alice", cpu=0.5, ram="1200", command="python worker.py"),
        make_process(pid=30, user="bob", cpu=0.2, ram="45", command="vim notes.txt"),
    ]
