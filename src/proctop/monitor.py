"""System and process data provider for proctop."""

import platform
import time

import psutil

from proctop.logging import get_logger
from proctop.models import ProcessRecord, SystemSnapshot

log = get_logger(__name__)


class ProctopError(Exception):
    """Base class for proctop errors."""


class ProviderUnavailable(ProctopError):
    """The host's system or process state could not be read."""


def _operating_system() -> str:
    """Get a human-readable OS name, preferring os-release's PRETTY_NAME."""
    try:
        release = platform.freedesktop_os_release()
    except OSError:
        return f"{platform.system()} {platform.release()}".strip()
    return release.get("PRETTY_NAME") or release.get("NAME") or platform.system()


class PsutilProvider:
    """
    Data provider that reads system and process state using psutil.

    Each call takes a fresh reading. CPU percentages are measured since the
    previous call, so the first reading after construction may be 0.0.
    Handles AccessDenied and ZombieProcess errors per process gracefully.
    """

    def __init__(self) -> None:
        """Initialize the provider and prime psutil's CPU counters."""
        self._operating_system = _operating_system()
        self._kernel = platform.release()
        # First call returns 0.0
        psutil.cpu_percent()

    def get_system_snapshot(self) -> SystemSnapshot:
        """
        Collect a snapshot of overall system state.

        Raises:
            ProviderUnavailable: If psutil cannot read the host.
        """
        try:
            cpu_percent = psutil.cpu_percent()
            mem = psutil.virtual_memory()
            uptime = time.time() - psutil.boot_time()

            total = 0
            running = 0
            for proc in psutil.process_iter(attrs=["status"]):
                total += 1
                if proc.info.get("status") == psutil.STATUS_RUNNING:
                    running += 1
        except (psutil.Error, OSError) as exc:
            log.warning("system_snapshot_failed", error=str(exc))
            raise ProviderUnavailable(f"cannot read system state: {exc}") from exc

        return SystemSnapshot(
            operating_system=self._operating_system,
            kernel=self._kernel,
            cpu_utilization=cpu_percent / 100,
            memory_utilization=mem.percent / 100,
            total_processes=total,
            running_processes=running,
            uptime_seconds=uptime,
        )

    def get_process_snapshot(self) -> list[ProcessRecord]:
        """
        Collect records for all running processes in psutil's order.

        Uses psutil.process_iter() with oneshot() context manager for efficiency.
        Processes that vanish or deny access mid-poll are skipped.

        Raises:
            ProviderUnavailable: If the process table itself cannot be listed.
        """
        processes: list[ProcessRecord] = []
        attrs = ["pid", "name", "username", "cpu_percent", "memory_info", "create_time", "cmdline"]
        now = time.time()

        try:
            process_iter = psutil.process_iter(attrs=attrs)
            for proc in process_iter:
                try:
                    with proc.oneshot():
                        info = proc.info

                        cmdline = info.get("cmdline") or []
                        command = " ".join(cmdline) if cmdline else info.get("name") or ""

                        mem_info = info.get("memory_info")
                        rss = mem_info.rss if mem_info else 0

                        create_time = info.get("create_time")
                        uptime = now - create_time if create_time else 0.0

                        processes.append(
                            ProcessRecord(
                                pid=info.get("pid", 0),
                                user=info.get("username") or "",
                                cpu_utilization=(info.get("cpu_percent") or 0.0) / 100,
                                ram=str(rss // (1024 * 1024)),
                                uptime_seconds=uptime,
                                command=command,
                            )
                        )
                except (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess):
                    # Died mid-poll or not ours to inspect
                    continue
        except (psutil.Error, OSError) as exc:
            log.warning("process_snapshot_failed", error=str(exc))
            raise ProviderUnavailable(f"cannot list processes: {exc}") from exc

        return processes
