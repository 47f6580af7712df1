"""Escalating-signal process termination."""

import signal
from collections.abc import Callable

import psutil

from proctop.logging import get_logger
from proctop.models import KillResult

# Windows has no SIGKILL; psutil maps SIGTERM to TerminateProcess there.
FORCE_SIGNAL = getattr(signal, "SIGKILL", signal.SIGTERM)

log = get_logger(__name__)


def send_signal(pid: int, sig: int) -> bool:
    """
    Deliver ``sig`` to ``pid``.

    Returns:
        True if the OS accepted the signal, False for a missing process,
        denied access, or an invalid pid.
    """
    try:
        psutil.Process(pid).send_signal(sig)
    except (psutil.Error, OSError, ValueError) as exc:
        log.info("signal_failed", pid=pid, signal=int(sig), error=str(exc))
        return False
    return True


def terminate(pid: int, send: Callable[[int, int], bool] = send_signal) -> KillResult:
    """
    Stop a process, escalating from SIGTERM to a forceful kill.

    Never raises; every outcome is reported through the result.
    """
    if send(pid, signal.SIGTERM):
        log.info("process_terminated", pid=pid, signal="SIGTERM")
        return KillResult.KILLED
    if send(pid, FORCE_SIGNAL):
        log.info("process_killed", pid=pid, signal="SIGKILL")
        return KillResult.KILLED
    log.warning("terminate_failed", pid=pid)
    return KillResult.FAILED
