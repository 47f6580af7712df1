"""Keyboard dispatch for the dashboard."""

from collections.abc import Callable, Sequence

from proctop.logging import get_logger
from proctop.models import KillResult, ProcessRecord, SortKey
from proctop.state import UiState
from proctop.terminator import terminate as terminate_process

log = get_logger(__name__)

SORT_KEYS = {
    "c": (SortKey.CPU, "Sorting by CPU Usage"),
    "m": (SortKey.RAM, "Sorting by Memory/RAM Usage"),
    "p": (SortKey.PID, "Sorting by Process ID (PID)"),
}


def handle_key(
    key: str | None,
    state: UiState,
    processes: Sequence[ProcessRecord],
    terminate: Callable[[int], KillResult] = terminate_process,
) -> bool:
    """
    Apply a single key press to the dashboard state.

    Letter keys are case-insensitive; arrows arrive as ``"up"`` and ``"down"``.

    Args:
        key: The key, or None when nothing was pressed.
        state: View state to update.
        processes: The sorted rows drawn this tick; ``k`` acts on the
            highlighted one.
        terminate: Kill protocol, injectable for tests.

    Returns:
        True if the key asks the dashboard to quit.
    """
    if not key:
        return False
    if len(key) == 1:
        key = key.lower()

    if key == "q":
        return True
    if key in SORT_KEYS:
        sort_key, message = SORT_KEYS[key]
        state.set_sort_key(sort_key)
        state.set_message(message)
    elif key == "up":
        state.move_selection(-1, len(processes))
    elif key == "down":
        state.move_selection(1, len(processes))
    elif key == "k":
        _kill_selected(state, processes, terminate)
    return False


def _kill_selected(
    state: UiState,
    processes: Sequence[ProcessRecord],
    terminate: Callable[[int], KillResult],
) -> None:
    index = state.selected_index
    if index >= len(processes):
        return
    pid = processes[index].pid
    if terminate(pid) is KillResult.KILLED:
        state.set_message(f"Process {pid} killed successfully!")
    else:
        log.warning("kill_request_failed", pid=pid)
        state.set_message(f"Failed to kill process {pid}. Try with sudo.")
