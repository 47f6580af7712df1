"""Panel renderers: system summary, process table and status message."""

from collections.abc import Sequence

from proctop.canvas import Canvas
from proctop.formatting import elapsed_time, progress_bar
from proctop.models import ProcessRecord, SortKey, SystemSnapshot
from proctop.state import UiState

BAR_STYLE = "blue"
HEADER_STYLE = "green"

PID_COLUMN = 2
USER_COLUMN = 10
CPU_COLUMN = 21
RAM_COLUMN = 29
TIME_COLUMN = 38
COMMAND_COLUMN = 49

# Narrowest surface that still fits every fixed column plus the right border
MIN_WIDTH = COMMAND_COLUMN + 1

SYSTEM_PANEL_HEIGHT = 9
MESSAGE_PANEL_HEIGHT = 3

_LEGENDS = {
    SortKey.CPU: ">>CPU<< [M]emory [P]ID",
    SortKey.RAM: "[C]PU >>MEMORY<< [P]ID",
    SortKey.PID: "[C]PU [M]emory >>PID<<",
}


def process_panel_height(rows: int) -> int:
    """Height of the process panel for ``rows`` visible processes."""
    return rows + 3


def _fit(text: str, width: int) -> str:
    return text[: max(0, width)]


def draw_system(canvas: Canvas, snapshot: SystemSnapshot) -> None:
    """Draw the boxed system summary, one field per line."""
    canvas.clear()
    canvas.box()
    canvas.put(1, 2, f"OS: {snapshot.operating_system}")
    canvas.put(2, 2, f"Kernel: {snapshot.kernel}")
    canvas.put(3, 2, "CPU: ")
    canvas.put(3, 10, progress_bar(snapshot.cpu_utilization), BAR_STYLE)
    canvas.put(4, 2, "Memory: ")
    canvas.put(4, 10, progress_bar(snapshot.memory_utilization), BAR_STYLE)
    canvas.put(5, 2, f"Total Processes: {snapshot.total_processes}")
    canvas.put(6, 2, f"Running Processes: {snapshot.running_processes}")
    canvas.put(7, 2, f"Up Time: {elapsed_time(snapshot.uptime_seconds)}")


def _legend(key: SortKey) -> str:
    return f"Sort: {_LEGENDS[key]} | [K]ill | [Q]uit | UP/DOWN arrows"


def draw_processes(
    canvas: Canvas,
    processes: Sequence[ProcessRecord],
    state: UiState,
    rows: int,
) -> None:
    """
    Draw the boxed process table.

    Args:
        canvas: Surface for the process panel.
        processes: Records already sorted by ``state.sort_key``.
        state: Supplies the sort key and the highlighted row.
        rows: Maximum number of process rows to draw.
    """
    canvas.clear()
    canvas.box()
    key = state.sort_key

    canvas.put(0, 2, _fit(_legend(key), canvas.width - 3), HEADER_STYLE)

    def header_style(column_key: SortKey | None) -> str:
        return f"{HEADER_STYLE} bold" if column_key is key else HEADER_STYLE

    row = 1
    canvas.put(row, PID_COLUMN, "PID", header_style(SortKey.PID))
    canvas.put(row, USER_COLUMN, "USER", header_style(None))
    canvas.put(row, CPU_COLUMN, "CPU[%]", header_style(SortKey.CPU))
    canvas.put(row, RAM_COLUMN, "RAM[MB]", header_style(SortKey.RAM))
    canvas.put(row, TIME_COLUMN, "TIME+", header_style(None))
    command_width = canvas.width - COMMAND_COLUMN - 1
    canvas.put(row, COMMAND_COLUMN, _fit("COMMAND", command_width), header_style(None))

    for index, proc in enumerate(processes[:rows]):
        row += 1
        style = "reverse" if index == state.selected_index else None
        if style:
            canvas.put(row, PID_COLUMN, " " * max(0, canvas.width - PID_COLUMN - 1), style)
        canvas.put(row, PID_COLUMN, _fit(str(proc.pid), USER_COLUMN - PID_COLUMN - 1), style)
        canvas.put(row, USER_COLUMN, _fit(proc.user, CPU_COLUMN - USER_COLUMN - 1), style)
        canvas.put(row, CPU_COLUMN, f"{proc.cpu_utilization * 100:f}"[:4], style)
        canvas.put(row, RAM_COLUMN, _fit(proc.ram, TIME_COLUMN - RAM_COLUMN - 1), style)
        canvas.put(row, TIME_COLUMN, elapsed_time(proc.uptime_seconds), style)
        canvas.put(row, COMMAND_COLUMN, _fit(proc.command, command_width), style)


def draw_message(canvas: Canvas, message: str | None) -> None:
    """Draw the boxed status message, or leave the panel blank."""
    canvas.clear()
    if message is None:
        return
    canvas.box()
    canvas.put(1, 2, _fit(message, canvas.width - 3))
