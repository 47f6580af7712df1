"""Render-and-control loop driver for proctop."""

import time
from collections.abc import Callable
from queue import Empty, Queue
from typing import Protocol

from proctop import render
from proctop.canvas import Canvas
from proctop.config import Config
from proctop.controller import handle_key
from proctop.logging import get_logger
from proctop.models import KillResult, LoopState, ProcessRecord, ProcessSnapshot, SystemSnapshot
from proctop.monitor import ProviderUnavailable
from proctop.sorting import sort_processes
from proctop.state import UiState
from proctop.terminator import terminate as terminate_process

log = get_logger(__name__)

DEFAULT_WIDTH = 80


class Provider(Protocol):
    """Source of fresh system and process snapshots."""

    def get_system_snapshot(self) -> SystemSnapshot: ...

    def get_process_snapshot(self) -> ProcessSnapshot: ...


class Dashboard:
    """
    Drives one tick at a time: sample, sort, draw, then consume one key.

    Keys are posted into a mailbox by the terminal front end and read back
    without blocking, so an idle keyboard never stalls the redraw cadence.
    Provider failures skip the redraw for that tick; the next tick retries.
    """

    def __init__(
        self,
        provider: Provider,
        config: Config,
        terminate: Callable[[int], KillResult] = terminate_process,
        clock: Callable[[], float] = time.monotonic,
        width: int = DEFAULT_WIDTH,
    ) -> None:
        """
        Initialize the Dashboard.

        Args:
            provider: Data source queried every tick.
            config: Row count and message lifetime.
            terminate: Kill protocol used by the ``k`` key.
            clock: Time source for message expiry.
            width: Initial panel width in cells.
        """
        self._provider = provider
        self._rows = config.rows
        self._terminate = terminate
        self._keys: Queue[str] = Queue()
        self._state = LoopState.RUNNING
        self._processes: list[ProcessRecord] = []
        self._system: SystemSnapshot | None = None
        self.ui = UiState(config.rows, clock=clock, message_ttl=config.message_ttl)

        self.system_canvas = Canvas(render.SYSTEM_PANEL_HEIGHT, width)
        self.process_canvas = Canvas(render.process_panel_height(config.rows), width)
        self.message_canvas = Canvas(render.MESSAGE_PANEL_HEIGHT, width)

    @property
    def state(self) -> LoopState:
        """Get the loop state."""
        return self._state

    @property
    def processes(self) -> list[ProcessRecord]:
        """Get the sorted process list drawn on the last successful tick."""
        return self._processes

    def resize(self, width: int) -> None:
        """Resize every panel to ``width`` cells and redraw the last frame."""
        width = max(0, width)
        for canvas in (self.system_canvas, self.process_canvas, self.message_canvas):
            canvas.resize(canvas.height, width)
        if self._system is not None:
            self._draw(self._system)

    def post_key(self, key: str) -> None:
        """Queue a key press for a later tick."""
        self._keys.put(key)

    def poll_key(self) -> str | None:
        """Take the next queued key without waiting."""
        try:
            return self._keys.get_nowait()
        except Empty:
            return None

    def tick(self) -> LoopState:
        """Run one iteration of the loop and return the resulting state."""
        if self._state is LoopState.TERMINATED:
            return self._state

        try:
            system = self._provider.get_system_snapshot()
            processes = self._provider.get_process_snapshot()
        except ProviderUnavailable as exc:
            log.warning("tick_skipped", error=str(exc))
        else:
            self._processes = sort_processes(processes, self.ui.sort_key)
            self.ui.clamp(len(self._processes))
            self._system = system
            self._draw(system)

        if handle_key(self.poll_key(), self.ui, self._processes, self._terminate):
            log.info("quit_requested")
            self._state = LoopState.TERMINATED
        return self._state

    def _draw(self, system: SystemSnapshot) -> None:
        render.draw_system(self.system_canvas, system)
        render.draw_processes(self.process_canvas, self._processes, self.ui, self._rows)
        render.draw_message(self.message_canvas, self.ui.current_message())
