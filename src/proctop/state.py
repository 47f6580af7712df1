"""Selection, sort and transient-message state for the dashboard."""

import time
from collections.abc import Callable

from proctop.logging import get_logger
from proctop.models import SortKey

MESSAGE_TTL = 3.0

log = get_logger(__name__)


class UiState:
    """
    Mutable view state owned by the loop driver.

    Holds the active sort key, the highlighted row and the current
    transient message. Only the input controller mutates it; the renderer
    reads it back on the next tick.
    """

    def __init__(
        self,
        visible_rows: int,
        clock: Callable[[], float] = time.monotonic,
        message_ttl: float = MESSAGE_TTL,
    ) -> None:
        """
        Initialize the UiState.

        Args:
            visible_rows: Number of process rows the table shows.
            clock: Monotonic time source, injectable for tests.
            message_ttl: Seconds a message stays visible.
        """
        self._visible_rows = visible_rows
        self._clock = clock
        self._message_ttl = message_ttl
        self._sort_key = SortKey.CPU
        self._selected_index = 0
        self._message: str | None = None
        self._message_time = 0.0

    @property
    def visible_rows(self) -> int:
        """Get the number of visible process rows."""
        return self._visible_rows

    @property
    def sort_key(self) -> SortKey:
        """Get the current sort key."""
        return self._sort_key

    def set_sort_key(self, key: SortKey) -> None:
        """Change the sort key and move the selection back to the top row."""
        self._sort_key = key
        self._selected_index = 0

    @property
    def selected_index(self) -> int:
        """Get the highlighted row index."""
        return self._selected_index

    def move_selection(self, delta: int, process_count: int) -> None:
        """Move the highlighted row by ``delta``, staying within the visible rows."""
        self._selected_index = self._bounded(self._selected_index + delta, process_count)

    def clamp(self, process_count: int) -> None:
        """Pull the selection back inside a list that may have shrunk."""
        self._selected_index = self._bounded(self._selected_index, process_count)

    def _bounded(self, index: int, process_count: int) -> int:
        last = min(self._visible_rows, process_count) - 1
        return max(0, min(index, last))

    def set_message(self, text: str) -> None:
        """Show ``text`` for the next ``message_ttl`` seconds."""
        self._message = text
        self._message_time = self._clock()

    def current_message(self) -> str | None:
        """
        Get the active message, or None once it has expired.

        The first call after the window closes drops the stored message.
        """
        if self._message is None:
            return None
        if self._clock() - self._message_time >= self._message_ttl:
            log.debug("message_expired", message=self._message)
            self._message = None
            return None
        return self._message
