"""proctop - Textual front end for the dashboard loop."""

from collections.abc import Callable

from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Static

from proctop.canvas import Canvas
from proctop.config import Config
from proctop.dashboard import Dashboard, Provider
from proctop.logging import ensure_configured, get_logger
from proctop.models import KillResult, LoopState
from proctop.monitor import PsutilProvider
from proctop.render import process_panel_height
from proctop.terminator import terminate as terminate_process

log = get_logger(__name__)


class PanelView(Static):
    """Shows one dashboard canvas."""

    DEFAULT_CSS = """
    PanelView {
        width: 1fr;
    }
    """

    def show(self, canvas: Canvas) -> None:
        """Replace the displayed content with the canvas contents."""
        self.update(canvas.render())


class ProctopApp(App):
    """Main proctop application."""

    TITLE = "proctop"
    SUB_TITLE = "Process Monitor"

    CSS = """
    Screen {
        layout: vertical;
    }

    #system-panel {
        height: 9;
        margin-bottom: 1;
    }

    #process-panel {
        margin-bottom: 1;
    }

    #message-panel {
        height: 3;
    }
    """

    def __init__(
        self,
        config: Config | None = None,
        provider: Provider | None = None,
        terminate: Callable[[int], KillResult] = terminate_process,
    ) -> None:
        """
        Initialize the ProctopApp.

        Args:
            config: Dashboard settings; defaults to ``Config()``.
            provider: Snapshot source; defaults to the psutil provider.
            terminate: Kill protocol for the ``k`` key.
        """
        super().__init__()
        self.config = config or Config()
        ensure_configured(self.config)
        self._mounted = False
        self._dashboard = Dashboard(
            provider or PsutilProvider(),
            self.config,
            terminate=terminate,
        )

    @property
    def dashboard(self) -> Dashboard:
        """Get the loop driver."""
        return self._dashboard

    def compose(self) -> ComposeResult:
        """Compose the three stacked panels."""
        yield PanelView(id="system-panel")
        yield PanelView(id="process-panel")
        yield PanelView(id="message-panel")

    def on_mount(self) -> None:
        """Size the panels, draw the first frame and start ticking."""
        self.query_one("#process-panel", PanelView).styles.height = process_panel_height(
            self.config.rows
        )
        self._dashboard.resize(self.size.width - 1)
        self._mounted = True
        log.info("dashboard_started", rows=self.config.rows, width=self.size.width)
        self._tick()
        self.set_interval(self.config.tick_interval, self._tick)

    def on_resize(self, event: events.Resize) -> None:
        """Follow the terminal width and show the redrawn frame."""
        self._dashboard.resize(event.size.width - 1)
        if self._mounted:
            self._show()

    def on_key(self, event: events.Key) -> None:
        """Hand key presses to the dashboard's mailbox."""
        key = event.character if event.is_printable and event.character else event.key
        self._dashboard.post_key(key)

    def _tick(self) -> None:
        """Advance the dashboard one tick and show the result."""
        if self._dashboard.tick() is LoopState.TERMINATED:
            log.info("dashboard_stopped")
            self.exit()
            return
        self._show()

    def _show(self) -> None:
        """Push every canvas to its panel."""
        self.query_one("#system-panel", PanelView).show(self._dashboard.system_canvas)
        self.query_one("#process-panel", PanelView).show(self._dashboard.process_canvas)
        self.query_one("#message-panel", PanelView).show(self._dashboard.message_canvas)
