"""Runtime configuration for proctop."""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_ROWS = 10
LOG_FILE_ENV = "PROCTOP_LOG_FILE"
DEBUG_ENV = "PROCTOP_DEBUG"


@dataclass(frozen=True)
class Config:
    """Dashboard settings. Nothing here is persisted."""

    rows: int = DEFAULT_ROWS  # Process rows shown in the table
    tick_interval: float = 0.5  # Seconds between redraws
    message_ttl: float = 3.0  # Seconds a status message stays visible
    log_path: Path | None = None  # JSON Lines log file; None disables logging
    debug: bool = False

    def __post_init__(self) -> None:
        if self.rows < 1:
            raise ValueError(f"rows must be at least 1, got {self.rows}")

    @classmethod
    def from_env(cls, rows: int | None = None) -> "Config":
        """Build a config from the environment and an optional row count."""
        log_file = os.environ.get(LOG_FILE_ENV)
        return cls(
            rows=DEFAULT_ROWS if rows is None else rows,
            log_path=Path(log_file).expanduser() if log_file else None,
            debug=os.environ.get(DEBUG_ENV, "").lower() in ("1", "true", "yes"),
        )
