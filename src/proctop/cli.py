"""Command-line entry point for proctop."""

import click

from proctop.config import DEFAULT_ROWS, Config
from proctop.logging import configure, get_logger


@click.command()
@click.argument("rows", type=click.IntRange(min=1), default=DEFAULT_ROWS, required=False)
def main(rows: int) -> None:
    """Interactive process monitor showing ROWS processes (default 10)."""
    config = Config.from_env(rows=rows)
    configure(config)
    log = get_logger(__name__)

    from proctop.app import ProctopApp

    app = ProctopApp(config)
    try:
        app.run()
    except Exception as exc:
        log.error("terminal_unavailable", error=str(exc))
        raise click.ClickException(f"cannot start the dashboard: {exc}") from exc
    if app.return_code:
        raise SystemExit(app.return_code)


if __name__ == "__main__":
    main()
