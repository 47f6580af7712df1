"""Formatting helpers for fixed-width dashboard columns."""

BAR_CELLS = 50


def progress_bar(fraction: float) -> str:
    """Render a utilization fraction as a 50-cell bar with a percentage.

    Cell ``i`` is filled when ``i <= fraction * 50``. The value is not
    clamped, so a fraction above 1.0 simply fills every cell.

    Args:
        fraction: Utilization, nominally 0.0 - 1.0.

    Returns:
        String like ``"0%|||||    ...  45.6/100%"``; 62 characters for any
        fraction in [0, 1].
    """
    filled = fraction * BAR_CELLS
    cells = "".join("|" if i <= filled else " " for i in range(BAR_CELLS))

    percent = f"{fraction * 100:f}"
    if fraction < 0.1 or fraction == 1.0:
        # Keep the decimal point in the same column as "45.6"
        display = " " + percent[:3]
    else:
        display = percent[:4]
    return f"0%{cells} {display}/100%"


def elapsed_time(seconds: float) -> str:
    """Format a duration as an 8-character string.

    Args:
        seconds: Duration in seconds. Negative values count as zero.

    Returns:
        ``"HH:MM:SS"`` under one day, ``" DDd HHh"`` under 100 days,
        otherwise the right-aligned day count ``"    123d"``.
    """
    total = max(0, int(seconds))
    days, remainder = divmod(total, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, secs = divmod(remainder, 60)

    if days == 0:
        return f"{hours:02d}:{minutes:02d}:{secs:02d}"
    if days < 100:
        return f"{days:>3d}d {hours:02d}h"
    return f"{days:>7d}d"
