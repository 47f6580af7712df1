"""Process ordering for the process table."""

import re

from proctop.models import ProcessRecord, ProcessSnapshot, SortKey

_MEMORY_RE = re.compile(r"^([0-9]+(?:\.[0-9]*)?|\.[0-9]+)\s*(?:([kmgt])(?:i?b)?)?$", re.IGNORECASE)

# Scale factors to megabytes
_UNIT_SCALE = {
    None: 1.0,
    "k": 1 / 1024,
    "m": 1.0,
    "g": 1024.0,
    "t": 1024.0**2,
}


def parse_memory(text: str) -> float:
    """Parse a provider memory string into megabytes.

    A bare number is already megabytes. A ``K``/``M``/``G``/``T`` suffix,
    optionally followed by ``B`` or ``iB``, is scaled accordingly. Commas and
    underscores are read as thousands separators.

    Returns:
        The value in megabytes, or ``-inf`` when the text is not a number so
        malformed entries sort below every real one.
    """
    cleaned = text.strip().replace(",", "").replace("_", "")
    match = _MEMORY_RE.match(cleaned)
    if match is None:
        return float("-inf")
    number, unit = match.groups()
    return float(number) * _UNIT_SCALE[unit.lower() if unit else None]


def sort_processes(processes: ProcessSnapshot, key: SortKey) -> list[ProcessRecord]:
    """Return a new list of processes ordered by ``key``.

    CPU and RAM sort descending, PID ascending. Records with equal keys keep
    their provider order.
    """
    if key is SortKey.CPU:
        return sorted(processes, key=lambda p: p.cpu_utilization, reverse=True)
    if key is SortKey.RAM:
        return sorted(processes, key=lambda p: parse_memory(p.ram), reverse=True)
    return sorted(processes, key=lambda p: p.pid)
