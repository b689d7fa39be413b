"""Detection of an attached tracer via the process status file."""

from pathlib import Path

DEFAULT_STATUS_PATH = "/proc/self/status"


def is_debugger_present(status_path: str | Path = DEFAULT_STATUS_PATH) -> bool:
    """Return True if the status file reports a non-zero TracerPid."""
    try:
        status = Path(status_path).read_text()
    except OSError:
        return False
    for line in status.splitlines():
        if line.startswith("TracerPid:"):
            parts = line.split(":")
            pid = parts[1].strip() if len(parts) > 1 else "0"
            return pid != "0"
    return False