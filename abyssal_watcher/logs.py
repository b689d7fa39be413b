"""Forwarding of log records to the local syslog daemon."""

import logging
import logging.handlers
import socket
import sys

logger = logging.getLogger(__name__)

PROCESS_NAME = "abyssal_watcher"
HANDLER_NAME = "abyssal_watcher.syslog"
SYSLOG_PATHS: tuple[str, ...] = ("/dev/log", "/var/run/syslog", "/var/run/log")


def _reachable(path: str) -> bool:
    for socktype in (socket.SOCK_DGRAM, socket.SOCK_STREAM):
        try:
            with socket.socket(socket.AF_UNIX, socktype) as sock:
                sock.connect(path)
        except OSError:
            continue
        return True
    return False


def init_syslog() -> logging.Handler | None:
    """Send INFO and above to syslog over its unix socket.

    Returns the installed handler, or None when no syslog socket answers,
    in which case the failure is reported on standard error.
    """
    root = logging.getLogger()
    for handler in root.handlers:
        if handler.get_name() == HANDLER_NAME:
            return handler

    address = next((path for path in SYSLOG_PATHS if _reachable(path)), None)
    if address is None:
        print(
            f"Unable to connect to syslog: no socket at {', '.join(SYSLOG_PATHS)}",
            file=sys.stderr,
        )
        return None

    handler = logging.handlers.SysLogHandler(
        address=address, facility=logging.handlers.SysLogHandler.LOG_USER
    )
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(f"{PROCESS_NAME}: %(message)s"))
    root.addHandler(handler)
    root.setLevel(logging.INFO)
    return handler


def log_threat(signature: str) -> None:
    """Record a detected threat at INFO level."""
    logger.info("Threat detected: %s", signature)


def log_warning(msg: str) -> None:
    """Record a warning message."""
    logger.warning("%s", msg)