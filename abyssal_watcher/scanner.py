"""Command-line scan of a payload through every detection layer."""

import argparse
from collections.abc import Sequence
from pathlib import Path

from abyssal_watcher.anti_debug import DEFAULT_STATUS_PATH, is_debugger_present
from abyssal_watcher.ml_analyzer import analyze_behavior
from abyssal_watcher.secure_logger import DEFAULT_LOG_PATH, log_secure
from abyssal_watcher.threat_detector import detect_anomaly
from abyssal_watcher.ze_mode import ZEProtector

DEFAULT_PAYLOAD = "memory_injection polymorphic xor_loop shellcode"

BOOT_MESSAGE = "[BOOT] ZE_MODE initialized"
ALERT_MESSAGE = "[ALERT] Threat blocked and logged."
OK_MESSAGE = "[OK] Scan completed successfully."


def scan(data: str) -> bool:
    """Return True if any detection layer flags the data."""
    return (
        ZEProtector.inspect(data)
        or detect_anomaly(data)
        or analyze_behavior(data)
    )


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="abyssal-scan",
        description="Scan a payload with every detection layer.",
    )
    parser.add_argument(
        "data",
        nargs="?",
        default=DEFAULT_PAYLOAD,
        help="payload to scan",
    )
    parser.add_argument(
        "--log",
        type=Path,
        default=Path(DEFAULT_LOG_PATH),
        help="encrypted log file to append to",
    )
    parser.add_argument(
        "--status-path",
        type=Path,
        default=Path(DEFAULT_STATUS_PATH),
        help="process status file used to detect a tracer",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the scan and record the outcome in the encrypted log."""
    args = _parse_args(argv)
    if is_debugger_present(args.status_path):
        print("[ALERT] Debugger detected. Exiting.")
        return 0

    ZEProtector.activate()
    log_secure(BOOT_MESSAGE, args.log)

    if scan(args.data):
        print("[ALERT] Multi-layer threat detected.")
        log_secure(ALERT_MESSAGE, args.log)
    else:
        print("[OK] System is clean.")
        log_secure(OK_MESSAGE, args.log)
    return 0