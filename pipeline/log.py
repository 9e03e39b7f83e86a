# pipeline/log.py
#
# Shared audit logger with elapsed time.
#
# Design decisions:
#   - Plain stdout with flush, prefixed with the time elapsed since the clock
#     was last reset. run_audit resets it so each run starts at 00:00.
#   - Callers log counts and masked values only. A full CPF must never reach
#     this function (LGPD).
from __future__ import annotations

import sys
import time

_start = time.monotonic()


def reset_clock() -> None:
    """Restart the elapsed-time counter shown in the prefix."""
    global _start
    _start = time.monotonic()


def log(message: str) -> None:
    """Write a timestamped log line to stdout."""
    elapsed = time.monotonic() - _start
    minutes, seconds = divmod(int(elapsed), 60)
    sys.stdout.write(f"[auditoria {minutes:02d}:{seconds:02d}] {message}\n")
    sys.stdout.flush()
