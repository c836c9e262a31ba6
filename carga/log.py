# carga/log.py
#
# Logger compartilhado das cargas: uma linha por fase, com tempo decorrido.
from __future__ import annotations

import sys
import time

_start = time.monotonic()


def log(message: str) -> None:
    """Escreve uma linha com tempo decorrido no stdout."""
    elapsed = time.monotonic() - _start
    minutes, seconds = divmod(int(elapsed), 60)
    sys.stdout.write(f"[carga {minutes:02d}:{seconds:02d}] {message}\n")
    sys.stdout.flush()
