"""Two background workers printing alongside a main loop."""

from __future__ import annotations

import sys
import threading
import time
from typing import Optional, TextIO


def run_demo(
    main_rounds: int = 3,
    main_interval: float = 2.0,
    foo_interval: float = 1.0,
    bar_interval: float = 0.5,
    out: Optional[TextIO] = None,
) -> None:
    """Run two printing workers while the main thread prints ``main_rounds`` times.

    The workers are stopped before the final line is written.
    """
    if main_rounds < 0:
        raise ValueError("main_rounds must not be negative")
    if main_interval < 0:
        raise ValueError("main_interval must not be negative")
    if foo_interval <= 0 or bar_interval <= 0:
        raise ValueError("worker intervals must be positive")
    stream = sys.stdout if out is None else out
    lock = threading.Lock()
    stop = threading.Event()

    def emit(line: str) -> None:
        with lock:
            stream.write(line + "\n")
            stream.flush()

    def worker(message: str, interval: float) -> None:
        while True:
            emit(message)
            if stop.wait(interval):
                return

    workers = [
        threading.Thread(target=worker, args=("I'm in foo", foo_interval), daemon=True),
        threading.Thread(target=worker, args=("I'm in Bar", bar_interval), daemon=True),
    ]
    for thread in workers:
        thread.start()
    emit("main, foo and bar now executing concurrently ...")
    try:
        for _ in range(main_rounds):
            emit("main is running...")
            time.sleep(main_interval)
    finally:
        stop.set()
        for thread in workers:
            thread.join()
    emit("main is completed")