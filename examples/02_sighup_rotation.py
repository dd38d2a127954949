#!/usr/bin/env python3
"""Example: Rotate on SIGHUP (rotalog)

Loads writer settings from a YAML document and rotates the active file
whenever the process receives SIGHUP (POSIX only).

Usage:
    python examples/02_sighup_rotation.py
    kill -HUP <pid>

Requirements:
    pip install rotalog
"""
from __future__ import annotations

import os
import signal
import threading

from rotalog import ConfigLoader, RotatingWriter

_CONFIG = """\
version: "1"
writer:
  directory: ./example-logs
  filename: worker.log
  max_age_days: 14
"""


def main() -> None:
    config = ConfigLoader().load_string(_CONFIG)
    sink = RotatingWriter.from_config(config.writer)

    # The handler runs on the main thread, possibly while it holds the
    # writer lock, so it only raises a flag.
    hangup = threading.Event()

    def on_hangup(signum: int, frame: object) -> None:
        hangup.set()

    signal.signal(signal.SIGHUP, on_hangup)
    print(f"pid {os.getpid()} writing to {sink.active_path}; send SIGHUP to rotate, Ctrl-C to stop")

    try:
        tick = 0
        while True:
            if hangup.is_set():
                hangup.clear()
                sink.rotate()
            sink.write(f"tick {tick}\n".encode())
            tick += 1
            hangup.wait(1)
    except KeyboardInterrupt:
        pass
    finally:
        sink.close()


if __name__ == "__main__":
    main()
