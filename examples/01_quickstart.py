#!/usr/bin/env python3
"""Example: Quickstart (rotalog)

Minimal working example: write to a daily rotating log, force a rotation,
and list the resulting backups.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install rotalog
"""
from __future__ import annotations

import tempfile
from pathlib import Path

import rotalog


def main() -> None:
    print(f"rotalog version: {rotalog.__version__}")

    log_dir = Path(tempfile.mkdtemp(prefix="rotalog-quickstart-"))

    # Step 1: Write a few lines
    with rotalog.RotatingWriter(log_dir, "app.log", max_age_days=7) as sink:
        for line in (b"service started\n", b"listening on :8080\n"):
            sink.write(line)
        print(f"Active file: {sink.active_path} ({sink.active_path.stat().st_size} bytes)")

        # Step 2: Force a rotation, as an external log rotator would
        sink.rotate()
        sink.write(b"after rotation\n")

        # Step 3: Inspect backups
        print("\nBackups:")
        for entry in sink.rotated_files():
            print(f"  {entry.name}  rotated at {entry.timestamp:%Y-%m-%d %H:%M:%S}")


if __name__ == "__main__":
    main()
