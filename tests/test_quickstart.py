"""Test that the quickstart API works for rotalog."""
from __future__ import annotations

from pathlib import Path


def test_quickstart_import() -> None:
    from rotalog import RotatingWriter

    assert RotatingWriter is not None


def test_quickstart_write(tmp_path: Path) -> None:
    from rotalog import RotatingWriter

    with RotatingWriter(tmp_path, "app.log") as sink:
        assert sink.write(b"hello\n") == 6
    assert (tmp_path / "app.log").read_text(encoding="utf-8") == "hello\n"


def test_quickstart_from_yaml(tmp_path: Path) -> None:
    from rotalog import ConfigLoader, RotatingWriter

    config = ConfigLoader().load_string(f"writer:\n  directory: {tmp_path}\n  filename: svc.log\n")
    sink = RotatingWriter.from_config(config.writer)
    sink.write(b"x")
    sink.close()
    assert (tmp_path / "svc.log").exists()


def test_quickstart_version() -> None:
    import rotalog

    assert rotalog.__version__ == "0.1.0"
