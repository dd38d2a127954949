"""Tests for ConfigLoader and the writer configuration schema."""
from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from rotalog.config_loader import ConfigLoader, RotalogConfig, WriterConfig


# ---------------------------------------------------------------------------
# ConfigLoader: defaults
# ---------------------------------------------------------------------------


class TestConfigLoaderDefaults:
    def test_defaults_returns_rotalog_config(self) -> None:
        assert isinstance(ConfigLoader().defaults(), RotalogConfig)

    def test_defaults_directory(self) -> None:
        assert ConfigLoader().defaults().writer.directory == Path("./logs")

    def test_defaults_filename(self) -> None:
        assert ConfigLoader().defaults().writer.filename == "app.log"

    def test_defaults_retention_disabled(self) -> None:
        assert ConfigLoader().defaults().writer.max_age_days == 0


# ---------------------------------------------------------------------------
# ConfigLoader: load
# ---------------------------------------------------------------------------


class TestConfigLoaderLoad:
    def test_load_string(self) -> None:
        config = ConfigLoader().load_string(
            textwrap.dedent(
                """\
                version: "1"
                writer:
                  directory: /var/log/svc
                  filename: svc.log
                  max_age_days: 14
                """
            )
        )
        assert config.writer.directory == Path("/var/log/svc")
        assert config.writer.filename == "svc.log"
        assert config.writer.max_age_days == 14

    def test_load_empty_string_gives_defaults(self) -> None:
        assert ConfigLoader().load_string("") == RotalogConfig()

    def test_load_file(self, tmp_path: Path) -> None:
        path = tmp_path / "rotalog.yaml"
        path.write_text("writer:\n  max_age_days: 3\n", encoding="utf-8")
        config = ConfigLoader().load(path)
        assert config.writer.max_age_days == 3
        assert config.writer.filename == "app.log"

    def test_load_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            ConfigLoader().load(tmp_path / "absent.yaml")

    def test_unknown_keys_allowed(self) -> None:
        config = ConfigLoader().load_string("future_section: {a: 1}\nwriter:\n  colour: blue\n")
        assert config.writer.filename == "app.log"


# ---------------------------------------------------------------------------
# WriterConfig: validation
# ---------------------------------------------------------------------------


class TestWriterConfigValidation:
    def test_negative_max_age_rejected(self) -> None:
        with pytest.raises(ValueError):
            WriterConfig(max_age_days=-1)

    @pytest.mark.parametrize("name", ["", ".", "..", "sub/app.log", "sub\\app.log"])
    def test_bad_filename_rejected(self, name: str) -> None:
        with pytest.raises(ValueError):
            WriterConfig(filename=name)

    def test_filename_without_extension_allowed(self) -> None:
        assert WriterConfig(filename="journal").filename == "journal"

    def test_invalid_yaml_values_raise(self) -> None:
        with pytest.raises(ValueError):
            ConfigLoader().load_string("writer:\n  max_age_days: many\n")
