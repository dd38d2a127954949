"""Writer configuration loader with Pydantic v2 validation.

Loads and validates a ``rotalog.yaml`` file into a typed
:class:`RotalogConfig` object.  Unknown keys are allowed to support
future schema additions without breakage.

Example
-------
>>> loader = ConfigLoader()
>>> config = loader.load_string("writer:\\n  directory: /var/log/app\\n  max_age_days: 7\\n")
>>> config.writer.max_age_days
7
"""
from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator


class WriterConfig(BaseModel):
    """Construction parameters for :class:`~rotalog.writer.RotatingWriter`."""

    model_config = {"extra": "allow"}

    directory: Path = Field(default=Path("./logs"))
    filename: str = Field(default="app.log")
    max_age_days: int = Field(default=0, ge=0)

    @field_validator("filename")
    @classmethod
    def validate_filename(cls, value: str) -> str:
        if not value or value in {".", ".."}:
            raise ValueError("filename must be a non-empty file name")
        if "/" in value or "\\" in value:
            raise ValueError(f"filename must not contain a path separator: '{value}'")
        return value


class RotalogConfig(BaseModel):
    """Top-level configuration schema.

    Loaded from ``rotalog.yaml``.  All sections are optional and fall back
    to sensible defaults.
    """

    model_config = {"extra": "allow"}

    version: str = Field(default="1")
    writer: WriterConfig = Field(default_factory=WriterConfig)


class ConfigLoader:
    """Loads and validates rotalog YAML configuration."""

    def load(self, config_path: Path) -> RotalogConfig:
        """Load and validate a configuration file.

        Raises
        ------
        FileNotFoundError:
            When the config file does not exist.
        ValueError:
            When the YAML content fails Pydantic validation.
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Rotalog config not found: {config_path}")

        with config_path.open("r", encoding="utf-8") as fh:
            raw: dict[str, object] = yaml.safe_load(fh) or {}

        return RotalogConfig.model_validate(raw)

    def load_string(self, yaml_content: str) -> RotalogConfig:
        """Load and validate a YAML string directly."""
        raw: dict[str, object] = yaml.safe_load(yaml_content) or {}
        return RotalogConfig.model_validate(raw)

    def defaults(self) -> RotalogConfig:
        """Return a default configuration with all defaults applied."""
        return RotalogConfig()
