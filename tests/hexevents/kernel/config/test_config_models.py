"""Tests for the settings models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from hexevents.kernel.config.models import AttacherConfig, HexEventsConfig, LoggingConfig


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_default_values(self) -> None:
        """Test default values for LoggingConfig."""
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.format == "structured"
        assert config.include_timestamp is True

    def test_frozen_immutability(self) -> None:
        """Test that LoggingConfig cannot be modified."""
        config = LoggingConfig()
        with pytest.raises(ValidationError):
            config.level = "DEBUG"  # type: ignore[misc]

    def test_rejects_unknown_level(self) -> None:
        """Test that levels are limited to Loguru's names."""
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")  # type: ignore[arg-type]


class TestAttacherConfig:
    """Tests for AttacherConfig."""

    def test_partial_commit_by_default(self) -> None:
        """Test that atomic preparation is opt-in."""
        assert AttacherConfig().atomic is False

    def test_atomic_must_be_bool(self) -> None:
        """Test that strings are not coerced to booleans."""
        with pytest.raises(ValidationError):
            AttacherConfig(atomic="yes")  # type: ignore[arg-type]

    def test_frozen_immutability(self) -> None:
        """Test that AttacherConfig cannot be modified."""
        with pytest.raises(ValidationError):
            AttacherConfig().atomic = True  # type: ignore[misc]


class TestHexEventsConfig:
    """Tests for HexEventsConfig."""

    def test_defaults(self) -> None:
        """Test nested defaults."""
        config = HexEventsConfig()
        assert config.logging == LoggingConfig()
        assert config.attacher == AttacherConfig()

    def test_from_table(self) -> None:
        """Test validating a parsed [tool.hexevents] table."""
        config = HexEventsConfig.model_validate({"attacher": {"atomic": True}})
        assert config.attacher.atomic is True
        assert config.logging == LoggingConfig()

    def test_rejects_unknown_section(self) -> None:
        """Test that unknown sections are reported."""
        with pytest.raises(ValidationError):
            HexEventsConfig.model_validate({"attach": {"atomic": True}})
