"""Configuration file for pytest containing shared fixtures.

This module provides fixtures that can be used across multiple test files:
- isolated_config: Runs a test in an empty directory with no hexevents env vars
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from hexevents.kernel.config.loader import clear_config_cache

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

_ENV_VARS = (
    "HEXEVENTS_CONFIG_PATH",
    "HEXEVENTS_LOG_LEVEL",
    "HEXEVENTS_LOG_FORMAT",
    "HEXEVENTS_ATOMIC",
)


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Fixture that isolates settings lookup from the repository and environment."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    clear_config_cache()
    yield tmp_path
    clear_config_cache()
