"""Reading hexevents settings from ``pyproject.toml``.

Only the ``[tool.hexevents]`` table is consulted. The file is the one passed
to :func:`load_config`, else the one named by ``HEXEVENTS_CONFIG_PATH``, else
``pyproject.toml`` in the working directory. ``HEXEVENTS_LOG_LEVEL``,
``HEXEVENTS_LOG_FORMAT`` and ``HEXEVENTS_ATOMIC`` override the file.

Nothing in hexevents calls this on its own; hosts opt in, e.g.::

    class Client(HasEmitterMixin, EventAttacherMixin):
        attacher_config = load_config().attacher
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from hexevents.kernel.config.models import HexEventsConfig
from hexevents.kernel.exceptions import SettingsError
from hexevents.kernel.logging import configure_logging, get_logger

CONFIG_PATH_ENV = "HEXEVENTS_CONFIG_PATH"

_TRUTHY_VALUES = frozenset({"true", "1", "yes", "on"})
_FALSY_VALUES = frozenset({"false", "0", "no", "off"})

logger = get_logger(__name__)


def _parse_bool_env(value: str) -> bool:
    """Parse an on/off environment value.

    Raises
    ------
    ValueError
        If value is not one of the recognized spellings
    """
    normalized = value.lower().strip()
    if normalized in _TRUTHY_VALUES:
        return True
    if normalized in _FALSY_VALUES:
        return False
    expected = sorted(_TRUTHY_VALUES | _FALSY_VALUES)
    raise ValueError(f"Invalid boolean value: {value!r}. Expected one of: {expected}")


# env var -> (section, key, conversion of the raw string)
_ENV_OVERRIDES: dict[str, tuple[str, str, Callable[[str], Any]]] = {
    "HEXEVENTS_LOG_LEVEL": ("logging", "level", str.upper),
    "HEXEVENTS_LOG_FORMAT": ("logging", "format", str.lower),
    "HEXEVENTS_ATOMIC": ("attacher", "atomic", _parse_bool_env),
}


@lru_cache(maxsize=32)
def _read_table(path: Path) -> dict[str, Any]:
    """Return the ``[tool.hexevents]`` table of ``path`` (cached per file)."""
    try:
        with path.open("rb") as f:
            document = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsError(str(path), f"not valid TOML: {e}") from e

    table = document.get("tool", {}).get("hexevents", {})
    if not isinstance(table, dict):
        raise SettingsError(str(path), "[tool.hexevents] must be a table")
    return table


def _resolve_path(path: str | Path | None) -> Path | None:
    explicit = path if path is not None else os.environ.get(CONFIG_PATH_ENV)
    if explicit:
        resolved = Path(explicit).resolve()
        if not resolved.is_file():
            raise SettingsError(str(resolved), "file not found")
        return resolved

    default = Path("pyproject.toml").resolve()
    return default if default.is_file() else None


def _with_env_overrides(table: dict[str, Any]) -> dict[str, Any]:
    # Copy the sections so the cached table is never mutated
    settings = {
        key: dict(value) if isinstance(value, dict) else value for key, value in table.items()
    }
    for env_name, (section, key, convert) in _ENV_OVERRIDES.items():
        raw = os.environ.get(env_name)
        if raw is None:
            continue
        target = settings.setdefault(section, {})
        if not isinstance(target, dict):
            continue
        try:
            target[key] = convert(raw.strip())
        except ValueError as e:
            raise SettingsError(env_name, str(e)) from e
    return settings


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in error.errors()
    )


def load_config(path: str | Path | None = None) -> HexEventsConfig:
    """Load hexevents settings.

    Parameters
    ----------
    path : str | Path | None
        pyproject.toml to read; falls back to ``HEXEVENTS_CONFIG_PATH`` and
        then to ``./pyproject.toml``

    Returns
    -------
    HexEventsConfig
        Settings from the file and environment, defaults where neither says
        anything (including when no pyproject.toml exists)

    Raises
    ------
    SettingsError
        If an explicitly named file is missing, the file is not valid TOML, or
        a setting has the wrong type
    """
    config_path = _resolve_path(path)
    table = _read_table(config_path) if config_path is not None else {}
    source = str(config_path) if config_path is not None else "environment"

    try:
        config = HexEventsConfig.model_validate(_with_env_overrides(table))
    except ValidationError as e:
        raise SettingsError(source, _describe(e)) from e

    logger.debug("Loaded hexevents settings from {source}", source=source)
    return config


def apply_config(path: str | Path | None = None) -> HexEventsConfig:
    """Load settings and install the logging section; return the settings."""
    config = load_config(path)
    configure_logging(
        level=config.logging.level,
        format=config.logging.format,
        include_timestamp=config.logging.include_timestamp,
    )
    return config


def clear_config_cache() -> None:
    """Forget cached file contents, e.g. after editing pyproject.toml in tests."""
    _read_table.cache_clear()


__all__ = ["CONFIG_PATH_ENV", "apply_config", "clear_config_cache", "load_config"]
