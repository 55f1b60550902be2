"""Settings read from the ``[tool.hexevents]`` table of pyproject.toml."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictBool

from hexevents.kernel.logging import LogFormat, LogLevel


class LoggingConfig(BaseModel):
    """``[tool.hexevents.logging]``: how hexevents installs its Loguru sink.

    Attributes
    ----------
    level : LogLevel, default="INFO"
        Minimum level written to stderr
    format : LogFormat, default="structured"
        ``structured`` (colored single line), ``json`` or ``rich``
    include_timestamp : bool, default=True
        Prefix each line with the time
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    level: LogLevel = "INFO"
    format: LogFormat = "structured"
    include_timestamp: StrictBool = True


class AttacherConfig(BaseModel):
    """``[tool.hexevents.attacher]``: listener preparation settings.

    Attributes
    ----------
    atomic : bool, default=False
        When True, a malformed declaration discards every record prepared in
        the same call. When False, records prepared for earlier event names
        are kept and only the failing name is dropped.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    atomic: StrictBool = False


class HexEventsConfig(BaseModel):
    """Complete hexevents settings.

    Examples
    --------
    ```toml
    [tool.hexevents.logging]
    level = "DEBUG"

    [tool.hexevents.attacher]
    atomic = true
    ```
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    attacher: AttacherConfig = Field(default_factory=AttacherConfig)


__all__ = ["AttacherConfig", "HexEventsConfig", "LoggingConfig"]
