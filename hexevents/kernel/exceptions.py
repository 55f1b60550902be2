"""Exceptions raised by hexevents.

``HexEventsError`` is the common base. Normalization reports malformed
listener options as ``ConfigError``; the other two classes cover project
settings and direct ``ListenerRecord`` construction.
"""

from __future__ import annotations

LISTENER_SHAPE_MESSAGE = (
    'Each event listener must be a callable, or a collection of descriptors each '
    'containing a "fn" field.'
)


class HexEventsError(Exception):
    """Base exception for all hexevents errors."""


class SettingsError(HexEventsError):
    """Raised when ``[tool.hexevents]`` settings cannot be read or are invalid.

    Examples
    --------
    Example usage::

        raise SettingsError("pyproject.toml", "attacher.atomic: expected a boolean")
    """

    def __init__(self, source: str, reason: str) -> None:
        """Initialize a settings error.

        Args
        ----
            source: File (or environment variable) the bad setting came from
            reason: What is wrong with it
        """
        super().__init__(f"Invalid hexevents settings in {source}: {reason}")
        self.source = source
        self.reason = reason


class RecordFieldError(HexEventsError):
    """Raised when a ``ListenerRecord`` is built with a bad field value."""

    def __init__(self, field: str, constraint: str, value: object = None) -> None:
        """Initialize a record field error.

        Args
        ----
            field: Record field that was rejected
            constraint: Requirement the value broke, e.g. ``"must be callable"``
            value: The rejected value (optional)
        """
        detail = f" (got {value!r})" if value is not None else ""
        super().__init__(f"ListenerRecord.{field} {constraint}{detail}")
        self.field = field
        self.constraint = constraint
        self.value = value


class ConfigError(HexEventsError):
    """Raised when a listener declaration in an options mapping is malformed.

    The error surfaces from the host object's construction path; it is a
    programming error and is never retried.

    Examples
    --------
    Example usage::

        raise ConfigError("before", "not-callable")
    """

    def __init__(self, event_name: str, value: object, reason: str | None = None) -> None:
        """Initialize listener configuration error.

        Args
        ----
            event_name: Event whose declaration was rejected
            value: The offending declaration (or nested element)
            reason: Extra detail appended to the standard message (optional)
        """
        msg = f"Invalid listener declaration for event '{event_name}': {LISTENER_SHAPE_MESSAGE}"
        if reason:
            msg += f" {reason}"
        super().__init__(msg)
        self.event_name = event_name
        self.value = value
        self.reason = reason


__all__ = [
    "LISTENER_SHAPE_MESSAGE",
    "ConfigError",
    "HexEventsError",
    "RecordFieldError",
    "SettingsError",
]
