"""Listener records and the shapes a listener declaration can take.

A declaration under an event name is one of three closed shapes:

- ``CALLABLE``: the value is the listener itself
- ``DESCRIPTOR``: a mapping with an ``"fn"`` key plus optional
  ``"priority"`` and ``"once"``
- ``COLLECTION``: a sequence, or a mapping without ``"fn"``, whose elements
  are descriptors or further collections

Every shape normalizes to one or more :class:`ListenerRecord` values.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from hexevents.kernel.exceptions import ConfigError, RecordFieldError

DEFAULT_PRIORITY = 0
DEFAULT_ONCE = False


class ListenerShape(StrEnum):
    """Closed set of declaration shapes."""

    CALLABLE = "callable"
    DESCRIPTOR = "descriptor"
    COLLECTION = "collection"


@dataclass(frozen=True, slots=True)
class ListenerRecord:
    """Canonical, fully-defaulted listener declaration.

    Attributes
    ----------
    name : str
        Event the listener is registered for
    fn : Callable
        Listener body, forwarded to the emitter untouched
    priority : int, default=0
        Ordering hint owned by the emitter
    once : bool, default=False
        Remove the listener after its first invocation

    Raises
    ------
    RecordFieldError
        If ``name`` is empty, ``fn`` is not callable, or ``priority``/``once``
        have the wrong type
    """

    name: str
    fn: Callable[..., Any]
    priority: int = DEFAULT_PRIORITY
    once: bool = DEFAULT_ONCE

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise RecordFieldError("name", "must be a non-empty string", self.name)
        if not callable(self.fn):
            raise RecordFieldError("fn", "must be callable", self.fn)
        if isinstance(self.priority, bool) or not isinstance(self.priority, int):
            raise RecordFieldError("priority", "must be an integer", self.priority)
        if not isinstance(self.once, bool):
            raise RecordFieldError("once", "must be a boolean", self.once)

    @classmethod
    def from_descriptor(cls, name: str, descriptor: ListenerDescriptor) -> ListenerRecord:
        return cls(
            name=name,
            fn=descriptor.fn,
            priority=descriptor.priority,
            once=descriptor.once,
        )

    def as_dict(self) -> dict[str, Any]:
        """Return the ``{"name", "fn", "priority", "once"}`` mapping form."""
        return {"name": self.name, "fn": self.fn, "priority": self.priority, "once": self.once}


class ListenerDescriptor(BaseModel):
    """Validated single-listener descriptor; unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore", frozen=True, strict=True)

    fn: Callable[..., Any]
    priority: int = DEFAULT_PRIORITY
    once: bool = DEFAULT_ONCE

    @classmethod
    def parse(cls, event_name: str, data: Mapping[str, Any]) -> ListenerDescriptor:
        """Validate a descriptor mapping.

        Raises
        ------
        ConfigError
            If ``fn`` is not callable or ``priority``/``once`` have the wrong type
        """
        try:
            return cls.model_validate(dict(data))
        except PydanticValidationError as e:
            fields = ", ".join(".".join(str(loc) for loc in err["loc"]) for err in e.errors())
            raise ConfigError(
                event_name, data, reason=f"Invalid descriptor field(s): {fields}."
            ) from e


def classify_listener(event_name: str, value: Any) -> ListenerShape:
    """Classify a declaration into its :class:`ListenerShape`.

    Raises
    ------
    ConfigError
        If the value is none of the three shapes (e.g. a string or number)
    """
    if callable(value):
        return ListenerShape.CALLABLE
    if isinstance(value, Mapping):
        return ListenerShape.DESCRIPTOR if "fn" in value else ListenerShape.COLLECTION
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return ListenerShape.COLLECTION
    raise ConfigError(event_name, value)


__all__ = [
    "DEFAULT_ONCE",
    "DEFAULT_PRIORITY",
    "ListenerDescriptor",
    "ListenerRecord",
    "ListenerShape",
    "classify_listener",
]
