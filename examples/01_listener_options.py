"""Example: configuring listeners through constructor options."""

from typing import Any

from hexevents import ConfigError, EventAttacherMixin, HasEmitterMixin


class Transfer(HasEmitterMixin, EventAttacherMixin):
    """Host that accepts listener options next to ordinary settings."""

    EVENTS = ("before", "progress", "complete")

    def __init__(self, url: str, **options: Any) -> None:
        self.url = url
        self.timeout = options.get("timeout", 30)
        self._prepare_events(options, self.EVENTS)
        self._attach_listeners()

    def run(self) -> None:
        emitter = self.get_emitter()
        emitter.emit("before", self)
        for percent in (50, 100):
            emitter.emit("progress", percent)
        emitter.emit("complete", self)


def announce(transfer: Transfer) -> None:
    print(f"  starting {transfer.url}")


def main() -> None:
    print("1. Mixed shorthand forms")
    transfer = Transfer(
        "https://example.com/file",
        timeout=10,
        before=[
            {"fn": lambda t: print("  runs second (priority 0)")},
            {"fn": announce, "priority": 10},
        ],
        progress={"fn": lambda p: print(f"  first progress only: {p}%"), "once": True},
        complete=lambda t: print("  done"),
    )
    for record in transfer.event_listeners:
        print(f"  {record.name}: priority={record.priority} once={record.once}")
    transfer.run()

    print("\n2. Malformed declaration")
    try:
        Transfer("https://example.com/other", complete="not-callable")
    except ConfigError as e:
        print(f"  {e}")


if __name__ == "__main__":
    main()
