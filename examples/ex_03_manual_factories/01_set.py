"""Manual factories: register a builder when autowiring is not enough.

``set`` stores a factory that receives the container, so it can pull other
dependencies. Registrations are append-only: a second ``set`` for the same
identifier is rejected and the first factory stays in place.
"""

from __future__ import annotations

from depwire import Container, DepWireDuplicateRegistrationError


class Clock:
    def __init__(self, now: str) -> None:
        self.now = now


class Report:
    def __init__(self, clock: Clock, title: str) -> None:
        self.clock = clock
        self.title = title


def main() -> None:
    container = Container()
    container.set(Clock, lambda c: Clock(now="2024-05-01T12:00:00"))
    container.set(Report, lambda c: Report(clock=c.get(Clock), title="daily"))

    report = container.get(Report)
    print(f"report={report.title}@{report.clock.now}")  # => report=daily@2024-05-01T12:00:00

    try:
        container.set(Clock, lambda c: Clock(now="never"))
    except DepWireDuplicateRegistrationError as error:
        print(f"duplicate={error.identifier.rsplit('.', 1)[-1]}")  # => duplicate=Clock

    print(f"clock={container.get(Clock).now}")  # => clock=2024-05-01T12:00:00


if __name__ == "__main__":
    main()
