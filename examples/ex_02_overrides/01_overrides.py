"""Overrides: map an abstract identifier to a concrete implementation.

The override table is fixed when the container is created. Requests for
``Logger`` build a ``FileLogger``, including when ``Logger`` is a
constructor dependency of another class.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from depwire import Container


class Logger(ABC):
    @abstractmethod
    def write(self, message: str) -> str: ...


class FileLogger(Logger):
    def __init__(self, path: str = "app.log") -> None:
        self.path = path

    def write(self, message: str) -> str:
        return f"{self.path} <- {message}"


class Mailer:
    def __init__(self, logger: Logger) -> None:
        self.logger = logger

    def send(self, to: str) -> str:
        return self.logger.write(f"mail to {to}")


def main() -> None:
    container = Container({Logger: FileLogger})

    print(f"logger={type(container.get(Logger)).__name__}")  # => logger=FileLogger
    print(container.get(Mailer).send("ops@example.com"))  # => app.log <- mail to ops@example.com


if __name__ == "__main__":
    main()
