"""Quickstart: automatic dependency wiring from type hints.

Start with plain classes, ask for the top-level service, and let depwire
build the full dependency chain from constructor annotations.
"""

from __future__ import annotations

from depwire import Container


class Database:
    def __init__(self, host: str = "localhost") -> None:
        self.host = host


class UserRepository:
    def __init__(self, database: Database) -> None:
        self.database = database


class UserService:
    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository


def main() -> None:
    container = Container()
    service = container.get(UserService)

    print(f"db_host={service.repository.database.host}")  # => db_host=localhost

    chain = (
        f"{type(service).__name__}"
        f">{type(service.repository).__name__}"
        f">{type(service.repository.database).__name__}"
    )
    print(f"chain={chain}")  # => chain=UserService>UserRepository>Database
    print(f"fresh_instance={container.get(UserService) is not service}")  # => fresh_instance=True


if __name__ == "__main__":
    main()
