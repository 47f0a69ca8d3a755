"""Errors: tell "cannot figure out how to build" from "building failed".

``has`` never raises. ``get`` raises ``DepWireNotFoundError`` when no factory
can be discovered (the reason is chained as ``__cause__``) and
``DepWireInvocationFailedError`` when the factory itself raised. ``try_get``
returns the same information as values.
"""

from __future__ import annotations

from depwire import (
    Container,
    DepWireInvocationFailedError,
    DepWireNotFoundError,
    InvocationFailed,
    NotFound,
    Resolved,
)


class Parent:
    def __init__(self, child: Child) -> None:
        self.child = child


class Child:
    def __init__(self, parent: Parent) -> None:
        self.parent = parent


class Flaky:
    def __init__(self) -> None:
        msg = "connection refused"
        raise ConnectionError(msg)


class Token:
    def __init__(self, value: str) -> None:
        self.value = value


def main() -> None:
    container = Container()

    print(f"has_parent={container.has(Parent)}")  # => has_parent=False
    try:
        container.get(Parent)
    except DepWireNotFoundError as error:
        chain = " -> ".join(name.rsplit(".", 1)[-1] for name in error.__cause__.chain)
        print(f"cycle={chain}")  # => cycle=Parent -> Child -> Parent

    try:
        container.get(Flaky)
    except DepWireInvocationFailedError as error:
        print(f"invocation_failed={error.__cause__}")  # => invocation_failed=connection refused

    for identifier in (Token, Flaky, "builtins.object"):
        match container.try_get(identifier):
            case Resolved():
                outcome = "resolved"
            case NotFound():
                outcome = "not_found"
            case InvocationFailed():
                outcome = "invocation_failed"
        print(f"outcome={outcome}")
    # => outcome=not_found
    # => outcome=invocation_failed
    # => outcome=resolved


if __name__ == "__main__":
    main()
