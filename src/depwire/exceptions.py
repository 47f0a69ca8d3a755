from __future__ import annotations

from collections.abc import Sequence


class DepWireError(Exception):
    """Represent a base class for all depwire-specific failures.

    Catch this type when you want to handle any depwire error path without
    matching each concrete exception class individually.
    """


class DepWireDuplicateRegistrationError(DepWireError):
    """Signal a manual registration for an identifier that already has a factory.

    Raised by ``Container.set`` when the identifier was registered before,
    either manually or by an earlier autowiring pass (``get``/``has``). The
    factory registered first stays authoritative.

    Typical fix is registering factories during startup, before anything
    resolves the identifier.
    """

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"A factory is already defined for '{identifier}'.")


class DepWireAutowireError(DepWireError):
    """Represent a base class for failures raised while discovering a factory.

    These errors describe *why* autowiring failed. Public entrypoints never
    raise them directly: they are attached as ``__cause__`` of
    ``DepWireAutowireFailedError``.
    """


class DepWireCircularDependencyError(DepWireAutowireError):
    """Signal that an identifier re-entered its own resolution chain.

    ``chain`` holds the identifiers from the first occurrence of the repeated
    identifier up to and including its repeat, for example
    ``("A", "B", "C", "A")``.

    Typical fixes include breaking the cycle with a manual factory
    (``Container.set``) or giving one of the parameters a default value.
    """

    def __init__(self, chain: Sequence[str]) -> None:
        self.chain = tuple(chain)
        super().__init__(f"Circular dependency: {' -> '.join(self.chain)}")


class DepWireNotInstantiableError(DepWireAutowireError):
    """Signal that the target type cannot be constructed directly.

    Raised for abstract classes, protocols and other interface-like types.

    Typical fix is adding an override (``Container(overrides={...})``) that maps
    the identifier to a concrete implementation.
    """

    def __init__(self, target: str, reason: str = "a concrete mapping is required") -> None:
        self.target = target
        super().__init__(f"Impossible to instantiate '{target}' directly, {reason}.")


class DepWireInaccessibleConstructorError(DepWireAutowireError):
    """Signal that the target type declares a constructor the container may not call.

    Typical fix is registering a manual factory with ``Container.set``.
    """

    def __init__(self, target: str) -> None:
        self.target = target
        super().__init__(f"Constructor of '{target}' is not public.")


class DepWireUnresolvableParameterError(DepWireAutowireError):
    """Signal a constructor parameter with neither a dependency nor a default.

    ``position`` is the zero-based index of the parameter in the constructor
    signature and ``identifier`` is the identifier being autowired.

    Typical fixes include annotating the parameter with a class (or
    ``Annotated[..., DependsOn("...")]``), giving it a default value, or
    registering an explicit factory for the enclosing identifier.
    """

    def __init__(self, identifier: str, position: int, name: str | None = None) -> None:
        self.identifier = identifier
        self.position = position
        self.name = name
        parameter = f"parameter #{position}"
        if name is not None:
            parameter = f"{parameter} '{name}'"
        super().__init__(
            f"A constructor argument ({parameter}) of '{identifier}' cannot be inferred, "
            "an explicit factory is required.",
        )


class DepWireTypeNotFoundError(DepWireAutowireError):
    """Signal that the metadata provider does not know the target identifier.

    Raised by ``ReflectionTypeMetadataProvider`` when the dotted path cannot be
    imported or does not name a class, and by ``StaticTypeMetadataProvider``
    for undeclared identifiers.
    """

    def __init__(self, target: str, reason: str | None = None) -> None:
        self.target = target
        message = f"Type '{target}' could not be found"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(f"{message}.")


class DepWireNotFoundError(DepWireError):
    """Signal that an identifier could not be resolved into a factory.

    ``Container.get`` raises it, ``Container.has`` reports it as ``False``.
    When ``has(identifier)`` returns ``True``, ``get(identifier)`` will not
    raise this error (it may still raise ``DepWireInvocationFailedError``).
    """


class DepWireAutowireFailedError(DepWireNotFoundError):
    """Signal that autowiring the requested identifier failed.

    ``identifier`` is the identifier originally requested by the caller,
    ``target`` is the type it maps to (``None`` when not determined) and the
    underlying ``DepWireAutowireError`` (or provider error) is chained as
    ``__cause__``.
    """

    def __init__(self, identifier: str, target: str | None, cause: BaseException) -> None:
        self.identifier = identifier
        self.target = target
        self.cause = cause
        super().__init__(
            f"Error while autowiring '{identifier}' (target '{target}'), "
            f"see attached exception: {cause}",
        )


class DepWireInvocationFailedError(DepWireError):
    """Signal that a resolved factory raised while building the instance.

    The identifier was resolved successfully; the constructor or one of the
    nested factories failed. The original error is chained as ``__cause__``.
    """

    def __init__(self, identifier: str, cause: BaseException) -> None:
        self.identifier = identifier
        self.cause = cause
        super().__init__(f"Error while invoking the factory for '{identifier}': {cause}")
