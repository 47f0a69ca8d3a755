from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, TypeVar, overload, runtime_checkable

from depwire._internal.identifiers import normalize_identifier
from depwire._internal.reflection import ReflectionTypeMetadataProvider
from depwire._internal.registry import Factory, FactoryRegistry
from depwire._internal.resolver import Autowirer
from depwire._internal.type_checks import is_runtime_class
from depwire.exceptions import (
    DepWireInvocationFailedError,
    DepWireNotFoundError,
)
from depwire.lock_mode import LockMode
from depwire.metadata import InstanceBuilder, TypeMetadataProvider, TypeRecorder
from depwire.results import InvocationFailed, NotFound, Resolved, ResolutionOutcome

T = TypeVar("T")


@runtime_checkable
class ContainerProtocol(Protocol):
    """Read side of a container: look entries up by identifier."""

    def get(self, identifier: Any) -> Any: ...

    def has(self, identifier: Any) -> bool: ...


class Container:
    """Build instances by autowiring constructor dependencies.

    Identifiers are strings, usually dotted class paths such as
    ``"app.services.UserService"``. Classes are accepted wherever an
    identifier is and are converted with ``identifier_for``. The class object
    itself is handed to the metadata provider when it implements
    ``TypeRecorder``, so classes defined inside functions resolve too.

    Every identifier is resolved once into a factory that is cached for the
    container's lifetime; each ``get`` invokes the cached factory, so every
    call builds a fresh instance. Manual factories registered with ``set``
    take precedence over autowiring for the identifier they are registered
    under.
    """

    def __init__(
        self,
        overrides: Mapping[str | type[Any], str | type[Any]] | None = None,
        *,
        metadata_provider: TypeMetadataProvider | None = None,
        instance_builder: InstanceBuilder | None = None,
        lock_mode: LockMode = LockMode.THREAD,
    ) -> None:
        """Initialize a container.

        Args:
            overrides: Mapping from a requested identifier to the identifier
                that should be built instead, for example an interface mapped
                to its implementation. Copied and immutable afterwards.
            metadata_provider: Source of type metadata. Defaults to
                ``ReflectionTypeMetadataProvider``.
            instance_builder: Construction primitive. Defaults to the metadata
                provider when it can also build instances.
            lock_mode: Locking strategy for the factory cache.

        Raises:
            TypeError: If no instance builder is given and the metadata
                provider cannot build instances.

        Examples:
            .. code-block:: python

                container = Container({Logger: FileLogger})
                service = container.get(UserService)

        """
        if metadata_provider is None:
            metadata_provider = ReflectionTypeMetadataProvider()
        if instance_builder is None:
            if not isinstance(metadata_provider, InstanceBuilder):
                msg = (
                    f"{type(metadata_provider).__name__} cannot build instances, "
                    "pass instance_builder explicitly."
                )
                raise TypeError(msg)
            instance_builder = metadata_provider

        self._metadata = metadata_provider
        normalized_overrides = {
            self._identifier(identifier): self._identifier(target)
            for identifier, target in (overrides or {}).items()
        }
        self._registry = FactoryRegistry(normalized_overrides, lock_mode=lock_mode)
        self._autowirer = Autowirer(self._registry, metadata_provider, instance_builder)

    @property
    def overrides(self) -> Mapping[str, str]:
        return self._registry.overrides

    @overload
    def get(self, identifier: type[T]) -> T: ...

    @overload
    def get(self, identifier: str) -> Any: ...

    def get(self, identifier: Any) -> Any:
        """Resolve an identifier and build an instance now.

        Args:
            identifier: Identifier or class to build.

        Returns:
            A new instance produced by the identifier's factory.

        Raises:
            DepWireNotFoundError: If no factory can be found or autowired.
            DepWireInvocationFailedError: If the factory, or any factory it
                calls, raised while building.

        """
        key = self._identifier(identifier)
        factory = self._autowirer.resolve(key)
        try:
            return factory(self)
        except Exception as error:
            raise DepWireInvocationFailedError(key, error) from error

    def has(self, identifier: Any) -> bool:
        """Report whether ``get`` can find a factory for an identifier.

        ``True`` does not mean ``get`` cannot fail: the factory may still raise
        ``DepWireInvocationFailedError``. It does mean ``get`` will not raise
        ``DepWireNotFoundError``.

        Note:
            This is not a pure predicate. A successful check autowires the
            identifier and caches its factory exactly like ``get`` does (no
            instance is built), so a later ``set`` for the same identifier
            fails as a duplicate.

        Args:
            identifier: Identifier or class to look up.

        """
        try:
            self._autowirer.resolve(self._identifier(identifier))
        except (DepWireNotFoundError, TypeError):
            return False
        return True

    def set(self, identifier: Any, factory: Factory) -> None:
        """Register a factory for an identifier.

        The factory receives the container as its only argument so it can
        pull further dependencies with ``get``. Registration is append-only.

        Args:
            identifier: Identifier or class to register.
            factory: Callable invoked with the container on every ``get``.

        Raises:
            DepWireDuplicateRegistrationError: If the identifier already has a
                factory, including one autowired by an earlier ``get``/``has``.
            TypeError: If ``factory`` is not callable.

        Examples:
            .. code-block:: python

                container.set("app.Clock", lambda c: FrozenClock(at=EPOCH))

        """
        if not callable(factory):
            msg = f"Factory for '{identifier}' must be callable, got {type(factory).__name__}."
            raise TypeError(msg)
        self._registry.register(self._identifier(identifier), factory)

    def try_get(self, identifier: Any) -> ResolutionOutcome:
        """Build an instance and report the outcome as a value.

        Returns:
            ``Resolved`` with the instance, ``NotFound`` when no factory can be
            found, or ``InvocationFailed`` when the factory raised.

        """
        key = self._identifier(identifier)
        try:
            return Resolved(key, self.get(key))
        except DepWireNotFoundError as error:
            return NotFound(key, error)
        except DepWireInvocationFailedError as error:
            return InvocationFailed(key, error)

    def _identifier(self, value: Any) -> str:
        key = normalize_identifier(value)
        if is_runtime_class(value) and isinstance(self._metadata, TypeRecorder):
            self._metadata.record(value)
        return key


__all__ = ["Container", "ContainerProtocol"]
