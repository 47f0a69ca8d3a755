from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from depwire._internal.registry import Factory, FactoryRegistry
from depwire._internal.resolution_stack import ResolutionStack
from depwire.exceptions import (
    DepWireAutowireFailedError,
    DepWireInaccessibleConstructorError,
    DepWireNotInstantiableError,
    DepWireUnresolvableParameterError,
)
from depwire.metadata import (
    ConstructorVisibility,
    InstanceBuilder,
    ParameterDescriptor,
    TypeMetadataProvider,
)

if TYPE_CHECKING:
    from depwire._internal.container import Container

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FactorySource:
    """Argument produced by invoking a dependency's factory."""

    identifier: str
    factory: Factory

    def evaluate(self, container: Container) -> Any:
        return self.factory(container)


@dataclass(frozen=True, slots=True)
class LiteralSource:
    """Argument taken from a declared default, passed through unchanged."""

    value: Any

    def evaluate(self, container: Container) -> Any:
        return self.value


ParameterSource = FactorySource | LiteralSource


@dataclass(frozen=True, slots=True)
class AutowiredFactory:
    """Factory discovered by autowiring.

    Calling it evaluates every parameter source in declared order and hands
    the arguments to the instance builder together with the target type.
    """

    identifier: str
    target: str
    sources: tuple[ParameterSource, ...]
    builder: InstanceBuilder

    def __call__(self, container: Container) -> Any:
        args = [source.evaluate(container) for source in self.sources]
        return self.builder.build(self.target, args)


class Autowirer:
    """Turn identifiers into factories by inspecting type metadata.

    ``resolve`` returns the cached factory when there is one. Otherwise it
    discovers one: it walks constructor parameters, resolves each dependency
    recursively, and caches the new factory under the requested identifier.
    """

    __slots__ = ("_builder", "_metadata", "_registry")

    def __init__(
        self,
        registry: FactoryRegistry,
        metadata_provider: TypeMetadataProvider,
        instance_builder: InstanceBuilder,
    ) -> None:
        self._registry = registry
        self._metadata = metadata_provider
        self._builder = instance_builder

    def resolve(self, identifier: str) -> Factory:
        """Return the factory for an identifier, autowiring it when needed.

        Args:
            identifier: Identifier to resolve.

        Raises:
            DepWireAutowireFailedError: If discovery fails anywhere in the
                dependency graph. The underlying error is chained as
                ``__cause__``.

        """
        factory = self._registry.get(identifier)
        if factory is not None:
            return factory

        target = self._registry.target_for(identifier)
        stack = ResolutionStack()
        try:
            return self._autowire(identifier, stack)
        except Exception as error:
            stack.clear()
            logger.debug("Autowiring %s (target %s) failed: %s", identifier, target, error)
            raise DepWireAutowireFailedError(identifier, target, error) from error

    def _autowire(self, identifier: str, stack: ResolutionStack) -> Factory:
        factory = self._registry.get(identifier)
        if factory is not None:
            return factory

        target = self._registry.target_for(identifier)
        stack.push(identifier, target)

        descriptor = self._metadata.describe(target)
        if not descriptor.is_instantiable:
            raise DepWireNotInstantiableError(target)

        sources: tuple[ParameterSource, ...] = ()
        if descriptor.has_constructor:
            if descriptor.visibility is not ConstructorVisibility.PUBLIC:
                raise DepWireInaccessibleConstructorError(target)
            sources = self._parameter_sources(identifier, descriptor.parameters, stack)

        stack.pop(identifier)

        autowired = AutowiredFactory(
            identifier=identifier,
            target=target,
            sources=sources,
            builder=self._builder,
        )
        logger.debug(
            "Autowired %s as %s with %d parameter(s)",
            identifier,
            target,
            len(sources),
        )
        return self._registry.store(identifier, autowired)

    def _parameter_sources(
        self,
        identifier: str,
        parameters: Sequence[ParameterDescriptor],
        stack: ResolutionStack,
    ) -> tuple[ParameterSource, ...]:
        sources: list[ParameterSource] = []
        for position, parameter in enumerate(parameters):
            depends_on = parameter.depends_on
            if depends_on is not None and not self._registry.is_manual(depends_on):
                sources.append(FactorySource(depends_on, self._autowire(depends_on, stack)))
            elif parameter.has_default:
                sources.append(LiteralSource(parameter.default))
            else:
                raise DepWireUnresolvableParameterError(identifier, position, parameter.name)
        return tuple(sources)


__all__ = ["AutowiredFactory", "Autowirer", "FactorySource", "LiteralSource"]
